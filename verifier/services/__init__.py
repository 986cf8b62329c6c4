"""Verifier business logic services."""

from verifier.services.breach_verifier import BreachVerifier
from verifier.services.password_policy import (
    PasswordPolicyEvaluator,
    calculate_password_strength,
    get_password_strength_label,
)

__all__ = [
    "BreachVerifier",
    "PasswordPolicyEvaluator",
    "calculate_password_strength",
    "get_password_strength_label",
]

"""Password policy evaluation and strength scoring."""

import logging
import re
from typing import Iterable, Iterator, Optional
from shared.config.common_passwords import COMMON_PASSWORDS_FALLBACK
from shared.domain.consts import StrengthLabel, ValidationErrorType
from shared.domain.models import (
    DEFAULT_PASSWORD_REQUIREMENTS,
    PasswordRequirements,
    PasswordValidationError,
)
from verifier.services.breach_verifier import BreachVerifier

logger = logging.getLogger(__name__)

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"[^a-zA-Z0-9]")
_REPEATS = re.compile(r"(.)\1{2,}")
_SEQUENCE = re.compile(r"(abc|bcd|cde|123|234|345)", re.IGNORECASE)

# Strength thresholds, lowest first: score below threshold -> label
_STRENGTH_BUCKETS = (
    (30, StrengthLabel.WEAK),
    (50, StrengthLabel.FAIR),
    (70, StrengthLabel.GOOD),
    (90, StrengthLabel.STRONG),
)


def calculate_password_strength(
    password: str,
    common_passwords: Optional[Iterable[str]] = None,
) -> int:
    """
    Calculate password strength score (0-100).

    - Length: 2 points per character, max 30
    - Variety: 10 each for lowercase, uppercase, digit, special (max 40)
    - Complexity: 10 each for no 3+ repeated run, no short sequence,
      and not being a common password (max 30)

    Args:
        password: Password to score
        common_passwords: Normalized common list; built-in list if None

    Returns:
        Score from 0 (weakest) to 100 (strongest)
    """
    score = min(30, len(password) * 2)

    for pattern in (_LOWERCASE, _UPPERCASE, _DIGIT, _SPECIAL):
        if pattern.search(password):
            score += 10

    if not _REPEATS.search(password):
        score += 10
    if not _SEQUENCE.search(password):
        score += 10

    common = COMMON_PASSWORDS_FALLBACK if common_passwords is None else common_passwords
    if password.lower() not in common:
        score += 10

    return min(100, score)


def get_password_strength_label(score: int) -> StrengthLabel:
    """Bucket a strength score at 30/50/70/90."""
    for threshold, label in _STRENGTH_BUCKETS:
        if score < threshold:
            return label
    return StrengthLabel.VERY_STRONG


class PasswordPolicyEvaluator:
    """
    Accept/reject decisions for candidate passwords.

    Rules are checked in a fixed order and validate() stops at the first
    violation; the breach check runs last so no lookup happens for
    passwords that already fail a local rule.
    """

    def __init__(
        self,
        verifier: BreachVerifier,
        requirements: PasswordRequirements = DEFAULT_PASSWORD_REQUIREMENTS,
    ) -> None:
        self.verifier = verifier
        self.requirements = requirements

    async def validate(
        self,
        password: str,
        requirements: Optional[PasswordRequirements] = None,
        username: Optional[str] = None,
    ) -> Optional[PasswordValidationError]:
        """
        Validate password against requirements and breach data.

        Returns:
            None if the password is accepted, otherwise the first violation.
        """
        requirements = requirements or self.requirements

        violation = next(self._iter_rule_violations(password, requirements, username), None)
        if violation is not None:
            return violation

        outcome = await self.verifier.check(password)
        if outcome.compromised:
            return PasswordValidationError(
                type=ValidationErrorType.COMMON_PASSWORD,
                source=outcome.source,
                occurrences=outcome.occurrences,
            )

        if outcome.warning:
            logger.warning(f"Password breach check warning: {outcome.warning}")

        return None

    def find_rule_violations(
        self,
        password: str,
        requirements: Optional[PasswordRequirements] = None,
        username: Optional[str] = None,
    ) -> list[PasswordValidationError]:
        """Return every local rule violation (no breach lookup), in check order."""
        return list(self._iter_rule_violations(password, requirements or self.requirements, username))

    def _iter_rule_violations(
        self,
        password: str,
        requirements: PasswordRequirements,
        username: Optional[str],
    ) -> Iterator[PasswordValidationError]:
        length = len(password)
        if length < requirements.min_length:
            yield PasswordValidationError(
                type=ValidationErrorType.TOO_SHORT,
                min_length=requirements.min_length,
                actual_length=length,
            )
        if length > requirements.max_length:
            yield PasswordValidationError(
                type=ValidationErrorType.TOO_LONG,
                max_length=requirements.max_length,
                actual_length=length,
            )
        if requirements.require_uppercase and not _UPPERCASE.search(password):
            yield PasswordValidationError(type=ValidationErrorType.MISSING_UPPERCASE)
        if requirements.require_lowercase and not _LOWERCASE.search(password):
            yield PasswordValidationError(type=ValidationErrorType.MISSING_LOWERCASE)
        if requirements.require_numbers and not _DIGIT.search(password):
            yield PasswordValidationError(type=ValidationErrorType.MISSING_NUMBERS)
        if requirements.require_special_chars:
            special_count = len(_SPECIAL.findall(password))
            if special_count < requirements.min_special_chars:
                yield PasswordValidationError(
                    type=ValidationErrorType.MISSING_SPECIAL_CHARS,
                    required=requirements.min_special_chars,
                )
        if username and username.lower() in password.lower():
            yield PasswordValidationError(type=ValidationErrorType.CONTAINS_USERNAME)

    def calculate_password_strength(self, password: str) -> int:
        """
        Score password using the loaded common list.

        Uses the built-in list until preload_common_passwords() (or any
        breach check) has loaded the configured one.
        """
        return calculate_password_strength(password, self.verifier.local_source.peek())

    async def preload_common_passwords(self) -> None:
        """Load the common list so strength scoring uses it. Call during startup."""
        await self.verifier.local_source.get()

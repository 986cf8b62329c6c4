"""Verifier infrastructure layer."""

from verifier.infrastructure.cache import RangeCache
from verifier.infrastructure.clock import Clock, VirtualClock
from verifier.infrastructure.common_passwords import LocalCommonPasswordSource
from verifier.infrastructure.range_client import RangeQueryClient

__all__ = [
    "RangeCache",
    "Clock",
    "VirtualClock",
    "LocalCommonPasswordSource",
    "RangeQueryClient",
]

"""Pluggable DTO validation keyed by DTO type."""

from .registry import ValidationResult, Validator, ValidatorRegistry, from_pydantic
from .validators import WRITE_DTOS, build_validators, default_validators

__all__ = [
    "ValidationResult",
    "Validator",
    "ValidatorRegistry",
    "from_pydantic",
    "WRITE_DTOS",
    "build_validators",
    "default_validators",
]

"""Validator abstraction and the per-DTO-type registry.

A Validator re-checks an instance against a pydantic schema and reports
every failing field as a FieldError, so a result carries at most one error
per field.  DTOs built through model_validate are already valid; the
registry catches values that bypassed validation (model_construct, mutated
copies) and gives callers one structured result type.

ValidatorRegistry maps a DTO type to its validator.  Types without a
registered validator are considered valid.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from coffee_express.domain.errors import FieldError, ValidationFailed

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    errors: list[FieldError] = []

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def raise_if_invalid(self) -> None:
        if self.errors:
            raise ValidationFailed(self.errors)


class Validator(Generic[T]):
    """Validates instances against the pydantic schema of T."""

    def __init__(self, schema: type[T]) -> None:
        self.schema = schema
        self._adapter: TypeAdapter[T] = TypeAdapter(schema)

    def validate(self, instance: Any) -> ValidationResult:
        try:
            self._adapter.validate_python(_field_values(instance))
        except ValidationError as exc:
            return ValidationResult(errors=from_pydantic(exc))
        return ValidationResult()


class ValidatorRegistry:
    def __init__(self, validators: Mapping[type, Validator] | None = None) -> None:
        self._validators: dict[type, Validator] = dict(validators or {})

    def register(self, dto_type: type, validator: Validator | None = None) -> ValidatorRegistry:
        """Register a validator for dto_type (default: the DTO's own schema)."""
        self._validators[dto_type] = validator or Validator(dto_type)
        return self

    def get(self, dto_type: type) -> Validator | None:
        return self._validators.get(dto_type)

    def validate(self, instance: Any) -> ValidationResult:
        validator = self._validators.get(type(instance))
        if validator is None:
            return ValidationResult()
        return validator.validate(instance)

    def parse(self, dto_type: type[M], data: Mapping[str, Any]) -> M:
        """Build a DTO from raw input and validate it.

        Pydantic type and constraint errors surface as ValidationFailed with
        field-level errors.
        """
        try:
            instance = dto_type.model_validate(data)
        except ValidationError as exc:
            raise ValidationFailed(from_pydantic(exc)) from exc
        self.validate(instance).raise_if_invalid()
        return instance


def from_pydantic(exc: ValidationError) -> list[FieldError]:
    return [
        FieldError(
            field=".".join(str(part) for part in error["loc"]),
            message=error["msg"],
            attempted_value=error.get("input"),
        )
        for error in exc.errors()
    ]


def _field_values(instance: Any) -> Any:
    # A model instance of the schema's own type is not re-validated by
    # pydantic, so hand it over as plain field values.
    if isinstance(instance, BaseModel):
        return dict(instance)
    if hasattr(instance, "__dict__"):
        return vars(instance)
    return instance

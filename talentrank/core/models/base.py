"""Base Pydantic schemas and helpers for engine models."""

from datetime import datetime, timezone
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ..errors import InvalidInputError

TModel = TypeVar("TModel", bound=BaseModel)


# =============================================================================
# Pydantic Base Classes
# =============================================================================


class EngineBaseModel(BaseModel):
    """Base Pydantic model for all engine schemas with common configuration."""

    model_config = ConfigDict(
        # Accept camelCase keys from the web application
        alias_generator=to_camel,
        populate_by_name=True,
        # Validate on assignment
        validate_assignment=True,
        # Use enum values instead of enum members
        use_enum_values=True,
        str_strip_whitespace=True,
        # Stored records carry extra columns the engine does not use
        extra="ignore",
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Dump to the camelCase JSON shape used across the API boundary."""
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Utility Functions
# =============================================================================


def coerce_model(model_cls: type[TModel], value: Any, label: str) -> TModel:
    """Validate a model instance or mapping into ``model_cls``.

    Args:
        model_cls: Target Pydantic model class
        value: Model instance, mapping, or None
        label: Name used in error messages (e.g., "job", "candidate")

    Returns:
        Validated model instance

    Raises:
        InvalidInputError: If value is missing or fails validation
    """
    if value is None:
        raise InvalidInputError(f"{label} is required")
    if isinstance(value, model_cls):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump()
    if not isinstance(value, dict):
        raise InvalidInputError(
            f"{label} must be a mapping or {model_cls.__name__}, got {type(value).__name__}"
        )
    try:
        return model_cls.model_validate(value)
    except ValidationError as e:
        raise InvalidInputError(
            f"Invalid {label}: {e.error_count()} validation error(s)",
            details=e.errors(include_url=False),
        ) from e


def utc_now() -> datetime:
    """Get current UTC datetime.

    Returns:
        Current datetime in UTC timezone
    """
    return datetime.now(timezone.utc)

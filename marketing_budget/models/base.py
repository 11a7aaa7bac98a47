"""Base model for all data models in the marketing budget engine.

This module provides a base Pydantic model with common configuration,
plus the ``Money`` annotated type shared by every priced field.
"""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def to_decimal(v: Any) -> Any:
    """Convert numeric input to Decimal for precision.

    Floats go through ``str`` so that ``350.1`` becomes ``Decimal("350.1")``
    rather than its binary approximation. ``None`` passes through so optional
    price fields keep working.

    Args:
        v: The value to convert

    Returns:
        The value as a Decimal (or None)

    Raises:
        ValueError: If the value cannot be converted to Decimal
    """
    if v is None or isinstance(v, Decimal):
        return v
    if isinstance(v, bool):
        raise ValueError(f"Cannot convert {v!r} to Decimal")
    try:
        return Decimal(str(v))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise ValueError(f"Cannot convert {v!r} to Decimal: {e}")


# GST-inclusive monetary amount. Serialised as a JSON number so export files
# stay compatible with the browser application.
Money = Annotated[
    Decimal,
    BeforeValidator(to_decimal),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking, also on assignment
    - camelCase aliases matching the portable JSON document format
    - Population by either the Python field name or the alias

    Example:
        >>> class Vendor(BaseDataModel):
        ...     name: str
        ...     is_active: int = 1
        >>> vendor = Vendor(name="Mountford Media")
        >>> vendor.model_dump(by_alias=True)
        {'name': 'Mountford Media', 'isActive': 1}
    """

    model_config = ConfigDict(
        # Validate on assignment to catch errors early
        validate_assignment=True,
        # Documents written by the browser application use camelCase keys
        alias_generator=to_camel,
        populate_by_name=True,
        # Enum members stay enums in Python, values in JSON
        use_enum_values=False,
        # Unknown keys from newer export versions are ignored
        extra="ignore",
        frozen=False,
    )

    def to_document(self) -> dict:
        """Serialise to the portable JSON-compatible dictionary form."""
        return self.model_dump(mode="json", by_alias=True)

"""Filter validation utilities."""

from typing import Any, TypeVar

from pydantic import ValidationError

from core.filters.paginable import OffsetFilters
from core.models.errors import FilterError

FiltersT = TypeVar("FiltersT", bound=OffsetFilters)


def build_filters(
    base: FiltersT,
    overrides: dict[str, Any],
) -> FiltersT:
    """Apply overrides on top of a filter preset.

    `None` overrides are ignored so unset CLI options keep the preset value.

    Args:
        base: Preset filters (left untouched)
        overrides: Field values keyed by python field name

    Returns:
        A new, validated filters instance

    Raises:
        FilterError: If any override is invalid, with one
            `{"field", "message"}` entry per rejected field
    """
    data = base.model_dump()
    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return type(base).model_validate(data)
    except ValidationError as exc:
        raise FilterError(
            message="Invalid filter parameters",
            details={
                "errors": [
                    {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
                    for err in exc.errors()
                ]
            },
        ) from exc

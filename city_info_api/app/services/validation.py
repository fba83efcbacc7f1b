"""
Payload validation for points of interest.

Validation never stops at the first problem: the name/description rule
and the schema constraints are all checked and reported together as a
mapping of field name to messages.
"""

from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from ..schemas.point_of_interest import PointOfInterestForUpdate

DESCRIPTION_EQUALS_NAME = "The provided description should be different from the name."

# Friendlier wording for a few pydantic error types, keyed by (field, type).
_MESSAGES = {
    ("name", "missing"): "You should provide a name value.",
    ("name", "string_too_short"): "You should provide a name value.",
}

FieldErrors = Dict[str, List[str]]
ModelT = TypeVar("ModelT", bound=BaseModel)


def add_error(errors: FieldErrors, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def check_description_differs(data: Dict[str, Any], errors: FieldErrors) -> None:
    """Register an error on ``description`` when it repeats the name."""
    name = data.get("name")
    description = data.get("description")
    if name is not None and description is not None and name == description:
        add_error(errors, "description", DESCRIPTION_EQUALS_NAME)


def validate_point_of_interest(
    data: Any,
    schema: Type[ModelT] = PointOfInterestForUpdate,
) -> Tuple[Optional[ModelT], FieldErrors]:
    """Validate a point of interest payload against ``schema``.

    Returns the parsed model (``None`` when schema validation failed)
    together with every error found.  A non‑empty error mapping means
    the payload must be rejected even if a model was parsed.
    """
    errors: FieldErrors = {}
    if isinstance(data, dict):
        check_description_differs(data, errors)

    model: Optional[ModelT] = None
    try:
        model = schema.model_validate(data)
    except SchemaValidationError as exc:
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "body"
            message = _MESSAGES.get((field, error["type"]), error["msg"])
            add_error(errors, field, message)
    return model, errors

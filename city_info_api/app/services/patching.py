"""
A JSON Patch (RFC 6902) interpreter for the point of interest update shape.

The target of a PATCH request is always the flat document
``{"name": ..., "description": ...}``, so paths are limited to
``/name`` and ``/description`` and values to strings or ``null``.
Because neither field can disappear from the document, ``remove`` sets
a field to ``null`` and ``add`` behaves like ``replace``.

Operations are applied in order to a copy of the target.  Problems are
collected under the ``patch`` key instead of aborting, so the caller
can report every broken operation at once.
"""

from typing import Any, Dict, List, Optional, Tuple

PATCH_FIELDS = ("name", "description")
PATCH_ERROR_KEY = "patch"

Document = Dict[str, Optional[str]]


def _resolve(path: Any) -> Optional[str]:
    """Map a JSON pointer to one of ``PATCH_FIELDS``, or ``None``."""
    if not isinstance(path, str) or not path.startswith("/"):
        return None
    field = path[1:].lower()
    return field if field in PATCH_FIELDS else None


def apply_patch(target: Document, operations: List[Any]) -> Tuple[Document, List[str]]:
    """Apply ``operations`` to a copy of ``target``.

    Returns the patched document and the list of error messages.  When
    the list is non‑empty the patched document must be discarded.
    """
    patched: Document = dict(target)
    errors: List[str] = []

    for index, operation in enumerate(operations):
        if not isinstance(operation, dict):
            errors.append(f"Operation {index} must be a JSON object.")
            continue

        op = str(operation.get("op", "")).lower()
        path = operation.get("path")
        field = _resolve(path)
        if field is None:
            errors.append(f"The target location specified by path '{path}' was not found.")
            continue

        if op in {"add", "replace", "test"}:
            if "value" not in operation:
                errors.append(f"The 'value' property is required for '{op}' operations.")
                continue
            value = operation["value"]
            if value is not None and not isinstance(value, str):
                errors.append(f"The value '{value}' is invalid for target location '{path}'.")
                continue
            if op == "test":
                if patched[field] != value:
                    errors.append(
                        f"The current value '{patched[field]}' at path '{path}' "
                        f"is not equal to the test value '{value}'."
                    )
                continue
            patched[field] = value
        elif op == "remove":
            patched[field] = None
        elif op in {"copy", "move"}:
            source = _resolve(operation.get("from"))
            if source is None:
                errors.append(f"The source location specified by from '{operation.get('from')}' was not found.")
                continue
            value = patched[source]
            if op == "move" and source != field:
                patched[source] = None
            patched[field] = value
        else:
            errors.append(f"Invalid JSON Patch operation '{operation.get('op')}'.")

    return patched, errors

"""
GameShelf Backend — Required-Field Validation
===============================================

What:  Rule tables listing which payload fields each operation requires,
       and the check that turns missing or non-text fields into a
       GameValidationError.
Why:   The 422 body and its `Path '<field>' is required.` messages are part
       of the public contract; building them here keeps that shape independent
       of whatever the ORM or driver would report.
Who:   Called by GameService before any database work.

A field is missing when it is absent, null, or a blank string.
String fields accept JSON strings and numbers; objects, arrays and booleans
fail with a CastError entry instead of being stored as their Python repr.
"""

import json
from typing import Any, Dict, Mapping, Sequence

from app.exceptions import GameValidationError

# Ordered: errors are reported in this order
CREATE_RULES: Sequence[str] = ("title", "genre")
UPDATE_RULES: Sequence[str] = ("id", "title")

# Every payload field stored (or looked up) as text
STRING_FIELDS: Sequence[str] = ("id", "title", "genre", "releaseDate")

REQUIRED_MESSAGE = "Path '{path}' is required."
CAST_MESSAGE = 'Cast to string failed for value {value} (type {type}) at path "{path}"'

_JSON_TYPE_NAMES = {dict: "Object", list: "Array", bool: "boolean"}


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_text(value: Any) -> bool:
    """JSON strings and numbers can be stored as text; bool is excluded."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def required_error(path: str) -> Dict[str, str]:
    """One ValidatorError entry for a missing field."""
    return {
        "message": REQUIRED_MESSAGE.format(path=path),
        "kind": "required",
        "path": path,
        "name": "ValidatorError",
    }


def cast_error(path: str, value: Any) -> Dict[str, str]:
    """One CastError entry for a value that is not text."""
    type_name = _JSON_TYPE_NAMES.get(type(value), type(value).__name__)
    return {
        "message": CAST_MESSAGE.format(
            value=json.dumps(value, default=str), type=type_name, path=path
        ),
        "kind": "string",
        "path": path,
        "name": "CastError",
    }


def as_payload(body: Any) -> Mapping[str, Any]:
    """
    Request body as a field mapping.

    A missing body or a JSON value that is not an object carries no fields,
    so the required-field check reports every required field.
    """
    if isinstance(body, Mapping):
        return body
    return {}


def validate_required(
    payload: Mapping[str, Any],
    rules: Sequence[str],
    model_name: str = "Game",
) -> None:
    """
    Check every field in `rules` for presence and every string field for a
    text value, then raise once with all the failures.

    Raises:
        GameValidationError: a required field is missing or a string field
                             holds an object, array or boolean
    """
    errors: Dict[str, Dict[str, str]] = {}
    for path in rules:
        if is_missing(payload.get(path)):
            errors[path] = required_error(path)

    for path in STRING_FIELDS:
        value = payload.get(path)
        if path not in errors and not is_missing(value) and not is_text(value):
            errors[path] = cast_error(path, value)

    if errors:
        raise GameValidationError(errors=errors, model_name=model_name)

"""Helpers for turning pydantic validation failures into field errors.

Views re-raise these as DRF ``ValidationError`` so the standardized error
envelope carries one entry per offending field (``attr``).
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import ValidationError as PydanticValidationError

NON_FIELD_ERRORS = "non_field_errors"

_VALUE_ERROR_PREFIX = "Value error, "


def field_errors(exc: PydanticValidationError) -> Dict[str, List[str]]:
    """Group pydantic error messages by the field they refer to."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        location = error.get("loc") or ()
        field = ".".join(str(part) for part in location) or NON_FIELD_ERRORS
        message = str(error.get("msg", "Invalid value."))
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        errors.setdefault(field, []).append(message)
    return errors

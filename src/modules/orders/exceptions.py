"""Order domain exceptions.

Raised by the financial core and the Service Layer when business rules are
violated.  The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import ValidationError as PydanticValidationError

from modules.core.errors import field_errors


class OrderNotFound(Exception):
    """The requested order does not exist."""


class OrderValidationError(Exception):
    """A draft order was rejected; nothing is persisted.

    ``errors`` maps each offending field to its messages so the caller can
    redisplay the draft with the error attached to the right input.
    """

    def __init__(self, errors: Dict[str, List[str]]) -> None:
        self.errors = errors
        summary = "; ".join(
            f"{field}: {' '.join(messages)}" for field, messages in errors.items()
        )
        super().__init__(summary or "Invalid order.")

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> OrderValidationError:
        return cls(field_errors(exc))


class NumericCoercionWarning(UserWarning):
    """An unparsable or negative monetary amount was coerced to zero."""

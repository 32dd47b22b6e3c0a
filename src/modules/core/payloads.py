"""Request payload helpers shared by the API views."""

from __future__ import annotations

from typing import Any, Dict

from django.http import QueryDict
from rest_framework.request import Request


def request_payload(request: Request) -> Dict[str, Any]:
    """Return the request body as a plain dict.

    Form-encoded bodies arrive as a ``QueryDict``; only the last value of
    each key is kept, which is what a single-valued form field sends.
    """
    data = request.data
    if isinstance(data, QueryDict):
        return data.dict()
    if isinstance(data, dict):
        return dict(data)
    return {}

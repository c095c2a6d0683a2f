"""Turns Delivery API error bodies into one-line failure messages.

Two shapes come back from the service:

- request validation (422): ``{"detail": [{"loc": [...], "msg": "..."}]}``
- delivery errors: ``{"error": {"field": ["msg"]}, "kind": "Occupied"}``
"""

from __future__ import annotations

import json
from typing import Any

MAX_DETAIL = 300


def error_kind(response: Any) -> str | None:
    """The ``kind`` of a delivery error, or None for any other body."""
    body = _json_body(response)
    if isinstance(body, dict):
        return body.get("kind")
    return None


def extract_error_detail(response: Any) -> str:
    body = _json_body(response)
    if body is None:
        return (getattr(response, "text", "") or "")[:MAX_DETAIL] or "(empty response body)"

    if isinstance(body, dict) and isinstance(body.get("detail"), list):
        return " | ".join(_validation_item(item) for item in body["detail"])

    if isinstance(body, dict) and "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            detail = "; ".join(
                f"{field}: {', '.join(map(str, msgs)) if isinstance(msgs, list) else msgs}"
                for field, msgs in error.items()
            )
        else:
            detail = str(error)
        return f"[{body['kind']}] {detail}" if body.get("kind") else detail

    return json.dumps(body)[:MAX_DETAIL]


def _json_body(response: Any) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _validation_item(item: dict) -> str:
    loc = ".".join(str(part) for part in item.get("loc", []) if part != "body")
    msg = item.get("msg", str(item))
    return f"{loc}: {msg}" if loc else msg

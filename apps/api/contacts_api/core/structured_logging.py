"""Structured logging helpers (PII-safe)."""

from typing import Any


def build_log_context(
    *,
    user_id: int | str | None = None,
    account_id: int | str | None = None,
    contact_id: int | str | None = None,
    request_id: str | None = None,
    route: str | None = None,
    method: str | None = None,
) -> dict[str, Any]:
    """Return a PII-safe log context dict (ids only, never names or emails)."""
    context: dict[str, Any] = {}
    if user_id:
        context["user_id"] = user_id
    if account_id:
        context["account_id"] = account_id
    if contact_id:
        context["contact_id"] = contact_id
    if request_id:
        context["request_id"] = request_id
    if route:
        context["route"] = route
    if method:
        context["method"] = method
    return context

from __future__ import annotations

from typing import Any

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from menu_api.core.config import settings
from menu_api.core.logging import current_request_id


def before_send(event: dict[str, Any], hint: dict[str, Any]) -> dict[str, Any] | None:
    """Tag events with the request id and drop request bodies."""
    request_id = current_request_id()
    if request_id:
        event.setdefault("tags", {})["request_id"] = request_id

    request = event.get("request")
    if isinstance(request, dict):
        request.pop("data", None)
        request.pop("cookies", None)

    return event


def capture_fault(exc: BaseException) -> None:
    # No-op until init_sentry() has run with a DSN
    sentry_sdk.capture_exception(exc)


def init_sentry() -> bool:
    """Start Sentry before the app is built. Returns False without a DSN."""
    if not settings.sentry_dsn:
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment or settings.environment,
        integrations=[
            StarletteIntegration(transaction_style="url"),
            FastApiIntegration(transaction_style="url"),
        ],
        traces_sample_rate=settings.sentry_traces_sample_rate,
        max_request_body_size="never",
        send_default_pii=False,
        before_send=before_send,
    )
    sentry_sdk.set_tag("service", settings.app_name)
    return True

"""httpx wrapper.

Why a wrapper:
- Standardizes timeout and headers for the three providers.
- Eases testing: respx can mock every client built here.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.errors import ProviderHTTPError, TransportError


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the project defaults.

    No retries are configured: every provider call is a single attempt.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


def describe_transport_error(exc: httpx.HTTPError) -> str:
    """Short human-readable text for an httpx failure."""

    detail = str(exc).strip()
    return f"{type(exc).__name__}: {detail}" if detail else type(exc).__name__


def raise_for_provider_status(response: httpx.Response) -> None:
    """Translate a non-2xx answer into `ProviderHTTPError`."""

    if response.is_success:
        return
    reason = response.reason_phrase or "HTTP error"
    raise ProviderHTTPError(response.status_code, f"{reason} ({response.request.url})")


def json_object(response: httpx.Response) -> dict:
    """Body as a JSON object, or `TransportError` when it is not one."""

    try:
        data = response.json()
    except ValueError as exc:
        raise TransportError(f"invalid JSON from {response.request.url}: {exc}") from exc
    if not isinstance(data, dict):
        raise TransportError(f"unexpected JSON payload from {response.request.url}")
    return data

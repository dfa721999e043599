"""Error taxonomy.

- `TransportError`: the provider could not be reached or answered badly.
- `NotFound`: the provider answered, but not with what we asked for.
- `TaskFileError`: the local task file is missing or unreadable (fatal).

The first two are always recovered by the command actions; only
`TaskFileError` reaches the CLI.
"""

from __future__ import annotations


class LiriError(Exception):
    """Base class for every error raised by this project."""


class TransportError(LiriError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ProviderHTTPError(TransportError):
    """Non-2xx answer from a provider."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(detail)
        self.status_code = status_code


class MissingCredentials(TransportError):
    def __init__(self, provider: str) -> None:
        super().__init__(f"missing {provider} credentials")
        self.provider = provider


class NotFound(LiriError):
    pass


class RatingNotFound(NotFound):
    def __init__(self, source: str) -> None:
        super().__init__(f"rating source not found: {source}")
        self.source = source


class TaskFileError(LiriError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot read task file {path}: {reason}")
        self.path = path
        self.reason = reason

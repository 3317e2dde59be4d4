from __future__ import annotations


class SourceError(RuntimeError):
    """Base exception for data-source failures."""


class TransportError(SourceError):
    """HTTP/network/transport layer failures (timeouts, connection errors, non-2xx, etc.)."""


class RateLimitedError(TransportError):
    """Source throttled the request (e.g., HTTP 429)."""


class UpstreamResponseError(TransportError):
    """Source returned a well-formed response flagging an application-level error."""


class EmptyResultError(SourceError):
    """Well-formed response with zero usable records."""


class ConfigError(SourceError):
    """Source cannot serve this request (missing credential, unmapped league, unsupported kind)."""


class ParseError(SourceError):
    """Payload was not JSON or did not have the expected shape."""

    def __init__(self, message: str, context: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} | context={self.context}"


class ResolutionError(RuntimeError):
    """Every source failed, including the curated fallback. Always a bug."""

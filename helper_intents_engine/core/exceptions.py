"""Core exception types shared across layers."""


class ResourceNotFoundError(LookupError):
    """Raised when a locale string table or one of its keys is missing."""

    def __init__(self, locale: str, key: str | None = None) -> None:
        self.locale = locale
        self.key = key
        if key is None:
            message = f"no string table for locale {locale!r}"
        else:
            message = f"missing string {key!r} for locale {locale!r}"
        super().__init__(message)


class ResponseBuildError(ValueError):
    """Raised when a response is assembled in a way the platform rejects."""


class WebhookPayloadError(ValueError):
    """Raised when a webhook envelope cannot be turned into a request."""


__all__ = [
    "ResourceNotFoundError",
    "ResponseBuildError",
    "WebhookPayloadError",
]

"""star-history exception classes."""

from typing import Any


class StarHistoryError(Exception):
    """Base exception for all star-history errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(StarHistoryError):
    """Raised when client configuration is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class InvalidRepositoryError(StarHistoryError):
    """Raised when a repository identifier is not of the form "owner/name"."""

    def __init__(self, repo: str) -> None:
        super().__init__(
            "INVALID_REPOSITORY",
            f"Repository must look like 'owner/name', got {repo!r}",
        )
        self.repo = repo


class EmptyRepositoryError(StarHistoryError):
    """Raised when a repository has no stargazers to build a curve from."""

    def __init__(self, repo: str) -> None:
        super().__init__("EMPTY_REPOSITORY", f"{repo} has no stargazers")
        self.repo = repo


class UpstreamError(StarHistoryError):
    """Raised when the GitHub API answers with a non-2xx status."""

    def __init__(
        self,
        code: str,
        message: str,
        status: int | None = None,
        body: Any = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message)
        self.status = status
        self.body = body
        self.request_id = request_id


class AuthenticationError(UpstreamError):
    """Raised when the access token is rejected (401)."""

    pass


class AuthorizationError(UpstreamError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(UpstreamError):
    """Raised when the repository does not exist or is not visible (404)."""

    pass


class RateLimitedError(UpstreamError):
    """Raised when rate limited (429)."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        status: int | None = 429,
        body: Any = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, status, body, request_id)
        self.retry_after = retry_after


class ValidationError(UpstreamError):
    """Raised on other 4xx responses."""

    pass


class ServerError(UpstreamError):
    """Raised on server errors (5xx) and connection failures."""

    pass


class StatsPendingError(UpstreamError):
    """Raised when GitHub is still computing repository statistics (202)."""

    pass

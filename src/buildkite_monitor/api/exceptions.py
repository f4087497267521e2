class BuildkiteAPIError(Exception):
    """An error response from the Buildkite API, with the request URL and status."""

    def __init__(
        self, message: str, url: str | None = None, status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class RateLimitError(BuildkiteAPIError):
    def __init__(
        self,
        message: str = "Rate limit exceeded",
        url: str | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, url=url, status_code=429)
        self.retry_after = retry_after


class AuthenticationError(BuildkiteAPIError):
    pass


class NotFoundError(BuildkiteAPIError):
    pass


class NoBuildsError(NotFoundError):
    """The pipeline exists but has no builds matching the request."""

    def __init__(self, organization: str, pipeline: str, url: str | None = None) -> None:
        super().__init__(f"No builds found for {organization}/{pipeline}", url=url)
        self.organization = organization
        self.pipeline = pipeline

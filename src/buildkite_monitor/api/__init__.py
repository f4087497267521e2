from buildkite_monitor.api.base import BuildSource
from buildkite_monitor.api.client import BuildkiteClient
from buildkite_monitor.api.exceptions import (
    AuthenticationError,
    BuildkiteAPIError,
    NoBuildsError,
    NotFoundError,
    RateLimitError,
)
from buildkite_monitor.api.models import Build, Organization, Pipeline

__all__ = [
    "BuildSource",
    "BuildkiteClient",
    "Build",
    "Organization",
    "Pipeline",
    "BuildkiteAPIError",
    "RateLimitError",
    "AuthenticationError",
    "NotFoundError",
    "NoBuildsError",
]

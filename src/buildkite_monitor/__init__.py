__version__ = "0.1.0"

from buildkite_monitor.api import BuildkiteClient, BuildSource
from buildkite_monitor.config import BuildkiteSettings
from buildkite_monitor.core import BuildkiteBuilds, BuildState, classify
from buildkite_monitor.domain import (
    Change,
    ProjectEntry,
    ProjectError,
    ProjectList,
    ProjectStatus,
    ProjectStatusItem,
    Tag,
)

__all__ = [
    "__version__",
    "BuildkiteBuilds",
    "BuildkiteClient",
    "BuildkiteSettings",
    "BuildSource",
    "BuildState",
    "classify",
    "Change",
    "ProjectEntry",
    "ProjectError",
    "ProjectList",
    "ProjectStatus",
    "ProjectStatusItem",
    "Tag",
]

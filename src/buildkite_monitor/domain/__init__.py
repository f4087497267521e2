"""Domain models for the build status dashboard."""

from buildkite_monitor.domain.models import (
    CANCELED_TAG,
    NOT_BUILT_TAG,
    Change,
    ProjectEntry,
    ProjectError,
    ProjectList,
    ProjectStatus,
    ProjectStatusItem,
    Tag,
    parse_project_id,
)

__all__ = [
    "CANCELED_TAG",
    "NOT_BUILT_TAG",
    "Change",
    "ProjectEntry",
    "ProjectError",
    "ProjectList",
    "ProjectStatus",
    "ProjectStatusItem",
    "Tag",
    "parse_project_id",
]

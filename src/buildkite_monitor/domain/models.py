"""View models handed to the status dashboard."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Tag:
    """A short label shown on a project tile."""

    name: str
    type: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "type": self.type}


CANCELED_TAG = Tag(name="Canceled", type="warning")
NOT_BUILT_TAG = Tag(name="Not built", type="warning")


@dataclass(frozen=True, slots=True)
class Change:
    """The change that triggered a build: author and commit message."""

    name: str | None = None
    message: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {"name": self.name, "message": self.message}


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectEntry:
    """A selectable project, identified as ``org/pipeline``."""

    id: str
    name: str
    group: str
    is_disabled: bool = False

    def _identity(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "group": self.group,
            "isDisabled": self.is_disabled,
        }

    def to_dict(self) -> dict[str, Any]:
        return self._identity()


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectStatus(ProjectEntry):
    """Status of a project whose builds were fetched successfully."""

    web_url: str | None = None
    is_broken: bool = False
    is_running: bool = False
    is_waiting: bool = False
    tags: tuple[Tag, ...] = ()
    changes: tuple[Change, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._identity(),
            "webUrl": self.web_url,
            "isBroken": self.is_broken,
            "isRunning": self.is_running,
            "isWaiting": self.is_waiting,
            "tags": [tag.to_dict() for tag in self.tags],
            "changes": [change.to_dict() for change in self.changes],
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectError(ProjectEntry):
    """Status of a project whose builds could not be fetched.

    Carries the original exception; none of the build-derived fields exist.
    """

    error: Exception

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._identity(),
            "error": {"message": str(self.error), "type": type(self.error).__name__},
        }


ProjectStatusItem = ProjectStatus | ProjectError


@dataclass(frozen=True, slots=True)
class ProjectList:
    """Envelope for one poll result, in the order the projects were requested."""

    items: tuple[ProjectEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {"items": [item.to_dict() for item in self.items]}


def parse_project_id(project_id: str) -> tuple[str, str]:
    """Split ``org/pipeline`` into its organization and pipeline slugs."""
    organization, sep, pipeline = project_id.partition("/")
    if not sep or not organization or not pipeline:
        raise ValueError(f"Project id must look like 'org/pipeline', got {project_id!r}")
    return organization, pipeline

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Organization:
    slug: str
    name: str
    pipelines_url: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Organization":
        return cls(
            slug=data.get("slug", ""),
            name=data.get("name", ""),
            pipelines_url=data.get("pipelines_url", ""),
        )


@dataclass(frozen=True, slots=True)
class Pipeline:
    slug: str
    name: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Pipeline":
        return cls(slug=data.get("slug", ""), name=data.get("name", ""))


@dataclass(frozen=True, slots=True)
class Build:
    """The fields of a Buildkite build record that the dashboard consumes."""

    state: str | None = None
    web_url: str | None = None
    pipeline_name: str | None = None
    message: str | None = None
    creator_name: str | None = None
    # a creator may be present without a name
    has_creator: bool = False

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Build":
        pipeline = data.get("pipeline") or {}
        creator = data.get("creator")
        return cls(
            state=data.get("state"),
            web_url=data.get("web_url"),
            pipeline_name=pipeline.get("name"),
            message=data.get("message"),
            creator_name=(creator or {}).get("name"),
            has_creator=creator is not None,
        )

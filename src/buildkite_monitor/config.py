"""Dashboard settings, read from BUILDKITE_* environment variables or a .env file.

Examples
--------
::

    export BUILDKITE_TOKEN=bkua_...
    export BUILDKITE_PROJECTS=acme/web,acme/api
"""

from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class BuildkiteSettings(BaseSettings):
    """Credential and project selection for one dashboard."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BUILDKITE_",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    token: str
    # "org/pipeline" ids; comma-separated when read from the environment
    projects: Annotated[tuple[str, ...], NoDecode] = ()

    @field_validator("token")
    @classmethod
    def _token_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("token must not be empty")
        return value

    @field_validator("projects", mode="before")
    @classmethod
    def _split_projects(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(project.strip() for project in value.split(",") if project.strip())
        return value

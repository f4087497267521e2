from typing import Protocol, runtime_checkable

from buildkite_monitor.api.models import Build, Organization, Pipeline


@runtime_checkable
class BuildSource(Protocol):
    """Protocol for the raw Buildkite fetch operations.

    Every call receives the access token explicitly so a single source
    can serve dashboards configured with different credentials.
    """

    async def organizations(self, token: str) -> list[Organization]:
        ...

    async def pipelines(self, pipelines_url: str, token: str) -> list[Pipeline]:
        ...

    async def latest_build(self, organization: str, pipeline: str, token: str) -> Build:
        ...

    async def latest_finished_build(
        self, organization: str, pipeline: str, token: str
    ) -> Build:
        ...

import asyncio
import logging

from buildkite_monitor.api import Build, BuildSource, Organization
from buildkite_monitor.config import BuildkiteSettings
from buildkite_monitor.core.status import build_changes, classify, is_failed
from buildkite_monitor.domain import (
    ProjectEntry,
    ProjectError,
    ProjectList,
    ProjectStatus,
    ProjectStatusItem,
    parse_project_id,
)

logger = logging.getLogger(__name__)


class BuildkiteBuilds:
    """Turns raw Buildkite data into dashboard project lists.

    ``get_all`` lists every pipeline the token can see, for project
    selection. ``get_latest`` polls the configured projects; a failure
    fetching one project becomes a ProjectError in that project's slot and
    never affects the others.
    """

    def __init__(self, source: BuildSource) -> None:
        self._source = source

    async def get_all(self, settings: BuildkiteSettings) -> ProjectList:
        organizations = await self._source.organizations(settings.token)
        if not organizations:
            return ProjectList()

        # the first failing organization cancels the remaining fetches
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self._organization_entries(org, settings.token))
                    for org in organizations
                ]
        except ExceptionGroup as failures:
            raise failures.exceptions[0]

        entries = sorted(
            (entry for task in tasks for entry in task.result()),
            key=lambda entry: entry.name,
        )
        logger.info(
            "Discovered %d pipelines across %d organizations",
            len(entries),
            len(organizations),
        )
        return ProjectList(items=tuple(entries))

    async def _organization_entries(
        self, organization: Organization, token: str
    ) -> list[ProjectEntry]:
        pipelines = await self._source.pipelines(organization.pipelines_url, token)
        return [
            ProjectEntry(
                id=f"{organization.slug}/{pipeline.slug}",
                name=pipeline.name,
                group=organization.name,
            )
            for pipeline in pipelines
        ]

    async def get_latest(self, settings: BuildkiteSettings) -> ProjectList:
        items = await asyncio.gather(
            *(self._project_status(project_id, settings.token) for project_id in settings.projects)
        )
        return ProjectList(items=tuple(items))

    async def _project_status(self, project_id: str, token: str) -> ProjectStatusItem:
        try:
            organization, pipeline = parse_project_id(project_id)
        except ValueError as exc:
            logger.warning("Malformed project id %r", project_id)
            return ProjectError(id=project_id, name=project_id, group="", error=exc)

        try:
            latest = await self._source.latest_build(organization, pipeline, token)
            is_broken = await self._is_broken(latest, organization, pipeline, token)
        except Exception as exc:
            logger.warning("Failed to fetch builds for %s: %s", project_id, exc)
            return ProjectError(id=project_id, name=pipeline, group=organization, error=exc)

        classification = classify(latest.state)
        return ProjectStatus(
            id=project_id,
            name=latest.pipeline_name or pipeline,
            group=organization,
            web_url=latest.web_url,
            is_broken=is_broken,
            is_running=classification.is_running,
            is_waiting=classification.is_waiting,
            tags=classification.tags,
            changes=build_changes(latest),
        )

    async def _is_broken(
        self, latest: Build, organization: str, pipeline: str, token: str
    ) -> bool:
        if not classify(latest.state).needs_finished_build:
            return is_failed(latest)

        logger.debug(
            "Latest build of %s/%s is %s, checking last finished build",
            organization,
            pipeline,
            latest.state,
        )
        finished = await self._source.latest_finished_build(organization, pipeline, token)
        return is_failed(finished)

"""Classification of Buildkite build states into dashboard flags."""

from dataclasses import dataclass
from enum import StrEnum

from buildkite_monitor.api.models import Build
from buildkite_monitor.domain import CANCELED_TAG, NOT_BUILT_TAG, Change, Tag


class BuildState(StrEnum):
    RUNNING = "running"
    SCHEDULED = "scheduled"
    PASSED = "passed"
    FAILED = "failed"
    BLOCKED = "blocked"
    CANCELED = "canceled"
    CANCELING = "canceling"
    SKIPPED = "skipped"
    NOT_RUN = "not_run"


@dataclass(frozen=True, slots=True)
class StateClassification:
    """Flags derived from the state of a project's latest build.

    ``needs_finished_build`` is set when the state says nothing about
    whether the project is broken, so the latest finished build decides.
    """

    is_running: bool = False
    is_waiting: bool = False
    tags: tuple[Tag, ...] = ()
    needs_finished_build: bool = False


CONCLUSIVE = StateClassification()

STATE_TABLE: dict[str, StateClassification] = {
    BuildState.RUNNING: StateClassification(is_running=True, needs_finished_build=True),
    BuildState.SCHEDULED: StateClassification(is_waiting=True, needs_finished_build=True),
    BuildState.CANCELED: StateClassification(tags=(CANCELED_TAG,), needs_finished_build=True),
    BuildState.CANCELING: StateClassification(tags=(CANCELED_TAG,), needs_finished_build=True),
    BuildState.NOT_RUN: StateClassification(tags=(NOT_BUILT_TAG,), needs_finished_build=True),
    BuildState.FAILED: CONCLUSIVE,
    BuildState.PASSED: CONCLUSIVE,
}


def classify(state: str | None) -> StateClassification:
    """Look up the flags for a build state; unknown states count as conclusive."""
    if state is None:
        return CONCLUSIVE
    return STATE_TABLE.get(state, CONCLUSIVE)


def is_failed(build: Build) -> bool:
    return build.state == BuildState.FAILED


def build_changes(build: Build) -> tuple[Change, ...]:
    if build.message is None and not build.has_creator:
        return ()
    return (Change(name=build.creator_name, message=build.message),)

import pytest

from buildkite_monitor.api import Build
from buildkite_monitor.core.status import (
    BuildState,
    StateClassification,
    build_changes,
    classify,
)
from buildkite_monitor.domain import CANCELED_TAG, NOT_BUILT_TAG, Change, Tag


class TestClassify:
    def test_running(self) -> None:
        result = classify("running")
        assert result.is_running is True
        assert result.is_waiting is False
        assert result.tags == ()
        assert result.needs_finished_build is True

    def test_scheduled_is_waiting(self) -> None:
        result = classify("scheduled")
        assert result.is_running is False
        assert result.is_waiting is True
        assert result.needs_finished_build is True

    @pytest.mark.parametrize("state", ["canceled", "canceling"])
    def test_canceled_states_tagged(self, state: str) -> None:
        result = classify(state)
        assert result.tags == (Tag(name="Canceled", type="warning"),)
        assert result.is_running is False
        assert result.needs_finished_build is True

    def test_not_run_tagged(self) -> None:
        result = classify("not_run")
        assert result.tags == (NOT_BUILT_TAG,)
        assert result.needs_finished_build is True

    @pytest.mark.parametrize("state", ["failed", "passed"])
    def test_conclusive_states_need_no_second_fetch(self, state: str) -> None:
        assert classify(state) == StateClassification()

    @pytest.mark.parametrize("state", ["blocked", "skipped", "something_new", None])
    def test_other_states_treated_as_conclusive(self, state: str | None) -> None:
        result = classify(state)
        assert result.needs_finished_build is False
        assert result.tags == ()

    def test_accepts_enum_members(self) -> None:
        assert classify(BuildState.CANCELING).tags == (CANCELED_TAG,)


class TestBuildChanges:
    def test_message_and_creator(self) -> None:
        build = Build(message="Fix flaky test", creator_name="Jane Doe", has_creator=True)
        assert build_changes(build) == (Change(name="Jane Doe", message="Fix flaky test"),)

    def test_message_only(self) -> None:
        build = Build(message="Scheduled build")
        assert build_changes(build) == (Change(name=None, message="Scheduled build"),)

    def test_creator_only(self) -> None:
        build = Build(creator_name="Jane Doe", has_creator=True)
        assert build_changes(build) == (Change(name="Jane Doe", message=None),)

    def test_creator_without_name(self) -> None:
        build = Build.from_json({"state": "passed", "creator": {"email": "jane@example.com"}})
        assert build_changes(build) == (Change(name=None, message=None),)

    def test_null_creator_is_absent(self) -> None:
        build = Build.from_json({"state": "passed", "creator": None})
        assert build_changes(build) == ()

    def test_no_message_or_creator(self) -> None:
        assert build_changes(Build(state="passed")) == ()

from buildkite_monitor.core.builds import BuildkiteBuilds
from buildkite_monitor.core.status import (
    BuildState,
    StateClassification,
    build_changes,
    classify,
)

__all__ = [
    "BuildkiteBuilds",
    "BuildState",
    "StateClassification",
    "build_changes",
    "classify",
]

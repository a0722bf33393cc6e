from notekeeper.domains.persistence.probe import AvailabilityProbe
from notekeeper.domains.persistence.snapshot_store import (
    SnapshotStore, SaveFailure, SaveFailureKind
)
from notekeeper.domains.persistence.scheduler import Scheduler, AsyncioScheduler
from notekeeper.domains.persistence.notifications import (
    Notifier, LoggingNotifier, QUOTA_EXCEEDED_MESSAGE, STORAGE_UNAVAILABLE_MESSAGE
)
from notekeeper.domains.persistence.debounce import DebounceCoordinator

__all__ = [
    "AvailabilityProbe",
    "SnapshotStore", "SaveFailure", "SaveFailureKind",
    "Scheduler", "AsyncioScheduler",
    "Notifier", "LoggingNotifier", "QUOTA_EXCEEDED_MESSAGE", "STORAGE_UNAVAILABLE_MESSAGE",
    "DebounceCoordinator"
]

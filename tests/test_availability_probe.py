from notekeeper.domains.persistence.probe import AvailabilityProbe
from notekeeper.infrastructure.storage.medium import InMemoryMedium


def test_probe_reports_available_and_leaves_no_key() -> None:
    medium = InMemoryMedium()
    probe = AvailabilityProbe(medium, probe_key="__probe__")

    assert probe.is_available() is True
    assert medium.keys() == []


def test_probe_reports_unavailable_without_raising() -> None:
    medium = InMemoryMedium(enabled=False)
    probe = AvailabilityProbe(medium)
    assert probe.is_available() is False


def test_probe_follows_runtime_changes() -> None:
    medium = InMemoryMedium()
    probe = AvailabilityProbe(medium)

    assert probe.is_available() is True
    medium.enabled = False
    assert probe.is_available() is False
    medium.enabled = True
    assert probe.is_available() is True


def test_full_storage_is_still_reachable() -> None:
    medium = InMemoryMedium(quota_bytes=200)
    medium.set("notes", "x" * 190)
    probe = AvailabilityProbe(medium, probe_key="__storage_test__")

    assert probe.is_available() is True
    assert medium.keys() == ["notes"]

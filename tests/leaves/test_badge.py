from datetime import date

from src.attendance_recap.attendance_recap.core.enums import LeaveStatus, Role
from src.attendance_recap.attendance_recap.leaves.badge import BadgeViewer, LeaveBadgeCounter
from src.attendance_recap.attendance_recap.leaves.events import LeaveChanged, LeaveEventChannel


class FakeLeaveRepo:
    def __init__(self, total=3):
        self.total = total
        self.calls = []

    def count_in_range(self, *, start_date, end_date, status, subject_id=None, org_unit_id=None):
        self.calls.append(
            {"start": start_date, "end": end_date, "status": status, "subject_id": subject_id, "org_unit_id": org_unit_id}
        )
        return self.total


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def _counter(repo, channel, clock):
    return LeaveBadgeCounter(repo, channel, today_provider=lambda: date(2025, 1, 10), ttl_seconds=60, clock=clock)


def test_head_counts_unit_within_window():
    repo, clock = FakeLeaveRepo(), FakeClock()
    counter = _counter(repo, LeaveEventChannel(), clock)

    assert counter.count(BadgeViewer(subject_id="u1", org_unit_id="s1", role=Role.SATKER_HEAD)) == 3
    call = repo.calls[0]
    assert call["org_unit_id"] == "s1"
    assert call["subject_id"] is None
    assert call["status"] == LeaveStatus.SUBMITTED
    assert call["start"] == date(2025, 1, 3)
    assert call["end"] == date(2025, 1, 17)


def test_member_counts_only_own_requests():
    repo = FakeLeaveRepo()
    counter = _counter(repo, LeaveEventChannel(), FakeClock())
    counter.count(BadgeViewer(subject_id="u9", org_unit_id="s1", role=Role.MEMBER))
    assert repo.calls[0]["subject_id"] == "u9"
    assert repo.calls[0]["org_unit_id"] is None


def test_cached_until_ttl_expires():
    repo, clock = FakeLeaveRepo(), FakeClock()
    counter = _counter(repo, LeaveEventChannel(), clock)
    viewer = BadgeViewer(subject_id="u1", org_unit_id="s1", role=Role.MEMBER)

    counter.count(viewer)
    clock.now += 59
    counter.count(viewer)
    assert len(repo.calls) == 1

    clock.now += 2
    repo.total = 5
    assert counter.count(viewer) == 5
    assert len(repo.calls) == 2


def test_force_bypasses_cache():
    repo = FakeLeaveRepo()
    counter = _counter(repo, LeaveEventChannel(), FakeClock())
    viewer = BadgeViewer(subject_id="u1", org_unit_id="s1", role=Role.MEMBER)
    counter.count(viewer)
    counter.count(viewer, force=True)
    assert len(repo.calls) == 2


def test_published_change_invalidates_cache():
    repo, channel = FakeLeaveRepo(), LeaveEventChannel()
    counter = _counter(repo, channel, FakeClock())
    viewer = BadgeViewer(subject_id="u1", org_unit_id="s1", role=Role.SATKER_HEAD)

    assert counter.count(viewer) == 3
    repo.total = 2
    channel.publish(LeaveChanged(leave_id="1", status=LeaveStatus.APPROVED))
    assert counter.count(viewer) == 2


def test_closed_counter_falls_back_to_ttl():
    repo, channel, clock = FakeLeaveRepo(), LeaveEventChannel(), FakeClock()
    counter = _counter(repo, channel, clock)
    viewer = BadgeViewer(subject_id="u1", org_unit_id="s1", role=Role.MEMBER)

    counter.count(viewer)
    counter.close()
    assert channel.subscriber_count == 0

    repo.total = 0
    channel.publish(LeaveChanged(leave_id="1", status=LeaveStatus.APPROVED))
    assert counter.count(viewer) == 3
    clock.now += 61
    assert counter.count(viewer) == 0


def test_head_without_unit_counts_only_own():
    repo = FakeLeaveRepo()
    counter = _counter(repo, LeaveEventChannel(), FakeClock())
    counter.count(BadgeViewer(subject_id="h1", org_unit_id=None, role=Role.SATKER_HEAD))
    assert repo.calls[0]["subject_id"] == "h1"
    assert repo.calls[0]["org_unit_id"] is None

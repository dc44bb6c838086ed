from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from src.attendance_recap.attendance_recap.core.enums import LeaveStatus, Role
from src.attendance_recap.attendance_recap.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.attendance_recap.attendance_recap.leaves.events import LeaveEventChannel
from src.attendance_recap.attendance_recap.leaves.model import LeaveGrant
from src.attendance_recap.attendance_recap.leaves.service import LeaveService


class FakeLeaveRepo:
    def __init__(self, grants):
        self._grants = {g.leave_id: g for g in grants}

    def get_by_id(self, leave_id):
        return self._grants.get(leave_id)

    def decide(self, *, leave_id, status, decided_by, decision_note=None):
        g = self._grants.get(leave_id)
        if not g or g.status != LeaveStatus.SUBMITTED:
            return False
        self._grants[leave_id] = replace(g, status=status, decided_by=decided_by, decision_note=decision_note)
        return True


def _grant(leave_id="1", org_unit_id="s1", status=LeaveStatus.SUBMITTED):
    return LeaveGrant(
        leave_id=leave_id,
        subject_id="u1",
        org_unit_id=org_unit_id,
        leave_type="CUTI",
        start_date=date(2025, 1, 6),
        end_date=date(2025, 1, 7),
        status=status,
    )


def _service(*grants):
    repo = FakeLeaveRepo(grants)
    channel = LeaveEventChannel()
    events = []
    channel.subscribe(events.append)
    return LeaveService(repo, channel), repo, events


def test_head_approves_own_unit_and_event_published():
    svc, repo, events = _service(_grant())
    svc.approve(current_role=Role.SATKER_HEAD, current_org_unit_id="s1", decided_by="h1", leave_id="1", decision_note=" ok ")

    assert repo.get_by_id("1").status == LeaveStatus.APPROVED
    assert repo.get_by_id("1").decision_note == "ok"
    assert len(events) == 1
    assert events[0].leave_id == "1"
    assert events[0].status == LeaveStatus.APPROVED
    assert events[0].org_unit_id == "s1"


def test_superadmin_rejects_any_unit():
    svc, repo, events = _service(_grant(org_unit_id="s9"))
    svc.reject(current_role=Role.SUPERADMIN, current_org_unit_id=None, decided_by="a1", leave_id="1")
    assert repo.get_by_id("1").status == LeaveStatus.REJECTED
    assert repo.get_by_id("1").decision_note is None
    assert events[0].status == LeaveStatus.REJECTED


def test_member_cannot_decide():
    svc, _, events = _service(_grant())
    with pytest.raises(AuthorizationError):
        svc.approve(current_role=Role.MEMBER, current_org_unit_id="s1", decided_by="u2", leave_id="1")
    assert events == []


def test_head_of_other_unit_cannot_decide():
    svc, _, _ = _service(_grant(org_unit_id="s2"))
    with pytest.raises(AuthorizationError):
        svc.approve(current_role=Role.SATKER_HEAD, current_org_unit_id="s1", decided_by="h1", leave_id="1")


def test_unknown_leave():
    svc, _, _ = _service()
    with pytest.raises(NotFoundError):
        svc.approve(current_role=Role.SUPERADMIN, current_org_unit_id=None, decided_by="a1", leave_id="404")


def test_already_decided():
    svc, _, events = _service(_grant(status=LeaveStatus.APPROVED))
    with pytest.raises(ValidationError):
        svc.reject(current_role=Role.SUPERADMIN, current_org_unit_id=None, decided_by="a1", leave_id="1")
    assert events == []

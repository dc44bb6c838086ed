from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import LeaveStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .events import LeaveChanged, LeaveEventChannel
from .repository import LeaveRepository

logger = logging.getLogger(__name__)

_DECIDERS = {Role.SUPERADMIN, Role.SATKER_HEAD}


class LeaveService:
    def __init__(self, leaves: LeaveRepository, channel: LeaveEventChannel):
        self._leaves = leaves
        self._channel = channel

    def _decide(
        self,
        *,
        current_role: Role,
        current_org_unit_id: Optional[str],
        decided_by: str,
        leave_id: str,
        status: LeaveStatus,
        decision_note: str,
    ) -> None:
        if current_role not in _DECIDERS:
            raise AuthorizationError("Only a satker head or superadmin may decide leave requests")

        grant = self._leaves.get_by_id(leave_id)
        if not grant:
            raise NotFoundError("Leave request not found")
        if current_role == Role.SATKER_HEAD and grant.org_unit_id != current_org_unit_id:
            raise AuthorizationError("Leave request belongs to another satker")
        if grant.status != LeaveStatus.SUBMITTED:
            raise ValidationError("Leave request has already been decided")

        ok = self._leaves.decide(
            leave_id=leave_id,
            status=status,
            decided_by=decided_by,
            decision_note=(decision_note or "").strip() or None,
        )
        if not ok:
            raise ValidationError("Leave decision failed")

        logger.info("Leave %s %s by %s", leave_id, status.value.lower(), decided_by)
        self._channel.publish(
            LeaveChanged(
                leave_id=leave_id,
                status=status,
                subject_id=grant.subject_id,
                org_unit_id=grant.org_unit_id,
            )
        )

    def approve(
        self,
        *,
        current_role: Role,
        current_org_unit_id: Optional[str],
        decided_by: str,
        leave_id: str,
        decision_note: str = "",
    ) -> None:
        self._decide(
            current_role=current_role,
            current_org_unit_id=current_org_unit_id,
            decided_by=decided_by,
            leave_id=leave_id,
            status=LeaveStatus.APPROVED,
            decision_note=decision_note,
        )

    def reject(
        self,
        *,
        current_role: Role,
        current_org_unit_id: Optional[str],
        decided_by: str,
        leave_id: str,
        decision_note: str = "",
    ) -> None:
        self._decide(
            current_role=current_role,
            current_org_unit_id=current_org_unit_id,
            decided_by=decided_by,
            leave_id=leave_id,
            status=LeaveStatus.REJECTED,
            decision_note=decision_note,
        )

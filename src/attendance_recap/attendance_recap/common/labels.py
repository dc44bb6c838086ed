from __future__ import annotations

from typing import Optional, Union

from ..core.enums import LeaveType

_LEAVE_LABELS = {
    LeaveType.NORMAL.value: "Normal",
    LeaveType.DINAS_LUAR.value: "Dinas Luar",
    LeaveType.WFA.value: "WFA",
    LeaveType.WFH.value: "WFH",
    LeaveType.IJIN.value: "Izin",
    LeaveType.SAKIT.value: "Sakit",
    LeaveType.CUTI.value: "Cuti",
}


def humanize_code(value: str) -> str:
    return value.replace("_", " ")


def normalize_leave_code(value: Union[LeaveType, str, None]) -> Optional[str]:
    """Upper-cased leave code, or None when blank."""
    if value is None:
        return None
    if isinstance(value, LeaveType):
        return value.value
    raw = value.strip().upper()
    return raw or None


def leave_label(leave_type: Union[LeaveType, str, None]) -> str:
    """Plain label for a leave type; unknown codes get underscores replaced."""
    code = normalize_leave_code(leave_type)
    if not code:
        return ""
    return _LEAVE_LABELS.get(code, humanize_code(code))


def is_override(leave_type: Union[LeaveType, str, None]) -> bool:
    code = normalize_leave_code(leave_type)
    return code is not None and code != LeaveType.NORMAL.value

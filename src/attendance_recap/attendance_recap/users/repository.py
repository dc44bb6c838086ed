from __future__ import annotations

from typing import Optional, Protocol


class UserRepository(Protocol):
    def get_org_unit_id(self, subject_id: str) -> Optional[str]:
        """Satker the user belongs to, or None for an unknown user."""

        raise NotImplementedError

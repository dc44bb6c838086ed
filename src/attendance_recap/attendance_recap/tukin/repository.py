from __future__ import annotations

from typing import Optional, Protocol

from .model import TukinCalculation


class TukinRepository(Protocol):
    def get_for_subject(self, *, subject_id: str, month: str) -> Optional[TukinCalculation]:
        raise NotImplementedError

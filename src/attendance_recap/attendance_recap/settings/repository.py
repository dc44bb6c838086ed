from __future__ import annotations

from typing import Optional, Protocol


class SettingsRepository(Protocol):
    def get_timezone(self) -> Optional[str]:
        raise NotImplementedError

from __future__ import annotations

from typing import Optional, Protocol


class UserContextPort(Protocol):
    def current_user_id(self) -> Optional[str]: ...

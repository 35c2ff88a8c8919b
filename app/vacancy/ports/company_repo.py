from __future__ import annotations

import uuid
from typing import Optional, Protocol

from vacancy.domain.vacancy import Company


class CompanyRepositoryPort(Protocol):
    def get_by_id(self, company_id: uuid.UUID) -> Optional[Company]: ...

    def get_all(self) -> list[Company]: ...

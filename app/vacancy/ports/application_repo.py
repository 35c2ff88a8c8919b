from __future__ import annotations

import uuid
from typing import Protocol

from vacancy.domain.vacancy import ApplicationRecord


class ApplicationRepositoryPort(Protocol):
    def get_by_vacancy(self, vacancy_id: uuid.UUID) -> list[ApplicationRecord]: ...

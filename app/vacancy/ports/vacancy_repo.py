from __future__ import annotations

import uuid
from typing import Optional, Protocol

from vacancy.domain.vacancy import Vacancy


class VacancyRepositoryPort(Protocol):
    """
    Vacancy Entity Store.

    모든 메서드는 StoreUnavailableError 를 던질 수 있고,
    update 는 version 불일치 시 ConcurrencyConflictError 를 던집니다.
    """

    def get_by_id(self, vacancy_id: uuid.UUID) -> Optional[Vacancy]: ...

    def get_all(self) -> list[Vacancy]: ...

    def add(self, vacancy: Vacancy) -> Vacancy: ...

    def update(self, vacancy: Vacancy) -> Vacancy: ...

    def delete(self, vacancy: Vacancy) -> None: ...

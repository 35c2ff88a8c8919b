from __future__ import annotations

import uuid

from common.application.result import Err, Ok, Result
from common.application.store_errors import store_errors_as_result
from vacancy.application.lookup import load_visible_vacancy
from vacancy.application.mapping import to_view
from vacancy.domain.rules import VacancyVisibility
from vacancy.dtos import VacancyView
from vacancy.ports.company_repo import CompanyRepositoryPort
from vacancy.ports.vacancy_repo import VacancyRepositoryPort


class GetVacancyUseCase:
    def __init__(
        self,
        *,
        vacancy_repo: VacancyRepositoryPort,
        company_repo: CompanyRepositoryPort,
        visibility: VacancyVisibility = VacancyVisibility.COMPANY_ADMIN_OR_CREATOR,
    ):
        self._vacancy_repo = vacancy_repo
        self._company_repo = company_repo
        self._visibility = visibility

    @store_errors_as_result
    def execute(self, *, vacancy_id: uuid.UUID, caller_id: str) -> Result[VacancyView]:
        loaded = load_visible_vacancy(
            vacancy_repo=self._vacancy_repo,
            company_repo=self._company_repo,
            vacancy_id=vacancy_id,
            caller_id=caller_id,
            visibility=self._visibility,
        )
        if isinstance(loaded, Err):
            return loaded
        return Ok(to_view(loaded.value))

from __future__ import annotations

import uuid

from common.application.result import Err, ErrorCode, Ok, Result
from common.application.store_errors import store_errors_as_result
from vacancy.application.lookup import load_vacancy_with_company
from vacancy.domain.rules import can_mutate
from vacancy.ports.company_repo import CompanyRepositoryPort
from vacancy.ports.vacancy_repo import VacancyRepositoryPort


class DeleteVacancyUseCase:
    def __init__(
        self,
        *,
        vacancy_repo: VacancyRepositoryPort,
        company_repo: CompanyRepositoryPort,
    ):
        self._vacancy_repo = vacancy_repo
        self._company_repo = company_repo

    @store_errors_as_result
    def execute(self, *, vacancy_id: uuid.UUID, caller_id: str) -> Result[None]:
        loaded = load_vacancy_with_company(
            vacancy_repo=self._vacancy_repo,
            company_repo=self._company_repo,
            vacancy_id=vacancy_id,
        )
        if isinstance(loaded, Err):
            return loaded
        vacancy, company = loaded.value

        if not can_mutate(vacancy, company, caller_id):
            return Err(
                code=ErrorCode.FORBIDDEN,
                message="Only the company admin or the creator can delete this vacancy",
            )

        self._vacancy_repo.delete(vacancy)
        return Ok(None)

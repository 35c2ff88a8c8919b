from __future__ import annotations

import uuid

from common.application.result import Err, ErrorCode, Ok, Result
from vacancy.domain.rules import VacancyVisibility, is_visible
from vacancy.domain.vacancy import Company, Vacancy
from vacancy.ports.company_repo import CompanyRepositoryPort
from vacancy.ports.vacancy_repo import VacancyRepositoryPort


def load_vacancy_with_company(
    *,
    vacancy_repo: VacancyRepositoryPort,
    company_repo: CompanyRepositoryPort,
    vacancy_id: uuid.UUID,
) -> Result[tuple[Vacancy, Company]]:
    vacancy = vacancy_repo.get_by_id(vacancy_id)
    if vacancy is None:
        return Err(code=ErrorCode.NOT_FOUND, message=f"Vacancy {vacancy_id} not found")

    company = company_repo.get_by_id(vacancy.company_id)
    if company is None:
        return Err(
            code=ErrorCode.NOT_FOUND,
            message=f"Company {vacancy.company_id} not found",
        )
    return Ok((vacancy, company))


def load_visible_vacancy(
    *,
    vacancy_repo: VacancyRepositoryPort,
    company_repo: CompanyRepositoryPort,
    vacancy_id: uuid.UUID,
    caller_id: str,
    visibility: VacancyVisibility,
) -> Result[Vacancy]:
    loaded = load_vacancy_with_company(
        vacancy_repo=vacancy_repo, company_repo=company_repo, vacancy_id=vacancy_id
    )
    if isinstance(loaded, Err):
        return loaded
    vacancy, company = loaded.value

    admin_company_ids = {company.id} if company.admin_user_id == caller_id else set()
    if not is_visible(
        vacancy,
        admin_company_ids=admin_company_ids,
        caller_id=caller_id,
        visibility=visibility,
    ):
        return Err(code=ErrorCode.FORBIDDEN, message="Not allowed to view this vacancy")
    return Ok(vacancy)

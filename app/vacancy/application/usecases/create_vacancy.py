from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Callable

from common.application.result import Err, ErrorCode, Ok, Result
from common.application.store_errors import store_errors_as_result
from vacancy.application.mapping import to_view
from vacancy.domain.rules import can_create, validate_vacancy_fields
from vacancy.domain.vacancy import Vacancy, VacancyStatus
from vacancy.dtos import CreateVacancyDTO, VacancyView
from vacancy.ports.company_repo import CompanyRepositoryPort
from vacancy.ports.vacancy_repo import VacancyRepositoryPort


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CreateVacancyUseCase:
    """
    채용 공고 생성 유스케이스.

    - 대상 회사의 관리자(admin_user_id)만 생성 가능
    - 권한 확인 후 필드를 검증하므로, 권한 없는 호출자는 입력이 잘못돼도 FORBIDDEN 을 받음
    - 생성된 공고는 항상 draft 상태, created_by = 호출자
    """

    def __init__(
        self,
        *,
        vacancy_repo: VacancyRepositoryPort,
        company_repo: CompanyRepositoryPort,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._vacancy_repo = vacancy_repo
        self._company_repo = company_repo
        self._clock = clock

    @store_errors_as_result
    def execute(self, *, dto: CreateVacancyDTO, caller_id: str) -> Result[VacancyView]:
        company = self._company_repo.get_by_id(dto.company_id)
        if company is None:
            return Err(
                code=ErrorCode.NOT_FOUND, message=f"Company {dto.company_id} not found"
            )
        if not can_create(company, caller_id):
            return Err(
                code=ErrorCode.FORBIDDEN,
                message="Only the company admin can create vacancies",
            )

        fields = dto.model_dump()
        fields["status"] = VacancyStatus.DRAFT
        errors = validate_vacancy_fields(fields)
        if errors:
            return Err.validation(errors)

        now = self._clock()
        fields["required_skills"] = tuple(dto.required_skills)
        vacancy = Vacancy(
            id=uuid.uuid4(),
            created_by=caller_id,
            created_at=now,
            updated_at=now,
            **fields,
        )
        saved = self._vacancy_repo.add(vacancy)
        return Ok(to_view(saved))

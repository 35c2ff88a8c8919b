from __future__ import annotations

import dataclasses
import uuid
from datetime import datetime, timezone
from typing import Callable

from common.application.result import Err, ErrorCode, Ok, Result
from common.application.store_errors import store_errors_as_result
from vacancy.application.lookup import load_vacancy_with_company
from vacancy.application.mapping import to_view, vacancy_fields
from vacancy.domain.rules import can_mutate, validate_vacancy_fields
from vacancy.domain.vacancy import IMMUTABLE_FIELDS
from vacancy.dtos import UpdateVacancyDTO, VacancyView
from vacancy.ports.company_repo import CompanyRepositoryPort
from vacancy.ports.vacancy_repo import VacancyRepositoryPort


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UpdateVacancyUseCase:
    """
    채용 공고 부분 수정 유스케이스.

    - 회사 관리자 또는 공고 작성자만 수정 가능
    - DTO 에 명시된 필드만 병합한 뒤, 병합 결과 전체를 다시 검증
    - 병합 결과가 기존과 같으면 저장하지 않음 (같은 요청 반복 시 상태 불변)
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
    def execute(
        self, *, vacancy_id: uuid.UUID, dto: UpdateVacancyDTO, caller_id: str
    ) -> Result[VacancyView]:
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
                message="Only the company admin or the creator can update this vacancy",
            )

        changes = {k: v for k, v in dto.changes().items() if k not in IMMUTABLE_FIELDS}
        if "required_skills" in changes:
            changes["required_skills"] = tuple(changes["required_skills"] or ())

        merged_fields = {**vacancy_fields(vacancy), **changes}
        errors = validate_vacancy_fields(merged_fields)
        if errors:
            return Err.validation(errors)

        merged = dataclasses.replace(vacancy, **changes)
        if merged == vacancy:
            return Ok(to_view(vacancy))

        saved = self._vacancy_repo.update(
            dataclasses.replace(merged, updated_at=self._clock())
        )
        return Ok(to_view(saved))

from __future__ import annotations

import uuid
from collections import Counter

from common.application.result import Err, Ok, Result
from common.application.store_errors import store_errors_as_result
from vacancy.application.lookup import load_visible_vacancy
from vacancy.domain.rules import VacancyVisibility
from vacancy.domain.vacancy import ApplicationRecord, ApplicationStatus
from vacancy.dtos import VacancyStatisticsView
from vacancy.ports.application_repo import ApplicationRepositoryPort
from vacancy.ports.company_repo import CompanyRepositoryPort
from vacancy.ports.vacancy_repo import VacancyRepositoryPort


class GetVacancyStatisticsUseCase:
    """
    공고별 지원 현황 통계.

    접근 규칙은 상세 조회와 같습니다. 지원서가 없으면 모든 값이 0 입니다.
    평균 채용 소요 일수는 contract_signed 지원서만으로 계산합니다.
    """

    def __init__(
        self,
        *,
        vacancy_repo: VacancyRepositoryPort,
        company_repo: CompanyRepositoryPort,
        application_repo: ApplicationRepositoryPort,
        visibility: VacancyVisibility = VacancyVisibility.COMPANY_ADMIN_OR_CREATOR,
    ):
        self._vacancy_repo = vacancy_repo
        self._company_repo = company_repo
        self._application_repo = application_repo
        self._visibility = visibility

    @store_errors_as_result
    def execute(
        self, *, vacancy_id: uuid.UUID, caller_id: str
    ) -> Result[VacancyStatisticsView]:
        loaded = load_visible_vacancy(
            vacancy_repo=self._vacancy_repo,
            company_repo=self._company_repo,
            vacancy_id=vacancy_id,
            caller_id=caller_id,
            visibility=self._visibility,
        )
        if isinstance(loaded, Err):
            return loaded

        applications = self._application_repo.get_by_vacancy(vacancy_id)
        counts = Counter(a.status for a in applications)
        total = len(applications)
        hired = [
            a
            for a in applications
            if a.status == ApplicationStatus.CONTRACT_SIGNED.value
        ]

        return Ok(
            VacancyStatisticsView(
                total_applications=total,
                new_applications=counts[ApplicationStatus.APPLIED.value],
                shortlisted_count=counts[ApplicationStatus.SHORTLISTED.value],
                interviewed_count=counts[ApplicationStatus.INTERVIEWED.value],
                hired_count=len(hired),
                rejected_count=counts[ApplicationStatus.REJECTED.value],
                conversion_rate=(len(hired) / total) if total else 0.0,
                average_time_to_hire_days=_average_days_to_hire(hired),
            )
        )


def _average_days_to_hire(hired: list[ApplicationRecord]) -> float:
    # 지원 시각부터 contract_signed 로 바뀐 마지막 갱신 시각까지의 평균 일수
    if not hired:
        return 0.0
    total_seconds = sum(
        (a.last_updated_at - a.applied_at).total_seconds() for a in hired
    )
    return round(total_seconds / len(hired) / 86400, 2)

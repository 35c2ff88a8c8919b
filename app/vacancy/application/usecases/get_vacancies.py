from __future__ import annotations

from common.application.result import Err, Ok, Result
from common.application.store_errors import store_errors_as_result
from vacancy.application.mapping import to_view
from vacancy.domain.listing import matches_filter, paginate, sort_vacancies
from vacancy.domain.rules import VacancyVisibility, is_visible, validate_filter
from vacancy.dtos import VacancyFilterDTO, VacancyView
from vacancy.ports.company_repo import CompanyRepositoryPort
from vacancy.ports.vacancy_repo import VacancyRepositoryPort


class GetVacanciesUseCase:
    """
    채용 공고 목록 조회 유스케이스.

    1) 호출자에게 보이는 공고 집합 계산 (visibility 설정에 따름)
    2) 필터 적용 -> 결정적 정렬 -> page/page_size 로 자르기

    결과가 없으면 빈 목록을 돌려주며 실패로 취급하지 않습니다.
    """

    def __init__(
        self,
        *,
        vacancy_repo: VacancyRepositoryPort,
        company_repo: CompanyRepositoryPort,
        visibility: VacancyVisibility = VacancyVisibility.COMPANY_ADMIN_OR_CREATOR,
        max_page_size: int = 100,
    ):
        self._vacancy_repo = vacancy_repo
        self._company_repo = company_repo
        self._visibility = visibility
        self._max_page_size = max_page_size

    @store_errors_as_result
    def execute(
        self, *, caller_id: str, criteria: VacancyFilterDTO
    ) -> Result[list[VacancyView]]:
        errors = validate_filter(criteria.model_dump(), max_page_size=self._max_page_size)
        if errors:
            return Err.validation(errors)

        admin_company_ids = {
            c.id for c in self._company_repo.get_all() if c.admin_user_id == caller_id
        }
        candidates = [
            v
            for v in self._vacancy_repo.get_all()
            if is_visible(
                v,
                admin_company_ids=admin_company_ids,
                caller_id=caller_id,
                visibility=self._visibility,
            )
            and matches_filter(v, criteria)
        ]

        ordered = sort_vacancies(candidates, criteria.sort_by, criteria.sort_order)
        page = paginate(ordered, criteria.page, criteria.page_size)
        return Ok([to_view(v) for v in page])

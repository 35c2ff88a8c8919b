from __future__ import annotations

from collections.abc import Iterable

from vacancy.domain.vacancy import Vacancy
from vacancy.dtos import SortOrder, VacancyFilterDTO, VacancySortField


def matches_filter(vacancy: Vacancy, criteria: VacancyFilterDTO) -> bool:
    if criteria.status is not None and vacancy.status != criteria.status:
        return False
    if criteria.province is not None and vacancy.province != criteria.province:
        return False
    if (
        criteria.priority_level is not None
        and vacancy.priority_level != criteria.priority_level
    ):
        return False
    # 급여 범위는 "겹치는지"로 판단. 급여 정보가 없는 공고는 급여 필터에서 제외
    if criteria.salary_min is not None and (
        vacancy.salary_max is None or vacancy.salary_max < criteria.salary_min
    ):
        return False
    if criteria.salary_max is not None and (
        vacancy.salary_min is None or vacancy.salary_min > criteria.salary_max
    ):
        return False
    if (
        criteria.start_date_from is not None
        and vacancy.start_date < criteria.start_date_from
    ):
        return False
    if criteria.start_date_to is not None and vacancy.start_date > criteria.start_date_to:
        return False
    return True


def sort_vacancies(
    vacancies: Iterable[Vacancy], sort_by: VacancySortField, sort_order: SortOrder
) -> list[Vacancy]:
    """
    결정적(deterministic) 정렬.

    동점은 항상 (created_at, id) 오름차순, 정렬 값이 없는 공고는 방향과 무관하게 맨 뒤.
    저장소의 반환 순서와 무관하게 같은 입력이면 같은 순서가 나옵니다.
    """
    ordered = sorted(vacancies, key=lambda v: (v.created_at, str(v.id)))
    attr = sort_by.value
    present = [v for v in ordered if getattr(v, attr) is not None]
    missing = [v for v in ordered if getattr(v, attr) is None]
    # sorted 는 안정 정렬이므로 reverse 여도 동점 순서(created_at, id 오름차순)가 유지됨
    present = sorted(
        present,
        key=lambda v: getattr(v, attr),
        reverse=sort_order is SortOrder.DESC,
    )
    return present + missing


def paginate(items: list, page: int, page_size: int) -> list:
    offset = (page - 1) * page_size
    return items[offset : offset + page_size]

"""
Tests for vacancy listing helpers

필터/정렬/페이지 나누기 순수 함수 테스트
"""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from vacancy.domain.listing import matches_filter, paginate, sort_vacancies
from vacancy.domain.vacancy import Vacancy
from vacancy.dtos import SortOrder, VacancyFilterDTO, VacancySortField

T = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _vacancy(title, created_offset, **overrides):
    values = dict(
        id=uuid.uuid4(),
        company_id=uuid.uuid4(),
        title=title,
        description="d",
        location="l",
        quantity=1,
        start_date=T + timedelta(days=30),
        application_deadline=T + timedelta(days=10),
        commission_rule_id=uuid.uuid4(),
        created_by="u1",
        created_at=T + timedelta(minutes=created_offset),
        updated_at=T + timedelta(minutes=created_offset),
    )
    values.update(overrides)
    return Vacancy(**values)


def test_missing_sort_values_go_last_in_both_directions():
    a = _vacancy("a", 0, salary_min=Decimal("100"))
    b = _vacancy("b", 1)
    c = _vacancy("c", 2, salary_min=Decimal("300"))

    asc = sort_vacancies([b, c, a], VacancySortField.SALARY_MIN, SortOrder.ASC)
    desc = sort_vacancies([b, c, a], VacancySortField.SALARY_MIN, SortOrder.DESC)

    assert [v.title for v in asc] == ["a", "c", "b"]
    assert [v.title for v in desc] == ["c", "a", "b"]


def test_ties_keep_creation_order_when_descending():
    first = _vacancy("first", 0, priority_level=2)
    second = _vacancy("second", 1, priority_level=2)
    low = _vacancy("low", 2, priority_level=1)

    ordered = sort_vacancies(
        [low, second, first], VacancySortField.PRIORITY_LEVEL, SortOrder.DESC
    )

    assert [v.title for v in ordered] == ["first", "second", "low"]


def test_start_date_range_is_inclusive():
    v = _vacancy("v", 0, start_date=T)

    assert matches_filter(v, VacancyFilterDTO(start_date_from=T, start_date_to=T))
    assert not matches_filter(
        v, VacancyFilterDTO(start_date_from=T + timedelta(seconds=1))
    )


def test_salary_filter_excludes_vacancies_without_salary():
    v = _vacancy("v", 0)

    assert not matches_filter(v, VacancyFilterDTO(salary_min=Decimal("1")))
    assert matches_filter(v, VacancyFilterDTO())


def test_paginate_out_of_range_returns_empty():
    assert paginate([1, 2, 3], page=2, page_size=2) == [3]
    assert paginate([1, 2, 3], page=5, page_size=2) == []

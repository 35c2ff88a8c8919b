"""
Tests for vacancy access-control and validation rules

권한/검증 순수 함수 테스트
"""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from vacancy.domain.rules import (
    VacancyVisibility,
    can_create,
    can_mutate,
    is_visible,
    validate_filter,
    validate_vacancy_fields,
)
from vacancy.domain.vacancy import Company, Vacancy, VacancyStatus

T = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _fields(**overrides):
    fields = {
        "company_id": uuid.uuid4(),
        "title": "Engineer",
        "description": "Build things",
        "location": "Hanoi",
        "quantity": 1,
        "salary_min": Decimal("1000"),
        "salary_max": Decimal("2000"),
        "salary_type": "monthly",
        "payment_policy": "post_paid",
        "priority_level": 1,
        "is_internal_only": False,
        "start_date": T + timedelta(days=30),
        "application_deadline": T + timedelta(days=15),
        "commission_rule_id": uuid.uuid4(),
        "status": VacancyStatus.DRAFT,
    }
    fields.update(overrides)
    return fields


def _vacancy(company_id, created_by):
    return Vacancy(
        id=uuid.uuid4(),
        company_id=company_id,
        title="Engineer",
        description="Build things",
        location="Hanoi",
        quantity=1,
        start_date=T,
        application_deadline=T,
        commission_rule_id=uuid.uuid4(),
        created_by=created_by,
        created_at=T,
        updated_at=T,
    )


class TestAuthorization:
    def setup_method(self):
        self.company = Company(id=uuid.uuid4(), name="Acme", admin_user_id="u1")

    def test_only_admin_can_create(self):
        assert can_create(self.company, "u1") is True
        assert can_create(self.company, "u2") is False

    def test_admin_can_mutate_vacancy_created_by_someone_else(self):
        vacancy = _vacancy(self.company.id, created_by="u3")
        assert can_mutate(vacancy, self.company, "u1") is True

    def test_creator_can_mutate(self):
        vacancy = _vacancy(self.company.id, created_by="u3")
        assert can_mutate(vacancy, self.company, "u3") is True

    def test_stranger_cannot_mutate(self):
        vacancy = _vacancy(self.company.id, created_by="u3")
        assert can_mutate(vacancy, self.company, "u9") is False


class TestVisibility:
    @pytest.mark.parametrize(
        "visibility, via_admin, via_creator, expected",
        [
            (VacancyVisibility.COMPANY_ADMIN, True, False, True),
            (VacancyVisibility.COMPANY_ADMIN, False, True, False),
            (VacancyVisibility.CREATOR, False, True, True),
            (VacancyVisibility.CREATOR, True, False, False),
            (VacancyVisibility.COMPANY_ADMIN_OR_CREATOR, True, False, True),
            (VacancyVisibility.COMPANY_ADMIN_OR_CREATOR, False, True, True),
            (VacancyVisibility.COMPANY_ADMIN_OR_CREATOR, False, False, False),
        ],
    )
    def test_visibility_modes(self, visibility, via_admin, via_creator, expected):
        company_id = uuid.uuid4()
        vacancy = _vacancy(company_id, created_by="me" if via_creator else "someone")
        admin_ids = {company_id} if via_admin else set()

        assert (
            is_visible(
                vacancy,
                admin_company_ids=admin_ids,
                caller_id="me",
                visibility=visibility,
            )
            is expected
        )


class TestValidateVacancyFields:
    def test_valid_fields_have_no_errors(self):
        assert validate_vacancy_fields(_fields()) == []

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_below_one(self, quantity):
        errors = validate_vacancy_fields(_fields(quantity=quantity))
        assert [e.field for e in errors] == ["quantity"]

    def test_quantity_above_maximum(self):
        errors = validate_vacancy_fields(_fields(quantity=10001))
        assert [e.field for e in errors] == ["quantity"]

    def test_salary_min_greater_than_max(self):
        errors = validate_vacancy_fields(
            _fields(salary_min=Decimal("3000"), salary_max=Decimal("2000"))
        )
        assert [e.field for e in errors] == ["salary_min"]

    def test_equal_salaries_and_equal_dates_are_valid(self):
        errors = validate_vacancy_fields(
            _fields(
                salary_min=Decimal("2000"),
                salary_max=Decimal("2000"),
                start_date=T,
                application_deadline=T,
            )
        )
        assert errors == []

    def test_negative_salary(self):
        errors = validate_vacancy_fields(_fields(salary_min=Decimal("-1")))
        assert "salary_min" in {e.field for e in errors}

    def test_salary_is_optional(self):
        assert validate_vacancy_fields(_fields(salary_min=None, salary_max=None)) == []

    def test_deadline_after_start_date(self):
        errors = validate_vacancy_fields(
            _fields(start_date=T, application_deadline=T + timedelta(days=1))
        )
        assert [e.field for e in errors] == ["application_deadline"]

    def test_end_date_before_start_date(self):
        errors = validate_vacancy_fields(
            _fields(end_date=T + timedelta(days=1))
        )
        assert [e.field for e in errors] == ["end_date"]

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_title(self, value):
        errors = validate_vacancy_fields(_fields(title=value))
        assert [e.field for e in errors] == ["title"]

    def test_title_too_long(self):
        errors = validate_vacancy_fields(_fields(title="x" * 256))
        assert [e.field for e in errors] == ["title"]

    def test_reports_every_violation(self):
        """첫 번째 위반에서 멈추지 않고 모든 위반을 반환"""
        errors = validate_vacancy_fields(
            _fields(
                title="",
                description="",
                quantity=0,
                salary_min=Decimal("5"),
                salary_max=Decimal("1"),
                start_date=T,
                application_deadline=T + timedelta(days=1),
            )
        )
        assert {e.field for e in errors} == {
            "title",
            "description",
            "quantity",
            "salary_min",
            "application_deadline",
        }

    def test_experience_years_range(self):
        errors = validate_vacancy_fields(_fields(experience_years=51))
        assert [e.field for e in errors] == ["experience_years"]

    @pytest.mark.parametrize("value", [None, "yes", 1])
    def test_internal_only_must_be_boolean(self, value):
        errors = validate_vacancy_fields(_fields(is_internal_only=value))
        assert [e.field for e in errors] == ["is_internal_only"]

    @pytest.mark.parametrize(
        "amount",
        [
            Decimal("1e20"),
            Decimal("1000000000000"),
            Decimal("1000.555"),
            Decimal("NaN"),
            Decimal("Infinity"),
        ],
    )
    def test_money_outside_column_precision(self, amount):
        errors = validate_vacancy_fields(_fields(escrow_amount=amount))
        assert [e.field for e in errors] == ["escrow_amount"]

    @pytest.mark.parametrize(
        "amount", [Decimal("999999999999.99"), Decimal("0"), Decimal("1000.50")]
    )
    def test_money_within_column_precision(self, amount):
        assert validate_vacancy_fields(_fields(escrow_amount=amount)) == []

    def test_invalid_salary_skips_range_comparison(self):
        """자릿수 위반이 있으면 min/max 비교 오류는 중복으로 보고하지 않음"""
        errors = validate_vacancy_fields(
            _fields(salary_min=Decimal("1e20"), salary_max=Decimal("2000"))
        )
        assert [e.field for e in errors] == ["salary_min"]

    @pytest.mark.parametrize(
        "field, length",
        [
            ("province", 256),
            ("district", 256),
            ("education_level", 256),
            ("salary_type", 33),
            ("payment_policy", 33),
        ],
    )
    def test_text_over_column_length(self, field, length):
        errors = validate_vacancy_fields(_fields(**{field: "x" * length}))
        assert [e.field for e in errors] == [field]

    def test_optional_text_at_column_length_is_valid(self):
        assert validate_vacancy_fields(_fields(province="x" * 255)) == []

    def test_priority_level_upper_bound(self):
        assert validate_vacancy_fields(_fields(priority_level=32767)) == []
        errors = validate_vacancy_fields(_fields(priority_level=32768))
        assert [e.field for e in errors] == ["priority_level"]


class TestValidateFilter:
    def test_defaults_are_valid(self):
        assert validate_filter({"page": 1, "page_size": 10}, max_page_size=100) == []

    def test_page_and_page_size_must_be_positive(self):
        errors = validate_filter({"page": 0, "page_size": 0}, max_page_size=100)
        assert {e.field for e in errors} == {"page", "page_size"}

    def test_page_size_capped(self):
        errors = validate_filter({"page": 1, "page_size": 101}, max_page_size=100)
        assert [e.field for e in errors] == ["page_size"]

    def test_start_date_range_order(self):
        errors = validate_filter(
            {
                "page": 1,
                "page_size": 10,
                "start_date_from": T + timedelta(days=1),
                "start_date_to": T,
            },
            max_page_size=100,
        )
        assert [e.field for e in errors] == ["start_date_from"]

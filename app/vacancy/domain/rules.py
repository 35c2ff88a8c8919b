"""
채용 공고 권한/검증 규칙 (순수 함수).

유스케이스는 저장소에서 읽은 Company/Vacancy 와 호출자 id 를 넘겨 결과만 받습니다.
검증 함수는 첫 번째 위반에서 멈추지 않고 모든 위반 항목을 돌려줍니다.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from common.application.result import FieldError
from vacancy.domain.vacancy import Company, Vacancy

TITLE_MAX_LENGTH = 255
LOCATION_MAX_LENGTH = 500
QUANTITY_MAX = 10000
EXPERIENCE_YEARS_MAX = 50
PRIORITY_LEVEL_MAX = 32767
# DecimalField(max_digits=14, decimal_places=2) 와 맞춤
MONEY_INTEGER_DIGITS = 12
MONEY_DECIMAL_PLACES = 2

_REQUIRED_TEXT_FIELDS = ("title", "description", "location", "salary_type", "payment_policy")
_REQUIRED_FIELDS = (
    "company_id",
    "commission_rule_id",
    "status",
    "start_date",
    "application_deadline",
)
_OPTIONAL_TEXT_FIELDS = ("province", "district", "education_level")
_MONEY_FIELDS = ("salary_min", "salary_max", "escrow_amount")
_MAX_LENGTHS = {
    "title": TITLE_MAX_LENGTH,
    "location": LOCATION_MAX_LENGTH,
    "province": 255,
    "district": 255,
    "education_level": 255,
    "salary_type": 32,
    "payment_policy": 32,
}
_MONEY_LIMIT = Decimal(10) ** MONEY_INTEGER_DIGITS
_MONEY_STEP = Decimal(1).scaleb(-MONEY_DECIMAL_PLACES)


class VacancyVisibility(str, enum.Enum):
    """목록/상세 조회 시 호출자에게 보이는 공고 범위."""

    COMPANY_ADMIN = "company_admin"
    CREATOR = "creator"
    COMPANY_ADMIN_OR_CREATOR = "company_admin_or_creator"


def _money_error(value: Any) -> str | None:
    amount = Decimal(value)
    if not amount.is_finite():
        return "Must be a finite number."
    if amount < 0:
        return "Must not be negative."
    if abs(amount) >= _MONEY_LIMIT:
        return f"Must have at most {MONEY_INTEGER_DIGITS} digits before the decimal point."
    if amount != amount.quantize(_MONEY_STEP):
        return f"Must have at most {MONEY_DECIMAL_PLACES} decimal places."
    return None


def can_create(company: Company, caller_id: str) -> bool:
    return company.admin_user_id == caller_id


def can_mutate(vacancy: Vacancy, company: Company, caller_id: str) -> bool:
    return caller_id == company.admin_user_id or caller_id == vacancy.created_by


def is_visible(
    vacancy: Vacancy,
    *,
    admin_company_ids: set,
    caller_id: str,
    visibility: VacancyVisibility,
) -> bool:
    via_admin = vacancy.company_id in admin_company_ids
    via_creator = vacancy.created_by == caller_id
    if visibility is VacancyVisibility.COMPANY_ADMIN:
        return via_admin
    if visibility is VacancyVisibility.CREATOR:
        return via_creator
    return via_admin or via_creator


def validate_vacancy_fields(fields: Mapping[str, Any]) -> list[FieldError]:
    """
    공고 필드 불변식 검증.

    - 필수 텍스트: 공백만 있는 값도 비어 있는 것으로 봅니다.
    - quantity: 1 이상 QUANTITY_MAX 이하
    - salary_min/salary_max/escrow_amount: 0 이상, 정수부 12자리/소수부 2자리 이내
    - salary_min <= salary_max (둘 다 있을 때)
    - 텍스트 길이, priority_level 등 저장 컬럼 한도를 넘는 값도 여기서 거부
    - application_deadline <= start_date, end_date(선택) >= start_date
    """
    errors: list[FieldError] = []

    for name in _REQUIRED_TEXT_FIELDS:
        value = fields.get(name)
        if value is None or not str(value).strip():
            errors.append(FieldError(name, "This field is required."))
        elif name in _MAX_LENGTHS and len(value) > _MAX_LENGTHS[name]:
            errors.append(
                FieldError(name, f"Must be at most {_MAX_LENGTHS[name]} characters.")
            )

    for name in _OPTIONAL_TEXT_FIELDS:
        value = fields.get(name)
        if value is not None and len(value) > _MAX_LENGTHS[name]:
            errors.append(
                FieldError(name, f"Must be at most {_MAX_LENGTHS[name]} characters.")
            )

    for name in _REQUIRED_FIELDS:
        if fields.get(name) is None:
            errors.append(FieldError(name, "This field is required."))

    if not isinstance(fields.get("is_internal_only"), bool):
        errors.append(FieldError("is_internal_only", "Must be true or false."))

    quantity = fields.get("quantity")
    if quantity is None:
        errors.append(FieldError("quantity", "This field is required."))
    elif quantity < 1:
        errors.append(FieldError("quantity", "Must be at least 1."))
    elif quantity > QUANTITY_MAX:
        errors.append(FieldError("quantity", f"Must be at most {QUANTITY_MAX}."))

    invalid_money = set()
    for name in _MONEY_FIELDS:
        value = fields.get(name)
        if value is not None:
            message = _money_error(value)
            if message:
                invalid_money.add(name)
                errors.append(FieldError(name, message))

    salary_min = fields.get("salary_min")
    salary_max = fields.get("salary_max")
    if (
        salary_min is not None
        and salary_max is not None
        and not invalid_money & {"salary_min", "salary_max"}
        and salary_min > salary_max
    ):
        errors.append(
            FieldError("salary_min", "Must be less than or equal to salary_max.")
        )

    experience_years = fields.get("experience_years")
    if experience_years is not None and not (
        0 <= experience_years <= EXPERIENCE_YEARS_MAX
    ):
        errors.append(
            FieldError(
                "experience_years", f"Must be between 0 and {EXPERIENCE_YEARS_MAX}."
            )
        )

    priority_level = fields.get("priority_level")
    if priority_level is None or priority_level < 1:
        errors.append(FieldError("priority_level", "Must be at least 1."))
    elif priority_level > PRIORITY_LEVEL_MAX:
        errors.append(
            FieldError("priority_level", f"Must be at most {PRIORITY_LEVEL_MAX}.")
        )

    start_date = fields.get("start_date")
    deadline = fields.get("application_deadline")
    end_date = fields.get("end_date")
    if start_date is not None and deadline is not None and deadline > start_date:
        errors.append(
            FieldError(
                "application_deadline", "Must be on or before start_date."
            )
        )
    if start_date is not None and end_date is not None and end_date < start_date:
        errors.append(FieldError("end_date", "Must be on or after start_date."))

    return errors


def validate_filter(filter_fields: Mapping[str, Any], *, max_page_size: int) -> list[FieldError]:
    errors: list[FieldError] = []

    page = filter_fields.get("page")
    if page is None or page < 1:
        errors.append(FieldError("page", "Must be at least 1."))

    page_size = filter_fields.get("page_size")
    if page_size is None or page_size < 1:
        errors.append(FieldError("page_size", "Must be at least 1."))
    elif page_size > max_page_size:
        errors.append(FieldError("page_size", f"Must be at most {max_page_size}."))

    date_from = filter_fields.get("start_date_from")
    date_to = filter_fields.get("start_date_to")
    if date_from is not None and date_to is not None and date_from > date_to:
        errors.append(
            FieldError("start_date_from", "Must be on or before start_date_to.")
        )

    salary_min = filter_fields.get("salary_min")
    salary_max = filter_fields.get("salary_max")
    if salary_min is not None and salary_max is not None and salary_min > salary_max:
        errors.append(
            FieldError("salary_min", "Must be less than or equal to salary_max.")
        )

    return errors

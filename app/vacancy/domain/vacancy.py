from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


class VacancyStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    CLOSED = "closed"


class ApplicationStatus(str, enum.Enum):
    APPLIED = "applied"
    SHORTLISTED = "shortlisted"
    INTERVIEWED = "interviewed"
    CONTRACT_SIGNED = "contract_signed"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class Company:
    id: uuid.UUID
    name: str
    admin_user_id: str


@dataclass(frozen=True, slots=True)
class Vacancy:
    id: uuid.UUID
    company_id: uuid.UUID
    title: str
    description: str
    location: str
    quantity: int
    start_date: datetime
    application_deadline: datetime
    commission_rule_id: uuid.UUID
    created_by: str
    created_at: datetime
    updated_at: datetime
    status: VacancyStatus = VacancyStatus.DRAFT
    salary_min: Decimal | None = None
    salary_max: Decimal | None = None
    salary_type: str = "monthly"
    province: str | None = None
    district: str | None = None
    required_skills: tuple[str, ...] = field(default_factory=tuple)
    experience_years: int | None = None
    education_level: str | None = None
    end_date: datetime | None = None
    escrow_amount: Decimal | None = None
    payment_policy: str = "post_paid"
    is_internal_only: bool = False
    priority_level: int = 1
    # 낙관적 동시성 토큰. 저장소 update 시 일치해야 하며 성공하면 1 증가
    version: int = 1


# 생성 이후 바뀌지 않는 필드 (부분 수정 대상에서 제외)
IMMUTABLE_FIELDS = frozenset(
    {"id", "company_id", "created_by", "created_at", "updated_at", "version"}
)


@dataclass(frozen=True, slots=True)
class ApplicationRecord:
    """통계 계산에 필요한 지원서 요약 (상태와 시각만)"""

    status: str
    applied_at: datetime
    last_updated_at: datetime

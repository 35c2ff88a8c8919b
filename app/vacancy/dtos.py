from __future__ import annotations

import enum
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from vacancy.domain.vacancy import VacancyStatus


def _ensure_aware(value: datetime) -> datetime:
    # timezone 정보가 없는 입력은 UTC 로 간주
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(_ensure_aware)]


class VacancySortField(str, enum.Enum):
    CREATED_AT = "created_at"
    START_DATE = "start_date"
    APPLICATION_DEADLINE = "application_deadline"
    SALARY_MIN = "salary_min"
    PRIORITY_LEVEL = "priority_level"
    TITLE = "title"


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


class CreateVacancyDTO(BaseModel):
    """
    채용 공고 생성 입력 DTO

    범위/순서 검증(quantity >= 1, salary_min <= salary_max 등)은 여기서 하지 않고
    유스케이스가 모든 위반 항목을 모아 VALIDATION_ERROR 로 돌려줍니다.
    """

    model_config = ConfigDict(extra="forbid")

    company_id: uuid.UUID = Field(description="공고를 소유하는 회사 ID")
    title: str = Field(description="공고 제목")
    description: str = Field(description="공고 본문")
    location: str = Field(description="근무지")
    quantity: int = Field(description="채용 인원")
    start_date: UtcDatetime = Field(description="근무 시작일")
    application_deadline: UtcDatetime = Field(description="지원 마감일")
    commission_rule_id: uuid.UUID = Field(description="수수료 규칙 ID")
    salary_min: Optional[Decimal] = Field(default=None, description="최저 급여")
    salary_max: Optional[Decimal] = Field(default=None, description="최고 급여")
    salary_type: str = Field(default="monthly", description="급여 기준")
    province: Optional[str] = Field(default=None, description="시/도")
    district: Optional[str] = Field(default=None, description="구/군")
    required_skills: List[str] = Field(default_factory=list, description="요구 기술")
    experience_years: Optional[int] = Field(default=None, description="요구 경력 연차")
    education_level: Optional[str] = Field(default=None, description="요구 학력")
    end_date: Optional[UtcDatetime] = Field(default=None, description="근무 종료일")
    escrow_amount: Optional[Decimal] = Field(default=None, description="에스크로 금액")
    payment_policy: str = Field(default="post_paid", description="지급 정책")
    is_internal_only: bool = Field(default=False, description="내부 전용 여부")
    priority_level: int = Field(default=1, description="우선순위")


class UpdateVacancyDTO(BaseModel):
    """
    채용 공고 부분 수정 입력 DTO

    명시적으로 전달된 필드(model_fields_set)만 반영합니다.
    전달하지 않은 필드와 None/"" 로 전달한 필드는 구분됩니다.
    company_id, created_by 는 수정할 수 없습니다.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    quantity: Optional[int] = None
    start_date: Optional[UtcDatetime] = None
    application_deadline: Optional[UtcDatetime] = None
    commission_rule_id: Optional[uuid.UUID] = None
    status: Optional[VacancyStatus] = None
    salary_min: Optional[Decimal] = None
    salary_max: Optional[Decimal] = None
    salary_type: Optional[str] = None
    province: Optional[str] = None
    district: Optional[str] = None
    required_skills: Optional[List[str]] = None
    experience_years: Optional[int] = None
    education_level: Optional[str] = None
    end_date: Optional[UtcDatetime] = None
    escrow_amount: Optional[Decimal] = None
    payment_policy: Optional[str] = None
    is_internal_only: Optional[bool] = None
    priority_level: Optional[int] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class VacancyFilterDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: Optional[VacancyStatus] = Field(default=None, description="상태 일치 필터")
    province: Optional[str] = Field(default=None, description="시/도 일치 필터")
    priority_level: Optional[int] = Field(default=None, description="우선순위 일치 필터")
    salary_min: Optional[Decimal] = Field(
        default=None, description="공고 최고 급여가 이 값 이상"
    )
    salary_max: Optional[Decimal] = Field(
        default=None, description="공고 최저 급여가 이 값 이하"
    )
    start_date_from: Optional[UtcDatetime] = None
    start_date_to: Optional[UtcDatetime] = None
    page: int = Field(default=1, description="1부터 시작")
    page_size: int = Field(default=10)
    sort_by: VacancySortField = VacancySortField.CREATED_AT
    sort_order: SortOrder = SortOrder.ASC


class VacancyView(BaseModel):
    id: uuid.UUID
    company_id: uuid.UUID
    title: str
    description: str
    location: str
    quantity: int
    salary_min: Optional[Decimal] = None
    salary_max: Optional[Decimal] = None
    salary_type: str
    province: Optional[str] = None
    district: Optional[str] = None
    required_skills: List[str] = Field(default_factory=list)
    experience_years: Optional[int] = None
    education_level: Optional[str] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    application_deadline: datetime
    commission_rule_id: uuid.UUID
    escrow_amount: Optional[Decimal] = None
    payment_policy: str
    is_internal_only: bool
    priority_level: int
    status: VacancyStatus
    created_by: str
    created_at: datetime
    updated_at: datetime


class VacancyStatisticsView(BaseModel):
    total_applications: int = Field(default=0, ge=0)
    new_applications: int = Field(default=0, ge=0)
    shortlisted_count: int = Field(default=0, ge=0)
    interviewed_count: int = Field(default=0, ge=0)
    hired_count: int = Field(default=0, ge=0)
    rejected_count: int = Field(default=0, ge=0)
    conversion_rate: float = Field(default=0.0, description="hired / total")
    average_time_to_hire_days: float = Field(
        default=0.0, ge=0, description="지원부터 계약 체결까지 평균 일수"
    )

# app/conftest.py
"""
pytest fixtures for vacancy use cases

유스케이스 테스트는 DB 없이 메모리 저장소로 실행합니다.
"""
import dataclasses
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from common.exceptions import ConcurrencyConflictError, StoreUnavailableError
from vacancy.domain.vacancy import ApplicationRecord, Company

ADMIN_ID = "user-admin"
OTHER_ID = "user-other"
NOW = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)


class InMemoryVacancyRepository:
    def __init__(self):
        self.items = {}
        self.unavailable = False
        self.add_calls = 0
        self.update_calls = 0

    def _check(self):
        if self.unavailable:
            raise StoreUnavailableError("connection refused")

    def get_by_id(self, vacancy_id):
        self._check()
        return self.items.get(vacancy_id)

    def get_all(self):
        self._check()
        return list(self.items.values())

    def add(self, vacancy):
        self._check()
        self.add_calls += 1
        self.items[vacancy.id] = vacancy
        return vacancy

    def update(self, vacancy):
        self._check()
        current = self.items.get(vacancy.id)
        if current is None or current.version != vacancy.version:
            raise ConcurrencyConflictError(f"stale version {vacancy.version}")
        self.update_calls += 1
        saved = dataclasses.replace(vacancy, version=vacancy.version + 1)
        self.items[vacancy.id] = saved
        return saved

    def delete(self, vacancy):
        self._check()
        self.items.pop(vacancy.id, None)


class InMemoryCompanyRepository:
    def __init__(self, companies=()):
        self.items = {c.id: c for c in companies}

    def get_by_id(self, company_id):
        return self.items.get(company_id)

    def get_all(self):
        return list(self.items.values())


class InMemoryApplicationRepository:
    def __init__(self):
        self.records = {}

    def get_by_vacancy(self, vacancy_id):
        return list(self.records.get(vacancy_id, []))



class StepClock:
    """호출할 때마다 1초씩 증가하는 시계 (생성 순서를 결정적으로 만들기 위함)"""

    def __init__(self, start=NOW):
        self.current = start

    def __call__(self):
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture
def company():
    return Company(id=uuid.uuid4(), name="Test Company", admin_user_id=ADMIN_ID)


@pytest.fixture
def vacancy_repo():
    return InMemoryVacancyRepository()


@pytest.fixture
def company_repo(company):
    return InMemoryCompanyRepository([company])


@pytest.fixture
def application_repo():
    return InMemoryApplicationRepository()


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def create_payload(company):
    """유효한 공고 생성 입력 (시나리오 1 기준)"""
    return {
        "company_id": company.id,
        "title": "Engineer",
        "description": "Great job opportunity",
        "location": "Ho Chi Minh City",
        "quantity": 5,
        "salary_min": Decimal("1000"),
        "salary_max": Decimal("2000"),
        "start_date": NOW + timedelta(days=30),
        "application_deadline": NOW + timedelta(days=15),
        "commission_rule_id": uuid.uuid4(),
    }


def application_record(status, days_to_update=0):
    """applied_at = NOW, last_updated_at = NOW + days_to_update 일"""
    return ApplicationRecord(
        status=status,
        applied_at=NOW,
        last_updated_at=NOW + timedelta(days=days_to_update),
    )

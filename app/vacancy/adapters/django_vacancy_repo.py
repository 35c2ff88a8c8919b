from __future__ import annotations

import dataclasses
import logging
import uuid
from typing import Optional

from common.exceptions import ConcurrencyConflictError
from django.db.models import F
from vacancy.adapters.db_errors import translate_db_errors
from vacancy.domain.vacancy import Vacancy, VacancyStatus
from vacancy.models import Vacancy as VacancyModel

logger = logging.getLogger(__name__)

# 모델 컬럼과 이름이 같은 도메인 필드 (id/company_id/version 은 별도 처리)
_COLUMN_FIELDS = tuple(
    f.name
    for f in dataclasses.fields(Vacancy)
    if f.name not in {"id", "company_id", "version"}
)


def _to_domain(obj: VacancyModel) -> Vacancy:
    values = {name: getattr(obj, name) for name in _COLUMN_FIELDS}
    values["status"] = VacancyStatus(obj.status)
    values["required_skills"] = tuple(obj.required_skills or ())
    return Vacancy(id=obj.id, company_id=obj.company_id, version=obj.version, **values)


def _to_columns(vacancy: Vacancy) -> dict:
    values = {name: getattr(vacancy, name) for name in _COLUMN_FIELDS}
    values["status"] = vacancy.status.value
    values["required_skills"] = list(vacancy.required_skills)
    return values


class DjangoVacancyRepository:
    def get_by_id(self, vacancy_id: uuid.UUID) -> Optional[Vacancy]:
        with translate_db_errors("vacancy.get_by_id"):
            try:
                return _to_domain(VacancyModel.objects.get(id=vacancy_id))
            except VacancyModel.DoesNotExist:
                return None

    def get_all(self) -> list[Vacancy]:
        with translate_db_errors("vacancy.get_all"):
            return [
                _to_domain(obj)
                for obj in VacancyModel.objects.order_by("created_at", "id")
            ]

    def add(self, vacancy: Vacancy) -> Vacancy:
        with translate_db_errors("vacancy.add"):
            obj = VacancyModel.objects.create(
                id=vacancy.id,
                company_id=vacancy.company_id,
                version=vacancy.version,
                **_to_columns(vacancy),
            )
            logger.debug("vacancy_added id=%s company_id=%s", obj.id, obj.company_id)
            return _to_domain(obj)

    def update(self, vacancy: Vacancy) -> Vacancy:
        """
        version 이 일치하는 행만 갱신하고 version 을 1 올립니다.
        갱신된 행이 없으면 다른 요청이 먼저 수정/삭제한 것으로 보고 충돌 처리합니다.
        """
        with translate_db_errors("vacancy.update"):
            updated = VacancyModel.objects.filter(
                id=vacancy.id, version=vacancy.version
            ).update(version=F("version") + 1, **_to_columns(vacancy))
        if updated == 0:
            raise ConcurrencyConflictError(
                f"Vacancy {vacancy.id} changed since version {vacancy.version}"
            )
        logger.debug("vacancy_updated id=%s version=%s", vacancy.id, vacancy.version + 1)
        return dataclasses.replace(vacancy, version=vacancy.version + 1)

    def delete(self, vacancy: Vacancy) -> None:
        with translate_db_errors("vacancy.delete"):
            deleted, _ = VacancyModel.objects.filter(id=vacancy.id).delete()
        logger.debug("vacancy_deleted id=%s rows=%s", vacancy.id, deleted)

from __future__ import annotations

import uuid

from vacancy.adapters.db_errors import translate_db_errors
from vacancy.domain.vacancy import ApplicationRecord
from vacancy.models import VacancyApplication


class DjangoApplicationRepository:
    def get_by_vacancy(self, vacancy_id: uuid.UUID) -> list[ApplicationRecord]:
        with translate_db_errors("application.get_by_vacancy"):
            rows = VacancyApplication.objects.filter(vacancy_id=vacancy_id).values_list(
                "status", "applied_at", "last_updated_at"
            )
            return [
                ApplicationRecord(
                    status=status, applied_at=applied_at, last_updated_at=updated_at
                )
                for status, applied_at, updated_at in rows
            ]

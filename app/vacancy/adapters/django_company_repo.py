from __future__ import annotations

import uuid
from typing import Optional

from vacancy.adapters.db_errors import translate_db_errors
from vacancy.domain.vacancy import Company
from vacancy.models import Company as CompanyModel


def _to_domain(obj: CompanyModel) -> Company:
    return Company(id=obj.id, name=obj.name, admin_user_id=obj.admin_user_id)


class DjangoCompanyRepository:
    def get_by_id(self, company_id: uuid.UUID) -> Optional[Company]:
        with translate_db_errors("company.get_by_id"):
            try:
                return _to_domain(CompanyModel.objects.get(id=company_id))
            except CompanyModel.DoesNotExist:
                return None

    def get_all(self) -> list[Company]:
        with translate_db_errors("company.get_all"):
            return [_to_domain(obj) for obj in CompanyModel.objects.order_by("id")]

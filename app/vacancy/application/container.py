from __future__ import annotations

from typing import Optional

from common.adapters.contextvar_user_context import ContextVarUserContext
from common.ports.user_context import UserContextPort
from django.conf import settings
from vacancy.adapters.django_application_repo import DjangoApplicationRepository
from vacancy.adapters.django_company_repo import DjangoCompanyRepository
from vacancy.adapters.django_vacancy_repo import DjangoVacancyRepository
from vacancy.application.service import VacancyLifecycleService
from vacancy.application.usecases.create_vacancy import CreateVacancyUseCase
from vacancy.application.usecases.delete_vacancy import DeleteVacancyUseCase
from vacancy.application.usecases.get_vacancies import GetVacanciesUseCase
from vacancy.application.usecases.get_vacancy import GetVacancyUseCase
from vacancy.application.usecases.get_vacancy_statistics import (
    GetVacancyStatisticsUseCase,
)
from vacancy.application.usecases.update_vacancy import UpdateVacancyUseCase
from vacancy.domain.rules import VacancyVisibility


def _visibility() -> VacancyVisibility:
    return VacancyVisibility(
        getattr(
            settings,
            "VACANCY_LIST_VISIBILITY",
            VacancyVisibility.COMPANY_ADMIN_OR_CREATOR.value,
        )
    )


def build_vacancy_service(
    user_context: Optional[UserContextPort] = None,
) -> VacancyLifecycleService:
    """
    Vacancy 유스케이스 조립(Dependency Injection).
    - 경계 계층(뷰/컨슈머/관리 명령)은 이 함수만 통해 서비스를 얻도록 통일합니다.
    - 호출마다 새 인스턴스를 만들며 전역 상태를 두지 않습니다.
    """
    vacancy_repo = DjangoVacancyRepository()
    company_repo = DjangoCompanyRepository()
    visibility = _visibility()

    return VacancyLifecycleService(
        user_context=user_context or ContextVarUserContext(),
        create_usecase=CreateVacancyUseCase(
            vacancy_repo=vacancy_repo, company_repo=company_repo
        ),
        update_usecase=UpdateVacancyUseCase(
            vacancy_repo=vacancy_repo, company_repo=company_repo
        ),
        delete_usecase=DeleteVacancyUseCase(
            vacancy_repo=vacancy_repo, company_repo=company_repo
        ),
        list_usecase=GetVacanciesUseCase(
            vacancy_repo=vacancy_repo,
            company_repo=company_repo,
            visibility=visibility,
            max_page_size=int(getattr(settings, "VACANCY_MAX_PAGE_SIZE", 100)),
        ),
        detail_usecase=GetVacancyUseCase(
            vacancy_repo=vacancy_repo, company_repo=company_repo, visibility=visibility
        ),
        statistics_usecase=GetVacancyStatisticsUseCase(
            vacancy_repo=vacancy_repo,
            company_repo=company_repo,
            application_repo=DjangoApplicationRepository(),
            visibility=visibility,
        ),
    )

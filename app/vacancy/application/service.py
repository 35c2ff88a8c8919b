from __future__ import annotations

import uuid
from typing import Optional

from common.application.result import Err, ErrorCode, Result
from common.ports.user_context import UserContextPort
from vacancy.application.usecases.create_vacancy import CreateVacancyUseCase
from vacancy.application.usecases.delete_vacancy import DeleteVacancyUseCase
from vacancy.application.usecases.get_vacancies import GetVacanciesUseCase
from vacancy.application.usecases.get_vacancy import GetVacancyUseCase
from vacancy.application.usecases.get_vacancy_statistics import (
    GetVacancyStatisticsUseCase,
)
from vacancy.application.usecases.update_vacancy import UpdateVacancyUseCase
from vacancy.dtos import (
    CreateVacancyDTO,
    UpdateVacancyDTO,
    VacancyFilterDTO,
    VacancyStatisticsView,
    VacancyView,
)


class VacancyLifecycleService:
    """
    채용 공고 라이프사이클 서비스 (유스케이스 묶음).

    각 메서드는 caller_id 를 직접 받을 수 있고, 생략하면 주입된 UserContext 에서
    호출자를 읽습니다. 호출자를 알 수 없으면 FORBIDDEN 을 돌려줍니다.
    """

    def __init__(
        self,
        *,
        user_context: UserContextPort,
        create_usecase: CreateVacancyUseCase,
        update_usecase: UpdateVacancyUseCase,
        delete_usecase: DeleteVacancyUseCase,
        list_usecase: GetVacanciesUseCase,
        detail_usecase: GetVacancyUseCase,
        statistics_usecase: GetVacancyStatisticsUseCase,
    ):
        self._user_context = user_context
        self._create = create_usecase
        self._update = update_usecase
        self._delete = delete_usecase
        self._list = list_usecase
        self._detail = detail_usecase
        self._statistics = statistics_usecase

    def create_vacancy(
        self, dto: CreateVacancyDTO, caller_id: Optional[str] = None
    ) -> Result[VacancyView]:
        caller = self._caller(caller_id)
        if isinstance(caller, Err):
            return caller
        return self._create.execute(dto=dto, caller_id=caller)

    def update_vacancy(
        self,
        vacancy_id: uuid.UUID,
        dto: UpdateVacancyDTO,
        caller_id: Optional[str] = None,
    ) -> Result[VacancyView]:
        caller = self._caller(caller_id)
        if isinstance(caller, Err):
            return caller
        return self._update.execute(vacancy_id=vacancy_id, dto=dto, caller_id=caller)

    def delete_vacancy(
        self, vacancy_id: uuid.UUID, caller_id: Optional[str] = None
    ) -> Result[None]:
        caller = self._caller(caller_id)
        if isinstance(caller, Err):
            return caller
        return self._delete.execute(vacancy_id=vacancy_id, caller_id=caller)

    def get_vacancies(
        self,
        criteria: Optional[VacancyFilterDTO] = None,
        caller_id: Optional[str] = None,
    ) -> Result[list[VacancyView]]:
        caller = self._caller(caller_id)
        if isinstance(caller, Err):
            return caller
        return self._list.execute(
            caller_id=caller, criteria=criteria or VacancyFilterDTO()
        )

    def get_vacancy_by_id(
        self, vacancy_id: uuid.UUID, caller_id: Optional[str] = None
    ) -> Result[VacancyView]:
        caller = self._caller(caller_id)
        if isinstance(caller, Err):
            return caller
        return self._detail.execute(vacancy_id=vacancy_id, caller_id=caller)

    def get_vacancy_statistics(
        self, vacancy_id: uuid.UUID, caller_id: Optional[str] = None
    ) -> Result[VacancyStatisticsView]:
        caller = self._caller(caller_id)
        if isinstance(caller, Err):
            return caller
        return self._statistics.execute(vacancy_id=vacancy_id, caller_id=caller)

    def _caller(self, caller_id: Optional[str]) -> str | Err:
        resolved = caller_id if caller_id is not None else self._user_context.current_user_id()
        if not resolved:
            return Err(code=ErrorCode.FORBIDDEN, message="Caller identity is unknown")
        return resolved

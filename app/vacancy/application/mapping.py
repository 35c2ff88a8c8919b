from __future__ import annotations

import dataclasses

from vacancy.domain.vacancy import Vacancy
from vacancy.dtos import VacancyView


def vacancy_fields(vacancy: Vacancy) -> dict:
    return {f.name: getattr(vacancy, f.name) for f in dataclasses.fields(vacancy)}


def to_view(vacancy: Vacancy) -> VacancyView:
    data = vacancy_fields(vacancy)
    data.pop("version")
    data["required_skills"] = list(vacancy.required_skills)
    return VacancyView(**data)

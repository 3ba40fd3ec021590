"""
Conversion entre SchoolDto et le modèle School.
"""

from school_registry.models.school import School
from school_registry.schemas.school import SchoolDto


def to_school(dto: SchoolDto) -> School:
    return School(name=dto.name)


def to_school_dto(school: School) -> SchoolDto:
    return SchoolDto(name=school.name)

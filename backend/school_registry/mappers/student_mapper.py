"""
Conversion entre les schémas élèves (StudentDto, StudentResponseDto) et le modèle Student.
Fonctions pures : aucune lecture ni écriture en base.
"""

from typing import Optional

from school_registry.models.school import SchoolRef
from school_registry.models.student import Student
from school_registry.schemas.student import StudentDto, StudentResponseDto


def to_student(dto: Optional[StudentDto]) -> Student:
    """
    Construit un Student à partir du DTO d'entrée.
    L'école est référencée par son id uniquement ; son existence n'est pas vérifiée ici.
    id, age et created_at ne sont pas renseignés.
    """
    if dto is None:
        raise ValueError("The studentDto should not be null")

    student = Student(
        name=dto.name,
        lastname=dto.lastname,
        email=dto.email,
    )
    student.school_ref = SchoolRef(dto.school_id)
    return student


def to_student_response(student: Optional[Student]) -> StudentResponseDto:
    """Projette un Student sur les seuls champs publics (prénom, nom, email)."""
    if student is None:
        raise ValueError("The student should not be null")

    return StudentResponseDto(
        name=student.name,
        lastname=student.lastname,
        email=student.email,
    )

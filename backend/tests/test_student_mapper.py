"""
Tests unitaires du mapper élèves (StudentDto ↔ Student ↔ StudentResponseDto).
"""

from datetime import date

import pytest

from school_registry.mappers.student_mapper import to_student, to_student_response
from school_registry.models.school import SchoolRef
from school_registry.models.student import Student
from school_registry.schemas.student import StudentDto, StudentResponseDto


def make_dto(**kwargs) -> StudentDto:
    return StudentDto(
        name=kwargs.get("name", "John"),
        lastname=kwargs.get("lastname", "Doe"),
        email=kwargs.get("email", "john@doe.com"),
        school_id=kwargs.get("school_id", 1),
    )


# --- to_student ---

def test_to_student_copie_les_champs():
    student = to_student(make_dto())
    assert student.name == "John"
    assert student.lastname == "Doe"
    assert student.email == "john@doe.com"


def test_to_student_reference_ecole_par_id():
    student = to_student(make_dto(school_id=1))
    assert student.school_ref == SchoolRef(1)
    assert student.school_ref.id == 1
    assert student.school_id == 1
    # Référence uniquement : l'école n'est pas chargée
    assert student.school is None


def test_to_student_sans_ecole():
    """school_id absent : la référence est portée telle quelle, sans validation ici."""
    student = to_student(make_dto(school_id=None))
    assert student.school_ref.id is None


def test_to_student_ne_renseigne_pas_les_champs_serveur():
    student = to_student(make_dto())
    assert student.id is None
    assert student.created_at is None
    assert student.age is None


def test_to_student_ne_modifie_pas_le_dto():
    dto = make_dto()
    before = dto.model_dump()
    to_student(dto)
    assert dto.model_dump() == before


def test_to_student_dto_null():
    with pytest.raises(ValueError) as exc:
        to_student(None)
    assert str(exc.value) == "The studentDto should not be null"


# --- to_student_response ---

def test_aller_retour_conserve_nom_prenom_email():
    for dto in (
        make_dto(),
        make_dto(name="Émilie", lastname="Dubois-Martin", email="e.dubois@ecole.be", school_id=7),
        make_dto(name=" Jean ", lastname="O'Neil", email="x"),
    ):
        response = to_student_response(to_student(dto))
        assert (response.name, response.lastname, response.email) == (dto.name, dto.lastname, dto.email)


def test_reponse_n_expose_pas_les_champs_internes():
    student = Student(name="John", lastname="Doe", email="john@doe.com", age=17, created_at=date(2024, 9, 1))
    student.id = 42
    student.school_ref = SchoolRef(3)

    response = to_student_response(student)

    assert response == StudentResponseDto(name="John", lastname="Doe", email="john@doe.com")
    assert set(response.model_dump()) == {"name", "lastname", "email"}


def test_reponse_student_null():
    with pytest.raises(ValueError, match="should not be null"):
        to_student_response(None)

"""
Service métier pour les élèves.
Orchestration pure : mapper + repository, aucune règle métier supplémentaire.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from school_registry.mappers.student_mapper import to_student, to_student_response
from school_registry.repositories.student_repository import StudentRepository
from school_registry.schemas.student import StudentDto, StudentResponseDto

logger = logging.getLogger(__name__)


def save_student(db: Session, data: StudentDto) -> StudentResponseDto:
    """
    Crée un élève et retourne sa projection publique.
    Une ValueError du mapper (DTO absent) est propagée telle quelle.
    """
    student = to_student(data)
    saved = StudentRepository(db).save(student)
    logger.info("Élève %s créé (école %s)", saved.id, saved.school_id)
    return to_student_response(saved)


def get_all_students(db: Session) -> List[StudentResponseDto]:
    """Retourne tous les élèves dans l'ordre fourni par le repository."""
    return [to_student_response(s) for s in StudentRepository(db).find_all()]


def get_student_by_id(db: Session, student_id: int) -> Optional[StudentResponseDto]:
    """Retourne un élève par son ID, ou None si inexistant (pas une erreur)."""
    student = StudentRepository(db).find_by_id(student_id)
    if student is None:
        return None
    return to_student_response(student)


def get_students_by_name(db: Session, name: str) -> List[StudentResponseDto]:
    """Recherche exacte sur le prénom ; 0..n résultats."""
    return [to_student_response(s) for s in StudentRepository(db).find_by_name(name)]


def delete_student(db: Session, student_id: int) -> None:
    """
    Supprime un élève (et son profil en cascade).
    Pas de vérification préalable : un id inexistant est ignoré par le repository.
    """
    if StudentRepository(db).delete_by_id(student_id):
        logger.info("Élève %s supprimé", student_id)

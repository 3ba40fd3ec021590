"""
Router pour les élèves.
Création (POST /api/v1/students), listage, détail, recherche par prénom et suppression.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from school_registry.database import get_db
from school_registry.schemas.student import StudentDto, StudentResponseDto
from school_registry.services import student_service

router = APIRouter(prefix="/api/v1/students", tags=["Élèves"])


@router.post("", response_model=StudentResponseDto, status_code=201, summary="Créer un élève")
def create_student(data: StudentDto, db: Session = Depends(get_db)):
    """Crée un élève rattaché à une école. Champs vides → 400 {champ: message}."""
    return student_service.save_student(db, data)


@router.get("", response_model=List[StudentResponseDto], summary="Lister les élèves")
def list_students(db: Session = Depends(get_db)):
    return student_service.get_all_students(db)


@router.get(
    "/search/{student_name}",
    response_model=List[StudentResponseDto],
    summary="Rechercher des élèves par prénom",
)
def search_students(student_name: str, db: Session = Depends(get_db)):
    """Recherche exacte sur le prénom. Retourne une liste éventuellement vide."""
    return student_service.get_students_by_name(db, student_name)


@router.get("/{student_id}", response_model=StudentResponseDto, summary="Détail d'un élève")
def get_student(student_id: int, db: Session = Depends(get_db)):
    student = student_service.get_student_by_id(db, student_id)
    if student is None:
        raise HTTPException(status_code=404, detail="Élève introuvable.")
    return student


@router.delete("/{student_id}", status_code=204, summary="Supprimer un élève")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    """Supprime un élève et son profil. Un id inexistant n'est pas une erreur."""
    student_service.delete_student(db, student_id)

"""
Router pour les écoles.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from school_registry.database import get_db
from school_registry.schemas.school import SchoolDto
from school_registry.services import school_service

router = APIRouter(prefix="/api/v1/schools", tags=["Écoles"])


@router.post("", response_model=SchoolDto, status_code=201, summary="Créer une école")
def create_school(data: SchoolDto, db: Session = Depends(get_db)):
    """Crée une école. La réponse reprend le corps envoyé, sans l'id généré."""
    return school_service.create_school(db, data)


@router.get("", response_model=List[SchoolDto], summary="Lister les écoles")
def list_schools(db: Session = Depends(get_db)):
    return school_service.get_schools(db)

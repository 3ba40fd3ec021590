"""
Service métier pour les écoles.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from school_registry.mappers.school_mapper import to_school, to_school_dto
from school_registry.repositories.school_repository import SchoolRepository
from school_registry.schemas.school import SchoolDto

logger = logging.getLogger(__name__)


def create_school(db: Session, data: SchoolDto) -> SchoolDto:
    """
    Crée une école.
    Retourne le DTO reçu tel quel, et non l'entité persistée : l'id généré
    n'apparaît donc jamais dans la réponse (comportement conservé volontairement).
    """
    school = SchoolRepository(db).save(to_school(data))
    logger.info("École %s créée : %s", school.id, school.name)
    return data


def get_schools(db: Session) -> List[SchoolDto]:
    """Retourne toutes les écoles, triées par id."""
    return [to_school_dto(s) for s in SchoolRepository(db).find_all()]

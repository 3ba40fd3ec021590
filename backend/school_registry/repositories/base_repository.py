"""
Repository générique : opérations CRUD communes sur un modèle SQLAlchemy.
Chaque écriture est validée (commit) immédiatement ; aucune transaction multi-entités.
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from school_registry.database import Base

T = TypeVar("T", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Capacité de persistance minimale : save, find_all, find_by_id,
    find_by_field et delete_by_id. Les repositories spécifiques en héritent.
    """

    model: Type[T]

    def __init__(self, db: Session, model: Optional[Type[T]] = None):
        self.db = db
        if model is not None:
            self.model = model

    def save(self, obj: T) -> T:
        """
        Persiste l'entité et la recharge depuis la base.
        L'id et les valeurs par défaut (created_at) sont disponibles au retour.
        Les erreurs d'intégrité (email dupliqué, école manquante) sont propagées.
        """
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def find_all(self) -> List[T]:
        """Retourne toutes les entités, triées par id."""
        return list(
            self.db.execute(select(self.model).order_by(self.model.id)).scalars().all()
        )

    def find_by_id(self, id: int) -> Optional[T]:
        """Retourne l'entité ou None si inexistante."""
        return self.db.get(self.model, id)

    def find_by_field(self, field: str, value: Any) -> List[T]:
        """
        Recherche par égalité stricte sur une colonne.
        Lève une ValueError si le champ n'existe pas sur le modèle.
        """
        if field not in self.model.__table__.columns:
            raise ValueError(f"Champ inconnu pour {self.model.__name__} : '{field}'.")

        column = getattr(self.model, field)
        return list(
            self.db.execute(
                select(self.model).where(column == value).order_by(self.model.id)
            ).scalars().all()
        )

    def delete_by_id(self, id: int) -> bool:
        """
        Supprime l'entité via l'ORM (les cascades déclarées s'appliquent).
        Retourne True si supprimée, False si introuvable (aucune erreur).
        """
        obj = self.find_by_id(id)
        if obj is None:
            logger.debug("%s %s introuvable, suppression ignorée", self.model.__name__, id)
            return False
        self.db.delete(obj)
        self.db.commit()
        return True

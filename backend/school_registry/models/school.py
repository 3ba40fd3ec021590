"""
Modèle SQLAlchemy pour la table schools.
Une école possède plusieurs élèves (relation 1-N, côté propriétaire : Student.school_id).
"""

from typing import NamedTuple, Optional

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from school_registry.database import Base


class SchoolRef(NamedTuple):
    """Référence vers une école par son seul identifiant (clé étrangère, sans hydratation)."""
    id: Optional[int]


class School(Base):
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)

    students = relationship("Student", back_populates="school")

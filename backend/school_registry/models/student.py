"""
Modèle SQLAlchemy pour la table students.
created_at est posé à l'INSERT par le défaut de colonne et n'est jamais modifié ensuite.
"""

from datetime import date
from typing import Optional

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship, validates

from school_registry.database import Base
from school_registry.models.school import SchoolRef


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    lastname = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    age = Column(Integer, nullable=False, default=0)
    created_at = Column(Date, nullable=False, default=date.today)
    school_id = Column(Integer, ForeignKey("schools.id"), nullable=False)

    school = relationship("School", back_populates="students")
    # L'élève est propriétaire de son profil : suppression en cascade
    student_profile = relationship(
        "StudentProfile",
        back_populates="student",
        uselist=False,
        cascade="all, delete-orphan",
    )

    @property
    def school_ref(self) -> SchoolRef:
        return SchoolRef(self.school_id)

    @school_ref.setter
    def school_ref(self, ref: Optional[SchoolRef]) -> None:
        self.school_id = ref.id if ref is not None else None

    @validates("created_at")
    def _created_at_immutable(self, key, value):
        if self.created_at is not None and value != self.created_at:
            raise ValueError("created_at ne peut pas être modifié après la création.")
        return value

"""
Modèle SQLAlchemy pour la table student_profiles (relation 1-1 avec students).
"""

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from school_registry.database import Base


class StudentProfile(Base):
    __tablename__ = "student_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    bio = Column(Text, nullable=True)
    student_id = Column(
        Integer, ForeignKey("students.id", ondelete="CASCADE"), unique=True, nullable=False
    )

    student = relationship("Student", back_populates="student_profile")

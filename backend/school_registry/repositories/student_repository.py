"""
Repository des élèves.
"""

from typing import List

from school_registry.models.student import Student
from school_registry.repositories.base_repository import BaseRepository


class StudentRepository(BaseRepository[Student]):
    model = Student

    def find_by_name(self, name: str) -> List[Student]:
        """Élèves dont le prénom correspond exactement (sensible à la casse)."""
        return self.find_by_field("name", name)

from school_registry.models.school import School
from school_registry.repositories.base_repository import BaseRepository


class SchoolRepository(BaseRepository[School]):
    model = School

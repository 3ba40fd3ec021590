from school_registry.repositories.base_repository import BaseRepository  # noqa: F401
from school_registry.repositories.school_repository import SchoolRepository  # noqa: F401
from school_registry.repositories.student_repository import StudentRepository  # noqa: F401

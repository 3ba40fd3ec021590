# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les relations inter-modèles
# (Student → School, StudentProfile → Student).

from school_registry.models.school import School, SchoolRef  # noqa: F401  — doit précéder student
from school_registry.models.student import Student  # noqa: F401
from school_registry.models.student_profile import StudentProfile  # noqa: F401

"""
Schémas Pydantic pour les élèves.
StudentDto (entrée) et StudentResponseDto (sortie) sont volontairement distincts :
la réponse n'expose ni id, ni âge, ni date de création, ni école.
"""

from typing import Optional

from pydantic import BaseModel, ValidationInfo, field_validator

EMPTY_FIELD_MESSAGES = {
    "name": "Le prénom ne peut pas être vide.",
    "lastname": "Le nom ne peut pas être vide.",
    "email": "L'email ne peut pas être vide.",
}


class StudentDto(BaseModel):
    """Schéma de création d'un élève (POST /students)."""
    name: str
    lastname: str
    email: str
    school_id: Optional[int] = None

    model_config = {"frozen": True}

    @field_validator("name", "lastname", "email", mode="before")
    @classmethod
    def not_empty(cls, v, info: ValidationInfo):
        # Valeur conservée telle quelle : seul le contenu vide est rejeté
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError(EMPTY_FIELD_MESSAGES[info.field_name])
        return v


class StudentResponseDto(BaseModel):
    """Schéma de réponse pour un élève : projection réduite aux champs publics."""
    name: str
    lastname: str
    email: str

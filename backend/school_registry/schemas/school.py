"""
Schéma Pydantic pour les écoles : même forme en entrée et en sortie.
"""

from pydantic import BaseModel


class SchoolDto(BaseModel):
    name: str

    model_config = {"frozen": True}

"""Health professional models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from models.choices import BrazilianState, choice_value
from utils.formatters import digits_only


class Profession(str, Enum):
    """Supported health professions."""

    MEDICO = "medico"
    DENTISTA = "dentista"
    NUTRICIONISTA = "nutricionista"
    PSICOLOGO = "psicologo"
    FISIOTERAPEUTA = "fisioterapeuta"
    FONOAUDIOLOGO = "fonoaudiologo"
    TERAPEUTA_OCUPACIONAL = "terapeuta-ocupacional"

    @property
    def label(self) -> str:
        return PROFESSION_LABELS[self][0]

    @property
    def registration_authority(self) -> str:
        """Short code of the licensing council (CRM, CRO, ...)."""
        return PROFESSION_LABELS[self][1]


# profession -> (display label, registration authority)
PROFESSION_LABELS = {
    Profession.MEDICO: ("Médico", "CRM"),
    Profession.DENTISTA: ("Dentista", "CRO"),
    Profession.NUTRICIONISTA: ("Nutricionista", "CRN"),
    Profession.PSICOLOGO: ("Psicólogo", "CRP"),
    Profession.FISIOTERAPEUTA: ("Fisioterapeuta", "CREFITO"),
    Profession.FONOAUDIOLOGO: ("Fonoaudiólogo", "CRFa"),
    Profession.TERAPEUTA_OCUPACIONAL: ("Terapeuta Ocupacional", "CREFITO"),
}


def registration_label(profession: str) -> str:
    """Registration authority for a profession value, "" when unset."""
    if not profession:
        return ""
    return Profession(profession).registration_authority


class Professional(BaseModel):
    """One staff member listed on the form."""

    id: str = Field(..., description="Session-stable row id")
    professional_name: str = ""
    profession: str = ""
    registration_number: str = Field("", description="Digits only")
    registration_state: str = ""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "professionalName": "Dr. João Silva",
                "profession": "medico",
                "registrationNumber": "123456",
                "registrationState": "SP",
            }
        },
    )

    @field_validator("profession")
    @classmethod
    def validate_profession(cls, v: Any) -> str:
        return choice_value(Profession, v)

    @field_validator("registration_state")
    @classmethod
    def validate_registration_state(cls, v: Any) -> str:
        return choice_value(BrazilianState, v)

    @field_validator("registration_number")
    @classmethod
    def validate_registration_number(cls, v: str) -> str:
        """Normalize to digits only."""
        return digits_only(v)

    def is_draft(self) -> bool:
        """Rows without a name are not submitted."""
        return not self.professional_name.strip()

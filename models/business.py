"""Business identity and address models."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from models.choices import BrazilianState, choice_value
from utils.formatters import mask_phone, mask_postal_code

# Free-text fields the controller may set directly
TEXT_FIELDS = (
    "business_name",
    "city",
    "street",
    "neighborhood",
    "number",
    "complement",
)


class BusinessRecord(BaseModel):
    """
    Top-level business data of one onboarding session.

    Phone and CEP are re-masked on every assignment, so the stored value
    is always in display form.
    """

    business_name: str = ""
    phone: str = ""
    cep: str = ""
    city: str = ""
    state: str = ""
    street: str = ""
    neighborhood: str = ""
    number: str = ""
    complement: str = ""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "businessName": "Clínica Saúde Total",
                "phone": "(11) 98888-7777",
                "cep": "01001-000",
                "city": "São Paulo",
                "state": "SP",
                "street": "Praça da Sé",
                "neighborhood": "Sé",
                "number": "100",
                "complement": "Sala 12",
            }
        },
    )

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        """Apply the phone mask."""
        return mask_phone(v)

    @field_validator("cep")
    @classmethod
    def validate_cep(cls, v: str) -> str:
        """Apply the CEP mask."""
        return mask_postal_code(v)

    @field_validator("state")
    @classmethod
    def validate_state(cls, v: Any) -> str:
        """Only UF codes (or "" when unset) are accepted."""
        return choice_value(BrazilianState, v)


class ResolvedAddress(BaseModel):
    """Address returned by the postal code lookup."""

    city: str = ""
    state: str = ""
    street: str = ""
    neighborhood: str = ""

    @field_validator("state", mode="before")
    @classmethod
    def validate_state(cls, v: Any) -> str:
        """Unknown UF codes are dropped instead of rejected."""
        if not isinstance(v, str):
            return ""
        code = v.strip().upper()
        if code not in BrazilianState.__members__:
            return ""
        return code

    @classmethod
    def from_viacep(cls, data: Dict[str, Any]) -> "ResolvedAddress":
        """Build from a ViaCEP JSON body; missing keys become empty."""
        return cls(
            city=data.get("localidade") or "",
            state=data.get("uf") or "",
            street=data.get("logradouro") or "",
            neighborhood=data.get("bairro") or "",
        )

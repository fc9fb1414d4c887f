"""Procedure (service catalog) model."""

from pydantic import BaseModel, ConfigDict, Field


class Procedure(BaseModel):
    """Procedure model."""

    id: str = Field(..., description="Session-stable row id")
    name: str = ""
    price: str = Field("", description="Decimal string, e.g. 150.00")
    duration: str = Field("", description="Duration in minutes")
    description: str = ""

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "name": "Consulta",
                "price": "250.00",
                "duration": "50",
                "description": "Primeira consulta",
            }
        },
    )

    def is_draft(self) -> bool:
        return not self.name.strip()

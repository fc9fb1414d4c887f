"""Working hours models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from utils.constants import TIME_SLOTS


class Weekday(str, Enum):
    """Week days in calendar order, starting Monday."""

    SEGUNDA = "segunda"
    TERCA = "terca"
    QUARTA = "quarta"
    QUINTA = "quinta"
    SEXTA = "sexta"
    SABADO = "sabado"
    DOMINGO = "domingo"

    @property
    def label(self) -> str:
        return WEEKDAY_LABELS[self]


WEEKDAY_LABELS = {
    Weekday.SEGUNDA: "Segunda-feira",
    Weekday.TERCA: "Terça-feira",
    Weekday.QUARTA: "Quarta-feira",
    Weekday.QUINTA: "Quinta-feira",
    Weekday.SEXTA: "Sexta-feira",
    Weekday.SABADO: "Sábado",
    Weekday.DOMINGO: "Domingo",
}


class ScheduleEntry(BaseModel):
    """Opening hours of a single day."""

    enabled: bool = False
    start: str = ""
    end: str = ""

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {"enabled": True, "start": "08:00", "end": "18:00"}
        },
    )

    @field_validator("start", "end")
    @classmethod
    def validate_time_slot(cls, v: Any) -> str:
        """Times are on-the-hour slots "00:00".."23:00" ("" when unset)."""
        if v is None or v == "":
            return ""
        if v not in TIME_SLOTS:
            raise ValueError(f"{v!r} is not an on-the-hour time slot")
        return v

"""Pydantic models for data validation and serialization."""

from .business import BusinessRecord, ResolvedAddress
from .choices import BrazilianState
from .payload import IntakePayload
from .procedure import Procedure
from .professional import Profession, Professional, registration_label
from .schedule import ScheduleEntry, Weekday

__all__ = [
    "BrazilianState",
    "BusinessRecord",
    "IntakePayload",
    "Procedure",
    "Profession",
    "Professional",
    "ResolvedAddress",
    "ScheduleEntry",
    "Weekday",
    "registration_label",
]

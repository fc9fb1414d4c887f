"""Intake webhook payload."""

from typing import Any, Dict, List

from pydantic import Field

from models.business import BusinessRecord
from models.procedure import Procedure
from models.professional import Professional
from models.schedule import ScheduleEntry


class IntakePayload(BusinessRecord):
    """
    Body posted to the intake endpoint.

    Business fields are flattened at the top level. Only submittable rows
    (named professionals and procedures, enabled days) are expected here;
    filtering happens when the payload is built.
    """

    slug: str = ""
    professionals: List[Professional] = Field(default_factory=list)
    procedures: List[Procedure] = Field(default_factory=list)
    working_hours: Dict[str, ScheduleEntry] = Field(default_factory=dict)
    timestamp: str = Field(..., description="ISO 8601 UTC submission time")
    triggered_from: str = Field(..., alias="triggered_from")

    def to_json_dict(self) -> Dict[str, Any]:
        """Serialize with the wire field names (camelCase)."""
        return self.model_dump(mode="json", by_alias=True)

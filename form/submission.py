"""
Submission pipeline: validate, build the payload, post it, then reset the
form on success or keep it on failure.

State machine: IDLE -> SUBMITTING -> IDLE. A submit issued while another
one is in flight is ignored (no queue, no notification).
"""

from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from clients.intake import IntakeClient
from config import settings
from form.entities import EntityList, IdSequence, SlugField
from form.notifications import Notification, NotificationSink, NotificationVariant
from form.schedule import ScheduleModel
from models.business import BusinessRecord
from models.payload import IntakePayload
from models.procedure import Procedure
from models.professional import Professional
from utils.constants import (
    SUBMISSION_FAILURE_DESCRIPTION,
    SUBMISSION_FAILURE_TITLE,
    SUBMISSION_SUCCESS_DESCRIPTION,
    SUBMISSION_SUCCESS_TITLE,
    VALIDATION_ERROR_TITLE,
)
from utils.datetime_utils import to_iso_string, utc_now
from utils.exceptions import SubmissionTransportError, ValidationError
from utils.logging_config import setup_logging
from utils.validation import validate_submission

logger = setup_logging(name=__name__)


class FormState:
    """All mutable data of one form session."""

    def __init__(self, ids: Optional[IdSequence] = None):
        self.ids = ids or IdSequence()
        self.business = BusinessRecord()
        self.slug = SlugField()
        self.professionals: EntityList[Professional] = EntityList(
            lambda row_id: Professional(id=row_id), self.ids
        )
        self.procedures: EntityList[Procedure] = EntityList(
            lambda row_id: Procedure(id=row_id), self.ids
        )
        self.schedule = ScheduleModel()

    def reset(self) -> None:
        """Back to the initial empty form (one stub row per list)."""
        self.business = BusinessRecord()
        self.slug.reset()
        self.professionals.reset()
        self.procedures.reset()
        self.schedule.reset()


def build_payload(
    form: FormState, origin: str, submitted_at: Optional[datetime] = None
) -> IntakePayload:
    """
    Assemble the intake payload from the current form.

    Draft professionals/procedures (empty name) and disabled days are
    left out.
    """
    return IntakePayload(
        **form.business.model_dump(),
        slug=form.slug.value,
        professionals=[row.model_copy() for row in form.professionals.submittable()],
        procedures=[row.model_copy() for row in form.procedures.submittable()],
        working_hours=form.schedule.enabled_entries(),
        timestamp=to_iso_string(submitted_at or utc_now()),
        triggered_from=origin,
    )


class SubmissionState(str, Enum):
    """Pipeline state."""

    IDLE = "idle"
    SUBMITTING = "submitting"


class SubmissionOutcome(str, Enum):
    """Result of a submit attempt."""

    SUCCESS = "success"
    FAILED = "failed"  # transport error, form kept
    INVALID = "invalid"  # blocked by validation, form kept
    IGNORED = "ignored"  # another submission was in flight


class SubmissionPipeline:
    """Serializes submissions of a form to the intake endpoint."""

    def __init__(
        self,
        intake: IntakeClient,
        notify: NotificationSink,
        origin: Optional[str] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.intake = intake
        self.notify = notify
        self.origin = origin or settings.site_origin
        self._clock = clock
        self.state = SubmissionState.IDLE

    @property
    def is_submitting(self) -> bool:
        return self.state == SubmissionState.SUBMITTING

    async def submit(self, form: FormState) -> SubmissionOutcome:
        """
        Run one submission.

        Returns:
            The outcome; the pipeline is IDLE again when this returns
        """
        if self.is_submitting:
            logger.info("Submission already in progress, ignoring submit")
            return SubmissionOutcome.IGNORED

        try:
            validate_submission(form.professionals)
        except ValidationError as e:
            logger.info(f"Submission blocked by validation: {e.professional_ids}")
            self.notify(
                Notification(
                    title=VALIDATION_ERROR_TITLE,
                    description=e.message,
                    variant=NotificationVariant.DESTRUCTIVE,
                )
            )
            return SubmissionOutcome.INVALID

        self.state = SubmissionState.SUBMITTING
        try:
            payload = build_payload(form, self.origin, self._clock())
            await self.intake.send(payload.to_json_dict())
        except SubmissionTransportError as e:
            logger.error(f"Error sending data: {e}", exc_info=True)
            self.notify(
                Notification(
                    title=SUBMISSION_FAILURE_TITLE,
                    description=SUBMISSION_FAILURE_DESCRIPTION,
                    variant=NotificationVariant.DESTRUCTIVE,
                )
            )
            return SubmissionOutcome.FAILED
        finally:
            self.state = SubmissionState.IDLE

        logger.info(
            f"Submitted {payload.business_name!r}: "
            f"{len(payload.professionals)} professionals, "
            f"{len(payload.procedures)} procedures, "
            f"{len(payload.working_hours)} open days"
        )
        self.notify(
            Notification(
                title=SUBMISSION_SUCCESS_TITLE,
                description=SUBMISSION_SUCCESS_DESCRIPTION,
            )
        )
        form.reset()
        return SubmissionOutcome.SUCCESS

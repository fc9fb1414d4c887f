"""Onboarding form state, side effects and submission."""

from .controller import FormController
from .entities import EntityList, IdSequence, SlugField
from .notifications import Notification, NotificationLog, NotificationVariant
from .schedule import ScheduleModel
from .submission import (
    FormState,
    SubmissionOutcome,
    SubmissionPipeline,
    SubmissionState,
    build_payload,
)

__all__ = [
    "EntityList",
    "FormController",
    "FormState",
    "IdSequence",
    "Notification",
    "NotificationLog",
    "NotificationVariant",
    "ScheduleModel",
    "SlugField",
    "SubmissionOutcome",
    "SubmissionPipeline",
    "SubmissionState",
    "build_payload",
]

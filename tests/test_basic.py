"""
Basic unit tests for form components.
"""

from form.notifications import Notification, NotificationLog, NotificationVariant
from form.submission import FormState, SubmissionOutcome, SubmissionState
from utils.datetime_utils import to_iso_string, utc_now


def test_submission_enums():
    """Test submission enums."""
    assert SubmissionState.IDLE.value == "idle"
    assert SubmissionState.SUBMITTING.value == "submitting"
    assert SubmissionOutcome.IGNORED.value == "ignored"


def test_initial_form_state():
    """Test a fresh form has one stub row per list and no open days."""
    form = FormState()

    assert len(form.professionals) == 1
    assert len(form.procedures) == 1
    assert form.schedule.enabled_entries() == {}
    assert form.slug.value == ""
    assert form.slug.touched is False


def test_notification_log():
    """Test notifications are kept in order."""
    log = NotificationLog()
    assert log.last is None

    log(Notification(title="a"))
    log(Notification(title="b", variant=NotificationVariant.DESTRUCTIVE))

    assert [n.title for n in log.notifications] == ["a", "b"]
    assert log.last.is_error


def test_iso_timestamp_is_utc():
    """Test timestamps use the Z suffix."""
    stamp = to_iso_string(utc_now())
    assert stamp.endswith("Z")
    assert "+" not in stamp

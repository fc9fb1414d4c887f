"""
Unit tests for the weekly schedule model.
"""

import pydantic
import pytest

from form.schedule import ScheduleModel
from models.schedule import Weekday


@pytest.fixture
def schedule():
    return ScheduleModel()


def test_all_days_disabled_initially(schedule):
    days = [day for day, _ in schedule]

    assert days == list(Weekday)
    assert all(not entry.enabled for _, entry in schedule)
    assert schedule.enabled_entries() == {}


def test_update_and_enabled_entries(schedule):
    schedule.update("segunda", "enabled", True)
    schedule.update("segunda", "start", "08:00")
    schedule.update("segunda", "end", "18:00")
    schedule.update(Weekday.SABADO, "enabled", True)

    entries = schedule.enabled_entries()

    assert list(entries) == ["segunda", "sabado"]
    assert entries["segunda"].start == "08:00"
    assert entries["segunda"].end == "18:00"
    assert entries["sabado"].start == ""


def test_disabling_keeps_times(schedule):
    schedule.update("terca", "enabled", True)
    schedule.update("terca", "start", "09:00")
    schedule.update("terca", "enabled", False)

    assert schedule["terca"].start == "09:00"
    assert "terca" not in schedule.enabled_entries()


def test_enabled_entries_are_snapshots(schedule):
    schedule.update("quarta", "enabled", True)
    snapshot = schedule.enabled_entries()

    schedule.update("quarta", "start", "10:00")

    assert snapshot["quarta"].start == ""


def test_unknown_day_or_field(schedule):
    with pytest.raises(ValueError):
        schedule.update("feriado", "enabled", True)
    with pytest.raises(ValueError):
        schedule.update("segunda", "lunch", "12:00")


def test_time_must_be_slot(schedule):
    with pytest.raises(pydantic.ValidationError):
        schedule.update("segunda", "start", "08:15")


def test_reset(schedule):
    schedule.update("domingo", "enabled", True)
    schedule.reset()

    assert schedule.enabled_entries() == {}

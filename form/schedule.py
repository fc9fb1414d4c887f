"""Weekly opening hours: one fixed entry per weekday."""

from typing import Dict, Iterator, Tuple, Union

from models.schedule import ScheduleEntry, Weekday

_FIELDS = ("enabled", "start", "end")


class ScheduleModel:
    """
    Seven entries keyed by weekday, Monday first.

    Days are never added or removed. Disabling a day keeps its times;
    disabled days are simply left out of the submission.
    """

    def __init__(self):
        self._entries: Dict[Weekday, ScheduleEntry] = {}
        self.reset()

    def __iter__(self) -> Iterator[Tuple[Weekday, ScheduleEntry]]:
        return iter(list(self._entries.items()))

    def __getitem__(self, day: Union[Weekday, str]) -> ScheduleEntry:
        return self._entries[Weekday(day)]

    def update(self, day: Union[Weekday, str], field: str, value) -> None:
        """
        Set enabled/start/end for one day.

        Raises:
            ValueError: If the day or field is unknown or the value is
                not allowed (times must be on-the-hour slots)
        """
        if field not in _FIELDS:
            raise ValueError(f"Unknown schedule field {field!r}")
        setattr(self._entries[Weekday(day)], field, value)

    def enabled_entries(self) -> Dict[str, ScheduleEntry]:
        """Enabled days keyed by day name, in week order."""
        return {
            day.value: entry.model_copy()
            for day, entry in self._entries.items()
            if entry.enabled
        }

    def reset(self) -> None:
        self._entries = {day: ScheduleEntry() for day in Weekday}

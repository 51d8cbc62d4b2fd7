"""Range identifiers a dashboard session can select."""

from enum import Enum

from ..errors import ValidationFailed


class TimeRange(str, Enum):
    TODAY = "today"
    YESTERDAY = "yesterday"
    THIS_WEEK = "thisWeek"
    THIS_MONTH = "thisMonth"
    CUSTOM_RANGE = "customRange"

    @property
    def is_single_day(self) -> bool:
        return self in (TimeRange.TODAY, TimeRange.YESTERDAY)

    @property
    def is_preset(self) -> bool:
        return self is not TimeRange.CUSTOM_RANGE

    @classmethod
    def parse(cls, value: str) -> "TimeRange":
        """
        Resolve a wire value ("thisWeek") or member name ("THIS_WEEK").

        Raises:
            ValidationFailed: For anything else.
        """
        try:
            return cls(value)
        except ValueError:
            pass
        try:
            return cls[value.upper()]
        except KeyError:
            raise ValidationFailed(f"Unknown time range {value!r}") from None


PRESET_RANGES = tuple(r for r in TimeRange if r.is_preset)

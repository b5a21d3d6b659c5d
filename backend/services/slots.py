from dataclasses import dataclass
from datetime import datetime, time

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def parse_date(value: str) -> str:
    """Normalize a calendar date to YYYY-MM-DD, raising ValueError if invalid."""
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date().isoformat()
    except ValueError:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD") from None


def parse_time(value: str) -> time:
    try:
        return datetime.strptime(value.strip(), TIME_FORMAT).time()
    except ValueError:
        raise ValueError(f"Invalid time '{value}', expected HH:MM") from None


@dataclass(frozen=True)
class TimeSlot:
    """A reservation slot on a single day."""
    start: time
    end: time

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError("Slot end time must be after its start time")

    @classmethod
    def parse(cls, start: str, end: str) -> "TimeSlot":
        return cls(parse_time(start), parse_time(end))

    @property
    def start_text(self) -> str:
        return self.start.strftime(TIME_FORMAT)

    @property
    def end_text(self) -> str:
        return self.end.strftime(TIME_FORMAT)

    def overlaps(self, other: "TimeSlot") -> bool:
        """True when either slot starts inside the other, boundaries included.

        10:00-11:00 and 11:00-12:00 overlap under this rule.
        """
        return self.start <= other.end and other.start <= self.end

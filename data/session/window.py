"""Session time window"""

from dataclasses import dataclass
from datetime import datetime

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


@dataclass(frozen=True)
class SessionWindow:
    """Start and end of a surf session (station local time)"""
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError(f"Session end {self.end} is not after start {self.start}")

    @classmethod
    def parse(cls, date: str, start_time: str, end_time: str) -> "SessionWindow":
        """Build a window from "YYYY-MM-DD" and two "HH:MM" strings"""
        day = datetime.strptime(date.strip(), DATE_FORMAT)
        start = datetime.strptime(start_time.strip(), TIME_FORMAT)
        end = datetime.strptime(end_time.strip(), TIME_FORMAT)
        return cls(
            start=day.replace(hour=start.hour, minute=start.minute),
            end=day.replace(hour=end.hour, minute=end.minute),
        )

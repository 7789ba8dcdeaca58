# models.py

from dataclasses import dataclass
from typing import Any, Optional

# Fixed column layout of the timesheet
HEADER_ROW = ["ID", "Date", "Start Time", "End Time", "Description", "Duration (Hours)"]


@dataclass
class Entry:
    """One time-tracking record, transcribed verbatim into a sheet row."""

    id: Any = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    description: Optional[str] = None
    duration: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        """
        Build an Entry from a decoded JSON object.
        Missing keys are left as None; values are not validated or coerced.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Entry must be a JSON object, got {type(data).__name__}")

        return cls(
            id=data.get("id"),
            date=data.get("date"),
            start_time=data.get("startTime"),
            end_time=data.get("endTime"),
            description=data.get("description"),
            duration=data.get("duration"),
        )

    def to_row(self) -> list:
        values = [
            self.id,            # ID
            self.date,          # Date
            self.start_time,    # Start Time
            self.end_time,      # End Time
            self.description,   # Description
            self.duration,      # Duration (Hours)
        ]
        return ["" if value is None else value for value in values]


@dataclass
class IngestResult:
    status: str
    message: str

    @classmethod
    def success(cls, count: int) -> "IngestResult":
        return cls(status="success", message=f"Added {count} entries.")

    @classmethod
    def error(cls, exc: BaseException) -> "IngestResult":
        # str(KeyError()) and friends can be blank
        return cls(status="error", message=str(exc) or type(exc).__name__)

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def to_dict(self) -> dict:
        return {"status": self.status, "message": self.message}

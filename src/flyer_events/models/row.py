"""Spreadsheet row model and the null-cost display policy."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

# Header labels for columns A through J, in append order
COLUMNS = [
    "Date",
    "Event Name",
    "Type",
    "Start Time",
    "End Time",
    "Location",
    "Address",
    "Description",
    "Cost",
    "Link",
]


class NullCostPolicy(str, Enum):
    """What the Cost column shows when the flyer gave no cost."""

    FREE = "free"
    UNKNOWN = "unknown"


class FormattedRow(BaseModel):
    """One spreadsheet row: ten display strings in column order."""

    model_config = ConfigDict(frozen=True)

    date: str
    event_name: str
    type: str
    start_time: str
    end_time: str
    location: str
    address: str
    description: str
    cost: str
    link: str

    def to_values(self) -> list[str]:
        """Return the cell values in column order (A:J)."""
        return [
            self.date,
            self.event_name,
            self.type,
            self.start_time,
            self.end_time,
            self.location,
            self.address,
            self.description,
            self.cost,
            self.link,
        ]

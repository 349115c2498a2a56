# Appointment ("avtale") record plus pure list helpers.
#
# JSON shape (one element of the store array):
#   {"tittel": str, "sted": str, "varighet": int,
#    "starttidspunkt": "YYYY-MM-DD HH:MM:SS"}   # local time, no offset

from __future__ import annotations
from datetime import date, datetime
from typing import Iterable, List

from dateutil import tz
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from utils.config import CONFIG


def _stamp(dt: datetime) -> str:
    return dt.strftime(CONFIG["formats"]["storage"])


class Appointment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(alias="tittel")
    location: str = Field(alias="sted")
    duration: int = Field(alias="varighet", strict=True)   # sign and range are not checked
    start: datetime = Field(alias="starttidspunkt")

    @field_validator("start", mode="before")
    @classmethod
    def parse_start(cls, value):
        if isinstance(value, str):
            value = datetime.strptime(value, CONFIG["formats"]["storage"])
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.replace(tzinfo=tz.tzlocal())
            return value.astimezone(tz.tzlocal())
        raise ValueError(f"expected a date string, got {type(value).__name__}")

    @field_serializer("start")
    def format_start(self, value: datetime) -> str:
        return _stamp(value)

    def to_record(self) -> dict:
        """Dict in store format (Norwegian keys, formatted start)."""
        return self.model_dump(mode="json", by_alias=True)

    def __str__(self) -> str:
        return (f"Tittel: {self.title}, Sted: {self.location}, "
                f"Varighet: {self.duration}, "
                f"Starttidspunkt: {_stamp(self.start)}")


def format_listing(appointments: Iterable[Appointment]) -> List[str]:
    return [f"Index:{i} Avtale: {a}" for i, a in enumerate(appointments)]


def appointments_on_date(appointments: Iterable[Appointment], day: date) -> List[Appointment]:
    """All appointments whose local start date is `day`, in list order."""
    return [a for a in appointments if a.start.date() == day]


def search_appointments(appointments: Iterable[Appointment], needle: str) -> List[Appointment]:
    """
    Title substring search. Only the needle is lower-cased, the stored title
    is compared as-is: "Team Sync" does not match "sync" (or "Sync").
    """
    key = needle.lower()
    return [a for a in appointments if key in a.title]

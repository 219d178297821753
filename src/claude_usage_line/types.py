"""Data types for Claude usage line."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DisplayMode(str, Enum):
    """Which usage windows to show."""

    SESSION = "session"
    WEEK = "week"
    BOTH = "both"


class ResetStyle(str, Enum):
    """How reset instants are rendered."""

    REMAINING = "remaining"  # "2h 15m", "3d 4h"
    CLOCK = "clock"  # "14:05", "2:05pm"


class UsageWindow(BaseModel):
    """A single rate-limit window from the usage endpoint."""

    utilization: Optional[float] = None
    resets_at: Optional[str] = None

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class UsageSnapshot(BaseModel):
    """Parsed response of the OAuth usage endpoint."""

    five_hour: UsageWindow = Field(default_factory=UsageWindow)
    seven_day: UsageWindow = Field(default_factory=UsageWindow)

    model_config = ConfigDict(extra="ignore")

    @field_validator("five_hour", "seven_day", mode="before")
    @classmethod
    def _null_window(cls, value: object) -> object:
        # The API sends null for windows that have not started yet
        return {} if value is None else value


@dataclass
class DisplayOptions:
    """Resolved display settings (config file merged with CLI flags)."""

    mode: DisplayMode = DisplayMode.BOTH
    session_label: str = "Session"
    week_label: str = "Week"
    text_color: str = "light-grey"
    show_bars: bool = True
    bar_length: int = 10
    use_24h: bool = False
    reset_style: ResetStyle = ResetStyle.REMAINING
    timeout: float = 3.0
    debug: bool = False

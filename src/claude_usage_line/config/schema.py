"""Configuration schema using Pydantic for validation."""

from pydantic import BaseModel, Field

from ..types import ResetStyle


class LabelsConfig(BaseModel):
    """Default labels for the two usage windows."""

    session: str = "Session"
    week: str = "Week"

    model_config = {"extra": "forbid"}


class UsageLineConfig(BaseModel):
    """Persistent display defaults, overridden by command-line flags."""

    text_color: str = "light-grey"
    show_bars: bool = True
    bar_length: int = Field(default=10, ge=1, le=100)
    use_24h: bool = False
    reset_style: ResetStyle = ResetStyle.REMAINING
    timeout: float = Field(default=3.0, gt=0)
    labels: LabelsConfig = Field(default_factory=LabelsConfig)

    model_config = {"extra": "forbid"}

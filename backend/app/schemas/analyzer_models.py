"""
Pydantic schemas for the analyzer state and its presentation output.
"""

from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from typing import List, Optional
from .common import MetricsResult, FrequencyEntry

WINDOW_MIN = 5
WINDOW_STEP = 5


class AnalysisInput(BaseModel):
    """Immutable snapshot of everything needed to analyze one text change."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    exclude_spaces: bool = False
    char_limit: Optional[PositiveInt] = None


class DisplayWindow(BaseModel):
    """Number of top-ranked characters currently shown.

    Grows and shrinks in steps of WINDOW_STEP, never below WINDOW_MIN.
    """

    model_config = ConfigDict(frozen=True)

    size: int = Field(default=WINDOW_MIN, ge=WINDOW_MIN)

    def expanded(self) -> "DisplayWindow":
        return DisplayWindow(size=self.size + WINDOW_STEP)

    def collapsed(self) -> "DisplayWindow":
        return DisplayWindow(size=max(WINDOW_MIN, self.size - WINDOW_STEP))


class AnalyzerConfig(BaseModel):
    """User-controlled configuration owned by a single AnalyzerController."""

    model_config = ConfigDict(validate_assignment=True)

    exclude_spaces: bool = False
    char_limit: Optional[PositiveInt] = None
    window: DisplayWindow = Field(default_factory=DisplayWindow)


class AnalyzerView(BaseModel):
    """Everything the browser needs to render after an event.

    Attributes:
        metrics (MetricsResult): Counts for the current text.
        reading_time_label (str): Human readable reading time.
        exclude_spaces (bool): Whether whitespace is excluded from the count.
        char_limit_enabled (bool): Whether the limit field is shown.
        char_limit (Optional[int]): The committed limit, if any.
        over_limit (bool): True while the text exceeds the limit.
        limit_field_error (bool): True after an invalid limit was committed.
        window_size (int): Number of frequency rows requested.
        letters (List[FrequencyEntry]): The rendered frequency rows.
        no_letters (bool): True when there is nothing to rank.
        show_more (bool): Whether the "see more" control is visible.
        show_less (bool): Whether the "see less" control is visible.
    """

    metrics: MetricsResult = Field(default_factory=MetricsResult)
    reading_time_label: str = "< 1 minute"
    exclude_spaces: bool = False
    char_limit_enabled: bool = False
    char_limit: Optional[int] = None
    over_limit: bool = False
    limit_field_error: bool = False
    window_size: int = WINDOW_MIN
    letters: List[FrequencyEntry] = Field(default_factory=list)
    no_letters: bool = True
    show_more: bool = False
    show_less: bool = False

import re
import threading
from decimal import Decimal
from typing import List, Optional

from app.schemas.analyzer_models import (
    WINDOW_MIN,
    AnalysisInput,
    AnalyzerConfig,
    AnalyzerView,
    DisplayWindow,
)
from app.schemas.common import FrequencyEntry, MetricsResult
from app.services.frequency_service import rank_characters, top_window
from app.services.metrics_service import (
    compute_metrics,
    count_characters,
    format_reading_time,
)

# Plain decimal notation with an optional exponent, e.g. "10", "+12", "1e2", "10.0"
NUMBER_REGEX = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)

# Limits with more digits than this are refused rather than expanded
MAX_LIMIT_DIGITS = 64


class InvalidLimit(ValueError):
    """Raised when a character limit value cannot be used."""


def parse_char_limit(raw_value: Optional[str]) -> int:
    """Parses the raw contents of the character limit field.

    Args:
        raw_value (Optional[str]): Text typed into the field.

    Returns:
        int: The limit as a positive integer, exactly as typed.

    Raises:
        InvalidLimit: If the value is empty, not a number, not a whole
            number, not positive, or absurdly large.
    """
    value = (raw_value or "").strip()
    if not value:
        raise InvalidLimit("Character limit is empty")

    if not NUMBER_REGEX.fullmatch(value):
        raise InvalidLimit(f"Character limit is not a number: {value!r}")

    number = Decimal(value)
    if number <= 0:
        raise InvalidLimit(f"Character limit must be positive: {value!r}")
    if number.adjusted() >= MAX_LIMIT_DIGITS:
        raise InvalidLimit(f"Character limit is too large: {value!r}")
    if number != number.to_integral_value():
        raise InvalidLimit(f"Character limit must be a whole number: {value!r}")

    return int(number)


class AnalyzerController:
    """Reacts to widget events and keeps the presentation state current.

    Each on_* method runs to completion and returns the view to render.
    The letter list is only refreshed when the text is within the limit,
    or when the user expands or collapses it.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()
        # Held by the HTTP layer while an event runs
        self.lock = threading.Lock()
        self.text = ""
        self.metrics = MetricsResult()
        self.ranking: List[FrequencyEntry] = []
        self.char_limit_enabled = self.config.char_limit is not None
        self.over_limit = False
        self.limit_field_error = False

        # Rendered letter list state
        self.letters: List[FrequencyEntry] = []
        self.show_more = False
        self.show_less = False

    @classmethod
    def from_input(
        cls, analysis_input: AnalysisInput, window_size: int = WINDOW_MIN
    ) -> "AnalyzerController":
        """Builds a controller already configured for a one-off analysis."""
        config = AnalyzerConfig(
            exclude_spaces=analysis_input.exclude_spaces,
            char_limit=analysis_input.char_limit,
            window=DisplayWindow(size=max(WINDOW_MIN, window_size)),
        )
        controller = cls(config)
        controller.on_text_changed(analysis_input.text)
        return controller

    @property
    def window_size(self) -> int:
        return self.config.window.size

    def current_input(self) -> AnalysisInput:
        return AnalysisInput(
            text=self.text,
            exclude_spaces=self.config.exclude_spaces,
            char_limit=self.config.char_limit,
        )

    # --- Event Handlers ---

    def on_text_changed(self, text: str) -> AnalyzerView:
        self.text = text
        analysis_input = self.current_input()

        self.metrics = compute_metrics(
            analysis_input.text, analysis_input.exclude_spaces
        )
        self.ranking = rank_characters(analysis_input.text)

        limit = analysis_input.char_limit
        if limit is not None and self.metrics.total_characters > limit:
            # Keep the previously rendered letters while over the limit
            self.over_limit = True
            return self.view()

        self.over_limit = False
        self._update_letter_list()
        return self.view()

    def on_exclude_spaces_changed(self, exclude_spaces: bool) -> AnalyzerView:
        self.config.exclude_spaces = exclude_spaces
        self.metrics = self.metrics.model_copy(
            update={"total_characters": count_characters(self.text, exclude_spaces)}
        )
        return self.view()

    def on_char_limit_toggled(self, enabled: bool) -> AnalyzerView:
        self.char_limit_enabled = enabled
        if not enabled:
            self.config.char_limit = None
            self.over_limit = False
        return self.view()

    def on_char_limit_committed(self, raw_value: Optional[str]) -> AnalyzerView:
        try:
            limit = parse_char_limit(raw_value)
        except InvalidLimit as e:
            print(f"Rejected character limit: {e}")
            self.config.char_limit = None
            self.limit_field_error = True
            return self.view()

        self.limit_field_error = False
        self.config.char_limit = limit

        # Re-validate the current text against the new limit
        return self.on_text_changed(self.text)

    def on_expand_window(self) -> AnalyzerView:
        self.config.window = self.config.window.expanded()
        self._update_letter_list()
        return self.view()

    def on_collapse_window(self) -> AnalyzerView:
        self.config.window = self.config.window.collapsed()
        self._update_letter_list()
        return self.view()

    # --- Utility Methods ---

    def _update_letter_list(self):
        """Refreshes the rendered rows and the more/less controls."""
        self.letters = top_window(self.ranking, self.window_size)
        self.show_more = len(self.ranking) > self.window_size
        self.show_less = self.window_size > WINDOW_MIN

    def view(self) -> AnalyzerView:
        return AnalyzerView(
            metrics=self.metrics,
            reading_time_label=format_reading_time(
                self.metrics.reading_time_minutes
            ),
            exclude_spaces=self.config.exclude_spaces,
            char_limit_enabled=self.char_limit_enabled,
            char_limit=self.config.char_limit,
            over_limit=self.over_limit,
            limit_field_error=self.limit_field_error,
            window_size=self.window_size,
            letters=self.letters,
            no_letters=not self.letters,
            show_more=self.show_more,
            show_less=self.show_less,
        )

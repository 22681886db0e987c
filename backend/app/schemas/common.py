"""
Shared Pydantic schemas used across the analyzer and the API layer.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field


class MetricsResult(BaseModel):
    """Headline counts for a block of text.

    Attributes:
        total_characters (int): Character count, whitespace optionally excluded.
        word_count (int): Number of whitespace-separated words.
        sentence_count (int): Number of non-empty sentences.
        reading_time_minutes (int): Estimated reading time in whole minutes.
    """

    total_characters: int = Field(default=0, ge=0)
    word_count: int = Field(default=0, ge=0)
    sentence_count: int = Field(default=0, ge=0)
    reading_time_minutes: int = Field(default=0, ge=0)


class FrequencyEntry(BaseModel):
    """A single row of the character frequency ranking.

    Attributes:
        character (str): The lower-cased character.
        count (int): Occurrences in the text.
        percentage (float): Share of all characters, rounded to 2 decimals.
    """

    model_config = ConfigDict(frozen=True)

    character: str
    count: int = Field(ge=1)
    percentage: float = Field(ge=0, le=100)

    @computed_field
    @property
    def display(self) -> str:
        return self.character.upper()

    @computed_field
    @property
    def percentage_label(self) -> str:
        return f"{self.percentage:.2f}%"

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..text_analysis import round_half_up

Score = Annotated[float, Field(ge=0, le=100)]

METRIC_FIELDS = (
    "coherence",
    "completeness",
    "readability",
    "length_appropriateness",
    "structural_quality",
)


class ScoreSet(BaseModel):
    """The five quality scores of one response, each unrounded in [0, 100]."""

    model_config = ConfigDict(frozen=True)

    coherence: Score
    completeness: Score
    readability: Score
    length_appropriateness: Score
    structural_quality: Score

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overall(self) -> int:
        """Mean of the five unrounded scores, rounded for display."""
        values = [getattr(self, field) for field in METRIC_FIELDS]
        return round_half_up(sum(values) / len(values))

    def rounded(self) -> dict[str, int]:
        """Return the display values of every score, overall included."""
        rounded = {field: round_half_up(getattr(self, field)) for field in METRIC_FIELDS}
        rounded["overall"] = self.overall
        return rounded


class MetricExplanation(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    score: int
    description: str
    details: str

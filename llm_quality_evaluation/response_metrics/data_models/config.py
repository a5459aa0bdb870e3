from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, FilePath

from ..custom_deepeval.metrics import (
    QUALITY_THRESHOLD,
    CoherenceMetric,
    CompletenessMetric,
    HeuristicQualityMetric,
    LengthAppropriatenessMetric,
    ReadabilityMetric,
    StructuralQualityMetric,
)


class MetricName(str, Enum):
    COHERENCE = "coherence"
    COMPLETENESS = "completeness"
    READABILITY = "readability"
    LENGTH_APPROPRIATENESS = "length_appropriateness"
    STRUCTURAL_QUALITY = "structural_quality"


class MetricConfig(BaseModel):
    name: MetricName
    threshold: float = Field(default=QUALITY_THRESHOLD, ge=0, le=1)
    include_reason: bool = True
    strict_mode: bool = False

    def to_metric_instance(self) -> HeuristicQualityMetric:
        options: dict[str, Any] = {
            "threshold": self.threshold,
            "include_reason": self.include_reason,
            "strict_mode": self.strict_mode,
        }
        match self.name:
            case MetricName.COHERENCE:
                return CoherenceMetric(**options)
            case MetricName.COMPLETENESS:
                return CompletenessMetric(**options)
            case MetricName.READABILITY:
                return ReadabilityMetric(**options)
            case MetricName.LENGTH_APPROPRIATENESS:
                return LengthAppropriatenessMetric(**options)
            case MetricName.STRUCTURAL_QUALITY:
                return StructuralQualityMetric(**options)


def _all_metrics() -> list[MetricConfig]:
    return [MetricConfig(name=name) for name in MetricName]


class TaskConfig(BaseModel):
    what: str
    input_path: FilePath
    output_dir: Path
    metrics: list[MetricConfig] = Field(default_factory=_all_metrics)

    def metric_instances(self) -> list[HeuristicQualityMetric]:
        """Return the list of runtime metric objects for evaluation."""
        return [metric.to_metric_instance() for metric in self.metrics]

    @classmethod
    def from_yaml(cls, path: str | Path) -> "TaskConfig":
        """Load a task config, resolving relative paths against its directory."""
        path = Path(path)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping at the top level of {path}")

        for key in ("input_path", "output_dir"):
            if isinstance(data.get(key), str):
                data[key] = path.parent / data[key]

        return cls(**data)

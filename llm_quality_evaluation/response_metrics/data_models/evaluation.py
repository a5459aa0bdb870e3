import uuid
from typing import Any, Optional

from deepeval.test_case import LLMTestCase
from pydantic import BaseModel, Field
from pydantic.dataclasses import dataclass

from .scores import MetricExplanation


# ----- Input data models -----


class EvaluationTestCase(BaseModel):
    prompt: str
    response: str
    name: str = Field(default_factory=lambda: str(uuid.uuid4()))
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_llm_test_case(self) -> LLMTestCase:
        return LLMTestCase(
            input=self.prompt,
            actual_output=self.response,
            name=self.name,
            additional_metadata=self.metadata or None,
        )


# ----- Output data models -----


@dataclass
class MetricOutput:
    metric: str
    score: float | None = None
    reason: str | None = None
    success: bool | None = None
    error: str | None = None


@dataclass
class EvaluationResult:
    name: str
    prompt: str
    response: str
    scores: dict[str, int]
    explanations: list[MetricExplanation]
    metric_outputs: list[MetricOutput]
    metadata: Optional[dict[str, Any]] = None

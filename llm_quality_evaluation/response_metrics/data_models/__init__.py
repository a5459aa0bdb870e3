from .config import MetricConfig, MetricName, TaskConfig
from .evaluation import EvaluationResult, EvaluationTestCase, MetricOutput
from .scores import METRIC_FIELDS, MetricExplanation, ScoreSet

__all__ = [
    "MetricConfig",
    "MetricName",
    "TaskConfig",
    "EvaluationResult",
    "EvaluationTestCase",
    "MetricOutput",
    "METRIC_FIELDS",
    "MetricExplanation",
    "ScoreSet",
]

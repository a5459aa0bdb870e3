from .data_models import MetricExplanation, ScoreSet
from .scoring import evaluate, explain

__all__ = ["MetricExplanation", "ScoreSet", "evaluate", "explain"]

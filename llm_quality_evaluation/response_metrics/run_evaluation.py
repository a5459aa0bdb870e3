import asyncio
import csv
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from deepeval.test_case import LLMTestCase
from pydantic import TypeAdapter, ValidationError

from .custom_deepeval.metrics import HeuristicQualityMetric
from .data_models import (
    METRIC_FIELDS,
    EvaluationResult,
    EvaluationTestCase,
    MetricConfig,
    MetricOutput,
    TaskConfig,
)
from .scoring import evaluate, explain

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0.0"
SCORE_COLUMNS = [*METRIC_FIELDS, "overall"]
# keeps metadata keys from clashing with the fixed columns
METADATA_COLUMN_PREFIX = "metadata_"

results_adapter = TypeAdapter(list[EvaluationResult])


def load_test_cases(path: Path) -> list[EvaluationTestCase]:
    """Read one test case per line of a JSONL file, skipping blank lines."""
    test_cases: list[EvaluationTestCase] = []
    with open(path, encoding="utf-8") as file:
        for line_number, line in enumerate(file, start=1):
            if not line.strip():
                continue
            try:
                test_cases.append(EvaluationTestCase.model_validate_json(line))
            except ValidationError as e:
                raise ValueError(
                    f"Invalid test case on line {line_number} of {path}: {e}"
                ) from e
    return test_cases


async def _run_metric(
    metric: HeuristicQualityMetric, test_case: LLMTestCase
) -> MetricOutput:
    try:
        await metric.a_measure(test_case, _show_indicator=False)
    except Exception as e:
        logger.exception(
            "Failed to measure %s for test case %s", metric.__name__, test_case.name
        )
        return MetricOutput(metric=metric.__name__, error=str(e))

    return MetricOutput(
        metric=metric.__name__,
        score=metric.score,
        reason=metric.reason,
        success=metric.success,
    )


async def evaluate_test_case(
    test_case: EvaluationTestCase, metric_configs: list[MetricConfig]
) -> EvaluationResult:
    score_set = evaluate(test_case.prompt, test_case.response)

    # metrics hold per-measurement state, so each test case gets fresh instances
    llm_test_case = test_case.to_llm_test_case()
    metric_outputs = await asyncio.gather(
        *(
            _run_metric(config.to_metric_instance(), llm_test_case)
            for config in metric_configs
        )
    )

    return EvaluationResult(
        name=test_case.name,
        prompt=test_case.prompt,
        response=test_case.response,
        scores=score_set.rounded(),
        explanations=explain(score_set),
        metric_outputs=list(metric_outputs),
        metadata=test_case.metadata or None,
    )


async def evaluate_test_cases(
    test_cases: list[EvaluationTestCase], metric_configs: list[MetricConfig]
) -> list[EvaluationResult]:
    return list(
        await asyncio.gather(
            *(evaluate_test_case(case, metric_configs) for case in test_cases)
        )
    )


def summarise_results(results: list[EvaluationResult]) -> dict[str, float]:
    """Mean of each rounded score across all results."""
    if not results:
        return {}
    return {
        column: sum(result.scores[column] for result in results) / len(results)
        for column in SCORE_COLUMNS
    }


def write_results_json(results: list[EvaluationResult], path: Path) -> None:
    export = {
        "exported_at": datetime.now(timezone.utc).isoformat(),
        "version": EXPORT_VERSION,
        "results": results_adapter.dump_python(results, mode="json"),
    }
    path.write_text(json.dumps(export, indent=2), encoding="utf-8")


def write_results_csv(results: list[EvaluationResult], path: Path) -> None:
    metadata_columns = [
        METADATA_COLUMN_PREFIX + key
        for key in sorted(
            {key for result in results for key in (result.metadata or {})}
        )
    ]
    with open(path, "w", newline="", encoding="utf-8") as file:
        writer = csv.DictWriter(
            file,
            fieldnames=["name", "prompt", "response", *SCORE_COLUMNS, *metadata_columns],
        )
        writer.writeheader()
        for result in results:
            writer.writerow(
                {
                    "name": result.name,
                    "prompt": result.prompt,
                    "response": result.response,
                    **result.scores,
                    **{
                        METADATA_COLUMN_PREFIX + key: value
                        for key, value in (result.metadata or {}).items()
                    },
                }
            )


def run_task(config: TaskConfig) -> list[EvaluationResult]:
    test_cases = load_test_cases(config.input_path)
    logger.info("Evaluating %d test cases for %s", len(test_cases), config.what)

    results = asyncio.run(evaluate_test_cases(test_cases, config.metrics))

    config.output_dir.mkdir(parents=True, exist_ok=True)
    write_results_json(results, config.output_dir / "results.json")
    write_results_csv(results, config.output_dir / "results.csv")

    for column, mean in summarise_results(results).items():
        logger.info("Mean %s: %.1f", column, mean)

    return results

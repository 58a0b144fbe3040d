from typing import Dict, List, Optional
import logging

from tqdm import tqdm

from .config import DEFAULT_METRICS, ROUGE_METRIC_ORDERS, EvaluationConfig
from .metrics.rouge import rouge_n
from .utils import tokenize

logger = logging.getLogger(__name__)


AVAILABLE_METRICS = list(ROUGE_METRIC_ORDERS)


def evaluate_text(
    candidate: str,
    reference: str,
    metrics: Optional[List[str]] = None,
    config: Optional[EvaluationConfig] = None,
    show_progress: bool = True,
) -> Dict[str, float]:
    """
    Evaluate a candidate text against a reference using ROUGE-N metrics.

    Args:
        candidate: Generated text to evaluate
        reference: Ground-truth text
        metrics: List of metrics to calculate (e.g. ["rouge1", "rouge2"]).
            Defaults to config.metrics when a config is given, else rouge1 and rouge2.
        config: Optional EvaluationConfig. Its show_progress setting overrides
            the show_progress argument.
        show_progress: Whether to show progress bar (default: True)

    Returns:
        Dictionary with ``{metric}_precision``, ``{metric}_recall`` and
        ``{metric}_fmeasure`` for each requested metric.

    Raises:
        InvalidArgumentError: If the metric list in use is empty or names an
            unknown metric.
    """
    if config is not None:
        show_progress = config.show_progress
        if metrics is None:
            metrics = config.metrics

    if metrics is None:
        metrics = DEFAULT_METRICS

    # Only the metric list actually used is validated
    orders = EvaluationConfig(metrics=list(metrics), show_progress=show_progress).orders()

    candidate_length = len(tokenize(candidate))
    reference_length = len(tokenize(reference))
    logger.info(
        f"Evaluating {len(metrics)} metric(s) on candidate of {candidate_length} tokens "
        f"against reference of {reference_length} tokens"
    )

    results = {}

    metric_iterator = tqdm(metrics, disable=not show_progress, desc="Calculating metrics")

    for metric, n in zip(metric_iterator, orders):
        # Too-short texts score 0.0 instead of failing; make that visible
        if candidate_length < n or reference_length < n:
            logger.warning(
                f"{metric}: candidate has {candidate_length} tokens and reference has "
                f"{reference_length}; texts shorter than {n} tokens score 0.0"
            )

        score = rouge_n(candidate, reference, n)
        results[f"{metric}_precision"] = score.precision
        results[f"{metric}_recall"] = score.recall
        results[f"{metric}_fmeasure"] = score.f1

    return results

from dataclasses import dataclass, field
from typing import List

from .exceptions import InvalidArgumentError

# Metric name -> n-gram order
ROUGE_METRIC_ORDERS = {
    "rouge1": 1,
    "rouge2": 2,
    "rouge3": 3,
    "rouge4": 4,
}

DEFAULT_METRICS = ["rouge1", "rouge2"]


@dataclass
class EvaluationConfig:
    """
    Configuration for an evaluation run.

    Attributes:
        metrics (List[str]): ROUGE metrics to compute, e.g. ["rouge1", "rouge2"].
        show_progress (bool): Whether to show a progress bar over metrics.
    """

    metrics: List[str] = field(default_factory=lambda: list(DEFAULT_METRICS))
    show_progress: bool = True

    def validate(self) -> None:
        """
        Validate the configuration parameters.

        Raises:
            InvalidArgumentError: If no metrics are requested or any metric
                name is not supported.
        """
        if not self.metrics:
            raise InvalidArgumentError("metrics must not be empty")

        invalid = set(self.metrics) - set(ROUGE_METRIC_ORDERS)
        if invalid:
            raise InvalidArgumentError(f"Invalid metrics: {sorted(invalid)}")

    def orders(self) -> List[int]:
        """Return the n-gram order for each configured metric, in order."""
        self.validate()
        return [ROUGE_METRIC_ORDERS[metric] for metric in self.metrics]

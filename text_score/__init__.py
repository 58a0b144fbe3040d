# Import the core functionality
from .core import evaluate_text, AVAILABLE_METRICS
from .config import EvaluationConfig
from .exceptions import InvalidArgumentError
from .utils import tokenize
from .metrics.commons import Score, precision, recall, f1
from .metrics.rouge import build_ngrams, score_overlap, rouge_n, calculate_rouge

__all__ = [
    "evaluate_text",
    "AVAILABLE_METRICS",
    "EvaluationConfig",
    "InvalidArgumentError",
    "tokenize",
    # Scoring primitives
    "Score",
    "precision",
    "recall",
    "f1",
    # ROUGE-N
    "build_ngrams",
    "score_overlap",
    "rouge_n",
    "calculate_rouge",
]

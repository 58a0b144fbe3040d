"""text_score metrics: scoring primitives and ROUGE-N calculators."""

from .commons import Score, f1, precision, recall
from .rouge import build_ngrams, calculate_rouge, rouge_n, score_overlap

__all__ = [
    "Score",
    "precision",
    "recall",
    "f1",
    "build_ngrams",
    "score_overlap",
    "rouge_n",
    "calculate_rouge",
]

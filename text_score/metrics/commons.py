from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Score:
    """
    Precision, recall and F1 for one scoring call.

    Attributes:
        precision (float): Fraction of candidate n-grams found in the reference.
        recall (float): Fraction of reference n-grams found in the candidate.
        f1 (float): Harmonic mean of precision and recall.
    """

    precision: float
    recall: float
    f1: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "precision": self.precision,
            "recall": self.recall,
            "f1": self.f1,
        }


def precision(true_pos: int, false_pos: int) -> float:
    """
    Compute precision from raw counts.

    Inputs are not validated. When both counts are zero the ratio is
    undefined and ZeroDivisionError propagates to the caller.
    """
    return true_pos / (true_pos + false_pos)


def recall(true_pos: int, false_neg: int) -> float:
    """
    Compute recall from raw counts.

    Same contract as precision(): a zero denominator raises ZeroDivisionError.
    """
    return true_pos / (true_pos + false_neg)


def f1(precision: float, recall: float) -> float:
    """
    Harmonic mean of precision and recall.

    Returns 0.0 when precision + recall is zero, so callers never see NaN.
    """
    if precision + recall == 0:
        return 0.0
    return 2.0 * (precision * recall) / (precision + recall)

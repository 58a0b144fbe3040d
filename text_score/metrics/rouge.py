"""
ROUGE-N scoring over whitespace tokens.

Candidate and reference texts are split on whitespace, turned into
n-gram multisets, and compared by clipped overlap counts.
"""
from collections import Counter
from typing import Dict, Iterable, Sequence, Tuple
import logging
import operator

from nltk.util import ngrams

from ..exceptions import InvalidArgumentError
from ..utils import tokenize
from .commons import Score, f1

logger = logging.getLogger(__name__)

NGram = Tuple[str, ...]


def _check_order(n) -> int:
    """Return n as a plain int, rejecting bools, non-integers and orders below 1."""
    # bool is an int subclass
    if isinstance(n, bool):
        raise InvalidArgumentError(f"n must be an integer, got {n!r}")
    try:
        n = operator.index(n)
    except TypeError:
        raise InvalidArgumentError(f"n must be an integer, got {n!r}") from None
    if n < 1:
        raise InvalidArgumentError(f"n must be >= 1, got {n}")
    return n


def _count_ngrams(tokens: Sequence[str], n: int) -> "Counter[NGram]":
    # No window fits; return before slicing
    if len(tokens) < n:
        return Counter()
    return Counter(ngrams(tokens, n))


def build_ngrams(tokens: Sequence[str], n: int) -> "Counter[NGram]":
    """
    Count every n-gram in a token sequence.

    Args:
        tokens: Tokens in text order
        n: N-gram order, at least 1. Any integer type (e.g. numpy.int64) works.

    Returns:
        Counter mapping each n-gram tuple to its number of occurrences.
        Counts sum to max(0, len(tokens) - n + 1).

    Raises:
        InvalidArgumentError: If n is not an integer >= 1
    """
    return _count_ngrams(tokens, _check_order(n))


def score_overlap(candidate_ngrams: "Counter[NGram]", reference_ngrams: "Counter[NGram]") -> Score:
    """
    Score a candidate n-gram multiset against a reference multiset.

    Overlap is the clipped count min(reference, candidate) summed over the
    reference n-grams; n-grams only present in the candidate add nothing.
    Totals are floored at 1 so a side with no n-grams scores 0.0 rather
    than raising.

    Args:
        candidate_ngrams: N-gram counts of the candidate text
        reference_ngrams: N-gram counts of the reference text

    Returns:
        Score with precision, recall and f1
    """
    overlap = 0
    for ngram, reference_count in reference_ngrams.items():
        overlap += min(reference_count, candidate_ngrams.get(ngram, 0))

    total_candidate = sum(candidate_ngrams.values())
    total_reference = sum(reference_ngrams.values())

    p = overlap / max(total_candidate, 1)
    r = overlap / max(total_reference, 1)

    logger.debug(
        f"overlap={overlap} candidate_total={total_candidate} reference_total={total_reference}"
    )
    return Score(precision=p, recall=r, f1=f1(p, r))


def rouge_n(candidate: str, reference: str, n: int) -> Score:
    """
    Compute ROUGE-N between a candidate and a reference text.

    Args:
        candidate: Text being evaluated
        reference: Ground-truth text
        n: N-gram order, at least 1

    Returns:
        Score with precision, recall and f1. Texts with fewer than n tokens
        (including empty text) produce 0.0 scores instead of an error.

    Raises:
        InvalidArgumentError: If n is not an integer >= 1

    Example::

        >>> rouge_n("this is identical case.", "this is identical case.", 1)
        Score(precision=1.0, recall=1.0, f1=1.0)
    """
    n = _check_order(n)

    candidate_ngrams = _count_ngrams(tokenize(candidate), n)
    reference_ngrams = _count_ngrams(tokenize(reference), n)

    return score_overlap(candidate_ngrams, reference_ngrams)


def calculate_rouge(
    reference: str, candidate: str, orders: Iterable[int] = (1, 2)
) -> Dict[str, float]:
    """
    Calculate ROUGE-N scores for several orders as a flat dictionary.

    Args:
        reference (str): Ground-truth text
        candidate (str): Text being evaluated
        orders (Iterable[int]): N-gram orders to compute. Defaults to (1, 2).

    Returns:
        Dict[str, float]: Keys of the form ``rouge{n}_precision``,
        ``rouge{n}_recall`` and ``rouge{n}_fmeasure`` for every order.
    """
    results = {}
    for n in orders:
        score = rouge_n(candidate, reference, n)
        results[f"rouge{n}_precision"] = score.precision
        results[f"rouge{n}_recall"] = score.recall
        results[f"rouge{n}_fmeasure"] = score.f1
    return results

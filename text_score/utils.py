from typing import List


def tokenize(text: str) -> List[str]:
    """
    Split text into tokens on runs of whitespace.

    No case folding, stemming or punctuation handling is applied, so
    "case." and "case" are different tokens.

    Args:
        text (str): Input text

    Returns:
        List[str]: Tokens in their original order. Empty for empty or
        whitespace-only text.
    """
    return text.split()

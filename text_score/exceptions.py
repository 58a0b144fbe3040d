"""Error types raised by text_score."""


class InvalidArgumentError(ValueError):
    """
    Raised when a scoring call receives an argument it cannot work with,
    such as an n-gram order below 1 or an unknown metric name.

    Subclasses ValueError so callers catching ValueError keep working.
    """

from typing import Optional


class ChartDataError(Exception):
    """
    Base class for input-validation failures raised while binding data to a chart.

    Every subclass is raised before the target chart is touched.
    """


class SizeMismatchError(ChartDataError, ValueError):
    """
    Raised when two sequences that are paired into one series differ in length.
    """

    def __init__(self, message: str, expected: Optional[int] = None, actual: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        if expected is not None and actual is not None:
            message = f"{message} (lengths {expected} and {actual})"
        super().__init__(message)


class IndexRangeError(ChartDataError, IndexError):
    """
    Raised when a column, row or cluster-member index lies outside its source structure.
    """

    def __init__(self, index: int, count: int, what: str = "index"):
        self.index = index
        self.count = count
        super().__init__(
            f"Invalid {what}: {index}. Must be between 0 and {count - 1}."
        )


class InvalidArgumentError(ChartDataError, ValueError):
    """
    Raised when an argument has the wrong kind, e.g. a non-numeric column.
    """

from dataclasses import dataclass

import numpy as np


@dataclass
class AxisUnit:
    """
    A unit of physical quantity used to synthesise an implicit x-axis.

    Parameters
    ----------
    start : float, default=0.0
        The first x value.
    step : float, default=1.0
        Distance between consecutive x values.
    name : str, default="Index"
        Display name, used as the x-axis title.
    """

    start: float = 0.0
    step: float = 1.0
    name: str = "Index"

    def values(self, length: int) -> np.ndarray:
        """Return ``start, start + step, start + 2*step, ...`` with `length` entries."""
        return self.start + self.step * np.arange(max(length, 0), dtype=np.float64)

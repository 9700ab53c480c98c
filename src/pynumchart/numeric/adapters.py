from typing import Any, Tuple

import numpy as np
import pandas as pd

from pynumchart.errors import InvalidArgumentError


def real_view(values: Any) -> Tuple[np.ndarray, bool]:
    """
    Return a 1-D real view of a numeric sequence.

    Complex input is reduced to its magnitude.

    Parameters
    ----------
    values : array-like
        Real or complex numbers.

    Returns
    -------
    Tuple[np.ndarray, bool]
        The real values and whether the input was complex.
    """
    arr = np.asarray(values)
    if np.iscomplexobj(arr):
        return np.abs(arr).astype(np.float64).reshape(-1), True
    return arr.astype(np.float64).reshape(-1), False


def real_matrix(data: Any) -> Tuple[np.ndarray, bool]:
    """
    Return a real 2-D view of a matrix, taking magnitudes of complex entries.

    Raises
    ------
    InvalidArgumentError
        If `data` is not two-dimensional.
    """
    arr = np.asarray(data)
    if arr.ndim != 2:
        raise InvalidArgumentError(f"Expected a 2-D matrix, got {arr.ndim} dimension(s).")
    if np.iscomplexobj(arr):
        return np.abs(arr).astype(np.float64), True
    return arr.astype(np.float64), False


def is_numeric_column(column: pd.Series) -> bool:
    """True for integer and floating columns; booleans and objects are not numeric."""
    return pd.api.types.is_numeric_dtype(column) and not pd.api.types.is_bool_dtype(column)


def column_values(column: pd.Series) -> np.ndarray:
    """
    Return the values of a numeric column as floats.

    Raises
    ------
    InvalidArgumentError
        If the column is not numeric.
    """
    if not is_numeric_column(column):
        raise InvalidArgumentError(f"Column '{column.name}' must be numeric.")
    return column.to_numpy(dtype=np.float64)


def format_polynomial(poly: Any, digits: int = 2) -> str:
    """
    Format a polynomial as ``c0 + c1x + c2x^2 ...``.

    Parameters
    ----------
    poly : numpy.polynomial.Polynomial or array-like
        Polynomial, or its coefficients in increasing degree.
    digits : int, default=2
        Decimal places per coefficient.

    Returns
    -------
    str
        The formatted polynomial.
    """
    coef = np.asarray(getattr(poly, "coef", poly), dtype=np.float64).reshape(-1)
    if len(coef) == 0:
        return f"{0:.{digits}f}"

    text = ""
    for power, c in enumerate(coef):
        magnitude = f"{abs(c):.{digits}f}"
        if power == 1:
            magnitude += "x"
        elif power > 1:
            magnitude += f"x^{power}"

        if power == 0:
            text = f"-{magnitude}" if c < 0 else magnitude
        else:
            text += f" - {magnitude}" if c < 0 else f" + {magnitude}"
    return text

"""
Thin result wrappers over NumPy, SciPy, scikit-learn and statsmodels computations.

The libraries return bare tuples or their own result objects; these classes
run the computation once and expose the read-only attributes the chart
adapters consume. No numerical method is implemented here.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Tuple

import numpy as np
import scipy.linalg
import scipy.optimize
import scipy.signal
import statsmodels.api as sm
from loguru import logger
from numpy.polynomial import Polynomial
from scipy.cluster.vq import kmeans2
from sklearn.decomposition import PCA as SklearnPCA
from sklearn.preprocessing import StandardScaler

from pynumchart.errors import InvalidArgumentError, SizeMismatchError
from pynumchart.numeric.adapters import format_polynomial


class LeastSquares:
    """
    Linear least squares solution of ``a @ x = y`` (`scipy.linalg.lstsq`).

    Attributes
    ----------
    solution : np.ndarray
        The fitted coefficients.
    yhat : np.ndarray
        Predicted values ``a @ solution``.
    residuals : np.ndarray
        ``y - yhat``.
    residual_sum_of_squares : float
        Sum of squared residuals.
    """

    def __init__(self, a: Any, y: Any):
        a = np.asarray(a, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64).reshape(-1)
        if a.shape[0] != len(y):
            raise SizeMismatchError("Rows of a must equal the length of y", a.shape[0], len(y))
        self.solution, _, self.rank, _ = scipy.linalg.lstsq(a, y)
        self.yhat = a @ self.solution
        self.residuals = y - self.yhat
        self.residual_sum_of_squares = float(np.sum(self.residuals**2))


class PolynomialFit:
    """Least squares polynomial fit (`numpy.polynomial.Polynomial.fit`)."""

    def __init__(self, x: Any, y: Any, degree: int):
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        if len(x) != len(y):
            raise SizeMismatchError("x,y data of unequal length", len(x), len(y))
        self.degree = degree
        # convert() maps back from the scaled window to plain x
        self.polynomial: Polynomial = Polynomial.fit(x, y, degree).convert()

    @property
    def coefficients(self) -> np.ndarray:
        return self.polynomial.coef

    def format(self, digits: int = 2) -> str:
        return format_polynomial(self.polynomial, digits)


class FunctionFit:
    """
    Nonlinear least squares fit of ``f(x, *params)`` (`scipy.optimize.curve_fit`).

    Parameters
    ----------
    function : Callable
        Model function taking x followed by the parameters.
    bounds : Optional[Tuple[array-like, array-like]], default=None
        Lower and upper parameter bounds. Supplying bounds makes the fit bounded.
    """

    def __init__(
        self,
        function: Callable[..., Any],
        bounds: Optional[Tuple[Any, Any]] = None,
    ):
        self.function = function
        self.bounds = bounds
        self.solution: Optional[np.ndarray] = None
        self.covariance: Optional[np.ndarray] = None

    @property
    def bounded(self) -> bool:
        return self.bounds is not None

    def fit(self, x: Any, y: Any, start: Sequence[float]) -> np.ndarray:
        """
        Fit the model and return the parameters at the found minimum.

        Parameters
        ----------
        x, y : array-like
            Observations.
        start : Sequence[float]
            Initial parameter guess.

        Returns
        -------
        np.ndarray
            The solution.
        """
        kwargs = {} if self.bounds is None else {"bounds": self.bounds}
        self.solution, self.covariance = scipy.optimize.curve_fit(
            self.function,
            np.asarray(x, dtype=np.float64),
            np.asarray(y, dtype=np.float64),
            p0=np.asarray(start, dtype=np.float64),
            **kwargs,
        )
        logger.debug(f"Function fit solution: {self.solution}")
        return self.solution


@dataclass(frozen=True)
class Extremum:
    x: float
    y: float


class PeakFinder:
    """
    Peak finder based on smoothed Savitzky-Golay derivatives.

    A peak is a downward zero crossing of the smoothed first derivative, located
    by linear interpolation between the two bracketing samples.

    Parameters
    ----------
    y : array-like
        Evenly sampled input data.
    width : int
        Savitzky-Golay window length; even widths are widened by one.
    degree : int
        Savitzky-Golay polynomial degree, less than the window length.
    abscissa_interval : float, default=1.0
        Sample spacing along x.
    slope_selectivity : float, default=0.0
        Minimum magnitude of the derivative's slope at a crossing for it to count.
    """

    def __init__(
        self,
        y: Any,
        width: int,
        degree: int,
        abscissa_interval: float = 1.0,
        slope_selectivity: float = 0.0,
    ):
        self.input_data = np.asarray(y, dtype=np.float64).reshape(-1)
        self.window_length = width if width % 2 == 1 else width + 1
        if degree >= self.window_length:
            raise InvalidArgumentError(
                f"Polynomial degree ({degree}) must be less than the window length ({self.window_length})."
            )
        self.degree = degree
        self.abscissa_interval = abscissa_interval
        self.slope_selectivity = slope_selectivity
        self.peaks: List[Extremum] = []

    @property
    def number_of_peaks(self) -> int:
        return len(self.peaks)

    def __getitem__(self, index: int) -> Extremum:
        return self.peaks[index]

    def locate_peaks(self) -> List[Extremum]:
        """Find the peaks and store them in ``self.peaks``."""
        dx = self.abscissa_interval
        smoothed = scipy.signal.savgol_filter(self.input_data, self.window_length, self.degree)
        deriv = scipy.signal.savgol_filter(
            self.input_data, self.window_length, self.degree, deriv=1, delta=dx
        )
        x = np.arange(len(self.input_data)) * dx

        crossings = np.flatnonzero((deriv[:-1] > 0) & (deriv[1:] <= 0))
        peaks = []
        for i in crossings:
            slope = (deriv[i + 1] - deriv[i]) / dx
            if abs(slope) < self.slope_selectivity:
                continue
            x0 = x[i] + deriv[i] * dx / (deriv[i] - deriv[i + 1])
            peaks.append(Extremum(float(x0), float(np.interp(x0, x, smoothed))))

        self.peaks = peaks
        logger.debug(f"Located {len(peaks)} peaks")
        return peaks


class Bracket:
    """
    A bracketed minimum of a function (`scipy.optimize.bracket`).

    ``lower < interior < upper`` with ``f(interior)`` below both ends.
    """

    def __init__(self, function: Callable[[float], float], lower: float, upper: float):
        self.function = function
        xa, xb, xc, *_ = scipy.optimize.bracket(function, lower, upper)
        self.lower = float(min(xa, xc))
        self.interior = float(xb)
        self.upper = float(max(xa, xc))


class Histogram:
    """Bin counts of a data set (`numpy.histogram`)."""

    def __init__(self, data: Any, bins: Any = 10):
        self.counts, self.edges = np.histogram(np.asarray(data, dtype=np.float64), bins=bins)

    @property
    def number_of_bins(self) -> int:
        return len(self.counts)


class ClusterSet:
    """
    Cluster assignments of data rows.

    Parameters
    ----------
    labels : array-like of int
        Cluster number of each row.
    number_of_clusters : Optional[int], default=None
        Total number of clusters; defaults to ``max(labels) + 1``.
    """

    def __init__(self, labels: Any, number_of_clusters: Optional[int] = None):
        self.labels = np.asarray(labels, dtype=np.int64).reshape(-1)
        if number_of_clusters is None:
            number_of_clusters = int(self.labels.max()) + 1 if len(self.labels) else 0
        self.number_of_clusters = number_of_clusters
        self.centroids: Optional[np.ndarray] = None

    @classmethod
    def kmeans(cls, data: Any, k: int, seed: Optional[int] = None) -> "ClusterSet":
        """Cluster the rows of `data` into `k` groups (`scipy.cluster.vq.kmeans2`)."""
        data = np.asarray(data, dtype=np.float64)
        centroids, labels = kmeans2(data, k, minit="++", seed=seed)
        clusters = cls(labels, number_of_clusters=k)
        clusters.centroids = centroids
        return clusters

    def cluster(self, index: int) -> np.ndarray:
        """Row indices of the members of cluster `index`."""
        return np.flatnonzero(self.labels == index)


class PCA:
    """
    Principal component analysis (`sklearn.decomposition.PCA`).

    Parameters
    ----------
    data : array-like
        Observations in rows, variables in columns.
    scale : bool, default=False
        Standardise each column (`sklearn.preprocessing.StandardScaler`) first.
    """

    def __init__(self, data: Any, scale: bool = False):
        x = np.asarray(data, dtype=np.float64)
        if scale:
            x = StandardScaler().fit_transform(x)
        self._model = SklearnPCA().fit(x)
        self.variances = self._model.explained_variance_
        self.variance_proportions = self._model.explained_variance_ratio_
        self.cumulative_variance_proportions = np.cumsum(self.variance_proportions)
        self.loadings = self._model.components_.T
        self.scores = self._model.transform(x)


@dataclass(frozen=True)
class FitParameter:
    """One fitted coefficient of an OLS result."""

    value: float
    standard_error: float
    index: int
    results: Any = field(repr=False, compare=False)

    def confidence_interval(self, alpha: float) -> Tuple[float, float]:
        """Two-sided ``1 - alpha`` confidence interval."""
        lo, hi = np.asarray(self.results.conf_int(alpha))[self.index]
        return float(lo), float(hi)


class LinearRegression:
    """
    Ordinary least squares regression of observations on predictor columns
    (`statsmodels.api.OLS`).

    Parameters
    ----------
    predictors : array-like
        Predictor matrix, one column per independent variable.
    observations : array-like
        Dependent variable.
    intercept : bool, default=True
        Add a constant term.
    """

    def __init__(self, predictors: Any, observations: Any, intercept: bool = True):
        pm = np.asarray(predictors, dtype=np.float64)
        if pm.ndim == 1:
            pm = pm[:, np.newaxis]
        self.predictor_matrix = pm
        self.observations = np.asarray(observations, dtype=np.float64).reshape(-1)
        if pm.shape[0] != len(self.observations):
            raise SizeMismatchError(
                "Predictor rows must equal the number of observations",
                pm.shape[0],
                len(self.observations),
            )
        self.intercept = intercept
        self.results = sm.OLS(self.observations, self._design(pm)).fit()
        self.parameters = np.asarray(self.results.params)
        logger.debug(f"Linear regression parameters: {self.parameters}")

    @property
    def number_of_observations(self) -> int:
        return len(self.observations)

    def _design(self, matrix: np.ndarray) -> np.ndarray:
        if not self.intercept:
            return matrix
        return sm.add_constant(matrix, has_constant="add")

    def predicted_observations(self, matrix: Optional[Any] = None) -> np.ndarray:
        """Predictions for `matrix` (defaults to the predictor matrix)."""
        m = self.predictor_matrix if matrix is None else np.asarray(matrix, dtype=np.float64)
        if m.ndim == 1:
            m = m[:, np.newaxis]
        return np.asarray(self.results.predict(self._design(m)))

    def goodness_of_fit(self) -> "GoodnessOfFit":
        return GoodnessOfFit(self)


class GoodnessOfFit:
    """R-squared, F statistic and parameter standard errors of a `LinearRegression`."""

    def __init__(self, regression: LinearRegression):
        results = regression.results
        self.r_squared = float(results.rsquared)
        self.adjusted_r_squared = float(results.rsquared_adj)
        self.f_statistic = float(results.fvalue)
        self.f_statistic_p_value = float(results.f_pvalue)
        self.model_degrees_of_freedom = int(results.df_model)
        self.error_degrees_of_freedom = int(results.df_resid)
        self.parameters = [
            FitParameter(float(v), float(se), i, results)
            for i, (v, se) in enumerate(zip(results.params, results.bse))
        ]

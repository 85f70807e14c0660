"""
Tests for regression diagnostics and robust straight-line fits.

Validates:
    - Leverage, standardized residuals and Cook's distance against the
      explicit hat matrix
    - Durbin-Watson, Jarque-Bera and Breusch-Pagan statistics
    - Variance inflation factors
    - Theil-Sen and Huber fits resist a gross outlier where OLS does not
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from statengine.regression import fit, linear_regression, regression_diagnostics, robust_fit
from statengine.core.exceptions import (
    InsufficientDataError,
    InvalidParameterError,
    SingularMatrixError,
)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostics
# ═══════════════════════════════════════════════════════════════════════


class TestInfluence:

    def test_against_hat_matrix(self, linear_data):
        x, y = linear_data
        diag = regression_diagnostics(x, y)
        X = np.column_stack([np.ones(len(x)), x])
        H = X @ np.linalg.inv(X.T @ X) @ X.T
        h = np.diag(H)
        e = y - H @ y
        s2 = e @ e / (len(y) - 2)
        r = e / np.sqrt(s2 * (1 - h))
        np.testing.assert_allclose(diag.leverage, h)
        np.testing.assert_allclose(diag.standardized_residuals, r)
        np.testing.assert_allclose(diag.cooks_distance, r ** 2 * h / (2 * (1 - h)))

    def test_leverage_sums_to_rank(self, rng):
        X = rng.standard_normal((40, 3))
        diag = regression_diagnostics(X, rng.standard_normal(40))
        assert np.sum(diag.leverage) == pytest.approx(4.0)

    def test_influential_point(self):
        x = list(range(1, 21)) + [50]
        y = [2.0 * v + (0.5 if v % 2 else -0.5) for v in range(1, 21)] + [0.0]
        diag = regression_diagnostics(x, y)
        assert 20 in diag.influential()
        assert np.argmax(diag.cooks_distance) == 20

    def test_reuses_fit(self, linear_data):
        result = linear_regression(*linear_data)
        diag = regression_diagnostics(fit_result=result)
        np.testing.assert_array_equal(diag.residuals, result.residuals)
        assert diag.durbin_watson == result.diagnostics.durbin_watson


class TestResidualTests:

    def test_durbin_watson(self, linear_data):
        diag = regression_diagnostics(*linear_data)
        e = diag.residuals
        assert diag.durbin_watson == pytest.approx(np.sum(np.diff(e) ** 2) / np.sum(e ** 2))
        assert 0.0 < diag.durbin_watson < 4.0

    def test_jarque_bera(self, linear_data):
        diag = regression_diagnostics(*linear_data)
        ref = sp_stats.jarque_bera(diag.residuals)
        assert diag.jarque_bera == pytest.approx(ref.statistic)
        assert diag.jarque_bera_p_value == pytest.approx(ref.pvalue)

    def test_breusch_pagan_koenker(self, rng):
        x = np.linspace(1, 10, 150)
        y = 1 + 2 * x + rng.normal(0, 1, 150) * x
        diag = regression_diagnostics(x, y)
        X = np.column_stack([np.ones(150), x])
        e2 = diag.residuals ** 2
        g, *_ = np.linalg.lstsq(X, e2, rcond=None)
        r2 = 1 - np.sum((e2 - X @ g) ** 2) / np.sum((e2 - e2.mean()) ** 2)
        assert diag.breusch_pagan == pytest.approx(150 * r2)
        assert diag.breusch_pagan_p_value < 0.05

    def test_summary(self, linear_data):
        assert 'Durbin-Watson' in regression_diagnostics(*linear_data).summary()


class TestVIF:

    def test_single_predictor_none(self, linear_data):
        assert regression_diagnostics(*linear_data).vif is None

    def test_independent_predictors(self, rng):
        X = rng.standard_normal((200, 2))
        vif = regression_diagnostics(X, rng.standard_normal(200)).vif
        assert set(vif) == {'X1', 'X2'}
        assert all(1.0 <= v < 1.2 for v in vif.values())

    def test_collinear_predictors(self, rng):
        x1 = rng.standard_normal(100)
        x2 = x1 + rng.normal(0, 0.05, 100)
        result = fit({'a': x1, 'b': x2}, rng.standard_normal(100))
        assert result.diagnostics.vif['a'] > 10.0


# ═══════════════════════════════════════════════════════════════════════
# Robust fits
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def line_with_outlier():
    x = np.arange(20.0)
    y = 1.0 + 2.0 * x
    y[19] = 200.0
    return x, y


class TestTheilSen:

    def test_ignores_outlier(self, line_with_outlier):
        x, y = line_with_outlier
        result = robust_fit(x, y)
        assert result.method == 'theil_sen'
        assert result.slope == pytest.approx(2.0)
        assert result.intercept == pytest.approx(1.0)
        assert linear_regression(x, y).slope > 3.0

    def test_matches_scipy(self, rng):
        x = rng.uniform(0, 10, 30)
        y = 3 - 0.5 * x + rng.standard_t(2, 30)
        result = robust_fit(x, y)
        ref = sp_stats.theilslopes(y, x)
        assert result.slope == pytest.approx(ref.slope)
        lo, hi = result.slope_interval
        assert lo <= result.slope <= hi

    def test_predict(self, line_with_outlier):
        result = robust_fit(*line_with_outlier)
        np.testing.assert_allclose(result.predict([0.0, 10.0]), [1.0, 21.0])

    def test_constant_x(self):
        result = robust_fit([1, 1, 1, 1], [1, 2, 3, 4])
        assert math.isnan(result.slope)
        assert result.has_warning('identical')


class TestHuber:

    def test_resists_outlier(self, line_with_outlier):
        x, y = line_with_outlier
        result = robust_fit(x, y, method='huber')
        ols_slope = linear_regression(x, y).slope
        assert result.method == 'huber'
        assert abs(result.slope - 2.0) < abs(ols_slope - 2.0)
        assert result.slope == pytest.approx(2.0, abs=0.05)
        assert result.converged

    def test_outlier_downweighted(self, line_with_outlier):
        result = robust_fit(*line_with_outlier, method='huber')
        assert result.weights[19] < 1.0
        assert result.weights[19] == np.min(result.weights)

    def test_clean_data_close_to_ols(self, linear_data):
        x, y = linear_data
        result = robust_fit(x, y, method='huber')
        assert result.slope == pytest.approx(linear_regression(x, y).slope, abs=0.05)

    def test_iteration_cap_warns(self, rng):
        x = rng.uniform(0, 10, 40)
        y = 1 + x + rng.standard_cauchy(40)
        with pytest.warns(RuntimeWarning, match="did not converge"):
            result = robust_fit(x, y, method='huber', max_iter=1, tol=1e-15)
        assert not result.converged
        assert result.iterations == 1

    def test_constant_x_singular(self):
        with pytest.raises(SingularMatrixError):
            robust_fit([2, 2, 2, 2], [1, 2, 3, 4], method='huber')


class TestRobustValidation:

    def test_unknown_method(self):
        with pytest.raises(InvalidParameterError):
            robust_fit([1, 2, 3], [1, 2, 3], method='lad')

    def test_too_few(self):
        with pytest.raises(InsufficientDataError):
            robust_fit([1, 2], [1, 2])

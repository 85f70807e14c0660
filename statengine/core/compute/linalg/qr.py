"""
QR decomposition for least squares.

Used by regression fitting and diagnostics (coefficients, leverage and
coefficient covariance all come from one decomposition of X).
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from statengine.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthonormal columns (n x k, k = min(n, p))
        R: Upper triangular matrix (k x p)
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def qr_cpu(X: NDArray[np.floating[Any]]) -> QRResult:
    """
    Economy QR of X (n x p) via LAPACK.

    Rank counts diagonal entries of R above max(n, p) * eps * max|R_ii|.
    """
    Q, R = np.linalg.qr(X, mode="reduced")

    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R.max() > 0:
        tol = max(X.shape) * np.finfo(X.dtype).eps * diag_R.max()
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=Q, R=R, rank=rank)


def qr_solve_cpu(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    check_rank: bool = True,
) -> tuple[NDArray[np.floating[Any]], QRResult]:
    """
    Solve least squares via QR decomposition.

    Solves min_b ||y - Xb||^2 as b = R^-1 Q'y.

    Args:
        X: Design matrix (n x p), n >= p
        y: Response vector (n,)
        check_rank: If True, raise SingularMatrixError on rank-deficient X

    Returns:
        (coefficient vector (p,), the QRResult used)

    Raises:
        SingularMatrixError: If X is rank-deficient and check_rank=True
    """
    n, p = X.shape
    qr_result = qr_cpu(X)

    if check_rank and qr_result.rank < p:
        raise SingularMatrixError(
            f"Design matrix is rank-deficient: rank={qr_result.rank}, expected={p}. "
            f"This indicates perfect multicollinearity.",
            matrix_name='X',
            rank=qr_result.rank,
            expected_rank=p
        )

    Qty = qr_result.Q.T @ y
    beta = solve_triangular(qr_result.R[:p, :p], Qty[:p], lower=False)

    return beta, qr_result


def xtx_inverse(qr_result: QRResult) -> NDArray[np.floating[Any]]:
    """(X'X)^-1 from the R factor: R^-1 R^-T."""
    p = qr_result.R.shape[1]
    R_inv = solve_triangular(qr_result.R[:p, :p], np.eye(p), lower=False)
    return R_inv @ R_inv.T


def hat_diagonal(qr_result: QRResult) -> NDArray[np.floating[Any]]:
    """Leverage values h_ii, the row sums of Q squared."""
    return np.sum(qr_result.Q ** 2, axis=1)

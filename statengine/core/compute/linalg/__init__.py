"""
Linear algebra kernels for statengine.

Submodules:
    qr: QR decomposition and least-squares solve
"""

from statengine.core.compute.linalg.qr import (
    QRResult,
    qr_cpu,
    qr_solve_cpu,
    xtx_inverse,
    hat_diagonal,
)

__all__ = [
    "QRResult",
    "qr_cpu",
    "qr_solve_cpu",
    "xtx_inverse",
    "hat_diagonal",
]

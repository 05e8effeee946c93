"""Small dense linear solver used by the radial fitter.

Systems here are tiny (3 or 5 unknowns), so plain Python lists are used
throughout. Over-determined systems are reduced to their normal equations
before elimination.
"""

import logging
from collections.abc import Sequence

from polycore.exceptions import SingularMatrixError

logger = logging.getLogger(__name__)

Matrix = list[list[float]]


def gauss_solve(
    matrix: Sequence[Sequence[float]],
    rhs: Sequence[float],
    tolerance: float = 1e-12,
) -> list[float]:
    """Solve a square system A x = b by Gaussian elimination with partial pivoting.

    Inputs are copied; the caller's lists are never modified.

    Args:
        matrix: Square coefficient matrix A (n rows of n values)
        rhs: Right-hand side b (n values)
        tolerance: Relative pivot threshold; a pivot whose magnitude is at most
            ``tolerance * max|A|`` marks the system as singular

    Returns:
        Solution vector x

    Raises:
        ValueError: If the shapes do not describe a square system
        SingularMatrixError: If the matrix is singular or nearly so
    """
    n = len(matrix)
    if n == 0 or len(rhs) != n or any(len(row) != n for row in matrix):
        raise ValueError(
            f"Expected a square system, got {n} rows and {len(rhs)} right-hand values"
        )

    augmented: Matrix = [
        [float(v) for v in row] + [float(b)] for row, b in zip(matrix, rhs, strict=True)
    ]
    scale = max(abs(v) for row in augmented for v in row[:n])
    threshold = tolerance * scale if scale > 0 else tolerance

    for col in range(n):
        # Partial pivoting: bring the largest remaining entry of this column up
        pivot_row = max(range(col, n), key=lambda r: abs(augmented[r][col]))
        pivot = augmented[pivot_row][col]
        if abs(pivot) <= threshold:
            logger.debug(
                "Singular system: column=%d pivot=%.3e threshold=%.3e", col, pivot, threshold
            )
            raise SingularMatrixError(col, pivot)
        if pivot_row != col:
            augmented[col], augmented[pivot_row] = augmented[pivot_row], augmented[col]

        for row in range(col + 1, n):
            factor = augmented[row][col] / pivot
            if factor == 0:
                continue
            for k in range(col, n + 1):
                augmented[row][k] -= factor * augmented[col][k]

    solution = [0.0] * n
    for row in range(n - 1, -1, -1):
        acc = augmented[row][n]
        for k in range(row + 1, n):
            acc -= augmented[row][k] * solution[k]
        solution[row] = acc / augmented[row][row]

    return solution


def normal_equations(
    matrix: Sequence[Sequence[float]], rhs: Sequence[float]
) -> tuple[Matrix, list[float]]:
    """Form the normal equations (A^T A, A^T b) of a rectangular system.

    Args:
        matrix: Coefficient matrix A (m rows of n values)
        rhs: Right-hand side b (m values)

    Returns:
        Tuple of (A^T A as n x n, A^T b as n values)
    """
    n = len(matrix[0])
    ata = [[0.0] * n for _ in range(n)]
    atb = [0.0] * n
    for row, b in zip(matrix, rhs, strict=True):
        for i in range(n):
            atb[i] += row[i] * b
            for j in range(i, n):
                ata[i][j] += row[i] * row[j]
    for i in range(n):
        for j in range(i):
            ata[i][j] = ata[j][i]
    return ata, atb


def least_squares(
    matrix: Sequence[Sequence[float]],
    rhs: Sequence[float],
    tolerance: float = 1e-12,
) -> list[float]:
    """Least-squares solution of A x = b.

    A square system is solved directly. An over-determined one is solved
    through its normal equations.

    Args:
        matrix: Coefficient matrix A (m rows of n values, m >= n)
        rhs: Right-hand side b (m values)
        tolerance: Relative pivot threshold passed to gauss_solve

    Returns:
        Solution vector x minimizing ||A x - b||

    Raises:
        ValueError: If rows have inconsistent lengths or rhs length differs
        SingularMatrixError: If there are fewer equations than unknowns or
            the system is rank deficient
    """
    if not matrix:
        raise ValueError("Empty system")
    m, n = len(matrix), len(matrix[0])
    if len(rhs) != m or any(len(row) != n for row in matrix):
        raise ValueError("Inconsistent system shape")
    if m < n:
        raise SingularMatrixError(m, 0.0)
    if m == n:
        return gauss_solve(matrix, rhs, tolerance)

    ata, atb = normal_equations(matrix, rhs)
    return gauss_solve(ata, atb, tolerance)

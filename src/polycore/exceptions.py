"""Exception hierarchy for Polycore."""


class PolycoreError(Exception):
    """Base exception for all Polycore errors."""

    pass


class PolygonError(PolycoreError):
    """Errors related to polygon construction, loading or saving."""

    pass


class InvalidPolygonError(PolygonError):
    """Polygon input is malformed (non-finite or mismatched coordinates)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PolygonLoadError(PolygonError):
    """Error loading a polygon file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load polygon '{path}': {reason}")


class PolygonSaveError(PolygonError):
    """Error saving a polygon file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save polygon '{path}': {reason}")


class GeometryError(PolycoreError):
    """Errors in geometric calculations."""

    pass


class InvalidParameterError(GeometryError, ValueError):
    """An operation parameter is out of its valid range."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name}={value!r}: {reason}")


class SolverError(PolycoreError):
    """Errors raised by the linear solver or the fitters built on it."""

    pass


class SingularMatrixError(SolverError):
    """Linear system has no unique solution."""

    def __init__(self, column: int, pivot: float) -> None:
        self.column = column
        self.pivot = pivot
        super().__init__(f"Singular matrix: pivot {pivot:.3e} in column {column}")


class FitError(SolverError):
    """Radial fit could not be computed for the given points."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"{kind.capitalize()} fit failed: {reason}")

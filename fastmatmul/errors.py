class MatrixError(Exception):
    """Base class for every failure raised by the multiplication core."""


class InvalidDimension(MatrixError, ValueError):
    pass


class IndexOutOfRange(MatrixError, IndexError):
    pass


class InvalidBounds(MatrixError, ValueError):
    pass


class DimensionMismatch(MatrixError, ValueError):
    pass


class ConformabilityError(MatrixError, ValueError):
    pass


class UnknownStrategy(MatrixError, ValueError):
    pass


class InvalidValueRange(MatrixError, ValueError):
    pass

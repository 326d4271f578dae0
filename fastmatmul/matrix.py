import operator

import numpy as np

from .errors import DimensionMismatch, IndexOutOfRange, InvalidBounds, InvalidDimension

_CELL = "{:8.2f}"
_ELLIPSIS_ROW = " ...  ...  ... "


class Matrix:
    """Dense row-major matrix of float64 scalars.

    Storage is a private ndarray owned by the instance. Every constructor and
    operation copies into fresh storage, so two matrices never share memory
    and no operation changes its operands.
    """

    __slots__ = ("_data",)

    def __init__(self, rows: int, columns: int):
        if rows <= 0 or columns <= 0:
            raise InvalidDimension(f"matrix dimensions must be positive, got {rows}x{columns}")
        self._data = np.zeros((rows, columns), dtype=np.float64)

    @classmethod
    def from_grid(cls, grid) -> "Matrix":
        """Deep-copy a rectangular grid (nested sequences or a 2-D array)."""
        try:
            data = np.array(grid, dtype=np.float64)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidDimension(f"grid is not a rectangular matrix of reals: {e}") from e
        if data.ndim != 2 or data.shape[0] == 0 or data.shape[1] == 0:
            raise InvalidDimension(f"grid must be a non-empty 2-D matrix, got shape {data.shape}")
        return cls._own(data)

    @classmethod
    def _own(cls, data: np.ndarray) -> "Matrix":
        # caller hands over a freshly allocated 2-D float64 array
        m = cls.__new__(cls)
        m._data = data
        return m

    # ---- shape ----
    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self):
        return self._data.shape

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    # ---- element access ----
    def _check_index(self, key):
        try:
            row, column = key
        except (TypeError, ValueError):
            raise IndexOutOfRange(f"expected a (row, column) index, got {key!r}") from None
        try:
            row, column = operator.index(row), operator.index(column)
        except TypeError:
            raise IndexOutOfRange(f"indices must be integers, got {key!r}") from None
        if not 0 <= row < self.rows:
            raise IndexOutOfRange(f"row index {row} is outside a {self.rows}x{self.columns} matrix")
        if not 0 <= column < self.columns:
            raise IndexOutOfRange(f"column index {column} is outside a {self.rows}x{self.columns} matrix")
        return row, column

    def __getitem__(self, key) -> float:
        return float(self._data[self._check_index(key)])

    def __setitem__(self, key, value):
        self._data[self._check_index(key)] = value

    # ---- block operations ----
    def submatrix(self, start_row: int, start_column: int, rows: int, columns: int) -> "Matrix":
        if (start_row < 0 or start_column < 0 or rows <= 0 or columns <= 0
                or start_row + rows > self.rows or start_column + columns > self.columns):
            raise InvalidBounds(
                f"block ({start_row}, {start_column}) of {rows}x{columns} "
                f"does not fit in a {self.rows}x{self.columns} matrix"
            )
        block = self._data[start_row:start_row + rows, start_column:start_column + columns]
        return Matrix._own(block.copy())

    def split(self):
        """Return the (top-left, top-right, bottom-left, bottom-right) quadrants."""
        if not self.is_square or self.rows % 2:
            raise InvalidDimension(f"only even-sided square matrices split into quadrants, got {self.rows}x{self.columns}")
        h = self.rows // 2
        return (self.submatrix(0, 0, h, h), self.submatrix(0, h, h, h),
                self.submatrix(h, 0, h, h), self.submatrix(h, h, h, h))

    @staticmethod
    def combine(top_left: "Matrix", top_right: "Matrix",
                bottom_left: "Matrix", bottom_right: "Matrix") -> "Matrix":
        if (top_left.rows != top_right.rows or bottom_left.rows != bottom_right.rows
                or top_left.columns != bottom_left.columns or top_right.columns != bottom_right.columns):
            raise DimensionMismatch(
                "quadrant edges do not align: "
                f"{top_left.shape} {top_right.shape} / {bottom_left.shape} {bottom_right.shape}"
            )
        r, c = top_left.shape
        out = np.empty((r + bottom_left.rows, c + top_right.columns), dtype=np.float64)
        out[:r, :c] = top_left._data;     out[:r, c:] = top_right._data
        out[r:, :c] = bottom_left._data;  out[r:, c:] = bottom_right._data
        return Matrix._own(out)

    def padded(self, size: int) -> "Matrix":
        """Zero-extend into a size x size matrix with this one in the top-left corner."""
        if size < self.rows or size < self.columns:
            raise InvalidBounds(f"cannot pad a {self.rows}x{self.columns} matrix to {size}x{size}")
        out = np.zeros((size, size), dtype=np.float64)
        out[:self.rows, :self.columns] = self._data
        return Matrix._own(out)

    # ---- arithmetic ----
    def _require_same_shape(self, other: "Matrix", op: str):
        if not isinstance(other, Matrix):
            raise TypeError(f"cannot {op} Matrix and {type(other).__name__}")
        if self.shape != other.shape:
            raise DimensionMismatch(f"cannot {op} {self.rows}x{self.columns} and {other.rows}x{other.columns} matrices")

    def __add__(self, other: "Matrix") -> "Matrix":
        self._require_same_shape(other, "add")
        return Matrix._own(self._data + other._data)

    def __sub__(self, other: "Matrix") -> "Matrix":
        self._require_same_shape(other, "subtract")
        return Matrix._own(self._data - other._data)

    def matmul_kernel(self, other: "Matrix") -> "Matrix":
        """Plain product without any bookkeeping; callers check conformability."""
        return Matrix._own(self._data.dot(other._data))

    # ---- conversion ----
    def copy(self) -> "Matrix":
        return Matrix._own(self._data.copy())

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def to_list(self):
        return self._data.tolist()

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self):
        return f"Matrix({self.rows}x{self.columns})"

    # ---- rendering ----
    def _render_row(self, i: int, columns) -> str:
        return " ".join(_CELL.format(self._data[i, j]) for j in columns)

    def render(self) -> str:
        return "\n".join(self._render_row(i, range(self.columns)) for i in range(self.rows))

    __str__ = render

    def render_short(self, max_elements: int = 10) -> str:
        """Corner blocks only once either axis exceeds max_elements."""
        if self.rows <= max_elements and self.columns <= max_elements:
            return self.render()

        show_rows = min(max_elements // 2, self.rows // 2)
        show_cols = min(max_elements // 2, self.columns // 2)
        left = range(show_cols)
        right = range(self.columns - show_cols, self.columns)

        def line(i):
            head = "".join(_CELL.format(self._data[i, j]) + " " for j in left)
            return head + " ... " + self._render_row(i, right)

        top = [line(i) for i in range(show_rows)]
        bottom = [line(i) for i in range(self.rows - show_rows, self.rows)]
        # the ellipsis row always ends its line, even with no rows below it
        return "\n".join(top + [_ELLIPSIS_ROW]) + "\n" + "\n".join(bottom)

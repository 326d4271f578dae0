from numbers import Real


def validate_matrix(matrix, name: str):
    if not matrix or not isinstance(matrix, list):
        raise ValueError(f"{name} cannot be empty.")
    width = None
    for i, row in enumerate(matrix):
        if not isinstance(row, list) or not row:
            raise ValueError(f"{name} row {i} must be a non-empty list.")
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise ValueError(f"{name} is ragged: row {i} has {len(row)} values, expected {width}.")
        for value in row:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"{name} row {i} holds a non-numeric value: {value!r}")


def validate_matrices(matrix_a, matrix_b):
    validate_matrix(matrix_a, "Matrix A")
    validate_matrix(matrix_b, "Matrix B")
    if len(matrix_a[0]) != len(matrix_b):
        raise ValueError("Matrix A's column count must match Matrix B's row count.")


def validate_generation(rows: int, columns: int, min_value: float, max_value: float, min_side: int):
    if rows < min_side or columns < min_side:
        raise ValueError(f"rows and columns must be at least {min_side}, got {rows}x{columns}.")
    if min_value >= max_value:
        raise ValueError("min_value must be less than max_value.")

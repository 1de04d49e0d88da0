"""Matrix riddles: in-place rotation and zeroing of rows and columns."""


def rotate(matrix):
    """Rotate a square matrix (list of row lists) by 90 degrees clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    last = size - 1
    for i in range(last):
        for j in range(i, last - i):
            (
                matrix[j][last - i],
                matrix[last - i][last - j],
                matrix[last - j][i],
                matrix[i][j],
            ) = (
                matrix[i][j],
                matrix[j][last - i],
                matrix[last - i][last - j],
                matrix[last - j][i],
            )


def zero_matrix(matrix):
    """Set every row and column that holds a zero to all zeros, in place."""
    if not matrix or not matrix[0]:
        return
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_columns = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_columns:
                row[j] = 0


def format_matrix(matrix):
    """Render a matrix with each value right-aligned in two columns, one row per line."""
    return "".join("".join(f"{value:>2} " for value in row) + "\n" for row in matrix)
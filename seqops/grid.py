"""Two-dimensional sequences (lists of rows)."""

from .utils import check_size, get_logger


logger = get_logger(__name__)


def make_2d(rows, cols, value=None):
    """Allocate a `rows` x `cols` grid.

    Args:
        rows (int): Number of rows.
        cols (int): Number of items by row.
        value (Any): Initial value of every cell (default None). Each
            cell references the same object, so use immutable values.

    Return:
        List[list]: The grid, each row being a distinct list.

    Example:

        >>> make_2d(2, 3, 0)
        [[0, 0, 0], [0, 0, 0]]
    """
    check_size(rows, "rows")
    check_size(cols, "cols")

    if cols == 0 and value is not None:
        logger.warning("value is ignored because cols is 0")

    return [[value] * cols for _ in range(rows)]


def expand_2d(grid, rows, cols, value=None):
    """Grow a grid to at least `rows` rows of at least `cols` items.

    Rows shorter than `cols` are padded with `value` and new rows filled
    with `value` are appended until there are `rows` of them. Longer
    rows and extra rows are kept as they are, nothing is ever truncated.

    Args:
        grid (Optional[List[list]]):
            The grid to expand, modified in place. `None` is treated as
            an empty grid.
        rows (int):
            Minimum number of rows.
        cols (int):
            Minimum number of items by row.
        value (Any):
            Padding value (default None).

    Return:
        List[list]: The expanded grid, which is `grid` itself unless
        `grid` was `None`.

    Example:

        >>> expand_2d([[1, 2]], 2, 3, 0)
        [[1, 2, 0], [0, 0, 0]]
    """
    check_size(rows, "rows")
    check_size(cols, "cols")

    if grid is None:
        grid = []

    for row in grid:
        if len(row) < cols:
            row.extend([value] * (cols - len(row)))
        elif len(row) > cols:
            logger.debug(
                "row of {} items is longer than {}, left untouched".format(
                    len(row), cols))

    while len(grid) < rows:
        grid.append([value] * cols)

    return grid

import sys

from eight_queens.helpers.board import Board

QUEEN_MARK = "Q"
NO_SOLUTION = "NO SOLUTION"


def render(board: Board, solved: bool) -> str:
    """
    Turn the final board into printable text.

    Row 0 of the grid is the top border, so a queen on board row r is drawn
    on grid line r + 1 at character 2 * col + 1.

    Args:
        board (Board): Board left behind by the search.
        solved (bool): Whether the search succeeded.

    Returns:
        str: "NO SOLUTION", or the "SOLUTION:" header followed by the grid.

    Examples:
        >>> print(render(Board.from_columns([1, 3, 0, 2]), True), end="")  # doctest: +NORMALIZE_WHITESPACE
        SOLUTION:
        ~~~~~~~~~
         _ _ _ _
        |_|Q|_|_|
        |_|_|_|Q|
        |Q|_|_|_|
        |_|_|Q|_|
    """
    if not solved:
        return NO_SOLUTION

    grid = [list(" _" * board.size + " ")]
    grid += [list("|_" * board.size + "|") for _ in range(board.size)]
    for queen in board:
        if not board.is_on_board(queen.position):
            continue
        grid[queen.row + 1][queen.col * 2 + 1] = QUEEN_MARK

    lines = ["SOLUTION:", "~~~~~~~~~"] + ["".join(line) for line in grid]
    return "\n".join(lines) + "\n"


def present(board: Board, solved: bool, stream=None):
    """Write the rendered board to `stream` (stdout by default)."""
    stream = stream or sys.stdout
    stream.write(render(board, solved))
    stream.flush()

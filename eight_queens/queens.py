import logging

from eight_queens.helpers.board import BOARD_SIZE, OFF_BOARD, Board
from eight_queens.helpers.presenter import present

logger = logging.getLogger(__name__)


class Queens:
    def __init__(self, n: int = BOARD_SIZE):
        """
        Initialize an n-Queens solver that owns its board.

        Args:
            n (int): Board dimension (n x n).
        """
        self.n = n
        self.board = Board(n)  # board[row].col = column of the queen in that row
        self.placements = 0

    def has_conflict(self, row_index: int) -> bool:
        """
        Check whether the queen just placed in row_index attacks an earlier queen.

        Only rows 0..row_index-1 are considered; rows never repeat, so only
        columns and the two downward diagonals from each earlier queen are checked.

        Args:
            row_index (int): Row whose queen was just moved.

        Returns:
            bool: True if this queen conflicts with any earlier queen.

        Examples:
            >>> q = Queens(8)
            >>> q.board = Board.from_columns([0, 4, 7, 5, 2, 6, 1, 3])
            >>> q.has_conflict(7)
            False
            >>> q.board[2].col = 2
            >>> q.has_conflict(2)
            True
        """
        moved = self.board[row_index]
        for i in range(row_index):
            earlier = self.board[i]

            if moved.col == earlier.col:
                return True

            x = row_index - i
            right = Board.diagonal_point(earlier.position, x)
            left = Board.diagonal_point(earlier.position, -x)
            if (self.board.is_on_board(right) and Board.occupies(moved, right)) or \
                    (self.board.is_on_board(left) and Board.occupies(moved, left)):
                return True
        return False

    def place(self, row_index: int = 0) -> bool:
        """
        Recursive backtracking: give every row from row_index down a column.

        Stops at the first complete placement. If no column works for this row,
        the queen is taken back off the board before returning.

        Args:
            row_index (int): Row being filled.

        Returns:
            bool: True if rows row_index..n-1 could all be placed.
        """
        # Base case: every row holds a queen
        if row_index >= self.n:
            return True

        queen = self.board[row_index]
        for col in range(self.n):
            queen.col = col
            self.placements += 1
            if self.has_conflict(row_index):
                continue
            if self.place(row_index + 1):
                return True

        # Backtrack
        queen.col = OFF_BOARD
        return False

    def solve(self) -> bool:
        """
        Clear the board and search for the first solution.

        Returns:
            bool: True if the board now holds a solution.

        Examples:
            >>> q = Queens(8)
            >>> q.solve(), q.board.columns()
            (True, [0, 4, 7, 5, 2, 6, 1, 3])
            >>> Queens(3).solve()
            False
        """
        self.board.initialize()
        self.placements = 0
        solved = self.place(0)
        logger.debug("%d-Queens solved=%s after %d placements",
                     self.n, solved, self.placements)
        return solved


def main():
    queens = Queens(BOARD_SIZE)
    present(queens.board, queens.solve())
    return 0


if __name__ == "__main__":
    main()

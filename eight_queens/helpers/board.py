from dataclasses import dataclass

BOARD_SIZE = 8
OFF_BOARD = -1  # column of a queen that has not been placed yet


@dataclass(frozen=True)
class Position:
    row: int
    col: int


@dataclass
class Queen:
    """A queen pinned to one row; only its column moves."""
    row: int
    col: int = OFF_BOARD

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)


class Board:
    def __init__(self, size: int = BOARD_SIZE):
        """
        Create a board with one queen per row, all of them off the board.

        Args:
            size (int): Board dimension (size x size).

        Raises:
            ValueError: If size is smaller than 1.
        """
        if size < 1:
            raise ValueError(f"board size must be at least 1, got {size}")
        self.size = size
        self.queens = []
        self.initialize()

    @classmethod
    def from_columns(cls, columns: list[int]) -> "Board":
        """
        Build a board from a row-ordered list of columns.

        Args:
            columns (list[int]): columns[row] = column of that row's queen,
                or -1 for an unplaced queen.

        Returns:
            Board: A board of size len(columns) with the given placement.

        Examples:
            >>> Board.from_columns([1, 3, 0, 2]).columns()
            [1, 3, 0, 2]
        """
        board = cls(len(columns))
        for queen, col in zip(board.queens, columns):
            if not OFF_BOARD <= col < board.size:
                raise ValueError(f"column {col} out of range for row {queen.row}")
            queen.col = col
        return board

    def initialize(self):
        """Put every queen back on its own row, off the board."""
        self.queens = [Queen(row) for row in range(self.size)]

    def __getitem__(self, row: int) -> Queen:
        return self.queens[row]

    def __iter__(self):
        return iter(self.queens)

    def columns(self) -> list[int]:
        return [queen.col for queen in self.queens]

    def is_on_board(self, position: Position) -> bool:
        """
        Examples:
            >>> board = Board()
            >>> board.is_on_board(Position(0, 7)), board.is_on_board(Position(8, 0))
            (True, False)
        """
        return 0 <= position.row < self.size and 0 <= position.col < self.size

    @staticmethod
    def occupies(queen: Queen, position: Position) -> bool:
        return queen.row == position.row and queen.col == position.col

    @staticmethod
    def diagonal_point(position: Position, row_offset: int) -> Position:
        """
        Find where a downward diagonal from `position` meets a lower row.

        The row always moves down by |row_offset|; the sign of the offset only
        picks the direction: positive goes down-right, negative down-left.
        The returned point may be off the board.

        Args:
            position (Position): Starting point of the diagonal.
            row_offset (int): Non-zero distance in rows.

        Returns:
            Position: The diagonal cell row_offset rows below `position`.

        Raises:
            ValueError: If row_offset is 0 (upward diagonals are never asked for).

        Examples:
            >>> Board.diagonal_point(Position(2, 3), 2)
            Position(row=4, col=5)
            >>> Board.diagonal_point(Position(2, 3), -2)
            Position(row=4, col=1)
        """
        if row_offset == 0:
            raise ValueError("row_offset must be non-zero")
        return Position(position.row + abs(row_offset), position.col + row_offset)

    def is_solved(self) -> bool:
        """
        Check the whole board pairwise, independent of the search.

        Returns:
            bool: True if every queen is placed and none attack each other.
        """
        if not all(self.is_on_board(queen.position) for queen in self.queens):
            return False
        for i, first in enumerate(self.queens):
            for second in self.queens[i + 1:]:
                same_col = first.col == second.col
                same_diag = abs(first.row - second.row) == abs(first.col - second.col)
                if same_col or same_diag:
                    return False
        return True

from eight_queens.queens import Queens, main

__all__ = ["Queens", "main"]

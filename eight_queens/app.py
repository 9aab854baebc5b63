from flask import Flask, jsonify, request
import os
import traceback

from eight_queens.helpers.board import BOARD_SIZE, Board
from eight_queens.helpers.presenter import render
from eight_queens.queens import Queens

app = Flask(__name__)


# ---------------- Helpers ---------------- #

def parse_columns(data):
    """Pull the row-ordered list of columns out of a JSON body."""
    columns = data.get("columns") if isinstance(data, dict) else None
    if not isinstance(columns, list) or len(columns) != BOARD_SIZE:
        raise ValueError(f"body must contain a 'columns' list of {BOARD_SIZE} integers")
    if not all(isinstance(c, int) and not isinstance(c, bool) for c in columns):
        raise ValueError("'columns' must hold integers")
    return columns


# ---------------- Routes ---------------- #

@app.route("/")
def index():
    queens = Queens(BOARD_SIZE)
    solved = queens.solve()
    return render(queens.board, solved), 200, {"Content-Type": "text/plain; charset=utf-8"}


@app.route("/solve")
def solve():
    try:
        queens = Queens(BOARD_SIZE)
        solved = queens.solve()
        app.logger.info("Solved %d-Queens: %s (%d placements)", BOARD_SIZE, solved, queens.placements)
        return jsonify({
            "solved": solved,
            "size": BOARD_SIZE,
            "columns": queens.board.columns(),
            "board": render(queens.board, solved),
        })
    except Exception:
        app.logger.error("Error solving board:\n%s", traceback.format_exc())
        return jsonify({"error": "Server error."}), 500


@app.route("/validate", methods=["POST"])
def validate():
    data = request.get_json(silent=True)
    try:
        board = Board.from_columns(parse_columns(data))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"valid": board.is_solved()})


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(debug=True, port=port)

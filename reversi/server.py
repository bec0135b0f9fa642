"""FastAPI HTTP interface for analysing Othello positions.

The server keeps no games of its own. Every request carries the position it
is about, in the same shape :meth:`Board.to_state` produces, and responses
return the resulting position so clients can send it back on the next call.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from .bots import BOTS
from .game import Board, InvalidMove

logger = logging.getLogger(__name__)

app = FastAPI(title="Reversi engine")

DEFAULT_BOT = "Greedy"


class Position(BaseModel):
    board: List[List[str]]
    current: str
    last: Optional[List[int]] = None


class AnalyzeRequest(Position):
    bot: str = DEFAULT_BOT


class MoveRequest(Position):
    row: int
    col: int


def _load(position: Position) -> Board:
    try:
        return Board.from_state(
            {"board": position.board, "current": position.current, "last": position.last}
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid position: {exc}")


def _describe(board: Board) -> Dict[str, Any]:
    winner = board.winner()
    state = board.to_state()
    state.update(
        {
            "legal": [list(m) for m in board.valid_moves()],
            "score": list(board.score()),
            "over": board.is_game_over(),
            "winner": winner.value if winner is not None else None,
        }
    )
    return state


@app.get("/new")
def new_game() -> Dict[str, Any]:
    return _describe(Board())


@app.get("/bots")
def list_bots() -> Dict[str, Any]:
    return {"bots": list(BOTS.keys()), "default": DEFAULT_BOT}


@app.post("/analyze")
def analyze(req: AnalyzeRequest) -> Dict[str, Any]:
    strategy = BOTS.get(req.bot)
    if strategy is None:
        raise HTTPException(status_code=404, detail=f"Unknown bot: {req.bot}")
    board = _load(req)
    result = _describe(board)
    move = strategy(board) if not board.is_game_over() else None
    result["move"] = list(move) if move is not None else None
    return result


@app.post("/move")
def make_move(req: MoveRequest) -> Dict[str, Any]:
    board = _load(req)
    try:
        board.make_move(req.row, req.col)
    except InvalidMove as exc:
        logger.info("Rejected move: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    return _describe(board)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

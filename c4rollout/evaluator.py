"""Monte Carlo move evaluation: random rollouts scored per candidate column."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from c4rollout.board import COLUMNS, LEVELS, Board, Circle, get_winner, line_through, opponent

GAMES_PER_MOVE = 10_000


@dataclass(frozen=True)
class EvaluatorConfig:
    games_per_move: int = GAMES_PER_MOVE
    seed: Optional[int] = None

    def validate(self) -> None:
        if self.games_per_move < 1:
            raise ValueError("games_per_move must be >= 1")

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


@dataclass
class ColumnStats:
    col: int
    won: int = 0
    lost: int = 0
    draws: int = 0
    games: int = 0
    immediate_win: bool = False

    @property
    def score(self) -> float:
        # +1 keeps a loss-free column finite and damps small samples.
        return self.won / (self.lost + 1)


def rollout(board: Board, to_move: Circle, rng: random.Random) -> Circle:
    """
    Play uniformly random moves on `board` until the game ends.

    The board is mutated in place, so callers hand in a copy. A full column is
    simply re-drawn without passing the turn. Returns YELLOW, RED or DRAW.
    """

    outcome = get_winner(board)
    if outcome != Circle.EMPTY:
        return outcome

    grid = board.cells.tolist()
    outcome = _playout(grid, [board.level_of(col) for col in range(COLUMNS)], to_move, rng)
    board.cells[:] = grid
    return outcome


def _playout(grid: List[List[int]], heights: List[int], to_move: Circle, rng: random.Random) -> Circle:
    """Random moves on a line-free nested-list grid; mutates `grid` and `heights`."""
    # Only the newest piece can complete a line.
    pieces = sum(heights)
    player, other = int(to_move), int(opponent(to_move))
    while True:
        col = rng.randrange(COLUMNS)
        level = heights[col]
        if level == LEVELS:
            continue
        grid[level][col] = player
        heights[col] = level + 1
        pieces += 1
        if line_through(grid, col, level, player):
            outcome = Circle(player)
            break
        if pieces == COLUMNS * LEVELS:
            outcome = Circle.DRAW
            break
        player, other = other, player
    return outcome


def score_columns(
    board: Board,
    player: Circle,
    config: Optional[EvaluatorConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[ColumnStats]:
    """
    Rollout statistics for each legal column, scanned left to right.

    Scanning stops at the first column whose drop wins outright; that column's
    stats come last with immediate_win set and no games played.
    """

    cfg = config or EvaluatorConfig()
    cfg.validate()
    if rng is None:
        rng = cfg.make_rng()
    other = opponent(player)

    results: List[ColumnStats] = []
    for col in range(COLUMNS):
        if board.column_is_full(col):
            continue

        after = board.copy()
        after.drop(col, player)
        stats = ColumnStats(col=col)
        start = get_winner(after)
        if start == player:
            stats.immediate_win = True
            results.append(stats)
            break

        # Every game of a column starts from the same position.
        grid = after.cells.tolist()
        heights = [after.level_of(c) for c in range(COLUMNS)]
        for _ in range(cfg.games_per_move):
            if start != Circle.EMPTY:
                winner = start
            else:
                winner = _playout([row[:] for row in grid], list(heights), other, rng)
            stats.games += 1
            if winner == player:
                stats.won += 1
            elif winner == other:
                stats.lost += 1
            else:
                stats.draws += 1
        results.append(stats)

    return results


def best_column(stats: List[ColumnStats]) -> Optional[int]:
    """Column with the strictly highest score; an immediate win beats everything."""
    best: Optional[ColumnStats] = None
    for s in stats:
        if s.immediate_win:
            return s.col
        if best is None or s.score > best.score:
            best = s
    return best.col if best is not None else None


def suggest_move(
    board: Board,
    player: Circle,
    config: Optional[EvaluatorConfig] = None,
    rng: Optional[random.Random] = None,
) -> Optional[int]:
    """Return the column to play for `player`, or None when every column is full."""
    return best_column(score_columns(board, player, config=config, rng=rng))

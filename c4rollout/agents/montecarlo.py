"""Monte Carlo rollout agent."""

from __future__ import annotations

from typing import List, Optional

from c4rollout.agents.base import Agent
from c4rollout.board import Board, Circle
from c4rollout.evaluator import ColumnStats, EvaluatorConfig, best_column, score_columns


class MonteCarloAgent(Agent):
    """
    Picks the column whose random continuations win most often.

    The RNG is seeded once from the config and shared across every move the
    agent makes, so a seeded agent replays the same game against the same
    opponent moves.
    """

    def __init__(self, name: str, config: Optional[EvaluatorConfig] = None) -> None:
        self.name = name
        self.config = config or EvaluatorConfig()
        self.config.validate()
        self.rng = self.config.make_rng()
        self.last_stats: List[ColumnStats] = []

    def select_move(self, board: Board, player: Circle) -> Optional[int]:
        self.last_stats = score_columns(board, player, config=self.config, rng=self.rng)
        return best_column(self.last_stats)

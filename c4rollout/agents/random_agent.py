"""Random baseline agent."""

from __future__ import annotations

import random
from typing import Optional

from c4rollout.agents.base import Agent
from c4rollout.board import Board, Circle


class RandomAgent(Agent):
    def __init__(self, name: str, seed: Optional[int] = None) -> None:
        self.name = name
        self.rng = random.Random(seed)

    def select_move(self, board: Board, player: Circle) -> Optional[int]:
        legal = board.legal_columns()
        if not legal:
            return None
        return self.rng.choice(legal)

"""Human-in-the-loop agent that defers input handling to a CLI prompt function."""

from __future__ import annotations

from typing import Callable, Optional

from c4rollout.agents.base import Agent
from c4rollout.board import Board, Circle

PromptFn = Callable[[Board, Circle, str], int]


class HumanAgent(Agent):
    def __init__(self, name: str, prompt_fn: PromptFn) -> None:
        self.name = name
        self.prompt_fn = prompt_fn

    def select_move(self, board: Board, player: Circle) -> Optional[int]:
        if not board.legal_columns():
            return None
        return self.prompt_fn(board, player, self.name)

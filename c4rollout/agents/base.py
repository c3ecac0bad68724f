"""Abstract base class for Connect-4 players."""

from __future__ import annotations

import abc
from typing import Optional

from c4rollout.board import Board, Circle


class Agent(abc.ABC):
    name: str

    @abc.abstractmethod
    def select_move(self, board: Board, player: Circle) -> Optional[int]:
        """Column to drop into for `player`, or None when no column is open."""
        raise NotImplementedError

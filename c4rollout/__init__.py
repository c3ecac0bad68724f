"""Connect-4 against a Monte Carlo rollout player (board + evaluator + agents + CLI)."""

from c4rollout.board import Board, Circle, get_winner
from c4rollout.evaluator import EvaluatorConfig, suggest_move

__all__ = ["Board", "Circle", "EvaluatorConfig", "get_winner", "suggest_move"]

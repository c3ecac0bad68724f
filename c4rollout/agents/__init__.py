"""Agent implementations for Connect-4."""

from c4rollout.agents.base import Agent
from c4rollout.agents.human import HumanAgent
from c4rollout.agents.montecarlo import MonteCarloAgent
from c4rollout.agents.random_agent import RandomAgent

__all__ = ["Agent", "HumanAgent", "MonteCarloAgent", "RandomAgent"]

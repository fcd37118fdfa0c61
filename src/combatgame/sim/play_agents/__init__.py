"""Automated players for headless simulation.

Re-exports the base class, the controller and the concrete agents so
consumers can do::

    from combatgame.sim.play_agents import PlayerController, RandomAgent
"""

from .base import PlayAgent
from .controller import PlayerController
from .heuristic_agent import HeuristicAgent
from .random_agent import RandomAgent

__all__ = ["PlayAgent", "PlayerController", "HeuristicAgent", "RandomAgent"]

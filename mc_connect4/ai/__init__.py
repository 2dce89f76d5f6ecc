"""
mc_connect4/ai/__init__.py - Monte Carlo move selection for Connect Four

This module provides the rollout simulator and the move selector that
aggregates rollout scores per candidate column.
"""

from mc_connect4.ai.rollout import RolloutResult, rollout
from mc_connect4.ai.monte_carlo import MonteCarloPlayer, select_move

__all__ = ['RolloutResult', 'rollout', 'MonteCarloPlayer', 'select_move']

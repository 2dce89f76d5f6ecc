"""
mc_connect4 - Connect Four against a Monte Carlo rollout opponent

This package provides a fixed 7x6 Connect Four board, the rules needed
to play on it, and a move selector that scores candidate columns by
playing out many random games from the current position.
"""

# Version number
__version__ = '0.1.0'

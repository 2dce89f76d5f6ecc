"""
mc_connect4.interfaces - User interfaces for Connect Four

This package contains the text interface that runs the turn loop
between a human player and the Monte Carlo engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []

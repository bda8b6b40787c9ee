"""
Tictac - Tic-Tac-Toe Game-State Engine

A small, authoritative engine for two-player Tic-Tac-Toe.
The engine owns the match and provides:
- State management (board, turn order, outcome)
- Move validation
- Win/draw detection
- A command API (query state, make move, reset) for display clients
"""

__version__ = "0.1.0"

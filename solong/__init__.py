"""A tile-based puzzle game: collect the coins, then reach the exit.

Includes map validation, game rules, an XPM image reader and a pygame window.
"""

__version__ = "0.1.0"
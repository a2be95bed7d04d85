"""A tile-based puzzle game: collect every slime, then reach the chest.

Includes map loading and validation, the game rules, a pygame front end,
and small string, buffer, list and line-reading helpers.
"""

__version__ = "1.0.0"
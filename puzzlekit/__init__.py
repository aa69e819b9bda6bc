"""Solutions to classic programming puzzles on integers, strings, arrays, linked lists and arithmetic series."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "boss_battle", "integers", "linked_list", "strings"]
"""NameCraft: category-based name generation backed by a local JSON store"""

__version__ = "0.1.0"

# namecraft/services/name_generator.py
"""Random sampling of names from name lists."""
import random
from typing import Iterable, List, Optional
from ..models.name_list import NameList

DEFAULT_COUNT = 5

# Returned as the only result when the lists hold no names
NO_NAMES_AVAILABLE = "No names available in the selected lists"

def build_pool(relevant_lists: Iterable[NameList]) -> List[str]:
    """All names of the lists, in list order then within-list order"""
    pool = []
    for name_list in relevant_lists:
        pool.extend(name_list.names)
    return pool

def generate(relevant_lists: Iterable[NameList], prefix: str = "",
             count: int = DEFAULT_COUNT, rng: Optional[random.Random] = None) -> List[str]:
    """
    Draw count names with replacement from the combined pool.

    Args:
        relevant_lists: Lists whose names form the pool
        prefix: Text glued in front of every drawn name, without separator
        count: Number of draws, must not be negative
        rng: Random source, defaults to the random module

    Returns:
        The drawn names, or [NO_NAMES_AVAILABLE] when the pool is empty
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")

    pool = build_pool(relevant_lists)
    if not pool:
        return [NO_NAMES_AVAILABLE]

    rng = rng or random
    return [f"{prefix}{rng.choice(pool)}" for _ in range(count)]

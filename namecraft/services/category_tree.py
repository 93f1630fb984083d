# namecraft/services/category_tree.py
"""Operations over the category forest.

A forest is the ordered list of root categories. Every function here takes a
forest and returns a forest without mutating its input: only the nodes on the
path to a change are copied, the rest are shared. When nothing matches, the
input forest itself is returned.
"""
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Set, Tuple
from ..models.category import Category

logger = logging.getLogger(__name__)

Forest = List[Category]

# Structural or creation-time fields a partial update never touches
PROTECTED_FIELDS = frozenset({"id", "subcategories", "is_subcategory"})

def iter_categories(forest: Forest) -> Iterator[Category]:
    """Yield every category of the forest, depth-first pre-order"""
    for category in forest:
        yield category
        yield from iter_categories(category.subcategories)

def collect_ids(forest: Forest) -> Set[str]:
    return {category.id for category in iter_categories(forest)}

def find(forest: Forest, category_id: str) -> Optional[Category]:
    """First category with the given id in pre-order, or None"""
    return next((c for c in iter_categories(forest) if c.id == category_id), None)

def category_path(forest: Forest, category_id: str) -> List[Category]:
    """Chain of categories from a root down to category_id (empty if absent)"""
    for category in forest:
        if category.id == category_id:
            return [category]
        path = category_path(category.subcategories, category_id)
        if path:
            return [category] + path
    return []

def _replace_first(forest: Forest, category_id: str,
                   replace: Callable[[Category], Category]) -> Tuple[Forest, bool]:
    result = []
    done = False
    for category in forest:
        if not done:
            if category.id == category_id:
                category = replace(category)
                done = True
            else:
                children, done = _replace_first(category.subcategories, category_id, replace)
                if done:
                    category = category.model_copy(update={"subcategories": children})
        result.append(category)
    return result, done

def _prune(forest: Forest, category_id: str) -> Tuple[Forest, bool]:
    result = []
    changed = False
    for category in forest:
        if category.id == category_id:
            changed = True
            continue
        children, children_changed = _prune(category.subcategories, category_id)
        if children_changed:
            category = category.model_copy(update={"subcategories": children})
            changed = True
        result.append(category)
    return result, changed

def insert(forest: Forest, parent_id: Optional[str], new_category: Category) -> Forest:
    """Append new_category to the roots, or to the subcategories of parent_id.

    Unknown parent ids and ids already used in the forest leave it unchanged.
    """
    new_ids = [c.id for c in iter_categories([new_category])]
    if len(set(new_ids)) != len(new_ids) or collect_ids(forest).intersection(new_ids):
        logger.warning(f"Category id {new_category.id} already in use, not inserted")
        return forest

    if not parent_id:
        return [*forest, new_category]

    def append_child(parent: Category) -> Category:
        return parent.model_copy(
            update={"subcategories": [*parent.subcategories, new_category]}
        )

    result, done = _replace_first(forest, parent_id, append_child)
    if not done:
        logger.warning(f"Parent category {parent_id} not found, {new_category.id} not inserted")
        return forest
    return result

def update(forest: Forest, category_id: str, update_data: Dict[str, Any]) -> Forest:
    """Merge update_data into the first category with the given id"""
    result, done = _replace_first(
        forest, category_id, lambda category: category.merged(update_data, PROTECTED_FIELDS)
    )
    if not done:
        logger.debug(f"Category {category_id} not found, nothing to update")
        return forest
    return result

def delete(forest: Forest, category_id: str) -> Forest:
    """Remove every category with the given id together with its subtree"""
    result, changed = _prune(forest, category_id)
    if not changed:
        logger.debug(f"Category {category_id} not found, nothing to delete")
        return forest
    return result

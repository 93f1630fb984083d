# namecraft/services/list_registry.py
"""Flat collections of id-keyed records (name lists, SEO texts, menu items).

Like the category forest, collections are never mutated; each operation
returns a new list, or the input list itself when no record matched.
Category membership is a plain string comparison on category_id evaluated
at query time, so records pointing at deleted categories simply stop
matching.
"""
from typing import Any, Dict, List, Optional, Sequence, TypeVar, Union
from ..models.base import StoredModel
from ..models.name_list import GENERAL_POOL, NameList
from ..models.seo_text import SeoPosition, SeoText

Record = TypeVar("Record", bound=StoredModel)

def add(records: Sequence[Record], record: Record) -> List[Record]:
    return [*records, record]

def find_by_id(records: Sequence[Record], record_id: str) -> Optional[Record]:
    return next((r for r in records if r.id == record_id), None)

def update_by_id(records: Sequence[Record], record_id: str,
                 update_data: Dict[str, Any]) -> List[Record]:
    if find_by_id(records, record_id) is None:
        return records
    return [
        r.merged(update_data, protected={"id"}) if r.id == record_id else r
        for r in records
    ]

def remove_by_id(records: Sequence[Record], record_id: str) -> List[Record]:
    if find_by_id(records, record_id) is None:
        return records
    return [r for r in records if r.id != record_id]

def lists_for(lists: Sequence[NameList], category_id: Optional[str] = None) -> List[NameList]:
    """Name lists scoped to exactly category_id; None or "" selects the general pool.

    Subcategories do not inherit their parent's lists.
    """
    key = category_id or GENERAL_POOL
    return [name_list for name_list in lists if name_list.category_id == key]

def seo_text_for(texts: Sequence[SeoText], category_id: Optional[str],
                 position: Union[SeoPosition, str]) -> Optional[SeoText]:
    """First text for (category, position) in collection order"""
    key = category_id or ""
    position = SeoPosition(position)
    return next(
        (t for t in texts if t.category_id == key and t.position == position),
        None
    )

# namecraft/models/name_list.py
from typing import List
from .base import StoredModel

# category_id value of lists that belong to no category
GENERAL_POOL = ""

class NameList(StoredModel):
    """Named collection of candidate names, optionally scoped to a category"""
    id: str
    category_id: str = GENERAL_POOL
    name: str = ""
    names: List[str] = []

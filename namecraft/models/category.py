# namecraft/models/category.py
from typing import Optional, List
from .base import StoredModel

class Category(StoredModel):
    """A node of the naming catalog, possibly holding nested categories"""
    id: str
    name: str = ""
    description: str = ""
    image_url: Optional[str] = None
    seo_title: str = ""
    seo_description: str = ""
    seo_keywords: str = ""
    subcategories: List['Category'] = []

    # Set once when the category is created under a parent, never recomputed
    is_subcategory: bool = False

Category.model_rebuild()

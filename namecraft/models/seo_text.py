# namecraft/models/seo_text.py
from enum import Enum
from .base import StoredModel

class SeoPosition(str, Enum):
    BEFORE_FOOTER = "before-footer"
    AFTER_HEADER = "after-header"

class SeoText(StoredModel):
    """Positioned block of descriptive text for a category page or the homepage"""
    id: str
    category_id: str = ""  # empty means homepage
    title: str = ""
    content: str = ""  # rich text, stored as-is
    position: SeoPosition = SeoPosition.BEFORE_FOOTER

from .base import StoredModel
from .category import Category
from .name_list import NameList, GENERAL_POOL
from .seo_text import SeoText, SeoPosition
from .settings import AdminSettings, MenuItem, NameGenerationRules

__all__ = [
    'StoredModel',
    'Category',
    'NameList',
    'GENERAL_POOL',
    'SeoText',
    'SeoPosition',
    'AdminSettings',
    'MenuItem',
    'NameGenerationRules',
]

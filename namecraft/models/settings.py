# namecraft/models/settings.py
from typing import List
from .base import StoredModel
from .category import Category

class MenuItem(StoredModel):
    id: str
    label: str = ""
    url: str = ""

class NameGenerationRules(StoredModel):
    """Persisted and editable, but not applied by name generation"""
    min_length: int = 3
    max_length: int = 20
    custom_prefixes: List[str] = []
    custom_suffixes: List[str] = []

class AdminSettings(StoredModel):
    """Site-wide settings edited from the admin area"""
    site_title: str = "NameCraft Generator"
    logo_url: str = ""
    menu_items: List[MenuItem] = []
    home_seo_title: str = "NameCraft - Generate Unique Names"
    home_seo_description: str = "Generate unique and creative names for any purpose"
    home_seo_keywords: str = "name generator, username generator, character names"
    categories: List[Category] = []
    name_generation_rules: NameGenerationRules = NameGenerationRules()

# namecraft/app.py
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from .config import Config
from .storage import (
    JsonFileStore,
    PersistenceGateway,
    CATEGORIES,
    NAME_LISTS,
    SEO_TEXTS,
    ADMIN_SETTINGS
)
from .services.category_service import CategoryService
from .services.image_service import ImageService
from .services.name_list_service import NameListService
from .services.seo_text_service import SeoTextService
from .services.settings_service import SettingsService

class NameCraftApp:
    """Wires the local store and the services together.

    Services hold no cached state: every call loads the whole value it needs
    and every mutation writes the whole value back.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.logger = logging.getLogger(__name__)
        self.store = JsonFileStore(data_dir or Config.DATA_DIR)
        self.gateway = PersistenceGateway(self.store)
        self.image_service = ImageService()

        self.categories = CategoryService(self.gateway, self.image_service)
        self.name_lists = NameListService(self.gateway)
        self.seo_texts = SeoTextService(self.gateway)
        self.settings = SettingsService(self.gateway, self.image_service)

    def load(self) -> Dict[str, Any]:
        """Load every persisted key once at start-up"""
        state = {
            key: self.gateway.load(key)
            for key in (CATEGORIES, NAME_LISTS, SEO_TEXTS, ADMIN_SETTINGS)
        }
        self.logger.info(
            f"Loaded {len(state[CATEGORIES])} root categories, "
            f"{len(state[NAME_LISTS])} name lists, "
            f"{len(state[SEO_TEXTS])} SEO texts from {self.store.directory}"
        )
        return state

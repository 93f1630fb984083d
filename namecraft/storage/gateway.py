# namecraft/storage/gateway.py
"""Typed load/save of the persisted keys.

The only place where models are turned into JSON text and back. Loading is
lenient: content that cannot be understood degrades to defaults and is
logged, it never aborts the load.
"""
import json
import logging
from typing import Any, Dict, List, Optional, Type
from pydantic import ValidationError
from ..models import AdminSettings, Category, MenuItem, NameList, SeoText, StoredModel
from .store import JsonFileStore

CATEGORIES = "categories"
NAME_LISTS = "nameLists"
SEO_TEXTS = "seoTexts"
ADMIN_SETTINGS = "adminSettings"

RECORD_MODELS: Dict[str, Type[StoredModel]] = {
    NAME_LISTS: NameList,
    SEO_TEXTS: SeoText,
}

class PersistenceGateway:
    """Serializes catalog state to and from a JsonFileStore"""

    def __init__(self, store: JsonFileStore):
        self.store = store
        self.logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Generic access
    # ------------------------------------------------------------------

    def save(self, key: str, value: Any):
        """Write the whole value for key"""
        if key == ADMIN_SETTINGS:
            payload = value.to_storage()
        elif key == CATEGORIES or key in RECORD_MODELS:
            payload = [item.to_storage() for item in value]
        else:
            raise KeyError(f"Unknown storage key: {key}")

        self.store.set(key, json.dumps(payload, ensure_ascii=False))
        self.logger.debug(f"Saved {key}")

    def load(self, key: str) -> Any:
        """Read the value for key, falling back to the key's empty default"""
        if key not in (CATEGORIES, ADMIN_SETTINGS) and key not in RECORD_MODELS:
            raise KeyError(f"Unknown storage key: {key}")

        text = self.store.get(key)
        if text is None:
            return self.default(key)

        try:
            raw = json.loads(text)
        except ValueError as e:
            self.logger.warning(f"Stored {key} is not valid JSON, using defaults: {e}")
            return self.default(key)

        if key == ADMIN_SETTINGS:
            return self._decode_settings(raw)

        if not isinstance(raw, list):
            self.logger.warning(f"Stored {key} is not a list, using defaults")
            return self.default(key)

        if key == CATEGORIES:
            return self._decode_categories(raw)
        return self._decode_records(RECORD_MODELS[key], raw)

    @staticmethod
    def default(key: str) -> Any:
        if key == ADMIN_SETTINGS:
            return AdminSettings()
        return []

    # ------------------------------------------------------------------
    # Typed shortcuts
    # ------------------------------------------------------------------

    def load_categories(self) -> List[Category]:
        return self.load(CATEGORIES)

    def save_categories(self, forest: List[Category]):
        self.save(CATEGORIES, forest)

    def load_name_lists(self) -> List[NameList]:
        return self.load(NAME_LISTS)

    def save_name_lists(self, lists: List[NameList]):
        self.save(NAME_LISTS, lists)

    def load_seo_texts(self) -> List[SeoText]:
        return self.load(SEO_TEXTS)

    def save_seo_texts(self, texts: List[SeoText]):
        self.save(SEO_TEXTS, texts)

    def load_settings(self) -> AdminSettings:
        return self.load(ADMIN_SETTINGS)

    def save_settings(self, settings: AdminSettings):
        self.save(ADMIN_SETTINGS, settings)

    # ------------------------------------------------------------------
    # Decoding helpers
    # ------------------------------------------------------------------

    def _validate(self, model: Type[StoredModel], raw: Any) -> Optional[StoredModel]:
        """Validate one record, replacing invalid fields with their defaults"""
        if not isinstance(raw, dict):
            self.logger.warning(f"Dropping {model.__name__} record that is not an object: {raw!r}")
            return None

        try:
            return model.model_validate(raw)
        except ValidationError as e:
            invalid = {error["loc"][0] for error in e.errors() if error["loc"]}

        cleaned = {key: value for key, value in raw.items() if key not in invalid}
        if cleaned == raw:
            self.logger.warning(f"Dropping invalid {model.__name__} record: {raw!r}")
            return None

        try:
            record = model.model_validate(cleaned)
        except ValidationError as e:
            self.logger.warning(f"Dropping invalid {model.__name__} record: {e}")
            return None

        self.logger.warning(f"Defaulted fields {sorted(map(str, invalid))} of a {model.__name__} record")
        return record

    def _decode_records(self, model: Type[StoredModel], raw: List[Any]) -> List[StoredModel]:
        records = (self._validate(model, item) for item in raw)
        return [record for record in records if record is not None]

    def _decode_category(self, raw: Any) -> Optional[Category]:
        # Children are decoded one by one so a bad child only loses itself
        if not isinstance(raw, dict):
            self.logger.warning(f"Dropping category that is not an object: {raw!r}")
            return None

        children_raw = raw.get("subcategories")
        node_raw = {key: value for key, value in raw.items() if key != "subcategories"}
        node = self._validate(Category, node_raw)
        if node is None:
            return None

        children = self._decode_categories(children_raw if isinstance(children_raw, list) else [])
        return node.model_copy(update={"subcategories": children})

    def _decode_categories(self, raw: List[Any]) -> List[Category]:
        nodes = (self._decode_category(item) for item in raw)
        return [node for node in nodes if node is not None]

    def _decode_settings(self, raw: Any) -> AdminSettings:
        if not isinstance(raw, dict):
            self.logger.warning("Stored adminSettings is not an object, using defaults")
            return AdminSettings()

        raw = dict(raw)
        menu_items = raw.pop("menuItems", None)
        categories = raw.pop("categories", None)

        settings = self._validate(AdminSettings, raw) or AdminSettings()
        update = {}
        if isinstance(menu_items, list):
            update["menu_items"] = self._decode_records(MenuItem, menu_items)
        if isinstance(categories, list):
            update["categories"] = self._decode_categories(categories)
        return settings.model_copy(update=update) if update else settings

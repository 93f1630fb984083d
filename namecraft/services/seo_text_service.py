# namecraft/services/seo_text_service.py
import logging
from typing import Any, Callable, Dict, List, Optional, Union
from ..models.seo_text import SeoPosition, SeoText
from ..storage.gateway import PersistenceGateway
from ..utils.ids import generate_id
from . import list_registry

class SeoTextService:
    """سرویس مدیریت متن‌های سئو"""

    def __init__(self, gateway: PersistenceGateway,
                 id_factory: Callable[[], str] = generate_id):
        self.gateway = gateway
        self.id_factory = id_factory
        self.logger = logging.getLogger(__name__)

    def get_all_texts(self) -> List[SeoText]:
        """دریافت تمام متن‌ها"""
        return self.gateway.load_seo_texts()

    def get_texts_for(self, category_id: Optional[str] = None) -> List[SeoText]:
        """دریافت متن‌های یک دسته‌بندی یا صفحه اصلی"""
        key = category_id or ""
        return [text for text in self.gateway.load_seo_texts() if text.category_id == key]

    def text_for(self, category_id: Optional[str],
                 position: Union[SeoPosition, str]) -> Optional[SeoText]:
        """متن قابل نمایش در یک موقعیت"""
        return list_registry.seo_text_for(self.gateway.load_seo_texts(), category_id, position)

    def add_text(self, category_id: str = "", title: str = "", content: str = "",
                 position: Union[SeoPosition, str] = SeoPosition.BEFORE_FOOTER) -> SeoText:
        """افزودن متن جدید"""
        text = SeoText(
            id=self.id_factory(),
            category_id=category_id,
            title=title,
            content=content,
            position=position
        )
        self.gateway.save_seo_texts(
            list_registry.add(self.gateway.load_seo_texts(), text)
        )
        self.logger.info(f"SEO text {text.id} added")
        return text

    def update_text(self, text_id: str, update_data: Dict[str, Any]) -> bool:
        """بروزرسانی متن"""
        texts = self.gateway.load_seo_texts()
        updated = list_registry.update_by_id(texts, text_id, update_data)
        if updated is texts:
            self.logger.debug(f"SEO text {text_id} not found, nothing to update")
            return False

        self.gateway.save_seo_texts(updated)
        self.logger.info(f"SEO text {text_id} updated")
        return True

    def delete_text(self, text_id: str) -> bool:
        """حذف متن"""
        texts = self.gateway.load_seo_texts()
        updated = list_registry.remove_by_id(texts, text_id)
        if updated is texts:
            self.logger.debug(f"SEO text {text_id} not found, nothing to delete")
            return False

        self.gateway.save_seo_texts(updated)
        self.logger.info(f"SEO text {text_id} deleted")
        return True

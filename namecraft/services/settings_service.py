# namecraft/services/settings_service.py
import logging
from typing import Any, BinaryIO, Callable, Dict, Optional
from ..models.settings import AdminSettings, MenuItem
from ..storage.gateway import PersistenceGateway
from ..utils.ids import generate_id
from . import list_registry

class SettingsService:
    """سرویس مدیریت تنظیمات"""

    def __init__(self, gateway: PersistenceGateway, image_service=None,
                 id_factory: Callable[[], str] = generate_id):
        self.gateway = gateway
        self.image_service = image_service
        self.id_factory = id_factory
        self.logger = logging.getLogger(__name__)

    def get_settings(self) -> AdminSettings:
        """دریافت تمام تنظیمات"""
        return self.gateway.load_settings()

    def update_settings(self, update_data: Dict[str, Any]) -> AdminSettings:
        """بروزرسانی تنظیمات"""
        settings = self.gateway.load_settings().merged(update_data)
        self.gateway.save_settings(settings)
        self.logger.info(f"Settings updated: {', '.join(sorted(update_data))}")
        return settings

    def update_generation_rules(self, update_data: Dict[str, Any]) -> AdminSettings:
        """بروزرسانی قوانین تولید نام (فقط ذخیره می‌شوند)"""
        settings = self.gateway.load_settings()
        rules = settings.name_generation_rules.merged(update_data)
        return self.update_settings({'name_generation_rules': rules})

    def set_logo(self, file: BinaryIO) -> Dict[str, Any]:
        """ذخیره لوگوی سایت"""
        if self.image_service is None:
            raise RuntimeError("SettingsService was created without an image service")

        result = self.image_service.encode_image(file)
        if result['success']:
            self.update_settings({'logo_url': result['data_url']})
        return result

    def add_menu_item(self, label: str = "", url: str = "") -> MenuItem:
        """افزودن آیتم منو"""
        item = MenuItem(id=self.id_factory(), label=label, url=url)
        settings = self.gateway.load_settings()
        self.update_settings({'menu_items': list_registry.add(settings.menu_items, item)})
        return item

    def update_menu_item(self, item_id: str, update_data: Dict[str, Any]) -> bool:
        """بروزرسانی آیتم منو"""
        items = self.gateway.load_settings().menu_items
        updated = list_registry.update_by_id(items, item_id, update_data)
        if updated is items:
            return False
        self.update_settings({'menu_items': updated})
        return True

    def remove_menu_item(self, item_id: str) -> bool:
        """حذف آیتم منو"""
        items = self.gateway.load_settings().menu_items
        updated = list_registry.remove_by_id(items, item_id)
        if updated is items:
            return False
        self.update_settings({'menu_items': updated})
        return True

    def get_menu_item(self, item_id: str) -> Optional[MenuItem]:
        return list_registry.find_by_id(self.gateway.load_settings().menu_items, item_id)

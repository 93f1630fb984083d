# namecraft/services/name_list_service.py
import logging
from typing import Any, Callable, Dict, List, Optional
from ..models.name_list import GENERAL_POOL, NameList
from ..storage.gateway import PersistenceGateway
from ..utils.formatters import parse_names
from ..utils.ids import generate_id
from . import list_registry
from .name_generator import DEFAULT_COUNT, generate

class NameListService:
    """سرویس مدیریت لیست‌های نام"""

    def __init__(self, gateway: PersistenceGateway,
                 id_factory: Callable[[], str] = generate_id):
        self.gateway = gateway
        self.id_factory = id_factory
        self.logger = logging.getLogger(__name__)

    def get_all_lists(self) -> List[NameList]:
        """دریافت تمام لیست‌ها"""
        return self.gateway.load_name_lists()

    def get_list(self, list_id: str) -> Optional[NameList]:
        """دریافت یک لیست"""
        return list_registry.find_by_id(self.gateway.load_name_lists(), list_id)

    def get_lists_for(self, category_id: Optional[str] = None) -> List[NameList]:
        """دریافت لیست‌های یک دسته‌بندی یا لیست‌های عمومی"""
        return list_registry.lists_for(self.gateway.load_name_lists(), category_id)

    def add_list(self, category_id: str = GENERAL_POOL, name: str = "",
                 names: Optional[List[str]] = None) -> NameList:
        """افزودن لیست جدید"""
        name_list = NameList(
            id=self.id_factory(),
            category_id=category_id,
            name=name,
            names=names or []
        )
        self.gateway.save_name_lists(
            list_registry.add(self.gateway.load_name_lists(), name_list)
        )
        self.logger.info(f"Name list {name_list.id} added")
        return name_list

    def update_list(self, list_id: str, update_data: Dict[str, Any]) -> bool:
        """بروزرسانی لیست"""
        lists = self.gateway.load_name_lists()
        updated = list_registry.update_by_id(lists, list_id, update_data)
        if updated is lists:
            self.logger.debug(f"Name list {list_id} not found, nothing to update")
            return False

        self.gateway.save_name_lists(updated)
        self.logger.info(f"Name list {list_id} updated")
        return True

    def set_names(self, list_id: str, text: str) -> bool:
        """جایگزینی نام‌ها از متن چندخطی"""
        return self.update_list(list_id, {'names': parse_names(text)})

    def delete_list(self, list_id: str) -> bool:
        """حذف لیست"""
        lists = self.gateway.load_name_lists()
        updated = list_registry.remove_by_id(lists, list_id)
        if updated is lists:
            self.logger.debug(f"Name list {list_id} not found, nothing to delete")
            return False

        self.gateway.save_name_lists(updated)
        self.logger.info(f"Name list {list_id} deleted")
        return True

    def generate_names(self, category_id: Optional[str] = None, prefix: str = "",
                       count: int = DEFAULT_COUNT) -> List[str]:
        """تولید نام از لیست‌های مرتبط"""
        return generate(self.get_lists_for(category_id), prefix, count)

# namecraft/services/category_service.py
import logging
from typing import Any, BinaryIO, Callable, Dict, List, Optional, Tuple
from ..models.category import Category
from ..storage.gateway import PersistenceGateway
from ..utils.ids import generate_id
from . import category_tree

class CategoryService:
    """سرویس مدیریت دسته‌بندی‌ها"""

    def __init__(self, gateway: PersistenceGateway, image_service=None,
                 id_factory: Callable[[], str] = generate_id):
        self.gateway = gateway
        self.image_service = image_service
        self.id_factory = id_factory
        self.logger = logging.getLogger(__name__)

    def get_all_categories(self) -> List[Category]:
        """دریافت تمام دسته‌بندی‌ها"""
        return self.gateway.load_categories()

    def get_flat_categories(self) -> List[Category]:
        """دریافت تمام دسته‌بندی‌ها به صورت تخت"""
        return list(category_tree.iter_categories(self.gateway.load_categories()))

    def get_category(self, category_id: str) -> Optional[Category]:
        """دریافت اطلاعات دسته‌بندی"""
        return category_tree.find(self.gateway.load_categories(), category_id)

    def get_path(self, category_id: str) -> List[Category]:
        """دریافت مسیر دسته‌بندی از ریشه"""
        return category_tree.category_path(self.gateway.load_categories(), category_id)

    def add_category(self, parent_id: Optional[str] = None, **fields) -> Optional[Category]:
        """افزودن دسته‌بندی جدید"""
        for name in category_tree.PROTECTED_FIELDS:
            fields.pop(name, None)

        category = Category(
            id=self.id_factory(),
            is_subcategory=bool(parent_id),
            **fields
        )

        forest = self.gateway.load_categories()
        updated = category_tree.insert(forest, parent_id, category)
        if updated is forest:
            return None

        self.gateway.save_categories(updated)
        self.logger.info(f"Category {category.id} added under {parent_id or 'root'}")
        return category

    def update_category(self, category_id: str, update_data: Dict[str, Any]) -> bool:
        """بروزرسانی دسته‌بندی"""
        forest = self.gateway.load_categories()
        updated = category_tree.update(forest, category_id, update_data)
        if updated is forest:
            return False

        self.gateway.save_categories(updated)
        self.logger.info(f"Category {category_id} updated")
        return True

    def delete_category(self, category_id: str) -> bool:
        """حذف دسته‌بندی و تمام زیردسته‌ها

        لیست‌های نام و متن‌های سئو مرتبط حذف نمی‌شوند.
        """
        forest = self.gateway.load_categories()
        updated = category_tree.delete(forest, category_id)
        if updated is forest:
            return False

        self.gateway.save_categories(updated)
        self.logger.info(f"Category {category_id} deleted with its subcategories")
        return True

    def set_image(self, category_id: str, file: BinaryIO) -> Dict[str, Any]:
        """ذخیره تصویر دسته‌بندی"""
        if self.image_service is None:
            raise RuntimeError("CategoryService was created without an image service")

        result = self.image_service.encode_image(file)
        if not result['success']:
            return result

        if not self.update_category(category_id, {'image_url': result['data_url']}):
            return {
                'success': False,
                'error': 'Category not found'
            }
        return result

    def page_meta(self, category_id: Optional[str] = None) -> Tuple[str, str, str]:
        """عنوان، توضیحات و کلمات کلیدی صفحه"""
        if category_id:
            category = self.get_category(category_id)
            if category is not None:
                return (
                    category.seo_title or category.name,
                    category.seo_description,
                    category.seo_keywords
                )

        settings = self.gateway.load_settings()
        return (
            settings.home_seo_title or settings.site_title,
            settings.home_seo_description,
            settings.home_seo_keywords
        )

# namecraft/services/image_service.py
import base64
import logging
import magic
from typing import Dict, Any, BinaryIO, Optional
from ..config import Config

class ImageService:
    """سرویس تبدیل تصاویر آپلود شده به data URL"""

    ALLOWED_TYPES = {
        'image/jpeg',
        'image/png',
        'image/gif',
        'image/webp',
        'image/svg+xml'
    }

    def __init__(self, max_size: Optional[int] = None):
        self.max_size = max_size or Config.MAX_IMAGE_SIZE
        self.logger = logging.getLogger(__name__)

    def encode_image(self, file: BinaryIO) -> Dict[str, Any]:
        """تبدیل فایل تصویر به data URL"""
        # خواندن محتوای فایل
        content = file.read()

        if not content:
            return {
                'success': False,
                'error': 'Image file is empty'
            }

        # بررسی سایز فایل
        if len(content) > self.max_size:
            return {
                'success': False,
                'error': 'Image is larger than the allowed size'
            }

        # بررسی نوع فایل
        mime_type = magic.from_buffer(content, mime=True)
        if mime_type not in self.ALLOWED_TYPES:
            self.logger.info(f"Rejected upload of type {mime_type}")
            return {
                'success': False,
                'error': 'File is not a supported image'
            }

        encoded = base64.b64encode(content).decode('ascii')
        return {
            'success': True,
            'data_url': f"data:{mime_type};base64,{encoded}",
            'mime_type': mime_type,
            'size': len(content)
        }

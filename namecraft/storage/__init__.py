from .store import JsonFileStore
from .gateway import (
    PersistenceGateway,
    CATEGORIES,
    NAME_LISTS,
    SEO_TEXTS,
    ADMIN_SETTINGS,
)

__all__ = [
    'JsonFileStore',
    'PersistenceGateway',
    'CATEGORIES',
    'NAME_LISTS',
    'SEO_TEXTS',
    'ADMIN_SETTINGS',
]

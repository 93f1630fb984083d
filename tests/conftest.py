import itertools
import pytest
from namecraft.models.category import Category
from namecraft.storage.gateway import PersistenceGateway
from namecraft.storage.store import JsonFileStore


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(tmp_path / "data")


@pytest.fixture
def gateway(store):
    return PersistenceGateway(store)


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def forest():
    """
    a
    ├── b
    │   └── d
    └── c
    e
    """
    d = Category(id="d", name="Dwarves", is_subcategory=True)
    b = Category(id="b", name="Fantasy", subcategories=[d], is_subcategory=True)
    c = Category(id="c", name="Sci-fi", is_subcategory=True)
    a = Category(id="a", name="Characters", subcategories=[b, c])
    e = Category(id="e", name="Pets", seo_title="Pet names")
    return [a, e]

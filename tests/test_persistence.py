"""
Tests for the local store and the persistence gateway
"""
import json
import pytest
from namecraft.models.category import Category
from namecraft.models.name_list import NameList
from namecraft.models.seo_text import SeoPosition, SeoText
from namecraft.models.settings import AdminSettings, MenuItem
from namecraft.storage.gateway import (
    ADMIN_SETTINGS,
    CATEGORIES,
    NAME_LISTS,
    SEO_TEXTS,
)


def write_raw(store, key, value):
    store.set(key, value if isinstance(value, str) else json.dumps(value))


def test_store_first_run_and_overwrite(store):
    assert store.get("categories") is None
    assert store.keys() == []

    store.set("categories", "[]")
    store.set("categories", '[{"id": "é"}]')

    assert store.get("categories") == '[{"id": "é"}]'
    assert store.keys() == ["categories"]
    assert store.delete("categories") is True
    assert store.delete("categories") is False


def test_store_rejects_path_like_keys(store):
    with pytest.raises(ValueError):
        store.get("../secrets")


@pytest.mark.parametrize("key", [CATEGORIES, NAME_LISTS, SEO_TEXTS])
def test_missing_keys_load_empty(gateway, key):
    assert gateway.load(key) == []


def test_missing_settings_load_defaults(gateway):
    settings = gateway.load_settings()
    assert settings.site_title == "NameCraft Generator"
    assert settings.name_generation_rules.min_length == 3
    assert settings.name_generation_rules.max_length == 20
    assert settings.menu_items == []


def test_unknown_key(gateway):
    with pytest.raises(KeyError):
        gateway.load("theme")
    with pytest.raises(KeyError):
        gateway.save("theme", "dark")


def test_round_trip_forest(gateway, forest):
    forest[1] = forest[1].model_copy(update={"image_url": "data:image/png;base64,AAAA"})
    gateway.save_categories(forest)
    assert gateway.load_categories() == forest


def test_round_trip_lists_and_texts(gateway):
    lists = [
        NameList(id="l1", category_id="cat-1", name="Elves", names=["Ava", "Ava", "Bo"]),
        NameList(id="l2", names=[]),
    ]
    texts = [
        SeoText(id="t1", category_id="cat-1", title="Hi", content="<p>x</p>",
                position=SeoPosition.AFTER_HEADER),
        SeoText(id="t2"),
    ]
    gateway.save_name_lists(lists)
    gateway.save_seo_texts(texts)

    assert gateway.load_name_lists() == lists
    assert gateway.load_seo_texts() == texts


def test_round_trip_settings(gateway, forest):
    settings = AdminSettings(
        site_title="Names",
        menu_items=[MenuItem(id="m1", label="Blog", url="/blog")],
        categories=forest,
    ).merged({"nameGenerationRules": {"minLength": 2, "customPrefixes": ["Sir "]}})

    gateway.save_settings(settings)
    assert gateway.load_settings() == settings


def test_stored_format_uses_camel_case(gateway, store):
    gateway.save_categories([Category(id="a", seo_title="T", is_subcategory=False)])
    raw = json.loads(store.get(CATEGORIES))

    assert raw == [{
        "id": "a",
        "name": "",
        "description": "",
        "seoTitle": "T",
        "seoDescription": "",
        "seoKeywords": "",
        "subcategories": [],
        "isSubcategory": False,
    }]


def test_invalid_json_loads_default(gateway, store):
    write_raw(store, NAME_LISTS, "{not json")
    write_raw(store, ADMIN_SETTINGS, "[1, 2")

    assert gateway.load_name_lists() == []
    assert gateway.load_settings() == AdminSettings()


def test_wrong_top_level_shape_loads_default(gateway, store):
    write_raw(store, CATEGORIES, {"id": "a"})
    write_raw(store, ADMIN_SETTINGS, ["x"])

    assert gateway.load_categories() == []
    assert gateway.load_settings() == AdminSettings()


def test_missing_and_null_fields_are_defaulted(gateway, store):
    """Data written by an older version lacks newer fields"""
    write_raw(store, NAME_LISTS, [
        {"id": "l1", "name": "Old"},
        {"id": "l2", "categoryId": None, "names": None},
    ])

    lists = gateway.load_name_lists()
    assert lists == [
        NameList(id="l1", name="Old"),
        NameList(id="l2"),
    ]


def test_invalid_fields_are_defaulted(gateway, store):
    write_raw(store, SEO_TEXTS, [
        {"id": "t1", "title": "Kept", "position": "middle"},
    ])
    write_raw(store, NAME_LISTS, [
        {"id": "l1", "name": "Kept", "names": "Ava"},
    ])

    assert gateway.load_seo_texts() == [SeoText(id="t1", title="Kept")]
    assert gateway.load_name_lists() == [NameList(id="l1", name="Kept")]


def test_records_without_id_are_dropped(gateway, store):
    write_raw(store, NAME_LISTS, [
        {"name": "No id"},
        "not an object",
        {"id": "l2", "names": ["Bo"], "extra": True},
    ])

    assert gateway.load_name_lists() == [NameList(id="l2", names=["Bo"])]


def test_bad_category_child_keeps_siblings(gateway, store):
    write_raw(store, CATEGORIES, [
        {
            "id": "a",
            "name": "Root",
            "subcategories": [
                {"name": "no id"},
                {"id": "b", "isSubcategory": "perhaps", "subcategories": "oops"},
                {"id": "c", "isSubcategory": True},
            ],
        },
        {"id": "e"},
    ])

    forest = gateway.load_categories()
    assert [c.id for c in forest] == ["a", "e"]
    children = forest[0].subcategories
    assert [c.id for c in children] == ["b", "c"]
    assert children[0].is_subcategory is False
    assert children[0].subcategories == []
    assert children[1].is_subcategory is True


def test_partial_settings(gateway, store):
    write_raw(store, ADMIN_SETTINGS, {
        "siteTitle": "Mine",
        "menuItems": [{"id": "m1", "label": "Home"}, {"label": "no id"}],
        "nameGenerationRules": {"minLength": "short"},
    })

    settings = gateway.load_settings()
    assert settings.site_title == "Mine"
    assert settings.menu_items == [MenuItem(id="m1", label="Home")]
    assert settings.name_generation_rules == AdminSettings().name_generation_rules
    assert settings.home_seo_title == AdminSettings().home_seo_title

"""
Tests for the category forest operations
"""
import pytest
from namecraft.models.category import Category
from namecraft.services import category_tree


def ids(forest):
    return [c.id for c in category_tree.iter_categories(forest)]


def test_iter_categories_is_pre_order(forest):
    """Parents come before their children, siblings keep their order"""
    assert ids(forest) == ["a", "b", "d", "c", "e"]


def test_find_at_any_depth(forest):
    assert category_tree.find(forest, "d").name == "Dwarves"
    assert category_tree.find(forest, "e").name == "Pets"
    assert category_tree.find(forest, "missing") is None


def test_find_returns_first_pre_order_match():
    """A duplicated id resolves to the node met first in pre-order"""
    nested = Category(id="x", name="nested")
    forest = [
        Category(id="a", subcategories=[nested]),
        Category(id="x", name="root"),
    ]
    assert category_tree.find(forest, "x").name == "nested"


def test_category_path(forest):
    assert [c.id for c in category_tree.category_path(forest, "d")] == ["a", "b", "d"]
    assert category_tree.category_path(forest, "missing") == []


def test_insert_at_root_appends(forest):
    new = Category(id="f", name="Bands")
    result = category_tree.insert(forest, None, new)

    assert [c.id for c in result] == ["a", "e", "f"]
    assert [c.id for c in forest] == ["a", "e"]


def test_insert_under_deep_parent(forest):
    """Only the parent gains a child, untouched branches are shared"""
    new = Category(id="f", name="Hobbits", is_subcategory=True)
    result = category_tree.insert(forest, "d", new)

    assert len(category_tree.find(result, "d").subcategories) == 1
    assert category_tree.find(result, "d").subcategories[0] is new
    assert len(category_tree.find(forest, "d").subcategories) == 0

    # nodes off the path are the very same objects
    assert category_tree.find(result, "c") is category_tree.find(forest, "c")
    assert category_tree.find(result, "e") is category_tree.find(forest, "e")

    # nodes on the path keep their own fields
    for node_id in ("a", "b"):
        before = category_tree.find(forest, node_id)
        after = category_tree.find(result, node_id)
        assert after.model_dump(exclude={"subcategories"}) == before.model_dump(exclude={"subcategories"})


def test_insert_appends_after_existing_children(forest):
    result = category_tree.insert(forest, "a", Category(id="f"))
    assert [c.id for c in category_tree.find(result, "a").subcategories] == ["b", "c", "f"]


def test_insert_under_unknown_parent_is_noop(forest):
    result = category_tree.insert(forest, "missing", Category(id="f"))
    assert result is forest


def test_insert_with_used_id_is_noop(forest):
    assert category_tree.insert(forest, None, Category(id="d")) is forest

    subtree = Category(id="f", subcategories=[Category(id="b")])
    assert category_tree.insert(forest, "e", subtree) is forest


def test_update_merges_fields(forest):
    result = category_tree.update(forest, "d", {"name": "Dwarfs", "seoTitle": "Dwarf names"})

    updated = category_tree.find(result, "d")
    assert updated.name == "Dwarfs"
    assert updated.seo_title == "Dwarf names"
    assert updated.is_subcategory is True
    assert category_tree.find(forest, "d").name == "Dwarves"
    assert category_tree.find(result, "e") is category_tree.find(forest, "e")


def test_update_ignores_protected_and_unknown_fields(forest):
    result = category_tree.update(forest, "b", {
        "id": "z",
        "isSubcategory": False,
        "subcategories": [],
        "colour": "red",
        "description": "Elves and such",
    })

    updated = category_tree.find(result, "b")
    assert updated.description == "Elves and such"
    assert updated.is_subcategory is True
    assert [c.id for c in updated.subcategories] == ["d"]
    assert category_tree.find(result, "z") is None


def test_update_unknown_id_is_noop(forest):
    assert category_tree.update(forest, "missing", {"name": "x"}) is forest


def test_delete_removes_subtree(forest):
    result = category_tree.delete(forest, "b")

    assert ids(result) == ["a", "c", "e"]
    assert category_tree.find(result, "b") is None
    assert category_tree.find(result, "d") is None
    assert ids(forest) == ["a", "b", "d", "c", "e"]


def test_delete_root_keeps_sibling_order():
    forest = [Category(id=str(i)) for i in range(5)]
    result = category_tree.delete(forest, "2")
    assert [c.id for c in result] == ["0", "1", "3", "4"]


def test_delete_unknown_id_is_noop(forest):
    assert category_tree.delete(forest, "missing") is forest


@pytest.mark.parametrize("node_id", ["a", "b", "c", "d", "e"])
def test_delete_removes_only_the_subtree(forest, node_id):
    doomed = {c.id for c in category_tree.iter_categories([category_tree.find(forest, node_id)])}
    result = category_tree.delete(forest, node_id)
    assert set(ids(result)) == set(ids(forest)) - doomed

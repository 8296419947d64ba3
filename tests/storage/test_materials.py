"""Tests for reference materials."""

import pytest

from promptshelf import storage


def test_create_and_list_material():
    mat = storage.create_material("ann", "Guide", "video", "https://example.com", ["#Docs"])
    assert mat.id
    assert mat.type == "video"
    assert mat.tags == ["docs"]
    assert storage.list_materials("ann") == [mat]
    assert storage.list_materials("bob") == []


def test_unknown_type_falls_back_to_link():
    mat = storage.create_material("ann", "Guide", "podcast", "https://example.com")
    assert mat.type == "link"


def test_create_requires_title_and_url():
    with pytest.raises(storage.MissingField):
        storage.create_material("ann", "", "link", "https://example.com")
    with pytest.raises(storage.MissingField):
        storage.create_material("ann", "Guide", "link", "")
    assert storage.list_materials("ann") == []


def test_delete_material():
    keep = storage.create_material("ann", "Keep", "link", "https://a")
    drop = storage.create_material("ann", "Drop", "link", "https://b")
    storage.delete_material(drop.id)
    assert storage.list_materials("ann") == [keep]


def test_delete_missing_material():
    with pytest.raises(storage.NotFound):
        storage.delete_material("nope")


def test_search_materials():
    guide = storage.create_material("ann", "Prompt Guide", "link", "https://a")
    clip = storage.create_material("ann", "Camera moves", "video", "https://b", ["dolly"])
    assert storage.search_materials("ann", "guide") == [guide]
    assert storage.search_materials("ann", "VIDEO") == [clip]
    assert storage.search_materials("ann", "doll") == [clip]
    assert storage.search_materials("ann", "") == [guide, clip]

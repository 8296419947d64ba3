"""Tests for entry CRUD, partial updates, and search."""

import pytest

from promptshelf import storage

IMAGE = "data:image/png;base64,AAAA"


def _entry(owner="ann", category="Sora", prompt="sunset", **kwargs):
    return storage.create_entry(owner, category, prompt, IMAGE, **kwargs)


# ── Create & List ────────────────────────────────────────


def test_create_and_list_entry():
    entry = _entry(tags=["art", "#Sky"])
    assert entry.id
    assert entry.done is False

    entries = storage.list_entries("ann")
    assert len(entries) == 1
    stored = entries[0]
    assert stored.id == entry.id
    assert stored.owner == "ann"
    assert stored.category == "Sora"
    assert stored.prompt_text == "sunset"
    assert stored.image == IMAGE
    assert stored.tags == ["art", "sky"]
    assert stored.done is False


def test_create_accepts_comma_separated_tags():
    entry = _entry(tags=" #Neon, city , ,#NEON")
    assert entry.tags == ["neon", "city"]


def test_create_with_done():
    assert _entry(done=True).done is True


def test_create_missing_fields():
    for args in (
        ("", "Sora", "sunset", IMAGE),
        ("ann", "", "sunset", IMAGE),
        ("ann", "Sora", "", IMAGE),
        ("ann", "Sora", "sunset", ""),
    ):
        with pytest.raises(storage.MissingField):
            storage.create_entry(*args)
    assert storage.list_entries("ann") == []


def test_ids_are_unique():
    assert _entry().id != _entry().id


def test_list_is_scoped_by_owner():
    _entry("ann", prompt="mine")
    _entry("bob", prompt="theirs")
    assert [e.prompt_text for e in storage.list_entries("ann")] == ["mine"]
    assert [e.prompt_text for e in storage.list_entries("bob")] == ["theirs"]


def test_list_keeps_insertion_order():
    for p in ("one", "two", "three"):
        _entry(prompt=p)
    assert [e.prompt_text for e in storage.list_entries("ann")] == ["one", "two", "three"]


# ── Update ───────────────────────────────────────────────


def test_update_fields():
    entry = _entry(tags=["a"])
    updated = storage.update_entry(entry.id, {
        "category": "VEO3",
        "prompt_text": "sunrise",
        "image": "data:image/png;base64,BBBB",
        "tags": ["#B"],
        "done": True,
    })
    assert updated.id == entry.id
    assert updated.owner == "ann"
    assert updated.category == "VEO3"
    assert updated.prompt_text == "sunrise"
    assert updated.image == "data:image/png;base64,BBBB"
    assert updated.tags == ["b"]
    assert updated.done is True
    assert storage.list_entries("ann")[0] == updated


def test_update_empty_strings_keep_values():
    entry = _entry()
    updated = storage.update_entry(entry.id, {"category": "", "prompt_text": "", "image": ""})
    assert updated.category == "Sora"
    assert updated.prompt_text == "sunset"
    assert updated.image == IMAGE


def test_update_empty_tags_clears():
    entry = _entry(tags=["a", "b"])
    assert storage.update_entry(entry.id, {"tags": []}).tags == []


def test_update_ignores_non_bool_done():
    entry = _entry()
    assert storage.update_entry(entry.id, {"done": "yes"}).done is False


def test_update_same_owner_allowed():
    entry = _entry()
    assert storage.update_entry(entry.id, {"owner": "ann", "prompt_text": "x"}).prompt_text == "x"


def test_update_owner_mismatch_does_not_mutate():
    entry = _entry()
    with pytest.raises(storage.OwnerMismatch):
        storage.update_entry(entry.id, {"owner": "bob", "prompt_text": "stolen"})
    assert storage.list_entries("ann")[0] == entry
    assert storage.list_entries("bob") == []


def test_update_missing():
    with pytest.raises(storage.NotFound):
        storage.update_entry("nope", {"prompt_text": "x"})


def test_set_entry_done():
    entry = _entry()
    assert storage.set_entry_done(entry.id, True).done is True
    assert storage.get_entry(entry.id).done is True


# ── Delete ───────────────────────────────────────────────


def test_delete_entry():
    keep = _entry(prompt="keep")
    drop = _entry(prompt="drop")
    storage.delete_entry(drop.id)
    assert storage.list_entries("ann") == [keep]
    assert storage.get_entry(drop.id) is None


def test_delete_missing():
    with pytest.raises(storage.NotFound):
        storage.delete_entry("nope")


# ── Search ───────────────────────────────────────────────


def test_search_is_case_insensitive_substring():
    cat = _entry(prompt="A Cat")
    _entry(prompt="a dog")
    assert storage.search_entries("ann", term="cat") == [cat]
    assert storage.search_entries("ann", term="CAT") == [cat]


def test_search_matches_tags():
    tagged = _entry(prompt="plain", tags=["Landscape"])
    _entry(prompt="other")
    assert storage.search_entries("ann", term="scape") == [tagged]


def test_search_by_category():
    sora = _entry(category="Sora")
    _entry(category="VEO3")
    assert storage.search_entries("ann", category="Sora") == [sora]
    assert len(storage.search_entries("ann", category="All")) == 2


def test_search_category_and_term():
    _entry(category="Sora", prompt="cat")
    veo_cat = _entry(category="VEO3", prompt="cat")
    _entry(category="VEO3", prompt="dog")
    assert storage.search_entries("ann", category="VEO3", term="cat") == [veo_cat]


def test_search_empty_term_returns_all_in_order():
    entries = [_entry(prompt=p) for p in ("b", "a", "c")]
    assert storage.search_entries("ann", term="  ") == entries

from __future__ import annotations

from movieShelf.metadata.shelf_db import ShelfDB


def test_missing_key_reads_none(db):
    assert db.get_kv("nope") is None
    assert not db.has_kv("nope")


def test_values_keep_their_type(db):
    db.set_kv("count", 3)
    db.set_kv("blob", b"\x00\x01{}")
    db.set_kv("text", "[1, 2]")

    assert db.get_kv("count") == 3
    assert db.get_kv("blob") == b"\x00\x01{}"
    assert db.get_kv("text") == "[1, 2]"


def test_set_overwrites_and_delete_removes(db):
    db.set_kv("k", "a")
    db.set_kv("k", "b")
    assert db.get_kv("k") == "b"

    db.delete_kv("k")
    assert db.get_kv("k") is None
    db.delete_kv("k")               # deleting twice is harmless


def test_keys_filters_by_prefix(db):
    for key in ("favorite:3", "count", "favorite:1", "favorites:order", "favorite_x"):
        db.set_kv(key, 1)

    assert db.keys("favorite:") == ["favorite:3", "favorite:1"]
    assert len(db.keys()) == 5


def test_prefix_is_literal_not_a_pattern(db):
    db.set_kv("a%b", 1)
    db.set_kv("axb", 1)
    assert db.keys("a%") == ["a%b"]


def test_values_survive_reopen(tmp_path):
    path = tmp_path / "nested" / "shelf.sqlite"
    first = ShelfDB(path)
    first.set_kv("count", 2)
    first.close()

    second = ShelfDB(path)
    try:
        assert second.get_kv("count") == 2
    finally:
        second.close()


def test_rewrite_keeps_first_write_position(db):
    db.set_kv("favorite:1", "a")
    db.set_kv("favorite:2", "b")
    db.set_kv("favorite:1", "a2")

    assert db.keys("favorite:") == ["favorite:1", "favorite:2"]
    assert db.get_kv("favorite:1") == "a2"


def test_deleted_then_rewritten_key_moves_last(db):
    db.set_kv("favorite:1", "a")
    db.set_kv("favorite:2", "b")
    db.delete_kv("favorite:1")
    db.set_kv("favorite:1", "a")

    assert db.keys("favorite:") == ["favorite:2", "favorite:1"]

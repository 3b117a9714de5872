import sqlite3

import pytest

from backend.catalog import (
    Catalog,
    Exercise,
    ensure_catalog_db,
    load_catalog,
    localized,
    to_embed_url,
)


def test_load_catalog(catalog):
    assert [ex.id for ex in catalog.exercises] == ["valid1", "valid2"]
    squat = catalog.exercise("valid2")
    assert squat.display_name("en") == "Squat"
    assert squat.display_quick_fix("pt") == "Joelhos alinhados"
    assert squat.video_url == "https://example.com/v2"
    assert catalog.exercise("ghost") is None


def test_resolve_drops_unknown_ids(catalog):
    resolved = catalog.resolve(["valid1", "ghost", "valid2"])
    assert [ex.id for ex in resolved] == ["valid1", "valid2"]


def test_resolve_keeps_requested_order(catalog):
    assert [ex.id for ex in catalog.resolve(["valid2", "valid1"])] == ["valid2", "valid1"]
    assert catalog.resolve([]) == []


def test_ready_workout(catalog):
    workout = catalog.ready_workout("w1")
    assert workout.frequency == "2x"
    assert workout.sets == 3
    assert workout.exercises == ("valid2", "ghost", "valid1")
    assert [ex.id for ex in catalog.resolve(workout.exercises)] == ["valid2", "valid1"]
    assert catalog.ready_workout("missing") is None


def test_ready_workouts_by_frequency(catalog):
    assert [w.id for w in catalog.ready_workouts_by_frequency("2x")] == ["w1"]
    assert catalog.ready_workouts_by_frequency("3x") == []


def test_search_is_case_insensitive_and_localized(catalog):
    assert [ex.id for ex in catalog.search("SQU", "en")] == ["valid2"]
    assert [ex.id for ex in catalog.search("squ", "pt")] == []
    assert [ex.id for ex in catalog.search("", "pt")] == ["valid1", "valid2"]


def test_localized_falls_back_to_default_language():
    assert localized({"pt": "Olá"}, "en") == "Olá"
    assert localized({}, "en") == ""
    ex = Exercise(id="x", name={"en": "Only English"})
    assert ex.display_name("pt") == ""


def test_bundled_catalog_is_consistent(tmp_path):
    db_path = ensure_catalog_db(tmp_path / "catalog.db")
    catalog = load_catalog(db_path)
    assert len(catalog.exercises) >= 10
    for ex in catalog.exercises:
        assert ex.name.get("pt") and ex.name.get("en")
    for workout in catalog.ready_workouts:
        assert workout.frequency in ("2x", "3x")
        assert workout.sets >= 1
        assert len(catalog.resolve(workout.exercises)) == len(workout.exercises)
    assert catalog.ready_workouts_by_frequency("2x")
    assert catalog.ready_workouts_by_frequency("3x")


def test_ensure_catalog_db_keeps_existing_file(sample_db):
    before = sample_db.read_bytes()
    assert ensure_catalog_db(sample_db) == sample_db
    assert sample_db.read_bytes() == before


def test_empty_catalog():
    catalog = Catalog()
    assert catalog.resolve(["a"]) == []
    assert catalog.search("x") == []


def test_failed_seed_leaves_no_catalog(tmp_path, monkeypatch):
    from backend import catalog as catalog_module

    seed = tmp_path / "broken_seed.sql"
    seed.write_text(
        catalog_module.SEED_PATH.read_text(encoding="utf-8")
        + "\nINSERT INTO no_such_table VALUES (1);\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(catalog_module, "SEED_PATH", seed)
    db_path = tmp_path / "catalog.db"

    with pytest.raises(sqlite3.Error):
        ensure_catalog_db(db_path)
    assert not db_path.exists()
    assert list(tmp_path.glob("catalog.*")) == []

    monkeypatch.undo()
    ensure_catalog_db(db_path)
    assert load_catalog(db_path).ready_workouts


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://host/file/d/abc/watch?v=1", "https://host/file/d/abc/view?embed"),
        ("https://host/file/d/abc/edit?usp=sharing", "https://host/file/d/abc/view?embed"),
        ("https://host/clip.mp4", "https://host/clip.mp4"),
    ],
)
def test_to_embed_url(url, expected):
    assert to_embed_url(url) == expected


def test_exercise_embed_url(catalog):
    assert catalog.exercise("valid1").embed_url is None
    assert catalog.exercise("valid2").embed_url == "https://example.com/v2"

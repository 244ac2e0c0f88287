"""
Round-trip and leniency checks for the JSON persistence adapter.
"""
from __future__ import annotations

import json

import pytest

from daycare.domain.creatures import Creature, Gender, Species
from daycare.repositories import json_storage
from daycare.repositories.json_storage import MalformedDataError, StorageIOError
from daycare.services.breeding_service import BreedingService


def _entry(**overrides):
    entry = {"name": "Embera", "level": 5, "type": "Fire", "experience": 420, "gender": "Male"}
    entry.update(overrides)
    return entry


def test_save_writes_labels_in_collection_order(tmp_path):
    path = tmp_path / "data.json"
    creatures = [
        Creature(name="Leafy", species=Species.PLANT, gender=Gender.FEMALE, level=2, experience=150),
        Creature(name="Embera", species=Species.FIRE, gender=Gender.MALE),
    ]
    json_storage.save(creatures, path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == [
        {"name": "Leafy", "level": 2, "type": "Grass", "experience": 150, "gender": "Female"},
        {"name": "Embera", "level": 1, "type": "Fire", "experience": 0, "gender": "Male"},
    ]
    assert not (tmp_path / "data.json.tmp").exists()


def test_save_overwrites_previous_document(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([_entry(), _entry(name="Other")]), encoding="utf-8")
    json_storage.save([], path)
    assert json.loads(path.read_text(encoding="utf-8")) == []


def test_round_trip_resets_breeding_counter(tmp_path, breeders, make_random):
    path = tmp_path / "data.json"
    svc = BreedingService(breeders, rng=make_random())
    svc.pair(0, 1)
    svc.train_one(2, 250)
    json_storage.save(svc.list(), path)

    restored = BreedingService(json_storage.load(path), rng=make_random())
    assert restored.list() == svc.list()
    assert restored.breeding_counter == {}
    # numbering restarts after a reload, so the name repeats
    assert restored.pair(0, 1).name == "Baby Embera #1"


def test_every_species_survives_round_trip(tmp_path):
    path = tmp_path / "data.json"
    creatures = [Creature(name=s.name, species=s, gender=Gender.FEMALE) for s in Species]
    json_storage.save(creatures, path)
    assert json_storage.load(path) == creatures


def test_unknown_labels_fall_back_to_defaults():
    creatures = json_storage.from_document([_entry(type="Unknown", gender="Other"), _entry(type="Plant")])
    assert creatures[0].species is Species.NORMAL
    assert creatures[0].gender is Gender.MALE
    # only the external "Grass" label maps to the Plant species
    assert creatures[1].species is Species.NORMAL


def test_grass_label_maps_to_plant():
    assert json_storage.from_document([_entry(type="Grass")])[0].species is Species.PLANT


def test_load_missing_file_raises_io_error(tmp_path):
    with pytest.raises(StorageIOError):
        json_storage.load(tmp_path / "missing.json")


def test_save_to_unwritable_destination_raises_io_error(tmp_path):
    with pytest.raises(StorageIOError):
        json_storage.save([], tmp_path / "no-such-dir" / "data.json")


def test_load_rejects_invalid_json(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(MalformedDataError):
        json_storage.load(path)


@pytest.mark.parametrize(
    "document",
    [
        {"name": "Embera"},
        ["Embera"],
        [{"name": "Embera", "level": 5, "type": "Fire", "gender": "Male"}],
        [_entry(level="5")],
        [_entry(level=True)],
        [_entry(experience=-1)],
        [_entry(name=7)],
        [_entry(name="  ")],
        [_entry(type=None)],
    ],
)
def test_from_document_rejects_schema_violations(document):
    with pytest.raises(MalformedDataError):
        json_storage.from_document(document)


def test_save_unencodable_name_raises_io_error_and_leaves_no_temp_file(tmp_path):
    path = tmp_path / "data.json"
    creatures = [Creature(name="Bad\udcffName", species=Species.FIRE, gender=Gender.MALE)]
    with pytest.raises(StorageIOError):
        json_storage.save(creatures, path)
    assert not path.exists()
    assert not (tmp_path / "data.json.tmp").exists()

"""
Tests for neighborhood resolution and directory lookups.
"""
import json

import pytest

from conftest import make_record
from locale_engine.config import RESOLUTION_METHODS
from locale_engine.processors.resolution import extract_zip_code, resolve
from locale_engine.utils.directory_utils import (
    find_by_zip,
    get_neighborhood_by_name,
    load_directory,
    neighborhood_names,
    record_from_dict,
)


# === Rules ===

def test_zip_match():
    result = resolve("123 Main St, Charleston, SC 29401")
    assert result['neighborhood'].name == 'Charleston Historic District'
    assert result['confidence'] == 'high'
    assert result['method'] == 'zip'


def test_name_match():
    result = resolve("100 Rifle Range Rd, Mount Pleasant, SC")
    assert result['neighborhood'].name == 'Mount Pleasant'
    assert result['confidence'] == 'high'
    assert result['method'] == 'name'


def test_zip_beats_name():
    result = resolve("5 Shem Creek Rd, Mount Pleasant, SC 29401")
    assert result['neighborhood'].name == 'Charleston Historic District'
    assert result['method'] == 'zip'


def test_unregistered_zip_falls_through_to_names():
    result = resolve("12 Coleman Blvd, Mount Pleasant, SC 90210")
    assert result['neighborhood'].name == 'Mount Pleasant'
    assert result['method'] == 'name'


def test_unknown_address_is_null_and_low():
    assert resolve("1 Unknown Rd") == {'neighborhood': None, 'confidence': 'low', 'method': 'none'}


def test_region_only_address_has_same_shape_as_no_match():
    assert resolve("1 Unknown Rd, Charleston, SC") == resolve("1 Unknown Rd")


def test_non_string_and_empty_input():
    assert resolve(None)['method'] == 'none'
    assert resolve("")['neighborhood'] is None


def test_alias_symmetry(directory):
    for record in directory:
        for alias in record.aliases:
            result = resolve("123 Main St, " + alias)
            assert result['neighborhood'] is record, alias
            assert result['method'] == 'name'


def test_every_zip_resolves_to_its_owner(directory):
    for record in directory:
        for zip_code in record.zip_codes:
            assert resolve(f"1 Any Rd {zip_code}")['neighborhood'] is record


def test_coordinates_method_is_never_produced():
    assert 'coordinates' in RESOLUTION_METHODS
    addresses = ["", "1 Unknown Rd", "Folly Beach", "29401", "32.78, -79.93"]
    assert all(resolve(address)['method'] != 'coordinates' for address in addresses)


def test_resolution_is_idempotent():
    address = "12 Meeting St, Charleston, SC 29401"
    assert resolve(address) == resolve(address)


# === Directory order tie-break ===

def test_earlier_record_wins_shared_alias():
    first = make_record(name="Harbor Walk East", aliases=["Harbor Walk"])
    second = make_record(name="Harbor Walk West", aliases=["Harbor Walk"])

    assert resolve("9 Harbor Walk", (first, second))['neighborhood'] is first
    assert resolve("9 Harbor Walk", (second, first))['neighborhood'] is second


def test_short_alias_shadows_later_record():
    park = make_record(name="Parkside", aliases=["Park"])
    circle = make_record(name="Circle Town", aliases=["Park Circle"])

    assert resolve("1 Park Circle Dr", (park, circle))['neighborhood'] is park
    assert resolve("1 Park Circle Dr", (circle, park))['neighborhood'] is circle


def test_name_checked_before_aliases_of_same_record():
    record = make_record(name="Riverside", aliases=["River"])
    assert resolve("Riverside Dr", (record,))['method'] == 'name'


# === Zip extraction ===

@pytest.mark.parametrize("address,expected", [
    ("123 Main St, Charleston, SC 29401", "29401"),
    ("29401-1234", "29401"),
    ("Unit 5, 29464 and 29401", "29464"),
    ("123456 King St", None),
    ("Suite 29401A", None),
    ("1 Unknown Rd", None),
    ("", None),
])
def test_extract_zip_code(address, expected):
    assert extract_zip_code(address) == expected


# === Directory lookups ===

def test_bundled_directory_order(directory):
    assert neighborhood_names(directory)[:3] == [
        'Charleston Historic District',
        'Downtown Charleston',
        'Mount Pleasant',
    ]


def test_get_neighborhood_by_name_matches_names_and_aliases():
    assert get_neighborhood_by_name("IOP").name == 'Isle of Palms'
    assert get_neighborhood_by_name("  downtown charleston ").name == 'Downtown Charleston'
    assert get_neighborhood_by_name("Nowhere") is None
    assert get_neighborhood_by_name("") is None


def test_find_by_zip():
    assert find_by_zip("29466").name == 'Mount Pleasant'
    assert find_by_zip("00000") is None


def test_record_from_dict_requires_keys():
    with pytest.raises(ValueError, match="missing keys"):
        record_from_dict({'name': 'Broken'})


def test_record_from_dict_rejects_bad_vocabulary():
    with pytest.raises(ValueError, match="malformed"):
        make_record(vocabulary={'architectural_style': 'Cottage'})


@pytest.mark.parametrize("key", [
    "aliases", "zip_codes", "typical_amenities", "landmarks",
    "selling_points", "attractions", "scenery",
])
def test_record_from_dict_rejects_bare_string_lists(key):
    with pytest.raises(ValueError, match=f"Isle of Palms.*'{key}' must be a list"):
        make_record(name="Isle of Palms", **{key: "IOP"})


def test_record_from_dict_rejects_bare_string_proximity_terms():
    with pytest.raises(ValueError, match="proximity_terms"):
        make_record(vocabulary={
            'architectural_style': 'Cottage',
            'neighborhood_vibe_phrase': 'quiet',
            'proximity_terms': 'near the marsh',
        })


def test_alias_matches_only_as_whole_string():
    record = make_record(name="Isle of Palms", aliases=["IOP"])
    assert record.aliases == ("IOP",)
    assert resolve("1 Unknown Rd", (record,))["neighborhood"] is None


def test_record_from_dict_coerces_numeric_bounds():
    record = make_record(bounds={'north': "32.9", 'south': 32.8, 'east': -79.8, 'west': "-79.9"})
    assert record.bounds.north == 32.9
    assert record.bounds.west == -79.9


@pytest.mark.parametrize("north", ["north-ish", None, [32.9]])
def test_record_from_dict_rejects_non_numeric_bounds(north):
    with pytest.raises(ValueError, match="malformed vocabulary/bounds"):
        make_record(bounds={'north': north, 'south': 32.8, 'east': -79.8, 'west': -79.9})


def test_load_directory_missing_file(tmp_path):
    with pytest.raises(ValueError, match="not found"):
        load_directory(tmp_path / "missing.json")


def test_load_directory_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding='utf-8')
    with pytest.raises(ValueError, match="not valid JSON"):
        load_directory(path)


def test_load_directory_from_custom_file(tmp_path):
    path = tmp_path / "small.json"
    path.write_text(json.dumps({'neighborhoods': [{
        'name': 'Edisto Beach',
        'aliases': ['Edisto'],
        'zip_codes': ['29438'],
        'bounds': {'north': 32.5, 'south': 32.4, 'east': -80.2, 'west': -80.4},
        'description': 'Unhurried beach town.',
        'vocabulary': {
            'architectural_style': 'raised beach cottage',
            'neighborhood_vibe_phrase': 'where time slows down',
        },
    }]}), encoding='utf-8')

    records = load_directory(path)
    assert [record.name for record in records] == ['Edisto Beach']
    assert records[0].vocabulary.proximity_terms == ()
    assert resolve("5 Palmetto Blvd 29438", records)['neighborhood'] is records[0]

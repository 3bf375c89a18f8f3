import json
import logging

import pytest

import countries
import regions
import serializers
from exceptions import NotFoundError

# Logging setup
logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# 1. Test JSON keeps the record field order
def test_to_json_preserves_field_order():
    logger.info("Test 1: Field order")
    payload = serializers.to_json(countries.from_key("US"))

    assert payload.startswith('{"label":"United States","value":"US","demonym":"American","regions":["US_AL",')
    assert payload.endswith('"code":"united_states"}')


def test_to_json_passes_codec_options():
    payload = serializers.to_json(regions.from_key("BR_SP"), ensure_ascii=False)
    assert '"label":"São Paulo"' in payload

    spaced = serializers.to_json(regions.from_key("BR_SP"), separators=(", ", ": "))
    assert '"value": "BR_SP"' in spaced


# 2. Test decoding a record resolves the same entry
@pytest.mark.parametrize("catalog,key", [
    (countries.COUNTRIES, "US"),
    (countries.COUNTRIES, "CI"),
    (regions.REGIONS, "US_CA"),
    (regions.REGIONS, "JP_13"),
])
def test_round_trip(catalog, key):
    logger.info(f"Test 2: Round trip {key}")
    entry = catalog.from_key(key)
    record = json.loads(serializers.to_json(entry))

    assert record == serializers.to_record(entry)
    assert serializers.from_json(serializers.to_json(entry), catalog) is entry


def test_from_json_without_value():
    with pytest.raises(NotFoundError):
        serializers.from_json('{"label": "United States"}', countries.COUNTRIES)

    with pytest.raises(NotFoundError):
        serializers.from_json('{"value": "XX"}', countries.COUNTRIES)

import json
import logging

import pytest

import countries
from countries import COUNTRIES, Country
from exceptions import NotFoundError
from regions import REGIONS

# Logging setup
logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@pytest.fixture
def united_states():
    return countries.from_key("US")


# 1. Test retrieving every country value
def test_retrieve_all_country_values():
    logger.info("Test 1: All country values")
    values = countries.get_values()

    assert values
    assert "US" in values
    assert "GB" in values
    assert len(values) == len(set(values))
    assert values[0] == "AF"


# 2. Test long code lookups, strict and tolerant
def test_retrieve_country_by_code():
    logger.info("Test 2: Country by long code")
    country = countries.from_code("united_states")

    assert isinstance(country, Country)
    assert country.value == "US"
    assert country.name == "US"

    try_country = countries.try_from_code("united_states")
    assert try_country is country

    assert countries.try_from_code("non_existent_country") is None


# 3. Test strict lookups raise with diagnostics
def test_throws_exception_for_invalid_country_code():
    logger.info("Test 3: Invalid codes raise NotFoundError")
    with pytest.raises(NotFoundError) as exc_info:
        countries.from_code("INVALID")

    assert exc_info.value.key == "INVALID"
    assert exc_info.value.catalog == "country"

    with pytest.raises(NotFoundError):
        countries.from_key("not-a-real-code")


# 4. Test random selection stays inside the catalog
def test_retrieve_random_country():
    logger.info("Test 4: Random country")
    for _ in range(20):
        country = countries.random_country()
        assert isinstance(country, Country)
        assert country.value in countries.get_values()


# 5. Test label and demonym projections
def test_retrieve_country_label_and_demonym(united_states):
    logger.info("Test 5: Label and demonym")
    assert united_states.label == "United States"
    assert united_states.demonym == "American"
    assert str(united_states) == "United States"


# 6. Test region keys and resolved regions
def test_retrieve_regions_for_country(united_states):
    logger.info("Test 6: Regions of a country")
    keys = united_states.region_values()
    regions = united_states.regions()

    assert keys
    assert "US_CA" in keys
    assert [region.value for region in regions] == keys
    assert all(region.country is united_states for region in regions)

    assert countries.from_key("AD").regions() == []
    assert countries.from_key("AD").region_values() == []


# 7. Test options listing keeps catalog order
def test_get_options():
    logger.info("Test 7: Options")
    options = countries.get_options()

    assert options["US"] == "United States"
    assert options["AD"] == "Andorra"
    assert list(options) == countries.get_values()


# 8. Test parse and try_parse
def test_try_parse():
    logger.info("Test 8: try_parse")
    assert countries.try_parse("US").value == "US"
    assert countries.try_parse("Non Existent Country") is None
    assert countries.try_parse(None) is None
    assert countries.try_parse(["US"]) is None


def test_useless_parse():
    andorra = countries.from_key("AD")
    assert countries.parse(andorra) is andorra
    assert countries.parse(countries.parse(andorra)) is andorra


def test_parsing_none():
    with pytest.raises(NotFoundError):
        countries.parse(None)


# 9. Test record and JSON shapes
def test_convert_country_to_record(united_states):
    logger.info("Test 9: to_record / to_json")
    record = united_states.to_record()

    assert list(record) == ["label", "value", "demonym", "regions", "code"]
    assert record["code"] == "united_states"
    assert "US_TX" in record["regions"]

    payload = united_states.to_json()
    assert '"label":"United States"' in payload
    assert json.loads(payload) == record


# 10. Test label lookups fold case and accents
def test_from_label():
    logger.info("Test 10: Label lookups")
    assert countries.from_label("United States").value == "US"
    assert countries.from_label("united states").value == "US"
    assert countries.from_label("cote d'ivoire").value == "CI"
    assert countries.from_code("cote_d_ivoire").value == "CI"
    assert countries.try_from_label("Atlantis") is None
    assert countries.try_from_label(None) is None

    with pytest.raises(NotFoundError) as exc_info:
        countries.from_label("Atlantis")
    assert exc_info.value.field == "label"


# 11. Catalog wide invariants
def test_every_country_resolves_by_key_and_code():
    logger.info("Test 11: Key and code round trips")
    codes = set()
    for country in COUNTRIES:
        assert countries.from_key(country.value) is country
        assert countries.from_code(country.code) is country
        assert len(country.value) == 2
        assert country.code == country.code.lower()
        codes.add(country.code)

    assert len(codes) == len(COUNTRIES)


def test_every_region_key_points_back_to_its_country():
    for country in COUNTRIES:
        for key in country.region_keys:
            region = REGIONS.from_key(key)
            assert region.country is country


def test_membership():
    assert "US" in COUNTRIES
    assert countries.from_key("US") in COUNTRIES
    assert "XX" not in COUNTRIES
    assert REGIONS.from_key("US_CA") not in COUNTRIES

import logging
import threading
from dataclasses import dataclass

import pytest

import countries
import regions
from exceptions import CatalogIntegrityError, NotFoundError
from lookup import Catalog, verify_catalogs

# Logging setup
logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Planet:
    value: str
    label: str
    code: str


@dataclass(frozen=True)
class Territory:
    value: str
    label: str
    code: str
    region_keys: tuple = ()


def planet_catalog(rows):
    return Catalog('planet', Planet, lambda: [Planet(*row) for row in rows])


@pytest.fixture
def planets():
    return planet_catalog([
        ("EA", "Earth", "earth"),
        ("MA", "Mars", "mars"),
        ("VE", "Vénus", "venus"),
    ])


# 1. Test loading is lazy and happens once
def test_catalog_loads_once():
    logger.info("Test 1: Lazy single load")
    calls = []

    def loader():
        calls.append(1)
        return [Planet("EA", "Earth", "earth")]

    catalog = Catalog('planet', Planet, loader)
    assert calls == []

    threads = [threading.Thread(target=catalog.values) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(catalog) == 1
    assert calls == [1]


# 2. Test strict vs tolerant lookups
def test_strict_and_tolerant_lookups(planets):
    logger.info("Test 2: Strict and tolerant")
    assert planets.from_key("MA").label == "Mars"
    assert planets.try_from_key("PL") is None
    assert planets.try_from_key({"unhashable": True}) is None
    assert planets.try_from_code(None) is None

    with pytest.raises(NotFoundError) as exc_info:
        planets.from_key("PL")
    assert str(exc_info.value) == "No planet found with value 'PL'"


def test_matching_is_case_sensitive(planets):
    assert planets.try_from_key("ma") is None
    assert planets.try_from_code("MARS") is None
    # Labels are the free-text form and fold case and accents
    assert planets.from_label("VENUS").value == "VE"


# 3. Test enumeration helpers keep declaration order
def test_values_and_options(planets):
    logger.info("Test 3: Enumeration")
    assert planets.values() == ["EA", "MA", "VE"]
    assert planets.values(lambda planet: planet.value != "MA") == ["EA", "VE"]
    assert planets.options() == {"EA": "Earth", "MA": "Mars", "VE": "Vénus"}
    assert [planet.value for planet in planets] == ["EA", "MA", "VE"]


def test_random_uses_catalog_entries(planets):
    assert planets.random() in planets.entries()


# 4. Test duplicate keys are rejected at load time
def test_duplicate_value_raises():
    logger.info("Test 4: Duplicates")
    catalog = planet_catalog([("EA", "Earth", "earth"), ("EA", "Earth again", "earth_again")])

    with pytest.raises(CatalogIntegrityError):
        catalog.values()


def test_duplicate_code_raises():
    catalog = planet_catalog([("EA", "Earth", "earth"), ("TE", "Terra", "earth")])

    with pytest.raises(CatalogIntegrityError):
        catalog.values()


# 5. Test the cross reference checks
def test_verify_shipped_catalogs():
    logger.info("Test 5: Shipped catalogs verify")
    assert verify_catalogs(countries.COUNTRIES, regions.REGIONS) is True


def test_verify_rejects_region_without_country():
    territories = Catalog('country', Territory, lambda: [Territory("AA", "Alpha", "alpha", ("AA_1",))])
    areas = Catalog('region', Planet, lambda: [Planet("AA_1", "One", "alpha_one"), Planet("BB_1", "Orphan", "orphan")])

    with pytest.raises(CatalogIntegrityError):
        verify_catalogs(territories, areas)


def test_verify_rejects_unknown_region_reference():
    territories = Catalog('country', Territory, lambda: [Territory("AA", "Alpha", "alpha", ("AA_2",))])
    areas = Catalog('region', Planet, lambda: [Planet("AA_1", "One", "alpha_one")])

    with pytest.raises(CatalogIntegrityError):
        verify_catalogs(territories, areas)


def test_verify_rejects_misfiled_region():
    territories = Catalog('country', Territory, lambda: [
        Territory("AA", "Alpha", "alpha", ("BB_1",)),
        Territory("BB", "Beta", "beta"),
    ])
    areas = Catalog('region', Planet, lambda: [Planet("BB_1", "One", "beta_one")])

    with pytest.raises(CatalogIntegrityError):
        verify_catalogs(territories, areas)


def test_verify_rejects_key_without_separator():
    territories = Catalog('country', Territory, lambda: [Territory("AA", "Alpha", "alpha")])
    areas = Catalog('region', Planet, lambda: [Planet("AA1", "One", "alpha_one")])

    with pytest.raises(CatalogIntegrityError):
        verify_catalogs(territories, areas)


# 6. Test the load hook runs once and a failing hook discards the build
def test_on_load_runs_once():
    logger.info("Test 6: Load hook")
    seen = []
    catalog = Catalog('planet', Planet, lambda: [Planet("EA", "Earth", "earth")], on_load=seen.append)

    assert catalog.from_key("EA").label == "Earth"
    assert catalog.values() == ["EA"]
    assert seen == [catalog]


def test_broken_cross_references_fail_the_first_lookup():
    territories = Catalog('country', Territory, lambda: [Territory("AA", "Alpha", "alpha", ("AA_2",))])
    areas = Catalog(
        'region', Planet,
        lambda: [Planet("AA_1", "One", "alpha_one")],
        on_load=lambda catalog: verify_catalogs(territories, catalog),
    )

    with pytest.raises(CatalogIntegrityError):
        areas.try_from_key("AA_1")

    # Nothing half-built is left behind
    with pytest.raises(CatalogIntegrityError):
        areas.values()

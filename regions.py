from dataclasses import dataclass

import serializers
from common import slugify
from countries import COUNTRIES
from exceptions import CatalogIntegrityError
from lookup import Catalog, verify_catalogs
from logs import app_logger
from mappings import countries as country_rows, country_regions


@dataclass(frozen=True)
class Region:
    value: str
    label: str
    code: str

    @property
    def name(self):
        return self.value

    @property
    def subdivision(self):
        return self.value.partition('_')[2]

    @property
    def country(self):
        # Owning country is parsed from the key prefix, never stored
        prefix, separator, _ = self.value.partition('_')
        country = COUNTRIES.try_from_key(prefix) if separator else None
        if country is None:
            app_logger.error(f"Region {self.value!r} does not resolve to a country")
            raise CatalogIntegrityError(f"Region {self.value!r} does not resolve to a country")
        return country

    def to_record(self):
        return {
            "label": self.label,
            "value": self.value,
            "country": self.country.value,
            "code": self.code,
        }

    def to_json(self, **kwargs):
        return serializers.to_json(self, **kwargs)

    def __str__(self):
        return self.label


def _load_regions():
    known = {row[0] for row in country_rows}
    orphans = sorted(set(country_regions) - known)
    if orphans:
        raise CatalogIntegrityError(f"Region tables for unknown countries: {', '.join(orphans)}")

    for short_code, country_label, _ in country_rows:
        for subdivision, label in country_regions.get(short_code, {}).items():
            yield Region(
                value=f"{short_code}_{subdivision}",
                label=label,
                code=slugify(country_label, label),
            )


_verified = False


def _verify(catalog):
    global _verified

    verify_catalogs(COUNTRIES, catalog)
    _verified = True


REGIONS = Catalog('region', Region, _load_regions, on_load=_verify)

from_key = REGIONS.from_key
try_from_key = REGIONS.try_from_key
from_code = REGIONS.from_code
try_from_code = REGIONS.try_from_code
from_label = REGIONS.from_label
try_from_label = REGIONS.try_from_label
parse = REGIONS.parse
try_parse = REGIONS.try_parse
random_region = REGIONS.random


def _country_filter(country):
    if country is None:
        return None
    country = COUNTRIES.parse(country)
    prefix = f"{country.value}_"
    return lambda region: region.value.startswith(prefix)


def for_country(country):
    """All regions of a country (entry or short code), in catalog order. Empty when it has none."""
    return list(REGIONS.entries(_country_filter(country)))


def get_values(country=None):
    return REGIONS.values(_country_filter(country))


def get_options(country=None):
    return REGIONS.options(_country_filter(country))


def load_catalogs():
    """Build both catalogs and check their cross references. Safe to call repeatedly."""
    COUNTRIES.entries()
    REGIONS.entries()
    return _verified

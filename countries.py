from dataclasses import dataclass

import serializers
from common import slugify
from lookup import Catalog
from logs import app_logger
from mappings import countries as country_rows, country_regions


@dataclass(frozen=True)
class Country:
    value: str
    label: str
    demonym: str
    code: str
    region_keys: tuple
    flag: str

    @property
    def name(self):
        return self.value

    def region_values(self):
        return list(self.region_keys)

    def regions(self):
        from regions import REGIONS

        return [REGIONS.from_key(key) for key in self.region_keys]

    def svg_flag_path(self):
        import flags

        return flags.svg_flag_path(self)

    def svg_flag_contents(self):
        import flags

        return flags.svg_flag_contents(self)

    def png_flag_contents(self, width=None):
        import flags

        return flags.png_flag_contents(self, width)

    def to_record(self):
        return {
            "label": self.label,
            "value": self.value,
            "demonym": self.demonym,
            "regions": list(self.region_keys),
            "code": self.code,
        }

    def to_json(self, **kwargs):
        return serializers.to_json(self, **kwargs)

    def __str__(self):
        return self.label


def _load_countries():
    for short_code, label, demonym in country_rows:
        subdivisions = country_regions.get(short_code, {})
        yield Country(
            value=short_code,
            label=label,
            demonym=demonym,
            code=slugify(label),
            region_keys=tuple(f"{short_code}_{subdivision}" for subdivision in subdivisions),
            flag=f"{short_code.lower()}.svg",
        )


def _load_regions_catalog(catalog):
    # Building the regions checks the cross references against this catalog
    from regions import REGIONS

    REGIONS.entries()


COUNTRIES = Catalog('country', Country, _load_countries, on_load=_load_regions_catalog)

get_values = COUNTRIES.values
get_options = COUNTRIES.options
from_key = COUNTRIES.from_key
try_from_key = COUNTRIES.try_from_key
from_code = COUNTRIES.from_code
try_from_code = COUNTRIES.try_from_code
from_label = COUNTRIES.from_label
try_from_label = COUNTRIES.try_from_label
parse = COUNTRIES.parse
try_parse = COUNTRIES.try_parse
random_country = COUNTRIES.random


def match_country(text):
    """Resolve free text naming a country: short code, long code or label, in that order."""
    if isinstance(text, Country):
        return text
    if not isinstance(text, str) or not text.strip():
        return None

    text = text.strip()
    return (
        COUNTRIES.try_from_key(text.upper())
        or COUNTRIES.try_from_code(slugify(text))
        or COUNTRIES.try_from_label(text)
    )


def normalize_location(region, country):
    """
    Normalize a free-text (region, country) pair to catalog entries.
    Args:
        region (str or Region): Subdivision code ("CA"), region key ("US_CA"), long code, label or entry.
            May be empty.
        country (str or Country): Short code, long code, label or entry. May be empty when region
            identifies a region on its own.
    Returns:
        tuple: (Region or None, Country or None)
    """
    from regions import REGIONS, Region

    app_logger.info(f"normalize_location({region}, {country})")

    matched_country = match_country(country)

    if isinstance(region, Region):
        if matched_country is None:
            return region, region.country
        if region.value in matched_country.region_keys:
            return region, matched_country
        app_logger.debug(f"Region {region.value} is not in {matched_country.value}")
        return None, matched_country

    region_text = region.strip() if isinstance(region, str) else None

    if matched_country is None:
        if not region_text:
            return None, None
        # Without a country only globally unique region identifiers are accepted
        matched_region = REGIONS.try_from_key(region_text.upper()) or REGIONS.try_from_code(slugify(region_text))
        if matched_region is None:
            return None, None
        return matched_region, matched_region.country

    # If region is empty, return just the country
    if not region_text:
        return None, matched_country

    candidates = [REGIONS.from_key(key) for key in matched_country.region_keys]

    # Lookup by subdivision code or full region key
    key = region_text.upper()
    if not key.startswith(f"{matched_country.value}_"):
        key = f"{matched_country.value}_{key}"
    if key in matched_country.region_keys:
        return REGIONS.from_key(key), matched_country

    # Lookup by long code, with or without the country prefix
    slug = slugify(region_text)
    for candidate in candidates:
        if candidate.code in (slug, slugify(matched_country.label, region_text)):
            return candidate, matched_country

    # Lookup by label (case, accent and punctuation insensitive)
    for candidate in candidates:
        if slugify(candidate.label) == slug:
            return candidate, matched_country

    # Fallback: If no match found, return the country without a region
    app_logger.debug(f"No region {region_text!r} found for {matched_country.value}")
    return None, matched_country

import random
import threading

from common import fold_text
from exceptions import CatalogIntegrityError, NotFoundError
from logs import app_logger


class Catalog:
    """
    Closed, read-only collection of entries with strict and tolerant lookups.

    Entries must expose ``value`` (the catalog key), ``code`` (the long code)
    and ``label``. Strict lookups raise NotFoundError on a miss, the ``try_``
    variants return None instead. ``on_load`` is called with the catalog once,
    right after the first build; if it raises, the build is discarded.
    """

    def __init__(self, name, entry_type, loader, on_load=None):
        self.name = name
        self.entry_type = entry_type
        self._loader = loader
        self._on_load = on_load
        self._lock = threading.Lock()
        self._entries = None
        self._by_value = {}
        self._by_code = {}
        self._by_label = {}

    def _load(self):
        # Built once, on first access
        if self._entries is not None:
            return self._entries

        with self._lock:
            if self._entries is None:
                entries = tuple(self._loader())
                by_value, by_code, by_label = {}, {}, {}

                for entry in entries:
                    if entry.value in by_value:
                        raise CatalogIntegrityError(f"Duplicate {self.name} value {entry.value!r}")
                    if entry.code in by_code:
                        raise CatalogIntegrityError(f"Duplicate {self.name} code {entry.code!r}")
                    by_value[entry.value] = entry
                    by_code[entry.code] = entry
                    # First entry wins when labels collide across countries
                    by_label.setdefault(fold_text(entry.label), entry)

                self._by_value = by_value
                self._by_code = by_code
                self._by_label = by_label
                self._entries = entries
                app_logger.debug(f"Loaded {len(entries)} {self.name} entries")

                if self._on_load is not None:
                    try:
                        self._on_load(self)
                    except Exception as e:
                        app_logger.error(f"Error verifying {self.name} catalog: {e}")
                        self._entries = None
                        self._by_value, self._by_code, self._by_label = {}, {}, {}
                        raise

        return self._entries

    def __iter__(self):
        return iter(self._load())

    def __len__(self):
        return len(self._load())

    def __contains__(self, item):
        self._load()
        if isinstance(item, self.entry_type):
            return self._by_value.get(item.value) is item
        return self.try_from_key(item) is not None

    def __repr__(self):
        return f"<Catalog {self.name}>"

    def entries(self, predicate=None):
        if predicate is None:
            return self._load()
        return tuple(entry for entry in self._load() if predicate(entry))

    def values(self, predicate=None):
        return [entry.value for entry in self.entries(predicate)]

    def options(self, predicate=None):
        return {entry.value: entry.label for entry in self.entries(predicate)}

    def from_key(self, key):
        entry = self.try_from_key(key)
        if entry is None:
            app_logger.debug(f"{self.name} lookup failed for value {key!r}")
            raise NotFoundError(key, self.name)
        return entry

    def try_from_key(self, key):
        self._load()
        try:
            return self._by_value.get(key)
        except TypeError:
            # Unhashable input can never be a key
            return None

    def from_code(self, code):
        entry = self.try_from_code(code)
        if entry is None:
            app_logger.debug(f"{self.name} lookup failed for code {code!r}")
            raise NotFoundError(code, self.name, field='code')
        return entry

    def try_from_code(self, code):
        self._load()
        try:
            return self._by_code.get(code)
        except TypeError:
            return None

    def from_label(self, label):
        entry = self.try_from_label(label)
        if entry is None:
            app_logger.debug(f"{self.name} lookup failed for label {label!r}")
            raise NotFoundError(label, self.name, field='label')
        return entry

    def try_from_label(self, label):
        """Case and accent insensitive label lookup ("cote d'ivoire" finds "Côte d'Ivoire")."""
        if not isinstance(label, str):
            return None
        self._load()
        return self._by_label.get(fold_text(label))

    def parse(self, value):
        """
        Resolve an entry or a catalog key to an entry.
        Args:
            value: An entry of this catalog (returned unchanged) or its key.
        Returns:
            The matching entry.
        Raises:
            NotFoundError: When value is None or no entry has that key.
        """
        if isinstance(value, self.entry_type):
            return value
        if value is None:
            app_logger.debug(f"{self.name} parse called with None")
            raise NotFoundError(value, self.name)
        return self.from_key(value)

    def try_parse(self, value):
        try:
            return self.parse(value)
        except NotFoundError:
            return None

    def random(self):
        return random.choice(self._load())


def verify_catalogs(countries, regions):
    """
    Check the cross references between the country and region catalogs.
    Raises CatalogIntegrityError on the first broken invariant.
    """
    checked = 0
    for region in regions:
        prefix, separator, subdivision = region.value.partition('_')
        if not separator or not subdivision:
            raise CatalogIntegrityError(f"Region value {region.value!r} is not <country>_<subdivision>")
        if countries.try_from_key(prefix) is None:
            raise CatalogIntegrityError(f"Region {region.value!r} names unknown country {prefix!r}")

    for country in countries:
        for key in country.region_keys:
            region = regions.try_from_key(key)
            if region is None:
                raise CatalogIntegrityError(f"Country {country.value!r} lists unknown region {key!r}")
            if key.partition('_')[0] != country.value:
                raise CatalogIntegrityError(f"Region {key!r} listed under {country.value!r} belongs elsewhere")
            checked += 1

    app_logger.info(f"Verified {len(countries)} countries and {checked} region references")
    return True

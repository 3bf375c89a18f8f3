class CountryEnumsError(Exception):
    """Base class for every error raised by the catalogs."""


class NotFoundError(CountryEnumsError, LookupError):
    """A strict lookup found no entry for the given key, code, label or value."""

    def __init__(self, key, catalog, field='value'):
        self.key = key
        self.catalog = catalog
        self.field = field
        super().__init__(f"No {catalog} found with {field} {key!r}")


class AssetReadError(CountryEnumsError, OSError):
    """A flag asset could not be opened or read."""

    def __init__(self, path, reason=None):
        self.path = path
        message = f"Unable to read flag asset {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class RasterizationError(CountryEnumsError):
    """The image engine could not decode or resize a flag asset."""


class CatalogIntegrityError(CountryEnumsError):
    """The shipped dataset breaks one of the catalog invariants."""

import json

from exceptions import NotFoundError


def to_record(entry):
    """Ordered label/value/.../code mapping of a catalog entry."""
    return entry.to_record()


def to_json(entry, **kwargs):
    # Compact by default; extra keyword arguments go straight to json.dumps
    kwargs.setdefault('separators', (',', ':'))
    return json.dumps(to_record(entry), **kwargs)


def from_json(text, catalog):
    """
    Resolve a JSON record produced by to_json back to its catalog entry.
    Args:
        text (str): JSON object with at least a "value" key.
        catalog: Catalog the record came from.
    Returns:
        The catalog entry whose key equals the record's value.
    """
    record = json.loads(text)
    if not isinstance(record, dict) or "value" not in record:
        raise NotFoundError(None, catalog.name)
    return catalog.from_key(record["value"])

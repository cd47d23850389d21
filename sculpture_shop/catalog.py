"""
Sculpture listing filter contract.

The server applies these filters through the listing and count operations;
clients re-run `filter_sculptures` / `sort_sculptures` over an already-fetched
page. This module has no Django imports so both sides can share it.

Parsing is lenient: a value that does not parse is dropped (the filter is
ignored) rather than rejected.
"""
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal, InvalidOperation

DEFAULT_LIMIT = 100
DEFAULT_MAX_LIMIT = 500

SORT_NEWEST = "newest"
SORT_OLDEST = "oldest"
SORT_PRICE_LOW = "price_low"
SORT_PRICE_HIGH = "price_high"
SORT_NAME = "name"

SORT_OPTIONS = [
    (SORT_NEWEST, "Newest First"),
    (SORT_OLDEST, "Oldest First"),
    (SORT_PRICE_LOW, "Price: Low to High"),
    (SORT_PRICE_HIGH, "Price: High to Low"),
    (SORT_NAME, "Name: A to Z"),
]

# Hyphenated spellings are what the storefront's sort dropdown sends.
_SORT_ALIASES = {
    "price-low": SORT_PRICE_LOW,
    "price-high": SORT_PRICE_HIGH,
}

# Signed 64-bit: the widest integer column the supported databases store
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1

_EPOCH = datetime(1970, 1, 1, tzinfo=dt_timezone.utc)

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


def _to_int(val):
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, float):
        val = int(val) if val.is_integer() else None
    elif not isinstance(val, int):
        try:
            val = int(str(val).strip())
        except (TypeError, ValueError):
            return None
    if val is None or not _INT_MIN <= val <= _INT_MAX:
        return None
    return val


def _to_decimal(val):
    if val is None or isinstance(val, bool):
        return None
    try:
        number = Decimal(str(val).strip())
    except (InvalidOperation, TypeError, ValueError):
        return None
    return number if number.is_finite() else None


def _to_bool(val):
    if val is None or isinstance(val, bool):
        return val
    text = str(val).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    return None


def _to_text(val):
    if val is None:
        return None
    text = str(val).strip()
    return text or None


_FIELD_PARSERS = {
    "category_id": _to_int,
    "material_id": _to_int,
    "min_price": _to_decimal,
    "max_price": _to_decimal,
    "search_term": _to_text,
    "is_featured": _to_bool,
}


def clamp_page(limit, offset, default_limit=DEFAULT_LIMIT, max_limit=DEFAULT_MAX_LIMIT):
    """Return (limit, offset) with the endpoint default and hard cap applied."""
    limit = _to_int(limit)
    offset = _to_int(offset)
    if limit is None or limit <= 0:
        limit = default_limit
    limit = min(limit, max_limit)
    if offset is None or offset < 0:
        offset = 0
    return limit, offset


class SculptureFilters:
    """Optional listing filters; a None field means "any"."""

    FIELDS = ("category_id", "material_id", "min_price", "max_price", "search_term", "is_featured")

    def __init__(self, category_id=None, material_id=None, min_price=None, max_price=None,
                 search_term=None, is_featured=None, limit=DEFAULT_LIMIT, offset=0):
        self.category_id = category_id
        self.material_id = material_id
        self.min_price = min_price
        self.max_price = max_price
        self.search_term = search_term
        self.is_featured = is_featured
        self.limit = limit
        self.offset = offset

    def __eq__(self, other):
        if not isinstance(other, SculptureFilters):
            return NotImplemented
        return self.as_dict(include_page=True) == other.as_dict(include_page=True)

    def __repr__(self):
        active = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"SculptureFilters({active})"

    def as_dict(self, include_page=False):
        data = {name: getattr(self, name) for name in self.FIELDS if getattr(self, name) is not None}
        if include_page:
            data["limit"] = self.limit
            data["offset"] = self.offset
        return data

    def predicate_params(self):
        """Positional parameters shared by the listing and count operations."""
        return [getattr(self, name) for name in self.FIELDS]

    @property
    def is_empty(self):
        return not self.as_dict()

    def update(self, **raw):
        """Set filters from raw values, parsed the same way as query params."""
        for name, value in raw.items():
            if name not in self.FIELDS:
                raise TypeError(f"Unknown filter: {name}")
            setattr(self, name, _FIELD_PARSERS[name](value))
        return self


def parse_filters(params, default_limit=DEFAULT_LIMIT, max_limit=DEFAULT_MAX_LIMIT):
    """Build SculptureFilters from a query-param mapping (dict or QueryDict)."""
    raw = {name: params.get(name) for name in SculptureFilters.FIELDS}
    if raw["search_term"] is None:
        raw["search_term"] = params.get("search")
    limit, offset = clamp_page(params.get("limit"), params.get("offset"), default_limit, max_limit)
    return SculptureFilters(limit=limit, offset=offset).update(**raw)


def _contains(haystack, needle):
    return haystack is not None and needle in str(haystack).lower()


def matches(row, filters):
    """True when one serialized sculpture row satisfies every active filter."""
    if filters.search_term:
        needle = filters.search_term.lower()
        if not any(_contains(row.get(field), needle)
                   for field in ("name", "description", "category_name", "material_name")):
            return False

    if filters.category_id is not None and _to_int(row.get("category_id")) != filters.category_id:
        return False
    if filters.material_id is not None and _to_int(row.get("material_id")) != filters.material_id:
        return False

    if filters.min_price is not None or filters.max_price is not None:
        price = _to_decimal(row.get("price"))
        if price is None:
            return False
        if filters.min_price is not None and price < filters.min_price:
            return False
        if filters.max_price is not None and price > filters.max_price:
            return False

    if filters.is_featured is not None and bool(row.get("is_featured")) != filters.is_featured:
        return False
    return True


def filter_sculptures(rows, filters):
    """New list of the rows matching `filters`, input order preserved. Pure."""
    return [row for row in rows if matches(row, filters)]


def _created_at(row):
    value = row.get("created_at")
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            value = None
    if not isinstance(value, datetime):
        return _EPOCH
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt_timezone.utc)
    return value


def _price(row):
    return _to_decimal(row.get("price")) or Decimal("0")


def normalize_sort(sort_by):
    return _SORT_ALIASES.get(sort_by, sort_by)


def sort_sculptures(rows, sort_by=SORT_NEWEST):
    """
    Stable sort of serialized rows. Ties keep their input order; an unknown
    sort key returns the rows in input order.
    """
    sort_by = normalize_sort(sort_by)
    if sort_by == SORT_NEWEST:
        return sorted(rows, key=_created_at, reverse=True)
    if sort_by == SORT_OLDEST:
        return sorted(rows, key=_created_at)
    if sort_by == SORT_PRICE_LOW:
        return sorted(rows, key=_price)
    if sort_by == SORT_PRICE_HIGH:
        return sorted(rows, key=_price, reverse=True)
    if sort_by == SORT_NAME:
        return sorted(rows, key=lambda row: str(row.get("name") or "").casefold())
    return list(rows)


def paginate(rows, limit, offset=0):
    return list(rows)[offset:offset + limit]

"""Property identifier resolution.

Each county tries a fixed, ordered list of strategies (a labeled DOM field, a
regex over page text, a URL query parameter, a sibling seed file) and keeps the
first non-empty answer. Only Manatee treats a miss as fatal.
"""
import logging
import re

from .exceptions import MissingInputError, PropertyIdNotFoundError, RequestIdentifierMismatchError
from .utils import query_values

logger = logging.getLogger(__name__)

# Lookups that fall off the end of a missing element count as a miss
STRATEGY_MISSES = (AttributeError, KeyError, IndexError, TypeError)

UNSAFE_ID_RE = re.compile(r"[^A-Za-z0-9_\-.]")


def resolve_property_id(strategies, default="unknown"):
    """Return the first non-empty identifier produced by ``strategies``, else ``default``."""
    for strategy in strategies:
        try:
            value = strategy()
        except STRATEGY_MISSES as e:
            logger.debug(f"Identifier strategy missed: {e!r}")
            continue
        if value is None:
            continue
        value = str(value).strip()
        if value:
            logger.info(f"Resolved property id {value}")
            return value
    logger.warning(f"No property id found, using {default!r}")
    return default


def require_property_id(strategies):
    """Like ``resolve_property_id`` but raise when nothing is found."""
    value = resolve_property_id(strategies, default=None)
    if value is None:
        raise PropertyIdNotFoundError()
    return value


def regex_group(pattern, text, group=1, flags=re.IGNORECASE):
    """Strategy helper: first capture group of ``pattern`` in ``text``."""
    return re.search(pattern, text or "", flags).group(group)


def query_param(url, name):
    """Value of query parameter ``name`` in ``url`` (first value if repeated)."""
    values = query_values(url).get(name)
    return values[0] if values else None


def seed_parcel_id(seed, keys=("parcel_id", "request_identifier")):
    """Identifier carried by a sibling seed file, if any."""
    if not seed:
        return None
    for key in keys:
        value = seed.get(key)
        if value not in (None, ""):
            return str(value)
    return None


def sanitize_property_id(value):
    return UNSAFE_ID_RE.sub("_", str(value))


def check_request_identifier(property_id, seed):
    """Fail unless the seed's request_identifier equals the id with dashes removed."""
    if seed is None:
        raise MissingInputError("parcel.json or property_seed.json not found", "parcel.json")
    expected = property_id.replace("-", "")
    actual = seed.get("request_identifier")
    if actual is None or str(actual) != expected:
        logger.error(f"Seed request_identifier {actual!r} does not match parcel id {expected!r}")
        raise RequestIdentifierMismatchError()

"""Owner-name parsing shared by the county owner processors.

County rolls print owners as free text: ``SMITH JOHN & JANE H/W``,
``Doe, Jane A``, ``ACME HOLDINGS LLC``. ``OwnerParser`` turns one such string
into company/person records, sending anything it cannot split into a first and
last name to the invalid list. ``OwnersByDate`` groups the results per sale
date for ``owner_data.json``.
"""
import logging
import re
from datetime import datetime

from .lookup import clean_text

logger = logging.getLogger(__name__)

# Company detection keywords, matched as whole tokens with dots removed
COMPANY_KEYWORDS = [
    "inc", "llc", "ltd", "corp", "co", "company", "foundation", "alliance",
    "solutions", "services", "trust", "tr", "associates", "association", "assn",
    "holdings", "properties", "investments", "bank", "na", "lp", "llp", "pc",
    "pllc", "pa", "partners", "enterprise", "enterprises", "group",
    "construction", "church", "ministries", "management", "realty", "fund",
]

TITLES = {"mr", "mrs", "ms", "miss", "dr"}
# a lone "V" is read as a middle initial, not a suffix
SUFFIXES = {"jr", "sr", "ii", "iii", "iv", "vi", "vii", "viii", "ix"}
NOISE_TOKENS = {"&", "and", "h&w", "h/w", "et", "al", "etal", "etux", "etvir"}

NOISE_PATTERNS = [
    (re.compile(r"^\*+\s*"), ""),
    (re.compile(r"\([^)]*\)"), " "),
    (re.compile(r"\bH\s*[&/]\s*W\b", re.IGNORECASE), " "),
    (re.compile(r"\bET\s*(?:AL|UX|VIR)\b\.?", re.IGNORECASE), " "),
    (re.compile(r"\d+(?:\.\d+)?\s*%"), " "),
    (re.compile(r"\bC/O\b.*$", re.IGNORECASE), " "),
]
AND_SEPARATOR = re.compile(r"\s+AND\s+", re.IGNORECASE)
TRUSTEE_PATTERN = re.compile(r"\s+TR\.?$", re.IGNORECASE)

EXCLUSION_PATTERNS = [
    re.compile(r"unknown\s+seller", re.IGNORECASE),
    re.compile(r"conversion", re.IGNORECASE),
    re.compile(r"^unknown$", re.IGNORECASE),
]

REASON_NON_OWNER = "ambiguous or non-owner label"
REASON_INSUFFICIENT = "insufficient tokens for person"
REASON_AMPERSAND = "could not parse person name with & separator"

_TOKEN_STRIP_RE = re.compile(r"[^\w'\-]")
_WORD_RE = re.compile(r"[A-Za-z]+")


def _norm_token(token):
    return token.lower().replace(".", "").strip(",;")


def _is_all_caps(text):
    letters = [c for c in text if c.isalpha()]
    if not letters:
        return False
    upper = sum(1 for c in letters if c.isupper())
    return upper / len(letters) > 0.9


def title_case(text, keep_short_caps=False):
    """Title-case each word, keeping hyphen/apostrophe parts capitalized."""
    words = []
    for word in text.split():
        if keep_short_caps and re.fullmatch(r"[A-Z]{1,3}", word):
            words.append(word)
            continue
        words.append(_WORD_RE.sub(lambda m: m.group(0).capitalize(), word.lower()))
    return " ".join(words)


def invalid_owner(raw, reason):
    return {"raw": raw, "reason": reason}


def owner_key(owner):
    """Normalized identity used for de-duplication."""
    if owner.get("type") == "company":
        return ("company", clean_text(owner.get("name")).lower())
    return (
        "person",
        clean_text(owner.get("first_name")).lower(),
        clean_text(owner.get("middle_name")).lower(),
        clean_text(owner.get("last_name")).lower(),
    )


def dedupe_owners(owners_list):
    """Remove duplicate owners, keeping the first occurrence"""
    seen = set()
    unique_owners = []
    for owner in owners_list:
        key = owner_key(owner)
        if key in seen:
            continue
        seen.add(key)
        unique_owners.append(owner)
    return unique_owners


def dedupe_invalid(invalid_list):
    seen = set()
    unique = []
    for item in invalid_list:
        key = (item.get("raw"), item.get("reason"))
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique


def to_iso_date(text):
    """Normalize ``M/D/YYYY``, ``YYYY-MM-DD[...]`` or ``MM/YYYY`` to ``YYYY-MM-DD``.

    Returns None when the text holds no recognizable (and valid) date.
    """
    if not text:
        return None
    text = str(text).strip()
    m = re.match(r"^(\d{4})-(\d{1,2})-(\d{1,2})", text)
    if m:
        year, month, day = m.groups()
    else:
        m = re.search(r"\b(\d{1,2})/(\d{1,2})/(\d{4})\b", text)
        if m:
            month, day, year = m.groups()
        else:
            m = re.search(r"\b(\d{1,2})/(\d{4})\b", text)
            if not m:
                return None
            month, year = m.groups()
            day = "1"
    try:
        return datetime(int(year), int(month), int(day)).strftime("%Y-%m-%d")
    except ValueError:
        return None


class OwnerParser:
    """Configurable owner-string parser.

    ``order`` selects how person tokens are read: ``"last_first"`` (LAST FIRST
    MIDDLE), ``"first_last"`` (FIRST MIDDLE LAST) or ``"auto"`` (all caps reads
    LAST FIRST, mixed case reads FIRST ... LAST). A comma always means
    ``LAST, FIRST``.

    ``ampersand`` is ``"split"`` (one person per ``&`` or ``AND`` segment; bare
    first names borrow the family name of the first segment, or of the last one
    in ``John & Jane Smith``) or ``"merge"`` (drop the ``&``
    and read what is left as one person).
    """

    def __init__(self, company_keywords=None, order="auto", ampersand="split",
                 strip_trustee=True, share_last_name=True, extra_noise=(), exclusions=None,
                 title_case_companies=False, keep_short_caps=False):
        if order not in ("auto", "last_first", "first_last"):
            raise ValueError(f"Unknown name order: {order}")
        if ampersand not in ("split", "merge"):
            raise ValueError(f"Unknown ampersand mode: {ampersand}")
        keywords = company_keywords if company_keywords is not None else COMPANY_KEYWORDS
        self.single_keywords = {_norm_token(k) for k in keywords if " " not in k}
        self.phrase_keywords = [k.lower() for k in keywords if " " in k]
        self.order = order
        self.ampersand = ampersand
        self.strip_trustee = strip_trustee
        self.share_last_name = share_last_name
        self.noise_patterns = list(NOISE_PATTERNS) + [
            (re.compile(p, re.IGNORECASE) if isinstance(p, str) else p, " ")
            for p in extra_noise
        ]
        self.exclusions = exclusions if exclusions is not None else EXCLUSION_PATTERNS
        self.title_case_companies = title_case_companies
        self.keep_short_caps = keep_short_caps

    def clean(self, raw):
        """Strip markers that are never part of a name."""
        text = clean_text(raw)
        for pattern, replacement in self.noise_patterns:
            text = pattern.sub(replacement, text)
        text = clean_text(text)
        if self.strip_trustee:
            text = TRUSTEE_PATTERN.sub("", text)
        return text.strip(" ,;")

    def is_company(self, name):
        lowered = name.lower()
        for phrase in self.phrase_keywords:
            if re.search(r"\b" + re.escape(phrase) + r"\b", lowered):
                return True
        tokens = re.split(r"[\s,;&/]+", lowered)
        return any(_norm_token(t) in self.single_keywords for t in tokens if t)

    def is_excluded(self, name):
        return any(p.search(name) for p in self.exclusions)

    def company(self, name):
        if self.title_case_companies:
            name = title_case(name, self.keep_short_caps)
        return {"type": "company", "name": name}

    def _tokens(self, text):
        tokens = []
        for raw_token in text.split():
            if raw_token.lower() in NOISE_TOKENS:
                continue
            token = _TOKEN_STRIP_RE.sub("", raw_token)
            if not token or token.lower() in NOISE_TOKENS:
                continue
            tokens.append(token)
        if tokens and tokens[0].lower() in TITLES:
            tokens = tokens[1:]
        if not tokens:
            return []
        while len(tokens) > 1 and tokens[-1].lower() in SUFFIXES:
            tokens.pop()
        return tokens

    def _person(self, first, last, middle_tokens):
        middle = " ".join(middle_tokens) or None
        return {
            "type": "person",
            "first_name": title_case(first, self.keep_short_caps),
            "last_name": title_case(last, self.keep_short_caps),
            "middle_name": title_case(middle, self.keep_short_caps) if middle else None,
        }

    def parse_person(self, name):
        """Parse one person name, or return None when first and last cannot both be found."""
        if "," in name:
            last_part, _, rest = name.partition(",")
            last_tokens = self._tokens(last_part)
            rest_tokens = self._tokens(rest)
            if not last_tokens or not rest_tokens:
                return None
            return self._person(rest_tokens[0], " ".join(last_tokens), rest_tokens[1:])

        tokens = self._tokens(name)
        if len(tokens) < 2:
            return None
        order = self.order
        if order == "auto":
            order = "last_first" if _is_all_caps(name) else "first_last"
        if order == "last_first":
            return self._person(tokens[1], tokens[0], tokens[2:])
        return self._person(tokens[0], tokens[-1], tokens[1:-1])

    def _parse_segment(self, segment, shared_last):
        tokens = self._tokens(segment)
        if shared_last and "," not in segment:
            if len(tokens) == 1:
                return self._person(tokens[0], shared_last, [])
            if len(tokens) == 2 and _is_all_caps(segment):
                return self._person(tokens[0], shared_last, tokens[1:])
        return self.parse_person(segment)

    def _shared_last_name(self, segments, lead):
        """Family name bare first names borrow: the lead's, else the last segment's."""
        if not self.share_last_name:
            return None
        if lead is not None:
            return lead["last_name"]
        # "John & Jane Smith"
        if len(segments) > 1 and segments[-1] and len(self._tokens(segments[0])) == 1:
            tail = self.parse_person(segments[-1])
            if tail is not None:
                return tail["last_name"]
        return None

    def _parse_split(self, text, name):
        segments = [clean_text(segment) for segment in name.split("&")]
        lead = self.parse_person(segments[0]) if segments[0] else None
        shared_last = self._shared_last_name(segments, lead)

        owners, invalid = [], []
        for index, segment in enumerate(segments):
            if not segment:
                invalid.append(invalid_owner(text, REASON_AMPERSAND))
                continue
            if index == 0 and lead is not None:
                person = lead
            else:
                person = self._parse_segment(segment, shared_last)
            if person is None:
                invalid.append(invalid_owner(segment, REASON_AMPERSAND))
                continue
            owners.append(person)
        return owners, invalid

    def parse(self, raw):
        """Parse one owner string into ``(owners, invalid_owners)``."""
        text = clean_text(raw)
        if not text:
            return [], []
        if self.is_excluded(text):
            logger.debug(f"Skipping non-owner label {text!r}")
            return [], [invalid_owner(text, REASON_NON_OWNER)]

        name = self.clean(text)
        if not name:
            return [], [invalid_owner(text, REASON_INSUFFICIENT)]
        if self.is_company(name):
            return [self.company(name)], []

        if "&" in name and self.ampersand == "merge":
            person = self.parse_person(clean_text(name.replace("&", " ")))
            if person is None:
                return [], [invalid_owner(text, REASON_AMPERSAND)]
            return [person], []

        if self.ampersand == "split":
            name = AND_SEPARATOR.sub(" & ", name)
        if "&" in name:
            return self._parse_split(text, name)

        person = self.parse_person(name)
        if person is None:
            return [], [invalid_owner(text, REASON_INSUFFICIENT)]
        return [person], []

    def parse_many(self, raws):
        """Parse several owner strings, de-duplicating the combined result."""
        owners, invalid = [], []
        for raw in raws:
            parsed, bad = self.parse(raw)
            owners.extend(parsed)
            invalid.extend(bad)
        return dedupe_owners(owners), dedupe_invalid(invalid)


class OwnersByDate:
    """Owner buckets keyed by ISO sale date, undated sales and the current owners.

    Serializes dated buckets in ascending date order, then ``unknown_date_N``
    placeholders in insertion order, then ``current`` last.
    """

    def __init__(self):
        self.dated = {}
        self.undated = []
        self.current = []
        self.invalid = []

    def add(self, date, owners):
        if not owners:
            return
        if date:
            self.dated.setdefault(date, []).extend(owners)
        else:
            self.undated.append(list(owners))

    def add_current(self, owners):
        self.current.extend(owners)

    def add_invalid(self, invalid):
        self.invalid.extend(invalid)

    def to_dict(self):
        result = {}
        for date in sorted(self.dated):
            result[date] = dedupe_owners(self.dated[date])
        for index, owners in enumerate(self.undated, start=1):
            result[f"unknown_date_{index}"] = dedupe_owners(owners)
        result["current"] = dedupe_owners(self.current)
        return result

    def record(self, include_empty_invalid=True):
        """The per-property owner record: ``owners_by_date`` plus ``invalid_owners``."""
        record = {"owners_by_date": self.to_dict()}
        invalid = dedupe_invalid(self.invalid)
        if invalid or include_empty_invalid:
            record["invalid_owners"] = invalid
        return record

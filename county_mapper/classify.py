"""Ordered rule tables that normalize free-text county descriptions to enum values.

A rule table is a list of ``Rule(pattern, result)``. The first rule whose
pattern hits wins, so more specific patterns must come first (``GABLE/HIP``
before ``GABLE``). Patterns are case-insensitive regexes or predicates.
"""
import logging
import re
from collections import namedtuple

logger = logging.getLogger(__name__)

Rule = namedtuple("Rule", ["pattern", "result"])


def rule(pattern, result):
    """Build a Rule; plain strings are compiled as case-insensitive regexes."""
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.IGNORECASE)
    return Rule(pattern, result)


def _hits(pattern, text):
    if hasattr(pattern, "search"):
        return pattern.search(text) is not None
    return bool(pattern(text))


def first_match(rules, text, default=None):
    """Result of the first rule matching ``text``; ``default`` for no hit or empty text."""
    if not text:
        return default
    for r in rules:
        if _hits(r.pattern, text):
            return r.result
    logger.debug(f"No rule matched {text!r}")
    return default


def all_matches(rules, text):
    """Distinct results of every matching rule, in rule order."""
    if not text:
        return []
    results = []
    for r in rules:
        if r.result not in results and _hits(r.pattern, text):
            results.append(r.result)
    return results


def contains_all(*words):
    """Predicate that is true when every word occurs in the text."""
    lowered = [w.lower() for w in words]

    def predicate(text):
        t = text.lower()
        return all(w in t for w in lowered)

    return predicate


EXTERIOR_WALL_RULES = [
    rule(r"concrete block|\bcbs\b|\bblock\b", "Concrete Block"),
    rule(r"stucco", "Stucco"),
    rule(r"brick", "Brick"),
    rule(r"stone", "Natural Stone"),
    rule(r"vinyl", "Vinyl Siding"),
    rule(r"hardi|fiber\s*cement|cement\s*board", "Fiber Cement Siding"),
    rule(r"wood|cedar|t1-11", "Wood Siding"),
    rule(r"metal|alum", "Metal Siding"),
]

EXTERIOR_ACCENT_RULES = [
    rule(r"stucco", "Stucco Accent"),
    rule(r"brick", "Brick Accent"),
    rule(r"stone", "Stone Accent"),
    rule(r"wood", "Wood Trim"),
    rule(r"vinyl", "Vinyl Accent"),
]

ROOF_DESIGN_RULES = [
    rule(contains_all("gable", "hip"), "Combination"),
    rule(r"hip", "Hip"),
    rule(r"gable", "Gable"),
    rule(r"flat", "Flat"),
    rule(r"shed", "Shed"),
    rule(r"mansard", "Mansard"),
    rule(r"gambrel", "Gambrel"),
]

ROOF_MATERIAL_TYPE_RULES = [
    rule(r"shingle|asph|\bcomp", "Shingle"),
    rule(r"metal", "Metal"),
    rule(r"tile", "Tile"),
    rule(r"concrete", "Concrete"),
    rule(r"slate", "Stone"),
]

FLOORING_RULES = [
    rule(r"carpet", "Carpet"),
    rule(r"\bcer|\bclay|tile|porcelain", "Ceramic Tile"),
    rule(r"vinyl\s*plank|\blvp\b", "Luxury Vinyl Plank"),
    rule(r"vinyl", "Sheet Vinyl"),
    rule(r"hardwood|\bwood\b", "Solid Hardwood"),
    rule(r"laminate", "Laminate"),
    rule(r"terrazzo", "Terrazzo"),
    rule(r"concrete", "Polished Concrete"),
    rule(r"marble|stone", "Natural Stone Tile"),
]

INTERIOR_WALL_SURFACE_RULES = [
    rule(r"plaster", "Plaster"),
    rule(r"drywall|gypsum|sheetrock", "Drywall"),
    rule(r"panel", "Wood Paneling"),
]

COOLING_RULES = [
    rule(r"central", "CentralAir"),
    rule(r"ductless|mini[\s-]?split", "Ductless"),
    rule(r"window|wall\s*unit", "WindowAirConditioner"),
]

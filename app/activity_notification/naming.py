"""
Naming helpers for route generation.

Plain, locale-free inflection driven by explicit tables. Only the word shapes
that show up in resource names are handled; anything unusual belongs in the
INFLECTIONS setting.

Examples (input -> output):
    pluralize("notification")     -> "notifications"
    pluralize("notifications")    -> "notifications"
    pluralize("address")          -> "addresses"
    pluralize("company")          -> "companies"
    pluralize("status")           -> "statuses"
    pluralize("analysis")         -> "analyses"
    pluralize("person")           -> "people"
    singularize("users")          -> "user"
    singularize("companies")      -> "company"
    singularize("addresses")      -> "address"
    singularize("aliases")        -> "alias"
    singularize("people")         -> "person"
    singularize("staff")          -> "staff"
    underscore("AdminUser")       -> "admin_user"
    underscore("admin-users")     -> "admin_users"
    resources_name("Notification") -> "notifications"
    controller_name("notifications", with_devise="users")
        -> "activity_notification/notifications_with_devise"
"""

from __future__ import annotations

import re

from activity_notification.conf import get_setting

CONTROLLER_NAMESPACE = "activity_notification"

# singular -> plural
IRREGULARS: dict[str, str] = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "mouse": "mice",
    "goose": "geese",
    "tooth": "teeth",
    "foot": "feet",
    "ox": "oxen",
}

UNCOUNTABLES: frozenset[str] = frozenset(
    {
        "equipment",
        "information",
        "money",
        "series",
        "species",
        "sheep",
        "fish",
        "staff",
        "police",
    }
)

_VOWELS = "aeiou"
_SIBILANT_ENDINGS = ("ss", "sh", "ch", "x", "z")
# Singular words ending in "s", matched as suffixes ("order_status")
_SINGULAR_S_ENDINGS = (
    "alias",
    "atlas",
    "bonus",
    "bus",
    "campus",
    "canvas",
    "census",
    "status",
    "virus",
)
_SIS_PLURAL = re.compile(r"(analy|diagno|parenthe|progno|synop|the)ses$")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def _irregulars() -> dict[str, str]:
    extra = get_setting("INFLECTIONS")
    if not extra:
        return IRREGULARS
    return {**IRREGULARS, **{k.lower(): v.lower() for k, v in extra.items()}}


def pluralize(word: str) -> str:
    """
    Return the plural form of word.

    Words that already look plural (trailing "s" without a sibilant ending,
    and not a known singular such as "status") are returned unchanged, so
    pluralize is idempotent on resource names.
    """
    if not word:
        return word
    lower = word.lower()
    if lower in UNCOUNTABLES:
        return word
    irregulars = _irregulars()
    if lower in irregulars:
        return irregulars[lower]
    if lower in irregulars.values():
        return word
    if lower.endswith(_SINGULAR_S_ENDINGS):
        return word + "es"
    if lower.endswith("sis"):
        return word[:-2] + "es"
    if lower.endswith(_SIBILANT_ENDINGS):
        return word + "es"
    if lower.endswith("s"):
        return word
    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in _VOWELS:
        return word[:-1] + "ies"
    return word + "s"


def singularize(word: str) -> str:
    """Return the singular form of word."""
    if not word:
        return word
    lower = word.lower()
    if lower in UNCOUNTABLES:
        return word
    irregulars = _irregulars()
    for singular, plural in irregulars.items():
        if lower == plural:
            return singular
    if lower in irregulars:
        return word
    if lower.endswith(tuple(ending + "es" for ending in _SINGULAR_S_ENDINGS)):
        return word[:-2]
    if _SIS_PLURAL.search(lower):
        return word[:-2] + "is"
    if lower.endswith(_SINGULAR_S_ENDINGS) or lower.endswith("sis"):
        return word
    if lower.endswith("ies") and len(lower) > 3:
        return word[:-3] + "y"
    if lower.endswith(tuple(ending + "es" for ending in _SIBILANT_ENDINGS)):
        return word[:-2]
    if lower.endswith("ss"):
        return word
    if lower.endswith("s"):
        return word[:-1]
    return word


def underscore(word: str) -> str:
    """Convert CamelCase, dashed or spaced names to snake_case."""
    word = _CAMEL_BOUNDARY.sub("_", word)
    return re.sub(r"[-\s]+", "_", word).lower()


def resources_name(resource_kind: str) -> str:
    """Normalized plural name of a resource kind ("Notification" -> "notifications")."""
    return underscore(pluralize(str(resource_kind)))


def controller_name(resources: str, with_devise: str | None = None) -> str:
    """
    Default controller name for a resource family.

    The "_with_devise" variant is selected solely by the presence of an
    authentication resource name.
    """
    suffix = "_with_devise" if with_devise else ""
    return f"{CONTROLLER_NAMESPACE}/{resources}{suffix}"

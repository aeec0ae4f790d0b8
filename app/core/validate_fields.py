"""Field Validation: pure predicates applied to PageInput before anything is persisted.

Invariants:
    - Every function here is PURE: no IO, no clock, no randomness
    - validate_page_input checks title → website → twitter → github → facebook → instagram
      and raises on the FIRST failure (fail fast, field-specific message)
    - Empty website / handles are always valid (fields are optional)
    - Accepted handles are returned unchanged (byte-identical), never lower-cased

Design Decisions:
    - Handle alphabets include digits; HANDLE_ALPHABETS_LETTERS_ONLY keeps the
      letters-plus-symbol table around so the alternative is explicit and tested
    - Website must be an absolute URL with scheme and host; its normalised form
      (urlunsplit of the parsed parts) replaces the submitted value
"""

import re
import string
import unicodedata
from urllib.parse import urlsplit, urlunsplit

from app.core.domain_types import SocialNetwork
from app.core.errors import FieldValidationError
from app.core.page import PageInput


_LETTERS = frozenset(string.ascii_lowercase)
_DIGITS = frozenset(string.digits)

_HANDLE_SYMBOLS: dict[SocialNetwork, frozenset[str]] = {
    SocialNetwork.TWITTER: frozenset("_"),
    SocialNetwork.GITHUB: frozenset("-"),
    SocialNetwork.FACEBOOK: frozenset("."),
    SocialNetwork.INSTAGRAM: frozenset(),
}

HANDLE_ALPHABETS: dict[SocialNetwork, frozenset[str]] = {
    network: _LETTERS | _DIGITS | symbols
    for network, symbols in _HANDLE_SYMBOLS.items()
}

HANDLE_ALPHABETS_LETTERS_ONLY: dict[SocialNetwork, frozenset[str]] = {
    network: _LETTERS | symbols
    for network, symbols in _HANDLE_SYMBOLS.items()
}

HANDLE_ERROR_MESSAGES: dict[SocialNetwork, str] = {
    SocialNetwork.TWITTER: (
        "Invalid Twitter Handle. Only letters, numbers, and underscore allowed."
    ),
    SocialNetwork.GITHUB: (
        "Invalid GitHub Handle. Only letters, numbers, and dash allowed."
    ),
    SocialNetwork.FACEBOOK: (
        "Invalid Facebook Handle. Only letters, numbers, and dot allowed."
    ),
    SocialNetwork.INSTAGRAM: (
        "Invalid Instagram Handle. Only letters and numbers allowed."
    ),
}

TITLE_ERROR_MESSAGE = "Provide a title"
WEBSITE_ERROR_MESSAGE = "Invalid website URL"

_NON_SLUG_CHARS = re.compile(r"[^\w\s-]")
_SLUG_SEPARATORS = re.compile(r"[\s_-]+")
_URL_FORBIDDEN = re.compile(r"[\s\x00-\x1f\x7f]")


# ─── Slug ────────────────────────────────────────────────────────

def slugify(title: str) -> str:
    """URL-safe slug: ASCII-folded, lower-case, punctuation dropped, words joined by "-".

    Returns "" when nothing sluggable remains (e.g. "", "   ", "!!!").
    """
    folded = unicodedata.normalize("NFKD", title or "")
    folded = folded.encode("ascii", "ignore").decode("ascii").lower()
    folded = _NON_SLUG_CHARS.sub("", folded)
    return _SLUG_SEPARATORS.sub("-", folded).strip("-")


# ─── Website ─────────────────────────────────────────────────────

def validate_url(website: str) -> tuple[str, bool]:
    """Return (normalized, ok). Empty input is valid and stays empty."""
    if not website:
        return website, True
    if _URL_FORBIDDEN.search(website):
        return website, False
    try:
        parts = urlsplit(website)
        parts.port  # raises ValueError on a non-numeric or out-of-range port
    except ValueError:
        return website, False
    if not parts.scheme or not parts.hostname:
        return website, False
    return urlunsplit(parts), True


# ─── Social handles ──────────────────────────────────────────────

def is_valid_handle(
    handle: str,
    network: SocialNetwork,
    alphabets: dict[SocialNetwork, frozenset[str]] = HANDLE_ALPHABETS,
) -> bool:
    """Case-insensitive alphabet check. Empty handle is valid."""
    allowed = alphabets[network]
    return all(ch in allowed for ch in handle.lower())


def is_valid_twitter_handle(handle: str) -> bool:
    return is_valid_handle(handle, SocialNetwork.TWITTER)


def is_valid_github_handle(handle: str) -> bool:
    return is_valid_handle(handle, SocialNetwork.GITHUB)


def is_valid_facebook_handle(handle: str) -> bool:
    return is_valid_handle(handle, SocialNetwork.FACEBOOK)


def is_valid_instagram_handle(handle: str) -> bool:
    return is_valid_handle(handle, SocialNetwork.INSTAGRAM)


# ─── Whole input ─────────────────────────────────────────────────

def validate_page_input(data: PageInput) -> tuple[str, PageInput]:
    """Validate all fields in order. Returns (slug, input with normalised website).

    Raises FieldValidationError for the first failing field.
    """
    slug = slugify(data.title)
    if not slug:
        raise FieldValidationError(TITLE_ERROR_MESSAGE, "title")

    website, ok = validate_url(data.website)
    if not ok:
        raise FieldValidationError(WEBSITE_ERROR_MESSAGE, "website")

    for network in SocialNetwork:
        handle = getattr(data, network.value)
        if not is_valid_handle(handle, network):
            raise FieldValidationError(
                HANDLE_ERROR_MESSAGES[network], network.value,
            )

    return slug, data.model_copy(update={"website": website})

"""
Input masks and slug generation for form fields.
All functions are pure and idempotent.
"""

import re
import unicodedata

from utils.constants import (
    LANDLINE_PHONE_DIGITS,
    MOBILE_PHONE_DIGITS,
    PHONE_AREA_DIGITS,
    POSTAL_CODE_DIGITS,
    POSTAL_CODE_PREFIX_DIGITS,
)

_NON_DIGITS = re.compile(r"[^0-9]")
_WHITESPACE_RUN = re.compile(r"\s+")
_NON_SLUG_CHARS = re.compile(r"[^a-zA-Z0-9_]")
_UNDERSCORE_RUN = re.compile(r"_+")


def digits_only(raw: str) -> str:
    """Strip everything except ASCII digits."""
    if not raw:
        return ""
    return _NON_DIGITS.sub("", str(raw))


def mask_postal_code(raw: str) -> str:
    """
    Format a CEP as NNNNN-NNN.

    Digits beyond the 8th are dropped. The hyphen appears once the
    5-digit prefix is complete, so partial input stays readable:

        >>> mask_postal_code("01001000")
        '01001-000'
        >>> mask_postal_code("0100")
        '0100'
        >>> mask_postal_code("01001")
        '01001-'
    """
    digits = digits_only(raw)[:POSTAL_CODE_DIGITS]
    if len(digits) < POSTAL_CODE_PREFIX_DIGITS:
        return digits
    return f"{digits[:POSTAL_CODE_PREFIX_DIGITS]}-{digits[POSTAL_CODE_PREFIX_DIGITS:]}"


def mask_phone(raw: str) -> str:
    """
    Format a Brazilian phone number.

    Up to 10 digits render as (DD) DDDD-DDDD (landline), 11 digits as
    (DD) DDDDD-DDDD (mobile). Incomplete input is masked as far as it goes.

        >>> mask_phone("11988887777")
        '(11) 98888-7777'
        >>> mask_phone("1133334444")
        '(11) 3333-4444'
        >>> mask_phone("113")
        '(11) 3'
    """
    digits = digits_only(raw)[:MOBILE_PHONE_DIGITS]
    if not digits:
        return ""

    area = digits[:PHONE_AREA_DIGITS]
    number = digits[PHONE_AREA_DIGITS:]
    if not number:
        return f"({area}"

    prefix_length = 5 if len(digits) > LANDLINE_PHONE_DIGITS else 4
    prefix, suffix = number[:prefix_length], number[prefix_length:]

    masked = f"({area}) {prefix}"
    if suffix:
        masked += f"-{suffix}"
    return masked


def generate_slug(name: str) -> str:
    """
    Derive a URL-safe slug from a business name.

    Accents are removed, whitespace and any other character outside
    [A-Za-z0-9_] become single underscores, and the result is trimmed
    of underscores and lowercased.

        >>> generate_slug("Clínica Saúde Total")
        'clinica_saude_total'
    """
    if not name:
        return ""

    decomposed = unicodedata.normalize("NFD", name)
    without_accents = "".join(ch for ch in decomposed if not unicodedata.combining(ch))

    slug = _WHITESPACE_RUN.sub("_", without_accents.strip())
    slug = _NON_SLUG_CHARS.sub("_", slug)
    slug = _UNDERSCORE_RUN.sub("_", slug)
    return slug.strip("_").lower()

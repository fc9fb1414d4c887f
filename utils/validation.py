"""
Validation rules gating form submission.
"""

from typing import Iterable, List, Optional

from models.professional import Professional
from utils.constants import (
    REGISTRATION_NUMBER_ERROR,
    REGISTRATION_NUMBER_MAX_LENGTH,
    REGISTRATION_NUMBER_MIN_LENGTH,
)
from utils.exceptions import ValidationError


def validate_registration_number(registration_number: str) -> bool:
    """
    Validate a professional registration number.

    Expects a digit-only string (non-digits are stripped on entry).

    Args:
        registration_number: Registration number digits

    Returns:
        True if its length is within [4, 10], False otherwise
    """
    if not isinstance(registration_number, str):
        return False
    return (
        REGISTRATION_NUMBER_MIN_LENGTH
        <= len(registration_number)
        <= REGISTRATION_NUMBER_MAX_LENGTH
    )


def registration_number_hint(registration_number: str) -> Optional[str]:
    """
    Advisory message shown next to the field while typing.

    Empty input gets no hint; it is checked only at submit time.
    """
    if not registration_number or validate_registration_number(registration_number):
        return None
    return REGISTRATION_NUMBER_ERROR


def find_invalid_professionals(professionals: Iterable[Professional]) -> List[str]:
    """Return ids of named professionals whose registration number is invalid."""
    return [
        professional.id
        for professional in professionals
        if not professional.is_draft()
        and not validate_registration_number(professional.registration_number)
    ]


def validate_submission(professionals: Iterable[Professional]) -> None:
    """
    Submit-time gate over the whole form.

    Drafts (professionals without a name) are skipped. Any invalid row
    blocks the whole submission with a single aggregate error.

    Raises:
        ValidationError: If at least one named professional is invalid
    """
    invalid_ids = find_invalid_professionals(professionals)
    if invalid_ids:
        raise ValidationError(REGISTRATION_NUMBER_ERROR, professional_ids=invalid_ids)

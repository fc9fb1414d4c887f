"""
Unit tests for submission validation rules.
"""

import pytest

from models.professional import Professional
from utils.constants import REGISTRATION_NUMBER_ERROR
from utils.exceptions import ValidationError
from utils.validation import (
    find_invalid_professionals,
    registration_number_hint,
    validate_registration_number,
    validate_submission,
)


@pytest.mark.parametrize("length", [4, 5, 6, 7, 8, 9, 10])
def test_registration_number_valid_lengths(length):
    assert validate_registration_number("1" * length) is True


@pytest.mark.parametrize("length", [0, 1, 2, 3, 11, 12, 20])
def test_registration_number_invalid_lengths(length):
    assert validate_registration_number("1" * length) is False


def test_registration_number_hint():
    """Advisory hint only for non-empty invalid input."""
    assert registration_number_hint("") is None
    assert registration_number_hint("123") == REGISTRATION_NUMBER_ERROR
    assert registration_number_hint("1234") is None


class TestValidateSubmission:
    """Test the submit-time gate."""

    def test_drafts_are_skipped(self):
        professionals = [
            Professional(id="1", professional_name="", registration_number="1"),
            Professional(id="2", professional_name="   ", registration_number=""),
        ]
        validate_submission(professionals)

    def test_valid_professional_passes(self):
        professionals = [
            Professional(id="1", professional_name="Dr. João Silva", registration_number="123456"),
        ]
        validate_submission(professionals)

    def test_single_aggregate_error(self):
        professionals = [
            Professional(id="1", professional_name="Ana", registration_number="123"),
            Professional(id="2", professional_name="Bruno", registration_number="12345"),
            Professional(id="3", professional_name="Carla", registration_number=""),
        ]

        with pytest.raises(ValidationError) as exc_info:
            validate_submission(professionals)

        assert exc_info.value.message == REGISTRATION_NUMBER_ERROR
        assert exc_info.value.professional_ids == ["1", "3"]

    def test_find_invalid_professionals_empty(self):
        assert find_invalid_professionals([]) == []

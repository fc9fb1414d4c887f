"""
Custom exception classes for better error handling.
Provides specific error types instead of generic exceptions.
"""

from typing import Sequence


class OnboardingError(Exception):
    """Base exception for onboarding form operations."""

    pass


class ValidationError(OnboardingError):
    """
    Raised when the submit-time gate rejects the form.

    One aggregate error is raised no matter how many rows are invalid;
    `professional_ids` lists every offending row.
    """

    def __init__(self, message: str, professional_ids: Sequence[str] = ()):
        super().__init__(message)
        self.message = message
        self.professional_ids = list(professional_ids)


class LookupFailure(OnboardingError):
    """Raised when the address service cannot be reached or answers garbage."""

    pass


class SubmissionTransportError(OnboardingError):
    """Raised when posting the payload to the intake endpoint fails."""

    pass

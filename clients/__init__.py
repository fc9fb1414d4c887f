"""HTTP clients for the two network boundaries: address lookup and intake."""

from .intake import IntakeClient
from .viacep import AddressResolver

__all__ = ["AddressResolver", "IntakeClient"]

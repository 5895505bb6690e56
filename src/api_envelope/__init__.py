"""
api-envelope — typed API response envelopes for Python.

Parses already-decoded JSON responses of the form
``{"data", "pagination", "createdAt", "updatedAt"}`` into immutable models,
generically over the payload type.
"""

from api_envelope.codec.envelope import dump_envelope, parse_envelope, parse_envelope_list
from api_envelope.errors import EnvelopeError, FormatError, MissingFieldError, TypeMismatchError
from api_envelope.models.envelope import Envelope
from api_envelope.models.pagination import PaginationInfo
from api_envelope.models.user import User

__version__ = "0.1.0"
__all__ = [
    "Envelope",
    "PaginationInfo",
    "User",
    "parse_envelope",
    "parse_envelope_list",
    "dump_envelope",
    "EnvelopeError",
    "MissingFieldError",
    "TypeMismatchError",
    "FormatError",
]

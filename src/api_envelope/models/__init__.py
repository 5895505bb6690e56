from api_envelope.models.envelope import Envelope
from api_envelope.models.pagination import PaginationInfo
from api_envelope.models.user import User

__all__ = ["Envelope", "PaginationInfo", "User"]

from .exceptions import (
    ErrorCode, WardError, SerializationError, TransportError,
    DeserializationError, EmptyResultError
)
from .settings import WardSettings, get_ward_settings

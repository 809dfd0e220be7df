"""QDM Core - configuration and error types."""

from qdm.core.config import get_config, QDMConfig
from qdm.core.errors import (
    QDMError,
    LengthMismatchError,
    EmptyInputError,
    check_same_length,
    check_not_empty,
)

__all__ = [
    'get_config',
    'QDMConfig',
    'QDMError',
    'LengthMismatchError',
    'EmptyInputError',
    'check_same_length',
    'check_not_empty',
]

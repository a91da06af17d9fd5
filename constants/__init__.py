from constants.auth import (
    TOKEN_EXPIRY_CLAIM,
    TOKEN_ISSUED_AT_CLAIM,
    TOKEN_SUBJECT_CLAIM,
)
from constants.encoding import UTF8
from constants.summary import MAX_WORD_LIMIT, STATUS_MESSAGE

__all__ = [
    "UTF8",
    "MAX_WORD_LIMIT",
    "STATUS_MESSAGE",
    "TOKEN_SUBJECT_CLAIM",
    "TOKEN_EXPIRY_CLAIM",
    "TOKEN_ISSUED_AT_CLAIM",
]

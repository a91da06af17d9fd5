from utils.crypto import hash_password, verify_password
from utils.files import transient_file
from utils.tokens import create_access_token, decode_access_token
from utils.words import check_word_limit, count_words, fits_word_limit

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
    "transient_file",
    "count_words",
    "fits_word_limit",
    "check_word_limit",
]

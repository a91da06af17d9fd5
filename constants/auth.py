TOKEN_SUBJECT_CLAIM = "sub"
TOKEN_EXPIRY_CLAIM = "exp"
TOKEN_ISSUED_AT_CLAIM = "iat"

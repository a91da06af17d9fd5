MAX_WORD_LIMIT = 800
STATUS_MESSAGE = "API is operational"

from enum import Enum, auto


class DictionaryErrorCode(Enum):
    FILE_NOT_FOUND = auto()
    INVALID_FORMAT = auto()


class DictionaryError(Exception):
    def __init__(self, code: DictionaryErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

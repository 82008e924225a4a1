class StreamCodeError(Exception):
    pass


class CodeSpaceExhausted(StreamCodeError):
    def __init__(self, attempts: int):
        super().__init__(f"Failed to generate a unique stream code after {attempts} attempts")
        self.attempts = attempts


class StorageError(StreamCodeError):
    pass


class CodeConflict(StreamCodeError):
    """Raised by a store when an insert hits a code that is already taken."""

    def __init__(self, code: str):
        super().__init__(f"Stream code {code} is already taken")
        self.code = code

class DebugError(Exception):
    pass

class InvalidFormatterError(DebugError):
    def __init__(self, letter: str, reason: str):
        self.letter = letter
        super().__init__(f"Cannot register formatter '%{letter}': {reason}")

# tachsim/exceptions.py

class TachometerError(Exception):
    """Base exception for all tachometer simulator errors"""
    pass

class SinkUnavailableError(TachometerError):
    """Output sink could not be opened or created"""
    def __init__(self, path, message="Failed to open"):
        self.path = path
        super().__init__(f"{message} {path}")

class InvalidReadingError(TachometerError, ValueError):
    """Angular speed reading is NaN or infinite"""
    def __init__(self, value, message="Non-finite angular speed"):
        self.value = value
        super().__init__(f"{message}: {value!r} rad/s")

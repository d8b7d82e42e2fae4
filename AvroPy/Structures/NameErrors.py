from typing import Any

# When set, validation messages include the rejected candidate
should_print_candidates = True

class NamingError(Exception):
    def __init__(self, reason : str, message : str | None = None):
        self.reason = reason
        self.message = message if message is not None else reason
        super().__init__(self.message)

class InvalidNameError(NamingError):
    prefix = "The name portion of a fullname, record field names, and enum symbols must "

    def __init__(self, reason : str, candidate : str):
        self.candidate = candidate
        if should_print_candidates:
            super().__init__(reason, f"{self.prefix}{reason}: {candidate!r}")
        else:
            super().__init__(reason, self.prefix + reason)

class SchemaFieldError(NamingError):
    def __init__(self, reason : str, got : Any):
        super().__init__(reason, f"{reason}: {type(got).__name__}")

class DuplicateNameError(NamingError):
    def __init__(self, qualified : str):
        super().__init__("ought to be unique", f"Name {qualified} already registered")

class UnknownNameError(NamingError):
    def __init__(self, qualified : str):
        super().__init__("ought to be registered", f"Name {qualified} not registered")

__all__ = ['NamingError', 'InvalidNameError', 'SchemaFieldError', 'DuplicateNameError', 'UnknownNameError']

# solkit/core/exceptions.py

class SolkitException(Exception):
    """Base class for custom exceptions in this package."""
    pass

class SeedEncodingError(SolkitException):
    """For seed values that cannot be encoded for address derivation."""
    pass

class OutOfRangeError(SeedEncodingError):
    """Bounded integer seed outside 0..2**32-1."""
    pass

class NegativeNotSupportedError(SeedEncodingError):
    """Large integer seed below zero."""
    pass

class TooLargeError(SeedEncodingError):
    """Large integer seed above 2**64-1."""
    pass

class SeedTooLongError(SeedEncodingError):
    """An encoded seed exceeds the runtime's per-seed maximum."""
    pass

class TooManySeedsError(SeedEncodingError):
    """More seeds than the runtime accepts for one derivation."""
    pass

class InvalidAddressError(SolkitException, ValueError):
    """For strings or byte values that are not valid 32-byte addresses."""
    pass

class LogSourceError(SolkitException):
    """For log input that cannot be read or parsed by the CLI."""
    pass

class OrfoError(Exception):
    """Base class for errors raised by the spelling and transliteration core."""


class InvalidInput(OrfoError, ValueError):
    """Text was empty, not a string, or larger than the configured bound."""


class DictionaryUnavailable(OrfoError, RuntimeError):
    """No dictionary snapshot has ever been loaded, so there is nothing to serve."""

"""Exception types raised by hunt.

Text processing never raises; the only failures are configuration errors
surfaced at setup time.
"""


class HuntError(Exception):
    """Base class for hunt errors"""


class ConfigurationError(HuntError, ValueError):
    """Invalid configuration value (unknown transliteration option, stemmer, etc.)"""

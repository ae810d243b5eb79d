# app/errors.py


class TypedrillError(Exception):
    """Base class for errors raised by typedrill itself."""


class ConfigError(TypedrillError):
    pass


class DatabaseError(TypedrillError):
    pass


class WordlistError(TypedrillError):
    pass

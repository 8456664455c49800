# app/errors.py
class TypemasterError(Exception):
    """Base class for every error raised by the typing engine."""


class CorpusError(TypemasterError):
    pass


class CorpusUnavailable(CorpusError):
    """The word source could not be read."""


class EmptyCorpus(CorpusError):
    """The word source was readable but held no words."""


class ConfigError(TypemasterError, ValueError):
    pass

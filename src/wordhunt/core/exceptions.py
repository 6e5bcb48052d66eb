"""Exception hierarchy for puzzle generation."""


class WordHuntError(Exception):
    """Base exception for generator failures."""


class ConfigError(WordHuntError):
    """Raised when the generator configuration is invalid."""


class VocabularyError(WordHuntError):
    """Raised when a vocabulary file cannot be read or is too short."""


class NotEnoughWordsError(ConfigError):
    """Raised when too few words survive the length filter."""


class RenderError(WordHuntError):
    """Raised when the puzzle image cannot be written."""

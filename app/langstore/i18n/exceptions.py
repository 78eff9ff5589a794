"""Custom exceptions for the translation system.

Missing keys and missing data sources are not errors; these exceptions cover
data that cannot be used at all.
"""


class LangError(Exception):
    """Base exception for all translation errors.

    Example:
        try:
            store.get("common.greeting", ["Ada"])
        except LangError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class TranslationSourceError(LangError):
    """Raised when a data source exists but cannot be read or parsed."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class InvalidTranslationSourceError(TranslationSourceError):
    """Raised when a parsed data source is not a nested string mapping.

    Example:
        >>> loader.load(Path("lang/en/broken.yml"))  # top level is a list
        Traceback (most recent call last):
        ...
        InvalidTranslationSourceError: Expected a mapping at the top level of lang/en/broken.yml
    """

    pass


class MessageFormatError(LangError):
    """Raised when a message template cannot be formatted with the given params."""

    pass

"""Translation store settings."""

from typing import Literal, Optional

from pydantic import Field, field_validator

from langstore.configuration.base import InfrastructureSettings


class LangSettings(InfrastructureSettings):
    """Translation lookup configuration.

    Environment Variables:
        LANG_DEFAULT_LOCALE: Fallback locale when no current locale is set
            (default: platform locale)
        LANG_LOCALE: Initial current locale (default: unset, uses the default)
        LANG_PATHS: JSON list of search directories, in merge order
        LANG_FORMAT: Data source format - 'yaml' or 'json' (default: yaml)
        LANG_INVALIDATE_ON_PATH_CHANGE: Evict cached namespaces whenever a
            search path is added or removed (default: False)

    Directory Layout:
        Each search path holds one directory per locale tag, and one file per
        namespace inside it:

            <path>/en/common.yml
            <path>/en_au/common.yml

    Example:
        ```python
        from langstore.services import get_settings

        settings = get_settings()

        for path in settings.lang.PATHS:
            ...
        ```
    """

    DEFAULT_LOCALE: Optional[str] = Field(
        default=None,
        alias="LANG_DEFAULT_LOCALE",
        description="Fallback locale when no current locale is set",
    )
    LOCALE: Optional[str] = Field(
        default=None,
        alias="LANG_LOCALE",
        description="Initial current locale",
    )
    PATHS: list[str] = Field(
        default_factory=list,
        alias="LANG_PATHS",
        description="Translation search directories, in merge order",
    )
    FORMAT: Literal["yaml", "json"] = Field(
        default="yaml",
        alias="LANG_FORMAT",
        description="Data source file format",
    )
    INVALIDATE_ON_PATH_CHANGE: bool = Field(
        default=False,
        alias="LANG_INVALIDATE_ON_PATH_CHANGE",
        description="Clear cached namespaces when search paths change",
    )

    @field_validator("DEFAULT_LOCALE", "LOCALE", mode="before")
    @classmethod
    def _blank_locale_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

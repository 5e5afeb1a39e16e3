"""Language discovery for the settings record."""

from pawsettings.i18n.locale import (
    DEFAULT_LANGUAGES,
    LanguageOption,
    LocaleResolver,
    StaticLocaleResolver,
    SystemLocaleResolver,
    resolve_language,
)

__all__ = [
    "DEFAULT_LANGUAGES",
    "LanguageOption",
    "LocaleResolver",
    "StaticLocaleResolver",
    "SystemLocaleResolver",
    "resolve_language",
]

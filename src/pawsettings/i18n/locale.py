"""Locale discovery used to pick a language on first start."""

from __future__ import annotations

import locale
import logging
import os
from collections.abc import Mapping, Sequence
from typing import Final, Protocol, runtime_checkable

from typing_extensions import TypedDict

logger: Final = logging.getLogger(__name__)

# Environment variables consulted for the user's locale, highest priority first
LOCALE_ENV_VARS: Final = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")


class LanguageOption(TypedDict, total=False):
    """A language the client ships translations for."""

    id: str
    label: str


DEFAULT_LANGUAGES: Final[tuple[LanguageOption, ...]] = (
    {"id": "en", "label": "English"},
    {"id": "de", "label": "Deutsch"},
    {"id": "es", "label": "Español"},
    {"id": "fr", "label": "Français"},
    {"id": "it", "label": "Italiano"},
    {"id": "nl", "label": "Nederlands"},
    {"id": "pt-BR", "label": "Português (Brasil)"},
    {"id": "ru", "label": "Русский"},
    {"id": "zh-CN", "label": "中文 (简体)"},
)


@runtime_checkable
class LocaleResolver(Protocol):
    """Protocol for the source of language preferences."""

    def available_languages(self) -> Sequence[LanguageOption]:
        """Languages with translations, in display order."""
        ...

    def browser_culture_language(self) -> str:
        """Full culture tag of the user's environment, e.g. ``en-US``."""
        ...

    def browser_language(self) -> str:
        """Coarse language tag of the user's environment, e.g. ``en``."""
        ...

    def default_language(self) -> str:
        """Language to use when nothing else matches."""
        ...


def normalize_locale_tag(raw: str) -> str:
    """Turn a POSIX locale name into a culture tag.

    ``en_US.UTF-8`` and ``en_US@euro`` both become ``en-US``; ``C`` and
    ``POSIX`` become an empty string.
    """
    tag = raw.split(".", 1)[0].split("@", 1)[0].split(":", 1)[0].strip()
    if tag in ("", "C", "POSIX"):
        return ""
    return tag.replace("_", "-")


class SystemLocaleResolver:
    """Resolve languages from the process environment.

    The culture tag comes from the usual locale environment variables,
    falling back to the interpreter's current locale.
    """

    def __init__(
        self,
        languages: Sequence[LanguageOption] = DEFAULT_LANGUAGES,
        default: str = "en",
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._languages = tuple(languages)
        self._default = default
        self._environ = os.environ if environ is None else environ

    def available_languages(self) -> Sequence[LanguageOption]:
        return self._languages

    def browser_culture_language(self) -> str:
        for var in LOCALE_ENV_VARS:
            tag = normalize_locale_tag(self._environ.get(var, ""))
            if tag:
                return tag
        current = locale.getlocale()[0]
        return normalize_locale_tag(current or "")

    def browser_language(self) -> str:
        return self.browser_culture_language().split("-", 1)[0]

    def default_language(self) -> str:
        return self._default


class StaticLocaleResolver:
    """LocaleResolver with fixed answers, for tests and headless use."""

    def __init__(
        self,
        languages: Sequence[LanguageOption] = DEFAULT_LANGUAGES,
        culture: str = "",
        default: str = "en",
    ) -> None:
        self._languages = tuple(languages)
        self._culture = culture
        self._default = default

    def available_languages(self) -> Sequence[LanguageOption]:
        return self._languages

    def browser_culture_language(self) -> str:
        return self._culture

    def browser_language(self) -> str:
        return self._culture.split("-", 1)[0]

    def default_language(self) -> str:
        return self._default


def resolve_language(resolver: LocaleResolver) -> str:
    """Pick a language: exact culture, then coarse language, then default.

    Args:
        resolver: Source of available and preferred languages

    Returns:
        A language identifier
    """
    available = {lang.get("id") for lang in resolver.available_languages()}
    culture = resolver.browser_culture_language()
    coarse = resolver.browser_language()

    if culture and culture in available:
        language = culture
    elif coarse and coarse in available:
        language = coarse
    else:
        language = resolver.default_language()

    logger.info(
        "No language configured, setting to %s (culture %r, language %r)",
        language,
        culture,
        coarse,
    )
    return language

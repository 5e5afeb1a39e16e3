import pytest

from pawsettings.i18n.locale import (
    LanguageOption,
    LocaleResolver,
    StaticLocaleResolver,
    SystemLocaleResolver,
    normalize_locale_tag,
    resolve_language,
)

LANGS: list[LanguageOption] = [{"id": "en"}, {"id": "de"}, {"id": "pt-BR"}]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("en_US.UTF-8", "en-US"),
        ("de_DE@euro", "de-DE"),
        ("fr", "fr"),
        ("C", ""),
        ("POSIX", ""),
        ("", ""),
        ("pt_BR:pt:en", "pt-BR"),
    ],
)
def test_normalize_locale_tag(raw: str, expected: str) -> None:
    assert normalize_locale_tag(raw) == expected


def test_resolvers_satisfy_protocol() -> None:
    assert isinstance(StaticLocaleResolver(), LocaleResolver)
    assert isinstance(SystemLocaleResolver(environ={}), LocaleResolver)


def test_system_resolver_reads_environment_priority() -> None:
    resolver = SystemLocaleResolver(LANGS, environ={"LANG": "en_GB.UTF-8", "LC_ALL": "pt_BR.UTF-8"})
    assert resolver.browser_culture_language() == "pt-BR"
    assert resolver.browser_language() == "pt"


def test_system_resolver_skips_c_locale() -> None:
    resolver = SystemLocaleResolver(LANGS, environ={"LC_ALL": "C", "LANG": "de_AT.UTF-8"})
    assert resolver.browser_culture_language() == "de-AT"


@pytest.mark.parametrize(
    "culture, expected",
    [
        ("pt-BR", "pt-BR"),  # exact culture match
        ("de-CH", "de"),  # coarse language match
        ("ja-JP", "en"),  # resolver default
        ("", "en"),
    ],
)
def test_three_tier_fallback(culture: str, expected: str) -> None:
    resolver = StaticLocaleResolver(LANGS, culture=culture, default="en")
    assert resolve_language(resolver) == expected


def test_default_language_is_configurable() -> None:
    resolver = SystemLocaleResolver(LANGS, default="de", environ={"LANG": "ja_JP.UTF-8"})
    assert resolve_language(resolver) == "de"

"""Locale -> OpenWeatherMap ``lang`` parameter."""

from __future__ import annotations

DEFAULT_LANGUAGE = "en"

# (locale prefix, provider language code). Matched with str.startswith.
LANGUAGE_CODE_MAPPING: tuple[tuple[str, str], ...] = (
    ("bg-", "bg"),
    ("de-", "de"),
    ("es-", "sp"),
    ("fi-", "fi"),
    ("fr-", "fr"),
    ("it-", "it"),
    ("nl-", "nl"),
    ("pl-", "pl"),
    ("pt-", "pt"),
    ("ro-", "ro"),
    ("ru-", "ru"),
    ("se-", "se"),
    ("tr-", "tr"),
    ("uk-", "ua"),
    ("zh-CN", "zh_cn"),
    ("zh-TW", "zh_tw"),
)


def locale_selector(locale: str) -> str:
    """Reduce a locale tag to ``language-COUNTRY`` (``zh-Hans-CN`` -> ``zh-CN``)."""
    parts = locale.replace("_", "-").split("-")
    country = next((part for part in parts[1:] if _is_region(part)), "")
    return f"{parts[0].lower()}-{country.upper()}"


def _is_region(part: str) -> bool:
    return (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit())


def resolve_language(locale: str | None) -> str:
    """Map a locale (``de-DE``, ``de_DE``, ``zh-Hans-CN``) to a provider language."""
    if not locale:
        return DEFAULT_LANGUAGE
    selector = locale_selector(locale)
    for prefix, code in LANGUAGE_CODE_MAPPING:
        if selector.startswith(prefix):
            return code
    return DEFAULT_LANGUAGE

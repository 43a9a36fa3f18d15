"""Internationalization support for the hand evaluator.

Usage:
    from mahhack.ui.i18n import t, set_language, translate_yaku

    set_language("en")              # Switch to English
    t("msg.tsumo_win")              # -> "Tsumo!"
    t("label.points", points=8000)  # -> "8000 pts"
    translate_yaku("立直")           # -> "Riichi"
"""

from typing import Optional

SUPPORTED_LANGUAGES = ("ja", "en")


class I18n:
    """Singleton internationalization manager."""

    _lang: str = "ja"
    _translations: dict = {}
    _loaded: bool = False

    @classmethod
    def set_language(cls, lang: str):
        """Set the active language."""
        if lang not in SUPPORTED_LANGUAGES:
            raise ValueError(f"unsupported language: {lang!r}")
        cls._lang = lang
        cls._load_translations()

    @classmethod
    def _load_translations(cls):
        """Load translations for the current language."""
        if cls._lang == "en":
            from mahhack.ui.locales.en import TRANSLATIONS
        else:
            from mahhack.ui.locales.ja import TRANSLATIONS
        cls._translations = TRANSLATIONS
        cls._loaded = True

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Get a translated string by key, with optional format arguments."""
        if not cls._loaded:
            cls._load_translations()
        text = cls._translations.get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError):
                return text
        return text

    @classmethod
    def get_language(cls) -> str:
        """Get the current language code."""
        return cls._lang


def t(key: str, **kwargs) -> str:
    """Global translation function."""
    return I18n.get(key, **kwargs)


def set_language(lang: str):
    """Set the active language."""
    I18n.set_language(lang)


def get_language() -> str:
    """Get the current language code."""
    return I18n.get_language()


def translate_yaku(yaku_name: str) -> str:
    """Translate a yaku name from its Japanese key to the current language."""
    key = f"yaku.{yaku_name}"
    text = I18n.get(key)
    return yaku_name if text == key else text


def translate_limit(limit: Optional[str], han: int, fu: int) -> str:
    """Localized limit name, or 'N han M fu' below mangan."""
    if limit is None:
        return t("limit.none", han=han, fu=fu)
    # LimitTier members format as their qualified name, so use the value
    return t("limit." + getattr(limit, "value", limit))

"""Locale and cookie constants for the presentation layer."""

SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "ja", "zh-Hans", "zh-Hant", "es", "fr", "it", "ko", "th")
DEFAULT_LANGUAGE: str = "en"

# Shown on the language selection page, in display order.
SELECTABLE_LANGUAGES: tuple[tuple[str, str, str], ...] = (
    ("ja", "Japanese", "日本語"),
    ("en", "English", "English"),
    ("zh-Hans", "Chinese (Simplified)", "简体中文"),
    ("zh-Hant", "Chinese (Traditional)", "繁體中文"),
    ("ko", "Korean", "한국어"),
    ("th", "Thai", "ไทย"),
)

LANGUAGE_COOKIE: str = "selectedLanguage"
LANGUAGE_COOKIE_MAX_AGE: int = 30 * 24 * 60 * 60
SESSION_COOKIE: str = "trivia_session"

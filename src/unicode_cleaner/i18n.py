"""i18n — Russian UI strings and plural forms for Unicode Cleaner.

Usage::

    from unicode_cleaner.i18n import t, plural_invisible, clean_message

    # Simple lookup
    title = t("app.title")

    # With format kwargs
    label = t("counter.chars", n=42)       # → "42 символов"

    # Plural forms
    plural_invisible(3)                    # → "невидимых символа"
    clean_message(21)                      # → "Удален 21 невидимый символ. Текст скопирован!"

Only Russian is supported; the locale is fixed.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Russian string dictionary
# ---------------------------------------------------------------------------

RU: dict[str, str] = {
    # ------------------------------------------------------------------
    # Application
    # ------------------------------------------------------------------
    "app.title": "Unicode Cleaner",
    "app.subtitle": "Удаление невидимых символов из текста",
    "app.about.title": "Об этом инструменте",
    "app.about.body": (
        "Находит и удаляет невидимые символы Unicode (U+2028, U+2029 и др.), "
        "которые могут вызывать проблемы в тексте."
    ),

    # ------------------------------------------------------------------
    # Input / output panes
    # ------------------------------------------------------------------
    "input.label": "Вставьте ваш текст ниже",
    "input.placeholder": "Вставьте ваш текст сюда...",
    "output.label": "Очищенный текст",
    "output.placeholder": "Здесь появится очищенный текст...",
    "action.clean": "Очистить текст",
    "action.copy": "Копировать",
    "action.copy_output": "Копировать очищенный текст",

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------
    "counter.chars": "{n} символов",
    "counter.invisible": "{n} {noun}",

    # ------------------------------------------------------------------
    # Plural forms of "invisible character" and "removed"
    # ------------------------------------------------------------------
    "invisible.one": "невидимый символ",
    "invisible.few": "невидимых символа",
    "invisible.many": "невидимых символов",
    "removed.one": "Удален",
    "removed.other": "Удалено",

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    "clean.removed": "{verb} {n} {noun}. Текст скопирован!",
    "clean.none_found": "Невидимые символы не найдены. Текст скопирован!",
    "copy.error": "Ошибка копирования: {exc}",
    "copy.failed": "Не удалось скопировать текст в буфер обмена.",
    "clean.failed": "Не удалось очистить текст",

    # ------------------------------------------------------------------
    # HTTP errors (web/app.py)
    # ------------------------------------------------------------------
    "error.invalid_json": "Тело запроса должно быть объектом JSON.",
    "error.text_required": "Поле «text» обязательно и должно быть строкой.",
    "error.texts_required": "Поле «texts» обязательно и должно быть списком строк.",
    "error.too_long": "Текст превышает максимально допустимую длину ({limit} символов).",
}

# ---------------------------------------------------------------------------
# Active language (fixed)
# ---------------------------------------------------------------------------

_ACTIVE: dict[str, str] = RU


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def t(key: str, **kwargs: object) -> str:
    """Return the UI string for *key*, with optional format substitutions.

    If the key is not found, returns the key itself (fail-visible).
    """
    template = _ACTIVE.get(key, key)
    if kwargs:
        try:
            return template.format(**kwargs)
        except (KeyError, ValueError):
            return template
    return template


def plural_invisible(count: int) -> str:
    """Return the noun phrase "invisible character(s)" agreeing with *count*.

    Teens (11–19 modulo 100) take the plural form; otherwise the last digit
    decides: 1 → singular, 2–4 → "few", anything else → plural.
    """
    num = abs(count) % 100
    last_digit = num % 10

    if 10 < num < 20:
        return t("invisible.many")
    if last_digit == 1:
        return t("invisible.one")
    if 2 <= last_digit <= 4:
        return t("invisible.few")
    return t("invisible.many")


def removed_verb(count: int) -> str:
    """Return the past participle "removed" agreeing with *count*.

    Singular only when the number ends in 1 but is not 11 (modulo 100).
    This rule is deliberately separate from :func:`plural_invisible`.
    """
    num = abs(count) % 100
    last_digit = num % 10
    if last_digit == 1 and num != 11:
        return t("removed.one")
    return t("removed.other")


def invisible_label(count: int) -> str:
    """Live counter text, e.g. "3 невидимых символа"; empty when *count* is 0."""
    if count <= 0:
        return ""
    return t("counter.invisible", n=count, noun=plural_invisible(count))


def char_count_label(count: int) -> str:
    return t("counter.chars", n=count)


def clean_message(removed: int) -> str:
    """Notification shown after a clean-and-copy action."""
    if removed > 0:
        return t("clean.removed", verb=removed_verb(removed), n=removed, noun=plural_invisible(removed))
    return t("clean.none_found")

"""
Default locale resolvers.

Stored text is in the base language, with optional translations in
<field>_<lang> columns (title_en, name_ko, ...). These resolvers pick the
translation the locale asks for and fall back to the base field. Callers
with their own translation sources pass different functions in the
mapper deps instead.
"""

import json
from typing import Any, Optional

from ..common.constants import DEFAULT_LOCALE, TRANSLATED_LOCALES


def language_of(locale: Optional[str]) -> str:
    """
    Reduce a locale tag to its language.

    Example:
        >>> language_of('zh-TW')
        'zh'
    """
    if not locale:
        return DEFAULT_LOCALE
    return locale.replace('_', '-').split('-')[0].lower()


def get_localized_text(record: Any, field: str, locale: Optional[str]) -> Optional[str]:
    """
    Resolve one text field of a row for a locale.

    Args:
        record: Row model carrying `field` and optionally `field_<lang>`
        field: Base field name (e.g., 'title')
        locale: Requested locale

    Returns:
        Translation if present and non-empty, otherwise the base value
    """
    language = language_of(locale)
    if language != DEFAULT_LOCALE and language in TRANSLATED_LOCALES:
        translated = getattr(record, f'{field}_{language}', None)
        if translated:
            return translated
    return getattr(record, field, None)


def get_localized_title(product: Any, locale: str) -> str:
    return get_localized_text(product, 'title', locale) or product.title


def get_localized_description(product: Any, locale: str) -> Optional[str]:
    return get_localized_text(product, 'description', locale) or None


def get_localized_performer_name(performer: Any, locale: str) -> str:
    return get_localized_text(performer, 'name', locale) or ''


def get_localized_performer_bio(performer: Any, locale: str) -> Optional[str]:
    return get_localized_text(performer, 'bio', locale) or None


def get_localized_tag_name(tag: Any, locale: str) -> str:
    return get_localized_text(tag, 'name', locale) or ''


def get_localized_ai_review(ai_review: Optional[str], locale: str) -> Any:
    """
    Resolve a stored AI review.

    Reviews are stored as a JSON object keyed by language; plain text
    reviews predate translation and are returned as-is.

    Returns:
        Review for the locale (base language as fallback), or None
    """
    if not ai_review:
        return None
    try:
        parsed = json.loads(ai_review)
    except (json.JSONDecodeError, TypeError):
        return ai_review

    if not isinstance(parsed, dict):
        return ai_review
    return parsed.get(language_of(locale)) or parsed.get(DEFAULT_LOCALE)

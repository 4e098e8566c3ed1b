"""
Performer name filter.

Crawlers occasionally split cast lists in the wrong place and store the
fragments as performers. Such names are removed before display.
The blacklist and separator glyphs come from config/performer_filters.yaml.
"""

from functools import lru_cache
from typing import Any, Dict, List, Optional

from ..common.config_loader import load_performer_filters


@lru_cache(maxsize=1)
def _filters() -> Dict[str, List[str]]:
    return load_performer_filters()


def is_valid_performer_name(name: Optional[str], filters: Optional[Dict[str, List[str]]] = None) -> bool:
    """
    Check whether a resolved performer name is worth showing.

    Args:
        name: Locale-resolved performer name
        filters: Optional filters ({invalid_names, separators}). If None, loads from config.

    Returns:
        False for empty or single-character names, names containing a
        separator glyph, and blacklisted tokens
    """
    if not name or not isinstance(name, str):
        return False

    name = name.strip()
    if len(name) <= 1:
        return False

    if filters is None:
        filters = _filters()

    if any(separator in name for separator in filters.get('separators', [])):
        return False

    return name not in filters.get('invalid_names', [])


def is_valid_performer(performer: Any) -> bool:
    """Filter predicate for performer rows (anything with a `name`)."""
    return is_valid_performer_name(getattr(performer, 'name', None))

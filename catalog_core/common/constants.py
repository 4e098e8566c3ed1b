"""
Shared constants for the catalog core.

Values that several modules need and that should have a single source of truth.
Provider-specific data lives in config/*.yaml, not here.
"""

# Placeholder images used when no usable media URL survives normalization
PRODUCT_PLACEHOLDER = "https://placehold.co/400x520/052e16/ffffff?text=No+Image"
ACTRESS_PLACEHOLDER = "https://placehold.co/400x520/1f2937/ffffff?text=No+Image"

# Base language of every stored text field; translations are <field>_<lang>
DEFAULT_LOCALE = "ja"
TRANSLATED_LOCALES = ("en", "zh", "ko")

DEFAULT_CURRENCY = "JPY"

# A release counts as new for this many days after its release date
NEW_RELEASE_WINDOW_DAYS = 7

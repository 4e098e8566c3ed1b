"""
Media URL normalization.

Modules:
    image_urls - placeholder fallback, HTML-fragment recovery, full-size rewrites,
                 sub-provider detection
"""

from .image_urls import (
    build_rewrite_table,
    get_dti_service_from_url,
    get_fallback_image_url,
    get_full_size_image_url,
    is_dti_uncensored_site,
    is_placeholder_url,
    is_subscription_site,
    is_uncensored_thumbnail,
    normalize_image_url,
)

__all__ = [
    'normalize_image_url',
    'get_full_size_image_url',
    'get_fallback_image_url',
    'is_placeholder_url',
    'build_rewrite_table',
    'get_dti_service_from_url',
    'is_dti_uncensored_site',
    'is_uncensored_thumbnail',
    'is_subscription_site',
]

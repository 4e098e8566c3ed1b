"""
Actress Mapper

Maps a validated performer record to a CanonicalActress.
"""

from typing import List, Optional

from ..common.constants import ACTRESS_PLACEHOLDER, DEFAULT_LOCALE
from ..common.dates import to_iso_string
from ..media.image_urls import is_placeholder_url, normalize_image_url
from ..models import ActressMetrics, CanonicalActress, PerformerRecord
from .deps import ActressMapperDeps


def map_performer_to_actress_type_sync(
    performer: PerformerRecord,
    release_count: int,
    deps: Optional[ActressMapperDeps] = None,
    thumbnail_url: Optional[str] = None,
    services: Optional[List[str]] = None,
    aliases: Optional[List[str]] = None,
    locale: str = DEFAULT_LOCALE,
) -> CanonicalActress:
    """
    Map a performer record to a CanonicalActress.

    The profile image stored on the performer comes from a third-party
    site and is never used; the card image is a product thumbnail supplied
    by the caller, or the actress placeholder.

    Args:
        performer: Validated performer record
        release_count: Number of products featuring the performer
        deps: Locale and provider resolvers (defaults if None)
        thumbnail_url: Representative product thumbnail
        services: Free-form provider names the performer appears on
        aliases: Alternative names
        locale: Locale for text resolution

    Returns:
        CanonicalActress; aliases is None (absent from to_dict()) when empty
    """
    if deps is None:
        deps = ActressMapperDeps()

    image_url = normalize_image_url(thumbnail_url) if thumbnail_url else ACTRESS_PLACEHOLDER
    if is_placeholder_url(image_url):
        image_url = ACTRESS_PLACEHOLDER

    result = CanonicalActress(
        id=str(performer.id),
        name=deps.get_localized_performer_name(performer, locale),
        hero_image=image_url,
        thumbnail=image_url,
        metrics=ActressMetrics(release_count=release_count),
        services=deps.to_provider_ids(services or []),
        description=deps.get_localized_performer_bio(performer, locale) or None,
        aliases=list(aliases) if aliases else None,
        ai_review=deps.get_localized_ai_review(performer.ai_review, locale) or None,
    )

    if performer.ai_review_updated_at is not None:
        result.ai_review_updated_at = to_iso_string(performer.ai_review_updated_at)

    return result

"""
Product Mapper

Merges one validated product row with its relations into a CanonicalProduct.

Field resolution order:
- Title/description: deps locale resolvers (base language by default)
- Price/affiliate URL: cache, then source
- Primary image: default thumbnail -> cache thumbnail -> first "thumbnail"
  image -> first image -> placeholder
- Performers: locale-resolved, then filtered by deps.is_valid_performer_name
"""

import logging
import math
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence, Tuple

from ..common.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    NEW_RELEASE_WINDOW_DAYS,
    PRODUCT_PLACEHOLDER,
)
from ..common.dates import parse_date, to_iso_string
from ..media.image_urls import is_placeholder_url, normalize_image_url
from ..models import (
    CacheData,
    CanonicalProduct,
    ImageRow,
    PerformerRow,
    PerformerSummary,
    ProductRow,
    SaleRow,
    SampleVideo,
    SourceRow,
    TagRow,
    VideoRow,
)
from .deps import ProductMapperDeps

logger = logging.getLogger(__name__)

_SECONDS_PER_DAY = 24 * 60 * 60


def compute_release_flags(release_date: Optional[str], now: datetime) -> Tuple[bool, bool]:
    """
    Derive (is_new, is_future) from a release date.

    A release is future when it lies after `now`, and new when it is at
    most NEW_RELEASE_WINDOW_DAYS whole days in the past. The two are
    mutually exclusive. Missing or unparsable dates give (False, False).
    """
    released = parse_date(release_date)
    if released is None:
        return False, False

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff_days = math.floor((now - released).total_seconds() / _SECONDS_PER_DAY)
    if diff_days < 0:
        return False, True
    return diff_days <= NEW_RELEASE_WINDOW_DAYS, False


def first_usable_image(candidates: Iterable[Optional[str]]) -> Optional[str]:
    """Normalize candidates in order and return the first that is a real URL."""
    for candidate in candidates:
        if not candidate:
            continue
        normalized = normalize_image_url(candidate)
        if not is_placeholder_url(normalized):
            return normalized
    return None


def _image_candidates(
    product: ProductRow,
    cache: Optional[CacheData],
    images: Sequence[ImageRow],
) -> List[Optional[str]]:
    candidates = [
        product.default_thumbnail_url,
        cache.thumbnail_url if cache else None,
    ]
    if images:
        thumbnail = next((img for img in images if img.image_type == 'thumbnail'), None)
        if thumbnail is not None:
            candidates.append(thumbnail.image_url)
        candidates.append(images[0].image_url)
    return candidates


def _affiliate_url(source: Optional[SourceRow], cache: Optional[CacheData]) -> str:
    # HTML widget code is sometimes stored where the link should be
    candidates = [
        cache.affiliate_url if cache else None,
        source.affiliate_url if source else None,
    ]
    return next((url for url in candidates if url and url.startswith('http')), '')


def _sample_images(images: Sequence[ImageRow], cache: Optional[CacheData]) -> Optional[List[str]]:
    urls = [img.image_url for img in images] if images else list(cache.sample_images if cache else [])
    normalized = [normalize_image_url(url) for url in urls]
    usable = [url for url in normalized if not is_placeholder_url(url)]
    return usable or None


def _sample_videos(videos: Sequence[VideoRow]) -> Optional[List[SampleVideo]]:
    if not videos:
        return None
    return [
        SampleVideo(
            url=video.video_url,
            type=video.video_type or 'sample',
            quality=video.quality or None,
            duration=video.duration or None,
        )
        for video in videos
    ]


def map_performers(
    performers: Sequence[PerformerRow],
    deps: ProductMapperDeps,
    locale: str,
) -> List[PerformerSummary]:
    """Locale-resolve performer rows and drop names that fail the validity filter."""
    summaries = []
    for performer in performers:
        name = deps.get_localized_performer_name(performer, locale)
        if not name or not deps.is_valid_performer_name(name):
            continue
        summaries.append(PerformerSummary(id=str(performer.id), name=name))
    return summaries


def map_product_to_type(
    product: ProductRow,
    deps: Optional[ProductMapperDeps] = None,
    performers: Optional[Sequence[PerformerRow]] = None,
    tags: Optional[Sequence[TagRow]] = None,
    source: Optional[SourceRow] = None,
    cache: Optional[CacheData] = None,
    images: Optional[Sequence[ImageRow]] = None,
    videos: Optional[Sequence[VideoRow]] = None,
    locale: str = DEFAULT_LOCALE,
    sale: Optional[SaleRow] = None,
    *,
    now: Optional[datetime] = None,
) -> CanonicalProduct:
    """
    Map a validated product row to a CanonicalProduct.

    Args:
        product: Validated product row
        deps: Locale and provider resolvers (defaults if None)
        performers: Performer rows for the product
        tags: Tag rows for the product
        source: Primary provider listing
        cache: Denormalized listing cache (beats source for price and link)
        images: Image rows, in display order
        videos: Sample video rows
        locale: Locale for text resolution
        sale: Active sale
        now: Evaluation time for is_new/is_future (default: current UTC time)

    Returns:
        New CanonicalProduct; inputs are not modified
    """
    if deps is None:
        deps = ProductMapperDeps()
    if now is None:
        now = datetime.now(timezone.utc)

    performers = performers or []
    tags = tags or []
    images = images or []

    asp_name = source.asp_name if source and source.asp_name else deps.default_asp_name

    if cache and cache.price:
        price = cache.price
    else:
        price = (source.price if source else None) or 0

    image_url = first_usable_image(_image_candidates(product, cache, images))
    if image_url is None:
        logger.debug("Product %s has no usable image, using placeholder", product.id)
        image_url = PRODUCT_PLACEHOLDER

    performer_list = map_performers(performers, deps, locale)
    tag_names = [name for name in (deps.get_localized_tag_name(t, locale) for t in tags) if name]
    is_new, is_future = compute_release_flags(product.release_date, now)

    result = CanonicalProduct(
        id=str(product.id),
        title=deps.get_localized_title(product, locale),
        price=price,
        currency=(source.currency if source else None) or DEFAULT_CURRENCY,
        image_url=image_url,
        affiliate_url=_affiliate_url(source, cache),
        provider=deps.map_legacy_provider(asp_name),
        provider_label=deps.get_provider_label(asp_name),
        tags=tag_names,
        is_new=is_new,
        is_future=is_future,
        normalized_product_id=product.normalized_product_id or None,
        maker_product_code=product.maker_product_code or None,
        original_product_id=(source.original_product_id if source else None) or None,
        description=deps.get_localized_description(product, locale) or None,
        release_date=product.release_date or None,
        duration=product.duration or None,
        product_type=(source.product_type if source else None) or None,
        sample_images=_sample_images(images, cache),
        sample_videos=_sample_videos(videos or []),
        ai_review=product.ai_review or None,
    )

    if performer_list:
        result.performers = performer_list
        result.actress_id = performer_list[0].id
        result.actress_name = performer_list[0].name

    if sale is not None:
        result.regular_price = sale.regular_price or None
        result.sale_price = sale.sale_price or None
        result.discount = sale.discount_percent or None
        if sale.end_at is not None:
            result.sale_end_at = to_iso_string(sale.end_at)

    if product.ai_review_updated_at is not None:
        result.ai_review_updated_at = to_iso_string(product.ai_review_updated_at)

    return result

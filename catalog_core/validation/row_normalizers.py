"""
Row Normalizers

Turn raw result-set rows into the typed row models. One normalizer per row
kind; each reads every logical field through get_field(), so camelCase and
snake_case rows produce identical output.

Malformed rows are dropped or defaulted, malformed result sets become empty
lists. Nothing here raises.
"""

import logging
from typing import Any, Callable, List, Optional, TypeVar

from ..common.dates import parse_date
from ..models import (
    ImageRow,
    PerformerRecord,
    PerformerRow,
    ProductRow,
    SaleRow,
    SourceRow,
    TagRow,
    VideoRow,
)
from .type_guards import (
    extract_rows_array,
    get_field,
    is_integral,
    is_object,
    to_number,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')

_LOCALES = ('en', 'zh', 'ko')


# ── Field readers ───────────────────────────────────────────────────────────

def _str(row: Any, key: str) -> Optional[str]:
    value = get_field(row, key)
    return value if isinstance(value, str) else None


def _int(row: Any, key: str) -> Optional[int]:
    """Integer-valued numbers only; ids are never parsed from strings."""
    value = get_field(row, key)
    return int(value) if is_integral(value) else None


def _amount(row: Any, key: str) -> Optional[float]:
    """Prices and durations; numeric columns often come back as strings."""
    return to_number(get_field(row, key))


def _whole(row: Any, key: str) -> Optional[int]:
    value = _amount(row, key)
    return int(value) if value is not None else None


def _translations(row: Any, field: str) -> dict:
    """Read <field>_<lang> translations (fieldEn / field_en)."""
    return {
        f'{field}_{lang}': _str(row, f'{field}{lang.capitalize()}')
        for lang in _LOCALES
    }


def _normalize_all(
    rows: Any,
    normalize: Callable[[Any], Optional[T]],
    kind: str,
) -> List[T]:
    """Apply a single-row normalizer to a result set, dropping rejected rows."""
    result: List[T] = []
    dropped = 0
    for row in extract_rows_array(rows):
        normalized = normalize(row) if is_object(row) else None
        if normalized is None:
            dropped += 1
            continue
        result.append(normalized)
    if dropped:
        logger.debug("Dropped %d malformed %s row(s)", dropped, kind)
    return result


# ── Entity rows ─────────────────────────────────────────────────────────────

def to_product_row(row: Any) -> Optional[ProductRow]:
    """
    Validate a raw product row.

    Args:
        row: Raw mapping from storage or crawler output

    Returns:
        ProductRow, or None if the row has no numeric id or no string title
    """
    product_id = _int(row, 'id')
    title = _str(row, 'title')
    if product_id is None or title is None:
        return None

    release = get_field(row, 'releaseDate')
    if not isinstance(release, str):
        parsed = parse_date(release)
        release = parsed.date().isoformat() if parsed else None

    return ProductRow(
        id=product_id,
        title=title,
        normalized_product_id=_str(row, 'normalizedProductId'),
        maker_product_code=_str(row, 'makerProductCode'),
        release_date=release,
        description=_str(row, 'description'),
        duration=_whole(row, 'duration'),
        default_thumbnail_url=_str(row, 'defaultThumbnailUrl'),
        ai_review=_str(row, 'aiReview'),
        ai_review_updated_at=parse_date(get_field(row, 'aiReviewUpdatedAt')),
        **_translations(row, 'title'),
        **_translations(row, 'description'),
    )


def to_product_rows(rows: Any) -> List[ProductRow]:
    return _normalize_all(rows, to_product_row, 'product')


def to_performer_record(row: Any) -> Optional[PerformerRecord]:
    """
    Validate a raw performer row.

    Returns:
        PerformerRecord, or None if the row has no numeric id or no string name
    """
    performer_id = _int(row, 'id')
    name = _str(row, 'name')
    if performer_id is None or name is None:
        return None

    return PerformerRecord(
        id=performer_id,
        name=name,
        name_kana=_str(row, 'nameKana'),
        bio=_str(row, 'bio'),
        profile_image_url=_str(row, 'profileImageUrl'),
        ai_review=_str(row, 'aiReview'),
        ai_review_updated_at=parse_date(get_field(row, 'aiReviewUpdatedAt')),
        **_translations(row, 'name'),
        **_translations(row, 'bio'),
    )


# ── Relation rows ───────────────────────────────────────────────────────────

def _performer_row(row: Any) -> PerformerRow:
    return PerformerRow(
        id=_int(row, 'id') or 0,
        name=_str(row, 'name') or '',
        name_kana=_str(row, 'nameKana'),
        product_id=_int(row, 'productId'),
        **_translations(row, 'name'),
    )


def _tag_row(row: Any) -> TagRow:
    return TagRow(
        id=_int(row, 'id') or 0,
        name=_str(row, 'name') or '',
        category=_str(row, 'category'),
        product_id=_int(row, 'productId'),
        **_translations(row, 'name'),
    )


def _image_row(row: Any) -> Optional[ImageRow]:
    image_url = _str(row, 'imageUrl')
    if not image_url:
        return None
    return ImageRow(
        image_url=image_url,
        image_type=_str(row, 'imageType') or '',
        display_order=_int(row, 'displayOrder'),
        product_id=_int(row, 'productId'),
    )


def _video_row(row: Any) -> Optional[VideoRow]:
    video_url = _str(row, 'videoUrl')
    if not video_url:
        return None
    return VideoRow(
        video_url=video_url,
        video_type=_str(row, 'videoType'),
        quality=_str(row, 'quality'),
        duration=_whole(row, 'duration'),
        product_id=_int(row, 'productId'),
    )


def _sale_row(row: Any) -> SaleRow:
    return SaleRow(
        regular_price=_amount(row, 'regularPrice') or 0,
        sale_price=_amount(row, 'salePrice') or 0,
        discount_percent=_amount(row, 'discountPercent'),
        end_at=parse_date(get_field(row, 'endAt')),
        product_id=_int(row, 'productId'),
    )


def to_source_row(row: Any) -> Optional[SourceRow]:
    """
    Validate one provider listing.

    Returns:
        SourceRow, or None when row is not a mapping (no source selected)
    """
    if not is_object(row):
        return None
    return SourceRow(
        asp_name=_str(row, 'aspName') or '',
        original_product_id=_str(row, 'originalProductId'),
        affiliate_url=_str(row, 'affiliateUrl'),
        price=_amount(row, 'price'),
        currency=_str(row, 'currency'),
        product_type=_str(row, 'productType'),
        product_id=_int(row, 'productId'),
    )


def to_performer_rows(rows: Any) -> List[PerformerRow]:
    return _normalize_all(rows, _performer_row, 'performer')


def to_tag_rows(rows: Any) -> List[TagRow]:
    return _normalize_all(rows, _tag_row, 'tag')


def to_image_rows(rows: Any) -> List[ImageRow]:
    return _normalize_all(rows, _image_row, 'image')


def to_video_rows(rows: Any) -> List[VideoRow]:
    return _normalize_all(rows, _video_row, 'video')


def to_sale_rows(rows: Any) -> List[SaleRow]:
    return _normalize_all(rows, _sale_row, 'sale')


# ── Batch variants ──────────────────────────────────────────────────────────
# Batch rows are grouped by product afterwards, so a row without a numeric
# product id is dropped.

def _keyed(normalize: Callable[[Any], Optional[T]]) -> Callable[[Any], Optional[T]]:
    def normalize_keyed(row: Any) -> Optional[T]:
        if _int(row, 'productId') is None:
            return None
        return normalize(row)
    return normalize_keyed


def to_batch_performer_rows(rows: Any) -> List[PerformerRow]:
    return _normalize_all(rows, _keyed(_performer_row), 'batch performer')


def to_batch_tag_rows(rows: Any) -> List[TagRow]:
    return _normalize_all(rows, _keyed(_tag_row), 'batch tag')


def to_batch_image_rows(rows: Any) -> List[ImageRow]:
    return _normalize_all(rows, _keyed(_image_row), 'batch image')


def to_batch_video_rows(rows: Any) -> List[VideoRow]:
    return _normalize_all(rows, _keyed(_video_row), 'batch video')


def to_batch_sale_rows(rows: Any) -> List[SaleRow]:
    return _normalize_all(rows, _keyed(_sale_row), 'batch sale')


def to_batch_source_rows(rows: Any) -> List[SourceRow]:
    return _normalize_all(rows, _keyed(to_source_row), 'batch source')

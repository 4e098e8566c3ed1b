"""
Batch Builder

Groups the relation result sets of one product page into BatchRelatedData.
Raw result sets go through the batch row normalizers, so rows without a
product id and rows for products outside the page are dropped here.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional

from ..models import BatchRelatedData, ImageRow, SourceRow
from ..validation import (
    is_positive_integer,
    to_batch_image_rows,
    to_batch_performer_rows,
    to_batch_sale_rows,
    to_batch_source_rows,
    to_batch_tag_rows,
    to_batch_video_rows,
)

logger = logging.getLogger(__name__)


def _group(rows: Iterable[Any], product_ids: set) -> Dict[int, list]:
    grouped: Dict[int, list] = defaultdict(list)
    for row in rows:
        if row.product_id in product_ids:
            grouped[row.product_id].append(row)
    return dict(grouped)


def _display_order(image: ImageRow):
    # Unordered images go last, keeping their original order
    return (image.display_order is None, image.display_order or 0)


def build_batch_related_data(
    product_ids: Iterable[Any],
    performer_rows: Any = None,
    tag_rows: Any = None,
    image_rows: Any = None,
    video_rows: Any = None,
    sale_rows: Any = None,
    source_rows: Any = None,
    primary_sources: Optional[Dict[int, SourceRow]] = None,
) -> BatchRelatedData:
    """
    Build relation maps for a page of products.

    Args:
        product_ids: Ids of the products on the page
        performer_rows: Raw performer result set (rows carry productId)
        tag_rows: Raw tag result set
        image_rows: Raw image result set
        video_rows: Raw video result set
        sale_rows: Raw active-sale result set
        source_rows: Raw source result set, in preference order
        primary_sources: Primary source per product; defaults to the first
                         source row of each product

    Returns:
        BatchRelatedData with an entry only for products that have rows
    """
    ids = {pid for pid in (product_ids or []) if is_positive_integer(pid)}

    images_map = _group(to_batch_image_rows(image_rows), ids)
    for images in images_map.values():
        images.sort(key=_display_order)

    sales_map = {}
    for sale in to_batch_sale_rows(sale_rows):
        if sale.product_id in ids:
            sales_map.setdefault(sale.product_id, sale)

    all_sources_map: Dict[int, List[SourceRow]] = _group(to_batch_source_rows(source_rows), ids)
    if primary_sources is None:
        sources_map = {pid: sources[0] for pid, sources in all_sources_map.items()}
    else:
        sources_map = {pid: src for pid, src in primary_sources.items() if pid in ids}

    batch = BatchRelatedData(
        performers_map=_group(to_batch_performer_rows(performer_rows), ids),
        tags_map=_group(to_batch_tag_rows(tag_rows), ids),
        images_map=images_map,
        videos_map=_group(to_batch_video_rows(video_rows), ids),
        sales_map=sales_map,
        sources_map=sources_map,
        all_sources_map=all_sources_map,
    )
    logger.debug(
        "Built batch data for %d product(s): %d with sources, %d on sale",
        len(ids), len(sources_map), len(sales_map),
    )
    return batch

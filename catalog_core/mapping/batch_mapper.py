"""
Batch Mapper

Maps one page of products using relation maps fetched up front
(see batch_builder). Each product depends only on its own map entries;
a missing key is an empty relation.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Sequence

from ..common.constants import DEFAULT_LOCALE
from ..models import AlternativeSource, BatchRelatedData, CanonicalProduct, ProductRow, SourceRow
from .deps import BatchMapperDeps
from .product_mapper import map_product_to_type

logger = logging.getLogger(__name__)


def build_alternative_sources(
    product_id: int,
    primary: SourceRow,
    all_sources: Sequence[SourceRow],
    redirect_url: Callable[[str, Any, str], Optional[str]],
    locale: str = DEFAULT_LOCALE,
) -> Optional[List[AlternativeSource]]:
    """
    Collect the competing listings for a product.

    Sources from the primary's provider and repeated providers are skipped
    (names compared case-insensitively), order is kept. Providers with a
    redirect template link to it instead of their own affiliate URL.

    Returns:
        Alternatives in source order, or None if there are none
    """
    seen = {primary.asp_name.upper()}
    alternatives = []
    for source in all_sources:
        key = source.asp_name.upper()
        if not key or key in seen:
            continue
        seen.add(key)

        affiliate_url = redirect_url(source.asp_name, product_id, locale) or source.affiliate_url or ''
        alternatives.append(AlternativeSource(
            asp_name=source.asp_name,
            price=source.price or 0,
            affiliate_url=affiliate_url,
            product_id=product_id,
        ))

    return alternatives or None


def map_products_with_batch_data(
    products: Sequence[ProductRow],
    batch_data: BatchRelatedData,
    deps: Optional[BatchMapperDeps] = None,
    locale: str = DEFAULT_LOCALE,
    *,
    now: Optional[datetime] = None,
) -> List[CanonicalProduct]:
    """
    Map a product page with pre-grouped relations.

    Args:
        products: Validated product rows
        batch_data: Relation maps keyed by product id (read-only here)
        deps: Locale, provider and redirect resolvers (defaults if None)
        locale: Locale for text resolution
        now: Evaluation time shared by every product in the batch

    Returns:
        Canonical products in input order
    """
    if deps is None:
        deps = BatchMapperDeps()
    if now is None:
        now = datetime.now(timezone.utc)

    results = []
    for product in products:
        primary = batch_data.sources_map.get(product.id)

        mapped = map_product_to_type(
            product,
            deps,
            performers=batch_data.performers_map.get(product.id, []),
            tags=batch_data.tags_map.get(product.id, []),
            source=primary,
            images=batch_data.images_map.get(product.id),
            videos=batch_data.videos_map.get(product.id),
            locale=locale,
            sale=batch_data.sales_map.get(product.id),
            now=now,
        )

        if primary is not None:
            mapped.alternative_sources = build_alternative_sources(
                product.id,
                primary,
                batch_data.all_sources_map.get(product.id, []),
                deps.redirect_url,
                locale,
            )

        results.append(mapped)

    logger.debug("Mapped %d product(s) from batch data", len(results))
    return results

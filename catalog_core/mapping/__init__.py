"""
Entity mappers.

Modules:
    product_mapper - product row + relations -> CanonicalProduct
    actress_mapper - performer record -> CanonicalActress
    batch_mapper   - product page + relation maps -> CanonicalProducts with alternatives
    batch_builder  - raw relation result sets -> BatchRelatedData
    deps           - injectable resolver bundles
    localization   - default locale resolvers
    performers     - performer name filter
"""

from .actress_mapper import map_performer_to_actress_type_sync
from .batch_builder import build_batch_related_data
from .batch_mapper import build_alternative_sources, map_products_with_batch_data
from .deps import ActressMapperDeps, BatchMapperDeps, ProductMapperDeps
from .performers import is_valid_performer, is_valid_performer_name
from .product_mapper import compute_release_flags, map_product_to_type

__all__ = [
    'map_product_to_type',
    'map_performer_to_actress_type_sync',
    'map_products_with_batch_data',
    'build_alternative_sources',
    'build_batch_related_data',
    'compute_release_flags',
    'ProductMapperDeps',
    'ActressMapperDeps',
    'BatchMapperDeps',
    'is_valid_performer',
    'is_valid_performer_name',
]

"""
Data models for the catalog core.

This module contains pure data classes with no business logic.
"""

from .batch import BatchRelatedData
from .canonical import (
    ActressMetrics,
    AlternativeSource,
    CanonicalActress,
    CanonicalProduct,
    PerformerSummary,
    SampleVideo,
)
from .rows import (
    CacheData,
    ImageRow,
    PerformerRecord,
    PerformerRow,
    ProductRow,
    SaleRow,
    SourceRow,
    TagRow,
    VideoRow,
)

__all__ = [
    'ProductRow',
    'PerformerRecord',
    'PerformerRow',
    'TagRow',
    'ImageRow',
    'VideoRow',
    'SourceRow',
    'SaleRow',
    'CacheData',
    'BatchRelatedData',
    'CanonicalProduct',
    'CanonicalActress',
    'ActressMetrics',
    'AlternativeSource',
    'PerformerSummary',
    'SampleVideo',
]

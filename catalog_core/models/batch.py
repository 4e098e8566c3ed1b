"""
Batch relation container.

Relation rows for one page of products, pre-grouped by product id so the
batch aggregator joins with dictionary lookups only. An absent key means the
product has no such relation.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .rows import ImageRow, PerformerRow, SaleRow, SourceRow, TagRow, VideoRow


@dataclass
class BatchRelatedData:
    """Relation maps keyed by product id, built once per batch and read-only afterwards."""
    performers_map: Dict[int, List[PerformerRow]] = field(default_factory=dict)
    tags_map: Dict[int, List[TagRow]] = field(default_factory=dict)
    images_map: Dict[int, List[ImageRow]] = field(default_factory=dict)
    videos_map: Dict[int, List[VideoRow]] = field(default_factory=dict)
    sales_map: Dict[int, SaleRow] = field(default_factory=dict)
    sources_map: Dict[int, SourceRow] = field(default_factory=dict)       # Primary source
    all_sources_map: Dict[int, List[SourceRow]] = field(default_factory=dict)

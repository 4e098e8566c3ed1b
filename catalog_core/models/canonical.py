"""
Canonical record models.

The normalized product and performer records handed to the presentation and
search layers. Optional fields are None when unset; to_dict() leaves them out
entirely, since consumers treat "key present" as "has something to show".
"""

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, List, Optional


def _to_compact(value: Any) -> Any:
    """Recursively convert dataclasses to dicts, dropping None fields."""
    if is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _to_compact(getattr(value, f.name))
            for f in fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, list):
        return [_to_compact(item) for item in value]
    return value


@dataclass
class PerformerSummary:
    """Performer reference on a product card."""
    id: str
    name: str


@dataclass
class SampleVideo:
    url: str
    type: str = "sample"
    quality: Optional[str] = None
    duration: Optional[int] = None


@dataclass
class AlternativeSource:
    """A competing provider listing for the same product."""
    asp_name: str
    price: float
    affiliate_url: str
    product_id: int


@dataclass
class CanonicalProduct:
    """
    Normalized product record.

    Field Groups:
    - Identity: id and product codes
    - Display text: locale-resolved title/description, tag names
    - Commerce: price, provider, affiliate link, sale fields, alternatives
    - Media: primary image, sample images/videos
    - Derived flags: is_new / is_future (mutually exclusive)
    """

    # Required fields
    id: str
    title: str
    price: float
    currency: str
    image_url: str
    affiliate_url: str
    provider: str
    provider_label: str
    tags: List[str] = field(default_factory=list)
    is_featured: bool = False
    is_new: bool = False
    is_future: bool = False

    # Identity
    normalized_product_id: Optional[str] = None
    maker_product_code: Optional[str] = None
    original_product_id: Optional[str] = None

    # Content
    description: Optional[str] = None
    release_date: Optional[str] = None
    duration: Optional[int] = None
    product_type: Optional[str] = None

    # Performers (actress_* mirror the first performer for older consumers)
    actress_id: Optional[str] = None
    actress_name: Optional[str] = None
    performers: Optional[List[PerformerSummary]] = None

    # Sale
    regular_price: Optional[float] = None
    sale_price: Optional[float] = None
    discount: Optional[float] = None
    sale_end_at: Optional[str] = None   # ISO-8601, never a datetime

    # Media
    sample_images: Optional[List[str]] = None
    sample_videos: Optional[List[SampleVideo]] = None

    # Review
    ai_review: Optional[str] = None
    ai_review_updated_at: Optional[str] = None

    alternative_sources: Optional[List[AlternativeSource]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, omitting unset optional fields."""
        return _to_compact(self)


@dataclass
class ActressMetrics:
    release_count: int
    trending_score: int = 0
    fan_score: int = 0


@dataclass
class CanonicalActress:
    """Normalized performer record."""
    id: str
    name: str
    hero_image: str
    thumbnail: str
    metrics: ActressMetrics
    catchcopy: str = ""
    services: List[str] = field(default_factory=list)
    description: Optional[str] = None
    aliases: Optional[List[str]] = None     # None, never [], when there are none
    ai_review: Optional[Any] = None
    ai_review_updated_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, omitting unset optional fields."""
        return _to_compact(self)

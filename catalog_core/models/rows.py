"""
Validated row models.

Typed rows produced by the validation layer from raw provider or storage
result sets. Nothing downstream of catalog_core.validation inspects raw
mappings; mappers consume only these classes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class ProductRow:
    """One product as stored, before locale resolution."""
    id: int
    title: str
    normalized_product_id: Optional[str] = None
    maker_product_code: Optional[str] = None   # Maker code, e.g. "SSIS-865"
    release_date: Optional[str] = None          # As stored, e.g. "2024-01-15"
    description: Optional[str] = None
    duration: Optional[int] = None              # Minutes
    default_thumbnail_url: Optional[str] = None
    ai_review: Optional[str] = None
    ai_review_updated_at: Optional[datetime] = None

    # Translations (base language is the untagged field)
    title_en: Optional[str] = None
    title_zh: Optional[str] = None
    title_ko: Optional[str] = None
    description_en: Optional[str] = None
    description_zh: Optional[str] = None
    description_ko: Optional[str] = None


@dataclass
class PerformerRecord:
    """One performer as stored, before locale resolution."""
    id: int
    name: str
    name_kana: Optional[str] = None
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None
    ai_review: Optional[str] = None
    ai_review_updated_at: Optional[datetime] = None

    name_en: Optional[str] = None
    name_zh: Optional[str] = None
    name_ko: Optional[str] = None
    bio_en: Optional[str] = None
    bio_zh: Optional[str] = None
    bio_ko: Optional[str] = None


@dataclass
class PerformerRow:
    """Performer summary attached to a product."""
    id: int = 0
    name: str = ""
    name_kana: Optional[str] = None
    name_en: Optional[str] = None
    name_zh: Optional[str] = None
    name_ko: Optional[str] = None
    product_id: Optional[int] = None    # Set only by the batch normalizer


@dataclass
class TagRow:
    """Tag (genre, series, maker...) attached to a product."""
    id: int = 0
    name: str = ""
    category: Optional[str] = None
    name_en: Optional[str] = None
    name_zh: Optional[str] = None
    name_ko: Optional[str] = None
    product_id: Optional[int] = None


@dataclass
class ImageRow:
    """Product image."""
    image_url: str
    image_type: str = ""
    display_order: Optional[int] = None
    product_id: Optional[int] = None


@dataclass
class VideoRow:
    """Product sample video."""
    video_url: str
    video_type: Optional[str] = None
    quality: Optional[str] = None
    duration: Optional[int] = None      # Seconds
    product_id: Optional[int] = None


@dataclass
class SourceRow:
    """
    One provider's commercial listing for a product.

    Several SourceRows may reference the same product; provider names are
    free-form and compared case-insensitively.
    """
    asp_name: str = ""
    original_product_id: Optional[str] = None
    affiliate_url: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    product_type: Optional[str] = None  # "haishin", "dvd", "monthly"
    product_id: Optional[int] = None


@dataclass
class SaleRow:
    """Active sale for a product."""
    regular_price: float = 0
    sale_price: float = 0
    discount_percent: Optional[float] = None
    end_at: Optional[datetime] = None
    product_id: Optional[int] = None


@dataclass
class CacheData:
    """Denormalized listing cache used by list pages."""
    price: Optional[float] = None
    thumbnail_url: Optional[str] = None
    affiliate_url: Optional[str] = None
    sample_images: List[str] = field(default_factory=list)

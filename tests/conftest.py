"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest

from catalog_core.mapping import ActressMapperDeps, BatchMapperDeps, ProductMapperDeps
from catalog_core.models import (
    ImageRow,
    PerformerRecord,
    PerformerRow,
    ProductRow,
    SourceRow,
    TagRow,
)
from catalog_core.providers import ProviderRegistry


@pytest.fixture
def now():
    """Fixed evaluation time for is_new / is_future."""
    return datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_providers():
    """Small provider registry (no config I/O)."""
    return [
        {'id': 'duga', 'label': 'DUGA', 'db_names': ['DUGA', 'APEX']},
        {'id': 'fanza', 'label': 'FANZA', 'db_names': ['FANZA', 'DMM']},
        {'id': 'mgs', 'label': 'MGS動画', 'db_names': ['MGS'], 'aliases': ['MGS動画']},
        {'id': 'dti', 'label': 'DTI', 'db_names': ['DTI'], 'subscription': True},
        {
            'id': 'heyzo', 'label': 'HEYZO', 'db_names': ['HEYZO'],
            'parent': 'dti', 'url_pattern': 'heyzo.com',
        },
        {
            'id': '1pondo', 'label': '一本道', 'db_names': ['1PONDO'], 'aliases': ['一本道'],
            'parent': 'dti', 'url_pattern': '1pondo.tv',
        },
    ]


@pytest.fixture
def sample_settings():
    return {
        'default_asp_name': 'DUGA',
        'redirects': {'FANZA': 'https://www.f.adult-v.com/products/{product_id}'},
    }


@pytest.fixture
def registry(sample_providers, sample_settings):
    return ProviderRegistry(providers=sample_providers, settings=sample_settings)


@pytest.fixture
def product_deps(registry):
    """Product mapper deps backed by the sample registry."""
    return ProductMapperDeps(
        map_legacy_provider=registry.map_legacy_provider,
        get_provider_label=registry.get_provider_label,
        default_asp_name=registry.default_asp_name,
    )


@pytest.fixture
def batch_deps(registry):
    return BatchMapperDeps(
        map_legacy_provider=registry.map_legacy_provider,
        get_provider_label=registry.get_provider_label,
        default_asp_name=registry.default_asp_name,
        redirect_url=registry.redirect_url,
    )


@pytest.fixture
def actress_deps(registry):
    return ActressMapperDeps(to_provider_ids=registry.to_provider_ids)


@pytest.fixture
def product_row():
    """Minimal product released 2024-06-12 (three days before `now`)."""
    return ProductRow(
        id=101,
        title="テスト作品",
        normalized_product_id="ssis865",
        maker_product_code="SSIS-865",
        release_date="2024-06-12",
        description="説明文",
        duration=120,
        title_en="Test Title",
    )


@pytest.fixture
def performer_rows():
    return [
        PerformerRow(id=1, name="三上悠亜", name_en="Yua Mikami"),
        PerformerRow(id=2, name="デ"),
    ]


@pytest.fixture
def tag_rows():
    return [
        TagRow(id=10, name="単体作品", category="genre", name_en="Solo"),
        TagRow(id=11, name="", category="genre"),
    ]


@pytest.fixture
def image_rows():
    return [
        ImageRow(image_url="https://pics.example.jp/101/sample1.jpg", image_type="sample", display_order=1),
        ImageRow(image_url="https://pics.example.jp/101/thumb.jpg", image_type="thumbnail", display_order=2),
    ]


@pytest.fixture
def duga_source():
    return SourceRow(
        asp_name="DUGA",
        original_product_id="abc-0001",
        affiliate_url="https://click.duga.jp/abc-0001",
        price=1980,
        currency="JPY",
        product_type="haishin",
        product_id=101,
    )


@pytest.fixture
def performer_record():
    return PerformerRecord(
        id=7,
        name="三上悠亜",
        bio="プロフィール",
        name_en="Yua Mikami",
        bio_en="Profile",
        ai_review='{"ja": "レビュー", "en": "Review"}',
        ai_review_updated_at=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
    )

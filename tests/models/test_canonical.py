"""Tests for catalog_core/models/canonical.py"""

from catalog_core.models import (
    ActressMetrics,
    AlternativeSource,
    CanonicalActress,
    CanonicalProduct,
    PerformerSummary,
)


def _product(**overrides):
    fields = dict(
        id="1",
        title="Title",
        price=1000,
        currency="JPY",
        image_url="https://example.com/a.jpg",
        affiliate_url="",
        provider="duga",
        provider_label="DUGA",
    )
    fields.update(overrides)
    return CanonicalProduct(**fields)


class TestCanonicalProduct:
    def test_defaults(self):
        product = _product()
        assert product.tags == []
        assert product.is_featured is False
        assert product.is_new is False
        assert product.is_future is False
        assert product.performers is None

    def test_to_dict_omits_unset_fields(self):
        data = _product().to_dict()
        assert "performers" not in data
        assert "sale_end_at" not in data
        assert "alternative_sources" not in data
        assert data["tags"] == []
        assert data["affiliate_url"] == ""

    def test_to_dict_serializes_nested_records(self):
        product = _product(
            performers=[PerformerSummary(id="3", name="Name")],
            alternative_sources=[
                AlternativeSource(asp_name="MGS", price=500, affiliate_url="https://x", product_id=1),
            ],
        )
        data = product.to_dict()
        assert data["performers"] == [{"id": "3", "name": "Name"}]
        assert data["alternative_sources"] == [
            {"asp_name": "MGS", "price": 500, "affiliate_url": "https://x", "product_id": 1},
        ]


class TestCanonicalActress:
    def _actress(self, **overrides):
        fields = dict(
            id="7",
            name="Name",
            hero_image="https://example.com/a.jpg",
            thumbnail="https://example.com/a.jpg",
            metrics=ActressMetrics(release_count=3),
        )
        fields.update(overrides)
        return CanonicalActress(**fields)

    def test_aliases_absent_when_none(self):
        data = self._actress().to_dict()
        assert "aliases" not in data

    def test_empty_alias_list_is_kept_if_set_explicitly(self):
        data = self._actress(aliases=[]).to_dict()
        assert data["aliases"] == []

    def test_metrics_defaults(self):
        data = self._actress().to_dict()
        assert data["metrics"] == {"release_count": 3, "trending_score": 0, "fan_score": 0}
        assert data["catchcopy"] == ""
        assert data["services"] == []

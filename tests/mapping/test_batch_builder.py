"""Tests for catalog_core/mapping/batch_builder.py"""

from catalog_core.mapping.batch_builder import build_batch_related_data
from catalog_core.mapping.batch_mapper import map_products_with_batch_data
from catalog_core.models import SourceRow
from catalog_core.validation import to_product_rows


class TestBuildBatchRelatedData:
    def test_groups_by_product(self):
        batch = build_batch_related_data(
            [1, 2],
            performer_rows=[
                {"productId": 1, "id": 10, "name": "A"},
                {"product_id": 2, "id": 11, "name": "B"},
                {"productId": 1, "id": 12, "name": "C"},
            ],
        )
        assert [p.id for p in batch.performers_map[1]] == [10, 12]
        assert [p.id for p in batch.performers_map[2]] == [11]

    def test_rows_outside_batch_are_dropped(self):
        batch = build_batch_related_data([1], tag_rows=[{"productId": 9, "id": 1, "name": "T"}])
        assert batch.tags_map == {}

    def test_query_result_object_accepted(self):
        batch = build_batch_related_data([1], tag_rows={"rows": [{"productId": 1, "id": 1, "name": "T"}]})
        assert batch.tags_map[1][0].name == "T"

    def test_images_ordered_by_display_order(self):
        batch = build_batch_related_data(
            [1],
            image_rows=[
                {"productId": 1, "imageUrl": "https://x/none.jpg"},
                {"productId": 1, "imageUrl": "https://x/2.jpg", "displayOrder": 2},
                {"productId": 1, "imageUrl": "https://x/1.jpg", "displayOrder": 1},
            ],
        )
        assert [img.image_url for img in batch.images_map[1]] == [
            "https://x/1.jpg", "https://x/2.jpg", "https://x/none.jpg",
        ]

    def test_first_sale_per_product(self):
        batch = build_batch_related_data(
            [1],
            sale_rows=[
                {"productId": 1, "regularPrice": 2000, "salePrice": 980},
                {"productId": 1, "regularPrice": 2000, "salePrice": 1500},
            ],
        )
        assert batch.sales_map[1].sale_price == 980

    def test_first_source_is_primary(self):
        batch = build_batch_related_data(
            [1],
            source_rows=[
                {"productId": 1, "aspName": "MGS"},
                {"productId": 1, "aspName": "FANZA"},
            ],
        )
        assert batch.sources_map[1].asp_name == "MGS"
        assert [s.asp_name for s in batch.all_sources_map[1]] == ["MGS", "FANZA"]

    def test_caller_supplied_primary(self):
        primary = SourceRow(asp_name="FANZA", product_id=1)
        batch = build_batch_related_data(
            [1],
            source_rows=[{"productId": 1, "aspName": "MGS"}],
            primary_sources={1: primary, 9: SourceRow(asp_name="DUGA", product_id=9)},
        )
        assert batch.sources_map == {1: primary}

    def test_invalid_ids_and_missing_inputs(self):
        batch = build_batch_related_data(["1", None, 0, 2])
        assert batch.performers_map == {}
        assert batch.sources_map == {}

    def test_end_to_end(self, batch_deps, now):
        products = to_product_rows({"rows": [
            {"id": 1, "title": "A", "releaseDate": "2024-06-13"},
            {"id": 2, "title": "B"},
        ]})
        batch = build_batch_related_data(
            [p.id for p in products],
            performer_rows=[{"productId": 1, "id": 5, "name": "三上悠亜"}, {"productId": 1, "id": 6, "name": "ラ"}],
            image_rows=[{"product_id": 1, "image_url": "https://x/1.jpg", "image_type": "thumbnail"}],
            source_rows=[
                {"productId": 1, "aspName": "DUGA", "affiliateUrl": "https://duga/1", "price": "1980"},
                {"productId": 1, "aspName": "FANZA", "affiliateUrl": "https://dmm/1", "price": 2480},
            ],
        )
        first, second = map_products_with_batch_data(products, batch, batch_deps, locale="en", now=now)

        assert first.image_url == "https://x/1.jpg"
        assert first.price == 1980
        assert [p.name for p in first.performers] == ["三上悠亜"]
        assert first.is_new is True
        assert first.alternative_sources[0].affiliate_url == "https://www.f.adult-v.com/products/1?hl=en"
        assert first.alternative_sources[0].price == 2480

        assert second.provider == "duga"
        assert second.alternative_sources is None

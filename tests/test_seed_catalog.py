from pathlib import Path
from unittest.mock import MagicMock, patch

from scripts.seed_catalog import chunks, read_products, seed_catalog

CATALOG = Path(__file__).resolve().parent.parent / "data" / "sample_catalog.csv"


class TestSeedCatalog:
    def test_read_products_splits_tags(self):
        products = read_products(str(CATALOG))

        assert len(products) == 8
        assert products[0]["sku"] == "LAP-GAME-001"
        assert products[0]["tags"] == ["laptop", "gaming"]
        assert products[4]["stock"] == 0

    def test_chunks(self):
        assert chunks([{"a": 1}, {"a": 2}, {"a": 3}], 2) == [[{"a": 1}, {"a": 2}], [{"a": 3}]]

    def test_dry_run_posts_nothing(self):
        with patch("scripts.seed_catalog.requests.post") as post:
            created = seed_catalog("http://test", [{"sku": "A"}, {"sku": "B"}], 1, True, 1.0)

        assert created == 2
        post.assert_not_called()

    def test_conflicting_batch_is_skipped(self):
        conflict = MagicMock(status_code=409)
        conflict.json.return_value = {"message": "Product with SKU B already exists"}
        ok = MagicMock(status_code=201)
        ok.json.return_value = [{"sku": "C"}]

        with patch("scripts.seed_catalog.requests.post", side_effect=[conflict, ok]) as post:
            created = seed_catalog("http://test/", [{"sku": "B"}, {"sku": "C"}], 1, False, 1.0)

        assert created == 1
        assert post.call_args.args[0] == "http://test/api/v2/products/bulk"

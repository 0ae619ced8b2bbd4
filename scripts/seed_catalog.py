import argparse
import sys
from typing import List

import pandas as pd
import requests


def read_products(path: str) -> List[dict]:
    df = pd.read_csv(path, dtype={"sku": str})
    df["description"] = df["description"].fillna("")
    df["tags"] = df["tags"].fillna("").apply(lambda t: t.split("|") if t else [])
    return df[["name", "description", "price", "stock", "sku", "category", "tags"]].to_dict(orient="records")


def chunks(items: List[dict], size: int) -> List[List[dict]]:
    return [items[i : i + size] for i in range(0, len(items), size)]


def seed_catalog(base_url: str, products: List[dict], batch_size: int, dry_run: bool, timeout: float) -> int:
    url = base_url.rstrip("/") + "/api/v2/products/bulk"
    created = 0
    for batch in chunks(products, batch_size):
        if dry_run:
            created += len(batch)
            continue
        r = requests.post(url, json={"products": batch}, timeout=timeout)
        if r.status_code == 409:
            # a batch is all or nothing, so one taken SKU skips the whole batch
            print(f"Skipped batch starting at {batch[0]['sku']}: {r.json().get('message')}", file=sys.stderr)
            continue
        r.raise_for_status()
        created += len(r.json())
    return created


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--base_url", type=str, default="http://localhost:8000")
    parser.add_argument("--catalog_path", type=str, default="data/sample_catalog.csv")
    parser.add_argument("--batch_size", type=int, default=50)
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--dry_run", action="store_true")
    args = parser.parse_args()
    try:
        rows = read_products(args.catalog_path)
    except Exception as e:
        print(f"Failed to read catalog: {e}", file=sys.stderr)
        sys.exit(1)
    created = seed_catalog(args.base_url, rows, args.batch_size, args.dry_run, args.timeout)
    print(f"Created {created} of {len(rows)} products")


if __name__ == "__main__":
    main()

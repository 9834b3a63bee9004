# sdk/pystore.py
import requests
import httpx
from typing import Any, Dict, Optional
from rich import print

DEFAULT_API_KEY = "12345"


class StoreClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = DEFAULT_API_KEY,
                 timeout: int = 10, session: Any = None):
        self.base_url = base_url.rstrip("/")
        # anything with requests-style get/post/put/delete works, e.g. a TestClient
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        # TestClient and other httpx-style sessions take no per-request timeout
        self._request_kwargs = {"timeout": timeout} if isinstance(self.session, requests.Session) else {}
        self.api_key = api_key
        if api_key:
            self.session.headers.update({"x-api-key": api_key})

    @staticmethod
    def _check(r):
        # raise_for_status() differs between requests and httpx responses
        if r.status_code >= 400:
            try:
                body = r.json()
            except ValueError:
                body = r.text
            raise requests.HTTPError(f"HTTP {r.status_code}: {body}", response=r)
        return r

    def welcome(self) -> str:
        r = self.session.get(f"{self.base_url}/", **self._request_kwargs)
        return self._check(r).text

    # Products
    def list_products(self, search: Optional[str] = None, category: Optional[str] = None,
                      page: Optional[int] = None, limit: Optional[int] = None):
        params: Dict[str, Any] = {}
        if search:
            params["search"] = search
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(f"{self.base_url}/api/products", params=params, **self._request_kwargs)
        return self._check(r).json()

    def get_product(self, product_id: str):
        r = self.session.get(f"{self.base_url}/api/products/{product_id}", **self._request_kwargs)
        return self._check(r).json()

    def create_product(self, name: str, description: str, price: float, category: str, in_stock: bool = True):
        r = self.session.post(f"{self.base_url}/api/products", json={
            "name": name, "description": description, "price": price,
            "category": category, "inStock": in_stock,
        }, **self._request_kwargs)
        return self._check(r).json()

    def update_product(self, product_id: str, **fields):
        if "in_stock" in fields:
            fields["inStock"] = fields.pop("in_stock")
        r = self.session.put(f"{self.base_url}/api/products/{product_id}", json=fields, **self._request_kwargs)
        return self._check(r).json()

    def delete_product(self, product_id: str):
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", **self._request_kwargs)
        return self._check(r).json()

    def stats(self):
        r = self.session.get(f"{self.base_url}/api/products/stats", **self._request_kwargs)
        return self._check(r).json()

    # Async listing (example)
    async def list_products_async(self, **params):
        headers = {"x-api-key": self.api_key} if self.api_key else {}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.get(f"{self.base_url}/api/products", params=params, headers=headers)
            r.raise_for_status()
            return r.json()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Product API client")
    parser.add_argument("--base-url", default="http://127.0.0.1:3000")
    parser.add_argument("--api-key", default=DEFAULT_API_KEY)
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--search", help="Substring of name or description")
    lp.add_argument("--category", help="Exact category (case-insensitive)")
    lp.add_argument("--page", type=int)
    lp.add_argument("--limit", type=int)

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True)

    cp = subparsers.add_parser("create-product", help="Create a product")
    cp.add_argument("--name", required=True)
    cp.add_argument("--description", required=True)
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--category", required=True)
    cp.add_argument("--out-of-stock", action="store_true")

    up = subparsers.add_parser("update-product", help="Update some fields of a product")
    up.add_argument("--product-id", required=True)
    up.add_argument("--name")
    up.add_argument("--description")
    up.add_argument("--price", type=float)
    up.add_argument("--category")
    up.add_argument("--in-stock", choices=["true", "false"])

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    subparsers.add_parser("stats", help="Product counts per category")

    args = parser.parse_args()
    c = StoreClient(base_url=args.base_url, api_key=args.api_key)

    if args.command == "list-products":
        print(c.list_products(args.search, args.category, args.page, args.limit))

    elif args.command == "get-product":
        print(c.get_product(args.product_id))

    elif args.command == "create-product":
        print(c.create_product(args.name, args.description, args.price, args.category, not args.out_of_stock))

    elif args.command == "update-product":
        changes = {k: v for k, v in {
            "name": args.name, "description": args.description,
            "price": args.price, "category": args.category,
        }.items() if v is not None}
        if args.in_stock is not None:
            changes["in_stock"] = args.in_stock == "true"
        print(c.update_product(args.product_id, **changes))

    elif args.command == "delete-product":
        print(c.delete_product(args.product_id))

    elif args.command == "stats":
        print(c.stats())

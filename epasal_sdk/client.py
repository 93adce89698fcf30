# epasal_sdk/client.py
from typing import Any, Dict, List, Optional

import httpx
import requests
from rich import print


class CatalogFetchError(Exception):
    """The product listing could not be fetched or did not look like one."""


def _extract_products(payload: Any) -> List[Dict[str, Any]]:
    if not isinstance(payload, dict):
        raise CatalogFetchError("response body is not a JSON object")
    products = payload.get("products")
    if not isinstance(products, list):
        raise CatalogFetchError("response body has no 'products' array")
    return products


class CatalogClient:
    def __init__(self, products_url: str = "https://dummyjson.com/products", timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.products_url = products_url
        self.timeout = timeout
        # Lets tests and the in-process dev API swap the network out.
        self.transport = transport
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        # only the sync path needs a requests session
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self):
        if self._session is not None:
            self._session.close()
            self._session = None

    def fetch_products(self) -> List[Dict[str, Any]]:
        try:
            r = self.session.get(self.products_url, timeout=self.timeout)
            r.raise_for_status()
            payload = r.json()
        except requests.exceptions.RequestException as e:
            raise CatalogFetchError(f"GET {self.products_url} failed: {e}") from e
        except ValueError as e:
            raise CatalogFetchError(f"GET {self.products_url} returned invalid JSON: {e}") from e
        return _extract_products(payload)

    async def fetch_products_async(self) -> List[Dict[str, Any]]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.get(self.products_url)
                r.raise_for_status()
                payload = r.json()
        except httpx.HTTPError as e:
            raise CatalogFetchError(f"GET {self.products_url} failed: {e}") from e
        except ValueError as e:
            raise CatalogFetchError(f"GET {self.products_url} returned invalid JSON: {e}") from e
        return _extract_products(payload)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="EPasal product API client")
    parser.add_argument("--url", default="https://dummyjson.com/products", help="Product-listing endpoint")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    args = parser.parse_args()

    c = CatalogClient(products_url=args.url, timeout=args.timeout)
    try:
        print(c.fetch_products())
    finally:
        c.close()

# epasal/loader.py
import logging

from pydantic import ValidationError

from epasal_sdk.client import CatalogClient, CatalogFetchError

from .catalog import make_products
from .state import CatalogLoaded, LoadingFinished, Store

logger = logging.getLogger(__name__)


async def load_catalog(store: Store, client: CatalogClient) -> bool:
    """Fetch the catalog once and publish it to ``store``.

    Failures are logged and leave the catalog empty. The loading flag is
    cleared exactly once whatever happens, including cancellation.
    """
    try:
        raw = await client.fetch_products_async()
        products = make_products(raw)
        store.dispatch(CatalogLoaded(products))
        logger.info("Loaded %d products from %s", len(products), client.products_url)
        return True
    except (CatalogFetchError, ValidationError) as e:
        logger.error("Error fetching products: %s", e)
        return False
    finally:
        store.dispatch(LoadingFinished())

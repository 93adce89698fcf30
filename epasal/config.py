"""
Storefront configuration read from environment variables.

Values are computed once when this module is imported, so set the
``EPASAL_*`` variables before starting the storefront.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    return float(raw)


@dataclass
class Settings:
    """Storefront settings loaded from environment variables."""

    # Product-listing endpoint; must return a JSON body with a ``products`` array.
    products_url: str = os.getenv("EPASAL_PRODUCTS_URL", "https://dummyjson.com/products")

    # Request timeout in seconds. Unset means the request may wait forever.
    timeout: Optional[float] = _optional_float(os.getenv("EPASAL_TIMEOUT"))

    log_level: str = os.getenv("EPASAL_LOG_LEVEL", "WARNING")
    currency: str = os.getenv("EPASAL_CURRENCY", "Rs.")

    # Port used by ``python -m epasal.devserver``.
    dev_port: int = int(os.getenv("EPASAL_DEV_PORT", "8085"))


settings = Settings()

# epasal/devserver.py
from typing import Any, Dict, List

from fastapi import FastAPI

from .config import settings

app = FastAPI(title="epasal dev product API")

# ---------------------------
# Sample catalog (same shape as the public product API)
# ---------------------------
SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {"id": 1, "title": "Essence Mascara Lash Princess", "category": "beauty", "price": 9.99,
     "thumbnail": "https://cdn.dummyjson.com/products/images/beauty/Essence%20Mascara%20Lash%20Princess/thumbnail.png"},
    {"id": 2, "title": "Eyeshadow Palette with Mirror", "category": "beauty", "price": 19.99,
     "thumbnail": "https://cdn.dummyjson.com/products/images/beauty/Eyeshadow%20Palette%20with%20Mirror/thumbnail.png"},
    {"id": 3, "title": "Powder Canister", "category": "beauty", "price": 14.99,
     "thumbnail": "https://cdn.dummyjson.com/products/images/beauty/Powder%20Canister/thumbnail.png"},
    {"id": 6, "title": "Calvin Klein CK One", "category": "fragrances", "price": 49.99,
     "thumbnail": "https://cdn.dummyjson.com/products/images/fragrances/Calvin%20Klein%20CK%20One/thumbnail.png"},
    {"id": 7, "title": "Chanel Coco Noir Eau De", "category": "fragrances", "price": 129.99,
     "thumbnail": "https://cdn.dummyjson.com/products/images/fragrances/Chanel%20Coco%20Noir%20Eau%20De/thumbnail.png"},
    {"id": 11, "title": "Annibale Colombo Bed", "category": "furniture", "price": 1899.99,
     "thumbnail": "https://cdn.dummyjson.com/products/images/furniture/Annibale%20Colombo%20Bed/thumbnail.png"},
    {"id": 16, "title": "Apple", "category": "groceries", "price": 1.99,
     "thumbnail": "https://cdn.dummyjson.com/products/images/groceries/Apple/thumbnail.png"},
    {"id": 20, "title": "Cat Food", "category": "groceries", "price": 8.99,
     "thumbnail": "https://cdn.dummyjson.com/products/images/groceries/Cat%20Food/thumbnail.png"},
]


@app.get("/products")
async def list_products():
    return {
        "products": SAMPLE_PRODUCTS,
        "total": len(SAMPLE_PRODUCTS),
        "skip": 0,
        "limit": len(SAMPLE_PRODUCTS),
    }


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=settings.dev_port, log_level="info")

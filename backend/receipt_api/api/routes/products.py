"""Product lookup helper.

Builds a display name from a product page URL.  No page is fetched, so
the price is always the ``"0.00"`` placeholder and the client fills in
the real value.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from receipt_api.models.schemas import ProductInfo, ProductUrlRequest
from receipt_api.utils.helpers import product_name_from_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])

PLACEHOLDER_PRICE = "0.00"


@router.post("/fetch-product", response_model=ProductInfo)
async def fetch_product(body: ProductUrlRequest) -> ProductInfo:
    name = product_name_from_url(str(body.url))
    logger.info("[products] derived name=%r from url", name)
    return ProductInfo(name=name, price=PLACEHOLDER_PRICE)

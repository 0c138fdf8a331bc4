"""Composition root and catalog seeding.

``build_product_service`` is the one place that picks the concrete
repository; views, the management command and the startup hook all get
their service from it.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.conf import settings
from django.db import DatabaseError

from modules.products.dtos import CreateProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)

SAMPLE_CATALOG = [
    ("ordinateur", 5000, True),
    ("telephone", 2500, True),
    ("tablette", 3000, False),
    ("souris", 250, True),
    ("clavier", 500, False),
    ("chargeur", 600, True),
]


def build_product_service(
    repository: Optional[IProductRepository] = None,
) -> ProductService:
    return ProductService(repository=repository or ProductDjangoRepository())


def seed_products(service: ProductService) -> List[Product]:
    """Insert the sample catalog, then log and return every stored product.

    Not idempotent: each call adds the six rows again.
    """
    for name, price, available in SAMPLE_CATALOG:
        service.add_product(
            CreateProductDTO(name=name, price=price, available=available)
        )

    products = service.find_all()
    for product in products:
        logger.info(
            "product.seeded",
            product_id=product.id,
            name=product.name,
            price=product.price,
            available=product.available,
        )
    return products


def seed_on_startup() -> Optional[List[Product]]:
    """Seed the catalog at process start when ``SEED_ON_STARTUP`` is on.

    A database error is logged and re-raised so the server does not start.
    """
    if not settings.SEED_ON_STARTUP:
        logger.info("catalog.seed_skipped", reason="disabled")
        return None
    try:
        products = seed_products(build_product_service())
    except DatabaseError:
        logger.exception(
            "catalog.seed_failed",
            hint="the products table may be missing, run `manage.py migrate`",
        )
        raise
    logger.info("catalog.seeded", count=len(products))
    return products

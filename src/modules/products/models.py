"""Product model: a single catalog entry.

The table holds ``id, name, price, available`` and nothing else.  ``id``
is assigned by the database on first save and never changes afterwards.
"""

from __future__ import annotations

from django.db import models


class Product(models.Model):
    """Catalog product.

    ``price`` is stored as a float so JSON clients receive a plain
    number.  ``available`` is the boolean stock flag.
    """

    name = models.CharField(max_length=255)
    price = models.FloatField()
    available = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return (
            f"Product(id={self.id}, name={self.name!r}, "
            f"price={self.price}, available={self.available})"
        )

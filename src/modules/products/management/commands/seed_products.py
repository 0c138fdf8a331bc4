from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.products.bootstrap import build_product_service, seed_products


class Command(BaseCommand):
    help = "Insert the six sample catalog products and print the catalog."

    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog...")

        products = seed_products(build_product_service())
        for product in products:
            self.stdout.write(str(product))

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: products={len(products)}")
        )

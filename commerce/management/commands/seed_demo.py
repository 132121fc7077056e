from django.core.management.base import BaseCommand

from commerce.models import CheckoutLink
from sellers.models import Seller

DEMO_EMAIL = "seller@example.com"
DEMO_PASSWORD = "password123"


class Command(BaseCommand):
    help = "Seed a demo seller and checkout link. Idempotent, safe to run multiple times."

    def handle(self, *args, **opts):
        seller, created = Seller.objects.get_or_create(
            email=DEMO_EMAIL,
            defaults={
                "name": "Test Seller",
                "slug": "test-seller",
                "instagram_url": "https://instagram.com/testseller",
            },
        )
        if created:
            seller.set_password(DEMO_PASSWORD)
            seller.save(update_fields=["password"])

        link, _ = CheckoutLink.objects.get_or_create(
            seller=seller,
            slug="white-hoodie",
            defaults={
                "name": "White Oversized Hoodie",
                "price": 150000,
                "currency": "UZS",
                "default_qty": 1,
                "max_qty": 5,
                "sizes": ["S", "M", "L", "XL"],
                "courier_city": True,
                "pickup": True,
                "region": False,
                "payment_note": "Pay via Payme or Uzcard to this card: 8600 1234 5678 9012",
            },
        )

        self.stdout.write(self.style.SUCCESS(f"Seller: {seller.email} ({'created' if created else 'exists'})"))
        self.stdout.write(f"Checkout URL: http://localhost:3000/b/{seller.slug}/{link.slug}")
        self.stdout.write(f"Login: {DEMO_EMAIL} / {DEMO_PASSWORD}")

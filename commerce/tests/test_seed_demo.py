from django.core.management import call_command
from django.test import TestCase

from commerce.models import CheckoutLink
from sellers.models import Seller


class SeedDemoTests(TestCase):
    def test_idempotent(self):
        call_command("seed_demo")
        call_command("seed_demo")

        seller = Seller.objects.get(email="seller@example.com")
        self.assertTrue(seller.check_password("password123"))
        link = CheckoutLink.objects.get(seller=seller)
        self.assertEqual((link.slug, link.price, link.max_qty), ("white-hoodie", 150000, 5))
        self.assertEqual(link.enabled_delivery_methods(), ["courierCity", "pickup"])

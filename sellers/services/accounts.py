"""
sellers.services.accounts
Email + password sign-in for sellers.
"""
from __future__ import annotations

import logging
from typing import Optional

from sellers.models import Seller

logger = logging.getLogger(__name__)


def authenticate_seller(email: str, password: str) -> Optional[Seller]:
    seller = Seller.objects.filter(email__iexact=(email or "").strip()).first()
    if seller is None or not seller.check_password(password):
        # never log the password; the email is enough to trace brute-force attempts
        logger.info("seller_login_failed email=%s", email)
        return None
    return seller

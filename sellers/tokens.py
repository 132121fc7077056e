"""
sellers.tokens

Seller bearer tokens. A token is a salted, timestamped signature over the
seller id (django.core.signing), verified server-side on every request.
"""
from __future__ import annotations

from django.conf import settings
from django.core import signing

TOKEN_SALT = "bogla.sellers.token"


class InvalidToken(Exception):
    pass


def issue_token(seller) -> str:
    return signing.dumps({"sid": str(seller.pk)}, salt=TOKEN_SALT, compress=True)


def read_token(token: str) -> str:
    """Return the seller id carried by ``token`` or raise InvalidToken."""
    try:
        payload = signing.loads(
            token,
            salt=TOKEN_SALT,
            max_age=settings.BOGLA_TOKEN_MAX_AGE,
        )
    except signing.SignatureExpired as exc:
        raise InvalidToken("Token expired.") from exc
    except signing.BadSignature as exc:
        raise InvalidToken("Invalid token.") from exc

    seller_id = payload.get("sid") if isinstance(payload, dict) else None
    if not seller_id:
        raise InvalidToken("Invalid token.")
    return seller_id

"""
commerce.services.base
Lookup helpers shared by the commerce services.
"""
from __future__ import annotations

from django.core.exceptions import ObjectDoesNotExist, ValidationError as DjangoValidationError

from bogla.exceptions import NotFound


def fetch_or_404(queryset, what: str, **lookup):
    """
    queryset.get(**lookup), with every kind of miss reported as NotFound:
    unknown id, malformed id, or a row filtered out by seller scoping.
    """
    try:
        return queryset.get(**lookup)
    except (ObjectDoesNotExist, DjangoValidationError, ValueError):
        raise NotFound(what)

"""
sellers.services.media

Product image uploads, forwarded to the Cloudinary media CDN.

Limits: jpeg/png/webp/gif only, 5MB max (BOGLA_UPLOAD_MAX_BYTES). Cloudinary
resizes to fit 1000x1000 and negotiates the delivery format.
"""
from __future__ import annotations

import logging
from typing import Dict

import cloudinary
import cloudinary.uploader
from django.conf import settings
from rest_framework import serializers

from bogla.exceptions import UpstreamFailure

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/webp",
    "image/gif",
}

UPLOAD_TRANSFORMATION = [
    {"width": 1000, "height": 1000, "crop": "limit"},
    {"quality": "auto:good"},
    {"fetch_format": "auto"},
]


def _configure() -> None:
    creds = getattr(settings, "CLOUDINARY", {}) or {}
    cloudinary.config(
        cloud_name=creds.get("cloud_name"),
        api_key=creds.get("api_key"),
        api_secret=creds.get("api_secret"),
        secure=True,
    )


def validate_image(upload) -> None:
    if upload is None:
        raise serializers.ValidationError({"file": ["No file provided."]})

    content_type = (getattr(upload, "content_type", "") or "").lower()
    if content_type not in ALLOWED_CONTENT_TYPES:
        raise serializers.ValidationError(
            {"file": ["Invalid file type. Only JPEG, PNG, WebP, and GIF are allowed."]}
        )

    max_bytes = settings.BOGLA_UPLOAD_MAX_BYTES
    if upload.size > max_bytes:
        raise serializers.ValidationError(
            {"file": [f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB."]}
        )


def upload_product_image(seller, upload) -> Dict[str, str]:
    validate_image(upload)
    _configure()

    try:
        result = cloudinary.uploader.upload(
            upload,
            folder=settings.BOGLA_UPLOAD_FOLDER,
            resource_type="image",
            transformation=UPLOAD_TRANSFORMATION,
        )
    except Exception:
        logger.exception("image_upload_failed seller=%s name=%s", seller.pk, getattr(upload, "name", "-"))
        raise UpstreamFailure()

    logger.info("image_uploaded seller=%s public_id=%s", seller.pk, result.get("public_id"))
    return {"url": result["secure_url"], "publicId": result["public_id"]}

from artroad.application.repository import EntityRepository, FilterSpec, Listing
from artroad.domain.fields import BOOL, INT, FieldSpec, localized
from artroad.models import Service
from artroad.normalizers.service import normalize_service

SERVICE_FIELDS = (
    *localized("title", "title", required=True),
    *localized("description", "description", required=True),
    FieldSpec("imageUrl", "image_url", required=True),
    FieldSpec("icon", "icon", required=True),
    FieldSpec("priceStart", "price_start", kind=INT, minimum=0, default=0),
    FieldSpec("currency", "currency", max_length=10, default="MAD"),
    FieldSpec("isFavourite", "is_favourite", kind=BOOL, default=False),
    FieldSpec("orderIndex", "order_index", kind=INT, default=0),
    FieldSpec("isActive", "is_active", kind=BOOL, default=True),
)

SERVICE_LISTING = Listing(
    default_limit=10,
    sortable={
        "orderIndex": "order_index",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        "titleEn": "title_en",
        "priceStart": "price_start",
    },
    default_sort="orderIndex",
    filters=(
        FilterSpec("isActive", "is_active"),
        FilterSpec("isFavourite", "is_favourite"),
    ),
    search=("title_en", "title_fr", "title_ar"),
)

services = EntityRepository(
    model=Service,
    label="service",
    not_found_code="SERVICE_NOT_FOUND",
    fields=SERVICE_FIELDS,
    listing=SERVICE_LISTING,
    normalize=normalize_service,
)

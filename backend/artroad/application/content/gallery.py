from artroad.application.repository import EntityRepository, FilterSpec, Listing
from artroad.domain.fields import BOOL, ENUM, INT, FieldSpec, localized
from artroad.models import GALLERY_CATEGORIES, GalleryItem
from artroad.normalizers.gallery import normalize_gallery_item

GALLERY_FIELDS = (
    *localized("title", "title", required=True),
    *localized("description", "description", required=True),
    FieldSpec("beforeImageUrl", "before_image_url", required=True),
    FieldSpec("afterImageUrl", "after_image_url", required=True),
    FieldSpec("category", "category", kind=ENUM, required=True, choices=GALLERY_CATEGORIES),
    FieldSpec("orderIndex", "order_index", kind=INT, default=0),
    FieldSpec("isFeatured", "is_featured", kind=BOOL, default=False),
    FieldSpec("isActive", "is_active", kind=BOOL, default=True),
    FieldSpec("showOnHomepage", "show_on_homepage", kind=BOOL, default=False),
)

GALLERY_LISTING = Listing(
    default_limit=12,
    sortable={
        "orderIndex": "order_index",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        "titleEn": "title_en",
    },
    default_sort="orderIndex",
    filters=(
        FilterSpec(
            "category",
            "category",
            kind=ENUM,
            choices=GALLERY_CATEGORIES,
            invalid_code="INVALID_CATEGORY",
        ),
        FilterSpec("isFeatured", "is_featured", aliases=("featured",)),
        FilterSpec("isActive", "is_active"),
        FilterSpec("showOnHomepage", "show_on_homepage"),
    ),
    search=("title_en", "title_fr", "title_ar"),
)

gallery = EntityRepository(
    model=GalleryItem,
    label="gallery_item",
    not_found_code="GALLERY_ITEM_NOT_FOUND",
    fields=GALLERY_FIELDS,
    listing=GALLERY_LISTING,
    normalize=normalize_gallery_item,
)

from artroad.application.repository import EntityRepository, FilterSpec, Listing
from artroad.domain.fields import BOOL, INT, FieldSpec
from artroad.models import TrustedCompany
from artroad.normalizers.trusted_company import normalize_trusted_company

TRUSTED_COMPANY_FIELDS = (
    FieldSpec("logoUrl", "logo_url", required=True),
    FieldSpec("orderIndex", "order_index", kind=INT, default=0),
    FieldSpec("isActive", "is_active", kind=BOOL, default=True),
)

# Logos carry no text, so there is nothing to search on
TRUSTED_COMPANY_LISTING = Listing(
    default_limit=10,
    sortable={
        "orderIndex": "order_index",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
    default_sort="orderIndex",
    filters=(FilterSpec("isActive", "is_active"),),
)

trusted_companies = EntityRepository(
    model=TrustedCompany,
    label="trusted_company",
    not_found_code="TRUSTED_COMPANY_NOT_FOUND",
    fields=TRUSTED_COMPANY_FIELDS,
    listing=TRUSTED_COMPANY_LISTING,
    normalize=normalize_trusted_company,
)

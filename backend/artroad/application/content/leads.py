from typing import Any, Mapping

from artroad.application.repository import EntityRepository, FilterSpec, Listing
from artroad.domain.fields import EMAIL, ENUM, TEXT, FieldSpec
from artroad.models import LEAD_STATUSES, Lead
from artroad.normalizers.lead import normalize_lead
from .lead_intake import validate_submission

# Rules for admin-side edits; new leads only arrive through the intake pipeline
LEAD_FIELDS = (
    FieldSpec("name", "name", required=True),
    FieldSpec("email", "email", kind=EMAIL, required=True, lowercase=True),
    FieldSpec("phone", "phone", required=True),
    FieldSpec("message", "message", required=True),
    FieldSpec("serviceInterest", "service_interest", nullable=True),
    FieldSpec("source", "source", default="website"),
    FieldSpec("status", "status", kind=ENUM, choices=LEAD_STATUSES, default="new"),
)

LEAD_LISTING = Listing(
    default_limit=20,
    sortable={
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        "name": "name",
        "status": "status",
    },
    default_sort="createdAt",
    default_order="desc",
    filters=(
        FilterSpec(
            "status",
            "status",
            kind=ENUM,
            choices=LEAD_STATUSES,
            invalid_code="INVALID_STATUS",
        ),
        FilterSpec("source", "source", kind=TEXT),
    ),
    search=("name", "email", "phone"),
)


class LeadRepository(EntityRepository):
    def create(self, data: Mapping[str, Any]):
        return self._insert(validate_submission(data))


leads = LeadRepository(
    model=Lead,
    label="lead",
    not_found_code="LEAD_NOT_FOUND",
    fields=LEAD_FIELDS,
    listing=LEAD_LISTING,
    normalize=normalize_lead,
)

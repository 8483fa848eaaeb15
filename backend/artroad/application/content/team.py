from artroad.application.repository import EntityRepository, FilterSpec, Listing
from artroad.domain.fields import INT, FieldSpec, localized
from artroad.models import TeamMember
from artroad.normalizers.team import normalize_team_member

TEAM_FIELDS = (
    *localized("name", "name", required=True),
    FieldSpec("photoUrl", "photo_url", required=True),
    FieldSpec("orderIndex", "order_index", kind=INT, default=0),
)

TEAM_LISTING = Listing(
    default_limit=10,
    sortable={
        "orderIndex": "order_index",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        "nameEn": "name_en",
    },
    default_sort="orderIndex",
    filters=(FilterSpec("orderIndex", "order_index", kind=INT),),
    search=("name_en", "name_fr", "name_ar"),
)

team = EntityRepository(
    model=TeamMember,
    label="team_member",
    not_found_code="TEAM_MEMBER_NOT_FOUND",
    fields=TEAM_FIELDS,
    listing=TEAM_LISTING,
    normalize=normalize_team_member,
)

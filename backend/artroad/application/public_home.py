from typing import Any, Dict

from artroad.utils.request_args import ListParams
from .content.gallery import gallery
from .content.services import services
from .content.team import team
from .content.trusted_companies import trusted_companies
from .site_profile import load_site_profile

HOME_LIMIT = 100


def _listed(repository, **filters) -> list:
    params = ListParams(
        limit=HOME_LIMIT,
        sort="orderIndex",
        order="asc",
        filters=filters,
    )
    return [repository.normalize(record) for record in repository.list(params)]


def home_content() -> Dict[str, Any]:
    """Everything the public home page renders, in one read-only payload."""
    return {
        "services": _listed(services, isActive="true"),
        "gallery": _listed(gallery, isActive="true", showOnHomepage="true"),
        "team": _listed(team),
        "trustedCompanies": _listed(trusted_companies, isActive="true"),
        "profile": load_site_profile().to_dict(),
    }

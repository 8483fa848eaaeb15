# Import every model so metadata (create_all, Flask-Migrate) sees all tables
from .admin_user import AdminUser
from .gallery_item import GalleryItem, GALLERY_CATEGORIES
from .lead import Lead, LEAD_STATUSES
from .service import Service
from .site_setting import SiteSetting
from .team_member import TeamMember
from .trusted_company import TrustedCompany

__all__ = [
    "AdminUser",
    "GalleryItem",
    "GALLERY_CATEGORIES",
    "Lead",
    "LEAD_STATUSES",
    "Service",
    "SiteSetting",
    "TeamMember",
    "TrustedCompany",
]

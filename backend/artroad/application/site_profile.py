from dataclasses import dataclass, field, fields
from typing import Any, Dict, Tuple

from artroad.models import SiteSetting


def _setting(*keys: str, default: str = ""):
    return field(default=default, metadata={"keys": keys})


@dataclass(frozen=True)
class SiteProfile:
    """
    Typed view over the well-known site_settings keys the pages read.

    Each attribute lists the keys it is read from, first non-empty value
    wins, and a fallback used when none is stored.
    """

    contact_email: str = _setting("contact_email", "company_email", default="info@artroad.ae")
    contact_phone: str = _setting("contact_phone", "company_phone", default="+971 4 123 4567")
    contact_whatsapp: str = _setting("contact_whatsapp", "whatsapp_number", default="971501234567")
    contact_address: str = _setting(
        "contact_address", "address_en", default="Dubai Design District, Dubai, UAE"
    )
    contact_location_url: str = _setting(
        "contact_location_url", default="https://maps.app.goo.gl/z3kkX3hSu3oaH9Cb7"
    )
    google_maps_iframe_code: str = _setting("google_maps_iframe_code")

    logo_url: str = _setting("logo_url")
    logo_url_light: str = _setting("logo_url_light", "logo_url")
    logo_url_dark: str = _setting("logo_url_dark", "logo_url")
    hero_background_url: str = _setting("hero_background_url", "hero_bg_url")

    about_en: str = _setting("about_art_road_en")
    about_fr: str = _setting("about_art_road_fr")
    about_ar: str = _setting("about_art_road_ar")
    story_en: str = _setting("our_story_en")
    story_fr: str = _setting("our_story_fr")
    story_ar: str = _setting("our_story_ar")

    @classmethod
    def known_keys(cls) -> Tuple[str, ...]:
        keys = []
        for spec in fields(cls):
            for key in spec.metadata["keys"]:
                if key not in keys:
                    keys.append(key)
        return tuple(keys)

    @classmethod
    def from_values(cls, stored: Dict[str, str]) -> "SiteProfile":
        resolved = {}
        for spec in fields(cls):
            for key in spec.metadata["keys"]:
                if stored.get(key):
                    resolved[spec.name] = stored[key]
                    break
        return cls(**resolved)

    def to_dict(self) -> Dict[str, Any]:
        result = {}
        for spec in fields(self):
            head, *rest = spec.name.split("_")
            result[head + "".join(part.capitalize() for part in rest)] = getattr(self, spec.name)
        return result


def load_site_profile() -> SiteProfile:
    rows = SiteSetting.query.filter(SiteSetting.key.in_(SiteProfile.known_keys())).all()
    return SiteProfile.from_values({row.key: row.value for row in rows})

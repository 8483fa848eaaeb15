from typing import Any, Dict

from artroad.models import SiteSetting
from .timestamps import isoformat


def normalize_setting(setting: SiteSetting) -> Dict[str, Any]:
    """
    Normalizes a SiteSetting row into API-safe JSON.

    Notes:
    - auxiliary columns are always present, null when unset
    - createdAt is included even though most callers only read updatedAt
    """
    if not setting:
        raise ValueError("SiteSetting cannot be None")

    return {
        "id": setting.id,
        "key": setting.key,
        "value": setting.value,
        "description": setting.description,
        "themeMode": setting.theme_mode,
        "heroBgUrl": setting.hero_bg_url,
        "logoLightUrl": setting.logo_light_url,
        "logoDarkUrl": setting.logo_dark_url,
        "whatsappNumber": setting.whatsapp_number,
        "createdAt": isoformat(setting.created_at),
        "updatedAt": isoformat(setting.updated_at),
    }

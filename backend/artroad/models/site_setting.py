from artroad.extensions import db
from .base import BaseModel


class SiteSetting(BaseModel):
    __tablename__ = "site_settings"

    key = db.Column(db.String(255), unique=True, nullable=False, index=True)
    value = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=True)

    # Auxiliary columns, each written piecemeal
    theme_mode = db.Column(db.String(20), nullable=True, default="dark")
    hero_bg_url = db.Column(db.Text, nullable=True)
    logo_light_url = db.Column(db.Text, nullable=True)
    logo_dark_url = db.Column(db.Text, nullable=True)
    whatsapp_number = db.Column(db.String(50), nullable=True)

from artroad.extensions import db
from .base import BaseModel


class TrustedCompany(BaseModel):
    __tablename__ = "trusted_companies"

    logo_url = db.Column(db.Text, nullable=False)
    order_index = db.Column(db.Integer, nullable=False, default=0, index=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)

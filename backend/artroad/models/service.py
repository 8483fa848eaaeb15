from artroad.extensions import db
from .base import BaseModel


class Service(BaseModel):
    __tablename__ = "services"

    title_en = db.Column(db.Text, nullable=False)
    title_fr = db.Column(db.Text, nullable=False)
    title_ar = db.Column(db.Text, nullable=False)
    description_en = db.Column(db.Text, nullable=False)
    description_fr = db.Column(db.Text, nullable=False)
    description_ar = db.Column(db.Text, nullable=False)

    image_url = db.Column(db.Text, nullable=False)
    icon = db.Column(db.String(100), nullable=False)  # symbolic icon name, e.g. "lightbulb"

    price_start = db.Column(db.Integer, nullable=False, default=0)
    currency = db.Column(db.String(10), nullable=False, default="MAD")

    is_favourite = db.Column(db.Boolean, nullable=False, default=False)
    order_index = db.Column(db.Integer, nullable=False, default=0, index=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)

from artroad.extensions import db
from .base import BaseModel

GALLERY_CATEGORIES = ("led-panels", "3d-decoration", "events", "other")


class GalleryItem(BaseModel):
    __tablename__ = "gallery"

    title_en = db.Column(db.Text, nullable=False)
    title_fr = db.Column(db.Text, nullable=False)
    title_ar = db.Column(db.Text, nullable=False)
    description_en = db.Column(db.Text, nullable=False)
    description_fr = db.Column(db.Text, nullable=False)
    description_ar = db.Column(db.Text, nullable=False)

    before_image_url = db.Column(db.Text, nullable=False)
    after_image_url = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(50), nullable=False, index=True)  # one of GALLERY_CATEGORIES

    order_index = db.Column(db.Integer, nullable=False, default=0, index=True)
    is_featured = db.Column(db.Boolean, nullable=False, default=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)
    show_on_homepage = db.Column(db.Boolean, nullable=False, default=False)

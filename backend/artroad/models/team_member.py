from artroad.extensions import db
from .base import BaseModel


class TeamMember(BaseModel):
    __tablename__ = "team"

    name_en = db.Column(db.Text, nullable=False)
    name_fr = db.Column(db.Text, nullable=False)
    name_ar = db.Column(db.Text, nullable=False)
    photo_url = db.Column(db.Text, nullable=False)
    order_index = db.Column(db.Integer, nullable=False, default=0, index=True)

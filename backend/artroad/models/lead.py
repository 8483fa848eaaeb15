from artroad.extensions import db
from .base import BaseModel

LEAD_STATUSES = ("new", "contacted", "converted", "closed")


class Lead(BaseModel):
    __tablename__ = "leads"

    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.String(320), nullable=False, index=True)
    phone = db.Column(db.String(50), nullable=False)
    message = db.Column(db.Text, nullable=False)

    # Free text, not a reference to services.id
    service_interest = db.Column(db.Text, nullable=True)

    source = db.Column(db.String(50), nullable=False, default="website")
    status = db.Column(db.String(20), nullable=False, default="new", index=True)

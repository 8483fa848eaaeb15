from .timestamps import isoformat


def normalize_lead(lead):
    return {
        "id": lead.id,
        "name": lead.name,
        "email": lead.email,
        "phone": lead.phone,
        "message": lead.message,
        "serviceInterest": lead.service_interest,
        "source": lead.source,
        "status": lead.status,
        "createdAt": isoformat(lead.created_at),
        "updatedAt": isoformat(lead.updated_at),
    }

from .timestamps import isoformat


def normalize_trusted_company(company):
    return {
        "id": company.id,
        "logoUrl": company.logo_url,
        "orderIndex": company.order_index,
        "isActive": company.is_active,
        "createdAt": isoformat(company.created_at),
        "updatedAt": isoformat(company.updated_at),
    }

from .timestamps import isoformat


def normalize_service(service):
    return {
        "id": service.id,
        "titleEn": service.title_en,
        "titleFr": service.title_fr,
        "titleAr": service.title_ar,
        "descriptionEn": service.description_en,
        "descriptionFr": service.description_fr,
        "descriptionAr": service.description_ar,
        "imageUrl": service.image_url,
        "icon": service.icon,
        "priceStart": service.price_start,
        "currency": service.currency,
        "isFavourite": service.is_favourite,
        "orderIndex": service.order_index,
        "isActive": service.is_active,
        "createdAt": isoformat(service.created_at),
        "updatedAt": isoformat(service.updated_at),
    }

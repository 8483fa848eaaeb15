from .timestamps import isoformat


def normalize_gallery_item(item):
    return {
        "id": item.id,
        "titleEn": item.title_en,
        "titleFr": item.title_fr,
        "titleAr": item.title_ar,
        "descriptionEn": item.description_en,
        "descriptionFr": item.description_fr,
        "descriptionAr": item.description_ar,
        "beforeImageUrl": item.before_image_url,
        "afterImageUrl": item.after_image_url,
        "category": item.category,
        "orderIndex": item.order_index,
        "isFeatured": item.is_featured,
        "isActive": item.is_active,
        "showOnHomepage": item.show_on_homepage,
        "createdAt": isoformat(item.created_at),
        "updatedAt": isoformat(item.updated_at),
    }

from .timestamps import isoformat


def normalize_team_member(member):
    return {
        "id": member.id,
        "nameEn": member.name_en,
        "nameFr": member.name_fr,
        "nameAr": member.name_ar,
        "photoUrl": member.photo_url,
        "orderIndex": member.order_index,
        "createdAt": isoformat(member.created_at),
        "updatedAt": isoformat(member.updated_at),
    }

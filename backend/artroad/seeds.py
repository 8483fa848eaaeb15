from datetime import datetime, timezone

from artroad.extensions import db
from artroad.application.content.leads import leads
from artroad.application.content.services import services
from artroad.application.settings_store import upsert_setting
from artroad.domain.validation import clean_draft
from artroad.models import Lead, Service, SiteSetting
from artroad.utils.transaction import transactional

SAMPLE_SERVICES = [
    {
        "titleEn": "LED Panel Installation",
        "titleFr": "Installation de Panneaux LED",
        "titleAr": "تركيب ألواح LED",
        "descriptionEn": "High-quality LED panel installation for modern spaces",
        "descriptionFr": "Installation de panneaux LED de haute qualité pour espaces modernes",
        "descriptionAr": "تركيب ألواح LED عالية الجودة للمساحات الحديثة",
        "imageUrl": "/images/services/service-1.jpg",
        "icon": "lightbulb",
        "orderIndex": 1,
    },
    {
        "titleEn": "3D Wall Decoration",
        "titleFr": "Décoration Murale 3D",
        "titleAr": "ديكور الجدران ثلاثي الأبعاد",
        "descriptionEn": "Transform your walls with stunning 3D decorative elements",
        "descriptionFr": "Transformez vos murs avec des éléments décoratifs 3D époustouflants",
        "descriptionAr": "حول جدرانك بعناصر زخرفية ثلاثية الأبعاد مذهلة",
        "imageUrl": "/images/services/service-2.jpg",
        "icon": "cube",
        "orderIndex": 2,
    },
    {
        "titleEn": "Event Decoration",
        "titleFr": "Décoration d'Événements",
        "titleAr": "تزيين الفعاليات",
        "descriptionEn": "Professional decoration services for all types of events",
        "descriptionFr": "Services de décoration professionnels pour tous types d'événements",
        "descriptionAr": "خدمات تزيين احترافية لجميع أنواع الفعاليات",
        "imageUrl": "/images/services/service-3.jpg",
        "icon": "star",
        "orderIndex": 3,
    },
    {
        "titleEn": "Custom Signage",
        "titleFr": "Enseignes Personnalisées",
        "titleAr": "لافتات مخصصة",
        "descriptionEn": "Eye-catching custom signage for your business",
        "descriptionFr": "Enseignes personnalisées accrocheuses pour votre entreprise",
        "descriptionAr": "لافتات مخصصة لافتة للنظر لعملك",
        "imageUrl": "/images/services/service-4.jpg",
        "icon": "tag",
        "orderIndex": 4,
    },
]

SAMPLE_LEADS = [
    {
        "name": "Ahmed Hassan",
        "email": "ahmed.hassan@email.com",
        "phone": "+971501234567",
        "message": "I am interested in LED panel installation for our new office space.",
        "serviceInterest": "LED Panel Installation",
        "status": "new",
        "created": "2024-12-15",
    },
    {
        "name": "Marie Dubois",
        "email": "marie.dubois@email.fr",
        "phone": "+971509876543",
        "message": "We would like to inquire about 3D wall decoration options for a new restaurant.",
        "serviceInterest": "3D Wall Decoration",
        "status": "contacted",
        "created": "2024-12-08",
    },
    {
        "name": "John Smith",
        "email": "john.smith@email.com",
        "phone": "+971502345678",
        "message": "Need event decoration services for our corporate annual gala.",
        "serviceInterest": "Event Decoration",
        "source": "referral",
        "status": "converted",
        "created": "2024-11-25",
    },
]

SAMPLE_SETTINGS = [
    {"key": "company_email", "value": "info@artroad.ae", "description": "Company contact email"},
    {"key": "company_phone", "value": "+971 4 123 4567", "description": "Company phone number"},
    {"key": "whatsapp_number", "value": "+971501234567", "description": "WhatsApp contact number"},
    {"key": "address_en", "value": "Dubai Design District, Dubai, UAE", "description": "Company address in English"},
    {"key": "address_fr", "value": "Dubai Design District, Dubaï, EAU", "description": "Company address in French"},
    {"key": "address_ar", "value": "حي دبي للتصميم، دبي، الإمارات", "description": "Company address in Arabic"},
    {
        "key": "meta_title_en",
        "value": "Art Road - LED Panels & 3D Decoration Services in Dubai",
        "description": "SEO meta title in English",
    },
]


def seed_services() -> int:
    if Service.query.count():
        return 0
    for draft in SAMPLE_SERVICES:
        services.create(draft)
    return len(SAMPLE_SERVICES)


def seed_leads() -> int:
    """Sample leads keep their historical status and creation date."""
    if Lead.query.count():
        return 0

    with transactional():
        for sample in SAMPLE_LEADS:
            draft = {k: v for k, v in sample.items() if k != "created"}
            lead = Lead(**clean_draft(leads.fields, draft))
            lead.created_at = datetime.fromisoformat(sample["created"]).replace(tzinfo=timezone.utc)
            db.session.add(lead)

    return len(SAMPLE_LEADS)


def seed_settings() -> int:
    if SiteSetting.query.count():
        return 0
    for item in SAMPLE_SETTINGS:
        upsert_setting(item)
    return len(SAMPLE_SETTINGS)


def seed_all() -> dict:
    return {
        "services": seed_services(),
        "leads": seed_leads(),
        "settings": seed_settings(),
    }

"""
Demo data loaded into a fresh storage at startup: four verified owners and
one listing each.
"""
import logging
from datetime import datetime
from typing import List

from ekrili.models import Language, Property, PropertyCategory, User, UserRole
from ekrili.services.storage import MemoryStorage

logger = logging.getLogger(__name__)

# Placeholder, not a real hash: seeded accounts cannot log in.
SEED_PASSWORD = "hashed_password"

_UNSPLASH = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=600"


def _owner(user_id: int, email: str, first_name: str, last_name: str, phone: str, joined: str) -> User:
    return User(
        id=user_id,
        email=email,
        password=SEED_PASSWORD,
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        role=UserRole.OWNER,
        is_verified=True,
        phone_verified=True,
        language=Language.FR,
        created_at=datetime.fromisoformat(joined),
    )


def sample_users() -> List[User]:
    return [
        _owner(1, "ahmed.khaled@email.com", "Ahmed", "Khaled", "+216 20 123 456", "2023-01-15"),
        _owner(2, "leila.benali@email.com", "Leila", "Benali", "+216 25 789 012", "2023-02-20"),
        _owner(3, "med.tarek@email.com", "Mohamed", "Tarek", "+216 22 345 678", "2023-03-10"),
        _owner(4, "salma.fourati@email.com", "Salma", "Fourati", "+216 26 901 234", "2023-04-05"),
    ]


def sample_properties() -> List[Property]:
    return [
        Property(
            id=1,
            owner_id=1,
            title="Villa Moderne avec Piscine - Sidi Bou Said",
            description=(
                "Magnifique villa moderne avec piscine privée, vue mer exceptionnelle et finitions "
                "haut de gamme. Parfaite pour des vacances en famille ou entre amis."
            ),
            category=PropertyCategory.HOUSE,
            property_type="Villa",
            region="Tunis",
            location="Sidi Bou Said, Tunis",
            gps_coordinates="36.8684°N, 10.3479°E",
            price_per_night="150.00",
            price_per_month="3800.00",
            bedrooms=4,
            bathrooms=3,
            max_guests=8,
            is_furnished=True,
            amenities=["WiFi", "Piscine", "Parking", "Climatisation", "Cuisine", "TV", "Balcon", "Jardin"],
            images=[
                _UNSPLASH.format("photo-1613490493576-7fde63acd811"),
                _UNSPLASH.format("photo-1600596542815-ffad4c1539a9"),
            ],
            is_verified=True,
            is_instant=True,
            is_student_friendly=False,
            min_stay=2,
            max_stay=30,
            house_rules="Non-fumeur, Animaux non autorisés, Fêtes interdites",
            is_active=True,
            rating="4.9",
            review_count=23,
            created_at=datetime(2024, 1, 10),
        ),
        Property(
            id=2,
            owner_id=2,
            title="Appartement Moderne Centre-ville",
            description=(
                "Appartement moderne et bien équipé au cœur de Tunis, proche de toutes commodités "
                "et transports en commun."
            ),
            category=PropertyCategory.APARTMENT,
            property_type="Appartement",
            region="Tunis",
            location="Avenue Habib Bourguiba, Tunis",
            gps_coordinates="36.8065°N, 10.1815°E",
            price_per_night="65.00",
            price_per_month="1750.00",
            bedrooms=2,
            bathrooms=1,
            max_guests=4,
            is_furnished=True,
            amenities=["WiFi", "Climatisation", "Balcon", "Cuisine", "TV", "Ascenseur"],
            images=[
                _UNSPLASH.format("photo-1502672260266-1c1ef2d93688"),
                _UNSPLASH.format("photo-1560448204-e02f11c3d0e2"),
            ],
            is_verified=True,
            is_instant=False,
            is_student_friendly=False,
            min_stay=1,
            max_stay=365,
            house_rules="Non-fumeur, Animaux acceptés avec caution",
            is_active=True,
            rating="4.7",
            review_count=18,
            created_at=datetime(2024, 1, 15),
        ),
        Property(
            id=3,
            owner_id=3,
            title="Matériel Professionnel Événements",
            description=(
                "Location de matériel professionnel pour événements : sonorisation, éclairage, "
                "vidéoprojecteurs. Service de livraison et installation inclus."
            ),
            category=PropertyCategory.EQUIPMENT,
            property_type="Matériel Audio-Visuel",
            region="Sousse",
            location="Zone Industrielle, Sousse",
            gps_coordinates="35.8256°N, 10.6411°E",
            price_per_night="120.00",
            price_per_month="2400.00",
            bedrooms=0,
            bathrooms=0,
            max_guests=0,
            is_furnished=False,
            amenities=["Livraison", "Installation", "Support technique", "Maintenance"],
            images=[
                _UNSPLASH.format("photo-1578662996442-48f60103fc96"),
                _UNSPLASH.format("photo-1581833971358-2c8b550f87b3"),
            ],
            is_verified=True,
            is_instant=True,
            is_student_friendly=False,
            min_stay=1,
            max_stay=30,
            house_rules="Manipulation par professionnels uniquement",
            is_active=True,
            rating="5.0",
            review_count=31,
            created_at=datetime(2024, 1, 20),
        ),
        Property(
            id=4,
            owner_id=4,
            title="Studio Étudiant Proche Université",
            description=(
                "Studio meublé spécialement aménagé pour étudiants, proche du campus universitaire "
                "avec espace de travail et connexion haut débit."
            ),
            category=PropertyCategory.STUDENT,
            property_type="Studio",
            region="Tunis",
            location="Campus Universitaire, Tunis",
            gps_coordinates="36.8434°N, 10.2111°E",
            price_per_night="28.00",
            price_per_month="750.00",
            bedrooms=0,
            bathrooms=1,
            max_guests=1,
            is_furnished=True,
            amenities=["WiFi", "Bureau", "Cuisine équipée", "Chauffage", "Parking vélo"],
            images=[
                _UNSPLASH.format("photo-1555854877-bab0e564b8d5"),
                _UNSPLASH.format("photo-1560448204-e02f11c3d0e2"),
            ],
            is_verified=True,
            is_instant=False,
            is_student_friendly=True,
            min_stay=30,
            max_stay=365,
            house_rules="Étudiants uniquement, Calme respecté après 22h",
            is_active=True,
            rating="4.6",
            review_count=12,
            created_at=datetime(2024, 1, 25),
        ),
    ]


def seed_demo_data(storage: MemoryStorage) -> None:
    """Load the sample owners and listings (ids 1-4) into `storage`."""
    users = sample_users()
    properties = sample_properties()
    storage.load_seed(users=users, properties=properties)
    logger.info(f"Loaded demo data: {len(users)} owners, {len(properties)} listings")

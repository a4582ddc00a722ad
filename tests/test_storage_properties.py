from decimal import Decimal

from ekrili.schemas.property import PropertyFilters
from tests.factories import property_data


def ids(properties):
    return [p.id for p in properties]


def test_create_property_ignores_caller_rating_and_verification(storage):
    prop = storage.create_property({
        **property_data().model_dump(),
        "is_verified": True,
        "rating": "4.8",
        "review_count": 12,
    })
    assert prop.is_verified is False
    assert prop.rating == "0.0"
    assert prop.review_count == 0
    assert prop.id == 1


def test_create_property_defaults(storage):
    prop = storage.create_property(property_data())
    assert prop.is_active is True
    assert (prop.min_stay, prop.max_stay) == (1, 365)
    assert (prop.bedrooms, prop.bathrooms) == (0, 0)
    assert prop.amenities == []


def test_price_is_normalised_to_decimal_string():
    assert property_data(price_per_night=95).price_per_night == "95.00"
    assert property_data(price_per_night="80.5").price_per_night == "80.50"


def test_get_property_is_idempotent(storage):
    prop = storage.create_property(property_data())
    assert storage.get_property(prop.id) == storage.get_property(prop.id)


def test_list_active_properties_skips_inactive(storage):
    storage.create_property(property_data())
    storage.create_property(property_data(is_active=False))
    assert ids(storage.list_active_properties()) == [1]
    assert ids(storage.list_active_properties(PropertyFilters())) == [1]


def test_owner_listing_includes_inactive(storage):
    storage.create_property(property_data(owner_id=3))
    storage.create_property(property_data(owner_id=3, is_active=False))
    storage.create_property(property_data(owner_id=4))
    assert ids(storage.list_all_properties_for_owner(3)) == [1, 2]


def test_category_and_inclusive_price_range(storage):
    storage.create_property(property_data(price_per_night="100.00"))
    storage.create_property(property_data(price_per_night="99.99"))
    storage.create_property(property_data(price_per_night="200.00"))
    storage.create_property(property_data(price_per_night="150.00", category="apartment"))
    storage.create_property(property_data(price_per_night="200.01"))
    storage.create_property(property_data(price_per_night="120.00", is_active=False))

    filters = PropertyFilters(category="house", min_price=100, max_price=200)
    assert ids(storage.list_active_properties(filters)) == [1, 3]


def test_price_comparison_is_numeric_not_lexical(storage):
    storage.create_property(property_data(price_per_night="9.00"))
    storage.create_property(property_data(price_per_night="1000.00"))
    assert ids(storage.list_active_properties(PropertyFilters(min_price=Decimal("50")))) == [2]


def test_explicit_false_filter_is_applied(storage):
    storage.create_property(property_data(is_instant=True))
    storage.create_property(property_data(is_instant=False))
    assert ids(storage.list_active_properties(PropertyFilters(is_instant=False))) == [2]
    assert ids(storage.list_active_properties(PropertyFilters(is_verified=False))) == [1, 2]
    assert ids(storage.list_active_properties(PropertyFilters(is_verified=True))) == []


def test_update_property_is_shallow_merge(storage):
    prop = storage.create_property(property_data(amenities=["WiFi"]))
    updated = storage.update_property(prop.id, {"is_active": False, "amenities": ["Piscine"]})
    assert updated.is_active is False
    assert updated.amenities == ["Piscine"]
    assert updated.title == prop.title
    assert storage.update_property(99, {"title": "x"}) is None


def test_update_property_keeps_record_id(storage):
    first = storage.create_property(property_data())
    second = storage.create_property(property_data())
    updated = storage.update_property(first.id, {"id": second.id, "title": "Renamed"})
    assert updated.id == first.id
    assert storage.get_property(first.id).id == first.id
    assert storage.get_property(first.id).title == "Renamed"
    assert storage.get_property(second.id).title == second.title


def test_delete_property(storage):
    prop = storage.create_property(property_data())
    assert storage.delete_property(prop.id) is True
    assert storage.get_property(prop.id) is None
    assert storage.delete_property(prop.id) is False


def test_ids_are_not_reused_after_delete(storage):
    storage.create_property(property_data())
    storage.delete_property(1)
    assert storage.create_property(property_data()).id == 2


def test_seed_student_friendly_filter(seeded_storage):
    result = seeded_storage.list_active_properties(PropertyFilters(is_student_friendly=True))
    assert ids(result) == [4]
    assert result[0].title == "Studio Étudiant Proche Université"


def test_seed_region_filter(seeded_storage):
    assert ids(seeded_storage.list_active_properties(PropertyFilters(region="Tunis"))) == [1, 2, 4]
    assert ids(seeded_storage.list_active_properties(PropertyFilters(region="Sousse"))) == [3]


def test_seed_categories_and_counters(seeded_storage):
    categories = [p.category.value for p in seeded_storage.list_active_properties()]
    assert categories == ["house", "apartment", "equipment", "student"]
    assert seeded_storage.create_property(property_data()).id == 5

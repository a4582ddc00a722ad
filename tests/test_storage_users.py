from datetime import datetime

from tests.factories import user_data


def test_create_user_assigns_ids_from_one(storage):
    first = storage.create_user(user_data("a@ekrili.tn"))
    second = storage.create_user(user_data("b@ekrili.tn"))
    assert (first.id, second.id) == (1, 2)


def test_create_user_forces_verification_flags(storage):
    user = storage.create_user({
        **user_data().model_dump(),
        "is_verified": True,
        "phone_verified": True,
    })
    assert user.is_verified is False
    assert user.phone_verified is False
    assert user.created_at == datetime(2024, 6, 1, 12, 1)


def test_create_user_returns_password(storage):
    user = storage.create_user(user_data(password="hash-value"))
    assert user.password == "hash-value"


def test_get_user_missing_returns_none(storage):
    assert storage.get_user(42) is None


def test_get_user_by_email_is_exact_and_case_sensitive(storage):
    storage.create_user(user_data("Nour@ekrili.tn"))
    assert storage.get_user_by_email("Nour@ekrili.tn").id == 1
    assert storage.get_user_by_email("nour@ekrili.tn") is None


def test_update_user_merges_fields(storage):
    user = storage.create_user(user_data(phone="+216 20 000 000"))
    updated = storage.update_user(user.id, {"language": "ar", "avatar": "https://cdn/a.png"})
    assert updated.language == "ar"
    assert updated.avatar == "https://cdn/a.png"
    assert updated.phone == "+216 20 000 000"
    assert storage.get_user(user.id) == updated


def test_update_user_missing_returns_none(storage):
    assert storage.update_user(7, {"first_name": "X"}) is None


def test_returned_records_are_copies(storage):
    user = storage.create_user(user_data())
    user.first_name = "Changed"
    assert storage.get_user(user.id).first_name == "Karim"

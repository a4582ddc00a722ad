def test_duplicate_favorites_are_distinct_records(storage):
    first = storage.add_favorite({"user_id": 5, "property_id": 1})
    second = storage.add_favorite({"user_id": 5, "property_id": 1})
    assert first.id != second.id
    assert len(storage.list_favorites_by_user(5)) == 2
    assert storage.is_favorite(5, 1) is True


def test_remove_favorite_removes_first_match_only(storage):
    storage.add_favorite({"user_id": 5, "property_id": 1})
    storage.add_favorite({"user_id": 5, "property_id": 1})

    assert storage.remove_favorite(5, 1) is True
    remaining = storage.list_favorites_by_user(5)
    assert [f.id for f in remaining] == [2]
    assert storage.is_favorite(5, 1) is True


def test_remove_missing_favorite_is_noop(storage):
    storage.add_favorite({"user_id": 5, "property_id": 1})
    assert storage.remove_favorite(5, 2) is False
    assert storage.remove_favorite(6, 1) is False
    assert len(storage.list_favorites_by_user(5)) == 1


def test_is_favorite_false_when_absent(storage):
    assert storage.is_favorite(1, 1) is False


def test_favorites_by_user(storage):
    storage.add_favorite({"user_id": 5, "property_id": 1})
    storage.add_favorite({"user_id": 6, "property_id": 1})
    storage.add_favorite({"user_id": 5, "property_id": 3})
    assert [f.property_id for f in storage.list_favorites_by_user(5)] == [1, 3]

import pytest

from backend.db.repo import PropertyRepository, get_repository, reset_repository
from backend.db.seed import load_seed_properties
from backend.models.property import PropertyDraft


def _draft(**overrides) -> PropertyDraft:
    values = {"title": "Corner Lot", "price": 250000, "bedrooms": 3, "bathrooms": 2, "sqft": 1400}
    values.update(overrides)
    return PropertyDraft(**values)


def test_seed_data_loads_twelve_listings():
    properties = load_seed_properties()
    assert [prop.id for prop in properties] == list(range(1, 13))
    assert [prop.id for prop in properties if prop.is_featured] == [1, 2, 3]
    first = properties[0]
    assert first.title == "Modern Downtown Apartment"
    assert first.features[0] == "Hardwood Floors"
    assert first.image_urls
    assert all(prop.created_at == prop.updated_at for prop in properties)


def test_create_on_empty_repository_assigns_id_one():
    repo = PropertyRepository()
    created = repo.create(_draft())
    assert created.id == 1
    assert created.created_at == created.updated_at
    assert repo.create(_draft()).id == 2


def test_create_uses_max_id_plus_one():
    repo = PropertyRepository()
    repo.create(_draft())
    second = repo.create(_draft())
    repo.delete(1)
    assert repo.create(_draft()).id == second.id + 1


def test_update_overwrites_fields_and_keeps_identity():
    repo = PropertyRepository()
    created = repo.create(_draft())
    updated = repo.update(created.id, _draft(title="Corner Lot (reduced)", price=-5, features=["Pool", "Pool"]))
    assert updated.title == "Corner Lot (reduced)"
    assert updated.price == -5
    assert updated.features == ["Pool", "Pool"]
    assert updated.id == created.id
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


def test_repeated_updates_strictly_advance_timestamp():
    repo = PropertyRepository()
    created = repo.create(_draft())
    first = repo.update(created.id, _draft())
    second = repo.update(created.id, _draft())
    assert second.updated_at > first.updated_at


def test_update_and_delete_unknown_ids():
    repo = PropertyRepository()
    assert repo.update(42, _draft()) is None
    assert repo.delete(42) is False
    assert repo.get_by_id(42) is None


def test_returned_records_are_copies():
    repo = PropertyRepository()
    created = repo.create(_draft())
    created.title = "Mutated"
    created.features.append("Sneaky")
    stored = repo.get_by_id(created.id)
    assert stored.title == "Corner Lot"
    assert stored.features == []


def test_repository_singleton_resets():
    reset_repository()
    repo = get_repository()
    assert get_repository() is repo
    assert len(repo) == 12
    reset_repository()
    assert get_repository() is not repo
    reset_repository()


def test_seed_file_without_required_columns_is_rejected(tmp_path):
    broken = tmp_path / "broken.csv"
    broken.write_text("id,title\n1,Shed\n")
    with pytest.raises(ValueError, match="price"):
        load_seed_properties(str(broken))


def test_seed_rows_default_blank_cells(tmp_path):
    sparse = tmp_path / "sparse.csv"
    sparse.write_text("id,title,price,address,image_url,status\n4,Plot,,Lane End,/plot.jpg,\n")
    [prop] = load_seed_properties(str(sparse))
    assert prop.id == 4
    assert prop.price == 0
    assert prop.status == "Available"
    assert prop.image_urls == ["/plot.jpg"]
    assert prop.features == []


def test_update_leaves_gallery_alone():
    repo = PropertyRepository()
    created = repo.create(_draft(image_urls=["/a.jpg", "/b.jpg"]))
    updated = repo.update(created.id, _draft(image_url="/c.jpg", image_urls=[]))
    assert updated.image_url == "/c.jpg"
    assert updated.image_urls == ["/a.jpg", "/b.jpg"]

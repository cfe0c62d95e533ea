from datetime import date

import pytest

from gallery.collection import Gallery
from gallery.exceptions import InvalidIndexError, SaveError
from gallery.exhibitions import Painting, PaintingFactory, Sculpture
from gallery.storage import ExhibitionStore


def reload(store):
    gallery, warning = Gallery.load(ExhibitionStore(store.path))
    assert warning is None
    return gallery


def test_load_missing_file_is_empty_without_warning(store):
    gallery, warning = Gallery.load(store)
    assert len(gallery) == 0
    assert warning is None


def test_load_corrupt_file_gives_empty_gallery_and_warning(store):
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text("{broken", encoding="utf-8")

    gallery, warning = Gallery.load(store)

    assert len(gallery) == 0
    assert str(store.path) in warning


def test_add_saves_immediately(store):
    gallery = Gallery(store)
    gallery.add(Painting("Starry Night", "Vincent", 1889, 7850.0))

    assert reload(store).exhibitions == (Painting("Starry Night", "Vincent", 1889, 7850.0),)


def test_get_is_one_based(store, mixed_exhibitions):
    gallery = Gallery(store, mixed_exhibitions)
    assert gallery.get(1) is mixed_exhibitions[0]
    assert gallery.get(3) is mixed_exhibitions[2]


@pytest.mark.parametrize("index", [0, -1, 4, 100, "1", None, True])
def test_invalid_index(store, mixed_exhibitions, index):
    gallery = Gallery(store, mixed_exhibitions)

    with pytest.raises(InvalidIndexError) as excinfo:
        gallery.get(index)

    assert excinfo.value.size == 3
    assert isinstance(excinfo.value, IndexError)


def test_invalid_index_does_not_mutate_or_save(store, mixed_exhibitions):
    gallery = Gallery(store, mixed_exhibitions)

    with pytest.raises(InvalidIndexError):
        gallery.delete(4)
    with pytest.raises(InvalidIndexError):
        gallery.sell(0)

    assert gallery.exhibitions == tuple(mixed_exhibitions)
    assert not store.path.exists()


def test_sell_removes_and_saves(store, mixed_exhibitions):
    gallery = Gallery(store, mixed_exhibitions)

    narrative = gallery.sell(2, 9999)

    assert narrative == 'Sculpture "The Thinker" sold for $9,999.00.'
    assert [e.title for e in gallery] == ["Starry Night", "Water Lilies"]
    assert reload(store).exhibitions == gallery.exhibitions


def test_sell_without_custom_price_uses_stored_price(store, mixed_exhibitions):
    gallery = Gallery(store, mixed_exhibitions)
    assert gallery.sell(1) == 'Painting "Starry Night" sold for $7,850.00.'


def test_delete_returns_removed_record(store, mixed_exhibitions):
    gallery = Gallery(store, mixed_exhibitions)

    removed = gallery.delete(3)

    assert removed == Painting("Water Lilies", "Monet", 1906, 6900.5)
    assert [type(e) for e in reload(store)] == [Painting, Sculpture]


def test_gallery_copies_initial_list(store, mixed_exhibitions):
    gallery = Gallery(store, mixed_exhibitions)
    gallery.delete(1)
    assert len(mixed_exhibitions) == 3


def test_save_error_keeps_memory_and_next_save_retries(tmp_path):
    target = tmp_path / "collection.json"
    target.mkdir()
    gallery = Gallery(ExhibitionStore(target))

    with pytest.raises(SaveError):
        gallery.add(Painting("Starry Night", "Vincent", 1889, 7850.0))
    assert len(gallery) == 1

    target.rmdir()
    gallery.add(Sculpture("David", "Michelangelo", 1504, 16600.0))

    assert [e.title for e in reload(gallery.store)] == ["Starry Night", "David"]


def test_full_cycle(store):
    year = 1889
    painting = PaintingFactory().create("Starry Night", "Vincent", year)
    assert painting.price == 1000 + (date.today().year - year) * 50

    Gallery(store).add(painting)

    reloaded = reload(store)
    assert len(reloaded) == 1
    first = reloaded.get(1)
    assert isinstance(first, Painting)
    assert first == painting

    assert "$2,000.00" in first.sell(2000)

    reloaded.delete(1)
    assert len(reload(store)) == 0


def test_mixed_variants_preserved(store):
    Gallery(store, [
        Painting("A", "a", 1900, 1.0),
        Sculpture("B", "b", 1901, 2.0),
        Painting("C", "c", 1902, 3.0),
    ]).save()

    assert [e.get_type_name() for e in reload(store)] == ["Painting", "Sculpture", "Painting"]

"""Tests for the StoragePlace entity."""

import pytest
from delivery.courier.courier import StoragePlace
from delivery.shared.errors import DeliveryError, ErrorKind


def _make_place(volume=10):
    return StoragePlace.create("Trunk", volume)


class TestStoragePlaceCreation:
    def test_create(self):
        place = _make_place(20)
        assert place.name == "Trunk"
        assert place.total_volume == 20
        assert place.order_id is None
        assert not place.is_occupied()

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(DeliveryError) as exc:
            StoragePlace.create(name, 10)
        assert exc.value.kind == ErrorKind.INVALID

    @pytest.mark.parametrize("volume", [0, -1])
    def test_non_positive_volume_rejected(self, volume):
        with pytest.raises(DeliveryError) as exc:
            StoragePlace.create("Trunk", volume)
        assert exc.value.kind == ErrorKind.INVALID_VOLUME


class TestCanStore:
    def test_fitting_volume_passes(self):
        place = _make_place(10)
        place.can_store(10)
        assert not place.is_occupied()

    @pytest.mark.parametrize("volume", [0, -5, 11])
    def test_volume_outside_capacity_rejected(self, volume):
        with pytest.raises(DeliveryError) as exc:
            _make_place(10).can_store(volume)
        assert exc.value.kind == ErrorKind.INVALID_VOLUME

    def test_fits_mirrors_can_store(self):
        place = _make_place(10)
        assert place.fits(5)
        assert not place.fits(11)
        place.store("ord-1", 5)
        assert not place.fits(1)


class TestStoreAndClear:
    def test_store_occupies_place(self):
        place = _make_place()
        place.store("ord-1", 5)
        assert place.is_occupied()
        assert place.order_id == "ord-1"

    @pytest.mark.parametrize("volume", [1, 10, 11, 0])
    def test_occupied_place_rejects_any_volume(self, volume):
        place = _make_place(10)
        place.store("ord-1", 5)
        with pytest.raises(DeliveryError) as exc:
            place.can_store(volume)
        assert exc.value.kind == ErrorKind.OCCUPIED
        with pytest.raises(DeliveryError) as exc:
            place.store("ord-2", volume)
        assert exc.value.kind == ErrorKind.OCCUPIED
        assert place.order_id == "ord-1"

    def test_store_too_large_leaves_place_free(self):
        place = _make_place(5)
        with pytest.raises(DeliveryError):
            place.store("ord-1", 6)
        assert not place.is_occupied()

    def test_clear_frees_place(self):
        place = _make_place()
        place.store("ord-1", 5)
        place.clear("ord-1")
        assert not place.is_occupied()

    def test_clear_with_other_order_id_fails_and_keeps_order(self):
        place = _make_place()
        place.store("ord-1", 5)
        with pytest.raises(DeliveryError) as exc:
            place.clear("ord-2")
        assert exc.value.kind == ErrorKind.INVALID
        assert place.order_id == "ord-1"

    def test_clear_empty_place_fails(self):
        with pytest.raises(DeliveryError) as exc:
            _make_place().clear("ord-1")
        assert exc.value.kind == ErrorKind.INVALID

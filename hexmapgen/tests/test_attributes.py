"""Tests for attribute stores."""
import pytest
from hexmapgen.attributes import AttributeAlreadySetError, AttributeStore, MissingAttributeError
from hexmapgen.edges import Edge
from hexmapgen.hex_coords import Hex


@pytest.fixture
def elevation():
    return AttributeStore("elevation")


@pytest.fixture
def coastline():
    return AttributeStore("coastline")


class TestHexKeys:
    def test_set_and_get(self, elevation):
        elevation[Hex(1, 2)] = 0.25
        assert elevation[Hex(1, 2)] == 0.25
        assert elevation.get(Hex(1, 2)) == 0.25

    def test_equal_keys_share_value(self, elevation):
        elevation.set(Hex(3, -1), 0.5)
        assert Hex(3, -1) in elevation
        assert elevation.has(Hex(3, -1))

    def test_zero_is_not_absent(self, elevation):
        elevation[Hex(0, 0)] = 0.0
        assert Hex(0, 0) in elevation
        assert elevation[Hex(0, 0)] == 0.0

    def test_missing_key_raises(self, elevation):
        with pytest.raises(MissingAttributeError) as exc_info:
            elevation[Hex(9, 9)]
        assert exc_info.value.store == "elevation"
        assert exc_info.value.key == Hex(9, 9)
        assert "elevation" in str(exc_info.value)

    def test_missing_key_is_key_error(self, elevation):
        with pytest.raises(KeyError):
            elevation.get(Hex(9, 9))

    def test_write_twice_raises(self, elevation):
        elevation[Hex(0, 0)] = 0.1
        with pytest.raises(AttributeAlreadySetError):
            elevation[Hex(0, 0)] = 0.2
        assert elevation[Hex(0, 0)] == 0.1

    def test_delete_then_set(self, elevation):
        elevation[Hex(0, 0)] = 0.1
        del elevation[Hex(0, 0)]
        assert Hex(0, 0) not in elevation
        elevation.set(Hex(0, 0), 0.2)
        assert elevation[Hex(0, 0)] == 0.2

    def test_delete_missing_raises(self, elevation):
        with pytest.raises(MissingAttributeError):
            elevation.delete(Hex(0, 0))

    def test_len_and_iteration(self, elevation):
        elevation[Hex(0, 0)] = 1.0
        elevation[Hex(1, 0)] = 2.0
        assert len(elevation) == 2
        assert set(elevation) == {Hex(0, 0), Hex(1, 0)}
        assert dict(elevation.items()) == {Hex(0, 0): 1.0, Hex(1, 0): 2.0}


class TestEdgeKeys:
    def test_both_descriptions_resolve(self, coastline):
        coastline[Edge(Hex(0, 0), 3)] = True
        assert coastline[Edge(Hex(-1, 0), 0)] is True

    def test_false_is_not_absent(self, coastline):
        coastline[Edge(Hex(0, 0), 1)] = False
        assert Edge(Hex(1, -1), 4) in coastline
        assert coastline[Edge(Hex(1, -1), 4)] is False

    def test_second_description_counts_as_rewrite(self, coastline):
        coastline[Edge(Hex(0, 0), 0)] = True
        with pytest.raises(AttributeAlreadySetError):
            coastline[Edge(Hex(1, 0), 3)] = False

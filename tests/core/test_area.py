"""
Tests for Area, including property-based tests using Hypothesis
"""

from hypothesis import given, settings
from gridwire.core.region import Region, coverage
from gridwire.core.area import Area
from gridwire.core.merge import regions_contain
from tests.conftest import region_lists, window_cells, assert_no_overlap


class TestAreaBasic:
    """Basic unit tests for Area"""

    def test_empty_area(self, empty_area):
        """Test that an empty Area occupies nothing"""
        assert not empty_area.is_occupied(0, 0)
        assert empty_area.positive_regions() == ()
        assert empty_area.negative_regions() == ()
        assert empty_area.bounds() is None
        assert len(empty_area) == 0

    def test_initial_regions_are_merged(self):
        """Test seeding the positive channel from the constructor"""
        area = Area([Region(0, 0, 3, 2), Region(0, 2, 3, 1)])

        assert area.positive_regions() == (Region(0, 0, 3, 3),)
        assert area.is_occupied(2, 2)
        assert not area.is_occupied(3, 0)

    def test_doughnut(self, doughnut_area):
        """Test a square with a hole punched in the middle"""
        assert doughnut_area.is_occupied(0, 0)
        assert doughnut_area.is_occupied(4, 4)
        assert doughnut_area.is_occupied(0, 2)
        assert not doughnut_area.is_occupied(2, 2)
        assert not doughnut_area.is_occupied(1, 1)
        assert not doughnut_area.is_occupied(3, 3)
        assert not doughnut_area.is_occupied(5, 5)

    def test_positive_regions_ignore_holes(self, doughnut_area):
        """Test that positive_regions reports obstacles without holes applied"""
        assert doughnut_area.positive_regions() == (Region(0, 0, 5, 5),)
        assert doughnut_area.negative_regions() == (Region(1, 1, 3, 3),)

    def test_add_and_subtract_chain(self):
        """Test that mutators return the Area itself"""
        area = Area()
        assert area.add([Region(0, 0)]) is area
        assert area.subtract([Region(0, 0)]) is area
        assert not area.is_occupied(0, 0)

    def test_add_empty_is_noop(self):
        """Test that adding or subtracting nothing leaves channels alone"""
        area = Area([Region(1, 1, 2, 2)])
        before = area.positive_regions()

        area.add([]).subtract([])

        assert area.positive_regions() == before
        assert area.negative_regions() == ()

    def test_add_is_idempotent(self):
        """Test that re-adding covered cells changes no coverage"""
        area = Area([Region(0, 0, 4, 4)])
        before = coverage(area.positive_regions())

        area.add([Region(1, 1, 2, 2)])
        once = area.positive_regions()
        area.add([Region(0, 0, 4, 4)])

        assert coverage(area.positive_regions()) == before
        assert_no_overlap(area.positive_regions())

        # Inner edges split the block into strips; merging again keeps them
        area.add(once)
        assert area.positive_regions() == once

    def test_hole_outside_obstacles_has_no_effect(self):
        """Test that a hole over empty space leaves occupancy unchanged"""
        area = Area([Region(0, 0, 2, 2)]).subtract([Region(5, 5, 3, 3)])

        assert area.is_occupied(1, 1)
        assert not area.is_occupied(6, 6)

    def test_obstacle_added_after_hole_stays_hollow(self):
        """Test that holes keep applying to later positive regions"""
        area = Area().subtract([Region(2, 2)])
        area.add([Region(0, 0, 5, 5)])

        assert not area.is_occupied(2, 2)
        assert area.is_occupied(2, 3)

    def test_contains_operator(self, doughnut_area):
        assert (0, 0) in doughnut_area
        assert (2, 2) not in doughnut_area

    def test_bounds(self):
        area = Area([Region(2, 2, 2, 2), Region(7, 0)])
        assert area.bounds() == Region(2, 0, 6, 4)

    def test_copy_is_independent(self, doughnut_area):
        """Test that mutating a copy leaves the original untouched"""
        clone = doughnut_area.copy()
        clone.add([Region(10, 10)])
        clone.subtract([Region(0, 0)])

        assert clone.is_occupied(10, 10)
        assert not doughnut_area.is_occupied(10, 10)
        assert doughnut_area.is_occupied(0, 0)

    def test_repr(self, doughnut_area):
        assert repr(doughnut_area) == "Area(positive=1, negative=1)"


class TestAreaUnion:
    """Tests for Area.union"""

    def test_union_combines_positive_channels(self):
        a = Area([Region(0, 0, 2, 2)])
        b = Area([Region(2, 0, 2, 2)])

        combined = Area.union(a, b)

        assert combined.is_occupied(0, 0)
        assert combined.is_occupied(3, 1)
        assert coverage(combined.positive_regions()) == coverage([Region(0, 0, 4, 2)])

    def test_union_is_pure(self):
        """Test that the operands are not modified"""
        a = Area([Region(0, 0)])
        b = Area([Region(5, 5)]).subtract([Region(5, 5)])

        Area.union(a, b)

        assert a.positive_regions() == (Region(0, 0),)
        assert a.negative_regions() == ()
        assert b.negative_regions() == (Region(5, 5),)

    def test_union_keeps_both_doughnut_holes(self, doughnut_area):
        other = Area([Region(10, 0, 3, 3)]).subtract([Region(11, 1)])

        combined = Area.union(doughnut_area, other)

        assert not combined.is_occupied(2, 2)
        assert not combined.is_occupied(11, 1)
        assert combined.is_occupied(10, 0)
        assert combined.is_occupied(0, 0)

    def test_union_hole_applies_across_operands(self):
        """Test that one operand's hole clears the other operand's obstacle"""
        solid = Area([Region(0, 0, 3, 3)])
        hollow = Area([Region(10, 10)]).subtract([Region(1, 1)])

        combined = Area.union(solid, hollow)

        assert solid.is_occupied(1, 1)
        assert not combined.is_occupied(1, 1)
        assert combined.is_occupied(0, 0)


class TestAreaPropertyBased:
    """Property-based tests using Hypothesis"""

    @given(region_lists())
    @settings(max_examples=75, deadline=None)
    def test_property_merged_matches_raw_input(self, regions):
        """Property: occupancy of the merged Area equals the raw input list"""
        area = Area(regions)

        for x, y in window_cells():
            assert area.is_occupied(x, y) == regions_contain(regions, x, y)

    @given(region_lists())
    @settings(max_examples=75, deadline=None)
    def test_property_readding_positive_regions(self, regions):
        """Property: rebuilding from positive_regions gives identical occupancy"""
        area = Area(regions)
        rebuilt = Area().add(area.positive_regions())

        assert rebuilt.positive_regions() == area.positive_regions()
        for x, y in window_cells():
            assert rebuilt.is_occupied(x, y) == area.is_occupied(x, y)

    @given(region_lists(), region_lists())
    @settings(max_examples=75, deadline=None)
    def test_property_channels_never_overlap(self, positive, negative):
        """Property: no two regions in the same channel overlap"""
        area = Area(positive).subtract(negative)

        assert_no_overlap(area.positive_regions())
        assert_no_overlap(area.negative_regions())

    @given(region_lists(), region_lists())
    @settings(max_examples=75, deadline=None)
    def test_property_occupancy_is_set_difference(self, positive, negative):
        """Property: occupied cells are positive cells minus negative cells"""
        area = Area(positive).subtract(negative)
        expected = coverage(positive) - coverage(negative)

        for x, y in window_cells():
            assert area.is_occupied(x, y) == ((x, y) in expected)

    @given(region_lists(), region_lists())
    @settings(max_examples=50, deadline=None)
    def test_property_union_positive_channel(self, first, second):
        """Property: union covers both operands' positive cells"""
        combined = Area.union(Area(first), Area(second))
        assert coverage(combined.positive_regions()) == coverage(first + second)

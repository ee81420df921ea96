from datetime import datetime, timedelta, timezone

from switchyard.bounds import Bounds, ComponentBounds, VecBounds

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def two_zone():
    return VecBounds([Bounds(-30.0, -10.0), Bounds(10.0, 30.0)])


def test_contains_and_clamp():
    vb = two_zone()
    assert vb.contains(-20.0)
    assert not vb.contains(0.0)
    assert vb.clamp(-20.0) == -20.0
    assert vb.clamp(0.0) == -10.0
    assert vb.clamp(100.0) == 30.0


def test_rated_intersected_with_augmentations():
    cb = ComponentBounds.from_rated(-100.0, 100.0)
    cb.add_augmentation(datetime.now(timezone.utc), VecBounds.single(-50.0, 50.0), timedelta(seconds=60))
    eff = cb.effective()
    assert len(eff) == 1
    assert eff[0].lower == -50.0
    assert eff[0].upper == 50.0


def test_constructor_sorts_by_lower():
    vb = VecBounds([Bounds(10.0, 30.0), Bounds(-30.0, -10.0), Bounds(None, -50.0)])
    assert [b.lower for b in vb] == [None, -30.0, 10.0]


def test_clamp_below_everything_goes_to_first_lower():
    assert two_zone().clamp(-100.0) == -30.0


def test_clamp_tie_goes_to_previous_upper():
    vb = VecBounds([Bounds(-20.0, -10.0), Bounds(10.0, 20.0)])
    assert vb.clamp(0.0) == -10.0


def test_clamp_closer_to_upper_zone():
    assert two_zone().clamp(8.0) == 10.0


def test_clamp_empty_is_identity():
    assert VecBounds([]).clamp(123.0) == 123.0


def test_str_formatting():
    assert str(two_zone()) == "[-30, -10], [10, 30]"
    assert str(VecBounds([Bounds(1.5, None)])) == "[1.5, *]"
    assert str(VecBounds([])) == "[]"


def test_sum_single_adds_edges():
    total = VecBounds.sum_single([VecBounds.single(-10.0, 10.0), VecBounds([]), VecBounds.single(-5.0, 20.0)])
    assert total == VecBounds.single(-15.0, 30.0)


def test_sum_single_of_nothing_is_empty():
    assert len(VecBounds.sum_single([])) == 0
    assert len(VecBounds.sum_single([VecBounds([])])) == 0


def test_intersect_produces_split_zones():
    result = VecBounds.single(-100.0, 100.0).intersect(
        VecBounds([Bounds(-50.0, -10.0), Bounds(10.0, 50.0)])
    )
    assert result == VecBounds([Bounds(-50.0, -10.0), Bounds(10.0, 50.0)])


def test_intersect_disjoint_is_empty():
    result = VecBounds.single(0.0, 10.0).intersect(VecBounds.single(20.0, 30.0))
    assert len(result) == 0
    assert not result.contains(5.0)


def test_intersect_merges_overlapping_pieces():
    left = VecBounds([Bounds(0.0, 10.0), Bounds(5.0, 20.0)])
    result = left.intersect(VecBounds.single(-100.0, 100.0))
    assert result == VecBounds.single(0.0, 20.0)


def test_intersect_with_half_open():
    result = VecBounds.single(-10.0, 10.0).intersect(VecBounds([Bounds(None, 5.0)]))
    assert result == VecBounds.single(-10.0, 5.0)


def test_augmentation_expires_strictly_after_lifetime():
    cb = ComponentBounds.from_rated(-100.0, 100.0)
    cb.add_augmentation(T0, VecBounds.single(-50.0, 50.0), timedelta(seconds=60))
    cb.drop_expired(T0 + timedelta(seconds=60))
    assert cb.effective() == VecBounds.single(-50.0, 50.0)
    cb.drop_expired(T0 + timedelta(seconds=61))
    assert cb.effective() == VecBounds.single(-100.0, 100.0)


def test_multiple_augmentations_narrow_sequentially():
    cb = ComponentBounds.from_rated(-100.0, 100.0)
    cb.add_augmentation(T0, VecBounds.single(-50.0, 80.0), 60)
    cb.add_augmentation(T0, VecBounds.single(-70.0, 20.0), 60)
    assert cb.effective() == VecBounds.single(-50.0, 20.0)
    assert cb.contains(0.0)
    assert not cb.contains(30.0)
    assert cb.clamp(30.0) == 20.0


def test_rated_edges_and_set_rated():
    cb = ComponentBounds.from_rated(-5.0, 7.0)
    assert (cb.rated_lower(), cb.rated_upper()) == (-5.0, 7.0)
    cb.set_rated(-1.0, 2.0)
    assert (cb.rated_lower(), cb.rated_upper()) == (-1.0, 2.0)
    empty = ComponentBounds(VecBounds([]))
    assert (empty.rated_lower(), empty.rated_upper()) == (0.0, 0.0)
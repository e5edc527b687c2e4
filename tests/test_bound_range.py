import pytest

from kvclient.bound_range import BoundRange, KeyRange
from kvclient.key import Bound, Key


def test_range_from_str_and_key_agree():
    explicit = BoundRange.range(Key("Rust"), Key("TiKV"))
    assert explicit == BoundRange.range("Rust", "TiKV")


def test_inclusive_bounds():
    r = BoundRange.inclusive("Rust", "TiKV")
    assert r == BoundRange.from_bounds(Bound.included("Rust"), Bound.included("TiKV"))


def test_range_from_bounds():
    r = BoundRange.range_from("Rust")
    assert r == BoundRange.from_bounds(Bound.included("Rust"), Bound.unbounded())


@pytest.mark.parametrize(
    "bound_range, expected",
    [
        (BoundRange.range("a", "z"), (Key("a"), Key("z"))),
        (BoundRange.inclusive("a", "z"), (Key("a"), Key("z\0"))),
        (BoundRange.range_from("a"), (Key("a"), None)),
        (BoundRange.range_to("z"), (Key(""), Key("z"))),
        (BoundRange.range_to_inclusive("z"), (Key(""), Key("z\0"))),
        (BoundRange.full(), (Key(""), None)),
    ],
)
def test_to_keys(bound_range, expected):
    assert bound_range.to_keys() == expected


def test_excluded_start_gets_zero():
    r = BoundRange.from_bounds(Bound.excluded("a"), Bound.unbounded())
    assert r.to_keys() == (Key("a\0"), None)


def test_from_keys_trailing_zero():
    assert BoundRange.from_keys("a", "z\0") == BoundRange.inclusive("a", "z")
    assert BoundRange.from_keys("a\0", "z") == BoundRange.from_bounds(
        Bound.excluded("a"), Bound.excluded("z")
    )
    assert BoundRange.from_keys("a") == BoundRange.range_from("a")


@pytest.mark.parametrize(
    "bound_range",
    [
        BoundRange.range("a", "z"),
        BoundRange.inclusive("a", "z"),
        BoundRange.from_bounds(Bound.excluded("a"), Bound.included("z")),
    ],
)
def test_key_range_round_trip(bound_range):
    assert BoundRange.from_key_range(bound_range.to_key_range()) == bound_range


def test_key_range_open_end():
    r = BoundRange.range_from("a")
    kr = r.to_key_range()
    assert kr == KeyRange(b"a", b"")
    back = BoundRange.from_key_range(kr)
    assert back.end_bound() == Bound.unbounded()
    assert back.start_bound() == r.start_bound()


def test_full_key_range():
    assert BoundRange.full().to_key_range() == KeyRange(b"", b"")


def test_end_bound_empty_key_is_unbounded():
    assert BoundRange.range("a", "").end_bound() == Bound.unbounded()
    assert BoundRange.inclusive("a", "").end_bound() == Bound.unbounded()
    assert BoundRange.range("a", "z").end_bound() == Bound.excluded("z")


def test_start_bound():
    assert BoundRange.range_to("z").start_bound() == Bound.unbounded()
    assert BoundRange.range("a", "z").start_bound() == Bound.included("a")


def test_scan_keys_cover_inclusive_end():
    start, end = BoundRange.inclusive("k1", "k2").to_keys()
    assert start <= Key("k1") < end
    assert Key("k2") < end
    assert Key("k3") > end
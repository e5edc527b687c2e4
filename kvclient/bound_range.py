"""Key ranges with inclusive, exclusive or open ends."""

from __future__ import annotations

from dataclasses import dataclass

from kvclient.key import Bound, BoundKind, Key, KeyLike


@dataclass(frozen=True)
class KeyRange:
    """The wire form of a range: start and end keys, an empty end meaning unbounded."""

    start_key: bytes = b""
    end_key: bytes = b""


@dataclass(frozen=True)
class BoundRange:
    """A range of keys.

    An unbounded lower end means the empty key, the smallest key there is.
    An empty key used as the upper end means the range is unbounded above.
    """

    lower: Bound
    upper: Bound

    @classmethod
    def range(cls, start: KeyLike, end: KeyLike) -> BoundRange:
        """start inclusive, end exclusive."""
        return cls(Bound.included(start), Bound.excluded(end))

    @classmethod
    def inclusive(cls, start: KeyLike, end: KeyLike) -> BoundRange:
        """Both ends inclusive."""
        return cls(Bound.included(start), Bound.included(end))

    @classmethod
    def range_from(cls, start: KeyLike) -> BoundRange:
        """start inclusive, unbounded above."""
        return cls(Bound.included(start), Bound.unbounded())

    @classmethod
    def range_to(cls, end: KeyLike) -> BoundRange:
        """Unbounded below, end exclusive."""
        return cls(Bound.unbounded(), Bound.excluded(end))

    @classmethod
    def range_to_inclusive(cls, end: KeyLike) -> BoundRange:
        """Unbounded below, end inclusive."""
        return cls(Bound.unbounded(), Bound.included(end))

    @classmethod
    def full(cls) -> BoundRange:
        """Every key."""
        return cls(Bound.unbounded(), Bound.unbounded())

    @classmethod
    def from_keys(cls, start: KeyLike, end: KeyLike | None = None) -> BoundRange:
        """Build a range from scan keys: a trailing zero flips a bound's inclusiveness."""
        upper = Bound.unbounded() if end is None else Key(end).to_upper_bound()
        return cls(Key(start).to_lower_bound(), upper)

    @classmethod
    def from_bounds(cls, start: Bound, end: Bound) -> BoundRange:
        """Build a range from two explicit bounds."""
        return cls(start, end)

    @classmethod
    def from_key_range(cls, key_range: KeyRange) -> BoundRange:
        """Build a range from its wire form."""
        return cls.from_keys(key_range.start_key, key_range.end_key)

    def to_keys(self) -> tuple[Key, Key | None]:
        """Return scan keys: start inclusive and end exclusive, None for no end."""
        if self.lower.kind is BoundKind.INCLUDED:
            start = self.lower.key
        elif self.lower.kind is BoundKind.EXCLUDED:
            start = self.lower.key.with_zero()
        else:
            start = Key.EMPTY

        if self.upper.kind is BoundKind.INCLUDED:
            end = self.upper.key.with_zero()
        elif self.upper.kind is BoundKind.EXCLUDED:
            end = self.upper.key
        else:
            end = None
        return start, end

    def to_key_range(self) -> KeyRange:
        """Return the wire form of the range."""
        start, end = self.to_keys()
        return KeyRange(start.data, b"" if end is None else end.data)

    def start_bound(self) -> Bound:
        """The lower bound."""
        return self.lower

    def end_bound(self) -> Bound:
        """The upper bound; an empty key counts as unbounded."""
        if self.upper.kind is not BoundKind.UNBOUNDED and self.upper.key.is_empty():
            return Bound.unbounded()
        return self.upper
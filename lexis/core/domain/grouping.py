# lexis/core/domain/grouping.py
"""
Grouping of inflections for display.

`group_for_display()` turns a flat list of inflections into a four level
forest of InflectionGroup:

    level 1  lexical identity: prefix/stem/suffix + part of speech,
             dialect, comparison                       (sorted by part of speech)
    level 2  primary axis: number if the form has case, else tense,
             else verb / adverb / misc bucket
    level 3  tense + voice                              (sorted by case)
    level 4  full agreement set: case, comparison, gender, number, person,
             tense, mood, sort, voice
    leaves   the input Inflection objects

Every pass is a single linear scan over the members of the previous level.
Buckets keep the order in which their first member was seen; levels that
carry a sort key are then stably sorted by it, highest first.

A missing feature never raises: it simply contributes an empty value to the
grouping key.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .constants import DEFAULT_SORT_ORDER, POFS_ADVERB, POFS_VERB
from .exceptions import ConsistencyError
from .feature import Feature, FeatureKind, FeatureValue
from .inflection import Inflection


# ---------------------------------------------------------------------------
# Grouping key
# ---------------------------------------------------------------------------

SlotKey = Tuple[str, Tuple[FeatureValue, ...]]
CanonicalKey = Tuple[Tuple[SlotKey, ...], Tuple[Tuple[str, Any], ...]]


class InflectionGroupingKey:
    """
    Comparable key built from some feature slots of an inflection plus
    extra scalar properties.

    Two keys are equal when they were built from the same categories, the
    feature values in those categories are equal and the extras are equal.
    Comparison is done on a structured tuple, so no delimiter inside a stem
    or a value can make two different keys collide.

    Args:
        inflection: Source of the feature slots (copied by reference).
        kinds: Categories to copy. Unset categories are kept as empty.
        extras: Additional hashable scalars, e.g. {"stem": "nat"}.
    """

    def __init__(
        self,
        inflection: Inflection,
        kinds: Iterable[Union[str, FeatureKind]],
        extras: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._features: Dict[FeatureKind, Tuple[Feature, ...]] = {}
        for kind in kinds:
            kind = FeatureKind.parse(kind)
            self._features[kind] = inflection.get_features(kind)
        self._extras: Dict[str, Any] = dict(extras or {})
        self._canonical = self._build_canonical()

    def _build_canonical(self) -> CanonicalKey:
        slots = tuple(
            # A str and a one-element tuple stay distinct, as in Feature equality.
            (kind.value, tuple(f.value for f in self._features[kind]))
            for kind in sorted(self._features, key=lambda k: k.value)
        )
        extras = tuple(sorted(self._extras.items()))
        # Raises TypeError early if an extra is not hashable.
        hash(extras)
        return slots, extras

    @property
    def kinds(self) -> List[FeatureKind]:
        return list(self._features)

    @property
    def extras(self) -> Dict[str, Any]:
        return dict(self._extras)

    @property
    def canonical(self) -> CanonicalKey:
        return self._canonical

    @property
    def is_case_inflection_set(self) -> bool:
        return bool(self._extras.get("is_case_inflection_set", False))

    def get(self, name: str, default: Any = None) -> Any:
        """Value of an extra property."""
        return self._extras.get(name, default)

    def features(self, kind: Union[str, FeatureKind]) -> Tuple[Feature, ...]:
        return self._features.get(FeatureKind.parse(kind), ())

    def has_feature_value(self, kind: Union[str, FeatureKind], value: str) -> bool:
        """True if the slot for `kind` holds a feature with `value`; False if the slot is absent."""
        for feature in self.features(kind):
            if feature.has_value(value):
                return True
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InflectionGroupingKey):
            return NotImplemented
        return self._canonical == other._canonical

    def __hash__(self) -> int:
        return hash(self._canonical)

    def __str__(self) -> str:
        parts = [
            ";".join(value if isinstance(value, str) else ",".join(value) for value in slot_values)
            for _kind, slot_values in self._canonical[0]
        ]
        parts.extend(f"{name}={value}" for name, value in self._canonical[1])
        return " ".join(p for p in parts if p)

    def __repr__(self) -> str:
        return f"InflectionGroupingKey({str(self)!r})"


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


class MemberKind(str, Enum):
    """What an InflectionGroup holds: raw inflections or nested groups."""
    LEAF = "leaf"
    GROUP = "group"


GroupMember = Union[Inflection, "InflectionGroup"]


def _member_kind(item: object) -> MemberKind:
    if isinstance(item, Inflection):
        return MemberKind.LEAF
    if isinstance(item, InflectionGroup):
        return MemberKind.GROUP
    raise ConsistencyError(f"An inflection group can only hold Inflection or InflectionGroup objects, got {item!r}.")


class InflectionGroup:
    """
    A node of the display forest.

    All members of one group are of the same kind: either every member is
    an Inflection (leaf level) or every member is an InflectionGroup.
    `member_kind` records which, and is None while the group is empty.

    Args:
        grouping_key: The key shared by every member.
        inflections: Initial members.
        sort_key: Optional rank among sibling groups (higher sorts first).
    """

    def __init__(
        self,
        grouping_key: InflectionGroupingKey,
        inflections: Optional[Sequence[GroupMember]] = None,
        sort_key: Optional[int] = None,
    ) -> None:
        self.grouping_key = grouping_key
        self.sort_key = sort_key
        self.member_kind: Optional[MemberKind] = None
        self._members: List[GroupMember] = []
        self._sealed = False
        for item in inflections or []:
            self.append(item)

    def append(self, item: GroupMember) -> None:
        if self._sealed:
            raise ConsistencyError("Cannot append to an inflection group after it has been sealed.")
        kind = _member_kind(item)
        if self.member_kind is None:
            self.member_kind = kind
        elif kind != self.member_kind:
            raise ConsistencyError(
                f"Cannot add a {kind.value} member to a group of {self.member_kind.value} members."
            )
        self._members.append(item)

    def seal(self) -> "InflectionGroup":
        """End the build phase of this group and of every nested group."""
        self._sealed = True
        if self.member_kind is MemberKind.GROUP:
            for group in self._members:
                group.seal()  # type: ignore[union-attr]
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def inflections(self) -> Tuple[GroupMember, ...]:
        """Members in insertion order."""
        return tuple(self._members)

    def leaves(self) -> List[Inflection]:
        if self.member_kind is MemberKind.GROUP:
            raise ConsistencyError("This group holds nested groups, not inflections.")
        return list(self._members)  # type: ignore[arg-type]

    def subgroups(self) -> List["InflectionGroup"]:
        if self.member_kind is MemberKind.LEAF:
            raise ConsistencyError("This group holds inflections, not nested groups.")
        return list(self._members)  # type: ignore[arg-type]

    def all_inflections(self) -> List[Inflection]:
        """Every Inflection below this group, depth first."""
        if self.member_kind is MemberKind.GROUP:
            return [infl for group in self.subgroups() for infl in group.all_inflections()]
        return self.leaves()

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self):
        return iter(self._members)

    def __repr__(self) -> str:
        return (
            f"InflectionGroup(key={str(self.grouping_key)!r}, sort_key={self.sort_key!r}, "
            f"members={len(self._members)})"
        )


def sort_groups(groups: Iterable[InflectionGroup]) -> List[InflectionGroup]:
    """
    Order sibling groups by sort_key, highest first.

    Python's sort is stable, so ties keep insertion order. Groups without a
    sort key come after every keyed group, also in insertion order.
    """
    return sorted(
        groups,
        key=lambda g: (g.sort_key is None, -(g.sort_key or 0)),
    )


# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------

LEXICAL_KINDS = (FeatureKind.PART, FeatureKind.DIALECT, FeatureKind.COMPARISON)
TENSE_VOICE_KINDS = (FeatureKind.TENSE, FeatureKind.VOICE)
AGREEMENT_KINDS = (
    FeatureKind.CASE,
    FeatureKind.COMPARISON,
    FeatureKind.GENDER,
    FeatureKind.NUMBER,
    FeatureKind.PERSON,
    FeatureKind.TENSE,
    FeatureKind.MOOD,
    FeatureKind.SORT,
    FeatureKind.VOICE,
)


def max_sort_order(features: Sequence[Feature]) -> int:
    """Highest sort_order among `features`, DEFAULT_SORT_ORDER if none carries one."""
    orders = [f.sort_order for f in features if f.sort_order is not None]
    return max(orders) if orders else DEFAULT_SORT_ORDER


def _is_exactly(inflection: Inflection, kind: FeatureKind, value: str) -> bool:
    features = inflection.get_features(kind)
    return len(features) == 1 and features[0].value == value


def lexical_key(inflection: Inflection) -> InflectionGroupingKey:
    return InflectionGroupingKey(
        inflection,
        LEXICAL_KINDS,
        {
            "prefix": inflection.prefix or "",
            "stem": inflection.stem,
            "suffix": inflection.suffix or "",
        },
    )


def primary_axis_key(inflection: Inflection) -> InflectionGroupingKey:
    """
    Pick the level-2 axis. The first matching rule wins:
    case present -> number; tense present -> tense; verb; adverb; misc.
    """
    if inflection.has_feature(FeatureKind.CASE):
        kinds: Tuple[FeatureKind, ...] = (FeatureKind.NUMBER,)
        inflection_set = "case"
    elif inflection.has_feature(FeatureKind.TENSE):
        kinds = (FeatureKind.TENSE,)
        inflection_set = "tense"
    elif _is_exactly(inflection, FeatureKind.PART, POFS_VERB):
        kinds = (FeatureKind.PART,)
        inflection_set = POFS_VERB
    elif _is_exactly(inflection, FeatureKind.PART, POFS_ADVERB):
        kinds = (FeatureKind.PART,)
        inflection_set = POFS_ADVERB
    else:
        kinds = ()
        inflection_set = "misc"
    return InflectionGroupingKey(
        inflection,
        kinds,
        {
            "is_case_inflection_set": inflection_set == "case",
            "inflection_set": inflection_set,
        },
    )


def tense_voice_key(inflection: Inflection) -> InflectionGroupingKey:
    return InflectionGroupingKey(inflection, TENSE_VOICE_KINDS)


def agreement_key(inflection: Inflection) -> InflectionGroupingKey:
    return InflectionGroupingKey(inflection, AGREEMENT_KINDS)


def partition(
    inflections: Iterable[Inflection],
    key_fn: Callable[[Inflection], InflectionGroupingKey],
    sort_key_fn: Optional[Callable[[Inflection], int]] = None,
) -> List[InflectionGroup]:
    """
    Split `inflections` into groups of equal key in one pass.

    Groups appear in the order their first member was seen. When
    `sort_key_fn` is given, each group takes the sort key of its first
    member and the result is sorted with sort_groups().
    """
    buckets: Dict[InflectionGroupingKey, InflectionGroup] = {}
    for infl in inflections:
        key = key_fn(infl)
        group = buckets.get(key)
        if group is None:
            sort_key = sort_key_fn(infl) if sort_key_fn is not None else None
            group = buckets[key] = InflectionGroup(key, sort_key=sort_key)
        group.append(infl)

    groups = list(buckets.values())
    if sort_key_fn is not None:
        groups = sort_groups(groups)
    return groups


def _nest(
    group: InflectionGroup,
    key_fn: Callable[[Inflection], InflectionGroupingKey],
    sort_key_fn: Optional[Callable[[Inflection], int]] = None,
) -> InflectionGroup:
    """Return a copy of a leaf group whose members are re-partitioned by `key_fn`."""
    return InflectionGroup(
        group.grouping_key,
        partition(group.leaves(), key_fn, sort_key_fn),
        sort_key=group.sort_key,
    )


def group_for_display(inflections: Iterable[Inflection]) -> List[InflectionGroup]:
    """
    Organize inflections into the four-level display forest.

    Returns:
        Root groups (lexical identity), each holding primary-axis groups,
        each holding tense/voice groups, each holding agreement groups,
        each holding the input inflections. All groups are sealed.
    """
    roots = partition(
        inflections,
        lexical_key,
        lambda infl: max_sort_order(infl.get_features(FeatureKind.PART)),
    )

    forest: List[InflectionGroup] = []
    for root in roots:
        axis_groups = []
        for axis_group in partition(root.leaves(), primary_axis_key):
            tense_groups = [
                _nest(tense_group, agreement_key)
                for tense_group in partition(
                    axis_group.leaves(),
                    tense_voice_key,
                    lambda infl: max_sort_order(infl.get_features(FeatureKind.CASE)),
                )
            ]
            axis_groups.append(InflectionGroup(axis_group.grouping_key, tense_groups))
        forest.append(InflectionGroup(root.grouping_key, axis_groups, sort_key=root.sort_key).seal())
    return forest

from __future__ import annotations

from typing import Any

from ...models.enums import MAX_WILD_DISTANCE, CardType, DistanceKind, ReasonCode
from ...models.evaluation import DistanceRule
from ...models.results import Result

_FIXED: dict[CardType, int] = {
    CardType.ACE: 1,
    CardType.TWO: 2,
    CardType.THREE: 3,
    CardType.FOUR: 4,
}

WILD_DISTANCES: tuple[int, ...] = tuple(range(1, MAX_WILD_DISTANCE + 1))


def _coerce(card_type: Any) -> CardType | None:
    if isinstance(card_type, CardType):
        return card_type
    try:
        return CardType(card_type)
    except ValueError:
        return None


def resolve_distance(card_type: Any) -> Result[DistanceRule]:
    ct = _coerce(card_type)
    if ct is None:
        return Result.fail(
            ReasonCode.UNKNOWN_CARD_TYPE, f"unknown card type {card_type!r}"
        )
    if ct.is_wild:
        rule = DistanceRule(card_type=ct, kind=DistanceKind.WILD, allowed=WILD_DISTANCES)
    else:
        rule = DistanceRule(card_type=ct, kind=DistanceKind.FIXED, allowed=(_FIXED[ct],))
    return Result.success(rule)


def check_distance(card_type: Any, distance: int) -> Result[int]:
    res = resolve_distance(card_type)
    if not res.ok:
        return res.forward()
    if not 1 <= distance <= MAX_WILD_DISTANCE:
        return Result.fail(
            ReasonCode.DISTANCE_OUT_OF_RANGE,
            f"distance {distance} outside 1..{MAX_WILD_DISTANCE}",
        )
    rule: DistanceRule = res.value
    if distance not in rule.allowed:
        return Result.fail(
            ReasonCode.DISTANCE_MISMATCH,
            f"{rule.card_type.value} card moves exactly {rule.fixed}, got {distance}",
        )
    return Result.success(distance)

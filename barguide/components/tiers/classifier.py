"""
Bar tier inference.

Determines a bar's tier from how complete its content is. Content teams
move a bar up a tier by filling in more sections:

- bronze -> silver: quick info, 2-3 drinks, 1-2 events, crowd tags,
  a bartender, or a challenge
- silver -> gold: team, rewards, a long story, or volume (4+ drinks,
  3+ events, 3+ social posts, or a challenge backed by 2+ events / 3+ drinks)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from barguide.domain.entities import BarContent, TierLabel


def _count(items: Sequence[Any] | None) -> int:
    # None and [] both count as zero
    return len(items) if items else 0


def _is_gold(content: BarContent) -> bool:
    drinks = _count(content.signature_drinks)
    events = _count(content.events)

    if _count(content.team) >= 1 or _count(content.rewards) >= 1:
        return True
    if content.story is not None and content.story.long:
        return True
    if events >= 3 or drinks >= 4 or _count(content.social) >= 3:
        return True
    return content.challenge is not None and (events >= 2 or drinks >= 3)


def _is_silver(content: BarContent) -> bool:
    drinks = _count(content.signature_drinks)
    events = _count(content.events)

    return (
        content.quick_info is not None
        or 2 <= drinks <= 3
        or 1 <= events <= 2
        or _count(content.crowd_tags) >= 1
        or content.bartender is not None
        or content.challenge is not None
    )


def infer_bar_tier(content: BarContent) -> TierLabel:
    """
    Infer the tier of a bar from its populated fields.

    Rules are checked from the highest tier down and the first match wins,
    so any gold signal outranks every silver one.

    Args:
        content: The bar record (not modified)

    Returns:
        "gold", "silver" or "bronze"
    """
    if _is_gold(content):
        return "gold"
    if _is_silver(content):
        return "silver"
    return "bronze"


def resolve_tier(manual_tier: TierLabel | None, content: BarContent) -> TierLabel:
    """Return the manual tier when given, otherwise the inferred one."""
    if manual_tier is not None:
        return manual_tier
    return infer_bar_tier(content)

"""
Section assembly for the bar detail view.

Pure functions that turn a bar record and a tier config into the ordered
list of sections to render, plus a serializer for handing those sections
to a client.

All list truncation happens here; renderers receive already-limited lists.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

from barguide.domain.entities import BarContent, TierLabel

from .models import (
    BarVibesItem,
    ChallengeItem,
    ContentItem,
    EventsItem,
    HeroItem,
    QuickInfoItem,
    QuickTagsItem,
    SignatureDrinksItem,
    SocialItem,
    StoryItem,
    TierConfig,
)

T = TypeVar("T")

# Tiers that get the vibes block, independent of config flags
VIBES_TIERS: frozenset[TierLabel] = frozenset({"silver", "gold"})


def take_first(items: Sequence[T] | None, limit: int) -> tuple[T, ...]:
    """First `limit` entries in original order; empty for None or limit <= 0."""
    if not items or limit <= 0:
        return ()
    return tuple(items[:limit])


def assemble_sections(
    content: BarContent,
    config: TierConfig,
    tier: TierLabel,
) -> list[ContentItem]:
    """
    Build the ordered section list for a bar.

    Order is fixed: hero, quickTags, quickInfo, signatureDrinks, challenge,
    events, barVibes, social, story. Sections with nothing to show are
    skipped.

    Args:
        content: The bar record (not modified)
        config: Limits and flags for the resolved tier
        tier: The resolved tier (gates the vibes section)

    Returns:
        List of section items, hero first
    """
    items: list[ContentItem] = [
        HeroItem(bar_id=content.id, name=content.name, hero=content.hero)
    ]

    if config.show_quick_tags and content.quick_tags:
        items.append(QuickTagsItem(tags=tuple(content.quick_tags)))

    if config.show_quick_info and content.quick_info is not None:
        items.append(QuickInfoItem(info=content.quick_info))

    drinks = take_first(content.signature_drinks, config.max_drinks)
    if drinks:
        items.append(SignatureDrinksItem(drinks=drinks))

    if config.show_challenge and content.challenge is not None:
        items.append(ChallengeItem(challenge=content.challenge))

    events = take_first(content.events, config.max_events)
    if config.max_events > 0 and events:
        items.append(EventsItem(events=events))

    if tier in VIBES_TIERS and content.vibes is not None:
        items.append(BarVibesItem(vibes=content.vibes))

    posts = take_first(content.social, config.max_social)
    if posts:
        items.append(SocialItem(posts=posts))

    story = content.story
    if story is not None and story.short:
        items.append(StoryItem(short=story.short, long=story.long or None))

    return items


# --- Serialization ---


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(by_alias=True, exclude_none=True)


def _section_data(item: ContentItem) -> Any:
    if isinstance(item, HeroItem):
        return {"id": item.bar_id, "name": item.name, "hero": _dump(item.hero)}

    if isinstance(item, QuickTagsItem):
        return list(item.tags)

    if isinstance(item, QuickInfoItem):
        return _dump(item.info)

    if isinstance(item, SignatureDrinksItem):
        return [_dump(d) for d in item.drinks]

    if isinstance(item, ChallengeItem):
        return _dump(item.challenge)

    if isinstance(item, EventsItem):
        return [_dump(e) for e in item.events]

    if isinstance(item, BarVibesItem):
        return _dump(item.vibes)

    if isinstance(item, SocialItem):
        return [_dump(p) for p in item.posts]

    if isinstance(item, StoryItem):
        data = {"short": item.short}
        if item.long:
            data["long"] = item.long
        return data

    raise TypeError(f"Unknown section item: {type(item)}")


def section_key(item: ContentItem, index: int) -> str:
    """Stable list key for a section at a given position."""
    return f"{item.kind}-{index}"


def serialize_section(item: ContentItem) -> dict[str, Any]:
    """
    Serialize one section as {"type": ..., "data": ...}.

    Data uses the camelCase field names of the stored bar records.

    Raises:
        TypeError: If item is not a known section type
    """
    data = _section_data(item)
    return {"type": item.kind, "data": data}


def serialize_sections(items: Iterable[ContentItem]) -> list[dict[str, Any]]:
    """Serialize sections in order, adding a "key" to each."""
    payload = []
    for index, item in enumerate(items):
        entry = serialize_section(item)
        entry["key"] = section_key(item, index)
        payload.append(entry)
    return payload

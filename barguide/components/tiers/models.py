"""
Bar tier component models.

Tier configuration table, the section item union produced by the assembler,
and the input/output records of the bar detail pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

from barguide.domain.entities import (
    BarEvent,
    BarVibes,
    Challenge,
    Hero,
    QuickInfo,
    SignatureDrink,
    SocialPost,
    TierLabel,
)

# --- Configuration ---


@dataclass(frozen=True)
class TierConfig:
    """
    Display limits and section flags for one tier.

    Limits cap how many entries of a list section are shown; flags switch
    single sections on or off.
    """

    max_drinks: int
    max_events: int
    max_social: int
    show_quick_tags: bool = False
    show_quick_info: bool = False
    show_challenge: bool = False
    show_crowd_tags: bool = False
    show_bartender: bool = False
    show_team: bool = False
    show_rewards: bool = False
    show_story_long: bool = False


BAR_TIERS: dict[TierLabel, TierConfig] = {
    "bronze": TierConfig(
        max_drinks=1,
        max_events=1,
        max_social=1,
        show_quick_tags=True,
    ),
    "silver": TierConfig(
        max_drinks=3,
        max_events=2,
        max_social=2,
        show_quick_info=True,
        show_challenge=True,
        show_crowd_tags=True,
        show_bartender=True,
    ),
    "gold": TierConfig(
        max_drinks=6,
        max_events=4,
        max_social=6,
        show_quick_info=True,
        show_challenge=True,
        show_crowd_tags=True,
        show_bartender=True,
        show_team=True,
        show_rewards=True,
        show_story_long=True,
    ),
}

TIER_CONFIG = BAR_TIERS


# --- Section Items ---

SectionKind = Literal[
    "hero",
    "quickTags",
    "quickInfo",
    "signatureDrinks",
    "challenge",
    "events",
    "barVibes",
    "social",
    "story",
]


@dataclass(frozen=True)
class HeroItem:
    """Header block: always the first section."""

    bar_id: str
    name: str
    hero: Hero
    kind: Literal["hero"] = field(default="hero", init=False)


@dataclass(frozen=True)
class QuickTagsItem:
    tags: tuple[str, ...]
    kind: Literal["quickTags"] = field(default="quickTags", init=False)


@dataclass(frozen=True)
class QuickInfoItem:
    info: QuickInfo
    kind: Literal["quickInfo"] = field(default="quickInfo", init=False)


@dataclass(frozen=True)
class SignatureDrinksItem:
    drinks: tuple[SignatureDrink, ...]
    kind: Literal["signatureDrinks"] = field(default="signatureDrinks", init=False)


@dataclass(frozen=True)
class ChallengeItem:
    challenge: Challenge
    kind: Literal["challenge"] = field(default="challenge", init=False)


@dataclass(frozen=True)
class EventsItem:
    events: tuple[BarEvent, ...]
    kind: Literal["events"] = field(default="events", init=False)


@dataclass(frozen=True)
class BarVibesItem:
    vibes: BarVibes
    kind: Literal["barVibes"] = field(default="barVibes", init=False)


@dataclass(frozen=True)
class SocialItem:
    posts: tuple[SocialPost, ...]
    kind: Literal["social"] = field(default="social", init=False)


@dataclass(frozen=True)
class StoryItem:
    """
    Story block.

    Carries the long text when the bar has one; whether it is shown
    expanded is up to the renderer.
    """

    short: str
    long: str | None = None
    kind: Literal["story"] = field(default="story", init=False)


ContentItem = Union[
    HeroItem,
    QuickTagsItem,
    QuickInfoItem,
    SignatureDrinksItem,
    ChallengeItem,
    EventsItem,
    BarVibesItem,
    SocialItem,
    StoryItem,
]


# --- Validation Error ---


@dataclass(frozen=True)
class TierValidationError:
    """Bar detail validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input / Output Models ---


@dataclass(frozen=True)
class BarDetailInput:
    """Input for building a bar detail view."""

    bar_id: str
    tier: str | None = None  # Manual override, e.g. from a navigation param


@dataclass(frozen=True)
class BarDetail:
    """Resolved tier, its config and the ordered sections for one bar."""

    bar_id: str
    tier: TierLabel
    inferred_tier: TierLabel
    is_override: bool  # True when a manual tier was supplied
    config: TierConfig
    sections: tuple[ContentItem, ...]


@dataclass(frozen=True)
class BarDetailOutput:
    """Output from the bar detail pipeline."""

    detail: BarDetail | None
    errors: list[TierValidationError] = field(default_factory=list)
    success: bool = True

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---
TierLabel = Literal["bronze", "silver", "gold"]

# Ascending completeness
TIER_ORDER: tuple[TierLabel, ...] = ("bronze", "silver", "gold")


class BarModel(BaseModel):
    """Base for bar records: immutable, snake_case in Python, camelCase on disk."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# --- Header ---

class Hero(BarModel):
    image: str
    location: str | None = None
    xp_reward: int | None = None

class BarLocation(BarModel):
    latitude: float
    longitude: float
    name: str
    address: str
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    phone: str | None = None
    website: str | None = None

class QuickInfo(BarModel):
    music: str | None = None
    vibe: str | None = None
    menu: str | None = None
    popular_nights: str | None = None
    happy_hour: str | None = None

# --- Menu & Programming ---

class SignatureDrink(BarModel):
    image: str
    name: str
    tagline: str | None = None
    price: str | None = None

class BarEvent(BarModel):
    title: str
    date_iso: str = Field(alias="dateISO")
    time: str | None = None
    city: str | None = None

class Challenge(BarModel):
    image: str
    title: str
    copy_text: str | None = Field(default=None, alias="copy")
    cta: str | None = None

# --- People ---

class Bartender(BarModel):
    name: str
    avatar: str
    quote: str | None = None

class TeamMember(BarModel):
    name: str
    role: str
    avatar: str

class Reward(BarModel):
    image: str
    name: str
    xp: int

# --- Story, Social & Vibes ---

class Story(BarModel):
    short: str | None = None
    long: str | None = None

class SocialPost(BarModel):
    image: str
    handle: str | None = None
    caption: str | None = None

class VibeNote(BarModel):
    icon: str
    text: str

class VibeBartender(BarModel):
    name: str
    avatar: str
    subtitle: str | None = None

class BarVibes(BarModel):
    crowd_and_atmosphere: list[VibeNote] | None = None
    bartender: VibeBartender | None = None
    travel_tips: list[VibeNote] | None = None
    dress_code_and_entry: list[VibeNote] | None = None

# --- Bar ---

class BarContent(BarModel):
    id: str
    name: str
    hero: Hero
    location: BarLocation | None = None

    quick_tags: list[str] | None = None
    quick_info: QuickInfo | None = None

    signature_drinks: list[SignatureDrink] | None = None
    events: list[BarEvent] | None = None
    challenge: Challenge | None = None

    crowd_tags: list[str] | None = None
    bartender: Bartender | None = None
    story: Story | None = None
    team: list[TeamMember] | None = None
    rewards: list[Reward] | None = None
    social: list[SocialPost] | None = None
    vibes: BarVibes | None = None

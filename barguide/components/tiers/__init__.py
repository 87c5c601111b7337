"""
Bar tier component.

Public API for bar tier inference and tier-gated section assembly.
"""

from .classifier import infer_bar_tier, resolve_tier
from .component import (
    build_bar_detail,
    is_tier_label,
    load_config_from_rules,
    load_default_config,
    run,
)
from .models import (
    BAR_TIERS,
    TIER_CONFIG,
    BarDetail,
    BarDetailInput,
    BarDetailOutput,
    BarVibesItem,
    ChallengeItem,
    ContentItem,
    EventsItem,
    HeroItem,
    QuickInfoItem,
    QuickTagsItem,
    SectionKind,
    SignatureDrinksItem,
    SocialItem,
    StoryItem,
    TierConfig,
    TierValidationError,
)
from .ports import BarCatalogPort
from .sections import (
    assemble_sections,
    section_key,
    serialize_section,
    serialize_sections,
    take_first,
)

__all__ = [
    # Functions
    "infer_bar_tier",
    "resolve_tier",
    "assemble_sections",
    "build_bar_detail",
    "is_tier_label",
    "load_config_from_rules",
    "load_default_config",
    "run",
    "section_key",
    "serialize_section",
    "serialize_sections",
    "take_first",
    # Config
    "BAR_TIERS",
    "TIER_CONFIG",
    "TierConfig",
    # Sections
    "ContentItem",
    "SectionKind",
    "HeroItem",
    "QuickTagsItem",
    "QuickInfoItem",
    "SignatureDrinksItem",
    "ChallengeItem",
    "EventsItem",
    "BarVibesItem",
    "SocialItem",
    "StoryItem",
    # Models
    "BarDetail",
    "BarDetailInput",
    "BarDetailOutput",
    "TierValidationError",
    # Ports
    "BarCatalogPort",
]

from pydantic import BaseModel, ConfigDict, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class TierRules(BaseModel):
    max_drinks: int = Field(ge=0)
    max_events: int = Field(ge=0)
    max_social: int = Field(ge=0)
    show_quick_tags: bool
    show_quick_info: bool
    show_challenge: bool
    show_crowd_tags: bool
    show_bartender: bool
    show_team: bool
    show_rewards: bool
    show_story_long: bool

    model_config = ConfigDict(extra="forbid")

class BarTiersRules(BaseModel):
    # All three tiers are required; a partial table is a config error.
    bronze: TierRules
    silver: TierRules
    gold: TierRules

    model_config = ConfigDict(extra="forbid")

class Rules(BaseModel):
    project: ProjectRules
    bar_tiers: BarTiersRules | None = None

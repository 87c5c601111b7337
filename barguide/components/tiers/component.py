"""
Bar tier component.

Resolves a bar's tier and builds its detail sections. The pure pipeline is
`build_bar_detail`; `run` is the entry point for callers that start from a
bar id and an optional tier param, reporting problems as error records.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any, cast

from pydantic import ValidationError

from barguide.domain.entities import TIER_ORDER, BarContent, TierLabel
from barguide.rules.loader import load_rules, resolve_rules_path
from barguide.rules.models import BarTiersRules, Rules

from .classifier import infer_bar_tier, resolve_tier
from .models import (
    BAR_TIERS,
    BarDetail,
    BarDetailInput,
    BarDetailOutput,
    TierConfig,
    TierValidationError,
)
from .ports import BarCatalogPort
from .sections import assemble_sections

logger = logging.getLogger(__name__)


# --- Pure Functions ---


def is_tier_label(value: object) -> bool:
    """Check whether a raw value names a known tier."""
    return isinstance(value, str) and value in TIER_ORDER


def build_bar_detail(
    content: BarContent,
    manual_tier: TierLabel | None = None,
    tiers: Mapping[TierLabel, TierConfig] | None = None,
) -> BarDetail:
    """
    Resolve the tier for a bar and assemble its sections.

    Args:
        content: The bar record
        manual_tier: Optional tier that overrides inference
        tiers: Tier config table (defaults to BAR_TIERS)

    Returns:
        BarDetail with tier, config and ordered sections
    """
    tiers = tiers if tiers is not None else BAR_TIERS

    inferred = infer_bar_tier(content)
    tier = resolve_tier(manual_tier, content)
    config = tiers[tier]

    return BarDetail(
        bar_id=content.id,
        tier=tier,
        inferred_tier=inferred,
        is_override=manual_tier is not None,
        config=config,
        sections=tuple(assemble_sections(content, config, tier)),
    )


# --- Run Function (Atomic Component Pattern) ---


def run(
    inp: BarDetailInput,
    *,
    catalog: BarCatalogPort,
    tiers: Mapping[TierLabel, TierConfig] | None = None,
) -> BarDetailOutput:
    """
    Build the detail view for a bar looked up by id.

    Args:
        inp: Bar id and optional manual tier
        catalog: Port for bar lookup
        tiers: Tier config table (defaults to BAR_TIERS)

    Returns:
        BarDetailOutput with the detail, or errors if the bar is unknown
        or the manual tier is not a tier label
    """
    if inp.tier is not None and not is_tier_label(inp.tier):
        logger.warning("Rejected tier %r for bar %s", inp.tier, inp.bar_id)
        return BarDetailOutput(
            detail=None,
            errors=[
                TierValidationError(
                    code="invalid_tier",
                    message=f"Unknown tier '{inp.tier}', expected one of {list(TIER_ORDER)}",
                    field="tier",
                )
            ],
            success=False,
        )

    content = catalog.get_bar(inp.bar_id)
    if content is None:
        logger.warning("Bar not found: %s", inp.bar_id)
        return BarDetailOutput(
            detail=None,
            errors=[
                TierValidationError(
                    code="bar_not_found",
                    message=f"Bar '{inp.bar_id}' not found",
                    field="bar_id",
                )
            ],
            success=False,
        )

    manual_tier = cast(TierLabel | None, inp.tier)
    detail = build_bar_detail(content, manual_tier, tiers)

    logger.debug(
        "Bar %s resolved to %s (inferred %s, override=%s), %d sections",
        detail.bar_id,
        detail.tier,
        detail.inferred_tier,
        detail.is_override,
        len(detail.sections),
    )
    return BarDetailOutput(detail=detail)


# --- Configuration Loader ---


def _to_tier_config(rules: BarTiersRules) -> dict[TierLabel, TierConfig]:
    return {
        "bronze": TierConfig(**rules.bronze.model_dump()),
        "silver": TierConfig(**rules.silver.model_dump()),
        "gold": TierConfig(**rules.gold.model_dump()),
    }


def load_config_from_rules(rules: Rules | dict[str, Any]) -> dict[TierLabel, TierConfig]:
    """
    Load the tier config table from rules.

    Falls back to BAR_TIERS when the rules have no bar_tiers section.

    Args:
        rules: Validated Rules, or a parsed rules dictionary

    Returns:
        Tier config table with all three tiers

    Raises:
        ValueError: If the bar_tiers section is partial or invalid
    """
    if isinstance(rules, Rules):
        section = rules.bar_tiers
    else:
        raw = rules.get("bar_tiers")
        if raw is None:
            section = None
        else:
            try:
                section = BarTiersRules.model_validate(raw)
            except ValidationError as e:
                raise ValueError(f"bar_tiers validation failed:\n{e}") from e

    if section is None:
        return dict(BAR_TIERS)

    return _to_tier_config(section)


def load_default_config(
    env: Mapping[str, str] | None = None,
) -> dict[TierLabel, TierConfig]:
    """
    Load the tier config table from the rules file in use.

    The file is RULES_PATH if set, else barguide_rules.yaml in the project
    root. A RULES_PATH that does not exist is an error; a missing default
    file falls back to BAR_TIERS.

    Args:
        env: Environment mapping (defaults to os.environ)

    Returns:
        Tier config table with all three tiers

    Raises:
        FileNotFoundError: If RULES_PATH names a missing file
        ValueError: If the rules file is invalid
    """
    path = resolve_rules_path(env)
    if not path.exists() and not _rules_path_set(env):
        logger.info("No rules file at %s, using built-in tier table", path)
        return dict(BAR_TIERS)

    return load_config_from_rules(load_rules(path))


def _rules_path_set(env: Mapping[str, str] | None) -> bool:
    environ = os.environ if env is None else env
    return bool(environ.get("RULES_PATH"))

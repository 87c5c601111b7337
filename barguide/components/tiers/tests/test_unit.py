"""
Unit tests for the bar tier component entry points.

Tests:
- build_bar_detail resolves, looks up config and assembles
- run reports unknown bars and unknown tiers as error records
- run logging
"""

import logging

import pytest

from barguide.adapters import InMemoryBarCatalog
from barguide.components.tiers import (
    BAR_TIERS,
    BarDetailInput,
    BarDetailOutput,
    TierConfig,
    build_bar_detail,
    is_tier_label,
    run,
)
from barguide.domain.entities import (
    BarContent,
    Hero,
    QuickInfo,
    SignatureDrink,
)

# --- Fixtures ---


@pytest.fixture
def silver_bar() -> BarContent:
    """Bar with quick info and three drinks."""
    return BarContent(
        id="the_gilded_lily",
        name="The Gilded Lily",
        hero=Hero(image="lily.jpg", location="King Street West, Toronto"),
        quick_info=QuickInfo(music="Live Jazz Nightly"),
        signature_drinks=[
            SignatureDrink(image="d1.jpg", name="Lily's Garden"),
            SignatureDrink(image="d2.jpg", name="Golden Age"),
            SignatureDrink(image="d3.jpg", name="Midnight Serenade"),
        ],
    )


@pytest.fixture
def catalog(silver_bar: BarContent) -> InMemoryBarCatalog:
    return InMemoryBarCatalog([silver_bar])


# --- build_bar_detail ---


class TestBuildBarDetail:
    """Tests for the pure pipeline."""

    def test_inferred_tier(self, silver_bar: BarContent) -> None:
        detail = build_bar_detail(silver_bar)

        assert detail.bar_id == "the_gilded_lily"
        assert detail.tier == "silver"
        assert detail.inferred_tier == "silver"
        assert detail.is_override is False
        assert detail.config is BAR_TIERS["silver"]
        assert [item.kind for item in detail.sections] == [
            "hero",
            "quickInfo",
            "signatureDrinks",
        ]

    def test_manual_tier(self, silver_bar: BarContent) -> None:
        detail = build_bar_detail(silver_bar, "bronze")

        assert detail.tier == "bronze"
        assert detail.inferred_tier == "silver"
        assert detail.is_override is True
        assert [item.kind for item in detail.sections] == ["hero", "signatureDrinks"]

    def test_matching_manual_tier_still_override(self, silver_bar: BarContent) -> None:
        detail = build_bar_detail(silver_bar, "silver")
        assert detail.is_override is True

    def test_custom_tier_table(self, silver_bar: BarContent) -> None:
        tiers = dict(BAR_TIERS)
        tiers["silver"] = TierConfig(max_drinks=0, max_events=0, max_social=0)

        detail = build_bar_detail(silver_bar, tiers=tiers)

        assert [item.kind for item in detail.sections] == ["hero"]


# --- run ---


class TestRun:
    """Tests for the run entry point."""

    def test_success(self, catalog: InMemoryBarCatalog) -> None:
        output = run(BarDetailInput(bar_id="the_gilded_lily"), catalog=catalog)

        assert isinstance(output, BarDetailOutput)
        assert output.success is True
        assert output.errors == []
        assert output.detail is not None
        assert output.detail.tier == "silver"

    def test_manual_tier_param(self, catalog: InMemoryBarCatalog) -> None:
        output = run(BarDetailInput(bar_id="the_gilded_lily", tier="gold"), catalog=catalog)

        assert output.detail is not None
        assert output.detail.tier == "gold"
        assert output.detail.config is BAR_TIERS["gold"]

    def test_bar_not_found(self, catalog: InMemoryBarCatalog) -> None:
        output = run(BarDetailInput(bar_id="bar_oasis"), catalog=catalog)

        assert output.success is False
        assert output.detail is None
        assert len(output.errors) == 1
        assert output.errors[0].code == "bar_not_found"
        assert output.errors[0].field == "bar_id"

    def test_invalid_tier(self, catalog: InMemoryBarCatalog) -> None:
        output = run(
            BarDetailInput(bar_id="the_gilded_lily", tier="platinum"),
            catalog=catalog,
        )

        assert output.success is False
        assert output.detail is None
        assert output.errors[0].code == "invalid_tier"
        assert output.errors[0].field == "tier"
        assert "platinum" in output.errors[0].message

    def test_logs_missing_bar(
        self, catalog: InMemoryBarCatalog, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            run(BarDetailInput(bar_id="bar_oasis"), catalog=catalog)

        assert caplog.records[0].levelno == logging.WARNING
        assert "bar_oasis" in caplog.records[0].message

    def test_logs_invalid_tier(
        self, catalog: InMemoryBarCatalog, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            run(BarDetailInput(bar_id="the_gilded_lily", tier="platinum"), catalog=catalog)

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "platinum" in caplog.records[0].message
        assert "the_gilded_lily" in caplog.records[0].message

    def test_logs_resolved_tier(
        self, catalog: InMemoryBarCatalog, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="barguide.components.tiers.component"):
            run(BarDetailInput(bar_id="the_gilded_lily"), catalog=catalog)

        assert "resolved to silver" in caplog.text


class TestIsTierLabel:
    @pytest.mark.parametrize("value", ["bronze", "silver", "gold"])
    def test_known(self, value: str) -> None:
        assert is_tier_label(value) is True

    @pytest.mark.parametrize("value", ["Gold", "", None, 3])
    def test_unknown(self, value: object) -> None:
        assert is_tier_label(value) is False

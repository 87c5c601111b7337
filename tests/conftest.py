from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from barguide.domain.entities import (
    BarContent,
    BarEvent,
    Challenge,
    Hero,
    SignatureDrink,
    SocialPost,
    TeamMember,
)

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def make_bar() -> Callable[..., BarContent]:
    """
    Factory for bar records with only the required fields set.

    Keyword overrides use the Python (snake_case) field names.
    """

    def _make(**overrides: Any) -> BarContent:
        fields: dict[str, Any] = {
            "id": "test-bar",
            "name": "Test Bar",
            "hero": Hero(image="test.jpg"),
        }
        fields.update(overrides)
        return BarContent(**fields)

    return _make


@pytest.fixture
def make_drinks() -> Callable[[int], list[SignatureDrink]]:
    def _make(count: int) -> list[SignatureDrink]:
        return [
            SignatureDrink(image=f"drink{i}.jpg", name=f"Drink {i}")
            for i in range(1, count + 1)
        ]

    return _make


@pytest.fixture
def make_events() -> Callable[[int], list[BarEvent]]:
    def _make(count: int) -> list[BarEvent]:
        return [
            BarEvent(title=f"Event {i}", date_iso=f"2024-01-{i:02d}")
            for i in range(1, count + 1)
        ]

    return _make


@pytest.fixture
def make_posts() -> Callable[[int], list[SocialPost]]:
    def _make(count: int) -> list[SocialPost]:
        return [
            SocialPost(image=f"social{i}.jpg", handle=f"@user{i}")
            for i in range(1, count + 1)
        ]

    return _make


@pytest.fixture
def challenge() -> Challenge:
    return Challenge(image="challenge.jpg", title="Challenge Title")


@pytest.fixture
def team_member() -> TeamMember:
    return TeamMember(name="John", role="Manager", avatar="avatar.jpg")

"""Tests for date-seeded daily content."""

from __future__ import annotations

import random
from datetime import date

import pytest

from happify.domain.daily_log import ValidationError
from happify.services.content import (
    AFFIRMATIONS,
    COMMUNITY_PROMPTS,
    KINDNESS_CHALLENGES,
    daily_affirmation,
    daily_community_prompt,
    daily_kindness_challenge,
    daily_seed,
    pick_for_day,
    random_affirmation,
    random_kindness_challenge,
)


def test_daily_seed_concatenates_date_parts():
    assert daily_seed(date(2024, 1, 10)) == 20240110
    assert daily_seed("1999-12-31") == 19991231


def test_same_day_same_pick():
    day = date(2024, 3, 15)

    assert daily_affirmation(day) is daily_affirmation("2024-03-15")
    assert daily_kindness_challenge(day) is daily_kindness_challenge(day)


def test_pick_uses_seed_modulo_catalog_size():
    day = date(2024, 1, 10)

    assert daily_affirmation(day) == AFFIRMATIONS[20240110 % 30]
    assert daily_kindness_challenge(day) == KINDNESS_CHALLENGES[20240110 % 12]
    assert daily_community_prompt(day) == COMMUNITY_PROMPTS[20240110 % 10]


def test_catalog_sizes():
    assert len(AFFIRMATIONS) == 30
    assert len(KINDNESS_CHALLENGES) == 12
    assert {c.difficulty for c in KINDNESS_CHALLENGES} == {"easy", "medium", "hard"}


def test_empty_catalog_rejected():
    with pytest.raises(ValueError):
        pick_for_day([], date(2024, 1, 1))


def test_malformed_day_rejected():
    with pytest.raises(ValidationError):
        daily_affirmation("someday")


def test_random_picks_with_seeded_rng():
    rng_a = random.Random(42)
    rng_b = random.Random(42)

    assert random_affirmation(rng_a) == random_affirmation(rng_b)
    assert random_kindness_challenge(rng_a) in KINDNESS_CHALLENGES

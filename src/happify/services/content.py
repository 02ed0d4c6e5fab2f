"""Affirmations, kindness challenges and community prompts picked per day."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date
from typing import Literal, Optional, Sequence, TypeVar

from ..domain.daily_log import parse_log_date

T = TypeVar("T")

Difficulty = Literal["easy", "medium", "hard"]


@dataclass(frozen=True, slots=True)
class Affirmation:
    text: str
    category: str


@dataclass(frozen=True, slots=True)
class KindnessChallenge:
    title: str
    description: str
    difficulty: Difficulty
    emoji: str


AFFIRMATIONS: tuple[Affirmation, ...] = (
    Affirmation("You are exactly where you need to be right now.", "peace"),
    Affirmation("Your feelings are valid, and it's okay to feel them.", "self"),
    Affirmation("Small steps still move you forward.", "growth"),
    Affirmation("You deserve rest, not just productivity.", "self"),
    Affirmation("Today is a fresh page in your story.", "hope"),
    Affirmation("You are more resilient than you know.", "strength"),
    Affirmation("It's okay to take things one moment at a time.", "peace"),
    Affirmation("Your worth is not measured by your output.", "self"),
    Affirmation("Difficult days don't last forever.", "hope"),
    Affirmation("You bring something unique to this world.", "self"),
    Affirmation("Progress, not perfection, is what matters.", "growth"),
    Affirmation("You are allowed to set boundaries.", "strength"),
    Affirmation("Joy can be found in the smallest moments.", "peace"),
    Affirmation("Your past does not define your future.", "hope"),
    Affirmation("Being kind to yourself is not selfish.", "self"),
    Affirmation("You have survived 100% of your hardest days.", "strength"),
    Affirmation("Every breath is a chance to begin again.", "peace"),
    Affirmation("You are worthy of love and belonging.", "self"),
    Affirmation("Trust the timing of your life.", "hope"),
    Affirmation("You are growing, even when you can't see it.", "growth"),
    Affirmation("It's okay to ask for help.", "strength"),
    Affirmation("Your presence matters to someone.", "self"),
    Affirmation("Let go of what you cannot control.", "peace"),
    Affirmation("Good things are coming your way.", "hope"),
    Affirmation("You are capable of amazing things.", "growth"),
    Affirmation("Rest is productive. You need it.", "self"),
    Affirmation("This moment is all you need to focus on.", "peace"),
    Affirmation("Your struggles are shaping your strength.", "strength"),
    Affirmation("Tomorrow holds new possibilities.", "hope"),
    Affirmation("You are doing better than you think.", "growth"),
)

KINDNESS_CHALLENGES: tuple[KindnessChallenge, ...] = (
    KindnessChallenge("Compliment a stranger", "Notice something nice about someone and tell them", "easy", "😊"),
    KindnessChallenge("Write a thank you note", "Send a message of gratitude to someone who helped you", "easy", "✉️"),
    KindnessChallenge("Leave a positive review", "Review a small business or creator you appreciate", "easy", "⭐"),
    KindnessChallenge("Hold the door open", "Be mindful and hold doors for people today", "easy", "🚪"),
    KindnessChallenge(
        "Send a 'thinking of you' message",
        "Reach out to someone you haven't talked to in a while",
        "easy",
        "💭",
    ),
    KindnessChallenge("Donate something you don't need", "Give clothes, books, or items to those who need them", "medium", "📦"),
    KindnessChallenge("Pay for someone's coffee", "Cover the bill for the person behind you in line", "medium", "☕"),
    KindnessChallenge("Listen without giving advice", "When someone talks, just listen and empathize", "medium", "👂"),
    KindnessChallenge("Volunteer 1 hour", "Give your time to a local charity or cause", "hard", "🤝"),
    KindnessChallenge("Forgive someone silently", "Let go of a grudge for your own peace", "hard", "🕊️"),
    KindnessChallenge("Teach someone something", "Share a skill or knowledge with someone who needs it", "medium", "📚"),
    KindnessChallenge("Give a genuine smile to 5 people", "Make eye contact and share real warmth", "easy", "😊"),
)

COMMUNITY_PROMPTS: tuple[str, ...] = (
    "Share a compliment you'd give to a stranger",
    "What small act of kindness made your day?",
    "Write an encouraging note to someone having a hard time",
    "What positive affirmation do you need today?",
    "Share something that made you smile recently",
    "What's one thing you're proud of today?",
    "Describe a moment of peace you experienced",
    "What would you tell your younger self?",
    "Share a lesson life taught you gently",
    "What's beautiful about being human?",
)


def daily_seed(day: date | str) -> int:
    """Seed shared by all daily picks, e.g. 2024-01-10 -> 20240110."""

    value = parse_log_date(day)
    return value.year * 10000 + value.month * 100 + value.day


def pick_for_day(items: Sequence[T], day: date | str) -> T:
    if not items:
        raise ValueError("Cannot pick from an empty catalog")
    return items[daily_seed(day) % len(items)]


def daily_affirmation(day: date | str) -> Affirmation:
    return pick_for_day(AFFIRMATIONS, day)


def daily_kindness_challenge(day: date | str) -> KindnessChallenge:
    return pick_for_day(KINDNESS_CHALLENGES, day)


def daily_community_prompt(day: date | str) -> str:
    return pick_for_day(COMMUNITY_PROMPTS, day)


def random_affirmation(rng: Optional[random.Random] = None) -> Affirmation:
    """Any affirmation, for the "new quote" button."""

    return (rng or random).choice(AFFIRMATIONS)


def random_kindness_challenge(rng: Optional[random.Random] = None) -> KindnessChallenge:
    return (rng or random).choice(KINDNESS_CHALLENGES)


__all__ = [
    "AFFIRMATIONS",
    "COMMUNITY_PROMPTS",
    "KINDNESS_CHALLENGES",
    "Affirmation",
    "KindnessChallenge",
    "daily_affirmation",
    "daily_community_prompt",
    "daily_kindness_challenge",
    "daily_seed",
    "pick_for_day",
    "random_affirmation",
    "random_kindness_challenge",
]

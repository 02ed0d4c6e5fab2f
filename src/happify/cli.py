"""Command line entry points for Happify."""

from __future__ import annotations

import json
from datetime import date, datetime, time, timedelta
from typing import Optional

import click

from .config import BaseConfig
from .domain.daily_log import DayStatus, StreakSummary, ValidationError, parse_log_date
from .domain.repositories import HabitRepository, JournalRepository
from .infra.database import bootstrap_database
from .infra.repositories import SQLModelHabitRepository, SQLModelJournalRepository
from .logging_config import get_logger, setup_logging
from .services.badges import BADGES, badge_progress, build_badge_stats, unlocked_badges
from .services.content import daily_affirmation, daily_kindness_challenge
from .services.mood import has_mood_data, mood_trend

logger = get_logger(__name__)

_DAY_MARKS = {
    DayStatus.PERFECT: "✓",
    DayStatus.FAILED: "×",
    DayStatus.NO_DATA: "·",
}


def _parse_day(value: Optional[str], param_name: str) -> date:
    """CLI boundary: the only place the local clock is consulted."""

    if value is None:
        return date.today()
    try:
        return parse_log_date(value)
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint=param_name) from exc


def _render_summary(summary: StreakSummary) -> str:
    lines = [
        f"Current streak: {summary.current}",
        f"Best streak:    {summary.longest}",
        "",
    ]
    for view in summary.recent_window:
        mark = _DAY_MARKS.get(view.status, str(view.completed_count))
        lines.append(f"{view.date.isoformat()} {view.date:%a}  {mark}  {view.completed_count}/{view.total_count}")
    return "\n".join(lines)


class AppState:
    """Lazily bootstraps the database for commands that need it."""

    def __init__(self, config: BaseConfig):
        self.config = config
        self._session_factory = None

    @property
    def session_factory(self):
        if self._session_factory is None:
            _, self._session_factory = bootstrap_database(self.config)
        return self._session_factory

    def habits(self) -> HabitRepository:
        return SQLModelHabitRepository(self.session_factory)

    def journal(self) -> JournalRepository:
        return SQLModelJournalRepository(self.session_factory)


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """Happify wellness tracker."""

    try:
        config = BaseConfig()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    setup_logging(config)
    ctx.obj = AppState(config)


@main.command("init-db")
@click.pass_obj
def init_db(state: AppState) -> None:
    """Create the database tables."""

    bootstrap_database(state.config)
    click.echo(f"Database ready: {state.config.DATABASE_URL}")


@main.command()
@click.option("--user", "user_id", required=True, help="User identifier")
@click.option("--today", "today_value", default=None, help="Reference date (YYYY-MM-DD)")
@click.option("--window", "window_days", type=int, default=None, help="Days in the recent window")
@click.option("--as-json", is_flag=True, default=False, help="Print JSON instead of text")
@click.pass_obj
def streaks(state: AppState, user_id: str, today_value: Optional[str], window_days: Optional[int], as_json: bool) -> None:
    """Show current and best habit streaks."""

    today = _parse_day(today_value, "--today")
    window = window_days if window_days is not None else state.config.STREAK_WINDOW_DAYS
    try:
        summary = state.habits().get_streak_summary(
            user_id, today, window_days=window, history_days=state.config.HISTORY_DAYS
        )
    except ValidationError as exc:
        logger.error("Streak computation failed", extra={"user_id": user_id, "value": exc.value})
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(summary.as_dict(), indent=2))
    else:
        click.echo(_render_summary(summary))


@main.command()
@click.option("--user", "user_id", required=True, help="User identifier")
@click.option("--today", "today_value", default=None, help="Reference date (YYYY-MM-DD)")
@click.pass_obj
def badges(state: AppState, user_id: str, today_value: Optional[str]) -> None:
    """List achievement badges and progress."""

    today = _parse_day(today_value, "--today")
    habits = state.habits()
    journal = state.journal()
    logs = habits.daily_logs_until(user_id, today)
    stats = build_badge_stats(
        logs,
        today,
        total_habits=habits.count_completed(user_id),
        gratitude_count=journal.count_gratitude(user_id),
        kindness_count=journal.count_kindness(user_id),
    )
    earned = {badge.id for badge in unlocked_badges(stats)}
    click.echo(f"{len(earned)} / {len(BADGES)} Badges Unlocked")
    for badge in BADGES:
        if badge.id in earned:
            click.echo(f"  {badge.emoji} {badge.name}")
        else:
            click.echo(f"  🔒 {badge.name} ({badge_progress(badge, stats):.0f}%)")


@main.command()
@click.option("--user", "user_id", required=True, help="User identifier")
@click.option("--today", "today_value", default=None, help="Reference date (YYYY-MM-DD)")
@click.pass_obj
def moods(state: AppState, user_id: str, today_value: Optional[str]) -> None:
    """Show the daily mood trend."""

    today = _parse_day(today_value, "--today")
    days = state.config.MOOD_WINDOW_DAYS
    since = datetime.combine(today - timedelta(days=days - 1), time.min).astimezone()
    points = mood_trend(state.journal().list_moods_since(user_id, since), today, days=days)
    if not has_mood_data(points):
        click.echo("Start logging moods to see your trends!")
        return
    for point in points:
        value = f"{point.value:.1f} {point.emoji}" if point.value is not None else "-"
        click.echo(f"{point.date:%b %d}  {value}")


@main.command()
@click.option("--day", "day_value", default=None, help="Date (YYYY-MM-DD)")
def affirmation(day_value: Optional[str]) -> None:
    """Print the affirmation of the day."""

    chosen = daily_affirmation(_parse_day(day_value, "--day"))
    click.echo(f'"{chosen.text}"')


@main.command()
@click.option("--day", "day_value", default=None, help="Date (YYYY-MM-DD)")
def kindness(day_value: Optional[str]) -> None:
    """Print the kindness challenge of the day."""

    challenge = daily_kindness_challenge(_parse_day(day_value, "--day"))
    click.echo(f"{challenge.emoji} {challenge.title} [{challenge.difficulty}]")
    click.echo(f"   {challenge.description}")


if __name__ == "__main__":  # pragma: no cover
    main()

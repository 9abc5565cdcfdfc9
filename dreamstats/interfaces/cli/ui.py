#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dreamstats.helpers.dto.analytics_dto import DreamAnalytics
from dreamstats.interfaces.cli.utils import format_duration, format_mood, format_percentage

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"

# Longest bar drawn for histogram-style tables
BAR_WIDTH = 30


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


class TableDisplay:
    """
    Formatted tables for summaries and rankings.
    """

    @staticmethod
    def show_summary(title: str, data: dict[str, Any], border_style: str = COLOR_INFO):
        """Display a two-column metric/value table."""
        table = Table(title=title, box=box.ROUNDED, show_header=False, border_style=border_style)
        table.add_column("Metric", style="bold")
        table.add_column("Value")

        for key, value in data.items():
            table.add_row(key, str(value))

        console.print(table)

    @staticmethod
    def show_rows(title: str, columns: Sequence[str], rows: Sequence[Sequence[Any]]):
        """Display a generic table; skipped entirely when there are no rows."""
        if not rows:
            return
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        for index, column in enumerate(columns):
            table.add_column(column, style=COLOR_INFO if index == 0 else None)
        for row in rows:
            table.add_row(*(str(cell) for cell in row))
        console.print(table)


def _bar(count: int, peak: int) -> str:
    if peak <= 0 or count <= 0:
        return ""
    return "█" * max(1, round(count / peak * BAR_WIDTH))


def show_analytics(analytics: DreamAnalytics, title: str = "Dream Analytics"):
    """Render a full DreamAnalytics aggregate."""
    lucid = analytics.lucid_dream_progress
    TableDisplay.show_summary(
        title,
        {
            "Dreams": lucid.total_dreams,
            "Streak": f"{analytics.streak_days} day(s)",
            "Quality score": f"{analytics.average_quality_score}/100",
            "Total dream time": format_duration(analytics.total_dream_time * 60),
            "Average length": format_duration(analytics.average_dream_length),
            "Most productive hour": f"{analytics.most_productive_hour:02d}:00",
            "Most productive day": analytics.most_productive_day,
            "Lucid": f"{lucid.total_lucid} ({format_percentage(lucid.percentage)})",
        },
    )

    hour_peak = max(bucket.count for bucket in analytics.dreams_by_hour)
    TableDisplay.show_rows(
        "Dreams by Hour",
        ["Hour", "Count", "Avg mood", ""],
        [
            (f"{b.hour:02d}", b.count, format_mood(b.avg_mood), _bar(b.count, hour_peak))
            for b in analytics.dreams_by_hour
            if b.count
        ],
    )

    day_peak = max(bucket.count for bucket in analytics.dreams_by_day_of_week)
    TableDisplay.show_rows(
        "Dreams by Day",
        ["Day", "Count", "Avg mood", ""],
        [(b.day, b.count, format_mood(b.avg_mood), _bar(b.count, day_peak)) for b in analytics.dreams_by_day_of_week],
    )

    month_peak = max(bucket.count for bucket in analytics.dreams_by_month)
    TableDisplay.show_rows(
        "Dreams by Month",
        ["Month", "Count", ""],
        [(f"{b.month} {b.year}", b.count, _bar(b.count, month_peak)) for b in analytics.dreams_by_month],
    )

    TableDisplay.show_rows(
        "Clarity",
        ["Range", "Count", "Share"],
        [(b.range, b.count, format_percentage(b.percentage)) for b in analytics.clarity_distribution],
    )
    TableDisplay.show_rows(
        "Mood Trend",
        ["Date", "Avg mood", "Dreams"],
        [(p.date, format_mood(p.avg_mood), p.count) for p in analytics.mood_trend],
    )
    TableDisplay.show_rows(
        "Lucid Dreams by Month",
        ["Month", "Lucid", "Total", "Share"],
        [(m.month, m.lucid_count, m.total_count, format_percentage(m.percentage)) for m in lucid.monthly_trend],
    )
    TableDisplay.show_rows("Top Symbols", ["Symbol", "Count"], [(s.symbol, s.count) for s in analytics.top_symbols])
    TableDisplay.show_rows(
        "Emotional Tones",
        ["Tone", "Count", "Avg intensity"],
        [(t.tone, t.count, f"{t.avg_intensity:.1f}") for t in analytics.emotional_tones],
    )
    TableDisplay.show_rows("Dream Topics", ["Topic", "Count"], [(t.topic, t.count) for t in analytics.dream_topics])
    TableDisplay.show_rows(
        "Locations",
        ["Location", "Count", "Avg mood"],
        [(loc.location, loc.count, format_mood(loc.avg_mood)) for loc in analytics.location_stats],
    )


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")

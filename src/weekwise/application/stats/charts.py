"""Chart-ready series for the weekly analytics view."""

from dataclasses import dataclass

from weekwise.domain.constants import MAX_SCORE
from weekwise.domain.schedule.models import Day, SlotType, WeekStatistics

MIX_LABELS = {
    SlotType.STUDY: "Study",
    SlotType.ESSENTIAL: "Essential",
    SlotType.NONESSENTIAL: "NonEssential",
    SlotType.EMPTY: "Empty",
}


@dataclass(frozen=True)
class ScoreBar:
    label: str
    value: int
    fraction: float  # of MAX_SCORE


@dataclass(frozen=True)
class MixSegment:
    slot_type: SlotType
    label: str
    value: int
    fraction: float  # of all scheduled hours


@dataclass(frozen=True)
class WeekCharts:
    score_bars: list[ScoreBar]
    mix_segments: list[MixSegment]
    summary_cards: list[tuple[str, str]]


def score_bars(week: WeekStatistics) -> list[ScoreBar]:
    return [
        ScoreBar(label=day.short_name, value=score, fraction=score / MAX_SCORE)
        for day, score in zip(Day.ordered(), week.scores)
    ]


def mix_segments(week: WeekStatistics) -> list[MixSegment]:
    counts = week.total_counts
    total = counts.total or 1
    return [
        MixSegment(
            slot_type=slot_type,
            label=label,
            value=counts.get(slot_type),
            fraction=counts.get(slot_type) / total,
        )
        for slot_type, label in MIX_LABELS.items()
    ]


def summary_cards(week: WeekStatistics) -> list[tuple[str, str]]:
    counts = week.total_counts
    return [
        ("Average Score", f"{week.avg_score}/{MAX_SCORE}"),
        ("Filled Slots", str(week.filled_total)),
        ("Study Slots", str(counts.study)),
        ("Essential Breaks", str(counts.essential)),
        ("Non-Essential Breaks", str(counts.nonessential)),
        ("Empty Slots", str(counts.empty)),
    ]


def build_week_charts(week: WeekStatistics) -> WeekCharts:
    return WeekCharts(
        score_bars=score_bars(week),
        mix_segments=mix_segments(week),
        summary_cards=summary_cards(week),
    )

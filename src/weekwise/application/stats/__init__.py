# Application Stats Package
from .charts import MixSegment, ScoreBar, WeekCharts, build_week_charts
from .scoring import ScoringEngine

__all__ = ["ScoringEngine", "ScoreBar", "MixSegment", "WeekCharts", "build_week_charts"]

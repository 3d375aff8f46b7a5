from goal_report.services.sections.base import SectionRenderer
from goal_report.services.sections.insights import InsightsSection
from goal_report.services.sections.overview import OverviewSection
from goal_report.services.sections.progress_table import ProgressTableSection
from goal_report.services.sections.statistics import StatisticsSection

__all__ = [
    "SectionRenderer",
    "OverviewSection",
    "StatisticsSection",
    "ProgressTableSection",
    "InsightsSection",
]

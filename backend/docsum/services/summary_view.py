from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence
from docsum.services.summary_formatter import (
    ChapterSection,
    KeyPoint,
    Paragraph,
    format_chapter,
    format_key_points,
    format_overview,
)

NO_OVERVIEW = "No overview available."
NO_KEY_POINTS = "No key points available."
NO_CHAPTERS = "No chapter summaries available."


@dataclass
class SummaryView:
    """What the viewer renders for one document: the overview tab and the chapters tab."""

    is_empty: bool
    overview: list[Paragraph] = field(default_factory=list)
    overview_placeholder: str | None = None
    key_points: list[KeyPoint] = field(default_factory=list)
    key_points_placeholder: str | None = None
    chapters: list[ChapterSection] = field(default_factory=list)
    chapters_placeholder: str | None = None


def first_of_type(summaries: Sequence[Mapping[str, Any]], summary_type: str) -> Mapping[str, Any] | None:
    return next((s for s in summaries if s.get("type") == summary_type), None)


def sorted_chapters(summaries: Sequence[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    # sorted() is stable, so equal orders keep storage order; missing orders go last
    chapters = [s for s in summaries if s.get("type") == "chapter"]
    return sorted(chapters, key=lambda s: (s.get("order") is None, s.get("order") or 0))


def build_summary_view(summaries: Sequence[Mapping[str, Any]]) -> SummaryView:
    if not summaries:
        return SummaryView(is_empty=True)

    view = SummaryView(is_empty=False)
    overview = first_of_type(summaries, "overview")
    if overview and overview.get("content"):
        view.overview = format_overview(overview["content"])
    if not view.overview:
        view.overview_placeholder = NO_OVERVIEW

    key_points = first_of_type(summaries, "key_points")
    if key_points and key_points.get("content"):
        view.key_points = format_key_points(key_points["content"])
    if not view.key_points:
        view.key_points_placeholder = NO_KEY_POINTS

    view.chapters = [format_chapter(s.get("content"), s.get("title")) for s in sorted_chapters(summaries)]
    if not view.chapters:
        view.chapters_placeholder = NO_CHAPTERS
    return view

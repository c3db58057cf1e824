"""Split generated summary text into display segments.

The pipeline writes summaries as loosely structured text: paragraphs are
separated by a blank line, key points are one per line and may end with an
importance marker such as ``(high)``. Nothing here raises; degenerate input
yields an empty list.
"""
import re
from dataclasses import dataclass, field

_IMPORTANCE_RE = re.compile(r"\s*\((high|medium|low)\)$", re.IGNORECASE)
_BULLET_PREFIX = "- "


@dataclass(frozen=True)
class Paragraph:
    text: str
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class KeyPoint:
    text: str
    importance: str = ""


@dataclass(frozen=True)
class ChapterSection:
    title: str
    paragraphs: list[Paragraph] = field(default_factory=list)


def _normalize(content: str | None) -> str:
    return (content or "").replace("\r\n", "\n")


def split_paragraphs(content: str | None) -> list[str]:
    return [part.strip() for part in _normalize(content).split("\n\n") if part.strip()]


def _tag_paragraphs(parts: list[str], first_tag: str, last_tag: str) -> list[Paragraph]:
    paragraphs = []
    last_index = len(parts) - 1
    for index, text in enumerate(parts):
        tags = []
        if index == 0:
            tags.append(first_tag)
        if index == last_index:
            tags.append(last_tag)
        paragraphs.append(Paragraph(text=text, tags=tuple(tags)))
    return paragraphs


def format_overview(content: str | None) -> list[Paragraph]:
    return _tag_paragraphs(split_paragraphs(content), "introduction", "conclusion")


def format_key_points(content: str | None) -> list[KeyPoint]:
    points = []
    for line in _normalize(content).split("\n"):
        text = line.strip()
        if not text:
            continue
        importance = ""
        match = _IMPORTANCE_RE.search(text)
        if match:
            importance = match.group(1).lower()
            text = text[: match.start()]
        if text.startswith(_BULLET_PREFIX):
            text = text[len(_BULLET_PREFIX):]
        text = text.strip()
        if text:
            points.append(KeyPoint(text=text, importance=importance))
    return points


def format_chapter(content: str | None, title: str | None) -> ChapterSection:
    paragraphs = _tag_paragraphs(split_paragraphs(content), "overview", "significance")
    return ChapterSection(title=title or "", paragraphs=paragraphs)

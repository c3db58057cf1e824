from docsum.services.summary_view import (
    NO_CHAPTERS,
    NO_KEY_POINTS,
    NO_OVERVIEW,
    build_summary_view,
    first_of_type,
    sorted_chapters,
)


def _chapter(title, order):
    return {"type": "chapter", "title": title, "content": f"{title} body", "order": order}


def test_empty_summary_list_is_empty_state():
    view = build_summary_view([])
    assert view.is_empty
    assert view.chapters == []


def test_chapters_sorted_by_order():
    summaries = [_chapter("Second", 2), _chapter("First", 1)]
    view = build_summary_view(summaries)
    assert [c.title for c in view.chapters] == ["First", "Second"]


def test_chapter_order_ties_keep_storage_order_and_missing_go_last():
    summaries = [_chapter("B", 1), _chapter("None", None), _chapter("A", 1), _chapter("Zero", 0)]
    assert [c["title"] for c in sorted_chapters(summaries)] == ["Zero", "B", "A", "None"]


def test_first_match_by_type_wins():
    summaries = [
        {"type": "overview", "content": "first"},
        {"type": "overview", "content": "second"},
    ]
    assert first_of_type(summaries, "overview")["content"] == "first"
    assert first_of_type(summaries, "key_points") is None


def test_missing_sections_render_placeholders():
    view = build_summary_view([_chapter("Only chapter", 1)])
    assert not view.is_empty
    assert view.overview_placeholder == NO_OVERVIEW
    assert view.key_points_placeholder == NO_KEY_POINTS
    assert view.chapters_placeholder is None


def test_overview_and_key_points_are_formatted():
    summaries = [
        {"type": "key_points", "content": "- Alpha (high)\n- Beta"},
        {"type": "overview", "content": "Start.\n\nEnd."},
    ]
    view = build_summary_view(summaries)
    assert [p.text for p in view.overview] == ["Start.", "End."]
    assert [(k.text, k.importance) for k in view.key_points] == [("Alpha", "high"), ("Beta", "")]
    assert view.chapters == []
    assert view.chapters_placeholder == NO_CHAPTERS

from recency_tabs.render import Segment, center, escape, highlight, parse_segments


def test_highlight_wraps_and_resets() -> None:
    assert highlight("abc", "TabsSelected") == "%#TabsSelected#abc%#TabsUnfocused#"


def test_escape_doubles_percent() -> None:
    assert escape("50%") == "50%%"


def test_center_pads_both_sides() -> None:
    assert center("ab", 6) == "  ab  "
    assert center("ab", 5) == " ab  "


def test_center_crops_when_too_wide() -> None:
    assert center("Explorer", 4) == "Expl"
    assert center("anything", 0) == ""


def test_parse_segments_splits_groups() -> None:
    markup = "lead%#A#one%#B#two%%%#A#%#B#"

    assert parse_segments(markup, default_group="Fill") == [
        Segment("Fill", "lead"),
        Segment("A", "one"),
        Segment("B", "two%"),
    ]


def test_parse_segments_merges_adjacent_groups() -> None:
    markup = highlight(" ", "A") + highlight("x", "A") + highlight(" ", "A")

    assert parse_segments(markup) == [Segment("A", " x ")]

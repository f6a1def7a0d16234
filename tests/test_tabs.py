import pytest

from fieldsets.tabs import fix_tabs


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a\n  b\n", "a\n  b\n"),
        ("\t\ta\n\t\t\tb\n", "a\n\tb\n"),
        ("\n\t\ta\n\t\tb\n", "a\nb\n"),
        ("\n\t\ta\n\t\t\tb\n\t", "a\n\tb\n"),
        ("\t\ta\n\t\t  b\n", "a\n  b\n"),
    ],
)
def test_fix_tabs(text, expected):
    assert fix_tabs(text) == expected


def test_fix_tabs_rejects_short_indent():
    with pytest.raises(ValueError, match="line 1"):
        fix_tabs("\t\ta\n\tb\n")


def test_fix_tabs_without_trailing_newline():
    assert fix_tabs("\ta\n\tb") == "a\nb"
import pytest

from sitereviews.common.strings.names import format_name, review_count_label


@pytest.mark.parametrize(
    "full,short",
    [
        ("John Smith", "John S."),
        ("Cher", "Cher"),
        ("Mary Jane Watson", "Mary W."),
        ("  ada   lovelace ", "ada L."),
        ("Seán ó Briain", "Seán B."),
    ],
)
def test_format_name(full, short):
    assert format_name(full) == short


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_format_name_blank_is_empty(blank):
    assert format_name(blank) == ""


def test_review_count_label():
    assert review_count_label(0) == "0 reviews"
    assert review_count_label(1) == "1 review"
    assert review_count_label(12) == "12 reviews"

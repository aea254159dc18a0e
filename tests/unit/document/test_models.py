import dataclasses

import pytest

from gdocs_markdown.document.models import (
    Bullet,
    HeadingStyle,
    TextRun,
    TextStyle,
    is_ordered_list,
)


class TestHeadingStyle:
    @pytest.mark.parametrize(
        ("style", "level"),
        [
            (HeadingStyle.TITLE, 1),
            (HeadingStyle.HEADING_1, 1),
            (HeadingStyle.HEADING_2, 2),
            (HeadingStyle.HEADING_4, 4),
            (HeadingStyle.HEADING_6, 6),
        ],
    )
    def test_level(self, style: HeadingStyle, level: int) -> None:
        assert style.level == level


class TestIsOrderedList:
    LISTS = {"kix.1": ("DECIMAL", "BULLET", "ALPHA")}

    def test_ordered_level(self) -> None:
        assert is_ordered_list(self.LISTS, Bullet(nesting_level=2, list_id="kix.1"))

    def test_unordered_level(self) -> None:
        assert not is_ordered_list(self.LISTS, Bullet(nesting_level=1, list_id="kix.1"))

    def test_missing_list_id(self) -> None:
        assert not is_ordered_list(self.LISTS, Bullet())

    def test_no_catalog(self) -> None:
        assert not is_ordered_list(None, Bullet(list_id="kix.1"))
        assert not is_ordered_list({}, Bullet(list_id="kix.1"))

    def test_negative_level_is_unordered(self) -> None:
        assert not is_ordered_list(self.LISTS, Bullet(nesting_level=-1, list_id="kix.1"))


class TestImmutability:
    def test_text_run_is_frozen(self) -> None:
        run = TextRun("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            run.content = "y"  # type: ignore[misc]

    def test_emphasis_flag(self) -> None:
        assert TextStyle(strikethrough=True).is_emphasized
        assert not TextStyle(link_url="u").is_emphasized

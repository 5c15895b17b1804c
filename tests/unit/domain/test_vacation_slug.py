"""Tests for unique vacation slugs."""

from bizhub.domain.accommodation import unique_slug


class TestUniqueSlug:
    def test_free_slug_is_used_as_is(self) -> None:
        assert unique_slug("Beach Week", set()) == "beach-week"

    def test_taken_slug_is_numbered(self) -> None:
        assert unique_slug("Beach Week", {"beach-week", "beach-week-2"}) == "beach-week-3"

    def test_name_without_slug_characters(self) -> None:
        assert unique_slug("!!!", set()) == "vacation"

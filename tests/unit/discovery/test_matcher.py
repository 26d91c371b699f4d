"""Tests for the exclusion matcher."""

from pathlib import Path

import pytest
from flutterwipe.discovery.matcher import ALWAYS_EXCLUDED_SUBSTRINGS, should_exclude


class TestAlwaysExcluded:
    """Tests for the built-in mason cache rule."""

    def test_substrings_defined(self) -> None:
        """Both separator variants are listed."""
        assert "mason-cache" in ALWAYS_EXCLUDED_SUBSTRINGS
        assert "mason_cache" in ALWAYS_EXCLUDED_SUBSTRINGS

    @pytest.mark.parametrize(
        "path",
        [
            "/home/dev/.mason-cache/bricks",
            "/home/dev/mason_cache",
            "/srv/mason-cache",
        ],
    )
    def test_mason_cache_excluded_without_patterns(self, path: str) -> None:
        """Mason caches are excluded even with an empty pattern set."""
        assert should_exclude(Path(path), frozenset()) is True

    def test_plain_mason_not_excluded(self) -> None:
        """A directory merely named 'mason' is not a cache."""
        assert should_exclude(Path("/home/dev/mason"), frozenset()) is False


class TestExactMatch:
    """Tests for exact name matches."""

    @pytest.mark.parametrize("name", [".git", "build", "node_modules", "Pods"])
    def test_exact_name_excluded(self, name: str) -> None:
        """A directory whose name equals a pattern is excluded."""
        patterns = frozenset({".git", "build", "node_modules", "Pods"})
        assert should_exclude(Path("/work") / name, patterns) is True

    def test_match_is_case_sensitive(self) -> None:
        """'Build' does not match the pattern 'build'."""
        assert should_exclude(Path("/work/Build"), frozenset({"build"})) is False


class TestSubstringMatch:
    """Tests for the bidirectional containment rule."""

    def test_name_contains_pattern(self) -> None:
        """A longer directory name containing the pattern is excluded."""
        assert should_exclude(Path("/work/.github"), frozenset({".git"})) is True

    def test_pattern_contains_name(self) -> None:
        """A short directory name contained in a pattern is excluded."""
        assert should_exclude(Path("/work/cache"), frozenset({".pub-cache"})) is True

    def test_short_pattern_over_excludes(self) -> None:
        """A generic pattern excludes unrelated names that share text."""
        assert should_exclude(Path("/work/a"), frozenset({"app"})) is True
        assert should_exclude(Path("/work/myapp_v2"), frozenset({"app"})) is True


class TestFullPathMatch:
    """Tests for matches anywhere in the full path."""

    def test_pattern_in_parent_component(self) -> None:
        """A pattern matching an ancestor excludes the descendant."""
        path = Path("/work/third_party/widgets/lib")
        assert should_exclude(path, frozenset({"third_party"})) is True

    def test_pattern_spanning_components(self) -> None:
        """Patterns are matched against the path string, separators included."""
        path = Path("/work/vendor/pkgs/app")
        assert should_exclude(path, frozenset({"vendor/pkgs"})) is True


class TestNoMatch:
    """Tests for directories that are included."""

    def test_empty_patterns_include_everything(self) -> None:
        """With no patterns, even default tooling names are included."""
        for name in (".git", "build", "flutter", ".dart_tool"):
            assert should_exclude(Path("/work") / name, frozenset()) is False

    @pytest.mark.parametrize(
        ("path", "patterns"),
        [
            ("/work/my_app", {"node_modules", ".git"}),
            ("/srv/projects/shop", {"legacy"}),
            ("/home/dev/mobile/client", {"Pods", "ephemeral", "xyz"}),
        ],
    )
    def test_unrelated_patterns_do_not_match(self, path: str, patterns: set[str]) -> None:
        """Neither containment direction holds, so the path is included."""
        assert should_exclude(Path(path), frozenset(patterns)) is False

    def test_accepts_any_collection(self) -> None:
        """Plain sets and lists work as pattern collections."""
        assert should_exclude(Path("/work/build"), ["build"]) is True
        assert should_exclude(Path("/work/src"), {"build"}) is False

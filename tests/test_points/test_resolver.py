"""Tests for warp point resolution."""

import pytest

from warpdir.points.errors import NoOpWarpWarning, NotFoundError
from warpdir.points.resolver import WarpResolver
from warpdir.points.types import BackReference, WarpTarget


class TestWarpResolver:
    def setup_method(self):
        self.points = {"proj": "/home/u/proj"}
        self.resolver = WarpResolver(self.points)

    def test_known_point(self):
        assert self.resolver.resolve("proj") == WarpTarget(path="/home/u/proj")

    def test_unknown_point(self):
        with pytest.raises(NotFoundError, match="Unknown warp point 'nope'"):
            self.resolver.resolve("nope")
        assert self.points == {"proj": "/home/u/proj"}

    def test_single_dot_is_noop_warning(self):
        with pytest.raises(NoOpWarpWarning):
            self.resolver.resolve(".")

    def test_two_dots_go_back_one(self):
        assert self.resolver.resolve("..") == BackReference(steps=1)

    def test_four_dots_go_back_three(self):
        result = self.resolver.resolve("....")
        assert isinstance(result, BackReference)
        assert result.steps == 3
        assert result.instruction() == "-3"

    def test_dots_never_look_up_store(self):
        resolver = WarpResolver({"..": "/should/not/win"})
        assert isinstance(resolver.resolve(".."), BackReference)

    def test_dots_with_trailing_newline_is_a_lookup(self):
        with pytest.raises(NotFoundError):
            self.resolver.resolve("..\n")

"""
Tests for configuration validation.
"""

import pytest

from bonsai.config import Animation, BaseType, BranchType, GrowthParameters, RunConfig


class TestGrowthParameters:
    """Tests for growth parameter validation."""

    def test_defaults(self) -> None:
        """Default parameters use one '&' leaf."""
        params = GrowthParameters()
        assert params.life_start == 32
        assert params.multiplier == 5
        assert params.leaves == ("&",)
        assert params.leaves_size == 1
        assert not params.verbose

    def test_zero_multiplier_rejected(self) -> None:
        """multiplier = 0 would divide by zero during growth."""
        with pytest.raises(ValueError, match="multiplier"):
            GrowthParameters(multiplier=0)
        with pytest.raises(ValueError, match="multiplier"):
            GrowthParameters(multiplier=-2)

    def test_negative_life_rejected(self) -> None:
        """life_start must be nonnegative."""
        with pytest.raises(ValueError, match="life_start"):
            GrowthParameters(life_start=-1)

    def test_leaves_size_bounded_by_leaves(self) -> None:
        """leaves_size cannot point past the leaf list."""
        with pytest.raises(ValueError, match="exceeds"):
            GrowthParameters(leaves=("&",), leaves_size=2)
        with pytest.raises(ValueError, match="leaves_size"):
            GrowthParameters(leaves_size=-1)

    def test_leaves_size_defaults_to_count(self) -> None:
        """Omitting leaves_size uses every leaf."""
        params = GrowthParameters(leaves=["a", "b", "c"])
        assert params.leaves == ("a", "b", "c")
        assert params.leaves_size == 3

    def test_from_leaf_string(self) -> None:
        """Comma-separated leaves are split and empty entries dropped."""
        params = GrowthParameters.from_leaf_string("&,*,,@", multiplier=3)
        assert params.leaves == ("&", "*", "@")
        assert params.leaves_size == 3
        assert params.multiplier == 3

    def test_presets_valid(self) -> None:
        """Presets construct without errors."""
        for preset in (GrowthParameters.default, GrowthParameters.sparse, GrowthParameters.dense):
            params = preset()
            assert params.multiplier > 0
            assert params.leaves_size <= len(params.leaves)

    def test_frozen(self) -> None:
        """Parameters cannot change during growth."""
        params = GrowthParameters()
        with pytest.raises(AttributeError):
            params.multiplier = 3  # type: ignore[misc]


class TestBranchType:
    """Tests for branch type helpers."""

    def test_woody_types(self) -> None:
        """Trunks and shoots are woody; foliage is not."""
        assert BranchType.TRUNK.is_woody
        assert BranchType.SHOOT_LEFT.is_woody
        assert BranchType.SHOOT_RIGHT.is_woody
        assert not BranchType.DYING.is_woody
        assert not BranchType.DEAD.is_woody


class TestRunConfig:
    """Tests for driver configuration."""

    def test_screensaver_implies_live_infinite(self) -> None:
        """Screensaver mode turns on live and infinite growth."""
        config = RunConfig(screensaver=True)
        assert config.live
        assert config.infinite

    def test_negative_times_rejected(self) -> None:
        """Delays must be nonnegative."""
        with pytest.raises(ValueError):
            RunConfig(time_step=-0.1)
        with pytest.raises(ValueError):
            RunConfig(time_wait=-1)
        with pytest.raises(ValueError):
            Animation(time_step=-1)

    def test_negative_seed_rejected(self) -> None:
        """Seeds are nonnegative."""
        with pytest.raises(ValueError):
            RunConfig(seed=-5)

    def test_animation_only_when_live(self) -> None:
        """Static runs get no animation settings."""
        assert RunConfig().animation() is None
        animation = RunConfig(live=True, time_step=0.5).animation(skip_until_branch=12)
        assert animation == Animation(time_step=0.5, skip_until_branch=12)

    def test_default_base(self) -> None:
        """The big pot is drawn by default."""
        assert RunConfig().base is BaseType.BIG

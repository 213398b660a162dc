"""
Feature Flag and A/B Variant Tests

Tests flag resolution per environment and deterministic variant bucketing.
"""

import pytest
from pydantic import ValidationError

from src.flags import (
    CTA_VARIANTS,
    DEFAULT_FLAGS,
    ENVIRONMENT_OVERRIDES,
    FeatureFlags,
    assign_flag_variant,
    assign_user_to_variant,
    get_badge_animation_class,
    get_cta_texts,
    resolve_experiment_variants,
    resolve_feature_flags,
    string_hash,
)
from src.scoring import Tier


# =============================================================================
# FLAGS
# =============================================================================

class TestFeatureFlags:
    """Test flag defaults and immutability."""

    def test_defaults(self):
        assert DEFAULT_FLAGS.show_confetti is False
        assert DEFAULT_FLAGS.enable_badge_sharing is True
        assert DEFAULT_FLAGS.show_leaderboard is True
        assert DEFAULT_FLAGS.enable_quick_wins is True
        assert DEFAULT_FLAGS.cta_text_variant == "default"
        assert DEFAULT_FLAGS.incentive_display == "always"
        assert DEFAULT_FLAGS.badge_animation == "glow"
        assert DEFAULT_FLAGS.enable_retargeting is False
        assert DEFAULT_FLAGS.experiments_enabled is False

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_FLAGS.show_confetti = True

    def test_unknown_flag_rejected(self):
        with pytest.raises(ValidationError):
            FeatureFlags(show_fireworks=True)

    def test_unknown_variant_rejected(self):
        with pytest.raises(ValidationError):
            FeatureFlags(cta_text_variant="loud")

    def test_is_enabled(self):
        assert DEFAULT_FLAGS.is_enabled("enable_quick_wins") is True
        with pytest.raises(ValueError):
            DEFAULT_FLAGS.is_enabled("cta_text_variant")

    def test_get_variant(self):
        assert DEFAULT_FLAGS.get_variant("outcome_layout") == "card"


class TestResolveFeatureFlags:
    """Test environment resolution."""

    def test_development(self):
        flags = resolve_feature_flags("development")
        assert flags.enable_analytics is False
        assert flags.show_leaderboard is True

    def test_staging(self):
        flags = resolve_feature_flags("staging")
        assert flags.enable_analytics is True
        assert flags.show_competitor_comparison is True

    def test_production(self):
        flags = resolve_feature_flags("production")
        assert flags.enable_analytics is True
        assert flags.enable_retargeting is True
        assert flags.show_competitor_comparison is False

    def test_case_insensitive(self):
        assert resolve_feature_flags("PRODUCTION") == resolve_feature_flags("production")

    def test_unknown_environment_gets_defaults(self):
        assert resolve_feature_flags("qa") == DEFAULT_FLAGS
        assert resolve_feature_flags(None) == DEFAULT_FLAGS

    def test_explicit_overrides_win(self):
        flags = resolve_feature_flags("production", {"enable_retargeting": False, "show_confetti": True})
        assert flags.enable_retargeting is False
        assert flags.show_confetti is True

    def test_overrides_only_touch_known_flags(self):
        for overrides in ENVIRONMENT_OVERRIDES.values():
            for name in overrides:
                assert name in FeatureFlags.model_fields

    def test_defaults_not_mutated(self):
        resolve_feature_flags("production")
        assert DEFAULT_FLAGS.enable_retargeting is False


# =============================================================================
# VARIANTS
# =============================================================================

class TestStringHash:
    """Test the 32-bit polynomial hash."""

    def test_known_values(self):
        assert string_hash("") == 0
        assert string_hash("a") == 97
        assert string_hash("ab") == 3105
        assert string_hash("hello") == 99162322

    def test_wraps_to_signed_32_bit(self):
        """Overflow wraps like a signed 32-bit integer."""
        assert string_hash("polygenelubricants") == -2147483648

    def test_utf16_code_units(self):
        """Characters outside the BMP hash as two surrogate code units."""
        assert string_hash("\U0001F600") == 0xD83D * 31 + 0xDE00

    def test_range(self):
        for value in ("user-1", "a much longer session identifier 1234567890", "ü"):
            assert -(2 ** 31) <= string_hash(value) < 2 ** 31


class TestVariantAssignment:
    """Test deterministic bucketing."""

    def test_known_buckets(self):
        variants = ["a", "b", "c"]
        assert assign_user_to_variant("a", variants) == "b"
        assert assign_user_to_variant("ab", variants) == "a"
        assert assign_user_to_variant("", variants) == "a"

    def test_empty_variants(self):
        assert assign_user_to_variant("user-1", []) == ""

    def test_single_variant(self):
        assert assign_user_to_variant("anyone", ["only"]) == "only"

    def test_sticky(self):
        variants = ["x", "y", "z"]
        assert assign_user_to_variant("user-42", variants) == assign_user_to_variant("user-42", variants)

    def test_min_int_does_not_break(self):
        """abs() of the most negative hash stays a valid index."""
        assert assign_user_to_variant("polygenelubricants", ["a", "b", "c"]) in ("a", "b", "c")

    def test_all_variants_reachable(self):
        variants = ["default", "urgent", "benefit"]
        seen = {assign_user_to_variant(f"user-{i}", variants) for i in range(200)}
        assert seen == set(variants)

    def test_flag_salting(self):
        variants = ["a", "b", "c"]
        assert assign_flag_variant("user-7", "cta_text_variant", variants) == \
            assign_user_to_variant("cta_text_variant:user-7", variants)


class TestExperimentResolution:
    """Test per-visitor experiment variants."""

    def test_no_user_uses_flags(self):
        flags = FeatureFlags(cta_text_variant="benefit", badge_animation="bounce", experiments_enabled=True)
        assert resolve_experiment_variants(flags) == ("benefit", "bounce")

    def test_experiments_disabled_uses_flags(self):
        flags = FeatureFlags(cta_text_variant="urgent")
        assert resolve_experiment_variants(flags, "user-1") == ("urgent", "glow")

    def test_experiments_enabled_buckets(self):
        flags = FeatureFlags(experiments_enabled=True)
        cta, animation = resolve_experiment_variants(flags, "user-1")

        assert cta == assign_flag_variant("user-1", "cta_text_variant", list(CTA_VARIANTS))
        assert animation in ("bounce", "glow", "pulse", "none")
        assert resolve_experiment_variants(flags, "user-1") == (cta, animation)


class TestVariantTables:
    """Test CTA copy and animation lookups."""

    def test_cta_texts(self):
        assert get_cta_texts("urgent", Tier.PASS) == {
            "primary": "Maximize your edge",
            "secondary": "Show off your badge",
        }
        assert get_cta_texts("benefit", "critical")["primary"] == "Recover lost visitors"

    def test_every_variant_covers_every_tier(self):
        for variant in CTA_VARIANTS:
            for tier in Tier:
                assert set(get_cta_texts(variant, tier)) == {"primary", "secondary"}

    def test_unknown_cta_variant(self):
        with pytest.raises(KeyError):
            get_cta_texts("loud", Tier.PASS)

    def test_badge_animation_class(self):
        assert get_badge_animation_class("glow") == "animate-pulse shadow-lg"
        assert get_badge_animation_class("none") == ""
        assert get_badge_animation_class("sparkle") == ""

"""
Feature Flags and A/B Experiments

- FeatureFlags: immutable flag set resolved once per environment
- Variant assignment: sticky hash-based bucketing for CTA copy and badge
  animation experiments
"""

from .config import (
    FeatureFlags,
    DEFAULT_FLAGS,
    ENVIRONMENT_OVERRIDES,
    resolve_feature_flags,
    get_feature_flags,
)
from .variants import (
    CTA_VARIANTS,
    BADGE_ANIMATIONS,
    EXPERIMENTS,
    CTA_TEXT_FLAG,
    BADGE_ANIMATION_FLAG,
    string_hash,
    assign_user_to_variant,
    assign_flag_variant,
    resolve_experiment_variants,
    get_cta_texts,
    get_badge_animation_class,
)

__all__ = [
    # Config
    "FeatureFlags",
    "DEFAULT_FLAGS",
    "ENVIRONMENT_OVERRIDES",
    "resolve_feature_flags",
    "get_feature_flags",
    # Variants
    "CTA_VARIANTS",
    "BADGE_ANIMATIONS",
    "EXPERIMENTS",
    "CTA_TEXT_FLAG",
    "BADGE_ANIMATION_FLAG",
    "string_hash",
    "assign_user_to_variant",
    "assign_flag_variant",
    "resolve_experiment_variants",
    "get_cta_texts",
    "get_badge_animation_class",
]

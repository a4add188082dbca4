from featurecss.selectors.model import FeatureSelector, Polarity
from featurecss.selectors.nesting import nest, split_selector_list
from featurecss.selectors.builder import (
    OPERATIONS,
    any_,
    build,
    build_feature_selector,
    feature_predicate,
    neither,
    nope,
    yep,
)

__all__ = [
    "FeatureSelector",
    "Polarity",
    "nest",
    "split_selector_list",
    "OPERATIONS",
    "any_",
    "build",
    "build_feature_selector",
    "feature_predicate",
    "neither",
    "nope",
    "yep",
]

"""Feature-gated selector builder.

Each operation scopes a block of declarations under the caller's context
selector, gated on classes a feature-detection script puts on the
document root::

    yep(".my-selector", "translate3d", "opacity")
        -> .translate3d.opacity .my-selector

    nope(".my-selector", "translate3d", "opacity")
        -> .no-js .my-selector, .no-translate3d .my-selector,
           .no-opacity .my-selector

    any(".my-selector", "translate3d", "opacity")
        -> .translate3d .my-selector, .opacity .my-selector

    neither(".my-selector", "translate3d", "opacity")
        -> .no-js .my-selector, .no-translate3d.no-opacity .my-selector
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence

from featurecss.config import DEFAULT_CONFIG, SelectorConfig
from featurecss.errors import FeatureTypeError, InvalidFeatureError, UsageError
from featurecss.selectors.model import FeatureSelector, Polarity
from featurecss.selectors.nesting import nest, split_selector_list
from featurecss.stylesheet import StyleRule, Stylesheet, parse_declarations

__all__ = [
    "build",
    "build_feature_selector",
    "feature_predicate",
    "yep",
    "nope",
    "any_",
    "neither",
    "OPERATIONS",
]

logger = logging.getLogger(__name__)

# A CSS identifier: exactly one class name, no combinators or pseudo-classes.
_FEATURE_RE = re.compile(r"-?(?:[A-Za-z_]|[^\x00-\x7f])(?:[A-Za-z0-9_-]|[^\x00-\x7f])*")

Content = Mapping[str, str] | Sequence[tuple[str, str]] | str | None


def _check_features(features: Iterable[object], operation: str) -> tuple[str, ...]:
    if isinstance(features, str):
        raise FeatureTypeError(
            features, operation, f"{operation}: features {features!r} must be a list of names, not a string"
        )
    checked: list[str] = []
    for feature in features:
        if not isinstance(feature, str):
            raise FeatureTypeError(feature, operation)
        if not _FEATURE_RE.fullmatch(feature):
            raise InvalidFeatureError(feature, operation)
        checked.append(feature)
    return tuple(checked)


def feature_predicate(
    name: str, polarity: Polarity, config: SelectorConfig = DEFAULT_CONFIG
) -> str:
    """Return the class predicate for *name*, e.g. ``.flexbox`` or ``.no-flexbox``."""
    prefix = "" if polarity is Polarity.SUPPORTED else config.negation_prefix
    return f".{prefix}{name}"


def build_feature_selector(
    polarity: Polarity,
    disjunctive: bool,
    features: Iterable[str],
    config: SelectorConfig = DEFAULT_CONFIG,
    operation: str = "build",
) -> FeatureSelector:
    """Combine *features* into a compound or a set of alternatives.

    The unsupported polarity always produces alternatives: the no-script
    class comes first, followed by the feature predicates combined as
    requested by *disjunctive* (one alternative each, or one compound).
    """
    names = _check_features(features, operation)
    predicates = [feature_predicate(name, polarity, config) for name in names]

    if disjunctive:
        combined = FeatureSelector.alternatives()
    else:
        combined = FeatureSelector.compound()
    for predicate in predicates:
        combined = combined.add(predicate)

    if polarity is Polarity.SUPPORTED:
        return combined

    result = FeatureSelector.alternatives((f".{config.no_script_class}",))
    for selector in combined.selectors():
        if selector:
            result = result.add(selector)
    return result


def _content_declarations(content: Content) -> tuple[tuple[str, str], ...]:
    if content is None:
        return ()
    if isinstance(content, str):
        return parse_declarations(content)
    if isinstance(content, Mapping):
        return tuple(content.items())
    return tuple((prop, value) for prop, value in content)


def build(
    context: str | None,
    polarity: Polarity,
    disjunctive: bool,
    features: Iterable[object],
    content: Content = None,
    config: SelectorConfig | None = None,
    operation: str = "build",
    output: Stylesheet | None = None,
) -> StyleRule:
    """Build the rule gating *content* on *features* under *context*.

    The rule is appended to *output* when given. Declarations in *content*
    are kept in order, repeated properties included.

    Raises :class:`UsageError` when *context* is empty and
    :class:`FeatureTypeError` when a feature is not a string. Both are
    checked before anything is built.
    """
    cfg = config or DEFAULT_CONFIG
    if not context or not split_selector_list(context):
        raise UsageError(operation)
    feature_selector = build_feature_selector(
        polarity, disjunctive, features, config=cfg, operation=operation
    )
    selectors = nest(feature_selector, context)
    logger.debug(
        "%s(%s) under %r -> %s",
        operation,
        ", ".join(feature_selector.parts),
        context,
        ", ".join(selectors),
    )
    rule = StyleRule(selectors=selectors, declarations=_content_declarations(content))
    if output is not None:
        output.add(rule)
    return rule


def yep(
    context: str | None,
    *features: object,
    content: Content = None,
    config: SelectorConfig | None = None,
    output: Stylesheet | None = None,
) -> StyleRule:
    """All listed features supported."""
    return build(context, Polarity.SUPPORTED, False, features, content, config, "yep", output)


def nope(
    context: str | None,
    *features: object,
    content: Content = None,
    config: SelectorConfig | None = None,
    output: Stylesheet | None = None,
) -> StyleRule:
    """Any listed feature unsupported, or no script."""
    return build(context, Polarity.UNSUPPORTED, True, features, content, config, "nope", output)


def any(
    context: str | None,
    *features: object,
    content: Content = None,
    config: SelectorConfig | None = None,
    output: Stylesheet | None = None,
) -> StyleRule:
    """Any listed feature supported."""
    return build(context, Polarity.SUPPORTED, True, features, content, config, "any", output)


def neither(
    context: str | None,
    *features: object,
    content: Content = None,
    config: SelectorConfig | None = None,
    output: Stylesheet | None = None,
) -> StyleRule:
    """All listed features unsupported, or no script."""
    return build(context, Polarity.UNSUPPORTED, False, features, content, config, "neither", output)


any_ = any

# Operation name -> (polarity, disjunctive)
OPERATIONS: dict[str, tuple[Polarity, bool]] = {
    "yep": (Polarity.SUPPORTED, False),
    "nope": (Polarity.UNSUPPORTED, True),
    "any": (Polarity.SUPPORTED, True),
    "neither": (Polarity.UNSUPPORTED, False),
}

"""featurecss - feature-gated CSS selector builder."""

__version__ = "0.1.0"

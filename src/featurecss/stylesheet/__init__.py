from featurecss.stylesheet.parser import parse_declarations, split_top_level
from featurecss.stylesheet.model import Stylesheet, StyleRule

__all__ = ["parse_declarations", "split_top_level", "Stylesheet", "StyleRule"]

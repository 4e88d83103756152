from .reader import parse_theme_family, read_theme_family
from .serialize import serialize_kdl, write_kdl

__all__ = ["parse_theme_family", "read_theme_family", "serialize_kdl", "write_kdl"]

from .generate import generate_kdl
from .visitor import ColorVisitor, ModifierVisitor, StyleVisitor, visit_styles

__all__ = [
    "ColorVisitor",
    "ModifierVisitor",
    "StyleVisitor",
    "generate_kdl",
    "visit_styles",
]

"""Walks a flat style tree and reports every observable value.

The style tree has three fixed shapes: the ``players`` list, the ``syntax``
map and plain color keys. Player colors are reported without a path since
they are not addressable by modifiers.
"""

from ..palette import PaletteGenerator
from ..schema.authored import Action, Modifier, ModifierPath
from ..schema.flat import PLAYERS_KEY, SYNTAX_KEY


class StyleVisitor:
    def visit_color(self, path, color):
        pass

    def visit_background(self, path, color):
        pass

    def visit_font_weight(self, path, weight):
        pass

    def visit_font_style(self, path, style):
        pass


def visit_styles(visitor, style):
    """Feed every value of a flat style map to ``visitor``, in map order."""
    for key, value in style.items():
        if key == PLAYERS_KEY:
            for player in value:
                for color in player.colors():
                    visitor.visit_color(None, color)
        elif key == SYNTAX_KEY:
            for scope, syntax in value.items():
                path = ModifierPath.syntax(scope)
                if syntax.color is not None:
                    visitor.visit_color(path, syntax.color)
                if syntax.background is not None:
                    visitor.visit_background(path, syntax.background)
                if syntax.font_style is not None:
                    visitor.visit_font_style(path, syntax.font_style)
                if syntax.font_weight is not None:
                    visitor.visit_font_weight(path, syntax.font_weight)
        elif value is not None:
            visitor.visit_color(ModifierPath.style(key), value)


class ColorVisitor(StyleVisitor):
    """Names every literal color it sees."""

    def __init__(self, generator=None):
        self.generator = generator if generator is not None else PaletteGenerator()

    def visit_color(self, path, color):
        self.generator.feed(color)

    def visit_background(self, path, color):
        self.generator.feed(color)


class ModifierVisitor(StyleVisitor):
    """Groups style targets by the value observed at them."""

    def __init__(self, palette):
        self.palette = palette
        self.colors = {}
        self.backgrounds = {}
        self.font_weights = {}
        self.font_styles = {}

    def visit_color(self, path, color):
        if path is None:
            return
        self.colors.setdefault(self.palette.lookup(color), []).append(path)

    def visit_background(self, path, color):
        self.backgrounds.setdefault(self.palette.lookup(color), []).append(path)

    def visit_font_weight(self, path, weight):
        self.font_weights.setdefault(weight, []).append(path)

    def visit_font_style(self, path, style):
        self.font_styles.setdefault(style, []).append(path)

    def into_modifiers(self):
        """One modifier per distinct value, applying to every path it was seen at."""
        modifiers = [
            Modifier(Action(color=color), paths) for color, paths in self.colors.items()
        ]
        modifiers.extend(
            Modifier(Action(background=color), paths)
            for color, paths in self.backgrounds.items()
        )
        modifiers.extend(
            Modifier(Action(font_style=style), paths)
            for style, paths in self.font_styles.items()
        )
        modifiers.extend(
            Modifier(Action(font_weight=weight), paths)
            for weight, paths in self.font_weights.items()
        )
        return modifiers

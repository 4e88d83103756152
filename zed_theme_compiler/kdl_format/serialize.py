"""Serializes a ThemeFamily to the authored KDL format.

The node tree is built with kdl-py and printed by it, so identifier
quoting, string escapes and number formatting follow the KDL grammar.
"""

import kdl

from ..logging import get_logger
from .reader import MODIFIER_PROPERTIES

logger = get_logger(__name__)

PRINT_CONFIG = kdl.PrintConfig(indent="    ")


def _node(name, *args, props=None, nodes=None):
    return kdl.Node(name, args=list(args), props=props or {}, nodes=nodes or [])


def write_color(name, color):
    """A ``name "base" alpha=...`` node, or None when there is no color."""
    if color is None:
        return None
    props = {}
    for key, field in MODIFIER_PROPERTIES.items():
        value = getattr(color.modifiers, field)
        if value is not None:
            props[key] = value
    return _node(name, str(color.base), props=props)


def write_action(action):
    nodes = [
        write_color("color", action.color),
        write_color("background", action.background),
    ]
    if action.font_style is not None:
        nodes.append(_node("font-style", action.font_style))
    if action.font_weight is not None:
        nodes.append(_node("font-weight", action.font_weight))
    return [node for node in nodes if node is not None]


def write_modifier(modifier):
    apply = _node("apply", nodes=[_node(path.kind, path.name) for path in modifier.apply])
    return _node("modifier", nodes=write_action(modifier.action) + [apply])


def write_player(player):
    nodes = [
        write_color("cursor", player.cursor),
        write_color("selection", player.selection),
        write_color("background", player.background),
    ]
    return _node("player", nodes=[node for node in nodes if node is not None])


def write_theme(node_name, theme):
    nodes = [_node("name", theme.name), _node("appearance", str(theme.appearance))]
    nodes.extend(write_modifier(modifier) for modifier in theme.modifiers)
    nodes.extend(write_player(player) for player in theme.players)
    return _node(node_name, nodes=nodes)


def build_document(family):
    """Build the kdl-py document for a ThemeFamily."""
    nodes = [
        _node(
            "meta",
            nodes=[_node("name", family.meta.name), _node("author", family.meta.author)],
        ),
        _node("palette", nodes=[write_color(name, color) for name, color in family.palette]),
    ]
    if family.common is not None:
        nodes.append(write_theme("common", family.common))
    nodes.extend(write_theme("theme", theme) for theme in family.themes)
    return kdl.Document(nodes=nodes)


def serialize_kdl(family):
    """Render a ThemeFamily as KDL text.

    Args:
        family: ThemeFamily to render

    Returns:
        str
    """
    logger.debug("Serializing to KDL")
    text = build_document(family).print(PRINT_CONFIG)
    return text.rstrip("\n") + "\n"


def write_kdl(family, filepath):
    with open(filepath, "w") as f:
        f.write(serialize_kdl(family))

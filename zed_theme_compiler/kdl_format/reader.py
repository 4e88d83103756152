"""Decodes the authored KDL format into a ThemeFamily.

The text is parsed by kdl-py; this module only maps the node tree onto the
authored schema and rejects anything it does not recognise::

    meta { name "Family"; author "Me" }
    palette {
        black "#000000"
        grey "black" lighten=0.5
    }
    theme {
        name "Family Dark"
        appearance "dark"
        player { cursor "grey"; selection "grey" alpha=0.3 }
        modifier {
            color "grey"
            font-weight 700
            apply { style "text"; syntax "keyword" }
        }
    }
"""

import kdl

from ..color import ColorModifiers, ColorRef, parse_base_color
from ..errors import ThemeParseError
from ..palette import Palette
from ..schema.authored import Action, Modifier, ModifierPath, Player, Theme, ThemeFamily
from ..schema.common import Appearance, Meta, parse_font_weight

MODIFIER_PROPERTIES = {
    "alpha": "alpha",
    "lighten": "lighten",
    "darken": "darken",
    "saturate": "saturate",
    "desaturate": "desaturate",
    "hue-shift": "hue_shift",
}


def _native(value):
    # tagged values stay wrapped in kdl-py value objects
    return getattr(value, "value", value)


def _single_arg(node, where):
    if len(node.args) != 1:
        raise ThemeParseError(f"{where}: `{node.name}` expects exactly one argument")
    return _native(node.args[0])


def _string_arg(node, where):
    value = _single_arg(node, where)
    if not isinstance(value, str):
        raise ThemeParseError(f"{where}: `{node.name}` expects a string, got {value!r}")
    return value


def _no_children(node, where):
    if node.nodes:
        raise ThemeParseError(f"{where}: `{node.name}` does not take children")


def _unique_child(seen, node, where):
    if node.name in seen:
        raise ThemeParseError(f"{where}: duplicate `{node.name}` node")
    seen.add(node.name)


def decode_modifiers(props, where):
    values = {}
    for key, value in props.items():
        field = MODIFIER_PROPERTIES.get(key)
        if field is None:
            raise ThemeParseError(f"{where}: unknown color modifier `{key}`")
        value = _native(value)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ThemeParseError(f"{where}: `{key}` must be a number, got {value!r}")
        values[field] = float(value)
    return ColorModifiers(**values)


def decode_color(node, where):
    """A node like ``color "name" lighten=0.2`` as a ColorRef."""
    _no_children(node, where)
    base = parse_base_color(_string_arg(node, where))
    return ColorRef(base, decode_modifiers(node.props, f"{where}.{node.name}"))


def decode_meta(node):
    fields = {}
    seen = set()
    for child in node.nodes:
        if child.name not in ("name", "author"):
            raise ThemeParseError(f"meta: unknown node `{child.name}`")
        _unique_child(seen, child, "meta")
        fields[child.name] = _string_arg(child, "meta")
    missing = {"name", "author"} - set(fields)
    if missing:
        raise ThemeParseError(f"meta: missing {', '.join(sorted(missing))}")
    return Meta(name=fields["name"], author=fields["author"])


def decode_palette(node):
    colors = {}
    for child in node.nodes:
        where = f"palette.{child.name}"
        if child.name in colors:
            raise ThemeParseError(f"{where}: duplicate palette entry found")
        if not child.args:
            raise ThemeParseError(f"{where}: missing color string")
        colors[child.name] = decode_color(child, "palette")
    return Palette(colors)


def decode_player(node, where):
    slots = {}
    seen = set()
    for child in node.nodes:
        if child.name not in ("cursor", "background", "selection"):
            raise ThemeParseError(f"{where}: unknown node `{child.name}`")
        _unique_child(seen, child, where)
        slots[child.name] = decode_color(child, where)
    return Player(**slots)


def decode_apply(node, where):
    paths = []
    for child in node.nodes:
        if child.name == ModifierPath.STYLE:
            paths.append(ModifierPath.style(_string_arg(child, where)))
        elif child.name == ModifierPath.SYNTAX:
            paths.append(ModifierPath.syntax(_string_arg(child, where)))
        else:
            raise ThemeParseError(
                f"{where}: apply targets must be `style` or `syntax`, got `{child.name}`"
            )
    return paths


def decode_modifier(node, where):
    fields = {}
    apply = None
    seen = set()
    for child in node.nodes:
        _unique_child(seen, child, where)
        if child.name == "apply":
            apply = decode_apply(child, where)
        elif child.name in ("color", "background"):
            fields[child.name] = decode_color(child, where)
        elif child.name == "font-weight":
            fields["font_weight"] = parse_font_weight(_single_arg(child, where), where)
        elif child.name == "font-style":
            fields["font_style"] = _string_arg(child, where)
        else:
            raise ThemeParseError(f"{where}: unknown node `{child.name}`")
    if apply is None:
        raise ThemeParseError(f"{where}: missing `apply` block")
    return Modifier(Action(**fields), apply)


def decode_theme(node):
    where = node.name
    fields = {}
    seen = set()
    players = []
    modifiers = []
    for child in node.nodes:
        if child.name == "name":
            _unique_child(seen, child, where)
            fields["name"] = _string_arg(child, where)
            where = f"{node.name} {fields['name']!r}"
        elif child.name == "appearance":
            _unique_child(seen, child, where)
            fields["appearance"] = Appearance.parse(_string_arg(child, where))
        elif child.name == "player":
            players.append(decode_player(child, f"{where}.player[{len(players)}]"))
        elif child.name == "modifier":
            modifiers.append(decode_modifier(child, f"{where}.modifier[{len(modifiers)}]"))
        else:
            raise ThemeParseError(f"{where}: unknown node `{child.name}`")
    if "name" not in fields or "appearance" not in fields:
        raise ThemeParseError(f"{where}: a theme needs both `name` and `appearance`")
    return Theme(
        name=fields["name"],
        appearance=fields["appearance"],
        players=players,
        modifiers=modifiers,
    )


def decode_theme_family(nodes):
    """Build a ThemeFamily from the top-level nodes of a parsed document."""
    meta = None
    palette = None
    themes = []
    common = None
    seen = set()
    for node in nodes:
        if node.name == "theme":
            themes.append(decode_theme(node))
            continue
        _unique_child(seen, node, "document")
        if node.name == "meta":
            meta = decode_meta(node)
        elif node.name == "palette":
            palette = decode_palette(node)
        elif node.name == "common":
            common = decode_theme(node)
        else:
            raise ThemeParseError(f"unknown top-level node `{node.name}`")
    if meta is None:
        raise ThemeParseError("missing `meta` node")
    if palette is None:
        raise ThemeParseError("missing `palette` node")
    return ThemeFamily(meta=meta, palette=palette, themes=themes, common=common)


def parse_theme_family(text, filename="<string>"):
    """Parse KDL text into a ThemeFamily.

    Raises:
        ThemeParseError: the text is not valid KDL or not a theme family
    """
    try:
        document = kdl.parse(text)
    except kdl.ParseError as e:
        raise ThemeParseError(f"{filename}: {e}") from e
    return decode_theme_family(document.nodes)


def read_theme_family(path):
    """Read a KDL theme family file.

    Args:
        path: Path to the .kdl file

    Returns:
        ThemeFamily
    """
    with open(path) as f:
        return parse_theme_family(f.read(), filename=str(path))

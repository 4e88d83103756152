from ..errors import UnsupportedArityError
from ..logging import get_logger
from ..schema.authored import Player, Theme, ThemeFamily, extract_common
from .visitor import ColorVisitor, ModifierVisitor, visit_styles

logger = get_logger(__name__)


def _lookup(generator, color):
    return None if color is None else generator.lookup(color)


def generate_kdl(flat_family):
    """Convert a flat Zed theme family into the authored format.

    Every literal color is given a palette name, style values are regrouped
    into modifiers and, for a two-theme family, the shared entries are moved
    into a ``common`` theme.

    Args:
        flat_family: FlatThemeFamily read from JSON

    Returns:
        ThemeFamily
    """
    logger.info("Converting JSON theme family to KDL")

    # Names have to be stable across the family before any theme is translated
    color_visitor = ColorVisitor()
    for theme in flat_family.themes:
        visit_styles(color_visitor, theme.style)
    generator = color_visitor.generator
    logger.debug(f"Generated palette {generator!r}")

    themes = []
    for flat_theme in flat_family.themes:
        logger.debug(f"Translating theme {flat_theme.name}")
        players = [
            Player(
                cursor=_lookup(generator, player.cursor),
                background=_lookup(generator, player.background),
                selection=_lookup(generator, player.selection),
            )
            for player in flat_theme.players
        ]
        modifier_visitor = ModifierVisitor(generator)
        visit_styles(modifier_visitor, flat_theme.style)
        themes.append(
            Theme(
                name=flat_theme.name,
                appearance=flat_theme.appearance,
                players=players,
                modifiers=modifier_visitor.into_modifiers(),
            )
        )

    common = None
    try:
        common = extract_common(themes)
    except UnsupportedArityError as e:
        if e.count > 2:
            logger.warning(
                f"Extracting common attributes from more than 2 themes in a family is not supported yet. "
                f"A `common` node will not be made ({e.count} themes)."
            )
        else:
            logger.debug(f"Not extracting common attributes: {e}")

    return ThemeFamily(
        meta=flat_family.meta,
        palette=generator.into_resolved_palette().into_palette(),
        themes=themes,
        common=common,
    )

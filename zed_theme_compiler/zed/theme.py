from ..logging import get_logger
from ..schema.flat import (
    PLAYERS_KEY,
    SYNTAX_KEY,
    ZED_SCHEMA_URL,
    FlatPlayer,
    FlatTheme,
    FlatThemeFamily,
)
from .styles import apply_action

logger = get_logger(__name__)


def _lookup(palette, color):
    return None if color is None else palette.lookup(color)


def generate_zed_theme(theme, palette):
    """Compile a single authored theme into a flat Zed theme.

    Args:
        theme: The authored Theme (already merged with the common theme)
        palette: The family's ResolvedPalette

    Returns:
        FlatTheme
    """
    players = [
        FlatPlayer(
            cursor=_lookup(palette, player.cursor),
            background=_lookup(palette, player.background),
            selection=_lookup(palette, player.selection),
        )
        for player in theme.players
    ]

    flat_theme = FlatTheme(
        name=theme.name,
        appearance=theme.appearance,
        style={PLAYERS_KEY: players, SYNTAX_KEY: {}},
    )
    # Later modifiers overwrite what earlier ones wrote
    for modifier in theme.modifiers:
        for target in modifier.apply:
            apply_action(flat_theme, modifier.action, palette, target)
    return flat_theme


def generate_json(family):
    """Generate a Zed theme family with every color resolved to a literal.

    Args:
        family: The authored ThemeFamily

    Returns:
        FlatThemeFamily

    Raises:
        CycleError, MissingReferenceError: the palette cannot be resolved
        InvalidTargetError: a modifier targets a reserved style path
    """
    logger.info("Generating JSON theme family from KDL")

    resolved = family.palette.resolve()
    themes = family.themes
    if family.common is not None:
        logger.debug("Merging the common theme into every theme")
        themes = [theme.merge(family.common) for theme in themes]

    flat_family = FlatThemeFamily(meta=family.meta, schema=ZED_SCHEMA_URL)
    for theme in themes:
        logger.debug(f"Compiling theme {theme.name}")
        flat_family.themes.append(generate_zed_theme(theme, resolved))
    return flat_family

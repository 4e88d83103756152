from ..errors import InvalidTargetError
from ..logging import get_logger
from ..schema.flat import SYNTAX_KEY, Syntax

logger = get_logger(__name__)

RESERVED_PLAYER_PREFIX = "player"


def apply_action(theme, action, palette, target):
    """Write one modifier action into a flat theme at ``target``.

    Args:
        theme: FlatTheme being built
        action: The Action to apply
        palette: ResolvedPalette used to look colors up
        target: ModifierPath to write to

    Raises:
        InvalidTargetError: ``target`` is a player path or the syntax map itself
    """
    if target.is_style:
        _apply_style(theme, action, palette, target)
    else:
        _apply_syntax(theme, action, palette, target)


def _apply_style(theme, action, palette, target):
    path = target.name
    if path.startswith(RESERVED_PLAYER_PREFIX):
        raise InvalidTargetError(
            target, "`style.players` cannot be modified with modifiers. Use the theme's `player` list instead."
        )
    if path == SYNTAX_KEY:
        raise InvalidTargetError(target, "use `syntax` targets to modify syntax highlighting")

    # Flat style keys only hold a color
    if action.color is not None:
        theme.style[path] = palette.lookup(action.color)
    if action.background is not None or action.font_weight is not None or action.font_style is not None:
        logger.debug(f"Ignoring non-color fields of the action applied to {target}")


def _apply_syntax(theme, action, palette, target):
    syntax_map = theme.style.setdefault(SYNTAX_KEY, {})
    entry = syntax_map.get(target.name)
    if entry is None:
        entry = syntax_map[target.name] = Syntax()

    if action.color is not None:
        entry.color = palette.lookup(action.color)
    if action.background is not None:
        entry.background = palette.lookup(action.background)
    if action.font_weight is not None:
        entry.font_weight = action.font_weight
    if action.font_style is not None:
        entry.font_style = action.font_style

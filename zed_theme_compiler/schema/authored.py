"""Authored (KDL) theme family: a named palette plus per-theme modifiers.

Modifiers reference palette names instead of literal colors and are applied
in order, so a later modifier overrides an earlier one on the same target.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional

from ..color import ColorRef
from ..errors import UnsupportedArityError
from ..palette import Palette
from .common import Appearance, Meta

COMMON_THEME_NAME = "common"


@dataclass
class Player:
    cursor: Optional[ColorRef] = None
    background: Optional[ColorRef] = None
    selection: Optional[ColorRef] = None


@dataclass(frozen=True)
class ModifierPath:
    """Where a modifier writes: a flat ``style`` key or a ``syntax`` scope."""

    kind: str
    name: str

    STYLE = "style"
    SYNTAX = "syntax"

    @classmethod
    def style(cls, path):
        return cls(cls.STYLE, path)

    @classmethod
    def syntax(cls, scope):
        return cls(cls.SYNTAX, scope)

    @property
    def is_style(self):
        return self.kind == self.STYLE

    def __str__(self):
        return f"{self.kind}.{self.name}"


@dataclass(frozen=True)
class Action:
    color: Optional[ColorRef] = None
    background: Optional[ColorRef] = None
    font_weight: Optional[int] = None
    font_style: Optional[str] = None


def _unique(paths):
    return list(dict.fromkeys(paths))


@dataclass
class Modifier:
    """An action and the ordered, duplicate-free list of paths it applies to."""

    action: Action
    apply: List[ModifierPath] = field(default_factory=list)

    def __post_init__(self):
        self.apply = _unique(self.apply)


@dataclass
class Theme:
    name: str
    appearance: Appearance
    players: List[Player] = field(default_factory=list)
    modifiers: List[Modifier] = field(default_factory=list)

    def merge(self, bottom):
        """Layer this theme on top of ``bottom`` (usually the family's common theme).

        Players and modifiers of ``bottom`` come first so this theme's own
        entries override them.
        """
        return replace(
            self,
            players=list(bottom.players) + list(self.players),
            modifiers=list(bottom.modifiers) + list(self.modifiers),
        )

    def targets_by_action(self):
        """Map each action to the union of its targets, in first-seen order."""
        targets = {}
        for modifier in self.modifiers:
            seen = targets.setdefault(modifier.action, {})
            seen.update(dict.fromkeys(modifier.apply))
        return targets

    def discard_intersection(self, players, intersection):
        modifiers = []
        for modifier in self.modifiers:
            shared = intersection.get(modifier.action)
            if shared:
                modifier = replace(
                    modifier, apply=[path for path in modifier.apply if path not in shared]
                )
            if modifier.apply:
                modifiers.append(modifier)
        self.modifiers = modifiers
        # players are positional; only a shared leading prefix is ever removed
        self.players = self.players[len(players):]

    def extract_common(self, other):
        """Move everything this theme shares with ``other`` into a new theme.

        Players are positional in Zed, so only the leading run of players both
        themes agree on is moved; merging ``common`` back restores the order.

        Both themes are modified in place. The returned theme is named
        ``common``; its appearance is a placeholder and carries no meaning.
        """
        player_intersection = []
        for mine, theirs in zip(self.players, other.players):
            if mine != theirs:
                break
            player_intersection.append(mine)

        other_targets = other.targets_by_action()
        intersection = {}
        for action, targets in self.targets_by_action().items():
            if action not in other_targets:
                continue
            shared = [path for path in targets if path in other_targets[action]]
            if shared:
                intersection[action] = shared

        self.discard_intersection(player_intersection, intersection)
        other.discard_intersection(player_intersection, intersection)
        return Theme(
            name=COMMON_THEME_NAME,
            appearance=Appearance.DARK,
            players=player_intersection,
            modifiers=[Modifier(action, paths) for action, paths in intersection.items()],
        )


def extract_common(themes):
    """Factor the shared entries of exactly two themes into a common theme.

    Raises:
        UnsupportedArityError: when ``themes`` does not hold exactly two
            themes; nothing is modified in that case.
    """
    if len(themes) != 2:
        raise UnsupportedArityError(len(themes))
    first, second = themes
    return first.extract_common(second)


@dataclass
class ThemeFamily:
    meta: Meta
    palette: Palette = field(default_factory=Palette)
    themes: List[Theme] = field(default_factory=list)
    common: Optional[Theme] = None

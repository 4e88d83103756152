from .styles import apply_action
from .theme import generate_json, generate_zed_theme

__all__ = ["apply_action", "generate_json", "generate_zed_theme"]

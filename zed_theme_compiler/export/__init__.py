from .json_export import export_json
from .palette_export import PALETTE_FORMATS, format_palette

__all__ = ["PALETTE_FORMATS", "export_json", "format_palette"]

ARRAY_OF_TUPLES = "array-of-tuples"
SPACE_SEPARATED = "space-separated"

PALETTE_FORMATS = (ARRAY_OF_TUPLES, SPACE_SEPARATED)


def format_palette(resolved, fmt):
    """Render a resolved palette, sorted by name.

    Args:
        resolved: ResolvedPalette
        fmt: "array-of-tuples" for ``[("name", "#rrggbbaa"), ...]`` or
            "space-separated" for one ``name #rrggbbaa`` per line

    Returns:
        str
    """
    entries = [(name, str(color)) for name, color in resolved.sorted_items()]
    if fmt == ARRAY_OF_TUPLES:
        return "[" + ", ".join(f'("{name}", "{color}")' for name, color in entries) + "]"
    if fmt == SPACE_SEPARATED:
        return "\n".join(f"{name} {color}" for name, color in entries)
    raise ValueError(f"Unknown palette format: {fmt!r}")

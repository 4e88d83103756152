import json


def export_json(flat_family, filepath):
    """Write a flat theme family as a Zed theme JSON file.

    Args:
        flat_family: FlatThemeFamily to write
        filepath: Output file path
    """
    with open(filepath, "w") as f:
        json.dump(flat_family.to_dict(), f, indent=2)
        f.write("\n")

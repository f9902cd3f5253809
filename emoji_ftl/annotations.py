import json

# Top-level keys of the two CLDR annotation trees.
PRIMARY_ROOT = "annotations"
DERIVED_ROOT = "annotationsDerived"


def load_json(path):
    """Loads a UTF-8 JSON document."""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def extract_emojis(document, root):
    """
    Returns the emoji map stored under '<root>.annotations', or None when
    the document does not have one.
    """
    if not isinstance(document, dict):
        return None
    container = document.get(root)
    if not isinstance(container, dict):
        return None
    emojis = container.get("annotations")
    if not isinstance(emojis, dict):
        return None
    return emojis


def merge_annotations(primary, derived=None):
    """Overlays primary entries on the derived ones. Entries are replaced whole."""
    merged = dict(derived or {})
    merged.update(primary)
    return merged

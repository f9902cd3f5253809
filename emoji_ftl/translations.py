import sys

import emoji

# --- Configuration ---

# Fluent terms in output order, each read from the field of the same name.
TERMS = ("default", "tts")


def is_emoji_sequence(key):
    """
    Checks a key against the Unicode emoji table bundled with the 'emoji'
    package. CLDR also annotates plain symbols, which this drops.
    """
    return emoji.is_emoji(key)


def codepoint_id(key):
    """Builds a resource-safe id from the code points, e.g. '🇫🇷' -> '1f1eb-1f1f7'."""
    return "-".join(f"{ord(char):x}" for char in key)


def first_name(entry, term):
    """Returns the first name listed for a term, or None if it is missing or empty."""
    if not isinstance(entry, dict):
        return None
    names = entry.get(term)
    if not isinstance(names, list) or not names:
        return None
    name = names[0]
    if not isinstance(name, str) or not name:
        return None
    return name


def filter_annotations(emojis, is_valid=is_emoji_sequence, verbose=False):
    """Keeps only the entries whose key is an emoji sequence."""
    kept = {}
    for key, entry in emojis.items():
        if not is_valid(key):
            if verbose:
                print(f"  > Not an emoji, skipping: {key}", file=sys.stderr)
            continue
        kept[key] = entry
    return kept


def translation_lines(emojis, is_valid=is_emoji_sequence, verbose=False, origins=None):
    """
    Builds the Fluent lines for every valid emoji in the mapping.

    Each entry contributes a 'default-<id>' and a 'tts-<id>' line, leaving
    out any term whose name is empty. origins maps keys to the file they were
    read from, for diagnostics.
    """
    lines = []
    for key, entry in filter_annotations(emojis, is_valid, verbose).items():
        key_id = codepoint_id(key)
        for term in TERMS:
            name = first_name(entry, term)
            if name is None:
                if verbose:
                    source = (origins or {}).get(key) or "input"
                    print(f"  > {source} - {term} name of {key} is null or empty", file=sys.stderr)
                continue
            lines.append(f"{term}-{key_id} = {name}")
    return lines


def render_ftl(lines):
    """Joins translation lines into file content, one line each."""
    return "".join(f"{line}\n" for line in lines)


def compact_entry(entry):
    """Reduces an annotation entry to the fields the applet reads."""
    compact = {}
    for term in TERMS:
        names = entry.get(term) if isinstance(entry, dict) else None
        compact[term] = list(names) if isinstance(names, list) else []
    return compact

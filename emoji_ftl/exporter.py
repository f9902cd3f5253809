import json
import sys
from pathlib import Path

from emoji_ftl.annotations import DERIVED_ROOT, PRIMARY_ROOT, extract_emojis, load_json, merge_annotations
from emoji_ftl.locales import check_pair, discover_paths, group_by_locale, tag_sources
from emoji_ftl.translations import compact_entry, filter_annotations, is_emoji_sequence, render_ftl, translation_lines


def ensure_directory(path):
    """Creates a directory and its parents. Existing directories are fine."""
    Path(path).mkdir(parents=True, exist_ok=True)


def write_text(path, content):
    ensure_directory(Path(path).parent)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def load_locale_emojis(locale, sources):
    """
    Loads and merges the annotation files of one locale.

    Returns the merged map and the file each entry came from, or None when
    a file lacks its emoji map.
    """
    layers = {}
    for source in sources:
        root = PRIMARY_ROOT if source["primary"] else DERIVED_ROOT
        emojis = extract_emojis(load_json(source["path"]), root)
        if emojis is None:
            print(
                f"Warning: '{source['path']}' did not contain required emojis ({root}.annotations) "
                f"for locale '{locale}'. Skipping.",
                file=sys.stderr,
            )
            return None
        layers[source["primary"]] = (source["path"], emojis)

    primary_path, primary = layers.get(True, (None, {}))
    derived_path, derived = layers.get(False, (None, {}))
    origins = dict.fromkeys(derived, derived_path)
    origins.update(dict.fromkeys(primary, primary_path))
    return merge_annotations(primary, derived), origins


def render_locale(emojis, config, is_valid, origins=None):
    """Returns (file name, content) for the configured format, or None when nothing is left."""
    if config["format"] == "json":
        kept = filter_annotations(emojis, is_valid, config["verbose"])
        if not kept:
            return None
        content = {key: compact_entry(entry) for key, entry in kept.items()}
        return config["json_filename"], json.dumps(content, ensure_ascii=False, indent=2) + "\n"

    lines = translation_lines(emojis, is_valid, config["verbose"], origins)
    if not lines:
        return None
    return config["ftl_filename"], render_ftl(lines)


def run(config, is_valid=None):
    """
    Converts every locale matched by the configured patterns.

    Recoverable problems skip the locale and are reported on stderr.
    LocaleResolutionError and PairingOrderError abort the run.
    Returns a summary with the written files and the skipped locales.
    """
    is_valid = is_valid or is_emoji_sequence
    dual_mode = config.get("derived_pattern") is not None

    primary_paths = discover_paths(config["primary_pattern"])
    derived_paths = discover_paths(config["derived_pattern"]) if dual_mode else None
    print(f"INFO: Found {len(primary_paths)} primary file(s) for '{config['primary_pattern']}'.")
    if dual_mode:
        print(f"INFO: Found {len(derived_paths)} derived file(s) for '{config['derived_pattern']}'.")

    groups = group_by_locale(tag_sources(primary_paths, derived_paths))

    summary = {"written": [], "skipped": []}
    for locale, sources in groups.items():
        if not check_pair(locale, sources, dual_mode):
            summary["skipped"].append(locale)
            continue

        loaded = load_locale_emojis(locale, sources)
        if loaded is None:
            summary["skipped"].append(locale)
            continue

        emojis, origins = loaded
        rendered = render_locale(emojis, config, is_valid, origins)
        if rendered is None:
            print(f"Warning: No translations produced for locale '{locale}'. Skipping.", file=sys.stderr)
            summary["skipped"].append(locale)
            continue

        filename, content = rendered
        destination = Path(config["output_dir"]) / locale / filename
        write_text(destination, content)
        summary["written"].append(destination)
        print(f"  > {locale}: wrote '{destination}'")

    return summary

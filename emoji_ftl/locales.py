import glob
import sys
from pathlib import PurePath

from emoji_ftl.errors import LocaleResolutionError, PairingOrderError

# --- Configuration ---

# Directory names in the CLDR JSON trees that are followed by the locale.
# e.g. cldr-annotations-full/annotations/fr_CA/annotations.json
LOCALE_PARENT_DIRS = ("annotations", "annotationsDerived")


def discover_paths(pattern):
    """Expands a glob pattern into a sorted list of file paths."""
    return sorted(glob.glob(pattern, recursive=True))


def resolve_locale(path, dual_mode):
    """
    Derives the locale identifier from an input path.

    The segment after an 'annotations' or 'annotationsDerived' directory
    always wins. Without one, dual mode fails and single mode falls back
    to the first relative path segment.
    """
    pure_path = PurePath(path)
    parts = [part for part in pure_path.parts if part != pure_path.anchor]
    # The last part is the file itself, never a locale.
    for index, part in enumerate(parts[:-2]):
        if part in LOCALE_PARENT_DIRS:
            return parts[index + 1]

    if not dual_mode and len(parts) > 1:
        return parts[0]

    raise LocaleResolutionError(f"Could not determine the locale of '{path}'.")


def tag_sources(primary_paths, derived_paths=None):
    """Tags every discovered path with its role, primary paths first."""
    dual_mode = derived_paths is not None
    sources = []
    for role_is_primary, paths in ((True, primary_paths), (False, derived_paths or [])):
        for path in paths:
            sources.append({
                "path": path,
                "primary": role_is_primary,
                "locale": resolve_locale(path, dual_mode),
            })
    return sources


def group_by_locale(sources):
    """Groups sources by locale, keeping the order locales were first seen."""
    groups = {}
    for source in sources:
        groups.setdefault(source["locale"], []).append(source)
    return groups


def check_pair(locale, sources, dual_mode):
    """
    Returns True when a locale group can be processed.

    A wrong number of files is reported and the locale is skipped. A pair
    whose primary file is not listed first aborts the run.
    """
    expected = 2 if dual_mode else 1
    if len(sources) != expected:
        paths = ", ".join(f"'{source['path']}'" for source in sources)
        print(
            f"Warning: Expected {expected} file(s) for locale '{locale}' but found {len(sources)}: {paths}. Skipping.",
            file=sys.stderr,
        )
        return False

    if dual_mode and (not sources[0]["primary"] or sources[1]["primary"]):
        raise PairingOrderError(
            f"Unexpected order of annotation files for locale '{locale}': "
            f"'{sources[0]['path']}', '{sources[1]['path']}'."
        )
    return True

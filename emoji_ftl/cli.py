import argparse
import sys

from emoji_ftl.config import OUTPUT_FORMATS, build_run_config, load_and_merge_config
from emoji_ftl.errors import EmojiFtlError
from emoji_ftl.exporter import run


def build_parser():
    parser = argparse.ArgumentParser(
        prog="emoji-ftl",
        description="Converts CLDR emoji annotation JSON files into one Fluent translation file per locale.",
        epilog="Example: emoji-ftl 'cldr-annotations-full/annotations/*/annotations.json' "
               "'cldr-annotations-derived-full/annotationsDerived/*/annotations.json' i18n",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="<input_glob> <output_dir>, or <primary_glob> <derived_glob> <output_dir>.",
    )
    parser.add_argument(
        "-f", "--format",
        choices=OUTPUT_FORMATS,
        help="Output format. Overrides the config file. Default is 'ftl'.",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to a JSON config file with output defaults.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Report every skipped emoji and empty name on stderr.",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.paths) == 2:
        primary_pattern, output_dir = args.paths
        derived_pattern = None
    elif len(args.paths) == 3:
        primary_pattern, derived_pattern, output_dir = args.paths
    else:
        parser.error("expected <input_glob> <output_dir> or <primary_glob> <derived_glob> <output_dir>")

    defaults = load_and_merge_config(args.config)
    config = build_run_config(primary_pattern, derived_pattern, output_dir, defaults, args.format, args.verbose)

    try:
        summary = run(config)
    except (EmojiFtlError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(
        f"\n✅ Success! Wrote {len(summary['written'])} locale file(s) to '{config['output_dir']}', "
        f"skipped {len(summary['skipped'])}."
    )


if __name__ == "__main__":
    main()

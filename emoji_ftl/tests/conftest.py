import json

import pytest


def annotation_document(root, emojis):
    return {root: {"identity": {"language": "xx"}, "annotations": emojis}}


@pytest.fixture()
def write_annotations(tmp_path):
    """Writes CLDR-shaped annotation files below tmp_path and returns their path."""

    def _write(tree, locale, emojis, root=None, filename="annotations.json"):
        root = root or tree
        path = tmp_path / tree / locale / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(annotation_document(root, emojis), ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def run_config(tmp_path):
    def _config(dual_mode=True, output_format="ftl"):
        return {
            "primary_pattern": str(tmp_path / "annotations" / "*" / "*.json"),
            "derived_pattern": str(tmp_path / "annotationsDerived" / "*" / "*.json") if dual_mode else None,
            "output_dir": tmp_path / "out",
            "format": output_format,
            "ftl_filename": "cosmic_applet_emoji_selector.ftl",
            "json_filename": "annotations.json",
            "verbose": False,
        }

    return _config

"""Report which translation entries each language is still missing."""

from __future__ import annotations

import argparse
from dataclasses import fields

from dockterm.i18n.localizer import get_translation_sets


def get_outstanding_translations() -> str:
    """List, per language code, the names of entries left empty."""
    sections = []
    for code, translation_set in get_translation_sets().items():
        missing = [
            f.name for f in fields(translation_set)
            if getattr(translation_set, f.name) == ""
        ]
        sections.append(code + ":\n" + "".join(name + "\n" for name in missing) + "\n")
    return "".join(sections)


def main(argv=None) -> int:
    """Print the outstanding translations."""
    parser = argparse.ArgumentParser(
        description="List untranslated entries for every language."
    )
    parser.parse_args(argv)
    print(get_outstanding_translations())
    return 0
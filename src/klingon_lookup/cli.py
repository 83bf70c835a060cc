#!/usr/bin/env python3
"""
Klingon dictionary lookup CLI.

Loads the glossary from klingon_lookup.toml by default, or override with flags:

    python -m klingon_lookup.cli --analyze "bIQongqu'"
    python -m klingon_lookup.cli --analyze "QongwI'pu'" --class n
    python -m klingon_lookup.cli --lookup "Qongpu'" --config klingon_lookup.toml
    python -m klingon_lookup.cli --glossary data/*.json --lookup "Qong:v"
"""

import argparse
import logging
from pathlib import Path


def _find_default_config() -> Path | None:
    """Look for klingon_lookup.toml in CWD."""
    candidate = Path("klingon_lookup.toml")
    if candidate.exists():
        return candidate
    return None


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Klingon dictionary lookup with affix analysis"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect klingon_lookup.toml)",
    )
    parser.add_argument(
        "--glossary",
        nargs="+",
        help="Path(s) to glossary JSON (overrides config)",
    )
    parser.add_argument(
        "--analyze",
        help="List every affix analysis of a word (no glossary needed)",
    )
    parser.add_argument(
        "--class",
        dest="word_class",
        choices=["n", "v"],
        help="Restrict --analyze to nouns (n) or verbs (v)",
    )
    parser.add_argument(
        "--lookup",
        help="Look up a word or query such as 'Qong:v' in the glossary",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    from klingon_lookup.logging_config import setup_logging

    setup_logging(debug=args.verbose)

    from klingon_lookup.engine import LookupEngine

    # ── Analyze ──────────────────────────────────────────────────────────

    if args.analyze:
        candidates = LookupEngine().analyze(args.analyze, args.word_class)
        print(f"═══ Analyses of '{args.analyze}' ═══")
        for c in candidates:
            marker = "  (bare)" if c.is_bare() else ""
            print(f"  {c.describe():40s} [{c.filter_string()}]{marker}")
        print()

    if not args.lookup:
        return

    # ── Build engine ─────────────────────────────────────────────────────

    if args.glossary:
        engine = LookupEngine()
        engine.add_glossary(*args.glossary)
    else:
        config_path = Path(args.config) if args.config else _find_default_config()
        if config_path is None:
            parser.error(
                "No klingon_lookup.toml found and no --glossary flag given.\n"
                "  Either create a config file or pass --glossary explicitly."
            )
        engine = LookupEngine.from_config(config_path)

    logging.getLogger(__name__).debug(engine.summary())

    # ── Lookup ───────────────────────────────────────────────────────────

    results = engine.lookup(args.lookup)
    if results:
        print(f"═══ Entries for '{args.lookup}' ═══")
        for r in results:
            print(f"  {r.name} ({r.pos}) — {r.definition}")
            if r.candidate is not None and not r.candidate.is_bare():
                print(f"      {r.analysis}")
            if r.entry.is_verb and not r.entry.is_indented:
                print(f"      Transitivity (best guess): {r.entry.transitivity_label}")
    else:
        print(f"'{args.lookup}' not found ({len(engine.glossary):,} entries loaded)")
    print()


if __name__ == "__main__":
    main()

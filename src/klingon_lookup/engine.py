"""
Dictionary lookup for inflected Klingon words.

Ties the pieces together: a query is parsed, every surface word in it is
decomposed as a noun and as a verb, each candidate stem is looked up in the
glossary, and only the stored entries that satisfy the candidate's filter
are kept.  Configuration is read from TOML.

Usage:
    from klingon_lookup.engine import LookupEngine

    engine = LookupEngine.from_config()          # loads klingon_lookup.toml
    for r in engine.lookup("bIQongqu'"):
        print(r.name, r.pos, r.definition, r.analysis)

    # Or build manually:
    engine = LookupEngine()
    engine.add_glossary("data/entries.json")
"""

from __future__ import annotations

import glob
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from klingon_lookup.affixes import WordClass
from klingon_lookup.derivation import WordCandidate, decompose
from klingon_lookup.glossary import (
    BasePartOfSpeech,
    EntryDescriptor,
    Glossary,
    ParseMode,
    parse,
)
from klingon_lookup.matcher import filter_entries

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LookupResult:
    """A stored entry found for a query, with the analysis that led to it.

    `candidate` is None when the entry matched the query as typed.
    """

    entry: EntryDescriptor
    candidate: WordCandidate | None = None

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def pos(self) -> str:
        return self.entry.specific_part_of_speech

    @property
    def definition(self) -> str:
        return self.entry.definition

    @property
    def analysis(self) -> str:
        if self.candidate is None:
            return self.entry.name
        return self.candidate.describe()

    def __repr__(self) -> str:
        return f"LookupResult({self.entry.name}:{self.pos} via {self.analysis!r})"


class LookupEngine:
    """Finds dictionary entries for (possibly inflected) Klingon words."""

    def __init__(self, glossary: Glossary | None = None):
        self.glossary = glossary if glossary is not None else Glossary()

    # ── Construction helpers ─────────────────────────────────────────────

    def add_glossary(self, *paths: str | Path) -> None:
        """Merge one or more JSON glossary files into the store."""
        resolved = _expand_paths(paths)
        if not resolved:
            return
        loaded = Glossary.from_files(*resolved)
        for entries in loaded.entries.values():
            for entry in entries:
                self.glossary.add(entry)

    @classmethod
    def from_config(cls, config_path: str | Path = "klingon_lookup.toml") -> LookupEngine:
        """Build a LookupEngine from a TOML config file.

        Paths in the config are resolved relative to the config file's
        directory.  Glob patterns in paths are expanded.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        base_dir = config_path.parent
        engine = cls()

        glossary_cfg = cfg.get("glossary", {})
        glossary_paths = glossary_cfg.get("paths", [])
        if glossary_paths:
            resolved = _resolve_config_paths(glossary_paths, base_dir)
            if resolved:
                engine.add_glossary(*resolved)

        return engine

    # ── Analysis ─────────────────────────────────────────────────────────

    def analyze(
        self, word: str, word_class: WordClass | str | None = None,
    ) -> list[WordCandidate]:
        """All decompositions of `word`, as a noun then as a verb."""
        classes = [WordClass(word_class)] if word_class else list(WordClass)
        candidates: list[WordCandidate] = []
        for wc in classes:
            candidates.extend(decompose(word, wc))
        return candidates

    def lookup(self, query: str) -> list[LookupResult]:
        """Find stored entries for a query such as "Qong", "Qong:v" or a phrase.

        Entries matching the query as typed come first, followed by entries
        reached through decomposition of each word, in decomposition order.
        Each entry appears once.
        """
        query_entry = parse(query, ParseMode.QUERY)
        results: list[LookupResult] = []
        seen: set[int] = set()

        def collect(entries: list[EntryDescriptor], candidate: WordCandidate | None) -> None:
            for entry in entries:
                if id(entry) in seen:
                    continue
                seen.add(id(entry))
                results.append(LookupResult(entry=entry, candidate=candidate))

        collect(self._matches(query_entry), None)

        word_class = _word_class_for(query_entry.base)
        if query_entry.base_is_unknown or word_class is not None:
            for word in query_entry.name.split():
                for candidate in self.analyze(word, word_class):
                    # already matched as typed, with the query's own attributes
                    if candidate.is_bare() and candidate.stem == query_entry.name:
                        continue
                    filter_entry = parse(candidate.filter_string(), ParseMode.QUERY)
                    collect(self._matches(filter_entry), candidate)

        logger.info("lookup(%r): %d result(s)", query, len(results))
        return results

    def _matches(self, query: EntryDescriptor) -> list[EntryDescriptor]:
        return filter_entries(query, self.glossary.lookup(query.name))

    # ── Introspection ────────────────────────────────────────────────────

    def summary(self) -> str:
        lines = ["LookupEngine:"]
        for sub_line in self.glossary.summary().split("\n"):
            lines.append(f"  {sub_line}")
        return "\n".join(lines)


def _word_class_for(base: BasePartOfSpeech) -> WordClass | None:
    if base is BasePartOfSpeech.NOUN:
        return WordClass.NOUN
    if base is BasePartOfSpeech.VERB:
        return WordClass.VERB
    return None


# ── Path helpers ─────────────────────────────────────────────────────────

def _expand_paths(paths: tuple[str | Path, ...]) -> list[Path]:
    """Expand globs and return sorted list of existing Paths."""
    result = []
    for p in paths:
        p_str = str(p)
        if "*" in p_str or "?" in p_str:
            result.extend(Path(m) for m in sorted(glob.glob(p_str)))
        else:
            result.append(Path(p))
    return result


def _resolve_config_paths(raw_paths: list[str], base_dir: Path) -> list[Path]:
    """Resolve config paths relative to base_dir, expanding globs."""
    result = []
    for p in raw_paths:
        full = base_dir / p if not Path(p).is_absolute() else Path(p)
        full_str = str(full)
        if "*" in full_str or "?" in full_str:
            result.extend(Path(m) for m in sorted(glob.glob(full_str)))
        else:
            result.append(full)
    return result

"""
Klingon dictionary entries and their part-of-speech metadata.

Every entry carries a compact part-of-speech field such as "v:t" or
"n:body,2": a base tag, then comma-separated attributes.  parse() turns
that into an EntryDescriptor.  The same parser reads lookup queries of the
form "name:pos:attrs" typed by the user or produced by decomposition.

Glossary is a small in-memory, name-indexed store of parsed entries loaded
from JSON records.

Usage:
    from klingon_lookup.glossary import Glossary, ParseMode, parse

    query = parse("Qong:v", ParseMode.QUERY)
    glossary = Glossary.from_file("data/entries.json")
    for entry in glossary.lookup("Qong"):
        print(entry.name, entry.specific_part_of_speech, entry.definition)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class ParseMode(Enum):
    QUERY = "query"    # "name[:pos[:attrs]]", homophone unspecified
    STORED = "stored"  # record column, homophone defaults to 1


class BasePartOfSpeech(str, Enum):
    NOUN = "n"
    VERB = "v"
    ADVERBIAL = "adv"
    CONJUNCTION = "conj"
    QUESTION = "ques"
    SENTENCE = "sen"
    EXCLAMATION = "excl"
    SOURCE = "src"
    UNKNOWN = "???"


class Transitivity(str, Enum):
    TRANSITIVE = "t"
    INTRANSITIVE = "i"
    STATIVE = "is"
    AMBITRANSITIVE = "ambi"
    UNKNOWN = "unknown"


class NounType(str, Enum):
    GENERAL = "general"
    NUMBER = "num"
    NAME = "name"
    PRONOUN = "pro"


class SentenceType(str, Enum):
    PHRASE = "phr"
    EMPIRE_UNION_DAY = "eu"
    CURSE_WARFARE = "mv"
    IDIOM = "idiom"
    NENTAY = "nt"
    PROVERB = "prov"
    MILITARY_CELEBRATION = "Ql"
    REJECTION = "rej"
    REPLACEMENT_PROVERB = "rp"
    SECRECY_PROVERB = "sp"
    TOAST = "toast"
    LYRICS = "lyr"


class Category(str, Enum):
    ANIMAL = "anim"
    ARCHAIC = "archaic"
    BEING = "being"  # capable of language
    BODY_PART = "body"
    DERIVATIVE = "deriv"
    REGIONAL = "reg"
    FOOD = "food"
    INVECTIVE = "inv"
    PLACE_NAME = "place"
    PREFIX = "pref"
    SLANG = "slang"
    SUFFIX = "suff"
    WEAPON = "weap"


class MetaFlag(str, Enum):
    ALTERNATIVE_SPELLING = "alt"
    FICTIONAL = "fic"
    HYPOTHETICAL = "hyp"
    EXTENDED_CANON = "extcan"
    DO_NOT_LINK = "nolink"


# Base tags that are recognised, in matching order.
_BASE_TAGS: dict[str, BasePartOfSpeech] = {
    pos.value: pos for pos in BasePartOfSpeech if pos is not BasePartOfSpeech.UNKNOWN
}

_TRANSITIVITY_TAGS = {t.value for t in Transitivity if t is not Transitivity.UNKNOWN}
_NOUN_TYPE_TAGS = {t.value for t in NounType if t is not NounType.GENERAL}
_SENTENCE_TAGS = {t.value for t in SentenceType}
_CATEGORY_TAGS = {c.value for c in Category}
_META_TAGS = {m.value for m in MetaFlag}
_HOMOPHONE_TAGS: dict[str, int] = {"1": 1, "2": 2, "3": 3, "4": 4}

# Noun number attributes, not part of the category flags.
_NOUN_NUMBER_FIELDS: dict[str, str] = {
    "inhpl": "inherent_plural",
    "inhps": "singular_of_inherent_plural",
    "plural": "plural",
}

_TRANSITIVITY_LABELS: dict[Transitivity, str] = {
    Transitivity.AMBITRANSITIVE: "both transitive and intransitive",
    Transitivity.INTRANSITIVE: "intransitive",
    Transitivity.STATIVE: "intransitive (state or quality)",
    Transitivity.TRANSITIVE: "transitive",
    Transitivity.UNKNOWN: "unknown",
}

# Record columns copied verbatim onto a stored descriptor.
TEXT_COLUMNS = (
    "definition", "synonyms", "antonyms", "see_also", "notes", "hidden_notes",
    "components", "examples", "search_tags", "source",
)


@dataclass(frozen=True, slots=True)
class EntryDescriptor:
    """A parsed dictionary entry, or a parsed lookup query."""

    name: str
    part_of_speech: str = ""  # raw field, e.g. "v:t"
    base: BasePartOfSpeech = BasePartOfSpeech.UNKNOWN
    transitivity: Transitivity = Transitivity.UNKNOWN
    noun_type: NounType = NounType.GENERAL
    sentence_type: SentenceType = SentenceType.PHRASE
    categories: frozenset[Category] = frozenset()
    meta: frozenset[MetaFlag] = frozenset()
    inherent_plural: bool = False
    singular_of_inherent_plural: bool = False
    plural: bool = False
    homophone: int | None = None  # None: query did not ask for one
    source_url: str = ""
    issues: tuple[str, ...] = ()

    # Stored-record columns
    entry_id: int | None = None
    definition: str = ""
    synonyms: str = ""
    antonyms: str = ""
    see_also: str = ""
    notes: str = ""
    hidden_notes: str = ""
    components: str = ""
    examples: str = ""
    search_tags: str = ""
    source: str = ""

    @classmethod
    def from_record(cls, record: Mapping) -> EntryDescriptor:
        """Build a stored entry from a record's columns."""
        entry = parse(
            record.get("part_of_speech") or "",
            ParseMode.STORED,
            name=record["entry_name"],
        )
        columns = {col: record.get(col) or "" for col in TEXT_COLUMNS}
        return replace(entry, entry_id=record.get("id"), **columns)

    # ── Part of speech ───────────────────────────────────────────────────

    @property
    def base_is_unknown(self) -> bool:
        return self.base is BasePartOfSpeech.UNKNOWN

    @property
    def is_verb(self) -> bool:
        return self.base is BasePartOfSpeech.VERB

    @property
    def is_sentence(self) -> bool:
        return self.base is BasePartOfSpeech.SENTENCE

    @property
    def is_source(self) -> bool:
        return self.base is BasePartOfSpeech.SOURCE

    @property
    def is_pronoun(self) -> bool:
        return self.base is BasePartOfSpeech.NOUN and self.noun_type is NounType.PRONOUN

    @property
    def is_name(self) -> bool:
        return self.base is BasePartOfSpeech.NOUN and self.noun_type is NounType.NAME

    @property
    def is_number(self) -> bool:
        return self.base is BasePartOfSpeech.NOUN and self.noun_type is NounType.NUMBER

    @property
    def specific_part_of_speech(self) -> str:
        """Base abbreviation, refined to num/name/pro for noun subtypes."""
        if self.base is BasePartOfSpeech.NOUN and self.noun_type is not NounType.GENERAL:
            return self.noun_type.value
        return self.base.value

    @property
    def transitivity_label(self) -> str:
        return _TRANSITIVITY_LABELS[self.transitivity]

    # ── Flags ────────────────────────────────────────────────────────────

    @property
    def is_archaic(self) -> bool:
        return Category.ARCHAIC in self.categories

    @property
    def is_regional(self) -> bool:
        return Category.REGIONAL in self.categories

    @property
    def is_slang(self) -> bool:
        return Category.SLANG in self.categories

    @property
    def is_indented(self) -> bool:
        """Prefix and suffix entries are listed indented under their stems."""
        return Category.PREFIX in self.categories or Category.SUFFIX in self.categories

    @property
    def is_alternative_spelling(self) -> bool:
        return MetaFlag.ALTERNATIVE_SPELLING in self.meta

    @property
    def do_not_link(self) -> bool:
        return MetaFlag.DO_NOT_LINK in self.meta


# ── Parsing ───────────────────────────────────────────────────────────────

def parse(raw: str, mode: ParseMode = ParseMode.QUERY, *, name: str = "") -> EntryDescriptor:
    """Parse a query or a stored part-of-speech field into an EntryDescriptor.

    In QUERY mode `raw` is "name[:pos[:attrs]]".  In STORED mode `raw` is
    the part-of-speech column alone and the entry name is given by `name`.

    Unknown tags never raise: they are logged and collected on the
    descriptor's `issues`, and the affected field keeps its default.
    """
    if mode is ParseMode.QUERY:
        name, _, pos = raw.partition(":")
        homophone = None
    else:
        pos = raw
        homophone = 1

    base_tag, _, attr_text = pos.partition(":")
    attributes = attr_text.split(",") if attr_text else []

    issues: list[str] = []
    base = BasePartOfSpeech.UNKNOWN
    if base_tag:
        base = _BASE_TAGS.get(base_tag, BasePartOfSpeech.UNKNOWN)
        if base is BasePartOfSpeech.UNKNOWN:
            issues.append(f"{{{name}}} has unrecognised part of speech: {pos!r}")

    fields: dict = {}
    categories: set[Category] = set()
    meta: set[MetaFlag] = set()

    for attr in attributes:
        if attr in _TRANSITIVITY_TAGS:
            fields["transitivity"] = Transitivity(attr)
        elif attr in _NOUN_TYPE_TAGS:
            fields["noun_type"] = NounType(attr)
        elif attr in _NOUN_NUMBER_FIELDS:
            fields[_NOUN_NUMBER_FIELDS[attr]] = True
        elif attr in _SENTENCE_TAGS:
            fields["sentence_type"] = SentenceType(attr)
        elif attr in _CATEGORY_TAGS:
            categories.add(Category(attr))
        elif attr in _META_TAGS:
            meta.add(MetaFlag(attr))
        elif attr in _HOMOPHONE_TAGS:
            homophone = _HOMOPHONE_TAGS[attr]
        elif base is BasePartOfSpeech.SOURCE:
            fields["source_url"] = attr
        else:
            issues.append(f"{{{name}}} has unrecognised attribute: {attr!r}")

    for issue in issues:
        logger.warning(issue)

    return EntryDescriptor(
        name=name,
        part_of_speech=pos,
        base=base,
        categories=frozenset(categories),
        meta=frozenset(meta),
        homophone=homophone,
        issues=tuple(issues),
        **fields,
    )

# ── Store ─────────────────────────────────────────────────────────────────

class Glossary:
    """
    In-memory Klingon dictionary, indexed by exact entry name.

    Records are JSON objects with the columns entry_name, part_of_speech,
    and optionally id, definition, notes, source, etc.
    """

    def __init__(self):
        self.entries: dict[str, list[EntryDescriptor]] = {}
        self._total: int = 0

    @classmethod
    def from_file(cls, path: str | Path) -> Glossary:
        return cls.from_files(path)

    @classmethod
    def from_files(cls, *paths: str | Path) -> Glossary:
        """Load and merge one or more JSON files.

        Each file holds either a list of records or {"entries": [...]}.
        """
        glossary = cls()
        for path in paths:
            path = Path(path)
            with path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
            if isinstance(raw, dict):
                raw = raw.get("entries", [])
            glossary.add_records(raw)
            logger.debug("Loaded %s (%d entries so far)", path, glossary._total)
        return glossary

    @classmethod
    def from_records(cls, records: Iterable[Mapping]) -> Glossary:
        glossary = cls()
        glossary.add_records(records)
        return glossary

    def add_records(self, records: Iterable[Mapping]) -> None:
        for record in records:
            self.add(EntryDescriptor.from_record(record))

    def add(self, entry: EntryDescriptor) -> None:
        self.entries.setdefault(entry.name, []).append(entry)
        self._total += 1

    def lookup(self, name: str) -> list[EntryDescriptor]:
        """All stored entries whose name is exactly `name`.

        Klingon is case-sensitive ("Qong" and "qong" are different words),
        so there is no case-folding fallback.
        """
        return list(self.entries.get(name, []))

    def __len__(self) -> int:
        return self._total

    def summary(self) -> str:
        lines = ["Glossary"]
        lines.append(f"  Headwords:    {len(self.entries):,}")
        lines.append(f"  Total entries: {self._total:,}")

        # POS distribution
        from collections import Counter
        pos_counts = Counter()
        for entry_list in self.entries.values():
            for entry in entry_list:
                pos_counts[entry.specific_part_of_speech] += 1
        if pos_counts:
            lines.append("  POS breakdown:")
            for pos, count in pos_counts.most_common():
                lines.append(f"    {pos:15s} {count:,}")

        return "\n".join(lines)

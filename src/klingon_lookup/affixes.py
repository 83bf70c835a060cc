"""
Klingon affix tables: verb prefixes, noun and verb suffix slots, rovers.

Each slot is an ordered tuple of literals; index 0 is always the empty
string and means "no affix from this slot".  Slots are listed innermost
first, so slot 0 sits directly against the stem.

Usage:
    from klingon_lookup.affixes import WordClass, slot_literals

    slot_literals(WordClass.VERB, 3)   # ('', 'choH', "qa'")
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WordClass(str, Enum):
    """The two inflecting word classes.  Values are the filter tags."""

    NOUN = "n"
    VERB = "v"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if lowered == member.name.lower():
                    return member
        return None


@dataclass(frozen=True, slots=True)
class AffixSlot:
    """One grammatical category of affix and its literal inventory."""

    name: str
    word_class: WordClass
    literals: tuple[str, ...]  # literals[0] == "" (absent)

    def __len__(self) -> int:
        return len(self.literals)

    def __getitem__(self, index: int) -> str:
        return self.literals[index]


def _slot(name: str, word_class: WordClass, *literals: str) -> AffixSlot:
    return AffixSlot(name=name, word_class=word_class, literals=("",) + literals)


# ── Noun suffixes ─────────────────────────────────────────────────────────

NOUN_SLOTS: tuple[AffixSlot, ...] = (
    _slot("type 1", WordClass.NOUN, "'a'", "Hom", "oy"),
    _slot("type 2", WordClass.NOUN, "pu'", "Du'", "mey"),
    _slot("type 3", WordClass.NOUN, "qoq", "Hey", "na'"),
    _slot("type 4", WordClass.NOUN,
          "wIj", "wI'", "maj", "ma'", "lIj", "lI'", "raj", "ra'",
          "Daj", "chaj", "vam", "vetlh"),
    _slot("type 5", WordClass.NOUN, "Daq", "vo'", "mo'", "vaD", "'e'"),
)

# ── Verb prefixes and suffixes ────────────────────────────────────────────

VERB_PREFIXES: AffixSlot = _slot(
    "prefix", WordClass.VERB,
    "bI", "bo", "che", "cho", "Da", "DI", "Du",
    "gho", "HI", "jI", "ju", "lI", "lu", "ma", "mu",
    "nI", "nu", "pe", "pI", "qa", "re",
    "Sa", "Su", "tI", "tu", "vI", "wI", "yI",
)

VERB_SLOTS: tuple[AffixSlot, ...] = (
    # -Ha' always follows the verb directly
    _slot("undo", WordClass.VERB, "Ha'"),
    _slot("type 1", WordClass.VERB, "'egh", "chuq"),
    _slot("type 2", WordClass.VERB, "nIS", "qang", "rup", "beH", "vIp"),
    _slot("type 3", WordClass.VERB, "choH", "qa'"),
    _slot("type 4", WordClass.VERB, "moH"),
    _slot("type 5", WordClass.VERB, "lu'", "laH"),
    _slot("type 6", WordClass.VERB, "chu'", "bej", "ba'", "law'"),
    _slot("type 7", WordClass.VERB, "pu'", "ta'", "taH", "lI'"),
    _slot("type 8", WordClass.VERB, "neS"),
    # -Qo' comes last unless a type 9 suffix follows
    _slot("refusal", WordClass.VERB, "Qo'"),
    _slot("type 9", WordClass.VERB,
          "DI'", "chugh", "pa'", "vIS", "mo'", "bogh", "meH",
          "'a'", "jaj", "wI'", "ghach"),
)

_SUFFIX_SLOTS: dict[WordClass, tuple[AffixSlot, ...]] = {
    WordClass.NOUN: NOUN_SLOTS,
    WordClass.VERB: VERB_SLOTS,
}

# ── Rovers and nominalisers ───────────────────────────────────────────────

NEGATION = "be'"
EMPHATIC = "qu'"

# Verb suffixes that turn a verb into a noun.
NOMINALISERS: tuple[str, ...] = ("ghach", "wI'")


def suffix_slots(word_class: WordClass | str) -> tuple[AffixSlot, ...]:
    """All suffix slots for a word class, innermost first."""
    return _SUFFIX_SLOTS[WordClass(word_class)]


def slot_count(word_class: WordClass | str) -> int:
    return len(suffix_slots(word_class))


def slot_literals(word_class: WordClass | str, index: int) -> tuple[str, ...]:
    """The literal inventory of one suffix slot (index 0 is the empty string)."""
    return suffix_slots(word_class)[index].literals

"""
Affix stripping for Klingon nouns and verbs.

A surface form such as "bIvaHchoHbe'" is ambiguous: "bI" may or may not be
a prefix, "choH" may or may not be a suffix.  decompose() explores every
branch and returns all structurally valid (stem, affixes) analyses, in
depth-first order.  It does not consult a dictionary; callers look up each
candidate's filter_string() and keep the ones that exist.

Usage:
    from klingon_lookup.derivation import decompose

    for c in decompose("Qongpu'", "n"):
        print(c.describe(), c.filter_string())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from klingon_lookup.affixes import (
    EMPHATIC,
    NEGATION,
    NOMINALISERS,
    NOUN_SLOTS,
    VERB_PREFIXES,
    VERB_SLOTS,
    WordClass,
    slot_count,
    suffix_slots,
)

logger = logging.getLogger(__name__)


def _strips(text: str, ending: str) -> bool:
    """True if removing `ending` from the end of `text` leaves something."""
    return text.endswith(ending) and len(text) > len(ending)


def _with_index(indices: tuple[int, ...], level: int, value: int) -> tuple[int, ...]:
    return indices[:level] + (value,) + indices[level + 1:]


@dataclass(frozen=True, slots=True)
class WordCandidate:
    """One analysis of a surface form: a stem plus the affixes stripped off it.

    Suffix choices are stored as indices into the slot tables in affixes.py
    (0 = nothing from that slot).  Rover positions are verb slot levels: a
    rover at level i follows the suffix of slot i in the surface form.
    """

    stem: str
    word_class: WordClass
    cursor: int  # next slot to examine is cursor - 1
    noun_suffixes: tuple[int, ...] = (0,) * len(NOUN_SLOTS)
    verb_suffixes: tuple[int, ...] = (0,) * len(VERB_SLOTS)
    verb_prefix: int = 0
    negation: int | None = None
    emphatic: int | None = None
    negation_first: bool = False  # only meaningful when both rovers share a level

    @classmethod
    def start(cls, surface: str, word_class: WordClass) -> WordCandidate:
        return cls(stem=surface, word_class=word_class, cursor=slot_count(word_class))

    # ── Branching ────────────────────────────────────────────────────────

    def strip_prefix(self) -> WordCandidate | None:
        """Return a copy with a verb prefix removed, or None if there is none."""
        if self.word_class is not WordClass.VERB:
            return None
        for index in range(1, len(VERB_PREFIXES)):
            prefix = VERB_PREFIXES[index]
            if self.stem.startswith(prefix) and len(self.stem) > len(prefix):
                return replace(self, stem=self.stem[len(prefix):], verb_prefix=index)
        return None

    def _strip_rovers(self) -> WordCandidate:
        # Relative order of the two rovers must survive for redisplay.
        level = self.cursor
        stem = self.stem
        if self.negation is None and self.emphatic is None:
            for ending, negation_first in (
                (NEGATION + EMPHATIC, True),
                (EMPHATIC + NEGATION, False),
            ):
                if _strips(stem, ending):
                    return replace(
                        self,
                        stem=stem[:-len(ending)],
                        negation=level,
                        emphatic=level,
                        negation_first=negation_first,
                    )
        if self.negation is None and _strips(stem, NEGATION):
            return replace(self, stem=stem[:-len(NEGATION)], negation=level)
        if self.emphatic is None and _strips(stem, EMPHATIC):
            return replace(self, stem=stem[:-len(EMPHATIC)], emphatic=level)
        return self

    def strip_suffix(self) -> tuple[WordCandidate, WordCandidate | None]:
        """Examine the next slot inward.

        Returns (rest, branch): `rest` is this candidate moved down one
        level with nothing taken from the slot; `branch` is the same level
        with the slot's suffix removed, or None if no suffix matched.
        Rovers found at this level are removed from both.
        """
        if self.cursor == 0:
            raise ValueError(f"no suffix slots left on {self.stem!r}")

        level = self.cursor - 1
        rest = replace(self, cursor=level)
        if rest.word_class is WordClass.VERB:
            rest = rest._strip_rovers()

        slot = suffix_slots(rest.word_class)[level]
        for index in range(1, len(slot)):
            suffix = slot[index]
            if not _strips(rest.stem, suffix):
                continue
            stem = rest.stem[:-len(suffix)]
            if rest.word_class is WordClass.NOUN:
                branch = replace(
                    rest, stem=stem,
                    noun_suffixes=_with_index(rest.noun_suffixes, level, index),
                )
            else:
                branch = replace(
                    rest, stem=stem,
                    verb_suffixes=_with_index(rest.verb_suffixes, level, index),
                )
            return rest, branch
        return rest, None

    def nominalised_verb(self) -> WordCandidate | None:
        """Re-read a fully stripped noun ending in -ghach/-wI' as a verb.

        Only done when noun suffixes were found, since the bare noun is
        analysed as a verb anyway.  The noun suffixes are carried along.
        """
        if self.word_class is not WordClass.NOUN or self.cursor != 0:
            return None
        if not any(self.noun_suffixes) or not self.stem.endswith(NOMINALISERS):
            return None
        return replace(self, word_class=WordClass.VERB, cursor=slot_count(WordClass.VERB))

    # ── Accessors ────────────────────────────────────────────────────────

    def is_bare(self) -> bool:
        """True if no prefix, rover or suffix was found."""
        return (
            self.verb_prefix == 0
            and self.negation is None
            and self.emphatic is None
            and not any(self.noun_suffixes)
            and not any(self.verb_suffixes)
        )

    def filter_string(self) -> str:
        """Key for the dictionary lookup.  Bare words match any part of speech."""
        if self.is_bare():
            return self.stem
        return f"{self.stem}:{self.word_class.value}"

    def display_prefix(self) -> str:
        if self.verb_prefix == 0:
            return ""
        return VERB_PREFIXES[self.verb_prefix] + "-"

    def rovers_at(self, level: int) -> list[str]:
        """The rovers following verb slot `level`, in surface order."""
        negation = "-" + NEGATION
        emphatic = "-" + EMPHATIC
        if self.negation == level and self.emphatic == level:
            return [negation, emphatic] if self.negation_first else [emphatic, negation]
        if self.negation == level:
            return [negation]
        if self.emphatic == level:
            return [emphatic]
        return []

    def display_suffixes(self) -> list[str]:
        """All suffixes and rovers, hyphenated, in surface order.

        Verb suffixes come first, since -ghach and -wI' turn a verb into a
        noun which may then take noun suffixes.
        """
        parts = []
        for level, (slot, index) in enumerate(zip(VERB_SLOTS, self.verb_suffixes)):
            if index:
                parts.append("-" + slot[index])
            parts.extend(self.rovers_at(level))
        for slot, index in zip(NOUN_SLOTS, self.noun_suffixes):
            if index:
                parts.append("-" + slot[index])
        return parts

    def surface(self) -> str:
        """Reassemble the surface form this candidate was stripped from."""
        prefix = VERB_PREFIXES[self.verb_prefix]
        return prefix + self.stem + "".join(s[1:] for s in self.display_suffixes())

    def describe(self) -> str:
        parts = [self.display_prefix(), self.stem, *self.display_suffixes()]
        return " + ".join(p for p in parts if p)

    def __str__(self) -> str:
        return f"{self.describe()} ({self.word_class.value})"


# ── Decomposition ─────────────────────────────────────────────────────────

def decompose(surface: str, word_class: WordClass | str) -> list[WordCandidate]:
    """Return every analysis of `surface` as a noun or verb with affixes.

    The order is the depth-first traversal order: the prefixed branch
    before the unprefixed one, and at each slot the suffix-stripped branch
    before the continuation without it.

    Raises ValueError for an empty surface or an unknown word class.
    """
    if not surface:
        raise ValueError("cannot decompose an empty string")
    word_class = WordClass(word_class)

    found: list[WordCandidate] = []
    candidate = WordCandidate.start(surface, word_class)
    prefixed = candidate.strip_prefix()
    if prefixed is not None:
        _strip_suffixes(prefixed, found)
    _strip_suffixes(candidate, found)

    logger.debug("decompose(%r, %s): %d candidate(s)", surface, word_class.value, len(found))
    return found


def _strip_suffixes(candidate: WordCandidate, found: list[WordCandidate]) -> None:
    if candidate.cursor == 0:
        found.append(candidate)
        candidate = candidate.nominalised_verb()
        if candidate is None:
            return

    rest, branch = candidate.strip_suffix()
    if branch is not None:
        _strip_suffixes(branch, found)
    _strip_suffixes(rest, found)

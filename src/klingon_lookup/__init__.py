"""klingon-lookup: affix analysis and dictionary lookup for Klingon words."""

from klingon_lookup.affixes import WordClass, AffixSlot, suffix_slots, slot_count, slot_literals
from klingon_lookup.derivation import WordCandidate, decompose
from klingon_lookup.glossary import EntryDescriptor, Glossary, ParseMode, parse
from klingon_lookup.matcher import satisfies
from klingon_lookup.engine import LookupEngine, LookupResult

__all__ = [
    "WordClass", "AffixSlot", "suffix_slots", "slot_count", "slot_literals",
    "WordCandidate", "decompose",
    "EntryDescriptor", "Glossary", "ParseMode", "parse",
    "satisfies",
    "LookupEngine", "LookupResult",
]

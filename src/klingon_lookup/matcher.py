"""Decide whether a stored entry answers a lookup query."""

from __future__ import annotations

from klingon_lookup.glossary import BasePartOfSpeech, EntryDescriptor


def satisfies(query: EntryDescriptor, candidate: EntryDescriptor) -> bool:
    """True if `candidate` satisfies `query`.

    The name must match exactly.  A query with an unknown part of speech
    (typed into a search box) accepts any part of speech; otherwise the
    base parts of speech must agree, except that a pronoun may stand in for
    a verb (pronouns act as the copula).  A homophone number on the query
    must match, and slang/regional/archaic/name/number on the query must
    also hold for the candidate.  No other attribute is compared.
    """
    if query.name != candidate.name:
        return False

    if not query.base_is_unknown:
        pronoun_as_verb = query.base is BasePartOfSpeech.VERB and candidate.is_pronoun
        if not pronoun_as_verb and query.base is not candidate.base:
            return False

    if query.homophone is not None and query.homophone != candidate.homophone:
        return False

    if query.is_slang and not candidate.is_slang:
        return False
    if query.is_regional and not candidate.is_regional:
        return False
    if query.is_archaic and not candidate.is_archaic:
        return False
    if query.is_name and not candidate.is_name:
        return False
    if query.is_number and not candidate.is_number:
        return False

    return True


def filter_entries(
    query: EntryDescriptor, candidates: list[EntryDescriptor],
) -> list[EntryDescriptor]:
    """The candidates that satisfy `query`, in their original order."""
    return [c for c in candidates if satisfies(query, c)]

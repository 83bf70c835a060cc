"""Tests for LookupEngine and LookupResult (engine.py)."""

import pytest
from unittest.mock import MagicMock
from klingon_lookup.affixes import WordClass
from klingon_lookup.engine import LookupEngine, LookupResult
from klingon_lookup.glossary import ParseMode, parse


# ── Helpers ───────────────────────────────────────────────────────────────────

def _names(results) -> list[str]:
    return [r.name for r in results]


@pytest.fixture
def engine(glossary) -> LookupEngine:
    return LookupEngine(glossary)


# ── LookupResult ──────────────────────────────────────────────────────────────

def test_lookup_result_delegates_to_entry():
    entry = parse("v:is", ParseMode.STORED, name="Qong")
    r = LookupResult(entry=entry)
    assert r.name == "Qong"
    assert r.pos == "v"
    assert r.analysis == "Qong"


def test_lookup_result_repr():
    entry = parse("n", ParseMode.STORED, name="jagh")
    assert "jagh" in repr(LookupResult(entry=entry))


# ── analyze ───────────────────────────────────────────────────────────────────

def test_analyze_nouns_then_verbs():
    candidates = LookupEngine().analyze("Qong")
    assert [c.word_class for c in candidates] == [WordClass.NOUN, WordClass.VERB]


def test_analyze_restricted_class():
    candidates = LookupEngine().analyze("Qongpu'", "n")
    assert all(c.word_class is WordClass.NOUN for c in candidates)


# ── lookup ────────────────────────────────────────────────────────────────────

def test_lookup_exact(engine):
    results = engine.lookup("Qong")
    assert _names(results) == ["Qong"]
    assert results[0].candidate is None


def test_lookup_not_found(engine):
    assert engine.lookup("tlhIngan") == []


def test_lookup_plural_noun(engine):
    [r] = engine.lookup("loDpu'")
    assert r.name == "loD"
    assert r.candidate.word_class is WordClass.NOUN
    assert r.analysis == "loD + -pu'"


def test_lookup_prefixed_verb(engine):
    [r] = engine.lookup("bIQong")
    assert r.name == "Qong"
    assert r.analysis == "bI- + Qong"


def test_lookup_verb_with_rovers(engine):
    [r] = engine.lookup("Qongbe'qu'")
    assert r.name == "Qong"
    assert r.candidate.display_suffixes() == ["-be'", "-qu'"]


def test_lookup_pronoun_as_verb(engine):
    [r] = engine.lookup("ghaHbe'")
    assert r.name == "ghaH"
    assert r.entry.is_pronoun


def test_lookup_nominalised_verb(engine):
    [r] = engine.lookup("Heghghachmey")
    assert r.name == "Hegh"
    assert r.candidate.word_class is WordClass.VERB
    assert r.analysis == "Hegh + -ghach + -mey"


def test_lookup_homophones_once_each(engine):
    results = engine.lookup("QIH")
    assert _names(results) == ["QIH", "QIH"]
    assert [r.entry.homophone for r in results] == [1, 2]


def test_lookup_with_pos_filters(engine):
    results = engine.lookup("QIH:v")
    assert len(results) == 1
    assert results[0].entry.is_verb


def test_lookup_with_pos_still_decomposes(engine):
    [r] = engine.lookup("loDpu':n")
    assert r.name == "loD"


def test_lookup_with_flag(engine):
    assert _names(engine.lookup("jagh::slang")) == ["jagh"]
    assert engine.lookup("Qong::slang") == []


def test_lookup_phrase_words(engine):
    results = engine.lookup("loDpu' Qong")
    assert _names(results) == ["loD", "Qong"]


def test_lookup_uses_store_interface():
    store = MagicMock()
    store.lookup.return_value = []
    engine = LookupEngine(store)
    engine.lookup("Qongpu'")
    keys = [call.args[0] for call in store.lookup.call_args_list]
    assert keys[0] == "Qongpu'"
    assert "Qong" in keys


# ── Construction ──────────────────────────────────────────────────────────────

def test_add_glossary(glossary_file):
    engine = LookupEngine()
    engine.add_glossary(glossary_file)
    assert _names(engine.lookup("bIQong")) == ["Qong"]


def test_add_glossary_glob_no_match(tmp_path):
    engine = LookupEngine()
    engine.add_glossary(str(tmp_path / "*.json"))
    assert len(engine.glossary) == 0


def test_from_config(tmp_path, glossary_file):
    config = tmp_path / "klingon_lookup.toml"
    config.write_text('[glossary]\npaths = ["*.json"]\n', encoding="utf-8")
    engine = LookupEngine.from_config(config)
    assert len(engine.glossary) == 7


def test_from_config_without_glossary(tmp_path):
    config = tmp_path / "klingon_lookup.toml"
    config.write_text("", encoding="utf-8")
    engine = LookupEngine.from_config(config)
    assert len(engine.glossary) == 0


def test_from_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        LookupEngine.from_config(tmp_path / "nope.toml")


def test_summary(engine):
    assert engine.summary().startswith("LookupEngine:")

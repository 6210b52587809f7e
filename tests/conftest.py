# tests\conftest.py
import pytest
from unittest.mock import MagicMock

from lexis.shared.container import Container
from lexis.core.domain.feature import Feature, FeatureKind
from lexis.core.domain.feature_registry import FeatureRegistry
from lexis.core.domain.feature_type import FeatureType
from lexis.core.domain.inflection import Inflection
from lexis.core.ports.language_support import ILanguageSupport

@pytest.fixture(scope="function")
def mock_languages():
    """Returns a language support port that only knows Latin."""
    languages = MagicMock(spec=ILanguageSupport)
    languages.supports_language.side_effect = lambda code: code == "lat"
    languages.codes.return_value = ["lat"]
    return languages

@pytest.fixture(scope="function")
def latin_features():
    """A small Latin FeatureRegistry covering the categories used in the tests."""
    return FeatureRegistry([
        FeatureType(FeatureKind.PART, ["noun", "adjective", "verb", "adverb"], "lat"),
        FeatureType(FeatureKind.NUMBER, ["singular", "plural"], "lat"),
        FeatureType(FeatureKind.CASE, ["nominative", "genitive", "dative", "accusative", "ablative"], "lat"),
        FeatureType(FeatureKind.GENDER, [["masculine", "feminine"], "neuter"], "lat"),
        FeatureType(FeatureKind.TENSE, ["present", "imperfect", "future"], "lat"),
        FeatureType(FeatureKind.VOICE, ["active", "passive"], "lat"),
        FeatureType(FeatureKind.MOOD, ["indicative", "subjunctive"], "lat"),
    ])

@pytest.fixture(scope="function")
def container(mock_languages, latin_features):
    """
    Sets up the Dependency Injection Container for testing.
    The language context is replaced with the fixtures above.
    """
    container = Container()

    container.language_registry.override(mock_languages)
    container.feature_registry.override(latin_features)

    yield container

    container.reset_override()

@pytest.fixture
def make_inflection():
    """
    Factory building a Latin inflection with features attached.

    Usage:
        make_inflection("natur", "ae", (FeatureKind.CASE, "nominative", 5), (FeatureKind.NUMBER, "singular"))
    """
    def _make(stem, suffix=None, *features, prefix=None, language="lat"):
        infl = Inflection(stem, language, suffix=suffix, prefix=prefix)
        for item in features:
            kind, value = item[0], item[1]
            sort_order = item[2] if len(item) > 2 else None
            infl.add_feature(Feature(value, kind, language, sort_order))
        return infl
    return _make

@pytest.fixture
def natura_inflections(make_inflection):
    """
    Three verb forms of 'nat-urae' and three noun forms of 'natur-ae'.
    """
    part_verb = (FeatureKind.PART, "verb", 3)
    part_noun = (FeatureKind.PART, "noun", 5)

    one = make_inflection("nat", "urae", part_verb, (FeatureKind.TENSE, "present"), (FeatureKind.GENDER, "feminine"),
                          (FeatureKind.VOICE, "active"), (FeatureKind.MOOD, "indicative"))
    two = make_inflection("nat", "urae", part_verb, (FeatureKind.TENSE, "present"), (FeatureKind.GENDER, "feminine"),
                          (FeatureKind.VOICE, "passive"), (FeatureKind.MOOD, "indicative"))
    three = make_inflection("nat", "urae", part_verb, (FeatureKind.TENSE, "future"), (FeatureKind.GENDER, "masculine"),
                            (FeatureKind.MOOD, "subjunctive"))
    four = make_inflection("natur", "ae", part_noun, (FeatureKind.CASE, "nominative", 5), (FeatureKind.NUMBER, "singular"))
    five = make_inflection("natur", "ae", part_noun, (FeatureKind.CASE, "accusative", 5), (FeatureKind.NUMBER, "singular"))
    six = make_inflection("natur", "ae", part_noun, (FeatureKind.CASE, "accusative", 5), (FeatureKind.NUMBER, "plural"))
    return [one, two, three, four, five, six]

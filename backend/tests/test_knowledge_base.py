import dataclasses

import pytest

from readcoach.services.knowledge_base import KNOWLEDGE_BASE, SubstitutionKnowledgeBase
from readcoach.services.pronunciation import calculate_phoneme_accuracy


@pytest.mark.parametrize("expected,actual", [
    ("red", "led"),
    ("led", "red"),
    ("right", "light"),
    ("light", "right"),
    ("r", "l"),
])
def test_r_l_pairs_are_symmetric(expected, actual):
    assert KNOWLEDGE_BASE.is_r_l_confusion(expected, actual)
    assert KNOWLEDGE_BASE.is_common_substitution(expected, actual)


def test_vowel_pairs_are_symmetric():
    assert KNOWLEDGE_BASE.is_vowel_confusion("sheep", "ship")
    assert KNOWLEDGE_BASE.is_vowel_confusion("ship", "sheep")
    assert KNOWLEDGE_BASE.is_common_substitution("fool", "full")


def test_sound_substitution_uses_substrings():
    assert KNOWLEDGE_BASE.is_sound_substitution("think", "fink")
    assert KNOWLEDGE_BASE.is_sound_substitution("mother", "mudder")
    # 트리거가 기대 단어에 없으면 일치하지 않음
    assert not KNOWLEDGE_BASE.is_sound_substitution("fink", "think")


def test_unrelated_words_do_not_match():
    assert not KNOWLEDGE_BASE.is_common_substitution("cat", "dog")


def test_knowledge_base_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        KNOWLEDGE_BASE.r_l_pairs = frozenset()
    with pytest.raises(TypeError):
        KNOWLEDGE_BASE.sound_substitutions["ch"] = ("sh",)


def test_grapheme_table_is_reserved_data():
    assert KNOWLEDGE_BASE.phoneme_candidates("TH") == ("θ", "ð")
    assert KNOWLEDGE_BASE.phoneme_candidates("?") == ()
    # 음소 테이블과 무관하게 편집 거리로만 채점
    assert calculate_phoneme_accuracy("cat", "kat") == 67


def test_default_instance_matches_fresh_instance():
    assert SubstitutionKnowledgeBase() == KNOWLEDGE_BASE

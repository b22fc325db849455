import pytest

from readcoach.common.utils import round_half_up, tokenize
from readcoach.services.pronunciation import (
    PronunciationAnalyzer,
    PronunciationIssue,
    TIP_MESSAGES,
    analyze_pronunciation_issues,
    calculate_overall_accuracy,
    calculate_phoneme_accuracy,
    classify_issue,
    get_pronunciation_tips,
)


# 단어 정확도

def test_word_accuracy_exact_match_ignores_case_and_spaces():
    assert calculate_phoneme_accuracy("Hello", " hello ") == 100


def test_word_accuracy_empty_word_scores_zero():
    assert calculate_phoneme_accuracy("", "hello") == 0
    assert calculate_phoneme_accuracy("hello", "") == 0
    assert calculate_phoneme_accuracy(None, "hello") == 0


def test_word_accuracy_known_confusion_gets_flat_partial_credit():
    assert calculate_phoneme_accuracy("red", "led") == 75
    assert calculate_phoneme_accuracy("led", "red") == 75
    assert calculate_phoneme_accuracy("sheep", "ship") == 75
    # 편집 거리 유사도(0.8)와 관계없이 75점
    assert calculate_phoneme_accuracy("three", "tree") == 75


def test_word_accuracy_falls_back_to_similarity():
    assert calculate_phoneme_accuracy("world", "word") == 80
    assert calculate_phoneme_accuracy("cat", "dog") == 0


def test_word_accuracy_rounds_half_up():
    assert calculate_phoneme_accuracy("abcdefgh", "abcdexyz") == 63


# 문제 분류

@pytest.mark.parametrize("expected,actual,issue_type", [
    ("think", "fink", "th_sound"),
    ("three", "tree", "th_sound"),
    ("red", "led", "r_l_confusion"),
    ("right", "light", "r_l_confusion"),
    ("sheep", "ship", "vowel_confusion"),
    ("full", "fool", "vowel_confusion"),
    ("world", "word", "slight_mispronunciation"),
    ("cat", "dog", "substitution"),
    ("hello", "", "missing"),
    ("", "hello", "extra"),
])
def test_classify_issue(expected, actual, issue_type):
    assert classify_issue(expected, actual) == issue_type


def test_knowledge_base_branch_wins_over_similarity():
    # 두 쌍 모두 유사도가 0.7을 넘지만 혼동 패턴으로 분류
    assert classify_issue("three", "tree") == "th_sound"
    assert classify_issue("right", "light") == "r_l_confusion"


# 발음 문제 탐지

def test_identical_sentence_has_no_issues():
    assert analyze_pronunciation_issues("the cat sat", "the cat sat") == []


def test_th_substitutions_are_detected():
    issues = analyze_pronunciation_issues("think this", "fink dis")

    assert [issue.type for issue in issues] == ["th_sound", "th_sound"]
    assert [issue.accuracy for issue in issues] == [75, 75]
    assert [issue.position for issue in issues] == [0, 1]


def test_missing_word():
    issues = analyze_pronunciation_issues("hello world", "hello")

    assert issues == [PronunciationIssue(
        word="world", expected="world", actual="", position=1, accuracy=0, type="missing",
    )]


def test_extra_word():
    issues = analyze_pronunciation_issues("hello", "hello world")

    assert issues == [PronunciationIssue(
        word="world", expected="", actual="world", position=1, accuracy=0, type="extra",
    )]


def test_positional_alignment_cascades_after_dropped_word():
    issues = analyze_pronunciation_issues("the quick brown fox", "the brown fox")

    assert [issue.position for issue in issues] == [1, 2, 3]
    assert [issue.type for issue in issues] == ["substitution", "substitution", "missing"]


def test_issue_words_are_lower_cased():
    issues = analyze_pronunciation_issues("The RED car", "the led car")

    assert len(issues) == 1
    assert issues[0].word == "red"
    assert issues[0].type == "r_l_confusion"


def test_issue_to_dict():
    issue = analyze_pronunciation_issues("world", "word")[0]

    assert issue.to_dict() == {
        "word": "world",
        "expected": "world",
        "actual": "word",
        "position": 0,
        "accuracy": 80,
        "type": "slight_mispronunciation",
    }


# 전체 정확도

@pytest.mark.parametrize("text", ["hello", "the cat sat", "Think this through"])
def test_overall_accuracy_of_identical_text_is_100(text):
    assert calculate_overall_accuracy(text, text) == 100


def test_overall_accuracy_empty_inputs():
    assert calculate_overall_accuracy("", "anything") == 0
    assert calculate_overall_accuracy("anything", "") == 0
    assert calculate_overall_accuracy("   ", "anything") == 0
    assert calculate_overall_accuracy(None, None) == 0


def test_overall_accuracy_ignores_extra_whitespace():
    assert calculate_overall_accuracy("  the   cat ", "the cat") == 100


def test_overall_accuracy_partial():
    assert calculate_overall_accuracy("hello world", "hello") == 50
    assert calculate_overall_accuracy("think this", "fink dis") == 75
    assert calculate_overall_accuracy("the quick brown fox", "the brown fox") == 30


def test_overall_accuracy_rounds_half_up():
    # (75 + 100 + 0 + 75) / 4 = 62.5
    assert calculate_overall_accuracy("red car is red", "led car xx led") == 63


@pytest.mark.parametrize("mode", ["positional", "sequence"])
@pytest.mark.parametrize("expected,actual", [
    ("the cat sat on the mat", "the cat sat on the mat"),
    ("think this through", "fink dis through now"),
    ("red lorry yellow lorry", "led lolly yellow"),
    ("the quick brown fox", "the brown fox"),
    ("sheep in the beach", "ship on de bitch"),
    ("hello world", "hello big world"),
    ("a b c d", "x a b c d"),
])
def test_overall_accuracy_agrees_with_issue_list(mode, expected, actual):
    analyzer = PronunciationAnalyzer({"alignment_mode": mode})
    slots = analyzer.align(tokenize(expected), tokenize(actual))
    remaining = list(analyzer.analyze_pronunciation_issues(expected, actual))
    total = 0

    for position, expected_word, actual_word in slots:
        if expected_word and actual_word:
            accuracy = analyzer.calculate_phoneme_accuracy(expected_word, actual_word)
            matches = [
                issue for issue in remaining
                if (issue.position, issue.expected, issue.actual) == (position, expected_word, actual_word)
            ]
            if accuracy == 100:
                assert matches == []
            else:
                assert matches, (position, expected_word, actual_word)
                assert matches[0].accuracy == accuracy
                remaining.remove(matches[0])
            total += accuracy
        else:
            issue_type = "missing" if expected_word else "extra"
            matches = [
                issue for issue in remaining
                if (issue.position, issue.expected, issue.actual, issue.type)
                == (position, expected_word, actual_word, issue_type)
            ]
            assert matches, (position, expected_word, actual_word)
            assert matches[0].accuracy == 0
            remaining.remove(matches[0])

    # 모든 문제가 정렬 위치 하나에 대응
    assert remaining == []
    assert analyzer.calculate_overall_accuracy(expected, actual) == round_half_up(total / len(slots))


# 팁

def test_duplicate_categories_give_one_tip():
    issues = analyze_pronunciation_issues("think this", "fink dis")

    assert get_pronunciation_tips(issues) == [TIP_MESSAGES["th_sound"]]


def test_tips_follow_first_seen_order_and_skip_untipped_types():
    issues = [
        {"type": "missing"},
        {"type": "extra"},
        {"type": "th_sound"},
        {"type": "substitution"},
        {"type": "missing"},
    ]

    assert get_pronunciation_tips(issues) == [TIP_MESSAGES["missing"], TIP_MESSAGES["th_sound"]]


def test_no_issues_no_tips():
    assert get_pronunciation_tips([]) == []


# 분석기 설정

def test_unknown_alignment_mode_is_rejected():
    with pytest.raises(ValueError):
        PronunciationAnalyzer({"alignment_mode": "phonetic"})


def test_analyze_combines_score_issues_and_tips():
    result = PronunciationAnalyzer({"alignment_mode": "positional"}).analyze("red car", "led car")

    assert result.accuracy_score == 88
    assert [issue.type for issue in result.issues] == ["r_l_confusion"]
    assert result.tips == [TIP_MESSAGES["r_l_confusion"]]
    assert result.to_dict()["issues"][0]["actual"] == "led"

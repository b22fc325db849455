import pytest

from readcoach.common.exceptions import UnknownScenarioError
from readcoach.services.demo import simulate_transcription
from readcoach.services.passages import PassageCatalog
from readcoach.services.pronunciation import analyze_pronunciation_issues, calculate_overall_accuracy


def test_perfect_scenario_keeps_passage():
    assert simulate_transcription("Read this aloud", "perfect") == "Read this aloud"


def test_r_l_confusion_scenario():
    assert simulate_transcription("Three red cars", "r_l_confusion") == "Thlee led cals"


def test_th_issues_scenario():
    assert simulate_transcription("This is the thing", "th_issues") == "Dis is de ding"


def test_minor_errors_scenario():
    passage = PassageCatalog().get_passage("1")["text"]
    transcription = simulate_transcription(passage, "minor_errors")

    issues = analyze_pronunciation_issues(passage, transcription)

    assert [(issue.expected, issue.actual) for issue in issues] == [
        ("revolutionized", "levolutionized"),
        ("artificial", "altificial"),
    ]
    assert {issue.type for issue in issues} == {"slight_mispronunciation"}


def test_perfect_scenario_scores_100():
    passage = PassageCatalog().get_passage("4")["text"]

    assert calculate_overall_accuracy(passage, simulate_transcription(passage, "perfect")) == 100


def test_unknown_scenario():
    with pytest.raises(UnknownScenarioError):
        simulate_transcription("hello", "mumbling")

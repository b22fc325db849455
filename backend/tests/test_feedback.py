import pytest

from readcoach.services.feedback import highlight_passage, score_band, score_emoji, score_message


@pytest.mark.parametrize("score,band,message", [
    (100, "excellent", "Excellent pronunciation! 🎉"),
    (90, "excellent", "Excellent pronunciation! 🎉"),
    (89, "great", "Great job! Minor improvements needed. 👍"),
    (80, "great", "Great job! Minor improvements needed. 👍"),
    (70, "good", "Good effort! Keep practicing. 📚"),
    (69, "needs_practice", "Needs practice. Don't give up! 💪"),
    (0, "needs_practice", "Needs practice. Don't give up! 💪"),
])
def test_score_bands(score, band, message):
    assert score_band(score) == band
    assert score_message(score) == message


def test_highlight_passage():
    highlights = highlight_passage("The cat sat", "the hat")

    assert [h["status"] for h in highlights] == ["correct", "mismatch", "missing"]
    assert highlights[0]["word"] == "The"
    assert highlights[1]["heard"] == "hat"
    assert highlights[2]["heard"] is None


def test_highlight_empty_reference():
    assert highlight_passage("", "hello") == []


@pytest.mark.parametrize("score,emoji", [
    (100, "🏆"),
    (95, "🏆"),
    (94, "🎯"),
    (90, "🎯"),
    (89, "👍"),
    (80, "👍"),
    (79, "📚"),
    (70, "📚"),
    (69, "💪"),
    (0, "💪"),
])
def test_score_emoji(score, emoji):
    assert score_emoji(score) == emoji

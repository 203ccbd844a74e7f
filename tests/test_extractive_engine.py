import pytest

from note_summarizer.config import get_settings
from note_summarizer.summarizer.engines.extractive import (
    ExtractiveEngine,
    assemble,
    score_sentence,
    segment,
    select_sentences,
    target_sentence_count,
)
from note_summarizer.summarizer.models import (
    FALLBACK_SUMMARY,
    Sentence,
    SummarizationRequest,
)


def _summarize(text, length="medium"):
    request = SummarizationRequest(text=text, length=length)
    return ExtractiveEngine().summarize(request, get_settings())


def test_medium_with_four_sentences_keeps_best_one(four_sentence_text):
    result = _summarize(four_sentence_text, "medium")
    assert result.sentence_count == 4
    assert result.target_count == 1
    assert result.summary == "The main result of the study was clear and simple to read."


def test_long_restores_document_order(four_sentence_text):
    result = _summarize(four_sentence_text, "long")
    # index 0 and 3 tie on score; the earlier sentence wins
    assert [sentence.index for sentence in result.sentences] == [0, 1]
    assert result.summary == (
        "Cats sleep a lot during the day. "
        "The main result of the study was clear and simple to read."
    )


@pytest.mark.parametrize("length", ["huge", "", "MEDIUM"])
def test_unrecognized_length_behaves_like_medium(four_sentence_text, length):
    assert _summarize(four_sentence_text, length) == _summarize(
        four_sentence_text, "medium"
    )


def test_output_is_deterministic(four_sentence_text):
    text = four_sentence_text * 3
    assert _summarize(text, "long").summary == _summarize(text, "long").summary


def test_selected_sentences_preserve_source_order():
    text = (
        "Overall the project finished on time and under budget. "
        "The team met every week to review open issues. "
        "However several vendors delivered parts late in March. "
        "Staff morale stayed high throughout the quarter. "
        "Specifically the key supplier shipped 40 units early. "
        "Nobody expected the weather to cooperate this well. "
        "In summary the essential goals were met."
    )
    result = _summarize(text, "long")
    indexes = [sentence.index for sentence in result.sentences]
    assert indexes == sorted(indexes)
    positions = [text.index(sentence.text) for sentence in result.sentences]
    assert positions == sorted(positions)


def test_short_sentence_survives_ten_character_rule():
    result = _summarize("This is short.")
    assert result.summary == "This is short."
    assert result.sentence_count == 1


def test_fragments_under_ten_characters_return_fallback():
    result = _summarize("Yes. No. Okay then!")
    assert result.summary == FALLBACK_SUMMARY
    assert result.sentence_count == 0
    assert result.sentences == ()


def test_whitespace_is_normalized_before_segmenting():
    result = _summarize("A sentence\n\twith   odd spacing inside it.")
    assert result.summary == "A sentence with odd spacing inside it."


def test_segment_boundary_and_indexes():
    sentences = segment("Tenletters. ab. Another fragment here!?! Last")
    assert [sentence.text for sentence in sentences] == [
        "Tenletters",
        "Another fragment here",
    ]
    assert [sentence.index for sentence in sentences] == [0, 1]


def test_keyword_bonus_is_case_insensitive():
    sentence = Sentence(text="Therefore we stop here now", index=1)
    assert score_sentence(sentence, total=3) == 1.0
    shouted = Sentence(text="THEREFORE we stop here now", index=1)
    assert score_sentence(shouted, total=3) == 1.0


def test_overlapping_keywords_each_count():
    sentence = Sentence(text="In summary the key results matter", index=1)
    # "in summary", "key" and "result"
    assert score_sentence(sentence, total=3) == 3.0


def test_position_bonus_applied_once_for_single_sentence():
    assert score_sentence(Sentence(text="Short note", index=0), total=1) == 2.0


def test_length_and_numeric_bonuses():
    sentence = Sentence(
        text="Revenue grew by 12 percent across every region last year", index=2
    )
    # 10 words and a digit
    assert score_sentence(sentence, total=5) == 1.5


@pytest.mark.parametrize(
    "count,length,expected",
    [
        (10, "short", 2),
        (10, "medium", 3),
        (10, "long", 4),
        (5, "long", 2),
        (1, "long", 1),
        (3, "unknown", 1),
        (1, "short", 1),
    ],
)
def test_target_sentence_count(count, length, expected):
    assert target_sentence_count(count, length) == expected


@pytest.mark.parametrize("count", range(1, 30))
def test_target_sentence_count_bounds(count):
    for length in ("short", "medium"):
        assert 1 <= target_sentence_count(count, length) <= count
    assert min(2, count) <= target_sentence_count(count, "long") <= count


def test_select_breaks_ties_by_index():
    scored = [
        Sentence(text="third", index=2, score=1.0),
        Sentence(text="first", index=0, score=1.0),
        Sentence(text="second", index=1, score=1.0),
        Sentence(text="fourth", index=3, score=1.0),
    ]
    selected = select_sentences(scored, "long")
    assert [sentence.text for sentence in selected] == ["first", "second"]


def test_assemble_keeps_existing_terminal_punctuation():
    assert assemble([Sentence(text="Is this done?", index=0)]) == "Is this done?"
    assert assemble([Sentence(text="Done", index=0)]) == "Done."

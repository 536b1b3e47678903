import pytest

from brush_translate.translation.languages import WordClass
from brush_translate.translation.models import Component, ComponentID, SentenceAnalysis
from brush_translate.translation.segmentation import SentenceSegmenter, Utf16Index, segment_sentence, utf16_length


def _component(start: int, end: int, text: str = "") -> Component:
    return Component(text=text, translation="", word_class=WordClass.NOUN, start=start, end=end)


@pytest.mark.unit
def test_segments_reconstruct_original_text():
    text = "I took the cars away"
    segments = SentenceSegmenter().segment(text, [_component(11, 15), _component(2, 6)])

    assert "".join(s.text for s in segments) == text
    assert [(s.text, s.component_id) for s in segments] == [
        ("I ", None),
        ("took", ComponentID(2, 6)),
        (" the ", None),
        ("cars", ComponentID(11, 15)),
        (" away", None),
    ]


@pytest.mark.unit
def test_adjacent_components_emit_no_empty_gaps():
    segments = segment_sentence("abcdef", [_component(0, 3), _component(3, 6)])

    assert [s.text for s in segments] == ["abc", "def"]
    assert all(s.is_interactive for s in segments)


@pytest.mark.unit
def test_no_components_yields_single_gap():
    segments = segment_sentence("hello", [])
    assert len(segments) == 1
    assert segments[0].text == "hello"
    assert not segments[0].is_interactive


@pytest.mark.unit
def test_empty_component_is_skipped():
    segments = segment_sentence("ab", [_component(1, 1)])
    assert [s.text for s in segments] == ["a", "b"]
    assert not any(s.is_interactive for s in segments)


@pytest.mark.unit
@pytest.mark.parametrize("components", [
    [_component(0, 25)],
    [_component(0, 6), _component(4, 10)],
    [_component(5, 3)],
])
def test_invalid_spans_abort_segmentation(components):
    assert segment_sentence("I took the cars away", components) is None


@pytest.mark.unit
def test_offsets_are_utf16_code_units():
    # 😀 takes two UTF-16 units
    text = "😀 cars"
    assert utf16_length(text) == 7

    segments = segment_sentence(text, [_component(0, 2), _component(3, 7)])

    assert [(s.text, s.component_id) for s in segments] == [
        ("😀", ComponentID(0, 2)),
        (" ", None),
        ("cars", ComponentID(3, 7)),
    ]


@pytest.mark.unit
def test_offset_inside_surrogate_pair_is_rejected():
    assert segment_sentence("😀 cars", [_component(1, 3)]) is None


@pytest.mark.unit
def test_offset_before_combining_mark_is_rejected():
    text = "cafe\u0301 noir"
    assert segment_sentence(text, [_component(0, 4)]) is None
    assert [s.text for s in segment_sentence(text, [_component(0, 5)])] == ["cafe\u0301", " noir"]


@pytest.mark.unit
def test_cjk_text_segments():
    text = "我今天很开心"
    segments = segment_sentence(text, [_component(1, 3), _component(4, 6)])
    assert [s.text for s in segments] == ["我", "今天", "很", "开心"]


@pytest.mark.unit
def test_utf16_index_mapping():
    index = Utf16Index("a😀b")
    assert index.length == 4
    assert [index.to_index(i) for i in range(5)] == [0, 1, None, 2, 3]
    assert index.to_index(-1) is None
    assert index.substring(1, 3) == "😀"


@pytest.mark.unit
def test_selected_components_follow_reading_order():
    analysis = SentenceAnalysis(components=(_component(11, 15, "cars"), _component(2, 6, "took")))

    selected = analysis.selected_components({ComponentID(11, 15), ComponentID(2, 6), ComponentID(0, 1)})

    assert [c.text for c in selected] == ["took", "cars"]

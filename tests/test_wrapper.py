import pytest

from linewrap import DecodingError, Wrapper, WrapOptions, configure, wrap_text
from tests._shared_cases import WRAP_CASES, WrapCase, case_id


def build_wrapper(case: WrapCase) -> Wrapper:
    return configure(case.column_width, case.first_row_indent, case.subsequent_row_indent)


@pytest.mark.parametrize("case", WRAP_CASES, ids=case_id)
def test_wrap_text_cases(case: WrapCase) -> None:
    assert build_wrapper(case).wrap_text(case.source) == case.expected


@pytest.mark.parametrize("case", WRAP_CASES, ids=case_id)
def test_wrap_text_accepts_utf8_bytes(case: WrapCase) -> None:
    assert build_wrapper(case).wrap_text(case.source.encode("utf-8")) == case.expected


@pytest.mark.parametrize("case", WRAP_CASES, ids=case_id)
def test_wrap_lines_cases(case: WrapCase) -> None:
    expected = case.expected.split("\n") if case.expected else []

    assert build_wrapper(case).wrap_lines(case.source) == expected


@pytest.mark.parametrize("case", WRAP_CASES, ids=case_id)
def test_incremental_chunks_match_one_shot(case: WrapCase) -> None:
    wrapper = build_wrapper(case)
    for start in range(0, len(case.source), 3):
        wrapper.add_text(case.source[start : start + 3])

    assert wrapper.finish() == case.expected


def test_accumulated_output_previews_without_finishing() -> None:
    wrapper = configure(30)
    wrapper.add_text("hello wor")

    assert wrapper.accumulated_output() == "hello wor"
    assert wrapper.accumulated_output() == "hello wor"

    wrapper.add_text("ld again ")
    assert wrapper.accumulated_output() == "hello world again"
    assert wrapper.finish() == "hello world again"


def test_accumulated_output_keeps_pending_whitespace_decision() -> None:
    wrapper = configure(30)
    wrapper.add_text("hello   ")

    assert wrapper.accumulated_output() == "hello"

    wrapper.add_text("world")
    assert wrapper.accumulated_output() == "hello   world"


def test_accumulated_output_wraps_like_final_output() -> None:
    wrapper = configure(10)
    wrapper.add_text("aaaa bbbb cc")

    assert wrapper.accumulated_output() == "aaaa bbbb\ncc"

    wrapper.add_text("cc dd")
    assert wrapper.finish() == "aaaa bbbb\ncccc dd"


def test_finish_is_idempotent_and_blocks_more_text() -> None:
    wrapper = configure(30)
    wrapper.add_text("one two")

    assert wrapper.finish() == "one two"
    assert wrapper.finish() == "one two"
    assert wrapper.accumulated_output() == "one two"

    with pytest.raises(RuntimeError, match="reset"):
        wrapper.add_text("three")


def test_reset_starts_a_fresh_session() -> None:
    wrapper = configure(5)
    wrapper.add_text("abcdefgh")
    wrapper.finish()
    assert len(wrapper.diagnostics) == 1

    wrapper.reset()

    assert wrapper.accumulated_output() == ""
    assert wrapper.diagnostics == []
    wrapper.add_text("ab cd")
    assert wrapper.finish() == "ab cd"


def test_one_shot_calls_do_not_touch_incremental_session() -> None:
    wrapper = configure(30)
    wrapper.add_text("kept ")

    assert wrapper.wrap_text("other text") == "other text"
    wrapper.add_text("going")
    assert wrapper.finish() == "kept going"


def test_default_wrapper_uses_default_width() -> None:
    lines = Wrapper().wrap_lines("word " * 40)

    assert max(len(line) for line in lines) <= 79
    assert len(lines[0]) == 79


def test_custom_line_separator() -> None:
    wrapper = configure(10, line_separator="\r\n")

    assert wrapper.wrap_text("aaaa bbbb cccc") == "aaaa bbbb\r\ncccc"
    assert wrapper.wrap_lines("aaaa bbbb cccc") == ["aaaa bbbb", "cccc"]


def test_tabs_expand_to_tab_width() -> None:
    assert configure(20, tab_width=4).wrap_text("a\tb") == "a    b"
    assert configure(5, tab_width=4).wrap_text("a\tb") == "a\nb"


def test_keep_line_breaks_through_wrapper() -> None:
    wrapper = configure(30, subsequent_row_indent="  ", fold_line_breaks=False)

    assert wrapper.wrap_text("first line\r\nsecond\n\nthird") == "first line\n  second\n\n  third"


def test_module_level_wrap_text() -> None:
    assert wrap_text("aaaa bbbb cccc", WrapOptions(column_width=9)) == "aaaa bbbb\ncccc"
    assert wrap_text("short") == "short"


def test_invalid_utf8_bytes_raise_decoding_error() -> None:
    with pytest.raises(DecodingError) as excinfo:
        configure(30).wrap_text(b"ab \xff cd")

    assert excinfo.value.offset == 3


@pytest.mark.parametrize("separator", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_information_separators_are_word_runes(separator: str) -> None:
    text = f"ab{separator}cd"

    assert wrap_text(text, WrapOptions(column_width=30)) == text
    assert configure(6).wrap_lines(f"{text} ef") == [text, "ef"]

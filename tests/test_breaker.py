from linewrap.lexer import Token, TokenFlags, TokenKind, lex
from linewrap.text import TextRange
from linewrap.wrap import LineBreaker, LineBudget, LineState, OutputBuffer, WrapOptions


def run_breaker(text: str, options: WrapOptions) -> LineBreaker:
    breaker = LineBreaker(options)
    for token in lex(text, tab_width=options.tab_width, fold_line_breaks=options.fold_line_breaks):
        assert breaker.accept(token) == ""
    return breaker


def test_budget_tracks_remaining_width_per_row() -> None:
    options = WrapOptions(column_width=10, first_row_indent="--", subsequent_row_indent="    ")
    budget = LineBudget(options)

    assert budget.remaining == 8
    assert budget.fresh_width == 6

    budget.charge(3)
    assert budget.remaining == 5
    assert budget.has_room_for(5)
    assert budget.would_overflow(6)

    budget.charge(100)
    assert budget.remaining == 0

    budget.reset(first_line=False)
    assert budget.remaining == 6


def test_budget_copy_is_independent() -> None:
    budget = LineBudget(WrapOptions(column_width=10))
    copied = budget.copy()
    copied.charge(4)

    assert budget.remaining == 10
    assert copied.remaining == 6


def test_output_buffer_writes_indents_and_separators() -> None:
    options = WrapOptions(column_width=10, first_row_indent="--", subsequent_row_indent="  ")
    buffer = OutputBuffer(options)
    assert buffer.is_empty
    assert buffer.line_count == 0

    buffer.append_indent(first_line=True)
    buffer.append("ab")
    buffer.append_line_break(with_indent=False)
    buffer.append_line_break()
    buffer.append("cd")

    assert buffer.line_count == 3
    assert buffer.snapshot() == "--ab\n\n  cd"
    assert buffer.snapshot() == "--ab\n\n  cd"


def test_output_buffer_ignores_empty_text() -> None:
    buffer = OutputBuffer(WrapOptions(column_width=10))
    buffer.append("")
    buffer.append_indent(first_line=True)

    assert buffer.is_empty
    assert buffer.snapshot() == ""


def test_whitespace_between_words_is_kept_when_next_word_fits() -> None:
    breaker = run_breaker("ab   cd", WrapOptions(column_width=10))

    assert breaker.output() == "ab   cd"
    assert breaker.state == LineState.MID_LINE
    assert breaker.remaining == 3


def test_whitespace_at_wrap_point_is_dropped() -> None:
    breaker = run_breaker("abcde     fghij", WrapOptions(column_width=10))

    assert breaker.output() == "abcde\nfghij"
    assert breaker.line_count == 2


def test_whitespace_plus_word_may_fill_the_line_exactly() -> None:
    breaker = run_breaker("abcde     f", WrapOptions(column_width=11))

    assert breaker.output() == "abcde     f"
    assert breaker.remaining == 0


def test_leading_and_trailing_whitespace_is_dropped() -> None:
    breaker = run_breaker(" \t  ab \n cd  \r\n", WrapOptions(column_width=10))

    assert breaker.output() == "ab   cd"


def test_first_indent_is_written_only_once_a_word_arrives() -> None:
    options = WrapOptions(column_width=10, first_row_indent="> ")

    assert run_breaker("   ", options).output() == ""
    assert run_breaker("   ab", options).output() == "> ab"


def test_word_longer_than_line_is_split_with_warning() -> None:
    breaker = run_breaker("abcdefghijkl", WrapOptions(column_width=5))

    assert breaker.output() == "abcde\nfghij\nkl"
    assert len(breaker.diagnostics) == 1
    diagnostic = breaker.diagnostics[0]
    assert diagnostic.code == "WRAP_HARD_SPLIT"
    assert diagnostic.severity == "warning"
    assert diagnostic.range.as_tuple() == (0, 12)


def test_long_word_mid_line_moves_to_new_line_before_splitting() -> None:
    breaker = run_breaker("ab cdefghijkl", WrapOptions(column_width=5))

    assert breaker.output() == "ab\ncdefg\nhijkl"
    assert breaker.diagnostics[0].range.as_tuple() == (3, 13)


def test_hard_split_uses_width_left_after_indent() -> None:
    options = WrapOptions(column_width=6, first_row_indent="-", subsequent_row_indent="  ")
    breaker = run_breaker("abcdefghijkl", options)

    assert breaker.output() == "-abcde\n  fghi\n  jkl"


def test_truncated_word_returns_unplaced_tail() -> None:
    breaker = LineBreaker(WrapOptions(column_width=5))
    token = Token(TokenKind.WORD, "abcdefgh", TextRange(0, 8), 8, width=8, flags=TokenFlags.TRUNCATED)

    assert breaker.accept(token) == "fgh"
    assert breaker.output() == "abcde\n"
    assert breaker.state == LineState.AT_LINE_START
    assert breaker.diagnostics[0].range.as_tuple() == (0, 5)


def test_kept_line_breaks_force_new_lines() -> None:
    options = WrapOptions(column_width=30, subsequent_row_indent="  ", fold_line_breaks=False)

    assert run_breaker("one two\nthree", options).output() == "one two\n  three"
    assert run_breaker("one two\n\n\nthree", options).output() == "one two\n\n\n  three"


def test_kept_line_breaks_drop_surrounding_whitespace() -> None:
    options = WrapOptions(column_width=30, fold_line_breaks=False)

    assert run_breaker("\n\none  \r\n   two\n", options).output() == "one\ntwo"


def test_kept_line_breaks_still_wrap_long_lines() -> None:
    options = WrapOptions(column_width=9, fold_line_breaks=False)

    assert run_breaker("aaaa bbbb cccc\ndd", options).output() == "aaaa bbbb\ncccc\ndd"


def test_fork_does_not_share_state() -> None:
    options = WrapOptions(column_width=10)
    breaker = run_breaker("ab", options)
    forked = breaker.fork()

    for token in lex(" cdefghijklmn"):
        forked.accept(token)

    assert breaker.output() == "ab"
    assert breaker.diagnostics == []
    assert forked.output() == "ab\ncdefghijkl\nmn"
    assert len(forked.diagnostics) == 1

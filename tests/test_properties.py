"""Randomized checks of the layout guarantees over seeded inputs."""

import random

import pytest

from linewrap import WrapOptions, Wrapper, wrap_from_stream

ALPHABET = "abcdefghijklmnopqrstuvwxyzÄéḂϞ∀∁∂∃0123456789-,.;'\""
SEPARATORS = [" ", " ", " ", "  ", "\t", "\n", "\r\n", " \n  "]
SEEDS = range(12)


def random_text(rng: random.Random, *, max_word: int, words: int = 60) -> str:
    parts: list[str] = []
    if rng.random() < 0.3:
        parts.append(rng.choice(SEPARATORS))
    for _ in range(words):
        parts.append("".join(rng.choice(ALPHABET) for _ in range(rng.randint(1, max_word))))
        parts.append(rng.choice(SEPARATORS))
    return "".join(parts)


def random_options(rng: random.Random) -> WrapOptions:
    width = rng.randint(8, 40)
    return WrapOptions(
        column_width=width,
        first_row_indent=" " * rng.randint(0, 3),
        subsequent_row_indent=" " * rng.randint(0, 3),
    )


@pytest.mark.parametrize("seed", SEEDS)
def test_no_line_exceeds_column_width(seed: int) -> None:
    rng = random.Random(seed)
    options = random_options(rng)
    lines = Wrapper(options).wrap_lines(random_text(rng, max_word=50))

    assert lines
    assert all(len(line) <= options.column_width for line in lines)


@pytest.mark.parametrize("seed", SEEDS)
def test_rows_start_with_indent_and_carry_no_stray_whitespace(seed: int) -> None:
    rng = random.Random(seed)
    options = random_options(rng)
    lines = Wrapper(options).wrap_lines(random_text(rng, max_word=20))

    for index, line in enumerate(lines):
        indent = options.indent_for(first_line=index == 0)
        assert line.startswith(indent)
        body = line[len(indent) :]
        assert body
        assert not body[0].isspace()
        assert not body[-1].isspace()


@pytest.mark.parametrize("seed", SEEDS)
def test_words_survive_in_order(seed: int) -> None:
    rng = random.Random(seed)
    options = random_options(rng)
    source = random_text(rng, max_word=5)
    wrapped = Wrapper(options).wrap_text(source)

    assert wrapped.split() == source.split()


@pytest.mark.parametrize("seed", SEEDS)
def test_hard_split_words_rejoin_to_source(seed: int) -> None:
    rng = random.Random(seed)
    options = random_options(rng)
    source = random_text(rng, max_word=120)
    wrapped = Wrapper(options).wrap_text(source)

    assert "".join(wrapped.split()) == "".join(source.split())


@pytest.mark.parametrize("length", [1, 9, 10, 11, 29, 30, 31, 95])
def test_overlong_word_splits_at_exact_width(length: int) -> None:
    lines = Wrapper(WrapOptions(column_width=10)).wrap_lines("w" * length)

    assert "".join(lines) == "w" * length
    assert all(len(line) == 10 for line in lines[:-1])
    assert 1 <= len(lines[-1]) <= 10


@pytest.mark.parametrize("seed", SEEDS)
def test_rewrapping_single_spaced_text_is_stable(seed: int) -> None:
    rng = random.Random(seed)
    width = rng.randint(10, 40)
    words = ["".join(rng.choice(ALPHABET) for _ in range(rng.randint(1, width))) for _ in range(50)]
    wrapper = Wrapper(WrapOptions(column_width=width))

    once = wrapper.wrap_text(" ".join(words))

    assert wrapper.wrap_text(once) == once


@pytest.mark.parametrize("seed", SEEDS)
def test_random_chunking_matches_one_shot(seed: int) -> None:
    rng = random.Random(seed)
    options = random_options(rng).replace(fold_line_breaks=rng.random() < 0.5)
    data = random_text(rng, max_word=60).encode("utf-8")
    expected = Wrapper(options).wrap_text(data)

    chunks: list[bytes] = []
    offset = 0
    while offset < len(data):
        size = rng.randint(1, 9)
        chunks.append(data[offset : offset + size])
        offset += size

    assert wrap_from_stream(chunks, options) == expected

import pytest

from optsplit.classify import partition, split_short_options


def test_partition_splits_at_terminator(mixed_tokens) -> None:
    result = partition(mixed_tokens)
    assert result.options == ["--aaa", "-bc", "--ee=fff"]
    assert result.arguments == ["ddd", "ggg", "--hh", "-ij", "--kk=ll"]
    assert result.terminated


def test_only_first_terminator_is_consumed() -> None:
    result = partition(["-a", "--", "x", "--", "-b"])
    assert result.options == ["-a"]
    assert result.arguments == ["x", "--", "-b"]


@pytest.mark.parametrize(
    "tokens",
    [
        [],
        ["--"],
        ["", "-", "--", ""],
        ["one", "--two", "-3", "---four=4"],
        ["--", "--", "--"],
        ["a", "b", "--x", "--", "c"],
    ],
)
def test_partition_accounts_for_every_token(tokens) -> None:
    result = partition(tokens)
    consumed = 1 if result.terminated else 0
    assert len(result.options) + len(result.arguments) + consumed == len(tokens)


def test_partition_does_not_mutate_input(mixed_tokens) -> None:
    before = list(mixed_tokens)
    partition(mixed_tokens)
    assert mixed_tokens == before


def test_partition_accepts_generators() -> None:
    result = partition(token for token in ["-a", "b"])
    assert result.options == ["-a"]
    assert result.arguments == ["b"]


def test_empty_string_and_lone_hyphen() -> None:
    result = partition(["", "-"])
    assert result.arguments == [""]
    assert result.options == ["-"]


def test_split_short_options() -> None:
    assert split_short_options("-abc") == ["a", "b", "c"]
    assert split_short_options("-") == []

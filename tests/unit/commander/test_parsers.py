"""Tests for argument tokenizing and value parsers."""

import pytest

from commander.commands.argument import Argument
from commander.commands.parsers import (
    ArgumentParserFactory,
    BooleanArgumentParser,
    FloatArgumentParser,
    IntegerArgumentParser,
    StringArgumentParser,
    tokenize,
)
from commander.errors import ArgumentParseError


class TestTokenize:
    """Test splitting argument strings into tokens."""

    def test_unbounded_splits_on_whitespace(self):
        assert tokenize("one two  three") == ["one", "two", "three"]

    def test_quoted_span_is_one_token(self):
        assert tokenize('say "hello world" again') == ["say", "hello world", "again"]

    def test_curly_quotes(self):
        assert tokenize("“hi there” x") == ["hi there", "x"]

    def test_empty_string(self):
        assert tokenize("") == []
        assert tokenize("   ", 3) == []

    def test_zero_limit(self):
        assert tokenize("a b", 0) == []

    def test_empty_quotes_yield_none(self):
        assert tokenize('a "" b') == ["a", None, "b"]

    def test_limit_one_keeps_whole_string(self):
        assert tokenize("  a b c  ", 1) == ["a b c"]

    def test_limit_keeps_remainder_verbatim(self):
        """The last token is the untouched remainder once the limit is reached."""
        assert tokenize('say "hello world" again', 2) == ["say", '"hello world" again']

    def test_limit_strips_single_wrapped_remainder(self):
        assert tokenize('one "two three"', 2) == ["one", "two three"]

    def test_fewer_tokens_than_limit(self):
        assert tokenize("a b", 3) == ["a", "b"]

    def test_unclosed_quote_is_bare_token(self):
        assert tokenize('"abc def') == ['"abc', "def"]


class TestValueParsers:
    """Test the per-type value parsers."""

    @pytest.mark.asyncio
    async def test_string_parser(self):
        parser = StringArgumentParser()
        assert await parser.parse("text", Argument("value")) == "text"

    @pytest.mark.asyncio
    async def test_integer_parser(self):
        parser = IntegerArgumentParser()
        assert await parser.parse("42", Argument("count", type="integer")) == 42

    @pytest.mark.asyncio
    async def test_integer_parser_invalid(self):
        parser = IntegerArgumentParser()

        with pytest.raises(ArgumentParseError) as exc_info:
            await parser.parse("many", Argument("count", type="integer"))

        assert str(exc_info.value) == "count must be a whole number."
        assert exc_info.value.key == "count"
        assert exc_info.value.value == "many"

    @pytest.mark.asyncio
    async def test_float_parser(self):
        parser = FloatArgumentParser()
        assert await parser.parse("2.5", Argument("ratio", type="float")) == 2.5

        with pytest.raises(ArgumentParseError):
            await parser.parse("half", Argument("ratio", type="float"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "value,expected",
        [("yes", True), ("ON", True), ("1", True), ("no", False), ("off", False), ("0", False)],
    )
    async def test_boolean_parser(self, value, expected):
        parser = BooleanArgumentParser()
        assert await parser.parse(value, Argument("flag", type="boolean")) is expected

    @pytest.mark.asyncio
    async def test_boolean_parser_invalid(self):
        parser = BooleanArgumentParser()

        with pytest.raises(ArgumentParseError):
            await parser.parse("maybe", Argument("flag", type="boolean"))


class TestArgumentParserFactory:
    """Test parser lookup and choice validation."""

    def test_get_parser_by_type(self):
        assert isinstance(ArgumentParserFactory.get_parser("integer"), IntegerArgumentParser)
        assert isinstance(ArgumentParserFactory.get_parser("boolean"), BooleanArgumentParser)

    def test_get_parser_unknown_type_falls_back_to_string(self):
        assert isinstance(ArgumentParserFactory.get_parser("user"), StringArgumentParser)

    @pytest.mark.asyncio
    async def test_parse_value_with_choices(self):
        arg = Argument("mode", choices=["fast", "slow"])

        assert await ArgumentParserFactory.parse_value("fast", arg) == "fast"

        with pytest.raises(ArgumentParseError) as exc_info:
            await ArgumentParserFactory.parse_value("medium", arg)
        assert str(exc_info.value) == "mode must be one of: fast, slow."

    @pytest.mark.asyncio
    async def test_choices_compare_parsed_value(self):
        arg = Argument("sides", type="integer", choices=[6, 20])

        assert await ArgumentParserFactory.parse_value("20", arg) == 20
        with pytest.raises(ArgumentParseError):
            await ArgumentParserFactory.parse_value("8", arg)


class TestTokenizeRemainder:
    """Test the bounded remainder token."""

    def test_empty_quoted_remainder_is_none(self):
        assert tokenize('""', 1) == [None]
        assert tokenize('a ""', 2) == ["a", None]

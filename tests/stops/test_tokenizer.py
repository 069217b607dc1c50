import pytest
from gradientmaps.errors import TokenizeError
from gradientmaps.stops.tokenizer import (
    StopToken,
    split_declaration,
    split_stop_token,
    parse_position,
)


def test_split_declaration_respects_parentheses():
    assert split_declaration("red, rgb(0, 0, 255) 30%, green") == [
        "red",
        "rgb(0, 0, 255) 30%",
        "green",
    ]
    assert split_declaration("hsla(0,100%,50%,.5) 10%,#fff") == ["hsla(0,100%,50%,.5) 10%", "#fff"]


def test_split_declaration_empty():
    assert split_declaration("") == []
    assert split_declaration("   ") == []
    assert split_declaration(" , ,") == []
    assert split_declaration("red,,blue") == ["red", "blue"]


def test_split_stop_token():
    assert split_stop_token("red") == StopToken("red", None)
    assert split_stop_token("  blue   30% ") == StopToken("blue", "30%")
    assert split_stop_token("#00ff00 .5") == StopToken("#00ff00", ".5")
    assert split_stop_token("rgba(0, 0, 0, .5) 25%") == StopToken("rgba(0, 0, 0, .5)", "25%")


@pytest.mark.parametrize(
    "token",
    ["", "   ", "red blue 30%", "red 30% 40%", "rgb(0,0", "(0,0,0)", "red)", "rgb(0,0,0) (1)"],
)
def test_split_stop_token_malformed(token):
    with pytest.raises(TokenizeError):
        split_stop_token(token)


def test_tokenize_error_is_value_error():
    assert issubclass(TokenizeError, ValueError)


def test_parse_position():
    assert parse_position(None) is None
    assert parse_position("30%") == 30.0
    assert parse_position("12.5%") == 12.5
    assert parse_position("0.25") == 25.0
    assert parse_position(".5") == 50.0
    assert parse_position("0%") == 0.0


def test_parse_position_clamps():
    assert parse_position("150%") == 100.0
    assert parse_position("-10%") == 0.0
    assert parse_position("1.5") == 100.0
    assert parse_position("-0.5") == 0.0


@pytest.mark.parametrize(
    "term", ["abc", "%", "1e2%", "inf", "nan%", "1.2.3%", "30px", "50", "2", "0", "1e-1"]
)
def test_parse_position_rejects(term):
    with pytest.raises(TokenizeError):
        parse_position(term)

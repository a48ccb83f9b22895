from dataclasses import dataclass
from typing import TypedDict

from pycombinator.parser_combinators import (
    Parser,
    and_then,
    any_of,
    between,
    fmap,
    many,
    or_else,
    p_character,
    satisfy,
    sequence,
)


ASCII_DIGITS = "0123456789"
ASCII_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


class DateParts(TypedDict):
    year: int
    month: int
    day: int


@dataclass(frozen=True)
class IdNumber:
    prefix: str
    digits: str
    check_digit: str


def is_ascii_digit(char: str) -> bool:
    return char in ASCII_DIGITS


def is_ascii_letter(char: str) -> bool:
    """Only A-Z and a-z; digits and underscore do not count as letters."""
    return char in ASCII_LETTERS


def to_number(chars: list[str]) -> int:
    return int("".join(chars))


digit = any_of(ASCII_DIGITS).named("digit")
any_number = satisfy(is_ascii_digit).named("any_number")
any_letter = satisfy(is_ascii_letter).named("any_letter")

# YYYY-MM-DD or YYYY/MM/DD
year = fmap(to_number, sequence([digit, digit, digit, digit])).named("year")
month = fmap(to_number, sequence([digit, digit])).named("month")
day = fmap(to_number, sequence([digit, digit])).named("day")
separator = or_else(p_character("-"), p_character("/")).named("separator")

date_parser: Parser[str, DateParts] = fmap(
    lambda ymd: DateParts(year=ymd[0], month=ymd[1], day=ymd[2]),
    sequence([year << separator, month << separator, day]),
).named("date")

check_digit = between(p_character("("), any_number, p_character(")")).named("check_digit")

# A123456(7): a letter, any run of digits, bracketed check digit
id_number_parser: Parser[str, IdNumber] = fmap(
    lambda v: IdNumber(prefix=v[0][0], digits="".join(v[0][1]), check_digit=v[1]),
    and_then(and_then(any_letter, many(any_number)), check_digit),
).named("id_number")

strict_id_number_parser: Parser[str, IdNumber] = fmap(
    lambda cs: IdNumber(prefix=cs[0], digits="".join(cs[1:7]), check_digit=cs[7]),
    sequence([any_letter] + [any_number] * 6 + [check_digit]),
).named("strict_id_number")

PARSERS: dict[str, Parser[str, object]] = {
    "date": date_parser,
    "id": id_number_parser,
    "strict-id": strict_id_number_parser,
}

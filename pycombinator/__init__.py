from pycombinator.parser_combinators import (
    Err,
    Ok,
    ParseError,
    Parser,
    Result,
    ResultKind,
    all_consuming,
    alt,
    and_then,
    and_then_take_first,
    and_then_take_second,
    any_of,
    between,
    end_of_input,
    fail,
    fmap,
    many,
    many1,
    optional,
    or_else,
    p_character,
    p_string,
    satisfy,
    sequence,
    succeed,
)

__all__ = [
    "Err",
    "Ok",
    "ParseError",
    "Parser",
    "Result",
    "ResultKind",
    "all_consuming",
    "alt",
    "and_then",
    "and_then_take_first",
    "and_then_take_second",
    "any_of",
    "between",
    "end_of_input",
    "fail",
    "fmap",
    "many",
    "many1",
    "optional",
    "or_else",
    "p_character",
    "p_string",
    "satisfy",
    "sequence",
    "succeed",
]

# pylint: disable
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Literal, NoReturn, TypeVar

log = logging.getLogger("pycombinator")

# Named parsers log each invocation at DEBUG level while this is set
debug = False

class ResultKind(Enum):
  OK = 0
  ERR = 1

E = TypeVar("E")
I = TypeVar("I")
T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
R = TypeVar("R")

EMPTY_INPUT = "Empty input"
NO_ALTERNATIVES = "No alternatives"
NO_PROGRESS = "Repetition made no progress"

class ParseError(ValueError):
  """Raised by `Parser.parse` when the parser returns `Err`."""

  def __init__(self, msg: str):
    super().__init__(msg)
    self.msg = msg

@dataclass(frozen=True)
class Ok(Generic[T]):
  val: T
  rest: Any
  kind: Literal[ResultKind.OK] = field(default=ResultKind.OK, init=False, repr=False)

  def is_ok(self) -> bool:
    return True

  def is_err(self) -> bool:
    return False

  def map(self, f: Callable[[T], R]) -> "Ok[R]":
    return Ok(f(self.val), self.rest)

  def validate(self, msg: str, f: Callable[[T], bool]) -> "Result[T]":
    if not f(self.val):
      return Err(msg)
    return self

  def unwrap(self) -> T:
    return self.val

@dataclass(frozen=True)
class Err:
  msg: str
  kind: Literal[ResultKind.ERR] = field(default=ResultKind.ERR, init=False, repr=False)

  def is_ok(self) -> bool:
    return False

  def is_err(self) -> bool:
    return True

  def map(self, f: Callable[[Any], Any]) -> "Err":
    return self

  def validate(self, msg: str, f: Callable[[Any], bool]) -> "Err":
    return self

  def unwrap(self) -> NoReturn:
    raise ValueError(self.msg)

Result = Ok[T] | Err

@dataclass(frozen=True)
class Parser(Generic[I, T]):
  f: Callable[[I], Result[T]]
  name: str | None = field(default=None, compare=False)

  def __call__(self, inp: I) -> Result[T]:
    return self.f(inp)

  def parse(self, inp: I) -> T:
    res = self.f(inp)
    if res.kind is ResultKind.ERR:
      raise ParseError(res.msg)
    return res.val

  def named(self, name: str) -> "Parser[I, T]":
    """Returns a copy of this parser carrying a name for the debug log.

    Invocations are only logged while the module-level `debug` flag is set.
    """
    inner = self.f
    def named_impl(inp: I) -> Result[T]:
      if not debug:
        return inner(inp)
      log.debug("trying %s on %r", name, inp)
      res = inner(inp)
      if res.kind is ResultKind.OK:
        log.debug("%s matched %r, rest %r", name, res.val, res.rest)
      else:
        log.debug("%s failed: %s", name, res.msg)
      return res
    return Parser(named_impl, name)

  def map(self, transformer: Callable[[T], R]) -> "Parser[I, R]":
    return fmap(transformer, self)

  def bind(self, parser2_func: "Callable[[T], Parser[I, R]]") -> "Parser[I, R]":
    def bind_impl(inp: I) -> Result[R]:
      res1 = self.f(inp)
      if res1.kind is ResultKind.ERR:
        return res1
      return parser2_func(res1.val).f(res1.rest)
    return Parser(bind_impl)

  def validate(self, msg: str, check: Callable[[T], bool]) -> "Parser[I, T]":
    def validate_impl(inp: I) -> Result[T]:
      return self.f(inp).validate(msg, check)
    return Parser(validate_impl)

  def __or__(self, parser2: "Parser[I, T]") -> "Parser[I, T]":
    return or_else(self, parser2)

  def __lshift__(self, parser2: "Parser[I, Any]") -> "Parser[I, T]":
    return and_then_take_first(self, parser2)

  def __rshift__(self, parser2: "Parser[I, T2]") -> "Parser[I, T2]":
    return and_then_take_second(self, parser2)

def succeed(v: T) -> Parser[Any, T]:
  return Parser(lambda inp: Ok(v, inp))

def fail(msg: str) -> Parser[Any, Any]:
  return Parser(lambda inp: Err(msg))

def satisfy(check: Callable[[E], bool]) -> Parser[Sequence[E], E]:
  def satisfy_impl(inp: Sequence[E]) -> Result[E]:
    if len(inp) == 0:
      return Err(EMPTY_INPUT)
    if not check(inp[0]):
      return Err(f"{inp[0]} cannot satisfy the condition")
    return Ok(inp[0], inp[1:])
  return Parser(satisfy_impl)

def p_character(char: E) -> Parser[Sequence[E], E]:
  def p_character_impl(inp: Sequence[E]) -> Result[E]:
    if len(inp) == 0:
      return Err(EMPTY_INPUT)
    if inp[0] != char:
      return Err(f"Expecting {char}, but got {inp[0]}")
    return Ok(inp[0], inp[1:])
  return Parser(p_character_impl)

def and_then(parser1: Parser[I, T1], parser2: Parser[I, T2]) -> Parser[I, tuple[T1, T2]]:
  def and_then_impl(inp: I) -> Result[tuple[T1, T2]]:
    res1 = parser1.f(inp)
    if res1.kind is ResultKind.ERR:
      return res1
    res2 = parser2.f(res1.rest)
    if res2.kind is ResultKind.ERR:
      return res2
    return Ok((res1.val, res2.val), res2.rest)
  return Parser(and_then_impl)

def or_else(parser1: Parser[I, T], parser2: Parser[I, T]) -> Parser[I, T]:
  return alt(parser1, parser2)

def fmap(transformer: Callable[[T], R], parser: Parser[I, T]) -> Parser[I, R]:
  def fmap_impl(inp: I) -> Result[R]:
    return parser.f(inp).map(transformer)
  return Parser(fmap_impl)

def alt(*parsers: Parser[I, T]) -> Parser[I, T]:
  if len(parsers) == 0:
    return fail(NO_ALTERNATIVES)
  def alt_impl(inp: I) -> Result[T]:
    res = parsers[0].f(inp)
    for parser in parsers[1:]:
      if res.kind is ResultKind.OK:
        return res
      res = parser.f(inp)
    return res
  return Parser(alt_impl)

def _lift_literal(s: str) -> Parser[str, str]:
  if len(s) == 1:
    return p_character(s)
  return p_string(s)

def any_of(alternatives: Iterable[Parser[I, T] | str]) -> Parser[I, T]:
  """Tries each alternative against the same input, first success wins.

  Plain strings are matched literally, one character with `p_character` and
  longer ones with `p_string`, so `any_of("0123456789")` matches one ASCII digit
  and `any_of(["-", "to"])` matches either separator. If every alternative fails the
  last failure is returned; with no alternatives at all the parser always fails
  with `NO_ALTERNATIVES`.
  """
  parsers = [_lift_literal(a) if isinstance(a, str) else a for a in alternatives]
  return alt(*parsers)

def sequence(parsers: Iterable[Parser[I, T]]) -> Parser[I, list[T]]:
  parsers = tuple(parsers)
  def sequence_impl(inp: I) -> Result[list[T]]:
    fullparsed: list[T] = []
    curr = inp
    for parser in parsers:
      res = parser.f(curr)
      if res.kind is ResultKind.ERR:
        return res
      fullparsed.append(res.val)
      curr = res.rest
    return Ok(fullparsed, curr)
  return Parser(sequence_impl)

def p_string(s: str) -> Parser[str, str]:
  return fmap("".join, sequence(p_character(c) for c in s))

def and_then_take_first(parser1: Parser[I, T], parser2: Parser[I, Any]) -> Parser[I, T]:
  return fmap(lambda vs: vs[0], and_then(parser1, parser2))

def and_then_take_second(parser1: Parser[I, Any], parser2: Parser[I, T]) -> Parser[I, T]:
  return fmap(lambda vs: vs[1], and_then(parser1, parser2))

def between(parser1: Parser[I, Any], parser2: Parser[I, T], parser3: Parser[I, Any]) -> Parser[I, T]:
  return and_then_take_first(and_then_take_second(parser1, parser2), parser3)

def many_m(min: int, parser: Parser[Sequence[E], T]) -> Parser[Sequence[E], list[T]]:
  def many_impl(inp: Sequence[E]) -> Result[list[T]]:
    fullparsed: list[T] = []
    curr = inp
    while True:
      res = parser.f(curr)
      if res.kind is ResultKind.ERR:
        if len(fullparsed) < min:
          return res
        return Ok(fullparsed, curr)
      # a success that consumed nothing would repeat forever
      if len(res.rest) >= len(curr):
        if len(fullparsed) < min:
          return Err(NO_PROGRESS)
        return Ok(fullparsed, curr)
      fullparsed.append(res.val)
      curr = res.rest
  return Parser(many_impl)

def many(parser: Parser[Sequence[E], T]) -> Parser[Sequence[E], list[T]]:
  return many_m(0, parser)

def many1(parser: Parser[Sequence[E], T]) -> Parser[Sequence[E], list[T]]:
  return many_m(1, parser)

def optional(parser: Parser[I, T], default: T) -> Parser[I, T]:
  def optional_impl(inp: I) -> Result[T]:
    res = parser.f(inp)
    if res.kind is ResultKind.OK:
      return res
    return Ok(default, inp)
  return Parser(optional_impl)

def end_of_input() -> Parser[Sequence[E], None]:
  def end_of_input_impl(inp: Sequence[E]) -> Result[None]:
    if len(inp) != 0:
      return Err(f"Expecting end of input, but got {inp[0]}")
    return Ok(None, inp)
  return Parser(end_of_input_impl)

def all_consuming(parser: Parser[Sequence[E], T]) -> Parser[Sequence[E], T]:
  return and_then_take_first(parser, end_of_input())

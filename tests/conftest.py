import pytest

from pycombinator import parser_combinators


@pytest.fixture(autouse=True)
def reset_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(parser_combinators, "debug", False)
    monkeypatch.delenv("PYCOMBINATOR_DEBUG", raising=False)

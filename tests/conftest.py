import pytest


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence; raises EOFError when it runs out."""

    def _feed(*lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed

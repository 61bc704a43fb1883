import os

import pytest

from recovery.numeral import ALPHABET

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")

_ENV_VARS = ("RECOVERY_STRATEGY", "RECOVERY_STRICT_SHARES", "RECOVERY_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # set-then-delete so teardown also removes anything load_dotenv adds
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def data_path():
    def _path(name: str) -> str:
        return os.path.join(DATA_DIR, name)

    return _path


def to_base(value: int, base: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value > 0:
        value, r = divmod(value, base)
        digits.append(ALPHABET[r])
    return "".join(reversed(digits))


def poly_eval(coeffs: list[int], x: int) -> int:
    y = 0
    power = 1
    for c in coeffs:
        y += c * power
        power *= x
    return y


@pytest.fixture
def make_document():
    """Build a share document for the polynomial ``coeffs`` with one share per (x, base)."""

    def _make(coeffs: list[int], xs_bases: list[tuple[int, int]], n: int | None = None, corrupt: dict[int, int] | None = None):
        corrupt = corrupt or {}
        doc = {"keys": {"n": n if n is not None else len(xs_bases), "k": len(coeffs)}}
        for x, base in xs_bases:
            y = poly_eval(coeffs, x) + corrupt.get(x, 0)
            doc[str(x)] = {"base": str(base), "value": to_base(y, base)}
        return doc

    return _make

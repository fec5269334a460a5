"""Reading and writing the player save file."""

from dataclasses import dataclass

SAVE_PATH = "game.save"


class SaveError(Exception):
    """Raised when a save file cannot be read or written."""


@dataclass
class SaveData:
    """Player state kept between sessions."""

    hp: int
    score: int
    x: float
    y: float


def _expect_tag(tokens, tag):
    token = next(tokens, None)
    if token != tag:
        raise SaveError(f"expected {tag!r}, found {token!r}")


def _read_value(tokens, convert, tag):
    token = next(tokens, None)
    if token is None:
        raise SaveError(f"missing value after {tag!r}")
    try:
        return convert(token)
    except ValueError as exc:
        raise SaveError(f"bad value {token!r} after {tag!r}") from exc


def load_save(path=SAVE_PATH):
    """Read the save file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise SaveError(f"cannot read {path}") from exc
    tokens = iter(text.split())
    _expect_tag(tokens, "#hp")
    hp = _read_value(tokens, int, "#hp")
    _expect_tag(tokens, "#score")
    score = _read_value(tokens, int, "#score")
    _expect_tag(tokens, "#position")
    x = _read_value(tokens, float, "#position")
    y = _read_value(tokens, float, "#position")
    return SaveData(hp=hp, score=score, x=x, y=y)


def write_save(data, path=SAVE_PATH):
    """Write ``data`` to the save file at ``path``."""
    text = (
        f"#hp {data.hp}\n"
        f"#score {data.score}\n"
        f"#position {data.x:.2f} {data.y:.2f}\n"
    )
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise SaveError(f"cannot write {path}") from exc
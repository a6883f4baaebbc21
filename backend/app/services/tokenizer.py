"""
Single-pass scanner for one line of cooklang step text.

Recognition never raises: when an ``@``, ``#`` or ``~`` doesn't start a
well-formed token, the introducer is kept as a literal character and the
scan moves on.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..models.recipe import Cookware, Ingredient, Timer

INGREDIENT = "@"
COOKWARE = "#"
TIMER = "~"
INTRODUCERS = INGREDIENT + COOKWARE + TIMER

WORD = re.compile(r"\w+")
# first % not escaped with a backslash
QUANTITY_SEPARATOR = re.compile(r"(?<!\\)%")


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class IngredientToken:
    ingredient: Ingredient


@dataclass(frozen=True)
class CookwareToken:
    cookware: Cookware


@dataclass(frozen=True)
class TimerToken:
    timer: Timer


Token = Union[Text, IngredientToken, CookwareToken, TimerToken]


def _clean(part: str) -> Optional[str]:
    part = part.strip().replace("\\%", "%")
    return part or None


def split_quantity(content: str) -> Tuple[Optional[str], Optional[str]]:
    """Split brace content into (amount, unit); unit is dropped without an amount."""
    parts = QUANTITY_SEPARATOR.split(content, maxsplit=1)
    amount = _clean(parts[0])
    unit = _clean(parts[1]) if len(parts) > 1 else None
    if amount is None:
        unit = None
    return amount, unit


def _braced(line: str, start: int) -> Optional[Tuple[str, str, int]]:
    """Match ``name{content}`` at ``start``; returns (name, content, end)."""
    open_at = line.find("{", start)
    if open_at == -1:
        return None
    name = line[start:open_at]
    if name[:1].isspace() or any(c in name for c in INTRODUCERS + "}"):
        return None
    close_at = line.find("}", open_at + 1)
    if close_at == -1:
        return None
    return name.strip(), line[open_at + 1:close_at], close_at + 1


def _build(kind: str, name: str, content: Optional[str]) -> Optional[Token]:
    amount, unit = split_quantity(content) if content is not None else (None, None)

    if kind == TIMER:
        if content is None or amount is None:
            return None
        return TimerToken(Timer(name=name or None, duration=amount, unit=unit))

    if not name:
        return None
    if kind == INGREDIENT:
        return IngredientToken(Ingredient(name=name, amount=amount, unit=unit))
    return CookwareToken(Cookware(name=name, quantity=amount))


def recognize(line: str, pos: int) -> Tuple[Optional[Token], int]:
    """
    Try to read a token whose introducer sits at ``line[pos]``.

    Returns the token and the index just past it, or ``(None, pos)`` when
    the text there is not a token.
    """
    kind = line[pos]
    start = pos + 1

    braced = _braced(line, start)
    if braced is not None:
        name, content, end = braced
        token = _build(kind, name, content)
        if token is not None:
            return token, end

    word = WORD.match(line, start)
    if word is None or kind == TIMER:
        return None, pos
    # a brace left open after the name spoils the whole token
    if line.startswith("{", word.end()):
        return None, pos
    return _build(kind, word.group(), None), word.end()


def tokenize_line(line: str) -> List[Token]:
    tokens: List[Token] = []
    literal: List[str] = []
    pos = 0

    while pos < len(line):
        if line[pos] in INTRODUCERS:
            token, end = recognize(line, pos)
            if token is not None:
                if literal:
                    tokens.append(Text("".join(literal)))
                    literal = []
                tokens.append(token)
                pos = end
                continue
        literal.append(line[pos])
        pos += 1

    if literal:
        tokens.append(Text("".join(literal)))
    return tokens


def render(tokens: List[Token]) -> str:
    """Readable text for a token list, markup replaced by display names."""
    out: List[str] = []
    for token in tokens:
        match token:
            case Text(value=value):
                out.append(value)
            case IngredientToken(ingredient=ingredient):
                out.append(ingredient.name)
            case CookwareToken(cookware=cookware):
                out.append(cookware.name)
            case TimerToken(timer=timer):
                out.append(timer.label)
    return "".join(out)

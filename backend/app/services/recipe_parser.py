"""
Cooklang parser – turns recipe markup into a structured Recipe.

Parsing is total: any text yields a Recipe, malformed markup just stays
in the step text as written.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from ..models.recipe import Recipe, Step
from .tokenizer import CookwareToken, IngredientToken, Text, TimerToken, Token, render, tokenize_line

log = logging.getLogger(__name__)


class RecipeParser:
    block_comment = re.compile(r"\[-.*?-\]", re.S)
    line_comment = "--"
    metadata_prefix = ">>"

    @classmethod
    def parse(cls, raw: str) -> Recipe:
        text = raw.replace("\r\n", "\n").replace("\r", "\n")
        metadata: Dict[str, str] = {}
        blocks: List[List[str]] = []
        block: List[str] = []

        for line, commented in cls._lines(text):
            cut = line.find(cls.line_comment)
            if cut != -1:
                line, commented = line[:cut], True
            stripped = line.strip()

            if not stripped:
                # comment-only lines don't end a step
                if not commented and block:
                    blocks.append(block)
                    block = []
                continue
            if stripped.startswith(cls.metadata_prefix):
                cls._metadata(stripped[len(cls.metadata_prefix):], metadata)
                continue
            block.append(stripped)

        if block:
            blocks.append(block)

        recipe = Recipe(metadata=metadata)
        for lines in blocks:
            step = cls._step(lines)
            recipe.steps.append(step)
            recipe.ingredients.extend(step.ingredients)
            recipe.cookware.extend(step.cookware)
            recipe.timers.extend(step.timers)

        log.debug(
            "Parsed recipe: %d steps, %d ingredients, %d metadata keys",
            len(recipe.steps), len(recipe.ingredients), len(metadata),
        )
        return recipe

    @classmethod
    def _lines(cls, text: str) -> List[Tuple[str, bool]]:
        """Split into lines with block comments removed, flagging lines that lost one."""
        pieces: List[Optional[str]] = []
        pos = 0
        for match in cls.block_comment.finditer(text):
            pieces.append(text[pos:match.start()])
            pieces.append(None)
            pos = match.end()
        pieces.append(text[pos:])

        lines: List[Tuple[str, bool]] = []
        current, commented = "", False
        for piece in pieces:
            if piece is None:
                commented = True
                continue
            first, *rest = piece.split("\n")
            current += first
            for part in rest:
                lines.append((current, commented))
                current, commented = part, False
        lines.append((current, commented))
        return lines

    @staticmethod
    def _metadata(body: str, metadata: Dict[str, str]) -> None:
        key, sep, value = body.partition(":")
        key = key.strip()
        if not sep or not key:
            log.debug("Skipping malformed metadata line: %r", body)
            return
        metadata[key] = value.strip()

    @staticmethod
    def _step(lines: List[str]) -> Step:
        tokens: List[Token] = []
        for i, line in enumerate(lines):
            if i:
                tokens.append(Text(" "))
            tokens.extend(tokenize_line(line))

        step = Step(text=render(tokens))
        for token in tokens:
            match token:
                case IngredientToken(ingredient=ingredient):
                    step.ingredients.append(ingredient)
                case CookwareToken(cookware=cookware):
                    step.cookware.append(cookware)
                case TimerToken(timer=timer):
                    step.timers.append(timer)
        return step


def parse(text: str) -> Recipe:
    return RecipeParser.parse(text)

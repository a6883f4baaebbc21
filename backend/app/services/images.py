"""
Attach pictures to a parsed recipe by file name.

Next to ``soup.cook``, ``soup.jpg`` is the main image and ``soup.2.png``
belongs to step 2. Only names are compared, nothing is opened.
"""

import logging
from pathlib import Path, PurePath
from typing import Dict, Iterable, Optional, Tuple

from ..core.config import get_settings
from ..models.recipe import Recipe

log = logging.getLogger(__name__)

# longer "step numbers" are not step images
MAX_STEP_DIGITS = 6


def match_images(
    document_name: str,
    sibling_names: Iterable[str],
    extensions: Optional[Iterable[str]] = None,
) -> Tuple[Optional[str], Dict[int, str]]:
    """Return (main image, {step number: image}) picked from ``sibling_names``."""
    if extensions is None:
        extensions = get_settings().image_extensions
    allowed = {ext.lower().lstrip(".") for ext in extensions}

    document = PurePath(document_name)
    base = document.stem
    main: Optional[str] = None
    steps: Dict[int, str] = {}

    for sibling in sibling_names:
        name = PurePath(sibling).name
        stem, dot, ext = name.rpartition(".")
        if not dot or name == document.name or ext.lower() not in allowed:
            continue

        if stem == base:
            main = sibling
        elif stem.startswith(base + "."):
            number = stem[len(base) + 1:]
            if number.isascii() and number.isdigit() and len(number) <= MAX_STEP_DIGITS and int(number) > 0:
                steps[int(number)] = sibling

    return main, steps


def attach_images(
    recipe: Recipe,
    document_name: str,
    sibling_names: Iterable[str],
    extensions: Optional[Iterable[str]] = None,
) -> Recipe:
    main, steps = match_images(document_name, sibling_names, extensions)
    recipe.image = main
    recipe.method_images = steps
    log.debug("Attached images to %s: main=%s, steps=%s", document_name, main, sorted(steps))
    return recipe


def sibling_images(recipe: Recipe, document_path: Path) -> Recipe:
    """Attach images found in the document's own directory."""
    document_path = Path(document_path)
    siblings = [p.name for p in document_path.parent.iterdir() if p.is_file()]
    return attach_images(recipe, document_path.name, sorted(siblings))

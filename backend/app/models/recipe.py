from __future__ import annotations

from datetime import timedelta
from fractions import Fraction
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

# seconds per unit, keyed by lowercase unit text
TIME_UNITS: Dict[str, int] = {
    "s": 1, "sec": 1, "secs": 1, "second": 1, "seconds": 1,
    "m": 60, "min": 60, "mins": 60, "minute": 60, "minutes": 60,
    "h": 3600, "hr": 3600, "hrs": 3600, "hour": 3600, "hours": 3600,
    "d": 86400, "day": 86400, "days": 86400,
}


def _number(text: str) -> Optional[Fraction]:
    """Read ``10``, ``1.5``, ``1/2`` or a mixed number like ``1 1/2``."""
    parts = text.split()
    try:
        if len(parts) == 1:
            return Fraction(parts[0])
        if len(parts) == 2 and parts[0].isdigit() and "/" in parts[1]:
            return int(parts[0]) + Fraction(parts[1])
    except (ValueError, ZeroDivisionError):
        return None
    return None


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    amount: Optional[str] = None
    unit: Optional[str] = None

    @property
    def label(self) -> str:
        """Ingredients-list line, e.g. ``2 tbsp olive oil``."""
        return " ".join(p for p in (self.amount, self.unit, self.name) if p)


class Cookware(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    quantity: Optional[str] = None


class Timer(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    duration: str
    unit: Optional[str] = None

    @property
    def label(self) -> str:
        if self.unit:
            return f"{self.duration} {self.unit}"
        return self.duration

    @property
    def seconds(self) -> Optional[int]:
        """Length in seconds, or None when the duration or unit isn't understood."""
        if not self.unit:
            return None
        scale = TIME_UNITS.get(self.unit.lower())
        value = _number(self.duration)
        if scale is None or value is None or value < 0:
            return None
        return int(value * scale)

    @property
    def as_timedelta(self) -> Optional[timedelta]:
        secs = self.seconds
        return None if secs is None else timedelta(seconds=secs)


class Step(BaseModel):
    text: str
    ingredients: List[Ingredient] = Field(default_factory=list)
    cookware: List[Cookware] = Field(default_factory=list)
    timers: List[Timer] = Field(default_factory=list)


class Recipe(BaseModel):
    ingredients: List[Ingredient] = Field(default_factory=list)
    cookware: List[Cookware] = Field(default_factory=list)
    timers: List[Timer] = Field(default_factory=list)
    steps: List[Step] = Field(default_factory=list)
    metadata: Dict[str, str] = Field(default_factory=dict)

    # filled in after parsing by services.images
    image: Optional[str] = None
    method_images: Dict[int, str] = Field(default_factory=dict)

    @computed_field
    @property
    def method(self) -> List[str]:
        return [step.text for step in self.steps]

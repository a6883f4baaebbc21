from datetime import timedelta

from backend.app.models.recipe import Ingredient, Timer


def test_ingredient_label():
    assert Ingredient(name="olive oil", amount="2", unit="tbsp").label == "2 tbsp olive oil"
    assert Ingredient(name="eggs", amount="3").label == "3 eggs"
    assert Ingredient(name="salt").label == "salt"


def test_timer_label():
    assert Timer(duration="10", unit="minutes").label == "10 minutes"
    assert Timer(duration="a while").label == "a while"


def test_timer_seconds():
    assert Timer(duration="10", unit="minutes").seconds == 600
    assert Timer(duration="1/2", unit="hour").seconds == 1800
    assert Timer(duration="1.5", unit="Min").seconds == 90
    assert Timer(duration="10", unit="minutes").as_timedelta == timedelta(minutes=10)


def test_timer_seconds_unknown():
    assert Timer(duration="10", unit="fortnights").seconds is None
    assert Timer(duration="a few", unit="minutes").seconds is None
    assert Timer(duration="1/0", unit="minutes").seconds is None
    assert Timer(duration="10").as_timedelta is None


def test_timer_seconds_mixed_number():
    assert Timer(duration="1 1/2", unit="hours").seconds == 5400
    assert Timer(duration="1 2 3", unit="hours").seconds is None
    assert Timer(duration="1.5 1/2", unit="hours").seconds is None

from backend.app.models.recipe import Cookware, Ingredient, Timer
from backend.app.services.tokenizer import (
    CookwareToken,
    IngredientToken,
    Text,
    TimerToken,
    recognize,
    render,
    split_quantity,
    tokenize_line,
)


def test_tokenize_mixed_line():
    tokens = tokenize_line("Fry @onion in #pan{} for ~{5%min}")
    assert tokens == [
        Text("Fry "),
        IngredientToken(Ingredient(name="onion")),
        Text(" in "),
        CookwareToken(Cookware(name="pan")),
        Text(" for "),
        TimerToken(Timer(duration="5", unit="min")),
    ]
    assert render(tokens) == "Fry onion in pan for 5 min"


def test_literal_characters_are_merged():
    assert tokenize_line("a @ b") == [Text("a @ b")]


def test_recognize_reports_end():
    line = "x @salt{1%tsp} y"
    token, end = recognize(line, 2)
    assert token == IngredientToken(Ingredient(name="salt", amount="1", unit="tsp"))
    assert line[end:] == " y"


def test_recognize_rejects_open_brace():
    assert recognize("@flour{200", 0) == (None, 0)


def test_split_quantity():
    assert split_quantity("2%tbsp") == ("2", "tbsp")
    assert split_quantity("a pinch") == ("a pinch", None)
    assert split_quantity("") == (None, None)
    assert split_quantity(" % g") == (None, None)
    assert split_quantity("1\\%%l") == ("1%", "l")


def test_name_stops_at_punctuation():
    tokens = tokenize_line("@salt.")
    assert tokens == [IngredientToken(Ingredient(name="salt")), Text(".")]

import pytest

from rustlings.exercises.hashmaps import (
    Fruit,
    Team,
    build_scores_table,
    default_fruit_basket,
    fill_fruit_basket,
)


def test_at_least_three_types_of_fruits():
    assert len(default_fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(default_fruit_basket().values()) >= 5


def test_default_basket_contents():
    assert default_fruit_basket() == {"banana": 2, "apple": 2, "mango": 2}


def get_fruit_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = get_fruit_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = get_fruit_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = get_fruit_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


def get_results():
    return (
        "England,France,4,2\n"
        "France,Italy,3,1\n"
        "Poland,Spain,2,0\n"
        "Germany,England,2,1\n"
    )


def test_build_scores():
    scores = build_scores_table(get_results())
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(get_results())["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(get_results())["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_bad_score_raises():
    with pytest.raises(ValueError):
        build_scores_table("England,France,four,2\n")


def test_short_line_raises():
    with pytest.raises(ValueError):
        build_scores_table("England,France,4\n")


def test_add_different_team_raises():
    with pytest.raises(ValueError):
        Team("A", 1, 1).add(Team("B", 1, 1))


def test_add_overflow_raises():
    with pytest.raises(OverflowError):
        Team("A", 200, 0).add(Team("A", 100, 0))
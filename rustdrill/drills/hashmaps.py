"""Hash map drills: fruit baskets and a football scores table."""

from dataclasses import dataclass
from enum import Enum


def new_fruit_basket():
    """A basket of at least three kinds and at least five fruits."""
    basket = {"banana": 2}
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


class Fruit(Enum):
    """Kinds of fruit that can go in the basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket):
    """Add one of every fruit kind not yet present, leaving the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's name and goal totals."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text):
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] == "+" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > 255:
        raise ValueError("number too large to fit in target type")
    return value


def _lines(text):
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _record(scores, name, scored, conceded):
    team = scores.setdefault(name, Team(name))
    team.goals_scored += scored
    team.goals_conceded += conceded


def build_scores_table(results):
    """Build a table of teams from lines of "team1,team2,goals1,goals2"."""
    scores = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])
        _record(scores, team_1_name, team_1_score, team_2_score)
        _record(scores, team_2_name, team_2_score, team_1_score)
    return scores
"""Tests for team models and formatting."""
import random

import pytest

from randteam.teams.models import Team, TeamMember, capitalize
from randteam.teams.randomizer import format_evs, random_evs


@pytest.fixture
def member():
    return TeamMember(
        name="Pikachu",
        moves=["thunderbolt", "volt-switch", "grass-knot", "hidden-power"],
        ability="static",
        evs={"Atk": 252, "Spe": 252, "HP": 4},
        nature="Adamant",
        item="Light Ball",
    )


def test_capitalize():
    assert capitalize("pikachu") == "Pikachu"
    assert capitalize("volt-switch") == "Volt-switch"
    assert capitalize("") == ""


def test_ev_spread_skips_zero_stats(member):
    member.evs = {"HP": 0, "Atk": 252, "Def": 0, "SpA": 0, "SpD": 4, "Spe": 252}
    assert member.ev_spread == "252 Atk / 4 SpD / 252 Spe"


def test_ev_spread_renders_random_allocation(member):
    member.evs = random_evs(random.Random(5))

    assert member.ev_spread == format_evs(member.evs)
    assert f"EVs: {member.ev_spread}" in member.to_showdown()


def test_member_to_showdown(member):
    assert member.to_showdown() == "\n".join([
        "Pikachu @ Light Ball",
        "Ability: Static",
        "Level: 100",
        "EVs: 252 Atk / 252 Spe / 4 HP",
        "Nature: Adamant",
        "- Thunderbolt",
        "- Volt-switch",
        "- Grass-knot",
        "- Hidden-power",
    ])


def test_to_showdown_without_item_or_ability(member):
    member.item = None
    member.ability = ""
    lines = member.to_showdown().split("\n")

    assert lines[0] == "Pikachu"
    assert lines[1] == "Ability: "


def test_member_to_display(member):
    text = member.to_display(1)

    assert text.startswith("1. Pikachu\nItem: Light Ball\n")
    assert "Moves: thunderbolt, volt-switch, grass-knot, hidden-power" in text


def test_team_formats_members_separated_by_blank_line(member):
    other = TeamMember(name="Ditto", moves=["transform"], evs={"HP": 4}, nature="Relaxed", item="[Item]")
    team = Team(members=[member, other], generation=3)

    blocks = team.to_showdown().split("\n\n")
    assert len(team) == 2
    assert blocks[1].startswith("Ditto @ [Item]")
    assert team.to_display().split("\n\n")[1].startswith("2. Ditto")

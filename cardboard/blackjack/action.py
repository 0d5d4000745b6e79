"""Defines the Action enum for the commands a player can give at the table."""
from enum import Enum


class Action(Enum):
    """Enum for the commands a player can give at the Blackjack table."""

    HIT = "hit"
    STAY = "stay"
    NEW_GAME = "new game"

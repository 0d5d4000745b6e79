"""Thirteens and Blackjack solitaire games."""

"""A player with a bank and a play area who plays, banks and discards cards."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from deadmansdraw.piles import Bank, Discard, PlayArea

if TYPE_CHECKING:
    from deadmansdraw.cards import Card
    from deadmansdraw.game import Game

NAMES = ("Sam", "Jen", "Billy", "Bob", "Sally", "Joe", "Sue", "Sasha", "Tina", "Marge")


def random_name(rng: random.Random | None = None) -> str:
    """Pick one of the stock player names."""
    return (rng if rng is not None else random).choice(NAMES)


class Player:
    """Holds a player's name, bank and play area, and the shared discard pile."""

    def __init__(self, name: str | None = None, discard: Discard | None = None) -> None:
        self.name = name if name is not None else random_name()
        self.discard = discard if discard is not None else Discard()
        self.total_score = 0
        self.bank = Bank()
        self.play_area = PlayArea()
        self.game: Game | None = None

    def __repr__(self) -> str:
        return f"Player({self.name!r})"

    def attach(self, game: Game) -> None:
        """Join a game; card abilities act through it."""
        self.game = game

    def play_card(self, card: Card) -> None:
        """Put a card into the play area and trigger its ability."""
        if card is None:
            raise ValueError("tried to play a missing card")
        self.play_area.play(card)
        card.play(self.game, self)

    def is_bust(self) -> bool:
        """True when two cards in the play area share a suit."""
        seen = set()
        for card in self.play_area.cards:
            if card.suit in seen:
                return True
            seen.add(card.suit)
        return False

    def bank_cards(self) -> None:
        """Trigger every banking ability, then move the play area into the bank."""
        for card in list(self.play_area.cards):
            card.will_add_to_bank(self.game)
        self.bank.cards.extend(self.play_area.cards)
        self.play_area.cards.clear()

    def render_play_area(self) -> str:
        return self.play_area.render()

    def render_bank(self) -> str:
        return self.bank.render()

    def discard_play(self) -> None:
        """Move every card in the play area onto the discard pile."""
        for card in self.play_area.cards:
            self.discard.add(card)
        self.play_area.cards.clear()

    def discard_card(self, card: Card) -> None:
        self.discard.add(card)

    def draw_n_cards(self, n: int) -> None:
        """Draw and play up to ``n`` cards, stopping at the first bust."""
        for _ in range(n):
            self.game.draw_next_card()
            if self.is_bust():
                self.game.discard_cards()
                return
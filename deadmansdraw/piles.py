"""Card piles a player owns: the bank, the play area and the shared discard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deadmansdraw.cards import Card


def _listing(cards: list[Card]) -> str:
    return "".join(f"\t{card.describe(False)}\n" for card in cards)


@dataclass
class Bank:
    """Cards a player has banked in earlier turns."""

    cards: list[Card] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def score(self) -> int:
        """Sum of the values of every banked card."""
        return sum(card.value for card in self.cards)

    def render(self) -> str:
        """One tab-indented line per card, followed by the score line."""
        return f"{_listing(self.cards)}|Score: {self.score()}\n"


@dataclass
class PlayArea:
    """Cards played during the current turn."""

    cards: list[Card] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def play(self, card: Card) -> None:
        """Put a card at the end of the play area."""
        self.cards.append(card)

    def render(self) -> str:
        """One tab-indented line per card, followed by a blank line."""
        return f"{_listing(self.cards)}\n"


@dataclass
class Discard:
    """Cards lost through busting; the last card added is on top."""

    cards: list[Card] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def add(self, card: Card) -> None:
        """Put a card on top of the discard pile."""
        self.cards.append(card)
"""The draw pile, built from every suit and shuffled."""

from __future__ import annotations

import random

from deadmansdraw.cards import Card, Chest, Hook, Key, Kraken, Map, Mermaid, Oracle, Sword

_STANDARD_VALUES = range(2, 8)
_MERMAID_VALUES = range(4, 10)

_COMPOSITION: tuple[tuple[type[Card], range], ...] = (
    (Chest, _STANDARD_VALUES),
    (Key, _STANDARD_VALUES),
    (Sword, _STANDARD_VALUES),
    (Hook, _STANDARD_VALUES),
    (Oracle, _STANDARD_VALUES),
    (Map, _STANDARD_VALUES),
    (Mermaid, _MERMAID_VALUES),
    (Kraken, _STANDARD_VALUES),
)


class Deck:
    """A shuffled pile of cards; the last card of ``cards`` is the top."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.cards: list[Card] = [
            card_type(value) for card_type, values in _COMPOSITION for value in values
        ]
        self.shuffle()

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""
        self._rng.shuffle(self.cards)

    def draw(self) -> Card | None:
        """Take the top card, or return None when the deck is empty."""
        return self.cards.pop() if self.cards else None

    def peek(self) -> Card | None:
        """Show the top card without taking it, or None when the deck is empty."""
        return self.cards[-1] if self.cards else None
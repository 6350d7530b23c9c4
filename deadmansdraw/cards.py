"""The suits and cards of the game, with each suit's ability."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar


class Suit(Enum):
    NONE = "None"
    CANNON = "Cannon"
    CHEST = "Chest"
    KEY = "Key"
    SWORD = "Sword"
    HOOK = "Hook"
    ORACLE = "Oracle"
    MAP = "Map"
    MERMAID = "Mermaid"
    KRAKEN = "Kraken"


PICK_PROMPT = "\tWhich card do you pick? "


def top_cards_by_suit(cards: list[Card]) -> list[int]:
    """Indices of the highest card of each suit, largest index first.

    Among equal values the earliest card of a suit wins.
    """
    best: dict[Suit, int] = {}
    for index, card in enumerate(cards):
        current = best.get(card.suit)
        if current is None or card.value > cards[current].value:
            best[card.suit] = index
    return sorted(best.values(), reverse=True)


def _pick(game: Any, count: int) -> int:
    """Ask until the answer is a whole number from 1 to count; return it zero-based."""
    while True:
        answer = game.ask(PICK_PROMPT)
        try:
            choice = int(answer.strip())
        except ValueError:
            continue
        if 1 <= choice <= count:
            return choice - 1


def _take_top_card(game: Any, cards: list[Card]) -> Card:
    """Offer the top card of each suit in ``cards`` and remove the chosen one."""
    indices = top_cards_by_suit(cards)
    for number, index in enumerate(indices, start=1):
        game.say(f"\t({number}) {cards[index].describe(False)}\n")
    return cards.pop(indices[_pick(game, len(indices))])


class Card:
    """A card with a point value; subclasses give it a suit and an ability."""

    suit: ClassVar[Suit] = Suit.NONE
    effect: ClassVar[str] = ""

    def __init__(self, value: int) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"<{self.describe(False)}>"

    def describe(self, verbose: bool = False) -> str:
        """Short name such as ``Key(3)``; verbose adds the ability text."""
        short = f"{self.suit.value}({self.value})"
        if verbose and self.effect:
            return f"{short}\n\t{self.effect}"
        return short

    def play(self, game: Any, player: Any) -> None:
        """Ability triggered when the card enters the play area."""

    def will_add_to_bank(self, game: Any) -> None:
        """Ability triggered just before the play area is banked."""


class Chest(Card):
    suit = Suit.CHEST
    effect = (
        "No immediate effect. If banked with a Key card, draw as many bonus cards "
        "from the Discard pile as you moved into your Bank."
    )

    def will_add_to_bank(self, game: Any) -> None:
        player = game.current_player
        played = player.play_area.cards
        if not any(card.suit is Suit.KEY for card in played):
            return
        discarded = player.discard.cards
        added = []
        for _ in range(min(len(discarded), len(played))):
            card = discarded.pop()
            added.append(card.describe(False))
            player.bank.cards.append(card)
        if not added:
            game.say("No cards in the discard pile.\n")
        else:
            game.say(f"Chest and key activated. Added {', '.join(added)} to your bank.\n")


class Key(Card):
    suit = Suit.KEY
    effect = (
        "No immediate effect. If banked with a Chest card, draw as many bonus cards "
        "from the Discard pile as you moved into your Bank."
    )


class Sword(Card):
    suit = Suit.SWORD
    effect = (
        "Steal the top card (i.e. the highest value) of any suit from the other "
        "player's Bank into your Play Area.You must select one card."
    )

    def play(self, game: Any, player: Any) -> None:
        bank = game.other_player.bank
        if not bank.cards:
            game.say("No cards in the other players bank.\n")
            return
        card = _take_top_card(game, bank.cards)
        game.say(f"\tYou swipe the {card.describe(False)} out of the other player's Bank\n")
        game.say(card.describe(True))
        game.current_player.play_card(card)


class Hook(Card):
    suit = Suit.HOOK
    effect = (
        "Play the top card (i.e. the highest value) of any suit from your Bank "
        "into your play area. You must select one card."
    )

    def play(self, game: Any, player: Any) -> None:
        current = game.current_player
        bank = current.bank
        if not bank.cards:
            game.say("No cards in your bank.\n")
            return
        card = _take_top_card(game, bank.cards)
        game.say(f"\tYou hook the {card.describe(False)} out of your Bank\n")
        current.play_card(card)


class Oracle(Card):
    suit = Suit.ORACLE
    effect = "Peek at the top card of the deck before choosing whether to draw."

    def play(self, game: Any, player: Any) -> None:
        upcoming = game.deck.peek()
        if upcoming is None:
            game.say("\tThe oracle sees no cards left in the deck\n")
            return
        game.say(f"\tThe oracle shows you the next card is a {upcoming.describe(False)}\n")


class Map(Card):
    suit = Suit.MAP
    effect = (
        "Draw 3 cards from discard pile. You must play one of the cards drawn "
        "into your play area."
    )

    def play(self, game: Any, player: Any) -> None:
        current = game.current_player
        discarded = current.discard.cards
        if not discarded:
            game.say("No cards in the discard pile.")
            return
        for number, card in enumerate(discarded[:3], start=1):
            game.say(f"\t({number}){card.describe(False)}\n")
        card = discarded.pop(_pick(game, len(discarded)))
        game.say(f"\tYou played the {card.describe(True)}\n")
        current.play_card(card)


class Mermaid(Card):
    suit = Suit.MERMAID
    effect = "No ability but the cards have a higher point value."


class Kraken(Card):
    suit = Suit.KRAKEN
    effect = "Must draw and play three cards consecutively."

    def play(self, game: Any, player: Any) -> None:
        player.draw_n_cards(3)
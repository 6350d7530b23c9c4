"""The turn loop of a two-player game."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable

from deadmansdraw.deck import Deck
from deadmansdraw.piles import Discard
from deadmansdraw.player import Player, random_name

MAX_TURNS = 40


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class Game:
    """Runs turns for two players sharing one deck and one discard pile."""

    def __init__(
        self,
        read: Callable[[], str] | None = None,
        write: Callable[[str], None] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._read = read if read is not None else input
        self._write = write if write is not None else _stdout_write
        rng = rng if rng is not None else random.Random()
        self.deck = Deck(rng)
        self.discard_pile = Discard()
        self.players = (
            Player(random_name(rng), self.discard_pile),
            Player(random_name(rng), self.discard_pile),
        )
        for player in self.players:
            player.attach(self)
        self.current_turn = 1
        self.current_player, self.other_player = self.players
        self.playing = True
        self._drawing = True

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the trimmed answer."""
        self._write(prompt)
        return self._read().strip()

    def say(self, text: str) -> None:
        self._write(text)

    def start(self) -> None:
        """Play turns until the turn limit is passed."""
        first, second = self.players
        self.current_player, self.other_player = first, second
        self.say("Starting Dead Man's Draw++!\n")
        while self.playing:
            player = self.current_player
            round_number = (self.current_turn + 1) // 2
            self.say(f"--- Round {round_number}, Turn {self.current_turn} ---\n")
            self.say(f"{player.name}'s turn: \n")
            self.say(f"{player.name}'s Bank: \n")
            self.say(player.render_bank())

            self.draw_next_card()
            self._drawing = True
            while self._drawing:
                if self.current_player.is_bust():
                    self.discard_cards()
                    break
                answer = self.ask("Draw again? (y/n): ")
                if answer == "y":
                    self.draw_next_card()
                elif answer == "n":
                    self.current_player.bank_cards()
                    self._drawing = False
                else:
                    self.say("Try typing a lowercase y to represent yes or n to represent no")

            self.current_turn += 1
            if self.current_turn % 2 == 0:
                self.current_player, self.other_player = second, first
            else:
                self.current_player, self.other_player = first, second
            if self.current_turn > MAX_TURNS:
                self.playing = False

    def end(self) -> None:
        self.say("Game ended!\n")

    def shuffle_deck(self) -> None:
        self.deck.shuffle()
        self.say("Deck shuffled\n")

    def draw_next_card(self) -> None:
        """Draw the top card and play it for the current player."""
        card = self.deck.draw()
        if card is None:
            self.say("No more cards to draw.\n")
            self.end()
            return
        player = self.current_player
        if player.is_bust():
            # The drawn card is never played and leaves the game.
            self.discard_cards()
            self._drawing = False
            return
        self.say(f"{player.name} draws a {card.describe(True)}\n")
        player.play_card(card)
        self.say(f"{player.name}'s Play Area: \n")
        self.say(player.render_play_area())

    def discard_cards(self) -> None:
        """Bust: the current player loses the whole play area."""
        self.say(f"BUST! {self.current_player.name} loses all cards in play area.\n")
        self.current_player.discard_play()
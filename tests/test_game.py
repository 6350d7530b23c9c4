import random

import pytest

from deadmansdraw.cards import Key, Mermaid
from deadmansdraw.game import MAX_TURNS, Game


class Console:
    def __init__(self, answers=()):
        self.answers = list(answers)
        self.out = []

    def write(self, text):
        self.out.append(text)

    def read(self):
        if self.answers:
            return self.answers.pop(0)
        return "n" if self.out and self.out[-1].endswith("(y/n): ") else "1"

    @property
    def text(self):
        return "".join(self.out)


def make_game(answers=(), seed=0):
    console = Console(answers)
    return Game(read=console.read, write=console.write, rng=random.Random(seed)), console


def test_ask_writes_prompt_and_strips_answer():
    game, console = make_game(["  y \n"])
    assert game.ask("Draw again? (y/n): ") == "y"
    assert console.out[-1] == "Draw again? (y/n): "


def test_full_game_runs_to_turn_limit():
    game, console = make_game(seed=11)
    game.start()
    assert console.text.startswith("Starting Dead Man's Draw++!\n")
    assert f"Turn {MAX_TURNS} ---" in console.text
    assert f"Turn {MAX_TURNS + 1} ---" not in console.text
    assert game.current_turn == MAX_TURNS + 1
    assert game.current_player is game.players[0]


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_cards_are_conserved(seed):
    game, _ = make_game(seed=seed)
    total = len(game.deck)
    game.start()
    in_banks = sum(len(p.bank) + len(p.play_area) for p in game.players)
    assert len(game.deck) + len(game.discard_pile) + in_banks <= total


def test_invalid_answer_is_retried():
    game, console = make_game(["maybe", "n"])
    game.deck.cards = [Key(2), Mermaid(4)]
    game.start()
    assert "Try typing a lowercase y to represent yes or n to represent no" in console.text
    assert [c.describe() for c in game.players[0].bank.cards] == ["Mermaid(4)"]
    assert [c.describe() for c in game.players[1].bank.cards] == ["Key(2)"]


def test_bust_in_turn_discards_play_area():
    game, console = make_game(["y"])
    game.deck.cards = [Mermaid(5), Mermaid(4)]
    game.start()
    first = game.players[0]
    assert f"BUST! {first.name} loses all cards in play area.\n" in console.text
    assert len(first.bank) == 0
    assert sorted(c.value for c in game.discard_pile.cards) == [4, 5]


def test_draw_from_empty_deck():
    game, console = make_game()
    game.deck.cards = []
    game.draw_next_card()
    assert console.text == "No more cards to draw.\nGame ended!\n"


def test_draw_plays_card_for_current_player():
    game, console = make_game()
    game.deck.cards = [Mermaid(6)]
    game.draw_next_card()
    player = game.current_player
    assert [c.describe() for c in player.play_area.cards] == ["Mermaid(6)"]
    assert f"{player.name} draws a Mermaid(6)\n" in console.text


def test_discard_cards_moves_to_shared_pile():
    game, console = make_game()
    player = game.current_player
    player.play_card(Key(3))
    game.discard_cards()
    assert len(player.play_area) == 0
    assert [c.describe() for c in game.discard_pile.cards] == ["Key(3)"]
    assert console.text.startswith("BUST! ")


def test_shuffle_deck_keeps_size():
    game, console = make_game()
    size = len(game.deck)
    game.shuffle_deck()
    assert len(game.deck) == size
    assert console.text == "Deck shuffled\n"


def test_players_share_discard_pile():
    game, _ = make_game()
    first, second = game.players
    assert first.discard is second.discard is game.discard_pile
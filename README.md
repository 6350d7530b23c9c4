# deadmansdraw

Dead Man's Draw++ is a two-player pirate card game played at the terminal.
Players take turns drawing cards from a shared deck into their play area. If
two cards of the same suit are in play, the player goes bust and loses
everything in play to the shared discard pile. A player who stops in time
moves the cards into their bank, where their values count towards the score
shown at the start of each turn.

## Installing

```
pip install .
```

## Playing

```
deadmansdraw
```

The command prints the title and starts a game between two players with
randomly chosen names. After each draw you are asked `Draw again? (y/n):`.
Answer `y` to draw another card or `n` to bank the cards in your play area.
Some cards ask `Which card do you pick?`. Answer with the number of a listed
card. The question repeats until the answer is a valid number.

The game runs for 40 turns. Once the deck is empty, each draw only reports
`No more cards to draw.` and the turns go on until the limit is reached.
Ending input early (end of file or Ctrl-C) stops the game, and the command
exits with status 1.

## The deck

The deck holds 48 cards: six of each of eight suits, shuffled. Most suits have
values 2 to 7. Mermaids have values 4 to 9.

| Suit    | Effect |
|---------|--------|
| Chest   | When banked together with a Key, moves cards from the top of the discard pile into your bank, as many as there are cards in your play area (or fewer if the pile is smaller) |
| Key     | No effect of its own; it lets a Chest do its work |
| Sword   | Steal the highest card of any suit you choose from the other player's bank into your play area |
| Hook    | Play the highest card of any suit you choose from your own bank into your play area |
| Oracle  | Shows the top card of the deck |
| Map     | Lists the first three cards of the discard pile and plays the one you pick |
| Mermaid | No effect, but higher values |
| Kraken  | Draws and plays three more cards, stopping at the first bust |

A card taken by a Sword, Hook or Map is played in the usual way, so its own
effect also applies.

## Using the library

The game reads and writes through plain callables, so you can drive it
without a terminal:

```python
import random
from deadmansdraw.game import Game

lines = []

def read():
    # Pick the first card when asked, otherwise stop drawing.
    return "1" if lines[-1].startswith("\tWhich card") else "n"

game = Game(read=read, write=lines.append, rng=random.Random(1))
game.start()
print("".join(lines))
```

The modules are:

- `deadmansdraw.cards`: the `Suit` enum, the `Card` base class with
  `describe`, `play` and `will_add_to_bank`, the suit classes (`Chest`, `Key`,
  `Sword`, `Hook`, `Oracle`, `Map`, `Mermaid`, `Kraken`), and
  `top_cards_by_suit`.
- `deadmansdraw.deck`: `Deck`, with `shuffle`, `draw` and `peek`. `draw` and
  `peek` return `None` when the deck is empty.
- `deadmansdraw.piles`: `Bank` (with `score` and `render`), `PlayArea` and
  `Discard`.
- `deadmansdraw.player`: `Player`, which plays, banks and discards cards and
  checks for a bust with `is_bust`, and `random_name`.
- `deadmansdraw.game`: `Game`, the turn loop.
- `deadmansdraw.cli`: `main`, the `deadmansdraw` command.

## What it does not do

- The `Suit` enum lists a `CANNON` suit, but there is no Cannon card, and the
  deck holds none.
- No winner is declared at the end. Each player's bank score is shown at the
  start of their turn, and the game stops after the last turn without a final
  tally.
from deadmansdraw.cards import Chest, Key, Mermaid
from deadmansdraw.piles import Bank, Discard, PlayArea


def test_empty_bank_renders_zero_score():
    bank = Bank()
    assert bank.score() == 0
    assert bank.render() == "|Score: 0\n"


def test_bank_score_is_sum_of_values():
    cards = [Key(3), Mermaid(9), Chest(2)]
    bank = Bank(cards=list(cards))
    assert bank.score() == sum(card.value for card in cards)


def test_bank_render_lists_cards_then_score():
    bank = Bank(cards=[Key(3), Mermaid(9)])
    lines = bank.render().split("\n")
    assert lines[0] == "\tKey(3)"
    assert lines[1] == "\tMermaid(9)"
    assert lines[2] == f"|Score: {bank.score()}"
    assert lines[3] == ""


def test_play_area_keeps_order():
    area = PlayArea()
    first, second = Key(4), Chest(5)
    area.play(first)
    area.play(second)
    assert area.cards == [first, second]
    assert len(area) == 2


def test_play_area_render():
    area = PlayArea()
    assert area.render() == "\n"
    area.play(Key(4))
    assert area.render() == "\tKey(4)\n\n"


def test_discard_add_puts_card_on_top():
    discard = Discard()
    bottom, top = Key(2), Mermaid(6)
    discard.add(bottom)
    discard.add(top)
    assert discard.cards[-1] is top
    assert len(discard) == 2


def test_piles_do_not_share_lists():
    one, two = Bank(), Bank()
    one.cards.append(Key(2))
    assert two.cards == []
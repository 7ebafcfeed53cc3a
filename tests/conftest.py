import pytest

from sequence.board import Player
from sequence.board_layout import BOARD_LAYOUT, card_positions
from sequence.cards import make_card, parse_card_code
from sequence.config import GameConfig
from sequence.engine import initialize_game


def give_card(state, player, code, deck_index=0):
    """Move the physical card ``code`` into ``player``'s hand, swapping out hand[0]."""
    card = make_card(code, deck_index)
    hand = state.hand_of(player)
    if any(c.id == card.id for c in hand):
        return next(c for c in hand if c.id == card.id)
    for pile in (state.deck, state.hand_of(player.opponent), state.discard_pile):
        for i, c in enumerate(pile):
            if c.id == card.id:
                pile[i] = hand[0]
                hand[0] = card
                return card
    raise AssertionError(f"{card.id} not found anywhere")


def position_of(code):
    return card_positions(BOARD_LAYOUT)[parse_card_code(code)][0]


@pytest.fixture
def game():
    return initialize_game(GameConfig(seed=1234))


@pytest.fixture
def give():
    return give_card


@pytest.fixture
def place_chips():
    def _place(state, player, cells):
        for r, c in cells:
            state.board[r][c].chip = Player(player)
        return state
    return _place

"""Tests for Hand evaluation."""

from hypothesis import given, strategies as st

from core.cards import Card, Rank, Suit
from core.hand import Hand, Winner, compare_hands

cards = st.builds(Card, st.sampled_from(list(Rank)), st.sampled_from(list(Suit)))


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.value == 0
        assert not empty_hand.is_soft
        assert not empty_hand.is_blackjack
        assert not empty_hand.is_busted

    def test_add_card(self, empty_hand):
        """Test adding cards to hand."""
        empty_hand.add_card(Card(Rank.TEN, Suit.SPADES))
        assert len(empty_hand) == 1
        assert empty_hand.value == 10

    def test_total_matches_value(self, hard_16_hand):
        """Test total() and value agree."""
        assert hard_16_hand.total() == hard_16_hand.value == 16

    def test_hard_hand_value(self, hard_16_hand):
        """Test hard hand value calculation."""
        assert hard_16_hand.value == 16
        assert not hard_16_hand.is_soft

    def test_soft_hand_value(self, soft_17_hand):
        """Test soft hand value calculation."""
        assert soft_17_hand.value == 17
        assert soft_17_hand.is_soft

    def test_blackjack(self, blackjack_hand):
        """Test ace and king make 21."""
        assert blackjack_hand.value == 21
        assert blackjack_hand.is_blackjack
        assert blackjack_hand.is_soft

    def test_ace_ace_nine(self, hand_of):
        """Test one of two aces softens: 11 + 11 + 9 = 31 becomes 21."""
        assert hand_of("AS", "AH", "9C").value == 21

    def test_six_aces(self, hand_of):
        """Test six aces soften five times: 66 becomes 16."""
        hand = hand_of("AS", "AH", "AC", "AD", "AS", "AH")
        assert hand.value == 16

    def test_two_aces(self, hand_of):
        """Test a pair of aces counts 12."""
        assert hand_of("AS", "AH").value == 12

    def test_not_blackjack_three_cards(self, hand_of):
        """Test that 21 with 3+ cards is not a natural."""
        hand = hand_of("7S", "7H", "7C")
        assert hand.value == 21
        assert not hand.is_blackjack

    def test_bust(self, bust_hand):
        """Test bust detection."""
        assert bust_hand.is_busted
        assert bust_hand.value == 26

    def test_bust_after_all_aces_softened(self, hand_of):
        """Test a hand still busts once no ace is left to soften."""
        hand = hand_of("AS", "KH", "QC", "5D")
        assert hand.value == 26
        assert hand.is_busted

    def test_soft_to_hard_transition(self, empty_hand):
        """Test ace switching from 11 to 1."""
        empty_hand.add_card(Card(Rank.ACE, Suit.SPADES))
        assert empty_hand.value == 11
        assert empty_hand.is_soft

        empty_hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
        assert empty_hand.value == 16
        assert empty_hand.is_soft

        empty_hand.add_card(Card(Rank.EIGHT, Suit.CLUBS))
        # Ace now counts as 1
        assert empty_hand.value == 14
        assert not empty_hand.is_soft

    def test_clear_hand(self, blackjack_hand):
        """Test clearing a hand."""
        assert len(blackjack_hand) == 2
        blackjack_hand.clear()
        assert len(blackjack_hand) == 0
        assert blackjack_hand.value == 0

    def test_hand_str(self, hand_of):
        """Test string representation."""
        assert str(hand_of("10S", "6H")) == "10♠ 6♥ (16)"
        assert str(hand_of("AS", "6H")) == "A♠ 6♥ (soft 17)"
        assert str(hand_of("AS", "KH")) == "A♠ K♥ (BLACKJACK)"
        assert str(hand_of("10S", "6H", "KC")) == "10♠ 6♥ K♣ (BUST)"

    @given(st.lists(cards, max_size=12), st.randoms(use_true_random=False))
    def test_total_is_order_independent(self, hand_cards, random):
        """Test any ordering of the same cards gives the same total."""
        forward = Hand(cards=list(hand_cards))
        shuffled_cards = list(hand_cards)
        random.shuffle(shuffled_cards)
        backward = Hand()
        for card in shuffled_cards:
            backward.add_card(card)

        assert forward.value == backward.value

    @given(st.lists(cards, min_size=1, max_size=12))
    def test_total_bounds(self, hand_cards):
        """Test the total never exceeds 21 while an ace could still soften."""
        hand = Hand(cards=list(hand_cards))
        hard_total = sum(1 if c.is_ace else c.value for c in hand_cards)
        assert hard_total <= hand.value
        if hand.value > 21:
            assert hand.value == hard_total


class TestCompareHands:
    """Tests for deciding a round on totals."""

    def test_player_wins_higher_value(self, hand_of):
        """Test player wins with higher value."""
        assert compare_hands(hand_of("10S", "9H"), hand_of("10C", "7D")) == Winner.PLAYER

    def test_dealer_wins_higher_value(self, hand_of):
        """Test dealer wins with higher value."""
        assert compare_hands(hand_of("10S", "7H"), hand_of("10C", "9D")) == Winner.DEALER

    def test_push(self, hand_of):
        """Test equal totals are a push."""
        assert compare_hands(hand_of("10S", "KH"), hand_of("QC", "JD")) == Winner.PUSH

    def test_winner_str(self):
        """Test winner display names."""
        assert str(Winner.PLAYER) == "Player"
        assert str(Winner.PUSH) == "Push"

"""Tests for the hand edit session."""

import pytest
from pokerlog.action import Action, ActionType
from pokerlog.editor import HandEditor
from pokerlog.hand import Hand
from pokerlog.player import Player
from pokerlog.session import Session
from pokerlog.street import StreetName

NAMES = ["Alice", "Bob", "Carol", "Dave", "Eve", "Hero"]


def _session(names: list[str] = NAMES, **kwargs) -> Session:
    kwargs.setdefault("blind_level", "1/2")
    kwargs.setdefault("points_per_hundred_bb", 1000)
    players = [Player(name=name, seat_number=i) for i, name in enumerate(names)]
    return Session(players=players, **kwargs)


class TestGeometry:
    def test_named_seats(self):
        editor = HandEditor(session=_session(), button_seat_index=0)
        assert editor.seat_count == 6
        assert editor.positions == ["BTN", "SB", "BB", "UTG", "HJ", "CO"]
        assert editor.seat_labels == NAMES

    def test_acting_orders(self):
        editor = HandEditor(session=_session(), button_seat_index=0)
        assert editor.preflop_order == ["Dave", "Eve", "Hero", "Alice", "Bob", "Carol"]
        assert editor.postflop_order == ["Bob", "Carol", "Dave", "Eve", "Hero", "Alice"]
        assert editor.order_for(StreetName.RIVER) == editor.postflop_order

    def test_unnamed_table_uses_positions(self):
        editor = HandEditor(session=Session(), button_seat_index=0)
        assert editor.seat_count == 9
        assert editor.seat_labels == editor.positions
        assert editor.preflop_order[0] == "UTG"

    def test_default_seat_count_from_config(self, default_config):
        default_config.table.default_seat_count = 6
        editor = HandEditor(session=Session(), button_seat_index=3)
        assert editor.positions == ["UTG", "HJ", "CO", "BTN", "SB", "BB"]

    def test_hero_position(self):
        editor = HandEditor(session=_session(), button_seat_index=0)
        assert editor.hero_position() == "CO"
        assert editor.hero_position("Bob") == "SB"
        assert editor.hero_position("Nobody") == "BTN"

    def test_single_player_uses_default_seats(self):
        editor = HandEditor(session=_session(["Solo"]), button_seat_index=0)
        assert editor.seat_count == 9
        assert not editor.is_named
        assert editor.seat_labels == editor.positions

    def test_too_few_seats(self):
        hand = Hand(seat_count=1)
        with pytest.raises(ValueError):
            HandEditor(session=_session(), hand=hand)


class TestRecording:
    def test_skipped_seats_fold(self):
        editor = HandEditor(session=_session(), button_seat_index=0)
        preflop = editor.add_action(StreetName.PREFLOP, "Hero", ActionType.RAISE, 30)
        assert preflop.actions == [
            Action("Dave", ActionType.FOLD),
            Action("Eve", ActionType.FOLD),
            Action("Hero", ActionType.RAISE, 30),
        ]

    def test_call_amount_ignored_and_resolved(self):
        editor = HandEditor(session=_session(), button_seat_index=0)
        editor.add_action(StreetName.PREFLOP, "Dave", ActionType.RAISE, 30)
        preflop = editor.add_action(StreetName.PREFLOP, "Eve", ActionType.CALL, 999)
        assert preflop.actions[-1] == Action("Eve", ActionType.CALL, 30)

    def test_active_players_exclude_folded(self):
        editor = HandEditor(session=_session(), button_seat_index=0)
        editor.add_action(StreetName.PREFLOP, "Hero", ActionType.RAISE, 30)
        editor.add_action(StreetName.PREFLOP, "Carol", ActionType.CALL)
        assert editor.active_players(StreetName.PREFLOP) == ["Hero", "Carol"]
        assert editor.active_players(StreetName.FLOP) == ["Carol", "Hero"]

    def test_folded_seats_never_auto_fold_again(self):
        editor = HandEditor(session=_session(), button_seat_index=0)
        editor.add_action(StreetName.PREFLOP, "Hero", ActionType.RAISE, 30)
        editor.add_action(StreetName.PREFLOP, "Carol", ActionType.CALL)
        flop = editor.add_action(StreetName.FLOP, "Hero", ActionType.BET, 40)
        # Only Carol is still in ahead of Hero
        assert flop.actions == [
            Action("Carol", ActionType.FOLD),
            Action("Hero", ActionType.BET, 40),
        ]


class TestSave:
    def _record(self) -> HandEditor:
        editor = HandEditor(session=_session(), button_seat_index=0, hole_cards="AhKh")
        editor.add_action(StreetName.PREFLOP, "Hero", ActionType.RAISE, 30)
        editor.add_action(StreetName.PREFLOP, "Carol", ActionType.CALL)
        editor.add_action(StreetName.FLOP, "Carol", ActionType.CHECK)
        editor.add_action(StreetName.FLOP, "Hero", ActionType.BET, 40)
        editor.add_action(StreetName.FLOP, "Carol", ActionType.CALL)
        return editor

    def test_blinds_folds_and_pot(self):
        hand = self._record().save()
        preflop = hand.street(StreetName.PREFLOP)

        assert preflop.actions[:2] == [
            Action("Bob", ActionType.SMALL_BLIND, 5),
            Action("Carol", ActionType.BIG_BLIND, 10),
        ]
        # Bob posted the small blind, then was skipped by Carol's call
        assert Action("Bob", ActionType.FOLD) in preflop.actions
        assert hand.computed_pot == 65 + 80
        assert hand.pot_size == hand.computed_pot
        assert hand.pot_in_bb(1000) == 14.5

    def test_geometry_snapshot(self):
        session = _session()
        hand = HandEditor(session=session, button_seat_index=7).save()
        assert hand.seat_count == 6
        assert hand.button_seat_index == 1
        assert [p.name for p in hand.players] == NAMES
        assert hand.position == "HJ"

        # Later roster changes don't touch the saved hand
        session.players.append(Player(name="Late", seat_number=6))
        assert len(hand.players) == 6
        assert hand.positions == ["CO", "BTN", "SB", "BB", "UTG", "HJ"]

    def test_save_twice_is_stable(self):
        editor = self._record()
        first = editor.save()
        second = editor.save()
        assert first.streets == second.streets

    def test_empty_hand_gets_blinds_and_folds(self):
        hand = HandEditor(session=_session(), button_seat_index=0).save()
        preflop = hand.street(StreetName.PREFLOP)
        assert [a.type for a in preflop.actions[:2]] == [
            ActionType.SMALL_BLIND,
            ActionType.BIG_BLIND,
        ]
        assert {a.actor for a in preflop.actions[2:]} == {"Alice", "Dave", "Eve", "Hero"}
        assert hand.computed_pot == 15

    def test_no_blind_level_leaves_empty_hand_alone(self):
        hand = HandEditor(session=_session(blind_level=""), button_seat_index=0).save()
        assert all(not s.actions for s in hand.streets)
        assert hand.computed_pot == 0

    @pytest.mark.parametrize("level", ["-1/2", "0/2", "1/nan"])
    def test_invalid_blind_level_skips_blinds(self, level):
        editor = HandEditor(session=_session(blind_level=level), button_seat_index=0)
        editor.add_action(StreetName.PREFLOP, "Dave", ActionType.RAISE, 30)
        hand = editor.save()
        preflop = hand.street(StreetName.PREFLOP)
        assert not any(a.type.is_blind for a in preflop.actions)
        assert hand.computed_pot == 30

    def test_unnamed_table(self):
        editor = HandEditor(session=_session([]), button_seat_index=0)
        editor.add_action(StreetName.PREFLOP, "UTG", ActionType.RAISE, 25)
        editor.add_action(StreetName.PREFLOP, "BTN", ActionType.CALL)
        hand = editor.save()
        preflop = hand.street(StreetName.PREFLOP)

        assert preflop.actions[0] == Action("SB", ActionType.SMALL_BLIND, 5)
        assert preflop.actions[1] == Action("BB", ActionType.BIG_BLIND, 10)
        assert hand.computed_pot == 65
        assert hand.players == []

    def test_edit_existing_hand(self):
        hand = self._record().save()
        editor = HandEditor(session=_session(), hand=hand)
        assert editor.button_seat_index == 0
        editor.add_action(StreetName.TURN, "Carol", ActionType.CHECK)
        editor.add_action(StreetName.TURN, "Hero", ActionType.CHECK)
        edited = editor.save()

        assert edited.computed_pot == hand.computed_pot
        assert len(edited.street(StreetName.TURN).actions) == 2
        assert hand.street(StreetName.TURN).actions == []

    def test_existing_hand_keeps_its_seat_count(self):
        hand = HandEditor(session=_session(), button_seat_index=2).save()
        editor = HandEditor(session=_session(NAMES + ["Late"]), hand=hand)
        assert editor.seat_count == 6
        assert editor.seat_labels == NAMES


class TestSession:
    def test_named_players_sorted_and_trimmed(self):
        session = Session(
            players=[
                Player(name=" Bob ", seat_number=1),
                Player(name="", seat_number=2),
                Player(name="Ann", seat_number=0),
            ]
        )
        assert session.named_players == ["Ann", "Bob"]
        assert session.seat_count == 2

    def test_profit(self):
        session = _session(points_per_hundred_bb=1000)
        session.end(buy_in=1000, cash_out=1750)
        assert not session.is_active
        assert session.profit == 750
        assert session.profit_in_bb == 75

    def test_profit_without_scale(self):
        session = _session(points_per_hundred_bb=0, buy_in=100, cash_out=50)
        assert session.profit == -50
        assert session.profit_in_bb == 0

    def test_big_blind(self):
        assert _session(blind_level="2/5").big_blind == 5
        assert _session(blind_level="five").big_blind == 0

    def test_from_config(self, default_config):
        default_config.session.blind_level = "1/3"
        default_config.session.points_per_hundred_bb = 300.0
        session = Session.from_config(name="Home game")
        assert session.blind_level == "1/3"
        assert session.points_per_hundred_bb == 300.0
        assert Session.from_config(blind_level="5/10").blind_level == "5/10"


def test_saved_hand_survives_serialization():
    hand = TestSave()._record().save()
    assert Hand.from_dict(hand.to_dict()).computed_pot == hand.computed_pot

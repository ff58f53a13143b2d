"""Tests for chkd.spec.fsm module."""

import logging

import pytest

from chkd.spec.errors import InvalidTransition
from chkd.spec.fsm import STATES, TRANSITIONS, ItemFSM, next_status


class TestTable:
    """Transition table shape."""

    def test_states_cover_item_statuses(self):
        """States should match the item statuses."""
        assert set(STATES) == {"open", "in-progress", "done", "skipped", "blocked"}

    def test_every_transition_uses_known_states(self):
        """Every transition should use known states."""
        for t in TRANSITIONS:
            assert t["source"] in STATES
            assert t["dest"] in STATES


class TestItemFSM:
    """Allowed and refused transitions."""

    @pytest.mark.parametrize("status,trigger,expected", [
        ("open", "start", "in-progress"),
        ("open", "complete", "done"),
        ("in-progress", "complete", "done"),
        ("done", "reopen", "open"),
        ("open", "skip", "skipped"),
        ("in-progress", "skip", "skipped"),
        ("skipped", "unskip", "open"),
        ("open", "block", "blocked"),
        ("in-progress", "block", "blocked"),
        ("blocked", "unblock", "open"),
    ])
    def test_allowed(self, status, trigger, expected):
        """Allowed triggers should reach the expected status."""
        assert ItemFSM("x", status).fire(trigger) == expected

    @pytest.mark.parametrize("status,trigger", [
        ("done", "complete"),
        ("in-progress", "start"),
        ("done", "start"),
        ("open", "reopen"),
        ("skipped", "skip"),
        ("blocked", "block"),
        ("open", "unskip"),
        ("open", "unblock"),
        ("blocked", "complete"),
        ("skipped", "start"),
    ])
    def test_refused(self, status, trigger):
        """Refused triggers should raise and leave the state alone."""
        fsm = ItemFSM("x", status)
        with pytest.raises(InvalidTransition):
            fsm.fire(trigger)
        assert fsm.state == status

    def test_refusal_carries_context(self):
        """A refusal should carry the item id, status and action."""
        with pytest.raises(InvalidTransition) as exc:
            ItemFSM("be-be-1-auth", "done").fire("complete")
        err = exc.value
        assert err.item_id == "be-be-1-auth"
        assert err.from_status == "done"
        assert err.action == "complete"
        assert "chkd untick" in str(err)

    def test_refusal_without_specific_hint_uses_default(self):
        """A refusal without a specific hint should point at chkd status."""
        with pytest.raises(InvalidTransition) as exc:
            ItemFSM("x", "blocked").fire("complete")
        assert "chkd status" in str(exc.value)

    def test_unknown_trigger(self):
        """Unknown trigger should raise ValueError."""
        with pytest.raises(ValueError):
            ItemFSM("x", "open").fire("explode")

    def test_unknown_status(self):
        """Unknown starting status should be refused."""
        with pytest.raises(InvalidTransition):
            ItemFSM("x", "weird")

    def test_can(self):
        """can() should report whether a trigger is allowed."""
        fsm = ItemFSM("x", "open")
        assert fsm.can("start")
        assert not fsm.can("reopen")

    def test_no_auto_transitions(self):
        """No to_<state> shortcuts should exist."""
        fsm = ItemFSM("x", "open")
        assert not hasattr(fsm, "to_done")

    def test_state_change_logged(self, caplog):
        """State changes should be logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="chkd.spec.fsm"):
            ItemFSM("x", "open").fire("start")
        assert "open -> in-progress" in caplog.text


class TestNextStatus:
    """Functional wrapper."""

    def test_sequence(self):
        """next_status should chain transitions."""
        status = next_status("x", "open", "start")
        status = next_status("x", status, "complete")
        assert status == "done"

    def test_repeat_start_refused(self):
        """Starting an in-progress item should be refused."""
        with pytest.raises(InvalidTransition):
            next_status("x", "in-progress", "start")

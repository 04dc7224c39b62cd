from pumpkinpower.core.rule_engine import (
    PowerChange,
    RuleAction,
    RuleState,
    clamp_power,
    decide,
    on_power_change,
    on_remove,
)

PUMPKIN = 86
JACK = 91
LOC = "Location{world=world,x=1.0,y=64.0,z=2.0}"


def test_power_on_lights_pumpkin():
    state = RuleState()
    change = on_power_change(state, PUMPKIN, LOC, 7)
    assert change.new_form == JACK
    assert change.log_line == f"Pumpkin powered, changing to Jack o' Lantern at {LOC}"
    assert state.changed == {LOC}


def test_power_on_twice_is_idempotent():
    state = RuleState()
    on_power_change(state, PUMPKIN, LOC, 15)
    # host still reports the old form on a re-entrant notification
    second = on_power_change(state, PUMPKIN, LOC, 15)
    assert second == PowerChange()
    assert state.changed == {LOC}

    third = on_power_change(state, JACK, LOC, 15)
    assert third == PowerChange()
    assert state.changed == {LOC}


def test_power_on_then_off_restores_pumpkin():
    state = RuleState()
    lit = on_power_change(state, PUMPKIN, LOC, 1)
    off = on_power_change(state, lit.new_form, LOC, 0)
    assert off.new_form == PUMPKIN
    assert off.log_line == f"Jack o' Lantern unpowered, reverting to Pumpkin at {LOC}"
    assert len(state.changed) == 0


def test_untracked_jack_o_lantern_is_left_alone():
    state = RuleState()
    assert on_power_change(state, JACK, LOC, 0) == PowerChange()
    assert on_power_change(state, JACK, LOC, 9) == PowerChange()
    assert state.changed == set()


def test_unpowered_pumpkin_still_tracked_is_dropped():
    state = RuleState(changed={LOC})
    change = on_power_change(state, PUMPKIN, LOC, 0)
    assert change.new_form == PUMPKIN
    assert state.changed == set()


def test_unpowered_untracked_pumpkin_is_noop():
    state = RuleState()
    assert decide(state, PUMPKIN, LOC, 0) is RuleAction.NONE


def test_unknown_block_form_is_ignored():
    state = RuleState(changed={LOC})
    assert on_power_change(state, 1, LOC, 15) == PowerChange()
    assert on_power_change(state, 1, LOC, 0) == PowerChange()
    assert state.changed == {LOC}


def test_notifications_disabled_suppresses_log_line():
    state = RuleState(notifications_enabled=False)
    change = on_power_change(state, PUMPKIN, LOC, 3)
    assert change.new_form == JACK
    assert change.log_line is None


def test_custom_form_ids():
    state = RuleState(unaltered_id=1, altered_id=2)
    assert on_power_change(state, 1, LOC, 4).new_form == 2
    assert on_power_change(state, PUMPKIN, LOC, 4) == PowerChange()


def test_out_of_range_power_is_clamped():
    assert clamp_power(-3) == 0
    assert clamp_power(40) == 15
    state = RuleState()
    assert decide(state, PUMPKIN, LOC, -1) is RuleAction.NONE


def test_remove_logs_tracked_block_without_untracking_it():
    state = RuleState(changed={LOC})
    assert on_remove(state, LOC) == f"Block at {LOC} is being broken (previously changed)."
    assert state.changed == {LOC}


def test_remove_untracked_or_silenced_returns_none():
    assert on_remove(RuleState(), LOC) is None
    assert on_remove(RuleState(changed={LOC}, notifications_enabled=False), LOC) is None

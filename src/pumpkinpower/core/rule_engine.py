"""Power-driven pumpkin <-> jack o' lantern rule.

Both handlers are pure with respect to the host: they take the observed
block form and power level, mutate only the ``RuleState`` they are given and
return what the caller should apply to the world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from collections.abc import MutableSet

MIN_POWER = 0
MAX_POWER = 15


class BlockForm(Enum):
    UNALTERED = auto()
    ALTERED = auto()


class RuleAction(Enum):
    NONE = auto()
    LIGHT = auto()
    REVERT = auto()


# (form, powered, tracked) -> action. Missing keys are no-ops.
_TRANSITIONS = {
    (BlockForm.UNALTERED, True, False): RuleAction.LIGHT,
    (BlockForm.UNALTERED, False, True): RuleAction.REVERT,
    (BlockForm.ALTERED, False, True): RuleAction.REVERT,
}


@dataclass
class RuleState:
    """Everything the rule reads or mutates, built once at startup."""

    changed: MutableSet[str] = field(default_factory=set)
    notifications_enabled: bool = True
    unaltered_id: int = 86
    altered_id: int = 91

    def form_of(self, type_id: int) -> BlockForm | None:
        if type_id == self.unaltered_id:
            return BlockForm.UNALTERED
        if type_id == self.altered_id:
            return BlockForm.ALTERED
        return None


@dataclass(frozen=True)
class PowerChange:
    """Outcome of a power notification.

    ``new_form`` is the block type id to write back, or None to leave the
    block alone.
    """

    new_form: int | None = None
    log_line: str | None = None


def clamp_power(power_level: int) -> int:
    return max(MIN_POWER, min(MAX_POWER, power_level))


def decide(state: RuleState, block_form: int, location: str, power_level: int) -> RuleAction:
    form = state.form_of(block_form)
    if form is None:
        return RuleAction.NONE
    powered = clamp_power(power_level) > 0
    return _TRANSITIONS.get((form, powered, location in state.changed), RuleAction.NONE)


def on_power_change(state: RuleState, block_form: int, location: str, power_level: int) -> PowerChange:
    action = decide(state, block_form, location, power_level)

    if action is RuleAction.LIGHT:
        state.changed.add(location)
        line = f"Pumpkin powered, changing to Jack o' Lantern at {location}"
        return PowerChange(state.altered_id, line if state.notifications_enabled else None)

    if action is RuleAction.REVERT:
        state.changed.discard(location)
        line = f"Jack o' Lantern unpowered, reverting to Pumpkin at {location}"
        return PowerChange(state.unaltered_id, line if state.notifications_enabled else None)

    return PowerChange()


def on_remove(state: RuleState, location: str) -> str | None:
    """Report the break of a tracked block.

    The location stays in ``state.changed``; a destroyed jack o' lantern
    leaves a stale entry behind.
    """
    if state.notifications_enabled and location in state.changed:
        return f"Block at {location} is being broken (previously changed)."
    return None

# frictionlab/core/types.py
"""
Parameter and State Types
=========================

Plain immutable records threaded through the resolvers:

- ModelType        : which of the three setups is simulated.
- SimulationParams : physical parameters, fixed for one run.
- ForceRecord      : the eight force scalars from the last step (for
                     force diagrams only; never read back by a resolver).
- Status           : friction regime label of the current state.
- SimulationState  : one complete kinematic snapshot.

Every field of SimulationParams exists for every model; a resolver only
reads the fields its own model uses.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field, replace
from enum import Enum
from typing import Dict, Any

from frictionlab.core.constants import G_DEFAULT


# ============================================================
# Enums
# ============================================================

class ModelType(str, Enum):
    SINGLE = "single"
    BELT = "belt"
    PLANK = "plank"

    @classmethod
    def parse(cls, value) -> "ModelType":
        """Accept a ModelType or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown model {value!r}; expected one of: {valid}.") from None


class Status(str, Enum):
    READY = "ready"
    # single incline
    STATIC = "static"
    KINETIC = "kinetic"
    BREAKING_STATIC = "breaking static friction"
    # belt
    CO_VELOCITY = "co-velocity"
    # belt + plank
    RELATIVE_SLIDING = "relative sliding"
    # plank
    MOVING_TOGETHER = "moving together"
    AT_REST = "at rest"
    SLIP_ONSET = "static friction breaking"
    DETACHED = "detached"

    @property
    def terminal(self) -> bool:
        return self is Status.DETACHED


# ============================================================
# Parameters
# ============================================================

@dataclass(frozen=True)
class SimulationParams:
    """
    Physical parameters of one run.

    Environment
        g         : gravitational acceleration [m/s^2]
        theta     : incline angle [deg] (single, belt)

    Slider / block
        mass      : block mass [kg]
        v0        : initial block velocity [m/s]
        x0        : initial block position [m]
        mu        : block-surface (or block-belt) friction coefficient
        F_mag     : external force magnitude [N] (single)
        F_angle   : external force angle relative to the surface [deg] (single)

    Belt
        v_belt    : belt speed [m/s]
        belt_length : belt length [m]; only used to report the belt end

    Plank
        M_plank   : plank mass [kg]
        L_plank   : plank length [m]
        mu_block  : block-plank friction coefficient
        mu_ground : plank-ground friction coefficient
        v0_plank  : initial plank velocity [m/s]
        F_block   : constant force on the block [N]
        F_plank   : constant force on the plank [N]
    """
    g: float = G_DEFAULT
    theta: float = 0.0

    mass: float = 0.0
    v0: float = 0.0
    x0: float = 0.0
    mu: float = 0.0
    F_mag: float = 0.0
    F_angle: float = 0.0

    v_belt: float = 0.0
    belt_length: float = 0.0

    M_plank: float = 0.0
    L_plank: float = 0.0
    mu_block: float = 0.0
    mu_ground: float = 0.0
    v0_plank: float = 0.0
    F_block: float = 0.0
    F_plank: float = 0.0

    def with_updates(self, **changes: float) -> "SimulationParams":
        """Copy with some fields changed (callers must reset the state)."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


# ============================================================
# State
# ============================================================

@dataclass(frozen=True)
class ForceRecord:
    """
    Signed force scalars [N] from the last step.

    friction1 : friction on the block (from surface, belt or plank)
    friction2 : ground friction on the plank
    normal1   : normal force on the block
    normal2   : normal force on the plank from the ground
    gravity1  : block weight
    gravity2  : plank weight
    external1 : applied force on the block
    external2 : applied force on the plank
    """
    friction1: float = 0.0
    friction2: float = 0.0
    normal1: float = 0.0
    normal2: float = 0.0
    gravity1: float = 0.0
    gravity2: float = 0.0
    external1: float = 0.0
    external2: float = 0.0


@dataclass(frozen=True)
class SimulationState:
    """
    Complete snapshot after a step.

    Body 1 is the slider/block, body 2 the plank (zeros outside the
    plank model). s1/s2 are cumulative path lengths, never decreasing.
    """
    t: float = 0.0

    x1: float = 0.0
    v1: float = 0.0
    a1: float = 0.0
    s1: float = 0.0

    x2: float = 0.0
    v2: float = 0.0
    a2: float = 0.0
    s2: float = 0.0

    forces: ForceRecord = field(default_factory=ForceRecord)
    status: Status = Status.READY

    @property
    def is_terminal(self) -> bool:
        return Status(self.status).terminal

    def to_dict(self) -> Dict[str, Any]:
        """Flat JSON-serializable snapshot (forces inlined)."""
        out: Dict[str, Any] = {
            "t": self.t,
            "x1": self.x1,
            "v1": self.v1,
            "a1": self.a1,
            "s1": self.s1,
            "x2": self.x2,
            "v2": self.v2,
            "a2": self.a2,
            "s2": self.s2,
        }
        out.update(asdict(self.forces))
        out["status"] = Status(self.status).value
        return out


__all__ = [
    "ModelType",
    "Status",
    "SimulationParams",
    "ForceRecord",
    "SimulationState",
]

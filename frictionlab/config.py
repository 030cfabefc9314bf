# frictionlab/config.py
"""
Run configuration: validation + JSON loading.

Policy:
- Parameters are validated here, before they reach a resolver. The
  resolvers assume positive masses and never check.
- Only the fields a model actually uses are validated.
- A JSON file only needs the keys it changes; the rest come from the
  model's preset.

JSON layout:

    {
      "model": "plank",
      "params": {"mass": 1.0, "M_plank": 2.0, ...},
      "run": {"t_max_s": 5.0, "dt_s": 0.016}
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from frictionlab.core.constants import DT
from frictionlab.core.presets import default_params
from frictionlab.core.types import ModelType, SimulationParams

logger = logging.getLogger(__name__)

PARAM_FIELDS = tuple(f.name for f in fields(SimulationParams))

DEFAULT_T_MAX_S = 10.0


# ============================================================
# Run config
# ============================================================

@dataclass
class RunConfig:
    """
    Batch run configuration.

    model   : ModelType
    params  : SimulationParams
    t_max_s : simulated duration [s] (a detached run stops earlier)
    dt_s    : fixed step [s]
    """
    model: ModelType
    params: SimulationParams
    t_max_s: float = DEFAULT_T_MAX_S
    dt_s: float = DT

    def __post_init__(self):
        self.model = ModelType.parse(self.model)
        if self.t_max_s <= 0.0:
            raise ValueError("t_max_s must be positive.")
        if self.dt_s <= 0.0:
            raise ValueError("dt_s must be positive.")


# ============================================================
# Validation
# ============================================================

def _require_positive(params: SimulationParams, name: str) -> None:
    v = getattr(params, name)
    if not v > 0.0:
        raise ValueError(f"Parameter {name} must be positive (got {v!r}).")


def _require_non_negative(params: SimulationParams, name: str) -> None:
    v = getattr(params, name)
    if not v >= 0.0:
        raise ValueError(f"Parameter {name} must be non-negative (got {v!r}).")


def validate_params(model, params: SimulationParams) -> None:
    """Raise ValueError for values the model's resolver cannot handle."""
    model = ModelType.parse(model)

    _require_positive(params, "g")
    _require_positive(params, "mass")

    if model is ModelType.PLANK:
        _require_positive(params, "M_plank")
        _require_positive(params, "L_plank")
        _require_non_negative(params, "mu_block")
        _require_non_negative(params, "mu_ground")
    else:
        _require_non_negative(params, "mu")


# ============================================================
# Loading
# ============================================================

def _require_path(cfg: Mapping[str, Any], keys: list) -> Any:
    cur: Any = cfg
    prefix: list = []
    for k in keys:
        prefix.append(k)
        if not isinstance(cur, Mapping) or k not in cur:
            raise KeyError(f'Missing required config key: {".".join(prefix)}')
        cur = cur[k]
    return cur


def _as_float(value: Any, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Config key {key} must be a number.")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Config key {key} must be a float-like value.") from e


def params_from_dict(model, data: Optional[Mapping[str, Any]] = None) -> SimulationParams:
    """Model preset with the entries of `data` applied on top."""
    base = default_params(model)
    if not data:
        return base

    updates: Dict[str, float] = {}
    for key, value in data.items():
        if key not in PARAM_FIELDS:
            logger.warning("Ignoring unknown parameter %r.", key)
            continue
        updates[key] = _as_float(value, f"params.{key}")
    return base.with_updates(**updates)


def run_config_from_dict(cfg: Mapping[str, Any]) -> RunConfig:
    model = ModelType.parse(_require_path(cfg, ["model"]))

    raw_params = cfg.get("params", {})
    if not isinstance(raw_params, Mapping):
        raise ValueError("Config key params must be an object.")
    params = params_from_dict(model, raw_params)
    validate_params(model, params)

    run = cfg.get("run", {})
    if not isinstance(run, Mapping):
        raise ValueError("Config key run must be an object.")
    t_max = _as_float(run.get("t_max_s", DEFAULT_T_MAX_S), "run.t_max_s")
    dt = _as_float(run.get("dt_s", DT), "run.dt_s")

    return RunConfig(model=model, params=params, t_max_s=t_max, dt_s=dt)


def load_run_config(path: Path) -> RunConfig:
    cfg = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(cfg, Mapping):
        raise ValueError(f"{path}: top-level JSON value must be an object.")
    return run_config_from_dict(cfg)


__all__ = [
    "PARAM_FIELDS",
    "DEFAULT_T_MAX_S",
    "RunConfig",
    "validate_params",
    "params_from_dict",
    "run_config_from_dict",
    "load_run_config",
]

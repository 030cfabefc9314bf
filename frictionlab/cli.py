# frictionlab/cli.py
"""
FrictionLab command line
========================

    frictionlab run --model plank --set F_plank=10 --t-max 3 --csv out.csv
    frictionlab run --config runs/belt.json --json
    frictionlab critical --set mass=1 --set M_plank=2

`run` simulates one configuration and prints a summary plus the status
events. `critical` prints the block/plank critical forces.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from frictionlab.config import (
    DEFAULT_T_MAX_S,
    RunConfig,
    load_run_config,
    params_from_dict,
    validate_params,
)
from frictionlab.core.constants import DT
from frictionlab.core.types import ModelType
from frictionlab.env import log_level
from frictionlab.mechanics import analyze_critical_force
from frictionlab.runner.batch import run_simulation

logger = logging.getLogger(__name__)


def _parse_overrides(items: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for item in items:
        if "=" not in item:
            raise ValueError(f"--set expects KEY=VALUE, got {item!r}.")
        key, value = item.split("=", 1)
        out[key.strip()] = value.strip()
    return out


def _build_run_config(args: argparse.Namespace, model_default: str) -> RunConfig:
    overrides = _parse_overrides(args.set or [])

    if args.config:
        base = load_run_config(Path(args.config))
        model = ModelType.parse(args.model) if args.model else base.model
        data = base.params.to_dict() if model is base.model else {}
        data.update(overrides)
        params = params_from_dict(model, data)
        t_max = base.t_max_s
        dt = base.dt_s
    else:
        model = ModelType.parse(args.model or model_default)
        params = params_from_dict(model, overrides)
        t_max = DEFAULT_T_MAX_S
        dt = DT

    if getattr(args, "t_max", None) is not None:
        t_max = args.t_max

    validate_params(model, params)
    return RunConfig(model=model, params=params, t_max_s=t_max, dt_s=dt)


def _cmd_run(args: argparse.Namespace) -> int:
    cfg = _build_run_config(args, model_default="single")
    result = run_simulation(cfg)

    if args.csv:
        result.df.to_csv(args.csv, index=False, float_format="%.6f")
        logger.info("Wrote %d rows to %s.", len(result.df), args.csv)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    final = result.final_state
    print(f"Model          : {cfg.model.value}")
    print(f"Simulated time : {final.t:.3f} s ({len(result.df) - 1} steps)")
    print(f"Final status   : {final.to_dict()['status']}")
    print(f"Block          : x1={final.x1:.4f} m  v1={final.v1:.4f} m/s  s1={final.s1:.4f} m")
    if cfg.model is ModelType.PLANK:
        print(f"Plank          : x2={final.x2:.4f} m  v2={final.v2:.4f} m/s  s2={final.s2:.4f} m")
        print(f"Critical force : F1c={result.critical.F1c:.4f} N  F2c={result.critical.F2c:.4f} N")
    print(f"Friction heat  : {result.meta['heat_J']:.4f} J")
    if result.events:
        print("Events:")
        for ev in result.events:
            print(f"  t={ev.t_s:7.3f} s  {ev.label}")
    return 0


def _cmd_critical(args: argparse.Namespace) -> int:
    args.model = "plank"
    cfg = _build_run_config(args, model_default="plank")
    crit = analyze_critical_force(cfg.params)
    print(f"F1c (force on block) = {crit.F1c:.4f} N")
    print(f"F2c (force on plank) = {crit.F2c:.4f} N")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="frictionlab", description="Rigid-body friction simulator.")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $FRICTIONLAB_LOG_LEVEL or WARNING).")
    sub = parser.add_subparsers(dest="command", required=True)

    p_run = sub.add_parser("run", help="Run a simulation and print a summary.")
    p_run.add_argument("--model", choices=[m.value for m in ModelType], default=None)
    p_run.add_argument("--config", default=None, help="JSON run config.")
    p_run.add_argument("--set", action="append", metavar="KEY=VALUE", help="Override one parameter.")
    p_run.add_argument("--t-max", type=float, default=None, help="Simulated duration [s].")
    p_run.add_argument("--csv", default=None, help="Write the time series to this CSV file.")
    p_run.add_argument("--json", action="store_true", help="Print the summary as JSON.")
    p_run.set_defaults(func=_cmd_run)

    p_crit = sub.add_parser("critical", help="Critical forces for the block-plank model.")
    p_crit.add_argument("--config", default=None, help="JSON run config.")
    p_crit.add_argument("--set", action="append", metavar="KEY=VALUE", help="Override one parameter.")
    p_crit.set_defaults(func=_cmd_critical)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or log_level()).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (KeyError, ValueError, OSError) as e:
        msg = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f"error: {msg}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

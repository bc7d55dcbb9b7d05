"""Entry point: ``python -m procgen``.

Supports three modes:
  - ``python -m procgen``              → Launch the FastAPI generation server
  - ``python -m procgen inspect``      → Print generated content around a sector as JSON
  - ``python -m procgen derive``       → Derive a seed from a parent and a key path
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from typing import Any

from procgen.systems.hashing import Key, parse_seed

logger = logging.getLogger(__name__)

_INT_KEY = re.compile(r"^-?\d+$")

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING"]


def _seed_arg(text: str) -> int:
    try:
        return parse_seed(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_key(text: str) -> Key:
    """Integer-looking arguments hash as integers, everything else as text."""
    return int(text) if _INT_KEY.match(text) else text


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic procedural galaxy generator")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI generation server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=_seed_arg, default=42)
    srv.add_argument("--log-level", type=str, default="INFO", choices=_LOG_LEVELS)

    # --- Seed inspector ---
    ins = sub.add_parser("inspect", help="Print sectors, systems, missions and encounters as JSON")
    ins.add_argument("--seed", type=_seed_arg, default=42)
    ins.add_argument("--x", type=int, default=0)
    ins.add_argument("--y", type=int, default=0)
    ins.add_argument("--z", type=int, default=0)
    ins.add_argument("--radius", type=int, default=0)
    ins.add_argument("--tier", type=int, default=0)
    ins.add_argument("--layer", type=str, default="v0")
    ins.add_argument("--log-level", type=str, default="WARNING", choices=_LOG_LEVELS)

    # --- Seed derivation ---
    der = sub.add_parser("derive", help="Print derive_seed(parent, *keys), or hash64(keys) without --parent")
    der.add_argument("--parent", type=_seed_arg, default=None)
    der.add_argument("keys", nargs="*", type=_parse_key)

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from procgen.api.app import create_app
    from procgen.config import GeneratorConfig

    config = GeneratorConfig(global_seed=args.seed, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _inspect(args: argparse.Namespace) -> dict[str, Any]:
    from procgen.api.schemas import EncounterSchema, MissionSchema, SectorSchema, SystemSchema
    from procgen.config import GeneratorConfig
    from procgen.session import GalaxySession
    from procgen.utils.fingerprint import content_fingerprint

    if args.radius < 0:
        raise SystemExit("--radius must be >= 0")

    config = GeneratorConfig(
        global_seed=args.seed,
        progression_layer_id=args.layer,
        default_mission_tier=args.tier,
    )
    session = GalaxySession(config)

    sectors = []
    for sector in session.sectors_in_radius((args.x, args.y, args.z), args.radius):
        systems = []
        for idx in range(sector.system_count):
            system = session.system(sector.coord, idx)
            systems.append({
                "system": SystemSchema.from_def(system, fingerprint=content_fingerprint(system)).model_dump(),
                "mission": MissionSchema.from_def(session.mission(sector.coord, idx)).model_dump(),
                "encounter": EncounterSchema.from_def(session.encounter(sector.coord, idx), args.layer).model_dump(),
            })
        logger.info("Inspected %s (%d systems)", sector.id, len(systems))
        sectors.append({"sector": SectorSchema.from_def(sector).model_dump(), "systems": systems})

    return {"global_seed": str(args.seed), "sectors": sectors}


def _run_inspect(args: argparse.Namespace) -> None:
    from procgen.utils.logging import setup_logging

    # stdout carries the JSON document
    setup_logging(args.log_level, stream=sys.stderr)
    json.dump(_inspect(args), sys.stdout, indent=2)
    sys.stdout.write("\n")


def _run_derive(args: argparse.Namespace) -> None:
    from procgen.systems.hashing import derive_seed, format_seed, hash64

    if args.parent is None:
        seed = hash64(args.keys)
    else:
        seed = derive_seed(args.parent, *args.keys)
    print(format_seed(seed))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "inspect":
        _run_inspect(args)
    elif args.command == "derive":
        _run_derive(args)
    else:
        # Default: serve
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)


if __name__ == "__main__":
    main()

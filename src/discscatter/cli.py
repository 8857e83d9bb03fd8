# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, json, sys, pathlib

from .api import generate_from_config
from .config.loader import load_config
from .logging import init_logging_from_cfg
from .preview import take


def _dump_json(p: str, obj):
    pathlib.Path(p).parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)


def _overrides(args) -> dict:
    sampler = {
        "radius": args.radius,
        "min_distance": args.min_distance,
        "max_attempts_per_point": args.attempts,
        "seed": args.seed,
    }
    out: dict = {"sampler": {k: v for k, v in sampler.items() if v is not None}}
    if args.log_level:
        out["logging"] = {"level": args.log_level}
    return out


def cmd_generate(args):
    cfg = load_config(args.config, overrides=_overrides(args))
    init_logging_from_cfg(cfg)

    res = generate_from_config(cfg)
    limit = cfg["preview"]["max_samples"] if args.limit is None else args.limit
    pts = take(res.points, limit)
    payload = {
        "domain": res.domain.to_dict(),
        "count": res.count,
        "points": pts.tolist(),
    }
    if args.out:
        _dump_json(args.out, payload)
    if args.print or not args.out:
        print(json.dumps(payload, ensure_ascii=False))
    return 0


def make_parser():
    p = argparse.ArgumentParser(prog="discscatter")
    sub = p.add_subparsers(dest="cmd", required=True)

    pg = sub.add_parser("generate", help="Sample a disc and write the points as JSON")
    pg.add_argument("--config", default=None, help="optional YAML config")
    pg.add_argument("--radius", type=float, default=None, help="disc radius")
    pg.add_argument("--min-distance", dest="min_distance", type=float, default=None,
                    help="minimum distance between points")
    pg.add_argument("--attempts", type=int, default=None, help="candidates per active point")
    pg.add_argument("--seed", type=int, default=None, help="random seed")
    pg.add_argument("--limit", type=int, default=None,
                    help="write only the first N points "
                         "(default: preview.max_samples; count stays the full count)")
    pg.add_argument("--out", default=None, help="output JSON path")
    pg.add_argument("--print", action="store_true", help="print JSON result to stdout")
    pg.add_argument("--log-level", dest="log_level", choices=["none", "info", "debug"],
                    default=None)
    pg.set_defaults(func=cmd_generate)

    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    ns = parser.parse_args(argv)
    try:
        return ns.func(ns)
    except (ValueError, TypeError, FileNotFoundError) as e:
        parser.error(str(e))


if __name__ == "__main__":
    raise SystemExit(main())

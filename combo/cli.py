from __future__ import annotations

import argparse
import json
import logging
import random
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .codec import DecodeError, decode, encode
from .config import combo_config_from_env
from .documents import scenario_from_fields, scenario_to_fields
from .generator import generate
from .render import render_text
from .scenario import Scenario
from .share import build_share_link, token_from_url

logger = logging.getLogger(__name__)


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Randomized practice combo generator")
    parser.add_argument("--debug", action="store_true", help="Print debug logs")
    parser.add_argument("--base-url", default=None, help="Page URL share links point at")
    sub = parser.add_subparsers(dest="command", required=True)

    randomize = sub.add_parser("randomize", help="Draw a new combo")
    randomize.add_argument("--difficulty", type=int, default=None, help="Difficulty 1-10")
    randomize.add_argument(
        "--height", type=float, default=0.0, help="Arena container height in pixels"
    )
    randomize.add_argument("--seed", type=int, default=None, help="Seed for a repeatable draw")

    dec = sub.add_parser("decode", help="Decode a combo token or share link")
    dec.add_argument("token", help="Token or full URL carrying ?combo=")

    enc = sub.add_parser("encode", help="Encode a combo JSON file")
    enc.add_argument("path", help="Path to combo JSON (camelCase fields)")

    for p in (randomize, dec, enc):
        p.add_argument(
            "--output-format", choices=["json", "text"], default="json", help="Output format"
        )
        p.add_argument("--output", default=None, help="Path to write output to")

    return parser.parse_args(argv)


def _payload(scenario: Scenario, token: str, link: str) -> Dict[str, Any]:
    return {"scenario": scenario_to_fields(scenario), "token": token, "shareLink": link}


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = _parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    config = combo_config_from_env()
    base_url = args.base_url or config.base_url

    if args.command == "randomize":
        difficulty = args.difficulty if args.difficulty is not None else config.difficulty
        rng = random.Random(args.seed) if args.seed is not None else None
        scenario = generate(difficulty, args.height, rng)
    elif args.command == "decode":
        raw = args.token
        token = token_from_url(raw) if "://" in raw or raw.startswith("?") else raw
        if not token:
            token = raw
        try:
            scenario = decode(token)
        except DecodeError as exc:
            logger.debug(f"Decode failed for {raw!r}")
            print(f"error: {exc}")
            return 1
    else:
        with open(args.path, "r", encoding="utf-8") as f:
            scenario = scenario_from_fields(json.load(f))

    token = encode(scenario)
    link = build_share_link(base_url, token)

    if args.output_format == "json":
        output_text = json.dumps(_payload(scenario, token, link), indent=2)
    else:
        output_text = render_text(scenario, link)

    if args.output:
        _write_text(args.output, output_text)
    else:
        print(output_text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

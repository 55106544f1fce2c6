#!/usr/bin/env python3
import json
import logging
import os
import sys
from dataclasses import asdict
from typing import List, Optional, Tuple

from versescan.feet import FOOT_ORDER, LEGACY_FOOT_ORDER
from versescan.lexicon import Lexicon, LexiconError
from versescan.meter_engine import ScansionEngine

logger = logging.getLogger("versescan_cli")

LOG_FORMAT = "[versescan] %(asctime)s %(levelname)s %(name)s: %(message)s"
LEXICON_FILENAMES = ["cmudict.dict.gz", "cmudict.dict", "cmudict.json.gz", "cmudict.json"]
FOOT_ORDERS = {
    "default": FOOT_ORDER,
    "legacy": LEGACY_FOOT_ORDER,
}


def _resolve_path(path: str, env_var: str, fallback_filenames: List[str]) -> str:
    path = os.path.expanduser(str(path or "").strip())
    if path and os.path.exists(path):
        return path
    env_path = os.environ.get(env_var, "").strip()
    if env_path and os.path.exists(env_path):
        return env_path
    home = os.path.expanduser("~")
    for name in fallback_filenames:
        candidate = os.path.join(home, ".versescan", name)
        if os.path.exists(candidate):
            return candidate
    return path


def _configure_logging(config: dict) -> None:
    level_name = str(config.get("log_level") or os.environ.get("VERSESCAN_LOG_LEVEL") or "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _load_lexicon(config: dict) -> Tuple[Optional[Lexicon], Optional[str]]:
    path = _resolve_path(str(config.get("lexicon_path") or ""), "VERSESCAN_LEXICON_PATH", LEXICON_FILENAMES)
    try:
        if path:
            return Lexicon.from_path(path), None
        if bool(config.get("use_pronouncing", True)):
            return Lexicon.from_pronouncing(), None
    except LexiconError as exc:
        logger.warning("lexicon unavailable, using heuristics: %s", exc)
        return None, str(exc)
    return None, None


def _read_stdin_json() -> dict:
    raw = sys.stdin.read()
    if not raw.strip():
        return {}
    return json.loads(raw)


def main() -> int:
    try:
        req = _read_stdin_json()
    except ValueError as exc:
        sys.stderr.write(f"versescan: invalid request: {exc}\n")
        return 2
    if not isinstance(req, dict):
        sys.stderr.write("versescan: request must be a JSON object\n")
        return 2

    config = req.get("config") or {}
    if not isinstance(config, dict):
        config = {}
    _configure_logging(config)

    text = req.get("text")
    if not isinstance(text, str):
        text = ""
    line_index = req.get("line_index")
    if not isinstance(line_index, int) or isinstance(line_index, bool):
        line_index = None

    lexicon, error_msg = _load_lexicon(config)
    foot_order = FOOT_ORDERS.get(str(config.get("foot_order") or "default").strip().lower(), FOOT_ORDER)
    engine = ScansionEngine(lexicon=lexicon, foot_order=foot_order)

    analysis = engine.analyze_scansion(text)
    instances = engine.scansion_instances(text, line_index)

    payload = {
        "analysis": asdict(analysis),
        "instances": [asdict(inst) for inst in instances],
        "lexicon_words": len(lexicon) if lexicon is not None else 0,
    }
    if error_msg is not None:
        payload["error"] = error_msg
    sys.stdout.write(json.dumps(payload, ensure_ascii=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
Command-line entry point.

Reads a YAML or JSON document and writes its marshalled form to stdout:

    python -m tagmarshal data.yaml
    python -m tagmarshal data.yaml --lines
    python -m tagmarshal data.yaml --profile public --profiles-file config/profiles.yaml
"""

import argparse
import sys
from typing import Optional

import yaml
from loguru import logger

from .config import Config
from .encoder import Encoder
from .errors import MarshalError
from .profiles import ProfileRegistry

LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> | <level>{message}</level>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagmarshal",
        description="Marshal a YAML/JSON document into deterministic JSON-shaped text",
    )
    parser.add_argument("path", help="YAML or JSON file to marshal")
    parser.add_argument("--tag", default=None, help=f"Target tag (default: {Config.TARGET_TAG})")
    parser.add_argument(
        "--ignore", default=None, help=f"Ignore tag value (default: {Config.IGNORE_VALUE})"
    )
    parser.add_argument("--profile", default=None, help="Named profile from the profiles file")
    parser.add_argument(
        "--profiles-file", default=None, help=f"Profiles YAML (default: {Config.PROFILES_PATH})"
    )
    parser.add_argument(
        "--lines",
        action="store_true",
        help="Emit one document per element of a top-level list",
    )
    parser.add_argument("--log-level", default=None, help=f"Log level (default: {Config.LOG_LEVEL})")
    return parser


def resolve_encoder(args: argparse.Namespace) -> Encoder:
    """
    Pick the encoder for a CLI invocation.

    A --profile is looked up first; --tag and --ignore override its fields.

    Raises:
        KeyError: If --profile names an unknown profile
    """
    if args.profile:
        base = ProfileRegistry(args.profiles_file).get(args.profile)
    else:
        base = Encoder.from_config()

    return Encoder(
        target_tag=args.tag if args.tag is not None else base.target_tag,
        ignore_value=args.ignore if args.ignore is not None else base.ignore_value,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=(args.log_level or Config.LOG_LEVEL).upper())

    try:
        encoder = resolve_encoder(args)
    except KeyError as e:
        logger.error(str(e).strip("'\""))
        return 1

    try:
        with open(args.path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to read {args.path}: {e}")
        return 1

    try:
        if args.lines:
            if not isinstance(document, list):
                logger.error("--lines requires a top-level list")
                return 1
            payload = encoder.marshal_lines(document)
        else:
            payload = encoder.marshal(document)
    except MarshalError as e:
        logger.error(f"Marshal failed: {e}")
        return 1

    sys.stdout.buffer.write(payload)
    sys.stdout.flush()
    return 0

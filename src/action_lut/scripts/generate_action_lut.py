#!/usr/bin/env python3
"""
Generate ActionLutData.cpp from an exported Action table.

Reads the JSON export of the game's Action sheet, extracts potency values from
each player action's description and writes them into the C++ lookup table.
"""

import argparse
import sys
from typing import List, Optional

from action_lut.config import GeneratorConfig
from action_lut.generator import ActionLutGenerator
from action_lut.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate the action potency lookup table.")
    parser.add_argument("data_path", nargs="?", help="Exported Action table (JSON)")
    parser.add_argument("-o", "--output", help="Output C++ file")
    parser.add_argument("--template", help="Template file containing %%INSERT_GARBAGE%%")
    parser.add_argument("--language", help="Description language to read (default: en)")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    parser.add_argument("--skip-malformed", action="store_true",
                        help="Skip actions with malformed descriptions instead of aborting")
    return parser


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Apply command-line overrides on top of the environment config."""
    config = GeneratorConfig.from_env()
    if args.data_path:
        config.data_path = args.data_path
    if args.output:
        config.output_path = args.output
    if args.template:
        config.template_path = args.template
    if args.language:
        config.language = args.language
    if args.log_level:
        config.log_level = args.log_level
    if args.skip_malformed:
        config.skip_malformed = True
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    setup_logging(level=config.log_level)
    
    try:
        output_file = ActionLutGenerator.run(config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Generation failed: {e}")
        return 1
    
    logger.info(f"Generated {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

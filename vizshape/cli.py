"""
vizshape CLI

Inspect a JSON export of records and print the analysis.
The CLI is a caller of the library; the analyzer itself stays pure.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from vizshape.__version__ import __version__
from vizshape.analyzer import analyze_data_structure
from vizshape.config.analyzer_config import AnalyzerConfig
from vizshape.config.loader import load_config
from vizshape.core.errors import ConfigError, InvalidInputError
from vizshape.core.fingerprint import analysis_fingerprint
from vizshape.core.snapshot import analysis_to_dict
from vizshape.query import get_primary_viz
from vizshape.utils.logger import get_logger

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


# -------------------------------------------------
# PROGRAMMATIC ENTRY
# -------------------------------------------------
def run_single_file(input_path: str, config_path: Optional[str] = None) -> dict:
    """
    Analyze one JSON file.

    Returns:
        {
            "analysis": <renderer payload>,
            "primary": <VizKind value>,
            "fingerprint": <sha256 hex>,
            "indent": <int>
        }
    """
    config = load_config(config_path)
    analyzer_config = AnalyzerConfig.from_dict(config.get("analyzer"))

    with open(input_path, "r", encoding="utf-8") as f:
        collection = json.load(f)

    analysis = analyze_data_structure(collection, analyzer_config)
    logger.info("Analyzed %s records from %s", analysis.count, input_path)

    return {
        "analysis": analysis_to_dict(analysis),
        "primary": get_primary_viz(analysis).value,
        "fingerprint": analysis_fingerprint(analysis),
        "indent": config.get("output", {}).get("indent", 2),
    }


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="vizshape",
        description=f"vizshape v{__version__} - recommend visualizations for records",
    )

    parser.add_argument("input", nargs="?", help="JSON file with records")
    parser.add_argument("--config", required=False, help="Path to config YAML")
    parser.add_argument(
        "--primary",
        action="store_true",
        help="Print only the primary visualization",
    )
    parser.add_argument("--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"vizshape v{__version__}")
        return EXIT_OK

    # ---- LOGGING ----
    get_logger("vizshape", verbose=args.verbose)

    if not args.input:
        parser.error("Input file required")

    input_path = Path(args.input)
    if not input_path.exists():
        parser.error(f"Input file not found: {input_path}")

    try:
        result = run_single_file(str(input_path), config_path=args.config)
    except ConfigError as exc:
        parser.error(str(exc))
    except (InvalidInputError, json.JSONDecodeError) as exc:
        logger.error("Nothing to visualize: %s", exc)
        return EXIT_INVALID_INPUT

    if args.primary:
        print(result["primary"])
        return EXIT_OK

    payload = dict(result["analysis"], fingerprint=result["fingerprint"])
    print(json.dumps(payload, indent=result["indent"]))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

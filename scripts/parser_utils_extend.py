#!/usr/bin/env python3
# scripts/parser_utils_extend.py

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from parser_utils.core.config import load_config
from parser_utils.normalize.transformer import FileNormalizer

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("parser_utils_extend")


def load_json(input_path: Path) -> Any:
    """Load a JSON document from disk."""
    with open(input_path, "r", encoding="utf-8") as f:
        return json.load(f)


def extend_files(
    normalizer: FileNormalizer, files: Any, options: Dict[str, Any]
) -> Any:
    """Normalize a single file value or a list of them."""
    if isinstance(files, list):
        records: List[Dict[str, Any]] = [
            normalizer.extend(file, options).to_dict() for file in files
        ]
        logger.info(f"Normalized {len(records)} file records")
        return records
    return normalizer.extend(files, options).to_dict()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Normalize file records for a parser chain",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Normalize one file record
  parser_utils_extend.py --input file.json --output record.json

  # Let caller locals win over the files' own data
  parser_utils_extend.py --input files.json --options locals.json
        """,
    )

    parser.add_argument(
        "--input",
        required=True,
        help="Input JSON file with a content string, a file object, or a list of them",
    )
    parser.add_argument("--options", help="JSON file with options (data or locals)")
    parser.add_argument(
        "--output", help="Output JSON file for normalized records (default: stdout)"
    )
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Configuration file path (default: config/config.yaml)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    # Load configuration
    try:
        config = load_config(args.config)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging.getLogger().setLevel(logging.DEBUG if args.verbose else config.log_level)

    input_path = Path(args.input).resolve()
    if not input_path.exists():
        logger.error(f"Input file not found: {input_path}")
        return 1

    try:
        files = load_json(input_path)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read input: {e}")
        return 1

    options: Dict[str, Any] = {}
    if args.options:
        options_path = Path(args.options).resolve()
        if not options_path.exists():
            logger.error(f"Options file not found: {options_path}")
            return 1
        try:
            options = load_json(options_path)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read options: {e}")
            return 1
        if not isinstance(options, dict):
            logger.error("Options must be a JSON object")
            return 1

    normalizer = FileNormalizer(config)
    result = extend_files(normalizer, files, options)
    payload = json.dumps(result, indent=config.json_indent, ensure_ascii=False)

    if args.output:
        output_path = Path(args.output).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
        logger.info(f"Wrote normalized output to {output_path}")
    else:
        print(payload)

    return 0


if __name__ == "__main__":
    sys.exit(main())

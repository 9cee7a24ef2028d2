# cli.py
import argparse
import json
import sys
from pathlib import Path
from typing import List

if __package__ in (None, ""):
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

from models.schemas import InputKind, ValidationMode
from models.validation_model import InputValidator
from utils.config_loader import ConfigError, load_settings
from utils.logger import get_logger, log_stage


def read_values(path: str) -> List[str]:
    """One expression per line; blank lines and '#' comments are skipped."""
    values = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            values.append(stripped)
    return values


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate IP address expressions or MAC address lists.")
    parser.add_argument("values", nargs="*", help="Expressions to validate")
    parser.add_argument("--input", help="File with one expression per line")
    parser.add_argument("--kind", choices=[k.value for k in InputKind], default=InputKind.ADDRESS.value)
    parser.add_argument("--mode", choices=[m.value for m in ValidationMode], default=ValidationMode.FULL.value)
    parser.add_argument("--config", help="Path to validator YAML config")
    parser.add_argument("--output", help="Write JSON results here instead of stdout")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    if not args.values and not args.input:
        parser.error("provide values or --input")

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ConfigError) as e:
        parser.error(str(e))

    logger = get_logger("cli", args.log_level or settings.logging.level, "cli.log", log_dir=settings.logging.directory)
    logger.info(
        "CLI invocation | kind=%s mode=%s input=%s output=%s",
        args.kind, args.mode, args.input, args.output,
    )

    values = list(args.values)
    if args.input:
        try:
            values.extend(read_values(args.input))
        except OSError as e:
            parser.error(f"cannot read {args.input}: {e}")

    validator = InputValidator(settings, log_level=args.log_level)
    with log_stage(logger, "cli_total"):
        results = validator.validate_batch(values, kind=args.kind, mode=args.mode)

    payload = json.dumps([r.model_dump(mode="json") for r in results], indent=2, ensure_ascii=False)
    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload + "\n", encoding="utf-8")
        logger.info("Wrote %d results to %s", len(results), out)
    else:
        print(payload)

    return 0 if all(r.valid for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())

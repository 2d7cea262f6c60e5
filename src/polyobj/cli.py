"""
Command-line interface and entry points for polyobj.

``main`` is the programmatic entry point; ``cli`` backs the ``polyobj``
console script.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from polyobj.core.logger import configure_root_logger, get_logger
from polyobj.driver import DemoDriver
from polyobj.models.demo_config import DemoConfig

logger = get_logger(__name__)


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Read a scenario file (JSON or YAML) into a dict.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the suffix is not .json, .yaml or .yml
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, "r") as f:
        if config_file.suffix == ".json":
            config = json.load(f)
        elif config_file.suffix in (".yaml", ".yml"):
            import yaml
            config = yaml.safe_load(f)
        else:
            raise ValueError(
                f"Unsupported config format: {config_file.suffix}. "
                "Use .json or .yaml"
            )
    logger.info(f"Loaded config from {config_path}")
    return config or {}


def main(
    config_path: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
    *,
    run_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Main entry point for a demo run.

    Can be called with either:
    - A config file path (JSON/YAML)
    - A config dictionary (programmatic)
    - Neither, which runs the default scenario

    Returns:
        Execution result with status, name, run_id, emitted lines and exit code

    Example:
        >>> from polyobj.cli import main
        >>> result = main()
        >>> print(f"Status: {result['status']}")
    """
    if config_dict is not None:
        config = config_dict
        logger.info("Using provided config dictionary")
    elif config_path:
        config = load_config(config_path)
    else:
        config = {}

    driver = DemoDriver(run_id)
    outcome = driver.run(config)

    return {
        "status": outcome.status,
        "name": outcome.name,
        "run_id": outcome.run_id,
        "lines": list(outcome.lines),
        "exit_code": outcome.exit_code,
    }


def validate_config(config_path: str) -> bool:
    """
    Validate a scenario file without running it.

    Raises:
        Exception: If configuration is invalid
    """
    try:
        config = load_config(config_path)
        DemoConfig.model_validate(config)
        logger.info("Configuration is valid")
        return True
    except Exception as e:
        logger.error(f"Config validation failed: {str(e)}")
        raise


def cli(argv: Optional[list] = None) -> None:
    """
    Command-line interface for polyobj.

    Usage:
        polyobj run [config.json] [--verbose]
        polyobj validate config.json
    """
    parser = argparse.ArgumentParser(
        prog="polyobj",
        description="Polymorphic object demonstration"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    run_parser = subparsers.add_parser(
        "run",
        help="Run the demonstration"
    )
    run_parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Path to scenario file (JSON or YAML); default scenario if omitted"
    )
    run_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a scenario file without running it"
    )
    validate_parser.add_argument(
        "config",
        help="Path to scenario file (JSON or YAML)"
    )

    args = parser.parse_args(argv)

    if args.command == "run":
        configure_root_logger("DEBUG" if args.verbose else "WARNING")
        try:
            result = main(config_path=args.config)
            sys.exit(result["exit_code"])
        except Exception as e:
            logger.error(f"Demo failed: {e}")
            sys.exit(1)

    elif args.command == "validate":
        configure_root_logger("INFO")
        try:
            validate_config(args.config)
            sys.exit(0)
        except Exception as e:
            logger.error(f"Validation failed: {e}")
            sys.exit(1)

    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    cli()

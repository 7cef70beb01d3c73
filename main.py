#!/usr/bin/env python3
"""Main entry point for hostfacts."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from hostfacts.collection import FactCollection
from hostfacts.config_manager import ConfigError, ConfigManager
from hostfacts.constants import APP_NAME, BACKENDS
from hostfacts.paths import get_config_path
from hostfacts.protocols import ISysctl
from hostfacts.resolvers import ProcessorResolver
from hostfacts.sysctl import SysctlUnavailableError, create_sysctl

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


class HostFacts:
    """Main application class."""

    def __init__(
        self,
        config_path: Path,
        backend: str | None = None,
        log_level: str | None = None,
        indent: int | None = None,
    ):
        self.config_manager = ConfigManager(config_path)
        self.sysctl: ISysctl | None = None
        self._backend = backend
        self._log_level = log_level
        self._indent = indent

    def initialize(self) -> None:
        """Load configuration and create the sysctl backend.

        Raises:
            json.JSONDecodeError: If the config file is not valid JSON.
            UnicodeDecodeError: If the config file is not valid UTF-8.
            ConfigError: If the config file has an invalid structure or value.
            ValueError: If the configured backend is unknown.
            SysctlUnavailableError: If the backend cannot be used here.
        """
        self.config_manager.load()

        # Command-line options win over the config file
        log_level = self._log_level or self.config_manager.log_level
        logging.getLogger().setLevel(getattr(logging, log_level.upper(), logging.WARNING))

        backend = self._backend or self.config_manager.backend
        logger.debug(f"Using {backend} sysctl backend")
        self.sysctl = create_sysctl(backend)

    def collect(self) -> FactCollection:
        """Resolve all facts into a fresh collection."""
        if self.sysctl is None:
            raise RuntimeError("HostFacts.initialize() must be called first")

        facts = FactCollection()
        ProcessorResolver(self.sysctl).resolve(facts)
        logger.info(f"Resolved {len(facts)} fact(s)")
        return facts

    def render(self, facts: FactCollection, queries: list[str]) -> str:
        """Format facts as JSON.

        No queries renders every fact, a single query renders its value
        and several queries render an object keyed by query.
        """
        result: Any
        if not queries:
            result = facts.to_dict()
        elif len(queries) == 1:
            result = facts.query(queries[0])
        else:
            result = {query: facts.query(query) for query in queries}

        indent = self._indent if self._indent is not None else self.config_manager.indent
        return json.dumps(result, indent=indent or None, sort_keys=True, ensure_ascii=False)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Report processor facts")
    parser.add_argument(
        "queries", nargs="*", metavar="QUERY",
        help="Fact names or dotted paths (e.g. processors.count)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to config.json")
    parser.add_argument("--backend", choices=BACKENDS, default=None, help="Sysctl backend")
    parser.add_argument("--log-level", default=None, help="Logging level (e.g. DEBUG, INFO)")
    parser.add_argument("--debug", action="store_true", help="Shorthand for --log-level DEBUG")
    parser.add_argument("--indent", type=int, default=None, help="JSON indentation, 0 for compact")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Logs go to stderr so stdout stays valid JSON
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)

    app = HostFacts(
        config_path=args.config or get_config_path(),
        backend=args.backend,
        log_level="DEBUG" if args.debug else args.log_level,
        indent=args.indent,
    )

    try:
        app.initialize()
    except (json.JSONDecodeError, UnicodeDecodeError, ConfigError) as e:
        logger.error(f"Invalid configuration file {app.config_manager.config_path}: {e}")
        return 1
    except (ValueError, SysctlUnavailableError) as e:
        logger.error(f"Cannot initialize sysctl backend: {e}")
        return 1

    facts = app.collect()
    sys.stdout.write(app.render(facts, args.queries))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

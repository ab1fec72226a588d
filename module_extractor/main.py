from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, Hashable, Optional, Sequence

from .extractor import ModuleExtractor
from .extractor_config import load_extractor_config
from .logging_utils import configure_logging
from .report_store import save_report
from .results import ArtifactResult, InvalidBasePath

logger = logging.getLogger(__name__)

DESCRIPTION = """\
Module Installation Utility

Extracts Magento modules from ZIP artifacts into the correct app space.
"""

EPILOG = """\
To use:

    module-extractor /path/to/magento https://url.to/artifact1.zip /path/to/artifact2.zip

First argument is the path to your target Magento installation.
Additional arguments are paths or URLs to your module artifacts.
"""


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return number


def run(
    *,
    base_path: str,
    artifacts: Sequence[str],
    config_path: Optional[str] = None,
    log_path: Optional[str] = None,
    report_path: Optional[str] = None,
    timeout: Optional[float] = None,
    verbose: bool = False,
) -> Dict[Hashable, ArtifactResult]:
    """Validate the installation, install the artifacts and return the report.

    Raises InvalidBasePath before anything is written if ``base_path`` is
    not an application installation. A report that cannot be written is
    logged and reported on stderr; the installed modules still count.
    """

    config = load_extractor_config(config_path).with_overrides(fetch_timeout=timeout)
    extractor = ModuleExtractor(base_path, config=config)

    actual_log_path = configure_logging(
        log_path=log_path or str(extractor.root.join(config.log_path)),
        verbose=verbose,
    )
    logger.info("Installing %d artifacts into %s", len(artifacts), extractor.root.path)

    results = extractor.extract(list(artifacts))
    if report_path:
        try:
            save_report(report_path, results, log_path=actual_log_path)
        except OSError as e:
            logger.error("Could not write report %s: %s", report_path, e)
            print(f"Could not write report {report_path}: {e}", file=sys.stderr)
    return results


def _print_results(results: Dict[Hashable, ArtifactResult]) -> bool:
    has_error = False
    for result in results.values():
        if result.state:
            print(f"→ Extracted module '{result.name}'")
        else:
            print(f"→ Failed to extract module: {result.message}")
            has_error = True

    print()
    print("You may need to run the Magento upgrade process.")
    return has_error


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="module-extractor",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("base_path", nargs="?", default="", help="Target installation (default: current directory)")
    p.add_argument("artifacts", nargs="*", help="Paths or URLs to module ZIP artifacts")
    p.add_argument("--config", default=None, help="Path to extractor config (yaml)")
    p.add_argument("--log", default=None, help="Path to log file (default: <base_path>/var/log/module-extractor.log)")
    p.add_argument("--report", default=None, help="Write the result report to this path (json|yaml)")
    p.add_argument("--timeout", type=positive_float, default=None, help="Seconds to wait for each remote artifact")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug detail, also to stderr")

    args = p.parse_args(argv)

    try:
        results = run(
            base_path=args.base_path,
            artifacts=args.artifacts,
            config_path=args.config,
            log_path=args.log,
            report_path=args.report,
            timeout=args.timeout,
            verbose=args.verbose,
        )
    except InvalidBasePath as e:
        print(e)
        return 1
    except (OSError, ValueError) as e:
        logger.exception("Extractor failed")
        print(e, file=sys.stderr)
        return 1

    if not results:
        print("No modules extracted.")
        return 0

    return int(_print_results(results))

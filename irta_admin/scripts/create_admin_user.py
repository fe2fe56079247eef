"""Interactive guide for creating the first IRTA administrator in Firebase."""

from __future__ import annotations

import argparse
import logging

from irta_admin.core.config import Settings, get_settings
from irta_admin.instructions import guidance_lines, intro_lines, is_affirmative


logger = logging.getLogger(__name__)


def read_answer() -> str:
    """Block for a single line from stdin; a closed stream reads as no answer."""

    try:
        return input("")
    except EOFError:
        logger.debug("Input closed before an answer was given")
        return ""


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        print(line)


def run(settings: Settings) -> None:
    """Print the intro, wait for one answer and print the matching block."""

    _print_lines(intro_lines(settings))
    answer = read_answer()
    console_method = is_affirmative(answer, settings)
    logger.debug("Operator chose the %s method", "console" if console_method else "sdk")
    _print_lines(guidance_lines(answer, settings))


def _resolve_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print instructions for creating the IRTA admin user",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    _resolve_cli_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    run(settings)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())

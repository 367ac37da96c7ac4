"""CLI entry point for a one-shot text dashboard.

Cities come from the command line, else from CITYSKY_CITIES, else the whole
catalog:
    uv run python -m citysky.dashboard 東京 London "sao paulo"
"""

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

from citysky.catalog import DEFAULT_CATALOG  # noqa: E402
from citysky.compute import run  # noqa: E402
from citysky.i18n import t  # noqa: E402
from citysky.models import CityReport, QueryInput  # noqa: E402


def format_report(report: CityReport, lang: str = "en") -> str:
    """One dashboard line for a CityReport."""
    if report.resolved_key is None:
        return t("unknown_city", lang).format(city=report.query.city)
    c = report.clock
    phase = t("day" if report.is_daytime else "night", lang)
    level = t(f"uv_{report.uv_level}", lang)
    return (
        f"{report.resolved_key:<12} {c.time} {c.date} {c.offset_label:<8} {phase:<5} "
        f"↑{report.sun.sunrise} ↓{report.sun.sunset}  UV {report.uv_index} ({level})"
    )


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=os.environ.get("CITYSKY_LOG_LEVEL", "WARNING").upper())

    lang = os.environ.get("CITYSKY_LANG", "en")
    when = os.environ.get("CITYSKY_WHEN", "")
    cities = args or [
        c.strip() for c in os.environ.get("CITYSKY_CITIES", "").split(",") if c.strip()
    ]
    if not cities:
        cities = list(DEFAULT_CATALOG.keys())

    for city in cities:
        try:
            report = run(QueryInput(city=city, when=when), lang=lang)
        except ValueError as e:
            print(t("error_when", lang).format(error=e), file=sys.stderr)
            return 2
        print(format_report(report, lang))
    return 0


if __name__ == "__main__":
    sys.exit(main())

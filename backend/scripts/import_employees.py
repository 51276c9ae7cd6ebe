#!/usr/bin/env python3
"""Bulk-import employees from a JSON or XML file.

Run from the backend/ directory:

    python3 scripts/import_employees.py employees.xml [--format xml] [--dry-run] [--verbose]

The file uses the same format as the ingestion API: a JSON object or array of
objects, or an ``<ArrayOfEmployee>`` document. Every record must carry
``firstName`` and ``lastName``; if any record is invalid nothing is imported.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from organization_management.core.config import Settings  # noqa: E402
from organization_management.core.database import Database  # noqa: E402
from organization_management.models.employee import EmployeeIngest  # noqa: E402
from organization_management.repositories.employee_repository import EmployeeRepository  # noqa: E402
from organization_management.services.mapping import ingest_to_employee  # noqa: E402
from organization_management.services.serialization import from_json, from_xml  # noqa: E402
from organization_management.services.validation import validate_employee  # noqa: E402

logger = logging.getLogger(__name__)


def detect_format(path: Path, explicit: str | None) -> str:
    if explicit:
        return explicit
    suffix = path.suffix.lower()
    if suffix in (".json", ".xml"):
        return suffix[1:]
    raise ValueError(f"Cannot infer format from '{path.name}', pass --format json|xml")


def load_payloads(text: str, fmt: str) -> list[EmployeeIngest]:
    if fmt == "json":
        parsed = from_json(text, EmployeeIngest | list[EmployeeIngest])
    else:
        parsed = from_xml(text, EmployeeIngest)
    return parsed if isinstance(parsed, list) else [parsed]


def find_invalid(payloads: list[EmployeeIngest]) -> list[tuple[int, list[str]]]:
    invalid: list[tuple[int, list[str]]] = []
    for index, payload in enumerate(payloads):
        errors = validate_employee(payload)
        if errors:
            invalid.append((index, [e.message for e in errors]))
    return invalid


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Import employees from a JSON or XML file",
    )
    parser.add_argument("path", type=Path, help="File to import")
    parser.add_argument(
        "--format",
        choices=("json", "xml"),
        default=None,
        help="Input format (default: inferred from the file extension)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and validate without writing to the database",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def import_employees(args: argparse.Namespace, settings: Settings | None = None) -> int:
    settings = settings or Settings()
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    fmt = detect_format(args.path, args.format)
    payloads = load_payloads(args.path.read_text(encoding="utf-8"), fmt)
    logger.info("Read %d employee(s) from %s", len(payloads), args.path)

    invalid = find_invalid(payloads)
    if invalid:
        for index, messages in invalid:
            logger.error("Record %d: %s", index, " ".join(messages))
        logger.error("%d invalid record(s), nothing imported", len(invalid))
        return 0

    if args.dry_run:
        logger.info("[DRY RUN] %d employee(s) would be imported.", len(payloads))
        return 0

    database = Database()
    await database.initialize(settings)
    try:
        async with database.session() as session:
            created = await EmployeeRepository(session).add_many([ingest_to_employee(p) for p in payloads])
    finally:
        await database.close()

    logger.info("Imported %d employee(s)", len(created))
    return len(created)


def main() -> None:
    args = parse_args()
    asyncio.run(import_employees(args))


if __name__ == "__main__":
    main()

"""Seed the default admin account.

Non-destructive by default. ``--reset`` deletes every employee and attendance
row first and must be asked for explicitly.
"""

from __future__ import annotations

import argparse
import importlib

from dotenv import load_dotenv

from config import get_settings_module

from hr_payroll.auth.credentials import build_verifier
from hr_payroll.core.constants import DEFAULT_ADMIN_USERNAME
from hr_payroll.database.bootstrap import ensure_default_admin, reset_data
from hr_payroll.database.connection import DBConfig


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--reset",
        action="store_true",
        help="delete all employees and attendance before seeding",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    if args.reset:
        reset_data(db_config)

    ensure_default_admin(db_config, build_verifier(getattr(settings, "PASSWORD_SCHEME", "plain")))
    print(f"OK: Seeded database -> {DBConfig.from_dict(db_config).describe()} (admin user: {DEFAULT_ADMIN_USERNAME})")


if __name__ == "__main__":
    main()

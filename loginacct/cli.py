"""Command line front end for the account database."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from loginacct.accounts import (
    AccountError,
    AccountForm,
    EmptyFieldsError,
    create_account,
)
from loginacct.database import DEFAULT_DATABASE, DatabaseError, ensure_schema, open_database
from loginacct.images import EXPORT_NAME, ImageError, export_image, store_image


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="loginacct", description="Manage user accounts.")
    parser.add_argument("--database", default=DEFAULT_DATABASE, help="SQLite database file")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("status", help="check the database connection")

    register = commands.add_parser("register", help="create an account")
    register.add_argument("--full-name", default="")
    register.add_argument("--username", default="")
    register.add_argument("--password", default="")
    register.add_argument("--father-name", default="")
    register.add_argument("--mother-name", default="")
    register.add_argument("--profile-log", default=None, help="file to append profiles to")

    set_image = commands.add_parser("set-image", help="store a profile image")
    set_image.add_argument("username")
    set_image.add_argument("path")

    show_image = commands.add_parser("export-image", help="write the stored image to a file")
    show_image.add_argument("username")
    show_image.add_argument("--output", default=EXPORT_NAME)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line and return an exit status."""
    args = _parser().parse_args(argv)
    try:
        conn = open_database(args.database)
    except DatabaseError as exc:
        print(f"Failed to connect to Database: {exc}", file=sys.stderr)
        return 1

    try:
        ensure_schema(conn)
        if args.command == "status":
            print("Connected to Database")
        elif args.command == "register":
            form = AccountForm(
                full_name=args.full_name,
                username=args.username,
                password=args.password,
                father_name=args.father_name,
                mother_name=args.mother_name,
            )
            create_account(conn, form, args.profile_log)
            print("Account Created: Now You can log into your account")
        elif args.command == "set-image":
            if not store_image(conn, args.username, args.path):
                print(f"No such user: {args.username}", file=sys.stderr)
                return 1
            print(f"Image stored for {args.username}")
        elif args.command == "export-image":
            target = export_image(conn, args.username, args.output)
            print(f"Image written to {target}")
    except EmptyFieldsError as exc:
        print(f"{exc} Missing: {', '.join(exc.missing)}", file=sys.stderr)
        return 1
    except (AccountError, DatabaseError, ImageError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
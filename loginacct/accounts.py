"""Creating user accounts and logging their profile details."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, fields
from os import PathLike
from typing import List, Optional, Union

from loginacct.database import DatabaseError


class AccountError(Exception):
    """Raised when an account cannot be created."""


class EmptyFieldsError(AccountError):
    """Raised when required form fields are left empty."""

    def __init__(self, missing: List[str]):
        super().__init__("All Slots are Mendatory to Fill.")
        self.missing = missing


@dataclass(frozen=True)
class AccountForm:
    """The fields of the sign-up form; every one of them is required."""

    full_name: str
    username: str
    password: str
    father_name: str
    mother_name: str

    def missing_fields(self) -> List[str]:
        """Return the names of the fields that are empty, in form order."""
        return [f.name for f in fields(self) if not getattr(self, f.name)]


def username_exists(conn: sqlite3.Connection, username: str) -> bool:
    """Return whether an account with *username* is already stored."""
    try:
        row = conn.execute(
            "SELECT COUNT(*) FROM UserInfo WHERE username = ?", (username,)
        ).fetchone()
    except sqlite3.Error as exc:
        raise DatabaseError("Database server does not exist") from exc
    return row[0] != 0


def format_profile_entry(form: AccountForm) -> str:
    """Return the profile line appended to the profile log."""
    return (
        f"User Full Name: {form.full_name}"
        " || "
        f"Father Name: {form.father_name}"
        " || "
        f"Mother Name: {form.mother_name}\n\n\n"
    )


def create_account(
    conn: sqlite3.Connection,
    form: AccountForm,
    profile_log: Optional[Union[str, "PathLike[str]"]] = None,
) -> None:
    """Store a new account and append its profile to *profile_log*.

    Raises AccountError when the username is taken, EmptyFieldsError when a
    field is empty, and DatabaseError when the database cannot be used.
    """
    if username_exists(conn, form.username):
        raise AccountError(
            "Username already exists. Please choose a different username."
        )

    missing = form.missing_fields()
    if missing:
        raise EmptyFieldsError(missing)

    try:
        with conn:
            conn.execute(
                "INSERT INTO UserInfo(username, password, Image_Name, Image_Data) "
                "VALUES (:username, :password, NULL, NULL)",
                {"username": form.username, "password": form.password},
            )
            if profile_log is not None:
                try:
                    with open(profile_log, "a", encoding="utf-8") as log:
                        log.write(format_profile_entry(form))
                except OSError:
                    pass
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc
# loginacct

An account store kept in an SQLite database. It creates user accounts in a
`UserInfo` table, can append each new user's profile details to a text log,
and keeps one profile image per user, stored base64-encoded next to the
account.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `loginacct` command. Every subcommand
opens the database given by `--database` (default `database1.db`) and
creates the `UserInfo` table if it is missing.

```
loginacct status
loginacct register --full-name "Ann Example" --username ann --password password \
    --father-name "Bob Example" --mother-name "Cat Example" --profile-log profiles.txt
loginacct set-image ann portrait.png
loginacct export-image ann --output copy.jpg
```

- `status` prints `Connected to Database` when the database opens.
- `register` creates an account from the form options; `--profile-log` names
  a file the profile line is appended to.
- `set-image USERNAME PATH` stores a JPEG, PNG or GIF file as the user's
  profile image.
- `export-image USERNAME` writes the stored image as a JPEG file, by default
  `Image_From_Database.jpg`.

The command returns 0 on success. On failure it prints the reason to
standard error and returns 1: the database cannot be opened, the username is
taken, form fields are empty (they are listed), the user does not exist, or
the image cannot be read or decoded.

## Library use

```python
from loginacct.database import open_database, ensure_schema

conn = open_database("accounts.db")
ensure_schema(conn)
```

`open_database(path)` returns an `sqlite3.Connection` whose rows are
`sqlite3.Row`; `open_database` and `ensure_schema` raise
`loginacct.database.DatabaseError` when the database cannot be used.

### Accounts

```python
from loginacct.accounts import AccountForm, create_account

password = "password"
form = AccountForm(
    full_name="Ann Example",
    username="ann",
    password=password,
    father_name="Bob Example",
    mother_name="Cat Example",
)
create_account(conn, form, "profiles.txt")
```

- `AccountForm` is a frozen dataclass of the five sign-up fields; its
  `missing_fields()` method returns the names of the empty ones, in form
  order.
- `username_exists(conn, username)` tells whether a name is already stored.
- `create_account(conn, form, profile_log=None)` first raises `AccountError`
  if the username is taken, then `EmptyFieldsError` (an `AccountError` with a
  `missing` list) if any field is empty. Otherwise it inserts the username
  and password in one transaction and, when `profile_log` is given, appends
  the profile line to that file; a log file that cannot be written is
  skipped silently. Database failures raise `DatabaseError`.
- `format_profile_entry(form)` returns the profile line, for example
  `User Full Name: Ann Example || Father Name: Bob Example || Mother Name: Cat Example`
  followed by three newlines.

### Profile images

```python
from loginacct.images import store_image, load_image, export_image, fit_size

store_image(conn, "ann", "portrait.png")   # False if there is no such user
stored = load_image(conn, "ann")           # StoredImage(name, base64 data)
picture = stored.decode()                  # a PIL image
export_image(conn, "ann", "copy.jpg")      # returns the written path

fit_size(800, 600, 200, 200)               # (200, 150)
```

- `encode_image(path)` returns the file name and the image re-saved and
  base64-encoded.
- `StoredImage.decode()` picks the format from the name's suffix (`jpg`,
  `jpeg`, `png`, `gif`); any other suffix raises `ImageError`.
- `fit_size(width, height, max_width, max_height)` leaves a size that fits
  unchanged and scales a larger one down, keeping its aspect ratio.

Images that cannot be read, decoded, found or written raise `ImageError`.

## What it does not do

There is no sign-in: passwords are stored as given, in plain text, and
nothing checks them. There is no graphical interface; the package is a
library and a command line only.
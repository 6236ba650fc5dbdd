#!/usr/bin/env python3
"""
Compute the admin password digest for the Certification Coaching API.

The API never stores the admin password; it compares
``sha256(password + salt)`` against the ``ADMIN_PASSWORD_HASH``
environment variable.  This script prints the value to put there
for a new password.  It does not read or reveal any existing
password.

Usage:
    python hash_admin_password.py --salt "SomeLongRandomSalt" --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
If --salt is omitted, the currently configured ADMIN_SALT is used.
"""

import argparse
import getpass
import sys

from coaching_api.app.core.config import settings
from coaching_api.app.core.security import hash_password


def main():
    ap = argparse.ArgumentParser(description="Print ADMIN_PASSWORD_HASH for a new admin password.")
    ap.add_argument("--salt", default=settings.admin_salt, help="Salt appended to the password (default: ADMIN_SALT)")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args()

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)
    if not args.salt:
        print("[!] Empty salt is not allowed.", file=sys.stderr)
        sys.exit(1)

    print(f"ADMIN_SALT={args.salt}")
    print(f"ADMIN_PASSWORD_HASH={hash_password(new_password, args.salt)}")


if __name__ == "__main__":
    main()

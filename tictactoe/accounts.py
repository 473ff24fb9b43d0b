"""Registered users, password hashing and password-strength rules."""

from __future__ import annotations

import hashlib
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Dict

log = logging.getLogger(__name__)

DEFAULT_USERS_FILE = "registered_users.json"


class PasswordStrength(str, Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"


class RegistrationError(ValueError):
    """Raised when a new account cannot be created."""


class AuthenticationError(Exception):
    """Raised when a login attempt fails."""


def hash_password(password: str) -> str:
    """Return the hex SHA-256 digest of the UTF-8 encoded password."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def check_password_strength(password: str) -> PasswordStrength:
    """Rate a password by its length and the kinds of characters it holds."""
    has_upper = any("A" <= ch <= "Z" for ch in password)
    has_lower = any("a" <= ch <= "z" for ch in password)
    has_digit = any("0" <= ch <= "9" for ch in password)

    if len(password) < 6 or not (has_upper or has_lower or has_digit):
        return PasswordStrength.WEAK
    if len(password) < 8 or not (has_upper and has_lower and has_digit):
        return PasswordStrength.MEDIUM
    return PasswordStrength.STRONG


class UserRegistry:
    """Usernames mapped to password hashes, kept in a JSON object on disk."""

    def __init__(self, path: str | Path = DEFAULT_USERS_FILE) -> None:
        self.path = Path(path)
        self.users: Dict[str, str] = {}
        self.load()

    def load(self) -> None:
        """Read the users file; a missing or malformed file leaves the registry as is."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log.debug("No %s found, starting with empty list", self.path)
            return
        try:
            data = json.loads(text)
        except ValueError:
            data = None
        if not isinstance(data, dict):
            log.debug("Invalid JSON format in %s", self.path)
            return
        self.users = {
            name: value if isinstance(value, str) else "" for name, value in data.items()
        }

    def save(self) -> None:
        """Write every registered user to the users file."""
        self.path.write_text(
            json.dumps(self.users, indent=4, sort_keys=True, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )

    def is_username_taken(self, username: str) -> bool:
        return username in self.users

    def add_user(self, username: str, hashed_password: str) -> None:
        self.users[username] = hashed_password

    def authenticate(self, username: str, password: str) -> str:
        """Check the credentials and return the trimmed username on success."""
        username = username.strip()
        password = password.strip()
        if not username or not password:
            raise AuthenticationError("Username and password are required.")
        stored = self.users.get(username)
        if stored is None or stored != hash_password(password):
            raise AuthenticationError("Invalid username or password.")
        return username

    def register(
        self,
        username: str,
        password: str,
        confirm_password: str,
        accept_medium: bool = False,
    ) -> None:
        """Create an account and save the registry.

        A medium-strength password is refused unless ``accept_medium`` is set.
        """
        username = username.strip()
        password = password.strip()
        confirm_password = confirm_password.strip()

        if not username or not password or not confirm_password:
            raise RegistrationError("All fields are required.")
        if password != confirm_password:
            raise RegistrationError("Passwords do not match.")

        strength = check_password_strength(password)
        if strength is PasswordStrength.WEAK:
            raise RegistrationError("Password is too weak. Use a stronger password.")
        if strength is PasswordStrength.MEDIUM and not accept_medium:
            raise RegistrationError("Password is medium strength.")

        if self.is_username_taken(username):
            raise RegistrationError("USERNAME ALREADY EXISTS!")

        self.add_user(username, hash_password(password))
        self.save()
import json

import pytest

from tictactoe.accounts import (
    AuthenticationError,
    PasswordStrength,
    RegistrationError,
    UserRegistry,
    check_password_strength,
    hash_password,
)

strong_password = "password".capitalize() + str(1)


@pytest.fixture
def registry(tmp_path):
    return UserRegistry(tmp_path / "users.json")


def test_hash_password_known_value():
    assert hash_password("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_hash_password_is_hex_and_deterministic():
    digest = hash_password("secret")
    assert len(digest) == 64
    assert all(ch in "0123456789abcdef" for ch in digest)
    assert hash_password("secret") == digest
    assert hash_password("token") != digest


def test_password_strength_levels():
    assert check_password_strength("token") is PasswordStrength.WEAK
    assert check_password_strength("secret") is PasswordStrength.MEDIUM
    assert check_password_strength("password") is PasswordStrength.MEDIUM
    assert check_password_strength(strong_password) is PasswordStrength.STRONG
    assert check_password_strength("") is PasswordStrength.WEAK


def test_register_and_authenticate(registry):
    registry.register("alice", strong_password, strong_password)
    assert registry.is_username_taken("alice")
    assert registry.users["alice"] == hash_password(strong_password)
    assert registry.authenticate("alice", strong_password) == "alice"


def test_register_trims_fields(registry):
    registry.register("  alice  ", " " + strong_password, strong_password + " ")
    assert registry.is_username_taken("alice")
    assert registry.authenticate(" alice ", strong_password) == "alice"


def test_registry_persists(tmp_path):
    path = tmp_path / "users.json"
    UserRegistry(path).register("alice", strong_password, strong_password)
    reloaded = UserRegistry(path)
    assert reloaded.authenticate("alice", strong_password) == "alice"
    assert json.loads(path.read_text(encoding="utf-8")) == {"alice": hash_password(strong_password)}


@pytest.mark.parametrize(
    "username,first,second",
    [("", strong_password, strong_password), ("alice", "", strong_password), ("alice", strong_password, "   ")],
)
def test_register_requires_all_fields(registry, username, first, second):
    with pytest.raises(RegistrationError, match="All fields are required."):
        registry.register(username, first, second)
    assert registry.users == {}


def test_register_mismatch(registry):
    with pytest.raises(RegistrationError, match="Passwords do not match."):
        registry.register("alice", strong_password, "password")


def test_register_weak(registry):
    with pytest.raises(RegistrationError, match="too weak"):
        registry.register("alice", "token", "token")
    assert not registry.is_username_taken("alice")


def test_register_medium_needs_acceptance(registry):
    with pytest.raises(RegistrationError, match="medium strength"):
        registry.register("alice", "password", "password")
    assert not registry.is_username_taken("alice")
    registry.register("alice", "password", "password", True)
    assert registry.authenticate("alice", "password") == "alice"


def test_register_duplicate(registry):
    registry.register("alice", strong_password, strong_password)
    with pytest.raises(RegistrationError, match="USERNAME ALREADY EXISTS!"):
        registry.register("alice", strong_password, strong_password)


def test_authenticate_failures(registry):
    registry.register("alice", strong_password, strong_password)
    with pytest.raises(AuthenticationError, match="Invalid username or password."):
        registry.authenticate("alice", "secret")
    with pytest.raises(AuthenticationError, match="Invalid username or password."):
        registry.authenticate("bob", strong_password)
    with pytest.raises(AuthenticationError, match="required"):
        registry.authenticate("alice", "   ")


def test_add_user_then_save_and_load(tmp_path):
    path = tmp_path / "users.json"
    registry = UserRegistry(path)
    registry.add_user("bob", hash_password("secret"))
    registry.save()
    assert UserRegistry(path).users == {"bob": hash_password("secret")}


@pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
def test_load_ignores_malformed_file(tmp_path, content):
    path = tmp_path / "users.json"
    path.write_text(content, encoding="utf-8")
    assert UserRegistry(path).users == {}


def test_load_missing_file_is_empty(tmp_path):
    registry = UserRegistry(tmp_path / "absent.json")
    assert registry.users == {}
    assert not registry.is_username_taken("alice")
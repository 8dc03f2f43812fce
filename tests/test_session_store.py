import json

import pytest

from ims_frontend.schemas.auth import Session, User, UserRole
from ims_frontend.services.session_store import TOKEN_KEY, USER_KEY, SessionStore
from ims_frontend.services.storage import FileStorage
from ims_frontend.services.theme_service import ThemeService


@pytest.fixture
def storage(tmp_path):
    return FileStorage(tmp_path / "state.json")


def _session():
    user = User(id=7, username="admin", role=UserRole.ADMIN, full_name="System Administrator")
    return Session(token="abc", user=user)


def test_storage_missing_file_is_empty(storage):
    assert storage.get_item("token") is None
    storage.remove_item("token")
    assert not storage.path.exists()


def test_storage_round_trips_values(storage):
    storage.set_item("theme", "dark")
    storage.update({"token": "t", "user": "{}"})
    assert storage.get_item("theme") == "dark"
    assert storage.get_item("token") == "t"
    storage.remove_item("token", "user")
    assert json.loads(storage.path.read_text()) == {"theme": "dark"}


def test_storage_ignores_corrupt_file(storage):
    storage.path.write_text("{not json")
    assert storage.get_item("token") is None
    storage.set_item("theme", "light")
    assert storage.get_item("theme") == "light"


def test_save_writes_token_and_user_together(storage):
    store = SessionStore(storage)
    store.save(_session())

    assert storage.get_item(TOKEN_KEY) == "abc"
    user = json.loads(storage.get_item(USER_KEY))
    assert user["fullName"] == "System Administrator"
    assert user["role"] == "ADMIN"
    assert store.token == "abc"


def test_restore_from_storage(storage):
    SessionStore(storage).save(_session())

    store = SessionStore(storage)
    session = store.restore()
    assert session is not None
    assert session.user.username == "admin"
    assert store.user.full_name == "System Administrator"


def test_restore_with_unparseable_user_clears_both_keys(storage):
    storage.update({TOKEN_KEY: "abc", USER_KEY: "not-json"})

    store = SessionStore(storage)
    assert store.restore() is None
    assert store.session is None
    assert storage.get_item(TOKEN_KEY) is None
    assert storage.get_item(USER_KEY) is None


def test_restore_with_token_only_is_signed_out(storage):
    storage.set_item(TOKEN_KEY, "abc")
    store = SessionStore(storage)
    assert store.restore() is None
    assert store.token is None


def test_clear_keeps_theme(storage):
    store = SessionStore(storage)
    store.save(_session())
    storage.set_item("theme", "dark")

    store.clear()
    assert store.user is None
    assert storage.get_item(TOKEN_KEY) is None
    assert storage.get_item("theme") == "dark"


def test_theme_defaults_and_toggles(storage):
    theme = ThemeService(storage)
    assert theme.theme == "light"
    assert not theme.is_dark_mode

    assert theme.toggle() == "dark"
    assert ThemeService(storage).is_dark_mode
    assert theme.toggle() == "light"


def test_theme_ignores_unknown_stored_value(storage):
    storage.set_item("theme", "purple")
    assert ThemeService(storage, default="dark").theme == "dark"

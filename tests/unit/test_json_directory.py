"""
Unit tests for the JSON file user directory.
"""

import asyncio
import json
import pytest
from lemonqwest_auth.adapters.json_directory import JsonFileUserDirectoryAdapter
from lemonqwest_auth.domain.user import UserRole
from lemonqwest_auth.domain.errors import UserDirectoryError, DuplicatePinError


def write_users(path, users):
    path.write_text(json.dumps({"users": users}), encoding="utf-8")


@pytest.fixture
def users_file(tmp_path, caregiver, child):
    path = tmp_path / "users.json"
    write_users(path, [caregiver.to_dict(include_pin=True), child.to_dict(include_pin=True)])
    return path


@pytest.mark.asyncio
async def test_lookups(users_file, caregiver, child):
    directory = JsonFileUserDirectoryAdapter(users_file)

    assert await directory.find_by_id("cg_1") == caregiver
    assert await directory.find_by_pin("1234") == caregiver
    assert await directory.find_by_pin("9999") is None
    assert await directory.find_by_role(UserRole.CHILD) == child


@pytest.mark.asyncio
async def test_missing_file_is_empty(tmp_path):
    directory = JsonFileUserDirectoryAdapter(tmp_path / "nope.json")

    assert await directory.find_by_role(UserRole.CHILD) is None
    assert await directory.find_by_pin("1234") is None


@pytest.mark.asyncio
async def test_corrupt_file(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(UserDirectoryError):
        await JsonFileUserDirectoryAdapter(path).find_by_id("cg_1")


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [
    {"users": None},
    {"users": ["cg_1"]},
    {"users": [["cg_1", "Parent"]]},
    ["not", "an", "object"],
])
async def test_malformed_users_structure(tmp_path, content):
    """Valid JSON with the wrong shape is a directory error."""
    path = tmp_path / "users.json"
    path.write_text(json.dumps(content), encoding="utf-8")

    with pytest.raises(UserDirectoryError):
        await JsonFileUserDirectoryAdapter(path).find_by_role(UserRole.CHILD)


@pytest.mark.asyncio
async def test_bad_pin_format_in_file(tmp_path):
    path = tmp_path / "users.json"
    write_users(path, [{"user_id": "cg_1", "name": "Parent", "role": "caregiver", "pin": "12"}])

    with pytest.raises(UserDirectoryError):
        await JsonFileUserDirectoryAdapter(path).find_by_id("cg_1")


@pytest.mark.asyncio
async def test_duplicate_pins_in_file(tmp_path):
    path = tmp_path / "users.json"
    write_users(path, [
        {"user_id": "cg_1", "name": "A", "role": "caregiver", "pin": "1234"},
        {"user_id": "cg_2", "name": "B", "role": "caregiver", "pin": "1234"},
    ])

    with pytest.raises(DuplicatePinError):
        await JsonFileUserDirectoryAdapter(path).find_by_pin("1234")


@pytest.mark.asyncio
async def test_cached_until_reload(users_file, child):
    directory = JsonFileUserDirectoryAdapter(users_file)
    assert await directory.find_by_role(UserRole.CHILD) == child

    write_users(users_file, [])
    assert await directory.find_by_role(UserRole.CHILD) == child

    directory.reload()
    assert await directory.find_by_role(UserRole.CHILD) is None


@pytest.mark.asyncio
async def test_file_read_off_event_loop(users_file, caregiver, monkeypatch):
    """The users file is read through asyncio.to_thread."""
    calls = []
    real_to_thread = asyncio.to_thread

    async def tracking_to_thread(func, *args, **kwargs):
        calls.append(func)
        return await real_to_thread(func, *args, **kwargs)

    monkeypatch.setattr("lemonqwest_auth.adapters.json_directory.asyncio.to_thread", tracking_to_thread)
    directory = JsonFileUserDirectoryAdapter(users_file)

    assert await directory.find_by_id("cg_1") == caregiver
    assert await directory.find_by_pin("1234") == caregiver
    assert len(calls) == 1

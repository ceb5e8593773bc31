from __future__ import annotations

import dataclasses
import sys
from pathlib import Path

import pytest

from koa_api.config import InvocationContext, launched_from_cmd


def test_from_args_derives_name_from_destination(tmp_path: Path):
    destination = tmp_path / "Orders Service"
    context = InvocationContext.from_args(destination, git=True)

    assert context.path == str(destination)
    assert context.name == "orders-service"
    assert context.git is True
    assert context.force is False


def test_from_args_uses_current_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    workdir = tmp_path / "billing"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    context = InvocationContext.from_args()

    assert context.path == "."
    assert context.name == "billing"


def test_from_args_falls_back_to_default_name(tmp_path: Path):
    context = InvocationContext.from_args(tmp_path / "@@@")
    assert context.name == "koa-api"


def test_from_args_keeps_destination_text(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)

    context = InvocationContext.from_args("./Orders App/")

    assert context.path == "./Orders App/"
    assert context.name == "orders-app"


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_from_args_names_symlink_after_itself(tmp_path: Path):
    storage = tmp_path / "storage-xyz"
    storage.mkdir()
    link = tmp_path / "orders"
    link.symlink_to(storage, target_is_directory=True)

    context = InvocationContext.from_args(link)

    assert context.name == "orders"


def test_context_is_immutable(tmp_path: Path):
    context = InvocationContext.from_args(tmp_path)
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.force = True  # type: ignore[misc]


@pytest.mark.parametrize(
    "platform, environ, expected",
    [
        ("win32", {}, True),
        ("win32", {"_": "/usr/bin/bash"}, False),
        ("linux", {}, False),
        ("darwin", {"_": "/bin/zsh"}, False),
    ],
)
def test_launched_from_cmd(platform, environ, expected):
    assert launched_from_cmd(platform, environ) is expected

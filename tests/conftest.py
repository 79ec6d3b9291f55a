"""Pytest configuration and shared fixtures."""

from dataclasses import dataclass, field
from functools import partial
from io import StringIO

import pytest

from gcsnav.nav import NavigationController
from gcsnav.ui.primitives import strip_ansi
from gcsnav.ui.widgets import ScreenRenderer, confirm, prompt_text

from helpers import FakeStorage, ScriptedMenus, scripted


@dataclass
class NavHarness:
    storage: FakeStorage
    menus: ScriptedMenus
    out: StringIO
    controller: NavigationController = field(repr=False)

    @property
    def screen(self) -> str:
        """Everything written so far, colors removed."""
        return strip_ansi(self.out.getvalue())


@pytest.fixture
def make_storage():
    """Factory for FakeStorage backends."""
    return FakeStorage


@pytest.fixture
def make_navigator(tmp_path):
    """
    Build a NavigationController wired to fakes.

    actions: one scripted answer per menu shown (see helpers.choose etc.)
    lines: answers to text prompts ("" cancels)
    keys: answers to yes/no prompts ("y", "n", ...)
    Downloads land in tmp_path.
    """
    def factory(objects=None, actions=(), lines=(), keys=(), max_items=30, bucket="assets"):
        storage = FakeStorage(objects)
        menus = ScriptedMenus(actions)
        out = StringIO()
        controller = NavigationController(
            storage,
            bucket,
            max_items=max_items,
            renderer=ScreenRenderer(out=out),
            prompt_factory=menus,
            ask_text=partial(prompt_text, read_line=scripted(lines), out=out),
            ask_confirm=partial(confirm, read_key=scripted(keys), out=out),
            download_dir=tmp_path,
        )
        return NavHarness(storage, menus, out, controller)
    return factory


@pytest.fixture
def gcsnav_home(tmp_path, monkeypatch):
    """Isolated global config dir and an empty working directory."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("GCSNAV_HOME", str(home))
    monkeypatch.chdir(work)
    return home

"""
Test doubles shared by the test modules: an in-memory storage backend and
scripted menu answers.
"""

from dataclasses import dataclass
from pathlib import Path

from gcsnav.core.errors import DeleteError, ListingError, TransferError
from gcsnav.ui.primitives import strip_ansi
from gcsnav.ui.widgets import Back, Delete, Escape, MenuItem, Select


# ============================================================================
# In-memory storage backend
# ============================================================================

class FakeStorage:
    """
    Object store kept in a dict of {key: size}, listed the way the
    Cloud Storage JSON API lists with delimiter "/".

    Set list_error / transfer_error / delete_error to make the matching
    calls fail with that message.
    """

    def __init__(self, objects: dict = None):
        self.objects = dict(objects or {})
        self.calls = []
        self.list_error = None
        self.transfer_error = None
        self.delete_error = None

    def list_objects(self, bucket, prefix):
        self.calls.append(("list", bucket, prefix))
        if self.list_error:
            raise ListingError(self.list_error)

        prefixes, items = [], []
        for name, size in self.objects.items():
            if not name.startswith(prefix):
                continue
            rest = name[len(prefix):]
            cut = rest.find("/")
            if cut >= 0:
                sub = prefix + rest[:cut + 1]
                if sub not in prefixes:
                    prefixes.append(sub)
            else:
                items.append({"name": name, "size": str(size)})
        return {"prefixes": prefixes, "items": items}

    def download_object(self, bucket, remote_path, local_path):
        self.calls.append(("download", bucket, remote_path, Path(local_path)))
        if self.transfer_error:
            raise TransferError(self.transfer_error)
        Path(local_path).write_bytes(b"x" * self.objects[remote_path])
        return Path(local_path)

    def upload_object(self, bucket, local_path, remote_path):
        self.calls.append(("upload", bucket, str(local_path), remote_path))
        if self.transfer_error:
            raise TransferError(self.transfer_error)
        path = Path(local_path)
        if not path.is_file():
            raise TransferError(f"File not found: {path}")
        self.objects[remote_path] = path.stat().st_size

    def create_folder(self, bucket, prefix):
        self.calls.append(("create_folder", bucket, prefix))
        if self.transfer_error:
            raise TransferError(self.transfer_error)
        self.objects[prefix] = 0

    def delete_object(self, bucket, path):
        self.calls.append(("delete", bucket, path))
        if self.delete_error:
            raise DeleteError(self.delete_error)
        if path not in self.objects:
            raise DeleteError(f"HTTP 404: No such object: {bucket}/{path}")
        del self.objects[path]

    def delete_objects_by_prefix(self, bucket, prefix):
        self.calls.append(("delete_prefix", bucket, prefix))
        if self.delete_error:
            raise DeleteError(self.delete_error)
        names = [name for name in self.objects if name.startswith(prefix)]
        for name in names:
            del self.objects[name]
        return len(names)


# ============================================================================
# Scripted menus
# ============================================================================

def find_item(prompt, label_start: str) -> MenuItem:
    """First selectable row whose plain label starts with label_start."""
    for item in prompt.items:
        if isinstance(item, MenuItem) and strip_ansi(item.label).startswith(label_start):
            return item
    labels = [strip_ansi(i.label) for i in prompt.items]
    raise AssertionError(f"No menu item starting with {label_start!r} in {labels}")


def choose(label_start: str):
    return lambda prompt: Select(find_item(prompt, label_start).value)


def delete(label_start: str):
    def action(prompt):
        value = find_item(prompt, label_start).value
        assert prompt.delete_allowed is not None and prompt.delete_allowed(value)
        return Delete(value)
    return action


def back():
    def action(prompt):
        assert prompt.back_enabled, "Back pressed while going back is disabled"
        return Back()
    return action


def escape():
    return lambda prompt: Escape()


@dataclass
class RecordedPrompt:
    """Stand-in for KeyEventPrompt that answers with a scripted action."""
    message: str
    items: list
    back_enabled: bool = False
    delete_allowed: object = None
    action: object = None

    def run(self):
        return self.action(self)


class ScriptedMenus:
    """Prompt factory: each menu shown takes the next scripted action."""

    def __init__(self, actions):
        self.actions = list(actions)
        self.prompts: list[RecordedPrompt] = []

    def __call__(self, message="", items=None, back_enabled=False, delete_allowed=None, **_):
        if not self.actions:
            raise AssertionError(f"Menu shown with no scripted action left: {message}")
        prompt = RecordedPrompt(message, list(items or []), back_enabled, delete_allowed,
                                self.actions.pop(0))
        self.prompts.append(prompt)
        return prompt


def scripted(values):
    """Callable returning the next value on each call (ignores its arguments)."""
    it = iter(values)
    return lambda *args, **kwargs: next(it)


def labels_of(prompt) -> list[str]:
    """Plain labels of every row a prompt was built with."""
    return [strip_ansi(item.label) for item in prompt.items]

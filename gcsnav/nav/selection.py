"""
Pre-navigation pickers: configuration and bucket.
"""

from typing import Callable, Optional

from ..config.gcp import BucketInfo
from ..ui.widgets import KeyEventPrompt, MenuItem, Select, ScreenRenderer


CONFIG_PROMPT = "Select configuration (ESC exit):"
BUCKET_PROMPT = "Select bucket (ESC exit):"


def select_configuration(
    names: list[str],
    prompt_factory: Callable[..., KeyEventPrompt] = KeyEventPrompt,
) -> Optional[str]:
    """
    Pick a configuration by name.

    A single configuration is used without asking. Returns None if there is
    nothing to pick or the user pressed ESC.
    """
    if not names:
        return None
    if len(names) == 1:
        return names[0]

    prompt = prompt_factory(
        message=CONFIG_PROMPT,
        items=[MenuItem(name, name) for name in names],
    )
    result = prompt.run()
    return result.value if isinstance(result, Select) else None


def select_bucket(
    buckets: list[BucketInfo],
    prompt_factory: Callable[..., KeyEventPrompt] = KeyEventPrompt,
    renderer: Optional[ScreenRenderer] = None,
) -> Optional[str]:
    """
    Pick the bucket to browse, returning its name.

    Several buckets are offered as "N. displayName (name)"; ESC returns None.
    The chosen bucket stays on screen as "? Select bucket (ESC exit): name".
    """
    if not buckets:
        return None

    renderer = renderer or ScreenRenderer()

    if len(buckets) == 1:
        name = buckets[0].name
        renderer.write_inline(f"? {BUCKET_PROMPT} {name}")
        return name

    items = [
        MenuItem(f"{i}. {bucket.display_name} ({bucket.name})", bucket.name)
        for i, bucket in enumerate(buckets, 1)
    ]
    result = prompt_factory(message=BUCKET_PROMPT, items=items, back_enabled=False).run()
    if not isinstance(result, Select):
        return None

    renderer.overwrite_last_menu_line(f"? {BUCKET_PROMPT} {result.value}")
    return result.value

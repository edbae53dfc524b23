from __future__ import annotations

from importlib import resources


def asset_path(relative: str) -> str:
    """Return an absolute path for a file shipped inside ``deskcal.assets``."""

    return str(resources.files(__name__).joinpath(relative))

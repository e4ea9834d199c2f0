import importlib
import os
from typing import Dict, Tuple

SRC_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def get_apps() -> Dict[str, str]:
    apps_dir = os.path.join(SRC_DIR, "apps")
    return {
        name: os.path.join(apps_dir, name)
        for name in sorted(os.listdir(apps_dir))
        if os.path.isdir(os.path.join(apps_dir, name)) and not name.startswith("__")
    }


def get_app_modules(child_name: str) -> Dict[str, Dict[str, str]]:
    """Return the dotted module names found under apps/<app>/<child_name>/."""
    result: Dict[str, Dict[str, str]] = {}

    for app_name, app_path in get_apps().items():
        child_dir = os.path.join(app_path, child_name)
        if not os.path.isdir(child_dir):
            continue
        result[app_name] = {
            file[:-3]: f"src.apps.{app_name}.{child_name}.{file[:-3]}"
            for file in sorted(os.listdir(child_dir))
            if file.endswith(".py") and not file.startswith("__")
        }

    return result


def import_app_modules(child_name: str) -> None:
    for modules in get_app_modules(child_name).values():
        for module in modules.values():
            importlib.import_module(module)


def page_window(now_page: int, total_pages: int) -> Tuple[int, int]:
    """Range of page links shown around the current (1-based) page.

    Up to four pages before and five after, clamped to [1, total_pages].
    With no pages at all the end is 0 and the range is empty.
    """
    start_page = max(now_page - 4, 1)
    end_page = min(now_page + 5, total_pages)
    return start_page, end_page

from valet.config import save_preference
from gui.utils.logging import log


def save_settings(values: dict):
    for key, value in values.items():
        save_preference(key, value)
    log(f"Saved {len(values)} settings")


def set_disable_animations(disabled: bool) -> None:
    save_settings({"VALET_DISABLE_ANIMATIONS": "1" if disabled else "0"})

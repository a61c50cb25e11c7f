import configparser
from pathlib import Path

from klondike_ui.ui_config import DEFAULT_STOCK_PREVIEW, STOCK_PREVIEW_ORDER, SUIT_STYLE_ORDER

SETTINGS_PATH = Path(__file__).with_name("settings.ini")

DEFAULT_SETTINGS = {
    "seed": "",
    "stock_preview": str(DEFAULT_STOCK_PREVIEW),
    "suit_style": "symbols",
}


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})

    raw_seed = str(data.get("seed") or "").strip()
    try:
        data["seed"] = str(int(raw_seed)) if raw_seed else ""
    except ValueError:
        data["seed"] = DEFAULT_SETTINGS["seed"]

    try:
        preview = int(data["stock_preview"])
    except (TypeError, ValueError):
        preview = DEFAULT_STOCK_PREVIEW
    if preview not in STOCK_PREVIEW_ORDER:
        preview = DEFAULT_STOCK_PREVIEW
    data["stock_preview"] = str(preview)

    if data["suit_style"] not in SUIT_STYLE_ORDER:
        data["suit_style"] = DEFAULT_SETTINGS["suit_style"]
    return data


def load_settings():
    parser = configparser.ConfigParser()
    if not SETTINGS_PATH.exists():
        return dict(DEFAULT_SETTINGS)
    try:
        parser.read(SETTINGS_PATH, encoding="utf-8")
    except configparser.Error:
        return dict(DEFAULT_SETTINGS)
    if "ui" not in parser:
        return dict(DEFAULT_SETTINGS)
    raw = {key: parser["ui"].get(key, default) for key, default in DEFAULT_SETTINGS.items()}
    return _sanitize(raw)


def save_settings(settings):
    data = _sanitize(settings)
    parser = configparser.ConfigParser()
    parser["ui"] = data
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with SETTINGS_PATH.open("w", encoding="utf-8") as f:
        parser.write(f)


def seed_from(settings) -> int | None:
    seed = _sanitize(settings)["seed"]
    return int(seed) if seed else None

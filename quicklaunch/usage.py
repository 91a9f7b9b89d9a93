"""Launch counts and style overrides kept in ~/.config/launcher.conf."""
import logging
import os

from .errors import ConfigWriteError

logger = logging.getLogger(__name__)

STYLE_ATTRIBUTES = (
    "title", "comment", "background", "highlight", "match",
    "regular", "bold", "smallregular", "smallbold", "large",
)

DEFAULT_STYLE = {
    "title": "#111111",
    "comment": "#999999",
    "background": "#ffffff",
    "highlight": "#f8c291",
    "match": "#111111",
    "regular": "Ubuntu,sans-11",
    "bold": "Ubuntu,sans-11:bold",
    "smallregular": "Ubuntu,sans-10",
    "smallbold": "Ubuntu,sans-10:bold",
    "large": "Ubuntu,sans-20:light",
}

FONT_WEIGHTS = {"light": 300, "regular": 400, "medium": 500, "bold": 700}


def parse_font(value):
    """Split an Xft-style font name such as "Ubuntu,sans-11:bold".

    Returns (family, size, weight); size is None when the name has none.
    """
    name, _, weight = value.partition(":")
    family, sep, size = name.rpartition("-")
    if not sep or not size.isdigit():
        return name, None, weight
    return family, int(size), weight


def pango_font(value):
    family, size, weight = parse_font(value)
    return " ".join(str(part) for part in (family, weight, size) if part)


def load_usage(config_path, catalog, style=None):
    """Overlay saved launch counts onto the catalog and return the style map.

    Keys containing a path separator are application ids, everything else
    is a style attribute. A bad counter only skips its own line.
    """
    style = dict(DEFAULT_STYLE if style is None else style)
    if not os.path.exists(config_path):
        return style

    # ids are file paths and may hold bytes that are not valid UTF-8
    with open(config_path, encoding="utf-8", errors="surrogateescape") as f:
        for line in f:
            key, sep, value = line.rstrip("\n").rpartition("=")
            if not sep:
                continue

            if os.sep not in key:
                if key in STYLE_ATTRIBUTES:
                    style[key] = value
                else:
                    logger.debug("Ignoring unknown style attribute %r", key)
                continue

            if not (value.isascii() and value.isdigit()):
                logger.warning("Invalid launch count for %s: %r", key, value)
                continue
            count = int(value)

            for app in catalog:
                if app.id == key:
                    app.launch_count = count
                    break

    return style


def save_usage(config_path, catalog, style):
    lines = ["[Style]"]
    for attr in STYLE_ATTRIBUTES:
        value = style.get(attr, DEFAULT_STYLE[attr])
        if value != DEFAULT_STYLE[attr]:
            lines.append(f"{attr}={value}")

    lines.append("")
    lines.append("[Application Launch Counts]")
    for app in catalog:
        if app.launch_count > 0:
            lines.append(f"{app.id}={app.launch_count}")

    # encoding errors must surface before the existing file is truncated
    try:
        data = ("\n".join(lines) + "\n").encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError as e:
        raise ConfigWriteError(config_path, e) from e

    try:
        with open(config_path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise ConfigWriteError(config_path, e) from e


def record_launch(config_path, catalog, app_id, style):
    app = catalog.get(app_id)
    if app is None:
        raise KeyError(app_id)
    app.launch_count += 1
    save_usage(config_path, catalog, style)
    logger.info("Launch count for %s is now %d", app_id, app.launch_count)
    return app.launch_count

"""Reading application descriptors (.desktop files) into a catalog."""
import logging
from pathlib import Path

from .models import Application, Catalog, Keyword

logger = logging.getLogger(__name__)

NAME_WEIGHT = 1000
TEXT_WEIGHT = 1


def split_words(text):
    # Split on single spaces: "a  b" keeps an empty token between the words,
    # a trailing space does not produce one.
    words = text.split(" ")
    if words[-1] == "":
        words.pop()
    return words


def parse_descriptor(path):
    path = Path(path)
    app = Application(id=str(path))

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not app.name and line.startswith("Name="):
                app.name = line[5:]
            if not app.generic_name and line.startswith("GenericName="):
                app.generic_name = line[12:]
            if not app.comment and line.startswith("Comment="):
                app.comment = line[8:]
            if not app.command_line and line.startswith("Exec=") and line[5:]:
                app.command_line = line[5:]
            # Keywords only count while no Exec line has been seen yet
            if not app.command_line and line.startswith("Keywords="):
                for word in split_words(line[9:].lower()):
                    app.keywords.append(Keyword(word, TEXT_WEIGHT))

    for word in split_words(app.name.lower()):
        app.keywords.append(Keyword(word, NAME_WEIGHT))
    for word in split_words((app.generic_name + " " + app.comment).lower()):
        app.keywords.append(Keyword(word, TEXT_WEIGHT))

    return app


def load_catalog(directories):
    catalog = Catalog()

    for directory in directories:
        directory = Path(directory)
        if not directory.is_dir():
            continue

        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
            continue

        for entry in entries:
            if not entry.is_file():
                continue
            try:
                catalog.add(parse_descriptor(entry))
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("Skipping unreadable descriptor %s: %s", entry, e)

    logger.info("Indexed %d applications", len(catalog))
    return catalog

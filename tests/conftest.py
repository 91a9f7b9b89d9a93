import pytest

from quicklaunch.models import Application, Catalog, Keyword


@pytest.fixture
def app_dir(tmp_path):
    directory = tmp_path / "applications"
    directory.mkdir()
    return directory


def write_desktop(directory, name, text):
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def make_app(app_id, name="", keywords=(), launch_count=0, **fields):
    return Application(
        id=app_id,
        name=name,
        keywords=[Keyword(word, weight) for word, weight in keywords],
        launch_count=launch_count,
        **fields,
    )


@pytest.fixture
def firefox_catalog():
    return Catalog([
        make_app(
            "/a/firefox.desktop",
            name="Firefox",
            keywords=[("firefox", 1000), ("web", 1000), ("browser", 1000)],
        )
    ])

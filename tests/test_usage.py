import os

import pytest

from quicklaunch.errors import ConfigWriteError
from quicklaunch.models import Catalog
from quicklaunch.usage import DEFAULT_STYLE, load_usage, pango_font, parse_font, record_launch, save_usage

from conftest import make_app


@pytest.fixture
def catalog():
    return Catalog([make_app("/apps/a.desktop", name="A"), make_app("/apps/b.desktop", name="B")])


def test_missing_config_file_is_a_no_op(tmp_path, catalog):
    style = load_usage(tmp_path / "launcher.conf", catalog)

    assert style == DEFAULT_STYLE
    assert [app.launch_count for app in catalog] == [0, 0]


def test_save_then_load_round_trip(tmp_path, catalog):
    config = tmp_path / "launcher.conf"
    catalog.get("/apps/a.desktop").launch_count = 3
    save_usage(config, catalog, DEFAULT_STYLE)

    fresh = Catalog([make_app("/apps/a.desktop"), make_app("/apps/b.desktop")])
    load_usage(config, fresh)

    assert fresh.get("/apps/a.desktop").launch_count == 3
    assert fresh.get("/apps/b.desktop").launch_count == 0
    assert "/apps/b.desktop" not in config.read_text()


def test_save_writes_only_non_default_style(tmp_path, catalog):
    config = tmp_path / "launcher.conf"
    style = dict(DEFAULT_STYLE, background="#000000")
    catalog.get("/apps/b.desktop").launch_count = 7

    save_usage(config, catalog, style)

    assert config.read_text() == (
        "[Style]\n"
        "background=#000000\n"
        "\n"
        "[Application Launch Counts]\n"
        "/apps/b.desktop=7\n"
    )


def test_load_overrides_known_style_and_ignores_unknown(tmp_path, catalog):
    config = tmp_path / "launcher.conf"
    config.write_text("[Style]\nhighlight=#ff0000\nsparkles=yes\n")

    style = load_usage(config, catalog)

    assert style["highlight"] == "#ff0000"
    assert "sparkles" not in style
    assert style["title"] == DEFAULT_STYLE["title"]


def test_bad_counter_only_skips_its_line(tmp_path, catalog):
    config = tmp_path / "launcher.conf"
    config.write_text(
        "[Application Launch Counts]\n"
        "/apps/a.desktop=lots\n"
        "/apps/b.desktop=4\n"
        "/apps/unknown.desktop=9\n"
        "/apps/a.desktop=-2\n"
    )

    load_usage(config, catalog)

    assert catalog.get("/apps/a.desktop").launch_count == 0
    assert catalog.get("/apps/b.desktop").launch_count == 4


def test_key_is_split_at_last_equals_sign(tmp_path):
    config = tmp_path / "launcher.conf"
    config.write_text("/apps/odd=name.desktop=5\n")
    catalog = Catalog([make_app("/apps/odd=name.desktop")])

    load_usage(config, catalog)

    assert catalog.get("/apps/odd=name.desktop").launch_count == 5


def test_save_failure_raises_config_write_error(tmp_path, catalog):
    config = tmp_path / "missing" / "launcher.conf"

    with pytest.raises(ConfigWriteError) as excinfo:
        save_usage(config, catalog, DEFAULT_STYLE)

    assert excinfo.value.path == config
    assert isinstance(excinfo.value.cause, OSError)


def test_record_launch_increments_and_persists(tmp_path, catalog):
    config = tmp_path / "launcher.conf"

    assert record_launch(config, catalog, "/apps/a.desktop", DEFAULT_STYLE) == 1
    assert record_launch(config, catalog, "/apps/a.desktop", DEFAULT_STYLE) == 2
    assert "/apps/a.desktop=2\n" in config.read_text()


def test_record_launch_unknown_id(tmp_path, catalog):
    with pytest.raises(KeyError):
        record_launch(tmp_path / "launcher.conf", catalog, "/apps/nope.desktop", DEFAULT_STYLE)


def test_counter_must_be_plain_ascii_digits(tmp_path, catalog):
    config = tmp_path / "launcher.conf"
    config.write_text(
        "/apps/a.desktop=1_000\n"
        "/apps/a.desktop= 5\n"
        "/apps/a.desktop=٣\n"
        "/apps/b.desktop=08\n",
        encoding="utf-8",
    )

    load_usage(config, catalog)

    assert catalog.get("/apps/a.desktop").launch_count == 0
    assert catalog.get("/apps/b.desktop").launch_count == 8


def test_load_tolerates_bytes_that_are_not_utf8(tmp_path, catalog):
    config = tmp_path / "launcher.conf"
    config.write_bytes(b"[Style]\ntitle=#\xff\n/apps/b.desktop=3\n")

    load_usage(config, catalog)

    assert catalog.get("/apps/b.desktop").launch_count == 3


def test_launch_count_for_non_utf8_file_name_round_trips(tmp_path):
    config = tmp_path / "launcher.conf"
    cafe_id = os.fsdecode(b"/apps/caf\xe9.desktop")
    catalog = Catalog([make_app("/apps/ok.desktop"), make_app(cafe_id)])
    catalog.get("/apps/ok.desktop").launch_count = 5
    save_usage(config, catalog, DEFAULT_STYLE)

    assert record_launch(config, catalog, cafe_id, DEFAULT_STYLE) == 1

    raw = config.read_bytes()
    assert b"/apps/ok.desktop=5\n" in raw
    assert b"/apps/caf\xe9.desktop=1\n" in raw

    fresh = Catalog([make_app("/apps/ok.desktop"), make_app(cafe_id)])
    load_usage(config, fresh)
    assert fresh.get(cafe_id).launch_count == 1
    assert fresh.get("/apps/ok.desktop").launch_count == 5


def test_unencodable_id_keeps_existing_file(tmp_path):
    config = tmp_path / "launcher.conf"
    catalog = Catalog([make_app("/apps/ok.desktop", launch_count=5)])
    save_usage(config, catalog, DEFAULT_STYLE)
    before = config.read_bytes()
    catalog.add(make_app("/apps/bad\ud800.desktop", launch_count=1))

    with pytest.raises(ConfigWriteError):
        save_usage(config, catalog, DEFAULT_STYLE)

    assert config.read_bytes() == before


def test_parse_font_splits_family_size_and_weight():
    assert parse_font("Ubuntu,sans-11:bold") == ("Ubuntu,sans", 11, "bold")
    assert parse_font("Ubuntu,sans-20:light") == ("Ubuntu,sans", 20, "light")
    assert parse_font("DejaVu Sans Mono") == ("DejaVu Sans Mono", None, "")
    assert pango_font("Ubuntu,sans-10") == "Ubuntu,sans 10"
    assert pango_font(DEFAULT_STYLE["smallbold"]) == "Ubuntu,sans bold 10"

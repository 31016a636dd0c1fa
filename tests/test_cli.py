from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from furnidata import profiles
from furnidata.cli import cli


@pytest.fixture(autouse=True)
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "furnidata" / "config.toml"
    monkeypatch.setattr(profiles, "get_config_path", lambda: path)
    return path


@pytest.fixture
def xml_file(tmp_path, catalog_xml):
    path = tmp_path / "furnidata.xml"
    path.write_text(catalog_xml, encoding="utf-8")
    return path


def test_decode_table(xml_file):
    result = CliRunner().invoke(cli, ["decode", str(xml_file)])
    assert result.exit_code == 0, result.output
    assert "shelves_norja" in result.output
    assert "Poster" in result.output


def test_decode_json_from_stdin(rug_chunked):
    result = CliRunner().invoke(cli, ["decode", "-", "--format", "json"], input=rug_chunked)
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data[0]["class_id"] == "rug_normal"
    assert data[0]["is_buyout"] is True


def test_decode_csv_to_file(xml_file, tmp_path):
    out = tmp_path / "items.csv"
    result = CliRunner().invoke(cli, ["decode", str(xml_file), "-f", "csv", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "Wrote 3 items" in result.output
    assert out.read_text(encoding="utf-8").splitlines()[0].startswith("kind,id,class_id")


def test_show(xml_file):
    result = CliRunner().invoke(cli, ["show", "230", str(xml_file)])
    assert result.exit_code == 0, result.output
    assert "Item 230 (floor)" in result.output
    assert "'Blue Dragon Lamp'" in result.output
    assert "rare_dragonlamp'" in result.output


def test_show_missing(xml_file):
    result = CliRunner().invoke(cli, ["show", "999", str(xml_file)])
    assert result.exit_code == 0
    assert "Item 999 not found." in result.output


def test_stats(xml_file):
    result = CliRunner().invoke(cli, ["stats", str(xml_file)])
    assert result.exit_code == 0, result.output
    assert "Items: 3" in result.output
    assert "Rares: 1" in result.output


def test_fetch_with_hotel(monkeypatch, rug_chunked):
    seen = []

    def fake_fetch_text(url, **kwargs):
        seen.append(url)
        return rug_chunked

    monkeypatch.setattr("furnidata.fetch.fetch_text", fake_fetch_text)
    result = CliRunner().invoke(cli, ["fetch", "--hotel", "nl", "--fmt", "txt"])
    assert result.exit_code == 0, result.output
    assert seen == ["https://www.habbo.nl/gamedata/furnidata/0"]
    assert "rug_normal" in result.output


def test_fetch_url_and_hotel_conflict():
    result = CliRunner().invoke(cli, ["fetch", "https://x.test", "--hotel", "nl"])
    assert result.exit_code != 0
    assert "Cannot use both" in result.output


def test_fetch_without_source():
    result = CliRunner().invoke(cli, ["fetch"])
    assert result.exit_code != 0
    assert "No furnidata URL provided" in result.output


def test_fetch_error_is_reported(monkeypatch):
    from furnidata.fetch import FetchError

    def failing_fetch_text(url, **kwargs):
        raise FetchError(f"Failed to fetch {url}: boom")

    monkeypatch.setattr("furnidata.fetch.fetch_text", failing_fetch_text)
    result = CliRunner().invoke(cli, ["fetch", "https://x.test/furnidata"])
    assert result.exit_code == 1
    assert "boom" in result.output


def test_init_creates_profile(config_path):
    result = CliRunner().invoke(cli, ["init"], input="nl\nhttps://www.habbo.nl/gamedata/furnidata_xml/0\nn\n")
    assert result.exit_code == 0, result.output
    config = profiles.load_config()
    assert config.default_profile == "nl"
    assert config.profiles["nl"].url == "https://www.habbo.nl/gamedata/furnidata_xml/0"


def test_fetch_uses_profile(monkeypatch, config_path, rug_chunked):
    profiles.save_config(profiles.Config(
        default_profile="com",
        profiles={"com": profiles.Profile("com", "https://com.test"),
                  "nl": profiles.Profile("nl", "https://nl.test")},
    ))
    seen = []
    monkeypatch.setattr("furnidata.fetch.fetch_text", lambda url, **kw: seen.append(url) or rug_chunked)
    result = CliRunner().invoke(cli, ["--profile", "nl", "fetch"])
    assert result.exit_code == 0, result.output
    assert seen == ["https://nl.test"]

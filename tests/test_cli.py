"""Tests for routelocale.cli — CLI entrypoint and the expand command."""

import json
from pathlib import Path

import pytest

from routelocale.cli import main

ROUTES = [
    {"path": "/about", "name": "about", "component": "pages/about.vue"},
    {
        "path": "/users",
        "component": "pages/users.vue",
        "children": [{"path": ":id", "name": "users-id", "component": "pages/users/_id.vue"}],
    },
    {"path": "/old", "redirect": "/about"},
]


@pytest.fixture
def routes_file(tmp_path: Path) -> Path:
    path = tmp_path / "routes.json"
    path.write_text(json.dumps(ROUTES), encoding="utf-8")
    return path


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_expand_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["expand", "--help"])
        assert exc_info.value.code == 0

    def test_expand_missing_routes(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["expand"])
        assert exc_info.value.code == 2

    def test_bad_strategy_choice(self, routes_file: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["expand", str(routes_file), "--strategy", "sideways"])
        assert exc_info.value.code == 2

    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "routelocale" in capsys.readouterr().out


class TestExpandTable:
    def test_table(self, routes_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["expand", str(routes_file), "--locales", "en,fr", "--default-locale", "en", "--no-sort"])
        lines = capsys.readouterr().out.splitlines()

        assert lines[0].split() == ["NAME", "PATH", "REDIRECT"]
        assert lines[2].split() == ["about___en", "/about"]
        assert lines[3].split() == ["about___fr", "/fr/about"]
        # children are indented under their parent
        assert lines[5].split() == ["users-id___en", ":id"]
        assert lines[5].index(":id") > lines[4].index("/users")
        assert lines[-1].split() == ["-", "/old", "/about"]

    def test_config_file(self, routes_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "i18n.json"
        config.write_text(
            json.dumps({"defaultLocale": "en", "locales": ["en", "fr"], "strategy": "prefix"}),
            encoding="utf-8",
        )
        main(["expand", str(routes_file), "--config", str(config)])
        out = capsys.readouterr().out

        assert "/en/about" in out
        assert "/fr/about" in out

    def test_flags_override_config(
        self, routes_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "i18n.json"
        config.write_text(
            json.dumps({"defaultLocale": "en", "locales": ["en", "fr"], "strategy": "prefix"}),
            encoding="utf-8",
        )
        main(["expand", str(routes_file), "--config", str(config), "--strategy", "no_prefix"])
        out = capsys.readouterr().out

        assert "/en/about" not in out
        assert "/fr/about" not in out


class TestExpandJSON:
    def test_json_document(self, routes_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "expand",
                str(routes_file),
                "--locales",
                "en,fr",
                "--default-locale",
                "en",
                "--no-sort",
                "--json",
            ]
        )
        document = json.loads(capsys.readouterr().out)

        assert [r["path"] for r in document["localizedRoutes"]] == [
            "/about",
            "/fr/about",
            "/users",
            "/fr/users",
            "/old",
        ]
        assert document["localizedRoutes"][3]["children"] == [
            {"path": ":id", "name": "users-id___fr", "component": "pages/users/_id.vue"}
        ]
        assert document["customPathsMap"]["byName"]["about"]["fr"] == {
            "name": "about___fr",
            "path": "/fr/about",
        }
        assert len(document["customPathsMap"]["all"]) == 4


class TestExpandErrors:
    def test_missing_routes_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["expand", str(tmp_path / "missing.json"), "--locales", "en"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "routes.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["expand", str(path), "--locales", "en"])
        assert exc_info.value.code == 1

    def test_routes_not_a_list(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "routes.json"
        path.write_text(json.dumps({"path": "/"}), encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["expand", str(path), "--locales", "en"])
        assert exc_info.value.code == 1
        assert "expected a list of routes" in capsys.readouterr().err

    def test_no_locales(self, routes_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["expand", str(routes_file)])
        assert exc_info.value.code == 1
        assert "at least one locale" in capsys.readouterr().err

    def test_default_locale_not_configured(self, routes_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["expand", str(routes_file), "--locales", "en,fr", "--default-locale", "de"])
        assert exc_info.value.code == 1
        assert "'de' is not one of" in capsys.readouterr().err

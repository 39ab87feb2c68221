"""Tests for routeaudit.cli — entrypoint, ``check`` and ``routes``."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from routeaudit.cli import main

WriteFile = Callable[[str, str], Path]


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_check_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_check_missing_dir(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check"])
        assert exc_info.value.code == 2

    def test_routes_missing_dir(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "routeaudit" in captured.out


class TestCheck:
    def test_clean_exits_normally(
        self,
        routes_dir: Path,
        write_route_file: WriteFile,
        controllers_package: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_route_file("api_a.py", 'router.get("/a/{id}", {"uses": "FooController@bar"})\n')
        main(["check", str(routes_dir), "--controllers", controllers_package, "--no-color"])
        captured = capsys.readouterr()
        assert "0 defects" in captured.out

    def test_defects_exit_one(
        self,
        routes_dir: Path,
        write_route_file: WriteFile,
        controllers_package: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_route_file("api_a.py", 'router.get("/admin/b", {"uses": "BadController@baz"})\n')
        with pytest.raises(SystemExit) as exc_info:
            main(["check", str(routes_dir), "--controllers", controllers_package, "--no-color"])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "2 defects" in captured.out
        assert f'Class "{controllers_package}.BadController" does not exist' in captured.out

    def test_missing_routes_dir_exits_two(
        self,
        tmp_path: Path,
        controllers_package: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", str(tmp_path / "missing"), "--controllers", controllers_package])
        assert exc_info.value.code == 2
        assert "Error:" in capsys.readouterr().err

    def test_unknown_controller_package_exits_two(
        self, routes_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", str(routes_dir), "--controllers", "no_such_pkg_xyz"])
        assert exc_info.value.code == 2
        assert "not found" in capsys.readouterr().err

    def test_path_option_extends_sys_path(
        self,
        tmp_path: Path,
        routes_dir: Path,
        write_route_file: WriteFile,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(sys, "path", list(sys.path))
        package = tmp_path / "extra" / "cli_path_controllers"
        package.mkdir(parents=True)
        (package / "__init__.py").write_text("class HomeController:\n    def index(self): ...\n")
        write_route_file("api_home.py", 'router.get("/", {"uses": "HomeController@index"})\n')

        main([
            "check", str(routes_dir),
            "--controllers", "cli_path_controllers",
            "--path", str(tmp_path / "extra"),
            "--no-color",
        ])

        assert "0 defects" in capsys.readouterr().out
        sys.modules.pop("cli_path_controllers", None)


class TestLogging:
    def test_log_level_flows_through_config(
        self, routes_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[dict[str, object]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        main(["--log-level", "debug", "routes", str(routes_dir)])

        assert calls[0]["level"] == logging.DEBUG

    def test_default_level_is_warning(
        self, routes_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[dict[str, object]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        main(["routes", str(routes_dir)])

        assert calls[0]["level"] == logging.WARNING


class TestRoutes:
    def test_lists_routes(
        self,
        routes_dir: Path,
        write_route_file: WriteFile,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_route_file(
            "api_a.py",
            """
            router.get("/users/{id}", {"uses": "UserController@show"})
            router.post("/hooks", lambda request: None)
            """,
        )
        main(["routes", str(routes_dir)])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["METHOD", "PATH", "TARGET", "FILE"]
        assert "UserController@show" in out
        assert "<dynamic>" in out
        assert "api_a.py" in out

    def test_no_routes(self, routes_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", str(routes_dir)])
        assert "No routes declared." in capsys.readouterr().out

    def test_missing_dir_exits_two(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path / "missing")])
        assert exc_info.value.code == 2

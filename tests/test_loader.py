"""Tests for routebook.loader — route file discovery and parsing."""

import logging
from pathlib import Path

import pytest

from routebook.config import RouterConfig
from routebook.descriptor import RouteDescriptor
from routebook.errors import ConfigurationError, DescriptorError, RouteNotFound
from routebook.loader import iter_route_files, load_descriptors, load_router, read_route_file


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestIterRouteFiles:
    def test_single_file(self, routes_file: Path) -> None:
        assert list(iter_route_files(routes_file)) == [routes_file]

    def test_folder_recursive_sorted(self, tmp_path: Path) -> None:
        _write(tmp_path / "b.yaml", "routes: []")
        _write(tmp_path / "a.YAML", "routes: []")
        _write(tmp_path / "nested" / "c.yaml", "routes: []")
        _write(tmp_path / "notes.txt", "ignored")
        found = [p.relative_to(tmp_path).as_posix() for p in iter_route_files(tmp_path)]
        assert found == ["a.YAML", "b.yaml", "nested/c.yaml"]

    def test_custom_suffixes(self, tmp_path: Path) -> None:
        _write(tmp_path / "a.yml", "routes: []")
        _write(tmp_path / "b.yaml", "routes: []")
        found = [p.name for p in iter_route_files(tmp_path, (".yml",))]
        assert found == ["a.yml"]


class TestReadRouteFile:
    def test_parses_routes_in_order(self, routes_file: Path) -> None:
        results = read_route_file(routes_file)
        assert all(isinstance(r, RouteDescriptor) for r in results)
        assert [r.name for r in results] == ["home", "user", "localized"]
        assert results[1].controller == "user_controller::crud"
        assert results[1].source == str(routes_file)

    def test_invalid_yaml(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = _write(tmp_path / "bad.yaml", "routes: [unclosed\n")
        with caplog.at_level(logging.WARNING, logger="routebook.loader"):
            assert read_route_file(path) == []
        assert "Invalid YAML" in caplog.text

    def test_missing_routes_key(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "empty.yaml", "other: 1\n")
        assert read_route_file(path) == []

    def test_empty_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "empty.yaml", "")
        assert read_route_file(path) == []

    def test_broken_entries_become_errors(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "routes.yaml",
            "routes:\n"
            "  - just-a-string\n"
            "  - nopath:\n"
            "      controller: c\n"
            "  - ok:\n"
            "      path: /ok\n"
            "      controller: c\n",
        )
        results = read_route_file(path)
        assert isinstance(results[0], DescriptorError)
        assert results[0].route_name == "#0"
        assert isinstance(results[1], DescriptorError)
        assert results[1].route_name == "nopath"
        assert isinstance(results[2], RouteDescriptor)

    def test_undecodable_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"routes:\n  - a: \xff\xfe\n")
        with caplog.at_level(logging.WARNING, logger="routebook.loader"):
            assert read_route_file(path) == []
        assert "Cannot read" in caplog.text


class TestLoadDescriptors:
    def test_missing_source_logs(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="routebook.loader"):
            assert load_descriptors(tmp_path / "nope") == []
        assert "not found" in caplog.text

    def test_missing_source_strict(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_descriptors(tmp_path / "nope", RouterConfig(strict=True))

    def test_folder(self, tmp_path: Path) -> None:
        _write(tmp_path / "a.yaml", "routes:\n  - a:\n      path: /a\n      controller: c\n")
        _write(tmp_path / "sub" / "b.yaml", "routes:\n  - b:\n      path: /b\n      controller: c\n")
        assert [d.name for d in load_descriptors(tmp_path)] == ["a", "b"]


class TestLoadRouter:
    def test_routes_file(self, routes_file: Path) -> None:
        router = load_router(routes_file)
        assert router.lookup("/", "get").controller == "home_controller::index"

        match = router.lookup("/user/101", "delete")
        assert match.name == "user"
        assert match.middleware == "user_middleware::test"
        assert match.path_params == {"id": "101"}

        assert router.build("user", {"id": "101"}) == "/user/101"
        assert router.lookup("/fr/home", "get").language == "fr"

    def test_user_requirement(self, routes_file: Path) -> None:
        router = load_router(routes_file)
        with pytest.raises(RouteNotFound):
            router.lookup("/user/abc", "get")

    def test_home_method_filter(self, routes_file: Path) -> None:
        router = load_router(routes_file)
        with pytest.raises(RouteNotFound):
            router.lookup("/", "post")

    def test_summary_logged(self, routes_file: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="routebook.loader"):
            load_router(routes_file)
        assert "3 routes have been parsed" in caplog.text

    def test_single_route_summary(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = _write(tmp_path / "r.yaml", "routes:\n  - a:\n      path: /a\n      controller: c\n")
        with caplog.at_level(logging.INFO, logger="routebook.loader"):
            load_router(path)
        assert "1 route has been parsed" in caplog.text

    def test_undecodable_file_skipped(self, tmp_path: Path) -> None:
        _write(tmp_path / "a.yaml", "routes:\n  - a:\n      path: /a\n      controller: c\n")
        (tmp_path / "b.yaml").write_bytes(b"\xff\xfe")
        router = load_router(tmp_path)
        assert [r.name for r in router.routes] == ["a"]

    def test_missing_source_gives_empty_router(self, tmp_path: Path) -> None:
        router = load_router(tmp_path / "nope")
        assert len(router) == 0

    def test_bad_descriptor_skipped_by_default(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "r.yaml",
            "routes:\n"
            "  - bad:\n"
            "      path: /user/{id}\n"
            "      controller: c\n"
            "      requirements:\n"
            "        id: '[0-9'\n"
            "  - good:\n"
            "      path: /good\n"
            "      controller: c\n",
        )
        router = load_router(path)
        assert [r.name for r in router.routes] == ["good"]
        assert [e.route_name for e in router.rejected] == ["bad"]

    def test_bad_descriptor_strict(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "r.yaml", "routes:\n  - bad:\n      controller: c\n")
        with pytest.raises(DescriptorError, match="'bad'"):
            load_router(path, RouterConfig(strict=True))

"""Shared fixtures: route files written to a temporary folder."""

from pathlib import Path

import pytest

ROUTES_YAML = """\
routes:
  - home:
      path: /
      controller: home_controller::index
      methods: get
  - user:
      path: /user/{id}
      controller: user_controller/crud
      middleware: user_middleware::test
      methods: get, post, delete, put
      requirements:
        id: "^[0-9]+"
  - localized:
      path: /{lang}/home
      controller: home_controller::localized
      language: lang
"""


@pytest.fixture
def routes_file(tmp_path: Path) -> Path:
    """A single route file with home, user, and localized routes."""
    path = tmp_path / "routes.yaml"
    path.write_text(ROUTES_YAML, encoding="utf-8")
    return path

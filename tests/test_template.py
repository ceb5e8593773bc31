from __future__ import annotations

from pathlib import Path

import pytest

from koa_api.errors import ScaffoldError, TemplateNotFoundError
from koa_api.template import TEMPLATE_DIR, TemplateLoader, TemplateRenderer


@pytest.fixture()
def loader() -> TemplateLoader:
    return TemplateLoader()


@pytest.mark.parametrize(
    "name",
    [
        "js/index.js",
        "js/app.js",
        "js/routes.js",
        "js/routes.test.js",
        "gitignore",
        "env.example",
        "editorconfig",
    ],
)
def test_bundled_templates_are_available(loader: TemplateLoader, name: str):
    assert (TEMPLATE_DIR / name).is_file()
    assert loader.load(name).strip()


def test_load_returns_text_verbatim(tmp_path: Path):
    (tmp_path / "plain.txt").write_text("DEBUG={{ name }}:*\n", encoding="utf-8")
    loader = TemplateLoader(directory=tmp_path)
    assert loader.load("plain.txt") == "DEBUG={{ name }}:*\n"


def test_render_substitutes_name(tmp_path: Path):
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "file.js").write_text("const name = '{{ name }}';", encoding="utf-8")
    loader = TemplateLoader(directory=tmp_path)
    assert loader.render("nested/file.js", {"name": "orders"}) == "const name = 'orders';"


def test_missing_template_raises(loader: TemplateLoader):
    with pytest.raises(TemplateNotFoundError) as excinfo:
        loader.load("js/missing.js")
    assert isinstance(excinfo.value, ScaffoldError)
    assert excinfo.value.template == "js/missing.js"


def test_render_string_keeps_unknown_placeholders():
    renderer = TemplateRenderer()
    template = "Hello {{ missing }} from {{name}}"
    assert renderer.render_string(template, {"name": "demo"}) == "Hello {{ missing }} from demo"


def test_render_string_ignores_template_literals():
    renderer = TemplateRenderer()
    template = "console.log(`listening on ${port}`);"
    assert renderer.render_string(template, {"name": "demo"}) == template


def test_render_string_substitutes_every_occurrence():
    renderer = TemplateRenderer()
    template = "{{ name }}:server and {{name}}:db"
    assert renderer.render_string(template, {"name": "orders"}) == "orders:server and orders:db"

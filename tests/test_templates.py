import pytest

from mdwatch.errors import TemplateLoadError
from mdwatch.templates import TemplateRenderer


def test_no_template_is_identity():
    renderer = TemplateRenderer(None)
    html = "<p>a &amp; b</p>\n"
    assert not renderer.enabled
    assert renderer.render(html) == html
    renderer.validate()


def test_template_substitutes_html_once(tmp_path):
    template = tmp_path / "page.html"
    template.write_text("<body>{{ html }}</body>\n", encoding="utf-8")
    renderer = TemplateRenderer(template)
    assert renderer.render("<h1>Hi</h1>") == "<body><h1>Hi</h1></body>\n"


def test_template_is_reloaded_per_render(tmp_path):
    template = tmp_path / "page.html"
    template.write_text("A{{ html }}", encoding="utf-8")
    renderer = TemplateRenderer(template)
    assert renderer.render("x") == "Ax"
    template.write_text("B{{ html }}", encoding="utf-8")
    assert renderer.render("x") == "Bx"


def test_missing_template_raises(tmp_path):
    renderer = TemplateRenderer(tmp_path / "missing.html")
    with pytest.raises(TemplateLoadError) as excinfo:
        renderer.validate()
    assert "missing.html" in str(excinfo.value)


def test_syntax_error_raises(tmp_path):
    template = tmp_path / "broken.html"
    template.write_text("{% if %}{{ html }}", encoding="utf-8")
    with pytest.raises(TemplateLoadError) as excinfo:
        TemplateRenderer(template).render("<p>x</p>")
    assert "syntax error" in excinfo.value.reason

from mdwatch.converter import render_markdown


def test_heading_renders():
    assert render_markdown("# Hi").strip() == "<h1>Hi</h1>"


def test_strikethrough_and_table():
    source = (
        "~~gone~~ kept\n\n"
        "| Name | Qty |\n"
        "| ---- | --- |\n"
        "| pear | 3   |\n"
    )
    html = render_markdown(source)
    assert "<del>gone</del>" in html
    assert "<table>" in html
    assert "<td>pear</td>" in html
    assert "~~" not in html
    assert "| ---- |" not in html


def test_rendering_is_repeatable():
    source = "Some *emphasis* and a [link](https://example.com)."
    assert render_markdown(source) == render_markdown(source)


def test_raw_html_passes_through():
    html = render_markdown("<div class=\"note\">hi</div>\n")
    assert '<div class="note">hi</div>' in html


def test_malformed_markdown_is_best_effort():
    html = render_markdown("**unclosed [link](\n\n| only | header |")
    assert isinstance(html, str)
    assert html

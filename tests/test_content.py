from content import render_content, summarize


def test_render_content_converts_markdown():
    html = str(render_content("Some **bold** text\n\n- one\n- two"))
    assert "<strong>bold</strong>" in html
    assert "<li>one</li>" in html
    assert "<body>" not in html


def test_render_content_removes_scripts_and_handlers():
    html = str(render_content('<p onclick="steal()">Hi</p>\n\nHello <script>alert(1)</script> world'))
    assert "Hi" in html
    assert "Hello" in html
    assert "onclick" not in html
    assert "script" not in html
    assert "alert" not in html


def test_render_content_drops_javascript_links():
    html = str(render_content("[click](javascript:alert(1))"))
    assert "click" in html
    assert "javascript" not in html


def test_render_content_drops_javascript_links_hidden_by_whitespace():
    html = str(render_content('<a href="java&#9;script:alert(document.cookie)">x</a>'))
    assert ">x</a>" in html
    assert "href" not in html
    assert "alert" not in html


def test_render_content_drops_javascript_in_svg_xlink_href():
    html = str(render_content('<svg><a xlink:href="javascript:alert(1)">x</a></svg>'))
    assert "javascript" not in html
    assert "alert" not in html


def test_render_content_keeps_regular_links():
    html = str(render_content("[guide](https://example.com/filters)"))
    assert 'href="https://example.com/filters"' in html


def test_render_content_empty():
    assert str(render_content("")) == ""
    assert str(render_content(None)) == ""


def test_summarize_returns_plain_text():
    assert summarize("# Title\n\nSome *emphasis* here") == "Title Some emphasis here"


def test_summarize_truncates_with_ellipsis():
    assert summarize("word " * 100, limit=20) == "word word word word..."
    assert summarize("short", limit=20) == "short"
    assert summarize(None) == ""

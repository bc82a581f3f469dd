# tests/test_markdown_renderer.py
from mdpane.services.markdown_renderer import MarkdownRenderer


def test_renderer_basic_html(renderer: MarkdownRenderer):
    html = renderer.to_html("# Title\n\nSome **bold** text.")
    assert "<h1>Title</h1>" in html
    assert "<strong>bold</strong>" in html
    assert html.lower().startswith("<!doctype html")
    assert "<style>" in html


def test_renderer_empty_document(renderer: MarkdownRenderer):
    html = renderer.to_html("")
    assert "<body>" in html and "</body>" in html


def test_renderer_is_deterministic(renderer: MarkdownRenderer):
    md = "- a\n- b\n\n```\ncode\n```"
    assert renderer.to_html(md) == renderer.to_html(md)
    assert renderer.to_html(md) == MarkdownRenderer().to_html(md)


def test_renderer_fenced_code_and_table(renderer: MarkdownRenderer):
    md = "```\nprint('x')\n```\n\n| a | b |\n|---|---|\n| 1 | 2 |\n"
    html = renderer.to_html(md)
    assert "<pre><code>" in html and "print" in html
    assert "<table>" in html and "<td>1</td>" in html


def test_renderer_strikethrough_and_tasklist(renderer: MarkdownRenderer):
    html = renderer.to_html("~~gone~~\n\n- [x] done\n- [ ] todo\n")
    assert "<del>gone</del>" in html
    assert 'type="checkbox"' in html


def test_renderer_passes_unicode_through(renderer: MarkdownRenderer):
    html = renderer.to_html("## 你好，世界")
    assert "你好，世界" in html

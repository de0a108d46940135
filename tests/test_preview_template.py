from sitecraft.core.preview_template import build_preview_document
from sitecraft.schemas.generation import GeneratedSite


def test_without_script():
    doc = build_preview_document(GeneratedSite(html="<main>x</main>", css="main{}"))
    assert doc == "<html><head><style>main{}</style></head><body><main>x</main></body></html>"
    assert "<script>" not in doc


def test_with_script_after_body_markup():
    doc = build_preview_document(GeneratedSite(html="<p>x</p>", css="", js="console.log(1)"))
    assert doc.endswith("<body><p>x</p><script>console.log(1)</script></body></html>")


def test_content_is_not_escaped():
    site = GeneratedSite(html='<a href="/x">&amp;</a>', css="a::after { content: '>'; }")
    doc = build_preview_document(site)
    assert site.html in doc
    assert site.css in doc

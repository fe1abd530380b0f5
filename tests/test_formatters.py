from luma_ascii.converter import AsciiArtResult
from luma_ascii.formatters import HtmlFormatter, escape_html


def test_escape_html():
    assert escape_html('<a & b>') == '&lt;a &amp; b&gt;'


def test_format_result_escapes_glyphs():
    result = AsciiArtResult(text='<& \n>> \n', lines=['<& ', '>> '], width=2, height=2)
    html = HtmlFormatter.format_result(result, title='cat <1>')

    assert html.startswith('<!DOCTYPE html>')
    assert '<pre class="ascii-art" id="asciiArt">&lt;&amp; \n&gt;&gt; \n</pre>' in html
    assert '<title>cat &lt;1&gt;</title>' in html
    assert 'white-space: pre;' in html
    assert '{{' not in html


def test_upload_page_lists_presets():
    html = HtmlFormatter.upload_page(presets=['adaptive', 'dark'], convert_url='/convert')
    assert 'id="imageInput"' in html
    assert '<option value="adaptive">adaptive</option>' in html
    assert '<option value="dark">dark</option>' in html
    assert '<option value="" selected>server settings</option>' in html
    assert 'let url = "/convert";' in html
    assert '"?preset=" + encodeURIComponent(preset.value)' in html
    assert '{{' not in html

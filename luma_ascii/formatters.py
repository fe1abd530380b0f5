#!/usr/bin/env python3
"""
Image to ASCII Art Converter - HTML Output
==========================================
Standalone result pages and the upload page served by the local server.
"""

from luma_ascii.converter import AsciiArtResult


def escape_html(text: str) -> str:
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


_STYLE = """
        body {{
            background-color: {background_color};
            color: {foreground_color};
            font-family: sans-serif;
            margin: 20px;
        }}
        .ascii-art {{
            font-family: {font_family};
            font-size: {font_size};
            line-height: {line_height};
            white-space: pre;
            display: inline-block;
            padding: 10px;
        }}
        #errorMessage {{
            color: #ff5555;
            margin-top: 10px;
            display: none;
        }}"""


class HtmlFormatter:
    """Format ASCII art as HTML with styling."""

    @staticmethod
    def _style(font_size: str, font_family: str, background_color: str,
               foreground_color: str, line_height: float) -> str:
        return _STYLE.format(
            font_size=font_size,
            font_family=font_family,
            background_color=background_color,
            foreground_color=foreground_color,
            line_height=line_height,
        )

    @staticmethod
    def format_result(result: AsciiArtResult,
                      font_size: str = "4px",
                      font_family: str = "monospace",
                      background_color: str = "#000000",
                      foreground_color: str = "#ffffff",
                      line_height: float = 1.0,
                      title: str = "ASCII Art") -> str:
        """
        Format an ASCII art result as a standalone HTML page.

        Glyphs are drawn light on a dark background, matching the ramp order
        (dense glyphs for bright pixels).

        Args:
            result: AsciiArtResult to show
            font_size: CSS font size
            font_family: CSS font family
            background_color: Page background
            foreground_color: Glyph color
            line_height: Line height multiplier
            title: Page title

        Returns:
            HTML string
        """
        style = HtmlFormatter._style(font_size, font_family, background_color,
                                     foreground_color, line_height)
        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{escape_html(title)}</title>
    <style>{style}
    </style>
</head>
<body>
<pre class="ascii-art" id="asciiArt">{escape_html(result.text)}</pre>
</body>
</html>"""

    @staticmethod
    def upload_page(presets=(), convert_url: str = "/convert",
                    default_label: str = "server settings",
                    font_size: str = "4px",
                    font_family: str = "monospace",
                    background_color: str = "#000000",
                    foreground_color: str = "#ffffff",
                    line_height: float = 1.0) -> str:
        """
        Page with a file picker that posts the chosen image to the server and
        shows the returned ASCII art.

        Args:
            presets: Preset names offered in the drop-down
            convert_url: Endpoint accepting the raw image body
            default_label: Label of the first, preselected option. It sends
                no preset, so the server uses its own configuration
        """
        style = HtmlFormatter._style(font_size, font_family, background_color,
                                     foreground_color, line_height)
        options = "\n".join(
            [f'        <option value="" selected>{escape_html(default_label)}</option>']
            + [f'        <option value="{escape_html(name)}">{escape_html(name)}</option>'
               for name in presets]
        )
        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Image to ASCII</title>
    <style>{style}
    </style>
</head>
<body>
<div>
    <input type="file" id="imageInput" accept="image/*">
    <select id="preset">
{options}
    </select>
    <div id="errorMessage"></div>
</div>
<pre class="ascii-art" id="asciiArt"></pre>
<script>
(function () {{
  const input = document.getElementById("imageInput");
  const preset = document.getElementById("preset");
  const output = document.getElementById("asciiArt");
  const errorDiv = document.getElementById("errorMessage");

  async function upload() {{
    const file = input.files[0];
    if (!file) return;
    errorDiv.style.display = "none";
    try {{
      let url = "{convert_url}";
      if (preset.value) url += "?preset=" + encodeURIComponent(preset.value);
      const response = await fetch(url, {{
        method: "POST",
        headers: {{ "Content-Type": file.type || "application/octet-stream" }},
        body: file,
      }});
      const text = await response.text();
      if (!response.ok) throw new Error(text);
      output.textContent = text;
    }} catch (error) {{
      errorDiv.textContent = "Error: " + error.message;
      errorDiv.style.display = "block";
    }}
  }}

  input.addEventListener("change", upload);
  preset.addEventListener("change", upload);
}})();
</script>
</body>
</html>"""

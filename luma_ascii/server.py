#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Upload Server
============================================
Local HTTP server: ``GET /`` serves the upload page, ``POST /convert`` takes
the raw image as the request body and answers with the ASCII art as text.
"""

import asyncio
import http.server
import logging
import threading
from typing import Optional
from urllib.parse import parse_qs, urlparse

from luma_ascii.config import ConversionConfig, Presets
from luma_ascii.constants import MAX_UPLOAD_BYTES, SERVER_HOST, SERVER_PORT
from luma_ascii.errors import ConfigError, ImageDecodeError, InvalidInputError
from luma_ascii.formatters import HtmlFormatter
from luma_ascii.pipeline import convert_bytes

logger = logging.getLogger(__name__)


class AsciiRequestHandler(http.server.BaseHTTPRequestHandler):
    """Serves the upload page and converts uploaded images."""

    server_version = "luma-ascii"
    max_upload_bytes = MAX_UPLOAD_BYTES
    base_config: Optional[ConversionConfig] = None

    def log_message(self, format, *args):
        logger.info("%s - %s", self.client_address[0], format % args)

    def _send(self, status: int, body: str, content_type: str = "text/plain; charset=utf-8"):
        payload = body.encode('utf-8')
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(payload)))
        self.send_header("Cache-Control", "no-store")
        self.end_headers()
        self.wfile.write(payload)

    def do_GET(self):
        path = urlparse(self.path).path
        if path in ('/', '/index.html'):
            page = HtmlFormatter.upload_page(presets=list(Presets.all()))
            self._send(200, page, "text/html; charset=utf-8")
        else:
            self._send(404, "Not found")

    def _discard_body(self, length: int):
        remaining = length
        while remaining > 0:
            chunk = self.rfile.read(min(remaining, 64 * 1024))
            if not chunk:
                break
            remaining -= len(chunk)

    def _config_for(self, query: str) -> ConversionConfig:
        # An empty preset (the page's default option) means the server's own settings
        params = parse_qs(query)
        name = params.get('preset', [None])[0]
        if name:
            return Presets.get(name)
        return self.base_config or ConversionConfig()

    def do_POST(self):
        url = urlparse(self.path)
        if url.path != '/convert':
            self._send(404, "Not found")
            return

        try:
            length = int(self.headers.get('Content-Length', 0))
        except ValueError:
            self._send(400, "Invalid Content-Length")
            return
        if length > self.max_upload_bytes:
            self.close_connection = True
            self._discard_body(min(length, self.max_upload_bytes))
            self._send(413, f"Upload exceeds {self.max_upload_bytes} bytes")
            return

        content_type = self.headers.get('Content-Type')
        if not content_type or not content_type.lower().startswith('image/'):
            self.close_connection = True
            self._discard_body(length)
            self._send(415, "Selected file must be an image")
            return

        data = self.rfile.read(length) if length > 0 else b''
        try:
            config = self._config_for(url.query)
            result = asyncio.run(convert_bytes(data, config, content_type))
        except (ConfigError, ImageDecodeError, InvalidInputError) as e:
            logger.warning("convert failed: %s", e)
            self._send(400, str(e))
            return

        self._send(200, result.text)


def make_server(host: str = SERVER_HOST, port: int = SERVER_PORT,
                config: Optional[ConversionConfig] = None,
                max_upload_bytes: int = MAX_UPLOAD_BYTES) -> http.server.ThreadingHTTPServer:
    """Create (but do not start) the upload server. Port 0 picks a free port."""
    handler = type('ConfiguredAsciiRequestHandler', (AsciiRequestHandler,),
                   {'base_config': config, 'max_upload_bytes': max_upload_bytes})
    return http.server.ThreadingHTTPServer((host, port), handler)


def serve(host: str = SERVER_HOST, port: int = SERVER_PORT,
          config: Optional[ConversionConfig] = None) -> None:
    """Run the upload server until interrupted."""
    httpd = make_server(host, port, config)
    logger.info("serving on http://%s:%d/", *httpd.server_address[:2])
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        httpd.server_close()


def start_background(host: str = SERVER_HOST, port: int = 0,
                     config: Optional[ConversionConfig] = None,
                     max_upload_bytes: int = MAX_UPLOAD_BYTES):
    """Start the server on a daemon thread. Returns (server, thread)."""
    httpd = make_server(host, port, config, max_upload_bytes)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True, name="ascii-http")
    thread.start()
    return httpd, thread

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv as loadenv
from flask import Flask, redirect, request, send_file, send_from_directory
from werkzeug.security import safe_join
from werkzeug.serving import BaseWSGIServer, make_server


loadenv()

BASE_DIR = Path(__file__).resolve().parent
PUBLIC_DIR = BASE_DIR / "public"
INDEX_PATH = BASE_DIR / "views" / "index.html"

HOST = "0.0.0.0"
DEFAULT_PORT = 3000
ATTRIBUTION = "Run By @Elonerajeev"
DIRECTORY_INDEX = "index.html"

app = Flask(__name__, static_folder=None)


def resolve_port(value: Optional[str] = None) -> int:
    """Return the listening port, falling back to ``DEFAULT_PORT`` when unset."""
    if value is None:
        value = os.getenv("PORT")
    if not value:
        return DEFAULT_PORT
    return int(value)


@app.get("/")
def index():
    """Serve the index document."""
    return send_file(INDEX_PATH)


@app.get("/<path:filename>")
def public_files(filename: str):
    """Serve files under ``PUBLIC_DIR``.

    ``/<dir>/`` serves the directory's ``index.html`` and ``/<dir>`` redirects
    there with a 301.
    """
    filename = filename.rstrip("/")
    if request.path.endswith("/"):
        return send_from_directory(PUBLIC_DIR, f"{filename}/{DIRECTORY_INDEX}")

    target = safe_join(str(PUBLIC_DIR), filename)
    if target is not None and os.path.isdir(target):
        location = f"{request.path}/"
        if request.query_string:
            location = f"{location}?{request.query_string.decode('latin-1')}"
        return redirect(location, code=301)

    return send_from_directory(PUBLIC_DIR, filename)


def create_server(host: str = HOST, port: Optional[int] = None) -> BaseWSGIServer:
    """Bind the listener for ``app``.

    On an ``OSError`` from the bind (port in use, permission denied) Werkzeug
    reports it on stderr and exits with status 1. A port outside 0-65535
    raises ``OverflowError`` from ``socket.bind`` instead.
    """
    if port is None:
        port = resolve_port()
    return make_server(host, port, app, threaded=True)


def main() -> None:
    server = create_server()
    print(f"Server is running at http://localhost:{server.port}")
    print(ATTRIBUTION)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()


if __name__ == "__main__":
    main()

# app.py - Flask entrypoint: the directory page and its listing endpoint
import json
import logging
import secrets
import uuid
from typing import Callable, Optional, Sequence

from flask import Flask, jsonify, redirect, render_template, request, session, url_for

from directory.config import DirectoryConfig
from directory.loader import fetch_advocates
from directory.models import Advocate
from directory.registry import SessionRegistry
from directory.seed import seed_advocates
from directory.view import build_view

logger = logging.getLogger("directory.app")

Source = Callable[[], Sequence[Advocate]]


class JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


def configure_logging(cfg: DirectoryConfig) -> logging.Handler:
    handler = logging.StreamHandler()
    if cfg.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logging.basicConfig(handlers=[handler], level=logging.INFO, force=True)
    return handler


def default_source(cfg: DirectoryConfig) -> Source:
    if cfg.api_url:
        return lambda: fetch_advocates(cfg.api_url, timeout=cfg.http_timeout)
    return seed_advocates


def _session_id() -> str:
    sid = session.get('sid')
    if sid is None:
        sid = session['sid'] = uuid.uuid4().hex
    return sid


async def _current(directory):
    return await directory.wait_settled()


async def _reset(directory):
    directory.reset()
    return await directory.wait_settled()


def create_app(config: Optional[DirectoryConfig] = None,
               source: Optional[Source] = None,
               listing: Optional[Source] = None) -> Flask:
    """Build the app.

    ``source`` feeds the page and is read once per browser session; ``listing``
    feeds ``/api/advocates``. Both default from ``config`` (the built-in seed
    list unless an API URL is set).
    """
    cfg = config or DirectoryConfig.from_env()
    app = Flask(__name__, template_folder="templates")
    app.secret_key = cfg.secret_key or secrets.token_hex(32)
    app.config["DIRECTORY"] = cfg
    registry = SessionRegistry(source or default_source(cfg), cfg)
    app.extensions["directory_sessions"] = registry
    listing_source = listing or seed_advocates

    def render(template, state):
        view = build_view(state, cfg.phone_region)
        return render_template(template, view=view)

    @app.route('/')
    def index():
        term = request.args.get('q')
        if term is None:
            state = registry.run(_session_id(), _current)
        else:
            state = registry.run(_session_id(), lambda d: d.search(term))
        return render('index.html', state)

    @app.route('/partials/results')
    def results():
        term = request.args.get('q', '')
        state = registry.run(_session_id(), lambda d: d.search(term))
        return render('_results.html', state)

    @app.route('/reset', methods=['GET', 'POST'])
    def reset():
        registry.run(_session_id(), _reset)
        return redirect(url_for('index'))

    @app.route('/api/advocates')
    def api_advocates():
        return jsonify({'data': [a.to_json() for a in listing_source()]})

    return app


if __name__ == '__main__':
    cfg = DirectoryConfig.from_env()
    configure_logging(cfg)
    create_app(cfg).run(host=cfg.host, port=cfg.port, debug=True)

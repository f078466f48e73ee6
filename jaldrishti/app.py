# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

import atexit

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from jaldrishti.infrastructure.container import Container
from jaldrishti.shared.config import AppConfig, load_config
from jaldrishti.shared.logging import logger, setup_logging
from jaldrishti.shared.middleware.error_handler import configure_error_handling
from jaldrishti.shared.middleware.request_logger import configure_request_logging

CONTAINER_KEY = "jaldrishti.container"


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(
        config.log_level,
        log_file=config.log_file,
        debug_mode=config.debug_logging,
    )

    container = Container(config)
    container.database.init_db()

    app = Flask(__name__)
    app.extensions[CONTAINER_KEY] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    app.config.update(SECRET_KEY=config.secret_key)

    security = config.security
    if security.trusted_proxy_count:
        n = security.trusted_proxy_count
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=n, x_proto=n, x_host=n)  # type: ignore[method-assign]

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": security.allowed_origins}}
    }
    if any(o != "*" for o in security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault(
            "Permissions-Policy",
            "microphone=(), camera=(), payment=(), usb=()",
        )

        if security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


if __name__ == "__main__":
    _config = load_config()
    _app = create_app(_config)
    atexit.register(_app.extensions[CONTAINER_KEY].close)
    _app.run(host="0.0.0.0", port=_config.port)

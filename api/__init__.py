import logging

from flask import Flask, g, render_template
from flasgger import Swagger
from flask_cors import CORS

from .config import get_config
from .errors import register_error_handlers
from models import storage
from utils.decorators import login_required

# Swagger 2.0 document at /swagger.json, UI at /api-docs/
SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Library Catalog API",
        "version": "1.0.0",
        "description": "REST API for managing the books and authors of a library catalog.",
    },
    "basePath": "/",
    "schemes": ["http", "https"],
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec_1",
            "route": "/swagger.json",
            "rule_filter": lambda rule: True,   # include all endpoints
            "model_filter": lambda tag: True,   # include all models
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/api-docs/",
}


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(config_name: str | None = None) -> Flask:
    """
    Application factory: creates and configures the Flask app.
    Each call rebinds the shared storage to the configured database.
    """
    app = Flask(__name__)

    # Load configuration (reads .env via get_config)
    app.config.from_object(get_config(config_name))
    configure_logging(app.config["LOG_LEVEL"])

    storage.reload(app.config["DATABASE_URL"], echo=app.config["SQL_ECHO"])

    CORS(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)

    # Register global error handlers that return the uniform error envelope
    register_error_handlers(app)

    from .auth import bp as auth_bp, init_oauth
    from .books import bp as books_bp
    from .authors import bp as authors_bp
    from .health import bp as health_bp

    init_oauth(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(books_bp)
    app.register_blueprint(authors_bp)
    app.register_blueprint(health_bp)

    # Scoped session is per request; remove it so connections go back to the pool
    @app.teardown_appcontext
    def remove_session(exception=None):
        storage.close()

    @app.route("/")
    @login_required()
    def home():
        return render_template("home.html", identity=g.identity)

    return app

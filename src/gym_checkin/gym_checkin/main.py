from __future__ import annotations

import atexit
import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .admin.controller import register as register_admin
from .checkin.controller import register as register_checkin
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .members.controller import register as register_members
from .scanning.controller import register as register_scanning

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def settings_dict(settings) -> dict:
    return {name: getattr(settings, name) for name in dir(settings) if name.isupper()}


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def register_routes(app: Flask, container: Container) -> None:
    register_members(app, container)
    register_checkin(app, container)
    register_scanning(app, container)
    register_admin(app, container)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
        logger.info("demo seed ready")

    container = build_container(db_config=db_config, settings=settings_dict(settings))
    atexit.register(container.close)
    app.extensions["gym_checkin.container"] = container

    register_routes(app, container)
    return app

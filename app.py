import os
from dotenv import load_dotenv

# Loads the environment from DOTENV_PATH, or .env by default
# Example:
# export FLASK_APP=app.py
# export FLASK_ENV=production
# export DOTENV_PATH=.env.prod
# export WORKBOOK_PATH=meals.xlsx

load_dotenv(dotenv_path=os.getenv("DOTENV_PATH", ".env"), override=True)

from flask import Flask
from flask_cors import CORS
from config import DevelopmentConfig, TestingConfig, ProductionConfig
from store import init_store
from blueprints import register_blueprints
from cli import meals_cli

CONFIGS = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def create_app(config_object=None, store=None):
    app = Flask(__name__)

    if config_object is None:
        env = os.getenv("FLASK_ENV", "production")
        config_object = CONFIGS.get(env, ProductionConfig)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    CORS(app, origins=app.config["CORS_ORIGINS"])
    if store is not None:
        app.extensions["meal_store"] = store
    init_store(app)
    register_blueprints(app)
    app.cli.add_command(meals_cli)

    app.logger.debug("Environment: %s", os.getenv("FLASK_ENV"))
    app.logger.debug("Environment file: %s", os.getenv("DOTENV_PATH"))
    app.logger.debug("Workbook: %s", app.config["WORKBOOK_PATH"])
    return app


if __name__ == '__main__':
    create_app().run(host="0.0.0.0", port=5001, debug=True)

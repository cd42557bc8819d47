from flask import Flask

from helpdesk.config.settings import Settings


def configure_app(app: Flask, settings: Settings) -> None:
    app.config["ENV"] = settings.environment
    app.config["DEBUG"] = settings.debug

from .router import router_bp
from .page import page_bp


def register_blueprints(app):
    app.register_blueprint(router_bp)
    app.register_blueprint(page_bp)

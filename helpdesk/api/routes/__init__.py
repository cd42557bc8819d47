# helpdesk/api/routes/__init__.py

from flask import Flask

from helpdesk.api.routes.auth_routes import bp_auth
from helpdesk.api.routes.comment_routes import bp_comments
from helpdesk.api.routes.health_routes import bp_health
from helpdesk.api.routes.ticket_routes import bp_tickets
from helpdesk.api.routes.ticket_type_routes import bp_ticket_types
from helpdesk.api.routes.user_routes import bp_users


def register_routes(app: Flask, *, api_prefix: str) -> None:
    # health outside /api
    app.register_blueprint(bp_health, url_prefix="/health")

    app.register_blueprint(bp_auth, url_prefix=f"{api_prefix}/auth")
    app.register_blueprint(bp_users, url_prefix=f"{api_prefix}/users")
    app.register_blueprint(bp_tickets, url_prefix=f"{api_prefix}/tickets")
    app.register_blueprint(
        bp_comments, url_prefix=f"{api_prefix}/tickets/<int:ticket_id>/comments"
    )
    app.register_blueprint(bp_ticket_types, url_prefix=f"{api_prefix}/ticket-types")

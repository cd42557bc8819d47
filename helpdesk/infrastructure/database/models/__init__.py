# helpdesk/infrastructure/database/models/__init__.py
# importing the package registers every table on BaseModel.metadata

from helpdesk.infrastructure.database.models.user_model import UserModel  # noqa: F401
from helpdesk.infrastructure.database.models.refresh_token_model import RefreshTokenModel  # noqa: F401
from helpdesk.infrastructure.database.models.ticket_type_model import TicketTypeModel  # noqa: F401
from helpdesk.infrastructure.database.models.ticket_model import TicketModel  # noqa: F401
from helpdesk.infrastructure.database.models.comment_model import CommentModel  # noqa: F401

import pytest

from helpdesk.core.exceptions import ForbiddenError, NotFoundError
from helpdesk.entities.user import Role
from helpdesk.infrastructure.database.session import db_session
from helpdesk.repositories.comment_repository import CommentRepository
from helpdesk.repositories.ticket_repository import TicketRepository
from helpdesk.repositories.ticket_type_repository import TicketTypeRepository
from helpdesk.repositories.user_repository import UserRepository
from helpdesk.services.comment_service import CommentService
from helpdesk.services.ticket_service import TicketService, TicketStatus
from helpdesk.services.ticket_type_service import TicketTypeService
from helpdesk.services.user_service import UserService


def _tickets(session) -> TicketService:
    return TicketService(TicketRepository(session), TicketTypeRepository(session), UserRepository(session))


def _comments(session) -> CommentService:
    return CommentService(CommentRepository(session), TicketRepository(session))


@pytest.fixture
def people(register_user):
    return {
        "admin": register_user("admin@school.edu", role=Role.ADMIN),
        "ana": register_user("ana@school.edu"),
        "bob": register_user("bob@school.edu"),
    }


@pytest.fixture
def ana_ticket(people):
    with db_session() as s:
        return _tickets(s).create_ticket(people["ana"], title="Projector broken", description="Room 12").id


def test_new_ticket_is_open_and_owned_by_caller(people):
    with db_session() as s:
        ticket = _tickets(s).create_ticket(people["ana"], title="  Wifi down ")

        assert ticket.user_id == people["ana"].subject_id
        assert ticket.status == TicketStatus.OPEN.value
        assert ticket.title == "Wifi down"


def test_student_cannot_open_ticket_for_someone_else(people):
    with db_session() as s, pytest.raises(ForbiddenError):
        _tickets(s).create_ticket(people["ana"], title="x", user_id=people["bob"].subject_id)


def test_admin_can_open_ticket_for_a_student(people):
    with db_session() as s:
        ticket = _tickets(s).create_ticket(people["admin"], title="x", user_id=people["bob"].subject_id)
        assert ticket.user_id == people["bob"].subject_id


def test_owner_and_admin_can_read_others_cannot(people, ana_ticket):
    with db_session() as s:
        service = _tickets(s)
        assert service.get_ticket(people["ana"], ticket_id=ana_ticket).id == ana_ticket
        assert service.get_ticket(people["admin"], ticket_id=ana_ticket).id == ana_ticket
        with pytest.raises(ForbiddenError):
            service.get_ticket(people["bob"], ticket_id=ana_ticket)


def test_missing_ticket_is_not_found_before_ownership(people):
    with db_session() as s, pytest.raises(NotFoundError):
        _tickets(s).get_ticket(people["bob"], ticket_id=999)


def test_only_admin_lists_all_tickets(people, ana_ticket):
    with db_session() as s:
        service = _tickets(s)
        assert [t.id for t in service.list_all(people["admin"])] == [ana_ticket]
        assert service.list_mine(people["bob"]) == []
        with pytest.raises(ForbiddenError):
            service.list_all(people["ana"])


def test_student_edits_text_but_not_status(people, ana_ticket):
    with db_session() as s:
        service = _tickets(s)
        updated = service.update_ticket(people["ana"], ticket_id=ana_ticket, title="Projector still broken")
        assert updated.title == "Projector still broken"

        # re-sending the current status is not a change
        service.update_ticket(people["ana"], ticket_id=ana_ticket, status=TicketStatus.OPEN)

        with pytest.raises(ForbiddenError):
            service.update_ticket(people["ana"], ticket_id=ana_ticket, status=TicketStatus.CLOSED)


def test_student_cannot_reclassify_ticket(people, ana_ticket):
    with db_session() as s:
        kind = TicketTypeService(TicketTypeRepository(s)).create_type(people["admin"], name="Hardware")
        with pytest.raises(ForbiddenError):
            _tickets(s).update_ticket(people["ana"], ticket_id=ana_ticket, type_id=kind.id)


def test_admin_moves_ticket_through_workflow(people, ana_ticket):
    with db_session() as s:
        kind = TicketTypeService(TicketTypeRepository(s)).create_type(people["admin"], name="Hardware")
        updated = _tickets(s).update_ticket(
            people["admin"], ticket_id=ana_ticket, status=TicketStatus.PENDING, type_id=kind.id
        )
        assert updated.status == "Pending"
        assert updated.type_id == kind.id


def test_other_student_cannot_delete(people, ana_ticket):
    with db_session() as s, pytest.raises(ForbiddenError):
        _tickets(s).delete_ticket(people["bob"], ticket_id=ana_ticket)


def test_comment_ownership_is_per_comment(people, ana_ticket):
    with db_session() as s:
        service = _comments(s)
        admin_note = service.create_comment(people["admin"], ticket_id=ana_ticket, body="Looking into it")
        own_note = service.create_comment(people["ana"], ticket_id=ana_ticket, body="Thanks")

        # the ticket owner can read but not edit the admin's comment
        assert [c.id for c in service.list_comments(people["ana"], ticket_id=ana_ticket)] == [
            admin_note.id,
            own_note.id,
        ]
        with pytest.raises(ForbiddenError):
            service.update_comment(people["ana"], ticket_id=ana_ticket, comment_id=admin_note.id, body="edited")
        with pytest.raises(ForbiddenError):
            service.delete_comment(people["ana"], ticket_id=ana_ticket, comment_id=admin_note.id)

        service.update_comment(people["ana"], ticket_id=ana_ticket, comment_id=own_note.id, body="Thanks!")
        service.delete_comment(people["ana"], ticket_id=ana_ticket, comment_id=own_note.id)


def test_student_cannot_comment_on_foreign_ticket(people, ana_ticket):
    with db_session() as s:
        with pytest.raises(ForbiddenError):
            _comments(s).create_comment(people["bob"], ticket_id=ana_ticket, body="hi")
        with pytest.raises(ForbiddenError):
            _comments(s).list_comments(people["bob"], ticket_id=ana_ticket)


def test_comment_lookup_is_scoped_to_ticket(people, ana_ticket):
    with db_session() as s:
        other = _tickets(s).create_ticket(people["ana"], title="Other")
        note = _comments(s).create_comment(people["ana"], ticket_id=ana_ticket, body="hi")
        with pytest.raises(NotFoundError):
            _comments(s).get_comment(people["ana"], ticket_id=other.id, comment_id=note.id)


def test_ticket_types_are_admin_managed(people):
    with db_session() as s:
        service = TicketTypeService(TicketTypeRepository(s))
        with pytest.raises(ForbiddenError):
            service.create_type(people["ana"], name="Software")

        kind = service.create_type(people["admin"], name="Software", description="Apps")
        assert [t.name for t in service.list_types()] == ["Software"]

        ticket = _tickets(s).create_ticket(people["ana"], title="Excel crash", type_id=kind.id)
        service.delete_type(people["admin"], type_id=kind.id)
        assert ticket.type_id is None


def test_deleting_user_removes_their_tickets_and_comments(people, ana_ticket):
    with db_session() as s:
        _comments(s).create_comment(people["admin"], ticket_id=ana_ticket, body="On it")

    with db_session() as s:
        UserService(UserRepository(s)).admin_delete_user(user_id=people["ana"].subject_id)

    with db_session() as s:
        assert TicketRepository(s).get_by_id(ana_ticket) is None
        assert CommentRepository(s).list_by_ticket(ana_ticket) == []

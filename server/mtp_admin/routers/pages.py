"""Server-rendered dashboard pages.

Access to these pages is gated by ``PageAuthMiddleware``. Form posts go
through the same services as the JSON API and answer with a 303 redirect
back to the page, carrying the outcome in ``msg`` or ``err``.
"""

import logging
import math
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.database import get_db
from ..core.exceptions import ApiException, ConflictError
from ..core.observability import get_logger, metrics_collector
from ..core.security import create_session_token, decode_session_token
from ..models.admin import Admin
from ..models.tour import Difficulty, Tour, TourStatus
from ..schemas.auth import SignupRequest
from ..schemas.booking import BookingStatusUpdate, PaymentStatusUpdate
from ..schemas.feedback import FeedbackResponseCreate, FeedbackStatusUpdate
from ..schemas.inquiry import InquiryAssignRequest, InquiryResponseCreate
from ..schemas.support_ticket import (
    TicketAssignRequest,
    TicketPriorityUpdate,
    TicketResponseCreate,
    TicketStatusUpdate,
)
from ..schemas.tour import TourCreate, TourStatusUpdate, TourUpdate
from ..services.admin_service import AdminService
from ..services.agent_service import AgentService
from ..services.booking_service import BookingService
from ..services.dashboard_service import DashboardService
from ..services.feedback_service import FeedbackService
from ..services.inquiry_service import InquiryService
from ..services.staff_service import StaffService
from ..services.support_ticket_service import SupportTicketService
from ..services.tour_service import TourService
from .auth import clear_session, set_session_cookie

logger = logging.getLogger(__name__)
audit_log = get_logger("mtp_admin.auth")

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(include_in_schema=False)

DB_DEPENDENCY = Depends(get_db)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def paginate(items: Sequence[Any], page: int, page_size: int) -> Dict[str, Any]:
    """Slice an already fetched list into one page."""
    page_size = max(1, min(page_size, MAX_PAGE_SIZE))
    total = len(items)
    pages = max(1, math.ceil(total / page_size))
    page = max(1, min(page, pages))
    start = (page - 1) * page_size
    return {
        "items": list(items[start:start + page_size]),
        "page": page,
        "page_size": page_size,
        "pages": pages,
        "total": total,
    }


async def _page_admin(request: Request, db: AsyncSession) -> Optional[Admin]:
    payload = decode_session_token(request.cookies.get(settings.session_cookie_name))
    if payload is None:
        return None
    return await AdminService(db).get_by_id(payload["sub"])


def _render(request: Request, name: str, context: Dict[str, Any], status_code: int = 200) -> HTMLResponse:
    context.setdefault("msg", request.query_params.get("msg", ""))
    context.setdefault("err", request.query_params.get("err", ""))
    return templates.TemplateResponse(request, name, context, status_code=status_code)


def _signin_redirect() -> RedirectResponse:
    response = RedirectResponse(url="/signin", status_code=303)
    clear_session(response)
    return response


def _list_context(
    admin: Admin,
    items: List[Any],
    *,
    search: Optional[str],
    sort_by: Optional[str],
    status: Optional[str],
    page: int,
    page_size: int,
) -> Dict[str, Any]:
    return {
        "admin": admin,
        "search": search or "",
        "sort_by": sort_by or "",
        "status": status or "all",
        **paginate(items, page, page_size),
    }


def _redirect(url: str, **params: str) -> RedirectResponse:
    if params:
        url = f"{url}?{urlencode(params)}"
    return RedirectResponse(url=url, status_code=303)


def _first_error(exc: PydanticValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {error['msg']}" if field else error["msg"]


async def _form_action(back: str, done: str, action: Callable[[], Awaitable[Any]]) -> RedirectResponse:
    """Run a form action and redirect back with its outcome."""
    try:
        await action()
    except PydanticValidationError as e:
        return _redirect(back, err=_first_error(e))
    except ApiException as e:
        return _redirect(back, err=e.detail)
    return _redirect(back, msg=done)


# Tour form inputs; list fields are comma separated
TOUR_TEXT_FIELDS = (
    "title", "description", "location", "price", "duration", "category", "max_group_size",
    "difficulty_level", "status", "meeting_point", "end_point", "map_iframe",
    "terms_and_conditions", "related_tours",
)
TOUR_LIST_FIELDS = ("included_services", "excluded_services", "required_equipment", "keywords")


def _tour_form_data(form: Any) -> Dict[str, Any]:
    """Turn submitted tour form fields into a schema payload; blank inputs are left out."""
    data: Dict[str, Any] = {}
    for field in TOUR_TEXT_FIELDS:
        value = str(form.get(field) or "").strip()
        if value:
            data[field] = value
    for field in TOUR_LIST_FIELDS:
        if field in form:
            data[field] = [part.strip() for part in str(form[field]).split(",") if part.strip()]
    return data


def _tour_form_values(tour: Tour) -> Dict[str, Any]:
    values = {field: getattr(tour, field) for field in TOUR_TEXT_FIELDS}
    values["related_tours"] = ", ".join(tour.related_tours or [])
    for field in TOUR_LIST_FIELDS:
        values[field] = ", ".join(getattr(tour, field) or [])
    return {key: "" if value is None else value for key, value in values.items()}


def _tour_form(
    request: Request,
    admin: Admin,
    *,
    heading: str,
    action: str,
    form: Dict[str, Any],
    err: str = "",
    status_code: int = 200,
) -> HTMLResponse:
    return _render(request, "tour_form.html", {
        "admin": admin,
        "heading": heading,
        "action": action,
        "form": form,
        "err": err,
        "difficulties": [d.value for d in Difficulty],
        "statuses": [s.value for s in TourStatus],
    }, status_code=status_code)


@router.get("/")
async def index() -> RedirectResponse:
    return RedirectResponse(url="/dashboard", status_code=303)


@router.get("/signin", response_class=HTMLResponse)
async def signin_page(request: Request, msg: Optional[str] = None) -> HTMLResponse:
    return _render(request, "signin.html", {"msg": msg or "", "err": "", "identifier": ""})


@router.post("/signin")
async def signin_submit(
    request: Request,
    identifier: str = Form(""),
    password: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    """Form sign-in; sets the session cookie and goes to the dashboard."""
    identifier = identifier.strip()
    if not identifier or not password:
        return _render(
            request,
            "signin.html",
            {"msg": "", "err": "Please enter your e-mail or name and password.", "identifier": identifier},
            status_code=400,
        )

    admin = await AdminService(db).authenticate(identifier, password)
    if admin is None:
        metrics_collector.record_signin("rejected")
        audit_log.warning("admin_signin_rejected", identifier=identifier)
        return _render(
            request,
            "signin.html",
            {"msg": "", "err": "Invalid credentials", "identifier": identifier},
            status_code=401,
        )

    response = RedirectResponse(url="/dashboard", status_code=303)
    set_session_cookie(response, create_session_token(str(admin.id), admin.name, admin.email))
    metrics_collector.record_signin("accepted")
    audit_log.info("admin_signed_in", admin_id=str(admin.id))
    return response


@router.get("/signup", response_class=HTMLResponse)
async def signup_page(request: Request) -> HTMLResponse:
    return _render(request, "signup.html", {"err": "", "name": "", "email": ""})


@router.post("/signup")
async def signup_submit(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    confirm_password: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    context = {"name": name, "email": email}
    try:
        signup = SignupRequest(
            name=name, email=email, password=password, confirm_password=confirm_password
        )
    except PydanticValidationError as e:
        first = e.errors()[0]
        return _render(request, "signup.html", {**context, "err": first["msg"]}, status_code=400)

    try:
        admin = await AdminService(db).register(signup)
    except ConflictError as e:
        return _render(request, "signup.html", {**context, "err": e.detail}, status_code=409)

    audit_log.info("admin_signed_up", admin_id=str(admin.id), email=admin.email)
    return RedirectResponse(url="/signin?msg=Account%20created.%20Please%20sign%20in.", status_code=303)


@router.get("/signout")
async def signout_page() -> RedirectResponse:
    response = RedirectResponse(url="/signin", status_code=303)
    clear_session(response)
    audit_log.info("admin_signed_out")
    return response


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard_page(request: Request, db: AsyncSession = DB_DEPENDENCY) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    service = DashboardService(db)
    return _render(request, "dashboard.html", {
        "admin": admin,
        "summary": await service.summary(),
        "tour_stats": await service.tour_stats(),
        "trends": await service.trends(),
    })


@router.get("/tours", response_class=HTMLResponse)
async def tours_page(
    request: Request,
    search: Optional[str] = None,
    sort_by: Optional[str] = None,
    status: Optional[str] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    tours = await TourService(db).list(search=search, sort_by=sort_by, status=status)
    return _render(request, "tours.html", _list_context(
        admin, tours, search=search, sort_by=sort_by, status=status, page=page, page_size=page_size
    ))


@router.get("/tours/add", response_class=HTMLResponse)
async def tour_add_page(request: Request, db: AsyncSession = DB_DEPENDENCY) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    form = {"difficulty_level": Difficulty.EASY.value, "status": TourStatus.DRAFT.value, "max_group_size": 1}
    return _tour_form(request, admin, heading="Add tour", action="/tours/add", form=form)


@router.post("/tours/add")
async def tour_add_submit(request: Request, db: AsyncSession = DB_DEPENDENCY) -> Response:
    """Create a tour from the form and open its page."""
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    form = dict(await request.form())
    page = {"heading": "Add tour", "action": "/tours/add", "form": form}
    try:
        tour = await TourService(db).create(TourCreate(**_tour_form_data(form)).model_dump())
    except PydanticValidationError as e:
        return _tour_form(request, admin, **page, err=_first_error(e), status_code=400)
    except ApiException as e:
        return _tour_form(request, admin, **page, err=e.detail, status_code=e.status_code)

    return _redirect(f"/tours/{tour.id}", msg="Tour created.")


@router.get("/tours/{tour_id}", response_class=HTMLResponse)
async def tour_detail_page(request: Request, tour_id: str, db: AsyncSession = DB_DEPENDENCY) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    tour = await TourService(db).get_by_id(tour_id)
    if tour is None:
        return RedirectResponse(url="/tours", status_code=303)
    return _render(request, "tour_detail.html", {"admin": admin, "tour": tour})


@router.get("/tours/{tour_id}/edit", response_class=HTMLResponse)
async def tour_edit_page(request: Request, tour_id: str, db: AsyncSession = DB_DEPENDENCY) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    tour = await TourService(db).get_by_id(tour_id)
    if tour is None:
        return RedirectResponse(url="/tours", status_code=303)
    return _tour_form(
        request, admin, heading=f"Edit {tour.title}", action=f"/tours/{tour.id}/edit", form=_tour_form_values(tour)
    )


@router.post("/tours/{tour_id}/edit")
async def tour_edit_submit(request: Request, tour_id: str, db: AsyncSession = DB_DEPENDENCY) -> Response:
    """Apply the edit form; blank inputs keep their stored value."""
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    service = TourService(db)
    tour = await service.get_by_id(tour_id)
    if tour is None:
        return RedirectResponse(url="/tours", status_code=303)

    form = dict(await request.form())
    page = {"heading": f"Edit {tour.title}", "action": f"/tours/{tour.id}/edit", "form": form}
    try:
        update = TourUpdate(**_tour_form_data(form))
        tour = await service.update(tour.id, update.model_dump(exclude_unset=True))
    except PydanticValidationError as e:
        return _tour_form(request, admin, **page, err=_first_error(e), status_code=400)
    except ApiException as e:
        return _tour_form(request, admin, **page, err=e.detail, status_code=e.status_code)

    return _redirect(f"/tours/{tour.id}", msg="Tour updated.")


@router.post("/tours/{tour_id}/status")
async def tour_status_submit(
    request: Request,
    tour_id: str,
    status: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        update = TourStatusUpdate(status=status)
        await TourService(db).set_field(tour_id, "status", update.status)

    return await _form_action(f"/tours/{tour_id}", "Tour status updated.", action)


@router.post("/tours/{tour_id}/delete")
async def tour_delete_submit(request: Request, tour_id: str, db: AsyncSession = DB_DEPENDENCY) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    try:
        await TourService(db).delete(tour_id)
    except ApiException as e:
        return _redirect("/tours", err=e.detail)
    return _redirect("/tours", msg="Tour deleted.")


@router.get("/bookings", response_class=HTMLResponse)
async def bookings_page(
    request: Request,
    search: Optional[str] = None,
    sort_by: Optional[str] = None,
    status: Optional[str] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    bookings = await BookingService(db).list(search=search, sort_by=sort_by, status=status)
    context = _list_context(
        admin, bookings, search=search, sort_by=sort_by, status=status, page=page, page_size=page_size
    )
    context["summary"] = await BookingService(db).summary()
    return _render(request, "bookings.html", context)


@router.get("/support", response_class=HTMLResponse)
async def support_page(
    request: Request,
    search: Optional[str] = None,
    sort_by: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    tickets = await SupportTicketService(db).list(
        search=search, sort_by=sort_by, status=status, priority=priority
    )
    context = _list_context(
        admin, tickets, search=search, sort_by=sort_by, status=status, page=page, page_size=page_size
    )
    context["priority"] = priority or "all"
    context["agents"] = [agent for agent in await AgentService(db).list() if agent.is_assignable]
    return _render(request, "support.html", context)


@router.get("/inquiries", response_class=HTMLResponse)
async def inquiries_page(
    request: Request,
    search: Optional[str] = None,
    sort_by: Optional[str] = None,
    status: Optional[str] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    inquiries = await InquiryService(db).list(search=search, sort_by=sort_by, status=status)
    context = _list_context(
        admin, inquiries, search=search, sort_by=sort_by, status=status, page=page, page_size=page_size
    )
    context["agents"] = await AgentService(db).list()
    return _render(request, "inquiries.html", context)


@router.get("/feedbacks", response_class=HTMLResponse)
async def feedbacks_page(
    request: Request,
    search: Optional[str] = None,
    sort_by: Optional[str] = None,
    status: Optional[str] = None,
    category: Optional[str] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    entries = await FeedbackService(db).list(
        search=search, sort_by=sort_by, status=status, category=category
    )
    context = _list_context(
        admin, entries, search=search, sort_by=sort_by, status=status, page=page, page_size=page_size
    )
    context["category"] = category or "all"
    return _render(request, "feedbacks.html", context)


@router.post("/bookings/{booking_id}/status")
async def booking_status_submit(
    request: Request,
    booking_id: str,
    status: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        update = BookingStatusUpdate(status=status)
        await BookingService(db).set_field(booking_id, "status", update.status)

    return await _form_action("/bookings", "Booking status updated.", action)


@router.post("/bookings/{booking_id}/payment-status")
async def booking_payment_submit(
    request: Request,
    booking_id: str,
    payment_status: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        update = PaymentStatusUpdate(payment_status=payment_status)
        await BookingService(db).set_field(booking_id, "payment_status", update.payment_status)

    return await _form_action("/bookings", "Payment status updated.", action)


@router.post("/support/{ticket_id}/status")
async def ticket_status_submit(
    request: Request,
    ticket_id: str,
    status: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        update = TicketStatusUpdate(status=status)
        await SupportTicketService(db).set_field(ticket_id, "status", update.status)

    return await _form_action("/support", "Ticket status updated.", action)


@router.post("/support/{ticket_id}/priority")
async def ticket_priority_submit(
    request: Request,
    ticket_id: str,
    priority: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        update = TicketPriorityUpdate(priority=priority)
        await SupportTicketService(db).set_field(ticket_id, "priority", update.priority)

    return await _form_action("/support", "Ticket priority updated.", action)


@router.post("/support/{ticket_id}/assign")
async def ticket_assign_submit(
    request: Request,
    ticket_id: str,
    agent_id: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    """Assign from the ticket list; unavailable agents are reported back."""
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        assignment = TicketAssignRequest(ticket_id=ticket_id, agent_id=agent_id)
        await SupportTicketService(db).assign(assignment.ticket_id, assignment.agent_id)

    return await _form_action("/support", "Ticket assigned.", action)


@router.post("/support/{ticket_id}/respond")
async def ticket_respond_submit(
    request: Request,
    ticket_id: str,
    message: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        reply = TicketResponseCreate(ticket_id=ticket_id, message=message)
        await SupportTicketService(db).append_response(reply.ticket_id, reply.message, responded_by=str(admin.id))

    return await _form_action("/support", "Reply added.", action)


@router.post("/inquiries/{inquiry_id}/status")
async def inquiry_status_submit(
    request: Request,
    inquiry_id: str,
    status: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        update = TicketStatusUpdate(status=status)
        await InquiryService(db).set_field(inquiry_id, "status", update.status)

    return await _form_action("/inquiries", "Inquiry status updated.", action)


@router.post("/inquiries/{inquiry_id}/priority")
async def inquiry_priority_submit(
    request: Request,
    inquiry_id: str,
    priority: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        update = TicketPriorityUpdate(priority=priority)
        await InquiryService(db).set_field(inquiry_id, "priority", update.priority)

    return await _form_action("/inquiries", "Inquiry priority updated.", action)


@router.post("/inquiries/{inquiry_id}/assign")
async def inquiry_assign_submit(
    request: Request,
    inquiry_id: str,
    agent_id: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    """An empty agent choice clears the assignment."""
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        assignment = InquiryAssignRequest(assigned_to=agent_id or None)
        await InquiryService(db).assign(inquiry_id, assignment.assigned_to)

    done = "Inquiry assigned." if agent_id else "Inquiry unassigned."
    return await _form_action("/inquiries", done, action)


@router.post("/inquiries/{inquiry_id}/respond")
async def inquiry_respond_submit(
    request: Request,
    inquiry_id: str,
    message: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        reply = InquiryResponseCreate(inquiry_id=inquiry_id, message=message)
        await InquiryService(db).append_response(reply.inquiry_id, reply.message, responded_by=str(admin.id))

    return await _form_action("/inquiries", "Reply added.", action)


@router.post("/feedbacks/{feedback_id}/status")
async def feedback_status_submit(
    request: Request,
    feedback_id: str,
    status: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        update = FeedbackStatusUpdate(status=status)
        await FeedbackService(db).set_field(feedback_id, "status", update.status)

    return await _form_action("/feedbacks", "Feedback status updated.", action)


@router.post("/feedbacks/{feedback_id}/respond")
async def feedback_respond_submit(
    request: Request,
    feedback_id: str,
    message: str = Form(""),
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    async def action() -> None:
        reply = FeedbackResponseCreate(feedback_id=feedback_id, message=message)
        await FeedbackService(db).append_response(reply.feedback_id, reply.message, responded_by=str(admin.id))

    return await _form_action("/feedbacks", "Reply added.", action)


@router.get("/settings", response_class=HTMLResponse)
async def settings_page(
    request: Request,
    search: Optional[str] = None,
    sort_by: Optional[str] = None,
    status: Optional[str] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    """Staff management."""
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()

    staff = await StaffService(db).list(search=search, sort_by=sort_by, status=status)
    return _render(request, "settings.html", _list_context(
        admin, staff, search=search, sort_by=sort_by, status=status, page=page, page_size=page_size
    ))


@router.get("/profile", response_class=HTMLResponse)
async def profile_page(request: Request, db: AsyncSession = DB_DEPENDENCY) -> Response:
    admin = await _page_admin(request, db)
    if admin is None:
        return _signin_redirect()
    return _render(request, "profile.html", {"admin": admin})

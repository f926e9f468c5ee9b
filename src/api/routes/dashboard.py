from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse

from config import ApplicationConfig
from src.api.error import ServerError
from src.api.utils.client_ip import resolve_client_ip
from src.api.utils.views import templates
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dashboard import LoadDashboardUseCase, UpdateIPsUseCase
from src.depends import get_session_user, get_unit_of_work
from src.domain.authorization import SessionUser

router = APIRouter(tags=["Dashboard"])

IP_ERRORS = {"IP_INVALID", "TOO_MANY_IPS"}


async def _render_dashboard(
    request: Request,
    user: SessionUser,
    uow: UnitOfWork,
    ip_error: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
):
    result = await LoadDashboardUseCase(uow).execute(user.id)
    if result.is_err():
        raise ServerError(result.error)

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "email": user.email,
            "ip": resolve_client_ip(request),
            "ips": result.value.ips,
            "sessions": result.value.sessions,
            "ip_error": ip_error,
        },
        status_code=status_code,
    )


@router.get("/")
async def dashboard(
    request: Request,
    user: Optional[SessionUser] = Depends(get_session_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Dashboard

    Shows the caller's address, IP grants and live sessions, read fresh
    from the database on every load.
    """
    if user is None:
        return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)

    return await _render_dashboard(request, user, uow)


@router.post("/")
async def update_dashboard(
    request: Request,
    type: Optional[str] = Form(None),
    ip_1: Optional[str] = Form(None),
    ip_2: Optional[str] = Form(None),
    user: Optional[SessionUser] = Depends(get_session_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update IP grants (type=ip_change)

    Replaces the caller's grants with the non-empty values of ip_1 and ip_2.

    Responses:
        - 303 Redirect back to the dashboard
        - 400 Dashboard with an error message for invalid addresses
    """
    if user is None:
        return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)

    if type == "ip_change":
        use_case = UpdateIPsUseCase(uow, max_ips=ApplicationConfig.MAX_IPS_PER_USER)
        result = await use_case.execute(user.id, [ip_1, ip_2])

        if result.is_err():
            error = result.error
            if error.code not in IP_ERRORS:
                raise ServerError(error)
            return await _render_dashboard(
                request,
                user,
                uow,
                ip_error=error.message,
                status_code=status.HTTP_400_BAD_REQUEST,
            )

    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

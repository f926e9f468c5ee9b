import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse

from config import ApplicationConfig
from src.api.error import ServerError
from src.api.utils.client_ip import resolve_client_ip
from src.api.utils.cookies import (
    SESSION_COOKIE,
    clear_browser_session_cookie,
    clear_session_cookie,
    set_browser_session_cookie,
    set_session_cookie,
)
from src.api.utils.jwt import generate_browser_token
from src.api.utils.views import templates
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import LoginCommand, LoginUseCase, LogoutUseCase
from src.depends import get_session_user, get_unit_of_work
from src.domain.authorization import SessionUser

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])

LOGIN_ERRORS = {"EMAIL_REQUIRED", "PASSWORD_REQUIRED", "INVALID_CREDENTIALS"}


@router.get("/login")
async def login_page(
    request: Request, user: Optional[SessionUser] = Depends(get_session_user)
):
    if user is not None:
        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    return templates.TemplateResponse(request, "login.html")


@router.post("/login")
async def login(
    request: Request,
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Login

    Verifies credentials, issues a device session (sessionId cookie) unless
    the presented one already belongs to this user, and starts a browser
    session.

    Responses:
        - 303 Redirect to the dashboard
        - 400 Login form with an error message
    """
    command = LoginCommand(
        email=email,
        password=password,
        session_cookie=request.cookies.get(SESSION_COOKIE),
        user_agent=request.headers.get("user-agent", ""),
        ip_address=resolve_client_ip(request),
    )

    use_case = LoginUseCase(uow, max_sessions=ApplicationConfig.MAX_SESSIONS_PER_USER)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code not in LOGIN_ERRORS:
            raise ServerError(error)
        logger.warning(f"Login rejected: {error.code}")
        return templates.TemplateResponse(
            request,
            "login.html",
            {"error": error.message},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    login_result = result.value
    if login_result.evicted_session_ids:
        logger.info(
            f"Evicted {len(login_result.evicted_session_ids)} session(s) for user {login_result.user_id}"
        )

    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    if login_result.session_id is not None:
        set_session_cookie(response, login_result.session_id)
    set_browser_session_cookie(response, generate_browser_token(login_result.user_id))
    return response


@router.get("/logout")
async def logout(request: Request, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Logout

    Ends the browser session and deletes the device session behind the
    sessionId cookie. Its saved_sessions record is kept.
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(request.cookies.get(SESSION_COOKIE))

    if result.is_err():
        raise ServerError(result.error)

    response = RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)
    clear_browser_session_cookie(response)
    clear_session_cookie(response)
    return response

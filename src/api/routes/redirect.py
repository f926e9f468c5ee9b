from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from config import ApplicationConfig
from src.api.error import ServerError
from src.api.utils.client_ip import resolve_client_ip
from src.api.utils.cookies import SESSION_COOKIE, clear_session_cookie
from src.api.utils.views import templates
from src.app.services.audit_recorder import AuditRecorder
from src.app.services.background_writer import BackgroundWriter
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.redirect import EvaluateTrustUseCase, ResolveShortlinkUseCase
from src.depends import get_background_writer, get_session_user, get_unit_of_work
from src.domain.authorization import RequestContext, SessionUser
from src.domain.entities import LinkMethod

router = APIRouter(tags=["Redirect"])


@router.get("/l/{code}")
async def resolve_shortlink(
    code: str,
    request: Request,
    user: Optional[SessionUser] = Depends(get_session_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    writer: BackgroundWriter = Depends(get_background_writer),
):
    """
    Resolve Shortlink

    Authorizes the requester (browser session, then sessionId cookie, then
    IP grant), records the attempt and delivers the destination.

    Responses:
        - 302 Redirect: GET shortlink
        - 200 HTML form that posts the stored data: POST shortlink
        - 200 HTML not-found view: unknown code
        - 401 HTML unauthorized view: no trust tier matched
        - 500 Internal Server Error: unreadable stored data or database failure
    """
    context = RequestContext(
        ip_address=resolve_client_ip(request),
        user_agent=request.headers.get("user-agent", ""),
        session_user=user,
        session_cookie=request.cookies.get(SESSION_COOKIE),
    )

    trust = EvaluateTrustUseCase(
        uow, require_member=ApplicationConfig.REQUIRE_MEMBER_FOR_REDIRECT
    )
    authorization = (await trust.execute(context)).value

    if not authorization.authorized:
        response = templates.TemplateResponse(
            request, "unauthorized.html", status_code=status.HTTP_401_UNAUTHORIZED
        )
    else:
        use_case = ResolveShortlinkUseCase(uow, AuditRecorder(writer))
        result = await use_case.execute(code, context, authorization)

        if result.is_err():
            error = result.error
            if error.code != "SHORTLINK_NOT_FOUND":
                raise ServerError(error)
            response = templates.TemplateResponse(request, "404.html")
        elif result.value.method == LinkMethod.GET.value:
            response = RedirectResponse(
                result.value.destination, status_code=status.HTTP_302_FOUND
            )
        else:
            response = templates.TemplateResponse(
                request,
                "postlink.html",
                {"destination": result.value.destination, "data": result.value.data},
            )

    if authorization.clear_session_cookie:
        clear_session_cookie(response)

    return response

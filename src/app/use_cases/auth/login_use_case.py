"""
Login Use Case

Verifies credentials and manages the user's device sessions.
"""

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import generate_session_id
from src.domain.entities import SavedSession, Session
from .dtos import LoginCommand, LoginResponse

# Compared against when the user does not exist so both paths cost a bcrypt check
DUMMY_PASSWORD_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))

# bcrypt rejects longer inputs
MAX_PASSWORD_BYTES = 72


class LoginUseCase:
    """
    Use case for user login and device session issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Passwords over 72 bytes can never match and fail like a wrong password
    - A sessionId cookie already bound to this user is kept (no new session)
    - Otherwise a new session is issued; at max_sessions the oldest
      sessions are evicted first
    - Every new session is mirrored into saved_sessions
    """

    def __init__(self, uow: UnitOfWork, max_sessions: int = 5):
        self.uow = uow
        self.max_sessions = max_sessions

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            command: Credentials, presented sessionId cookie and request details

        Returns:
            Result with LoginResponse, or Error
        """
        if not command.email:
            return Return.err(Error("EMAIL_REQUIRED", "Missing email address."))
        if not command.password:
            return Return.err(Error("PASSWORD_REQUIRED", "Missing password."))

        password = command.password.encode()
        if len(password) > MAX_PASSWORD_BYTES:
            bcrypt.checkpw(password[:MAX_PASSWORD_BYTES], DUMMY_PASSWORD_HASH)
            return Return.err(Error("INVALID_CREDENTIALS", "Invalid email or password"))

        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

            if user is None:
                bcrypt.checkpw(password, DUMMY_PASSWORD_HASH)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            password_valid = bcrypt.checkpw(
                password, user.password_hash.encode()
            )
            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            # Cookies can be spoofed; only keep one that maps to a live session of this user
            if command.session_cookie:
                current = await self.uow.sessions.get_by_session_id(command.session_cookie)
                if current is not None and current.user_id == user.id:
                    return Return.ok(
                        LoginResponse(user_id=user.id, email=user.email, member=user.member)
                    )

            sessions = await self.uow.sessions.list_by_user_id(user.id)
            evicted = []
            while sessions and len(sessions) >= self.max_sessions:
                oldest = sessions.pop(0)
                evicted.append(oldest.session_id)
                await self.uow.sessions.delete(oldest)

            session_id = generate_session_id()
            user_agent = (command.user_agent or "")[:512]
            await self.uow.sessions.create(
                Session(session_id=session_id, user_id=user.id, user_agent=user_agent)
            )
            await self.uow.saved_sessions.create(
                SavedSession(
                    session_id=session_id,
                    user_id=user.id,
                    user_agent=user_agent,
                    ip_address=command.ip_address[:128],
                )
            )

            response = LoginResponse(
                user_id=user.id,
                email=user.email,
                member=user.member,
                session_id=session_id,
                evicted_session_ids=evicted,
            )

            await self.uow.commit()

            return Return.ok(response)

"""
Create Shortlink Use Case

Validates a new shortlink and queues it for insertion.
"""

import json
import random
import re
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.background_writer import BackgroundWriter
from src.domain.base import generate_code
from src.domain.entities import LinkMethod, Shortlink
from src.domain.linkbust import normalize_techniques
from .dtos import CreateShortlinkCommand, CreateShortlinkResponse

CODE_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,32}$")
MAX_DESTINATION_LENGTH = 512
SCALAR_TYPES = (str, int, float, bool, type(None))


class CreateShortlinkUseCase:
    """
    Use case for creating a shortlink.

    Business Rules:
    - method is required and must be GET or POST (any case)
    - destination is required
    - data is forbidden for GET and must be a flat key-value object for POST
    - linkbust must be a list of names; unknown names are dropped and the
      rest stored in application order
    - code is generated when absent; codes may repeat (latest wins)
    - The insert is queued; the response does not wait for the commit
    """

    def __init__(
        self,
        writer: BackgroundWriter,
        code_length: int = 5,
        rng: Optional[random.Random] = None,
    ):
        self.writer = writer
        self.code_length = code_length
        self.rng = rng

    async def execute(
        self, command: CreateShortlinkCommand
    ) -> Result[CreateShortlinkResponse]:
        if command.method is None or command.method == "":
            return Return.err(Error("METHOD_REQUIRED", "Missing method."))
        if not isinstance(command.method, str) or command.method.upper() not in (
            LinkMethod.GET.value,
            LinkMethod.POST.value,
        ):
            return Return.err(Error("METHOD_INVALID", "Method must be GET or POST."))
        method = LinkMethod(command.method.upper())

        destination = command.destination
        if not isinstance(destination, str) or not destination.strip():
            return Return.err(Error("DESTINATION_REQUIRED", "Missing destination."))
        destination = destination.strip()
        if len(destination) > MAX_DESTINATION_LENGTH:
            return Return.err(
                Error(
                    "DESTINATION_INVALID",
                    f"Destination must be at most {MAX_DESTINATION_LENGTH} characters.",
                )
            )

        data = None
        if command.data is not None:
            if method == LinkMethod.GET:
                return Return.err(
                    Error("DATA_NOT_ALLOWED", "Data cannot be sent with a GET shortlink.")
                )
            if not isinstance(command.data, dict) or not all(
                isinstance(value, SCALAR_TYPES) for value in command.data.values()
            ):
                return Return.err(
                    Error("DATA_INVALID", "Data must be a flat key-value object.")
                )
            data = json.dumps(command.data)

        linkbust = None
        if command.linkbust is not None:
            if not isinstance(command.linkbust, list) or not all(
                isinstance(name, str) for name in command.linkbust
            ):
                return Return.err(
                    Error("LINKBUST_INVALID", "Linkbust must be a list of technique names.")
                )
            techniques = normalize_techniques(command.linkbust)
            linkbust = [technique.value for technique in techniques] or None

        code = command.code
        if code is None or code == "":
            code = generate_code(self.code_length, self.rng)
        elif not isinstance(code, str) or not CODE_PATTERN.match(code):
            return Return.err(
                Error(
                    "CODE_INVALID",
                    "Code must be 1-32 letters, digits, dashes or underscores.",
                )
            )

        shortlink = Shortlink(
            code=code,
            method=method,
            destination=destination,
            data=data,
            linkbust=linkbust,
        )

        async def insert(uow):
            await uow.shortlinks.create(shortlink)

        self.writer.submit(insert, f"shortlink insert ({code})")

        return Return.ok(
            CreateShortlinkResponse(message="Shortlink queued for creation.", code=code)
        )

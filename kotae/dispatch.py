# -*- coding: utf-8 -*-
# BSD 3-Clause License
#
# Copyright (c) 2020-2024, Faster Speeding
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice, this
#   list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of the copyright holder nor the names of its
#   contributors may be used to endorse or promote products derived from
#   this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
"""State machine which guards an interaction's single initial response."""
from __future__ import annotations

__all__: list[str] = ["ResponseDispatcher", "ResponseState", "Transport", "UpdateResponseTypesT"]

import asyncio
import enum
import typing

import hikari

from . import errors

UpdateResponseTypesT = typing.Literal[
    hikari.ResponseType.MESSAGE_UPDATE, 7, hikari.ResponseType.DEFERRED_MESSAGE_UPDATE, 6
]
"""Type hint of the response types which can be used to update a component's message."""

_TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (errors.TransportError, hikari.HTTPError, asyncio.TimeoutError)


class ResponseState(enum.Enum):
    """The response state of an interaction."""

    PENDING = enum.auto()
    """No initial response has been delivered yet."""

    RESPONDED = enum.auto()
    """The initial response has been delivered.

    This state is terminal.
    """


class Transport(typing.Protocol):
    """Protocol of the collaborator which delivers initial responses."""

    async def send_interaction_response(
        self,
        interaction_id: hikari.Snowflake,
        response_type: UpdateResponseTypesT,
        payload: typing.Optional[bytes],
        /,
    ) -> None:
        """Deliver an interaction's initial response.

        This is called at most once per successful response and shouldn't
        retry on its own.

        Parameters
        ----------
        interaction_id
            ID of the interaction being responded to.
        response_type
            The type of response.
        payload
            The JSON encoded response data, if any.

        Raises
        ------
        kotae.errors.TransportError
            If the response couldn't be delivered.

            The response must not have been delivered if this is raised.
        """
        raise NotImplementedError


class ResponseDispatcher:
    """Dispatcher which sends at most one initial response for an interaction.

    Sending is serialized so only the first caller to successfully deliver
    a response changes the state; any other call made after then fails with
    [AlreadyRespondedError][kotae.errors.AlreadyRespondedError] without
    reaching the transport.
    """

    __slots__ = ("_interaction_id", "_lock", "_response_type", "_state", "_transport")

    def __init__(self, interaction_id: hikari.Snowflakeish, transport: Transport, /) -> None:
        """Initialise a response dispatcher.

        Parameters
        ----------
        interaction_id
            ID of the interaction this dispatcher is responding to.
        transport
            The transport used to deliver the response.
        """
        self._interaction_id = hikari.Snowflake(interaction_id)
        self._lock = asyncio.Lock()
        self._response_type: typing.Optional[UpdateResponseTypesT] = None
        self._state = ResponseState.PENDING
        self._transport = transport

    @property
    def has_responded(self) -> bool:
        """Whether the initial response has been delivered."""
        return self._state is ResponseState.RESPONDED

    @property
    def interaction_id(self) -> hikari.Snowflake:
        """ID of the interaction this dispatcher is responding to."""
        return self._interaction_id

    @property
    def response_type(self) -> typing.Optional[UpdateResponseTypesT]:
        """Type of the delivered initial response.

        This will be [None][] until a response has been delivered.
        """
        return self._response_type

    @property
    def state(self) -> ResponseState:
        """The current response state."""
        return self._state

    @property
    def transport(self) -> Transport:
        """The transport used to deliver the response."""
        return self._transport

    async def dispatch(self, response_type: UpdateResponseTypesT, payload: typing.Optional[bytes] = None, /) -> None:
        """Send the initial response.

        Parameters
        ----------
        response_type
            The type of response to send.
        payload
            The JSON encoded response data, if any.

        Raises
        ------
        kotae.errors.AlreadyRespondedError
            If the initial response has already been delivered.
        kotae.errors.DispatchError
            If the transport failed to deliver the response.

            The state is left as pending so the response may be retried.
        """
        async with self._lock:
            if self._state is ResponseState.RESPONDED:
                raise errors.AlreadyRespondedError(self._interaction_id)

            try:
                await self._transport.send_interaction_response(self._interaction_id, response_type, payload)

            except _TRANSPORT_ERRORS as exc:
                raise errors.DispatchError(self._interaction_id, exc) from exc

            self._response_type = response_type
            self._state = ResponseState.RESPONDED

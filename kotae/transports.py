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
"""Transport implementations for delivering initial responses."""
from __future__ import annotations

__all__: list[str] = ["FutureTransport", "encode_response_body"]

import asyncio
import functools
import logging
import typing

import hikari

from . import errors

if typing.TYPE_CHECKING:
    from . import dispatch

    _ResponseT = tuple[dispatch.UpdateResponseTypesT, typing.Optional[bytes]]


_LOGGER = logging.getLogger("hikari.kotae.transports")


def encode_response_body(
    response_type: typing.Union[int, hikari.ResponseType], payload: typing.Optional[bytes], /
) -> bytes:
    """Build the full JSON body of an initial response.

    Parameters
    ----------
    response_type
        The type of response.
    payload
        The JSON encoded response data, if any.

    Returns
    -------
    bytes
        The JSON encoded response body.
    """
    if payload is None:
        return b'{"type":%d}' % int(response_type)

    return b'{"type":%d,"data":%b}' % (int(response_type), payload)


class FutureTransport:
    """Transport which hands responses to a waiting interaction server request.

    When running behind an interaction server, the initial response is
    returned as the body of the HTTP request which delivered the
    interaction. The request handler calls
    [FutureTransport.expect][kotae.transports.FutureTransport.expect] before
    passing the interaction on and awaits the returned future.

    Examples
    --------
    ```py
    async def on_request(interaction: kotae.ComponentInteraction) -> bytes:
        future = transport.expect(interaction.id)
        dispatch_to_handlers(kotae.InteractionContext(interaction, transport))

        try:
            response_type, payload = await asyncio.wait_for(future, timeout=3)

        finally:
            transport.discard(interaction.id)

        return kotae.transports.encode_response_body(response_type, payload)
    ```
    """

    __slots__ = ("_futures",)

    def __init__(self) -> None:
        """Initialise a future transport."""
        self._futures: dict[hikari.Snowflake, asyncio.Future[_ResponseT]] = {}

    def expect(self, interaction_id: hikari.Snowflakeish, /) -> asyncio.Future[_ResponseT]:
        """Start waiting for an interaction's initial response.

        Parameters
        ----------
        interaction_id
            ID of the interaction to wait for.

        Returns
        -------
        asyncio.Future[tuple[UpdateResponseTypesT, bytes | None]]
            Future which'll be resolved with the response's type and payload.

            This stops being tracked once it's done, including when the
            caller cancels it or it times out.

        Raises
        ------
        ValueError
            If this is already waiting for the interaction.
        """
        interaction_id = hikari.Snowflake(interaction_id)
        if interaction_id in self._futures:
            raise ValueError(f"Already waiting for a response to interaction {interaction_id}")

        future: asyncio.Future[_ResponseT] = asyncio.get_running_loop().create_future()
        future.add_done_callback(functools.partial(self._remove_future, interaction_id))
        self._futures[interaction_id] = future
        return future

    def _remove_future(self, interaction_id: hikari.Snowflake, future: asyncio.Future[_ResponseT], /) -> None:
        if self._futures.get(interaction_id) is future:
            del self._futures[interaction_id]

    def discard(self, interaction_id: hikari.Snowflakeish, /) -> None:
        """Stop waiting for an interaction's initial response.

        This cancels the waiting future if it hasn't been resolved yet.
        """
        future = self._futures.pop(hikari.Snowflake(interaction_id), None)
        if future is not None:
            future.cancel()

    async def send_interaction_response(
        self,
        interaction_id: hikari.Snowflake,
        response_type: dispatch.UpdateResponseTypesT,
        payload: typing.Optional[bytes],
        /,
    ) -> None:
        # <<inherited docstring from kotae.dispatch.Transport>>.
        future = self._futures.get(interaction_id)
        if future is None:
            _LOGGER.debug("Dropping response for interaction %s as nothing is waiting for it", interaction_id)
            raise errors.TransportError(f"Nothing is waiting for a response to interaction {interaction_id}")

        if future.done():
            del self._futures[interaction_id]
            _LOGGER.debug("Dropping response for interaction %s as its request has finished", interaction_id)
            raise errors.TransportError(f"The request for interaction {interaction_id} is no longer waiting")

        del self._futures[interaction_id]
        future.set_result((response_type, payload))

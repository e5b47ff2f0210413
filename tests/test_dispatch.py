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

# pyright: reportUnknownMemberType=none
# This leads to too many false-positives around mocks.

import asyncio
import typing
from unittest import mock

import hikari
import pytest

from kotae import dispatch
from kotae import errors


class _SlowTransport:
    def __init__(self) -> None:
        self.calls: list[tuple[hikari.Snowflake, int, typing.Optional[bytes]]] = []

    async def send_interaction_response(
        self, interaction_id: hikari.Snowflake, response_type: int, payload: typing.Optional[bytes], /
    ) -> None:
        await asyncio.sleep(0)
        self.calls.append((interaction_id, response_type, payload))


class TestResponseDispatcher:
    def test_initial_state(self):
        dispatcher = dispatch.ResponseDispatcher(hikari.Snowflake(123), mock.AsyncMock())

        assert dispatcher.state is dispatch.ResponseState.PENDING
        assert dispatcher.has_responded is False
        assert dispatcher.response_type is None

    def test_interaction_id_property(self):
        dispatcher = dispatch.ResponseDispatcher(54123, mock.AsyncMock())

        assert dispatcher.interaction_id == 54123
        assert isinstance(dispatcher.interaction_id, hikari.Snowflake)

    def test_transport_property(self):
        mock_transport = mock.AsyncMock()

        assert dispatch.ResponseDispatcher(123, mock_transport).transport is mock_transport

    @pytest.mark.asyncio()
    async def test_dispatch(self):
        mock_transport = mock.AsyncMock()
        dispatcher = dispatch.ResponseDispatcher(hikari.Snowflake(6534), mock_transport)

        await dispatcher.dispatch(hikari.ResponseType.MESSAGE_UPDATE, b'{"content":"meow"}')

        assert dispatcher.state is dispatch.ResponseState.RESPONDED
        assert dispatcher.has_responded is True
        assert dispatcher.response_type is hikari.ResponseType.MESSAGE_UPDATE
        mock_transport.send_interaction_response.assert_awaited_once_with(
            hikari.Snowflake(6534), hikari.ResponseType.MESSAGE_UPDATE, b'{"content":"meow"}'
        )

    @pytest.mark.asyncio()
    async def test_dispatch_without_payload(self):
        mock_transport = mock.AsyncMock()
        dispatcher = dispatch.ResponseDispatcher(hikari.Snowflake(6534), mock_transport)

        await dispatcher.dispatch(hikari.ResponseType.DEFERRED_MESSAGE_UPDATE)

        assert dispatcher.response_type is hikari.ResponseType.DEFERRED_MESSAGE_UPDATE
        mock_transport.send_interaction_response.assert_awaited_once_with(
            hikari.Snowflake(6534), hikari.ResponseType.DEFERRED_MESSAGE_UPDATE, None
        )

    @pytest.mark.parametrize(
        ("first", "second"),
        [
            (hikari.ResponseType.MESSAGE_UPDATE, hikari.ResponseType.MESSAGE_UPDATE),
            (hikari.ResponseType.MESSAGE_UPDATE, hikari.ResponseType.DEFERRED_MESSAGE_UPDATE),
            (hikari.ResponseType.DEFERRED_MESSAGE_UPDATE, hikari.ResponseType.MESSAGE_UPDATE),
            (hikari.ResponseType.DEFERRED_MESSAGE_UPDATE, hikari.ResponseType.DEFERRED_MESSAGE_UPDATE),
        ],
    )
    @pytest.mark.asyncio()
    async def test_dispatch_when_already_responded(
        self, first: dispatch.UpdateResponseTypesT, second: dispatch.UpdateResponseTypesT
    ):
        mock_transport = mock.AsyncMock()
        dispatcher = dispatch.ResponseDispatcher(hikari.Snowflake(431), mock_transport)
        await dispatcher.dispatch(first)
        mock_transport.send_interaction_response.reset_mock()

        with pytest.raises(errors.AlreadyRespondedError) as exc_info:
            await dispatcher.dispatch(second, b"{}")

        assert exc_info.value.interaction_id == 431
        assert dispatcher.state is dispatch.ResponseState.RESPONDED
        assert dispatcher.response_type is first
        mock_transport.send_interaction_response.assert_not_called()

    @pytest.mark.parametrize("error", [errors.TransportError("Rejected"), asyncio.TimeoutError()])
    @pytest.mark.asyncio()
    async def test_dispatch_when_transport_fails(self, error: Exception):
        mock_transport = mock.AsyncMock()
        mock_transport.send_interaction_response.side_effect = error
        dispatcher = dispatch.ResponseDispatcher(hikari.Snowflake(4321), mock_transport)

        with pytest.raises(errors.DispatchError) as exc_info:
            await dispatcher.dispatch(hikari.ResponseType.MESSAGE_UPDATE, b"{}")

        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error
        assert exc_info.value.interaction_id == 4321
        assert dispatcher.state is dispatch.ResponseState.PENDING
        assert dispatcher.response_type is None

    @pytest.mark.asyncio()
    async def test_dispatch_retry_after_transport_failure(self):
        mock_transport = mock.AsyncMock()
        mock_transport.send_interaction_response.side_effect = [errors.TransportError("Timed out"), None]
        dispatcher = dispatch.ResponseDispatcher(hikari.Snowflake(4321), mock_transport)

        with pytest.raises(errors.DispatchError):
            await dispatcher.dispatch(hikari.ResponseType.MESSAGE_UPDATE, b"{}")

        await dispatcher.dispatch(hikari.ResponseType.MESSAGE_UPDATE, b"{}")

        assert dispatcher.state is dispatch.ResponseState.RESPONDED
        assert mock_transport.send_interaction_response.await_count == 2

    @pytest.mark.asyncio()
    async def test_dispatch_propagates_unexpected_errors(self):
        mock_transport = mock.AsyncMock()
        mock_transport.send_interaction_response.side_effect = LookupError("oops")
        dispatcher = dispatch.ResponseDispatcher(hikari.Snowflake(4321), mock_transport)

        with pytest.raises(LookupError, match="oops"):
            await dispatcher.dispatch(hikari.ResponseType.MESSAGE_UPDATE, b"{}")

        assert dispatcher.state is dispatch.ResponseState.PENDING

    @pytest.mark.asyncio()
    async def test_dispatch_when_racing(self):
        transport = _SlowTransport()
        dispatcher = dispatch.ResponseDispatcher(hikari.Snowflake(999), transport)

        results = await asyncio.gather(
            dispatcher.dispatch(hikari.ResponseType.DEFERRED_MESSAGE_UPDATE),
            dispatcher.dispatch(hikari.ResponseType.MESSAGE_UPDATE, b"{}"),
            return_exceptions=True,
        )

        assert results[0] is None
        assert isinstance(results[1], errors.AlreadyRespondedError)
        assert transport.calls == [(hikari.Snowflake(999), hikari.ResponseType.DEFERRED_MESSAGE_UPDATE, None)]
        assert dispatcher.response_type is hikari.ResponseType.DEFERRED_MESSAGE_UPDATE

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
"""Context used to respond to message component interactions."""
from __future__ import annotations

__all__: list[str] = ["ComponentInteraction", "InteractionContext"]

import datetime
import typing
from collections import abc as collections

import hikari

from . import _internal
from . import dispatch
from . import errors
from . import responses

if typing.TYPE_CHECKING:
    from typing_extensions import Self


_INTERACTION_LIFETIME: typing.Final[datetime.timedelta] = datetime.timedelta(minutes=15)


class ComponentInteraction:
    """Read-only view of a received message component interaction.

    Instances of this are created by whatever receives interactions and
    are handed over once; nothing here is mutated after creation.
    """

    __slots__ = ("_custom_id", "_id", "_message", "_message_id", "_token")

    def __init__(
        self,
        interaction_id: hikari.Snowflakeish,
        /,
        *,
        custom_id: typing.Optional[str] = None,
        message: typing.Optional[hikari.Message] = None,
        message_id: typing.Optional[hikari.Snowflakeish] = None,
        token: typing.Optional[str] = None,
    ) -> None:
        """Initialise a component interaction.

        Parameters
        ----------
        interaction_id
            ID of the interaction.
        custom_id
            Custom ID of the component which triggered the interaction.
        message
            Object of the message the component is on.

            This is left as [None][] for ephemeral messages.
        message_id
            ID of the message the component is on.

            Defaults to the ID of `message` when that's passed.
        token
            The interaction's token.
        """
        if message_id is None and message is not None:
            message_id = message.id

        self._custom_id = custom_id
        self._id = hikari.Snowflake(interaction_id)
        self._message = message
        self._message_id = hikari.Snowflake(message_id) if message_id is not None else None
        self._token = token

    @classmethod
    def from_hikari(cls, interaction: hikari.ComponentInteraction, /) -> Self:
        """Create a component interaction from a Hikari interaction object.

        Parameters
        ----------
        interaction
            The Hikari interaction.

        Returns
        -------
        ComponentInteraction
            The created component interaction.
        """
        message: typing.Optional[hikari.Message] = interaction.message
        if message is not None and message.flags & hikari.MessageFlag.EPHEMERAL:
            return cls(
                interaction.id, custom_id=interaction.custom_id or None, message_id=message.id, token=interaction.token
            )

        return cls(interaction.id, custom_id=interaction.custom_id or None, message=message, token=interaction.token)

    @property
    def created_at(self) -> datetime.datetime:
        """When this interaction was created."""
        return self._id.created_at

    @property
    def custom_id(self) -> typing.Optional[str]:
        """Custom ID of the component which triggered this interaction."""
        return self._custom_id

    @property
    def id(self) -> hikari.Snowflake:
        """ID of this interaction."""
        return self._id

    @property
    def message(self) -> typing.Optional[hikari.Message]:
        """Object of the message the component is on.

        This will be [None][] for ephemeral messages.
        """
        return self._message

    @property
    def message_id(self) -> typing.Optional[hikari.Snowflake]:
        """ID of the message the component is on."""
        return self._message_id

    @property
    def token(self) -> typing.Optional[str]:
        """The interaction's token."""
        return self._token


class InteractionContext:
    """The context used to respond to a message component interaction.

    Only one initial response can be made for an interaction; the first of
    [InteractionContext.edit][kotae.interactions.InteractionContext.edit],
    [InteractionContext.acknowledge][kotae.interactions.InteractionContext.acknowledge]
    or [InteractionContext.acknowledge_ephemeral][kotae.interactions.InteractionContext.acknowledge_ephemeral]
    to succeed wins and any later call raises
    [AlreadyRespondedError][kotae.errors.AlreadyRespondedError].
    """

    __slots__ = ("_defaults", "_dispatcher", "_entity_factory", "_interaction")

    def __init__(
        self,
        interaction: ComponentInteraction,
        transport: dispatch.Transport,
        /,
        *,
        defaults: typing.Optional[responses.DefaultsProvider] = None,
        entity_factory: typing.Optional[hikari.api.EntityFactory] = None,
    ) -> None:
        """Initialise an interaction context.

        Parameters
        ----------
        interaction
            The interaction this context is for.
        transport
            The transport used to deliver the initial response.
        defaults
            Source of the process-wide defaults responses are merged against.
        entity_factory
            Entity factory used to serialize embeds.

            This is required for editing in embeds.
        """
        self._defaults = defaults
        self._dispatcher = dispatch.ResponseDispatcher(interaction.id, transport)
        self._entity_factory = entity_factory
        self._interaction = interaction

    @property
    def custom_id(self) -> str:
        """Custom ID of the component which triggered this interaction.

        Raises
        ------
        kotae.errors.ProtocolInvariantViolation
            If the interaction has no custom ID.
        """
        if self._interaction.custom_id is None:
            raise errors.ProtocolInvariantViolation(f"Component interaction {self._interaction.id} has no custom ID")

        return self._interaction.custom_id

    @property
    def defaults(self) -> typing.Optional[responses.DefaultsProvider]:
        """Source of the defaults responses are merged against."""
        return self._defaults

    @property
    def dispatcher(self) -> dispatch.ResponseDispatcher:
        """The dispatcher guarding this interaction's initial response."""
        return self._dispatcher

    @property
    def expires_at(self) -> datetime.datetime:
        """When this context expires.

        After this time is reached the interaction can no longer be
        responded to.
        """
        return self._interaction.created_at + _INTERACTION_LIFETIME

    @property
    def has_expired(self) -> bool:
        """Whether this context has passed its expiry time."""
        return datetime.datetime.now(tz=datetime.timezone.utc) >= self.expires_at

    @property
    def has_responded(self) -> bool:
        """Whether the initial response has been delivered."""
        return self._dispatcher.has_responded

    @property
    def id_match(self) -> str:
        """Section of the custom ID used to identify the relevant handler."""
        return _internal.split_custom_id(self.custom_id).id_match

    @property
    def id_metadata(self) -> str:
        """Metadata from the interaction's custom ID."""
        return _internal.split_custom_id(self.custom_id).id_metadata

    @property
    def interaction(self) -> ComponentInteraction:
        """Object of the interaction this context is for."""
        return self._interaction

    @property
    def message(self) -> typing.Optional[hikari.Message]:
        """Object of the message the component is on.

        This will be [None][] for ephemeral messages, use
        [InteractionContext.message_id][kotae.interactions.InteractionContext.message_id]
        for those.
        """
        return self._interaction.message

    @property
    def message_id(self) -> hikari.Snowflake:
        """ID of the message the component is on.

        Raises
        ------
        kotae.errors.ProtocolInvariantViolation
            If the interaction has no message ID.
        """
        if self._interaction.message_id is None:
            raise errors.ProtocolInvariantViolation(f"Component interaction {self._interaction.id} has no message ID")

        return self._interaction.message_id

    @property
    def response_type(self) -> typing.Optional[dispatch.UpdateResponseTypesT]:
        """Type of the initial response, if one has been delivered."""
        return self._dispatcher.response_type

    def _snapshot_defaults(self) -> typing.Optional[responses.ResponseDefaults]:
        return responses.ResponseDefaults.from_provider(self._defaults) if self._defaults is not None else None

    async def edit(
        self,
        builder: typing.Optional[responses.ResponseBuilder] = None,
        /,
        *,
        content: hikari.UndefinedNoneOr[str] = hikari.UNDEFINED,
        embed: hikari.UndefinedOr[hikari.Embed] = hikari.UNDEFINED,
        embeds: hikari.UndefinedOr[collections.Sequence[hikari.Embed]] = hikari.UNDEFINED,
        component: hikari.UndefinedOr[hikari.api.ComponentBuilder] = hikari.UNDEFINED,
        components: hikari.UndefinedOr[collections.Sequence[hikari.api.ComponentBuilder]] = hikari.UNDEFINED,
        allowed_mentions: hikari.UndefinedNoneOr[responses.MentionPolicy] = hikari.UNDEFINED,
    ) -> None:
        """Respond by immediately editing the message the component is on.

        Fields which are set neither on `builder` nor through the keyword
        arguments are filled in from the context's defaults.

        Parameters
        ----------
        builder
            Builder of the edit to make.

            The keyword arguments are applied on top of this.
        content
            If provided, the message content to edit in.
        embed
            If provided, the embed to edit in.
        embeds
            If provided, the embeds to edit in.
        component
            If provided, builder object of the component to edit in.
        components
            If provided, the component builder objects to edit in.
        allowed_mentions
            If provided, the mention policy to use.

            [None][] explicitly leaves the mentions unrestricted.

        Raises
        ------
        kotae.errors.AlreadyRespondedError
            If the initial response has already been delivered.
        kotae.errors.DispatchError
            If the transport failed to deliver the response.
        ValueError
            If the response has the ephemeral flag set, as an edit can't
            change whether a message is ephemeral.

            If both `embed` and `embeds` are passed or both `component`
            and `components` are passed.
        """
        if self._dispatcher.has_responded:
            raise errors.AlreadyRespondedError(self._interaction.id)

        if builder is None:
            builder = responses.ResponseBuilder()

        if content is not hikari.UNDEFINED:
            builder = builder.with_content(content)

        if allowed_mentions is not hikari.UNDEFINED:
            builder = builder.with_allowed_mentions(allowed_mentions)

        embeds = _internal.to_list(embed, embeds, "embed")
        if embeds is not hikari.UNDEFINED:
            builder = builder.with_embeds(embeds)

        components = _internal.to_list(component, components, "component")
        if components is not hikari.UNDEFINED:
            builder = builder.with_components(components)

        spec = builder.build(self._snapshot_defaults())
        if spec.is_ephemeral:
            raise ValueError("An edit cannot change whether a message is ephemeral")

        await self._dispatcher.dispatch(hikari.ResponseType.MESSAGE_UPDATE, spec.encode(self._entity_factory))

    async def acknowledge(self) -> None:
        """Acknowledge the interaction without changing the message.

        The client shows a loading state until a followup is made.

        Raises
        ------
        kotae.errors.AlreadyRespondedError
            If the initial response has already been delivered.
        kotae.errors.DispatchError
            If the transport failed to deliver the response.
        """
        await self._dispatcher.dispatch(hikari.ResponseType.DEFERRED_MESSAGE_UPDATE)

    async def acknowledge_ephemeral(self) -> None:
        """Acknowledge the interaction, marking the followup as ephemeral.

        Raises
        ------
        kotae.errors.AlreadyRespondedError
            If the initial response has already been delivered.
        kotae.errors.DispatchError
            If the transport failed to deliver the response.
        """
        payload = responses.ResponseBuilder().with_ephemeral().build().encode()
        await self._dispatcher.dispatch(hikari.ResponseType.DEFERRED_MESSAGE_UPDATE, payload)

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
"""Immutable response builders and the defaults they're merged against."""
from __future__ import annotations

__all__: list[str] = ["DefaultsProvider", "MentionPolicy", "ResponseBuilder", "ResponseDefaults", "ResponseSpec"]

import dataclasses
import json
import typing
from collections import abc as collections

import hikari

if typing.TYPE_CHECKING:
    from typing_extensions import Self


_MAX_MENTIONS: typing.Final[int] = 100
_MentionsT = typing.Union[bool, collections.Sequence[hikari.Snowflake]]


def _unique_ids(name: str, values: hikari.SnowflakeishSequence[typing.Any], /) -> tuple[hikari.Snowflake, ...]:
    ids = tuple(dict.fromkeys(hikari.Snowflake(value) for value in values))
    if len(ids) > _MAX_MENTIONS:
        raise ValueError(f"Cannot allow more than {_MAX_MENTIONS} {name} mentions")

    return ids


@dataclasses.dataclass(frozen=True)
class MentionPolicy:
    """Which mentions a response is allowed to ping.

    `users` and `roles` may either be a bool to allow or suppress all mentions
    of that type, or a sequence of IDs to only allow pinging those entities.
    """

    everyone: bool = False
    """Whether `@everyone` and `@here` mentions should ping."""

    users: _MentionsT = False
    """Configuration for the allowed user mentions."""

    roles: _MentionsT = False
    """Configuration for the allowed role mentions."""

    def __post_init__(self) -> None:
        if not isinstance(self.users, bool):
            object.__setattr__(self, "users", _unique_ids("user", self.users))

        if not isinstance(self.roles, bool):
            object.__setattr__(self, "roles", _unique_ids("role", self.roles))

    @classmethod
    def none(cls) -> MentionPolicy:
        """Create a policy which suppresses every mention."""
        return cls()

    @classmethod
    def all(cls) -> MentionPolicy:
        """Create a policy which allows every mention to ping."""
        return cls(everyone=True, users=True, roles=True)

    def to_payload(self) -> dict[str, typing.Any]:
        """Build the raw `allowed_mentions` object for this policy."""
        parse: list[str] = []
        payload: dict[str, typing.Any] = {"parse": parse}
        if self.everyone:
            parse.append("everyone")

        for key, value in (("users", self.users), ("roles", self.roles)):
            if value is True:
                parse.append(key)

            elif value is not False:
                payload[key] = [str(entity_id) for entity_id in value]

        return payload


class DefaultsProvider(typing.Protocol):
    """Protocol of a source of process-wide response defaults."""

    def current_allowed_mentions_default(self) -> typing.Optional[MentionPolicy]:
        """Get the mention policy responses should default to, if any."""
        raise NotImplementedError


@dataclasses.dataclass(frozen=True)
class ResponseDefaults:
    """Process-wide defaults used to fill in fields a response didn't set.

    This is immutable configuration; a response never modifies it.
    """

    content: hikari.UndefinedNoneOr[str] = hikari.UNDEFINED
    """The default message content."""

    embeds: hikari.UndefinedOr[collections.Sequence[hikari.Embed]] = hikari.UNDEFINED
    """The default message embeds."""

    components: hikari.UndefinedOr[collections.Sequence[hikari.api.ComponentBuilder]] = hikari.UNDEFINED
    """The default message components."""

    allowed_mentions: hikari.UndefinedNoneOr[MentionPolicy] = hikari.UNDEFINED
    """The default mention policy."""

    def current_allowed_mentions_default(self) -> typing.Optional[MentionPolicy]:
        # <<inherited docstring from DefaultsProvider>>.
        if self.allowed_mentions is hikari.UNDEFINED:
            return None

        return self.allowed_mentions

    @classmethod
    def from_provider(cls, provider: DefaultsProvider, /) -> ResponseDefaults:
        """Take a snapshot of a defaults provider for a single response.

        Parameters
        ----------
        provider
            The defaults provider.

            If this is already a [ResponseDefaults][kotae.responses.ResponseDefaults]
            then it is returned as-is, otherwise only its mention policy is
            read.

        Returns
        -------
        ResponseDefaults
            The defaults snapshot.
        """
        if isinstance(provider, ResponseDefaults):
            return provider

        policy = provider.current_allowed_mentions_default()
        return cls(allowed_mentions=hikari.UNDEFINED if policy is None else policy)


_EMPTY_DEFAULTS: typing.Final[ResponseDefaults] = ResponseDefaults()


@dataclasses.dataclass(frozen=True)
class ResponseSpec:
    """The finished, immutable body of a single interaction response.

    Fields which are [hikari.UNDEFINED][] are left out of the payload.
    """

    content: hikari.UndefinedNoneOr[str] = hikari.UNDEFINED
    """The message content."""

    embeds: hikari.UndefinedOr[collections.Sequence[hikari.Embed]] = hikari.UNDEFINED
    """The message embeds."""

    components: hikari.UndefinedOr[collections.Sequence[hikari.api.ComponentBuilder]] = hikari.UNDEFINED
    """The message components."""

    allowed_mentions: hikari.UndefinedNoneOr[MentionPolicy] = hikari.UNDEFINED
    """The mention policy.

    [None][] means no restriction was applied.
    """

    flags: hikari.UndefinedOr[hikari.MessageFlag] = hikari.UNDEFINED
    """The message flags."""

    @property
    def is_ephemeral(self) -> bool:
        """Whether this response has the ephemeral flag set."""
        return self.flags is not hikari.UNDEFINED and bool(self.flags & hikari.MessageFlag.EPHEMERAL)

    def to_payload(
        self, entity_factory: typing.Optional[hikari.api.EntityFactory] = None, /
    ) -> dict[str, typing.Any]:
        """Build the raw JSON object for this response.

        Parameters
        ----------
        entity_factory
            Entity factory used to serialize embeds.

            This is only required if the response has embeds.

        Returns
        -------
        dict[str, typing.Any]
            The raw JSON object.

        Raises
        ------
        ValueError
            If this has embeds but no entity factory was passed or if an
            embed references a local file.
        """
        payload: dict[str, typing.Any] = {}
        if self.content is not hikari.UNDEFINED:
            payload["content"] = self.content

        if self.embeds is not hikari.UNDEFINED:
            if self.embeds and entity_factory is None:
                raise ValueError("An entity factory is required to serialize embeds")

            payload["embeds"] = []
            for embed in self.embeds:
                assert entity_factory is not None
                embed_payload, resources = entity_factory.serialize_embed(embed)
                if resources:
                    raise ValueError("Embeds which upload files aren't supported in interaction responses")

                payload["embeds"].append(embed_payload)

        if self.components is not hikari.UNDEFINED:
            payload["components"] = []
            for component in self.components:
                component_payload, resources = component.build()
                if resources:
                    raise ValueError("Components which upload files aren't supported in interaction responses")

                payload["components"].append(component_payload)

        if isinstance(self.allowed_mentions, MentionPolicy):
            payload["allowed_mentions"] = self.allowed_mentions.to_payload()

        if self.flags is not hikari.UNDEFINED:
            payload["flags"] = int(self.flags)

        return payload

    def encode(self, entity_factory: typing.Optional[hikari.api.EntityFactory] = None, /) -> bytes:
        """Serialize this response to a UTF-8 JSON body.

        This takes the same arguments and raises the same errors as
        [ResponseSpec.to_payload][kotae.responses.ResponseSpec.to_payload].
        """
        return json.dumps(self.to_payload(entity_factory), separators=(",", ":")).encode()


@dataclasses.dataclass(frozen=True)
class ResponseBuilder:
    """Immutable builder of a [ResponseSpec][kotae.responses.ResponseSpec].

    Every `with_` method returns a new builder and leaves the original
    unchanged, so partially built responses can be shared and discarded
    freely.

    Examples
    --------
    ```py
    builder = kotae.ResponseBuilder().with_content("Done").with_embeds([embed])
    await ctx.edit(builder)
    ```
    """

    content: hikari.UndefinedNoneOr[str] = hikari.UNDEFINED
    embeds: hikari.UndefinedOr[collections.Sequence[hikari.Embed]] = hikari.UNDEFINED
    components: hikari.UndefinedOr[collections.Sequence[hikari.api.ComponentBuilder]] = hikari.UNDEFINED
    allowed_mentions: hikari.UndefinedNoneOr[MentionPolicy] = hikari.UNDEFINED
    flags: hikari.UndefinedOr[hikari.MessageFlag] = hikari.UNDEFINED

    def __post_init__(self) -> None:
        if self.embeds is not hikari.UNDEFINED:
            object.__setattr__(self, "embeds", tuple(self.embeds))

        if self.components is not hikari.UNDEFINED:
            object.__setattr__(self, "components", tuple(self.components))

    def with_content(self, content: typing.Optional[str], /) -> Self:
        """Set the message content.

        Passing [None][] removes the existing content when editing.
        """
        return dataclasses.replace(self, content=content)

    def with_embeds(self, embeds: collections.Sequence[hikari.Embed], /) -> Self:
        """Set the message embeds.

        An empty sequence removes the existing embeds when editing.
        """
        return dataclasses.replace(self, embeds=embeds)

    def with_components(self, components: collections.Sequence[hikari.api.ComponentBuilder], /) -> Self:
        """Set the message components.

        An empty sequence removes the existing components when editing.
        """
        return dataclasses.replace(self, components=components)

    def with_allowed_mentions(self, policy: typing.Optional[MentionPolicy], /) -> Self:
        """Set the mention policy.

        Parameters
        ----------
        policy
            The mention policy to use.

            [None][] explicitly marks this response as having no mention
            restriction, meaning the default policy won't be applied.
        """
        return dataclasses.replace(self, allowed_mentions=policy)

    def with_flags(self, flags: typing.Union[int, hikari.MessageFlag], /) -> Self:
        """Set the message flags."""
        return dataclasses.replace(self, flags=hikari.MessageFlag(flags))

    def with_ephemeral(self, state: bool = True, /) -> Self:
        """Set or clear the ephemeral flag while keeping any other flags."""
        flags = hikari.MessageFlag.NONE if self.flags is hikari.UNDEFINED else self.flags
        if state:
            return self.with_flags(flags | hikari.MessageFlag.EPHEMERAL)

        return self.with_flags(flags & ~hikari.MessageFlag.EPHEMERAL)

    def build(self, defaults: typing.Optional[ResponseDefaults] = None, /) -> ResponseSpec:
        """Build the response, filling in unset fields from the defaults.

        Each field is resolved on its own: the value set on this builder is
        used if there is one, otherwise the default's value is used if there
        is one, otherwise the field is left undefined.

        Parameters
        ----------
        defaults
            Snapshot of the defaults to merge against.

        Returns
        -------
        ResponseSpec
            The built response.
        """
        if defaults is None:
            defaults = _EMPTY_DEFAULTS

        return ResponseSpec(
            content=defaults.content if self.content is hikari.UNDEFINED else self.content,
            embeds=defaults.embeds if self.embeds is hikari.UNDEFINED else self.embeds,
            components=defaults.components if self.components is hikari.UNDEFINED else self.components,
            allowed_mentions=(
                defaults.allowed_mentions if self.allowed_mentions is hikari.UNDEFINED else self.allowed_mentions
            ),
            flags=self.flags,
        )

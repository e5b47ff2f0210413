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
"""Errors raised while responding to component interactions."""
from __future__ import annotations

__all__: list[str] = [
    "AlreadyRespondedError",
    "DispatchError",
    "KotaeError",
    "ProtocolInvariantViolation",
    "TransportError",
]

import typing

if typing.TYPE_CHECKING:
    import hikari


class KotaeError(Exception):
    """Base class for all errors raised by Kotae."""


class ProtocolInvariantViolation(KotaeError):
    """Error raised when an interaction is missing data it's guaranteed to have.

    This indicates a bug in whatever produced the interaction rather than a
    recoverable condition and should not be retried.
    """

    def __init__(self, message: str, /) -> None:
        """Initialise a protocol invariant violation.

        Parameters
        ----------
        message
            String message which describes the violated invariant.
        """
        super().__init__(message)
        self.message = message
        """String message which describes the violated invariant."""

    def __str__(self) -> str:
        return self.message


class AlreadyRespondedError(KotaeError):
    """Error raised when an interaction's initial response has already been sent."""

    def __init__(self, interaction_id: hikari.Snowflake, /) -> None:
        """Initialise an already responded error.

        Parameters
        ----------
        interaction_id
            ID of the interaction which was already responded to.
        """
        super().__init__(interaction_id)
        self.interaction_id = interaction_id
        """ID of the interaction which was already responded to."""

    def __str__(self) -> str:
        return f"Interaction {self.interaction_id} has already been responded to"


class TransportError(KotaeError):
    """Error raised by a transport when it failed to deliver a response.

    When this is raised the response must not have been delivered.
    """

    def __init__(self, message: str, /) -> None:
        """Initialise a transport error.

        Parameters
        ----------
        message
            String message which describes why delivery failed.
        """
        super().__init__(message)
        self.message = message
        """String message which describes why delivery failed."""

    def __str__(self) -> str:
        return self.message


class DispatchError(KotaeError):
    """Error raised when sending an initial response failed.

    The interaction is still eligible for a response after this is raised so
    the same call may be retried.
    """

    def __init__(self, interaction_id: hikari.Snowflake, cause: BaseException, /) -> None:
        """Initialise a dispatch error.

        Parameters
        ----------
        interaction_id
            ID of the interaction the response was for.
        cause
            The error the transport raised.
        """
        super().__init__(interaction_id, cause)
        self.cause = cause
        """The error the transport raised."""

        self.interaction_id = interaction_id
        """ID of the interaction the response was for."""

    def __str__(self) -> str:
        return f"Failed to send initial response for interaction {self.interaction_id}: {self.cause!r}"

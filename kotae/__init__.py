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
"""Utilities for responding to Hikari message component interactions exactly once."""

from __future__ import annotations

__all__: list[str] = [
    "AlreadyRespondedError",
    "ComponentInteraction",
    "DefaultsProvider",
    "DispatchError",
    "FutureTransport",
    "InteractionContext",
    "KotaeError",
    "MentionPolicy",
    "ProtocolInvariantViolation",
    "ResponseBuilder",
    "ResponseDefaults",
    "ResponseDispatcher",
    "ResponseSpec",
    "ResponseState",
    "Transport",
    "TransportError",
    "dispatch",
    "errors",
    "interactions",
    "responses",
    "transports",
]

from . import dispatch
from . import errors
from . import interactions
from . import responses
from . import transports
from .dispatch import ResponseDispatcher
from .dispatch import ResponseState
from .dispatch import Transport
from .errors import AlreadyRespondedError
from .errors import DispatchError
from .errors import KotaeError
from .errors import ProtocolInvariantViolation
from .errors import TransportError
from .interactions import ComponentInteraction
from .interactions import InteractionContext
from .responses import DefaultsProvider
from .responses import MentionPolicy
from .responses import ResponseBuilder
from .responses import ResponseDefaults
from .responses import ResponseSpec
from .transports import FutureTransport

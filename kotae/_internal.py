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
"""Internal functions and types used in Kotae."""
from __future__ import annotations

__all__: list[str] = ["SplitId", "split_custom_id", "to_list"]

import typing
from collections import abc as collections

import hikari

_T = typing.TypeVar("_T")


class SplitId(typing.NamedTuple):
    """Represents a split custom ID."""

    id_match: str
    id_metadata: str


def split_custom_id(custom_id: str) -> SplitId:
    """Split a custom ID into its match and metadata parts.

    Returns
    -------
    tuple[str, str]
        Tuple of the ID's match part and the ID's metadata part.
    """
    parts = custom_id.split(":", 1)

    try:
        id_metadata = parts[1]

    except IndexError:
        id_metadata = ""

    return SplitId(id_match=parts[0], id_metadata=id_metadata)


def to_list(
    singular: hikari.UndefinedOr[_T], plural: hikari.UndefinedOr[collections.Sequence[_T]], name: str, /
) -> hikari.UndefinedOr[list[_T]]:
    """Merge a singular and plural argument pair into a list.

    Raises
    ------
    ValueError
        If both the singular and plural argument were passed.
    """
    if singular is not hikari.UNDEFINED and plural is not hikari.UNDEFINED:
        raise ValueError(f"Only one of {name} or {name}s may be passed")

    if singular is not hikari.UNDEFINED:
        return [singular]

    if plural is not hikari.UNDEFINED:
        return list(plural)

    return hikari.UNDEFINED

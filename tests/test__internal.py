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

from unittest import mock

import hikari
import pytest

from kotae import _internal


@pytest.mark.parametrize(
    ("custom_id", "id_match", "id_metadata"),
    [
        ("meow:nyaa", "meow", "nyaa"),
        ("meow", "meow", ""),
        ("meow:nyaa:echo", "meow", "nyaa:echo"),
        (":only metadata", "", "only metadata"),
    ],
)
def test_split_custom_id(custom_id: str, id_match: str, id_metadata: str):
    result = _internal.split_custom_id(custom_id)

    assert result.id_match == id_match
    assert result.id_metadata == id_metadata


def test_to_list_when_singular_passed():
    value = mock.Mock()

    assert _internal.to_list(value, hikari.UNDEFINED, "embed") == [value]


def test_to_list_when_plural_passed():
    values = (mock.Mock(), mock.Mock())

    assert _internal.to_list(hikari.UNDEFINED, values, "embed") == list(values)


def test_to_list_when_neither_passed():
    assert _internal.to_list(hikari.UNDEFINED, hikari.UNDEFINED, "embed") is hikari.UNDEFINED


def test_to_list_when_both_passed():
    with pytest.raises(ValueError, match="Only one of component or components may be passed"):
        _internal.to_list(mock.Mock(), [mock.Mock()], "component")

# SPDX-License-Identifier: MIT
"""Comparison operators used in version requirements.

=============  ===========  =================================================
Operator       Written as   Meaning
=============  ===========  =================================================
``EXACT``      ``=I.J.K``   exactly I.J.K; ``=I.J`` is ``>=I.J.0, <I.(J+1).0``
``GREATER``    ``>I.J.K``   ``>I.J`` is ``>=I.(J+1).0``
``GREATER_EQ`` ``>=I.J.K``  ``>=I.J`` is ``>=I.J.0``
``LESS``       ``<I.J.K``   ``<I.J`` is ``<I.J.0``
``LESS_EQ``    ``<=I.J.K``  ``<=I.J`` is ``<I.(J+1).0``
``TILDE``      ``~I.J.K``   ``>=I.J.K, <I.(J+1).0``; ``~I.J`` is ``=I.J``
``CARET``      ``^I.J.K``   updates right of the first nonzero part
``WILDCARD``   ``I.J.*``    ``=I.J``; ``I.*`` and ``I.*.*`` are ``=I``
=============  ===========  =================================================

A comparator written without an operator uses ``CARET``. ``WILDCARD`` is
never written explicitly; the parser produces it when a bare comparator has a
``*``, ``x`` or ``X`` in its minor or patch position.
"""

from __future__ import annotations

from enum import Enum


class Op(Enum):
    EXACT = "="
    GREATER = ">"
    GREATER_EQ = ">="
    LESS = "<"
    LESS_EQ = "<="
    TILDE = "~"
    CARET = "^"
    WILDCARD = "*"

    @property
    def symbol(self) -> str:
        """Operator prefix used when formatting a comparator."""
        if self is Op.WILDCARD:
            return ""
        return self.value


DEFAULT_OP = Op.CARET

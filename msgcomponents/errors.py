"""
The MIT License (MIT)

Copyright (c) 2015-present Rapptz

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
DEALINGS IN THE SOFTWARE.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from .limits import ConstraintViolation

__all__ = (
    'ComponentException',
    'InvalidComponent',
    'ComponentConstraintError',
)


class ComponentException(Exception):
    """Base exception class for msgcomponents.

    Ideally speaking, this could be caught to handle any exceptions raised from this library.
    """

    pass


class InvalidComponent(ComponentException, ValueError):
    """Exception that's raised when a component is constructed with
    a combination of fields its type does not allow.

    This inherits from :exc:`ComponentException` and :exc:`ValueError`.
    """

    pass


class ComponentConstraintError(ComponentException):
    """Exception that's raised by :func:`ensure_valid` when a component
    breaks one or more of the platform's documented limits.

    Attributes
    -----------
    violations: List[:class:`ConstraintViolation`]
        Every violation that was found, in the order they were found.
    """

    def __init__(self, violations: Iterable[ConstraintViolation]):
        self.violations: List[ConstraintViolation] = list(violations)
        super().__init__('\n'.join(str(violation) for violation in self.violations))

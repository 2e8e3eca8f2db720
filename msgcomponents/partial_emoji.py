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

import re
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Union

from .errors import InvalidComponent
from .mixins import Immutable

if TYPE_CHECKING:
    from typing_extensions import Self

    from .types.emoji import Emoji as EmojiPayload, PartialEmoji as PartialEmojiPayload

__all__ = (
    'EmojiInfo',
    'PartialEmoji',
)


def _snowflake(value: Optional[Union[int, str]]) -> Optional[str]:
    return None if value is None else str(value)


class PartialEmoji(Immutable):
    """Represents the reduced emoji reference that components carry.

    A custom emoji has an :attr:`id`; a standard (unicode) emoji only has a
    :attr:`name`. At least one of the two must be given.

    .. container:: operations

        .. describe:: x == y

            Checks if two emoji are the same.

        .. describe:: x != y

            Checks if two emoji are not the same.

        .. describe:: hash(x)

            Return the emoji's hash.

        .. describe:: str(x)

            Returns the emoji rendered for the platform.

    Attributes
    -----------
    id: Optional[:class:`str`]
        The ID of a custom emoji.
    name: Optional[:class:`str`]
        The custom emoji name or the unicode emoji itself.
    animated: Optional[:class:`bool`]
        Whether the emoji is animated, if known.
    """

    __slots__ = ('id', 'name', 'animated')

    _CUSTOM_EMOJI_RE = re.compile(r'<?(?:(?P<animated>a)?:)?(?P<name>[A-Za-z0-9\_]+):(?P<id>[0-9]{13,20})>?')

    def __init__(
        self,
        *,
        name: Optional[str] = None,
        id: Optional[Union[int, str]] = None,
        animated: Optional[bool] = None,
    ) -> None:
        if not name and id is None:
            raise InvalidComponent('emoji must have a name or an id')

        self._set(id=_snowflake(id), name=name or None, animated=animated)

    @classmethod
    def from_str(cls, value: str) -> Self:
        """Converts an emoji string into a :class:`PartialEmoji`.

        The formats accepted are:

        - ``a:name:id``
        - ``<a:name:id>``
        - ``name:id``
        - ``<:name:id>``

        Anything else is taken to be a unicode emoji.

        Parameters
        ------------
        value: :class:`str`
            The string representation of an emoji.

        Returns
        --------
        :class:`PartialEmoji`
            The partial emoji from this string.
        """
        match = cls._CUSTOM_EMOJI_RE.match(value)
        if match is not None:
            groups = match.groupdict()
            animated = True if groups['animated'] else None
            return cls(name=groups['name'], id=groups['id'], animated=animated)

        return cls(name=value)

    @classmethod
    def from_dict(cls, data: Union[PartialEmojiPayload, Mapping[str, Any]]) -> Self:
        return cls(
            name=data.get('name'),
            id=data.get('id'),
            animated=data.get('animated'),
        )

    def to_dict(self) -> PartialEmojiPayload:
        payload: PartialEmojiPayload = {}
        if self.id is not None:
            payload['id'] = self.id
        if self.name is not None:
            payload['name'] = self.name
        if self.animated is not None:
            payload['animated'] = self.animated
        return payload

    def is_custom_emoji(self) -> bool:
        """:class:`bool`: Checks if this is a custom emoji."""
        return self.id is not None

    def is_unicode_emoji(self) -> bool:
        """:class:`bool`: Checks if this is a unicode emoji."""
        return self.id is None

    def __str__(self) -> str:
        if self.id is None:
            return self.name  # type: ignore # a name is always present without an id
        name = self.name or '_'
        if self.animated:
            return f'<a:{name}:{self.id}>'
        return f'<:{name}:{self.id}>'

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} animated={self.animated} name={self.name!r} id={self.id}>'


class EmojiInfo(Immutable):
    """Represents the full emoji record as the platform describes it.

    Components only embed the reduced projection returned by :meth:`to_partial`.

    Attributes
    -----------
    name: Optional[:class:`str`]
        The emoji's name, or the unicode emoji itself.
    id: Optional[:class:`str`]
        The emoji's ID, for custom emoji.
    roles: Optional[Tuple[:class:`str`, ...]]
        The IDs of the roles allowed to use this emoji.
    user: Optional[Dict[:class:`str`, Any]]
        The raw user object of whoever created the emoji.
    require_colons: Optional[:class:`bool`]
        Whether the emoji must be wrapped in colons to be used.
    managed: Optional[:class:`bool`]
        Whether the emoji is managed by an integration.
    available: Optional[:class:`bool`]
        Whether the emoji can currently be used.
    animated: Optional[:class:`bool`]
        Whether the emoji is animated.
    """

    __slots__ = (
        'name',
        'id',
        'roles',
        'user',
        'require_colons',
        'managed',
        'available',
        'animated',
    )

    def __init__(
        self,
        *,
        name: Optional[str] = None,
        id: Optional[Union[int, str]] = None,
        roles: Optional[Iterable[Union[int, str]]] = None,
        user: Optional[Mapping[str, Any]] = None,
        require_colons: Optional[bool] = None,
        managed: Optional[bool] = None,
        available: Optional[bool] = None,
        animated: Optional[bool] = None,
    ) -> None:
        self._set(
            name=name,
            id=_snowflake(id),
            roles=tuple(str(role) for role in roles) if roles is not None else None,
            user=dict(user) if user is not None else None,
            require_colons=require_colons,
            managed=managed,
            available=available,
            animated=animated,
        )

    def __hash__(self) -> int:
        return hash((self.__class__, self.id, self.name))

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} id={self.id} name={self.name!r} animated={self.animated}>'

    @classmethod
    def from_dict(cls, data: EmojiPayload) -> Self:
        return cls(
            name=data.get('name'),
            id=data.get('id'),
            roles=data.get('roles'),
            user=data.get('user'),
            require_colons=data.get('require_colons'),
            managed=data.get('managed'),
            available=data.get('available'),
            animated=data.get('animated'),
        )

    def to_dict(self) -> EmojiPayload:
        payload: EmojiPayload = {
            'id': self.id,
            'name': self.name,
        }
        if self.roles is not None:
            payload['roles'] = list(self.roles)
        if self.user is not None:
            payload['user'] = dict(self.user)
        for key in ('require_colons', 'managed', 'available', 'animated'):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value  # type: ignore
        return payload

    def to_partial(self) -> PartialEmoji:
        """Returns the reduced ``{id, name, animated}`` projection of this emoji.

        Raises
        -------
        InvalidComponent
            The emoji has neither a name nor an id.
        """
        return PartialEmoji(name=self.name, id=self.id, animated=self.animated)

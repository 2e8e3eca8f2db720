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

import logging
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Dict,
    Iterable,
    List,
    Literal,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
    overload,
)

from .enums import ButtonStyle, ChannelType, ComponentType, TextStyle
from .errors import InvalidComponent
from .limits import DEFAULT_LIMITS, validate
from .mixins import Immutable
from .partial_emoji import EmojiInfo, PartialEmoji
from .utils import MISSING

if TYPE_CHECKING:
    from typing_extensions import Self

    from .limits import ComponentLimits, ConstraintViolation
    from .types.components import (
        ActionRow as ActionRowPayload,
        ButtonComponent as ButtonComponentPayload,
        ChannelSelectComponent as ChannelSelectComponentPayload,
        Component as ComponentPayload,
        MentionableSelectComponent as MentionableSelectComponentPayload,
        RoleSelectComponent as RoleSelectComponentPayload,
        SelectComponent as SelectComponentPayload,
        SelectOption as SelectOptionPayload,
        StringSelectComponent as StringSelectComponentPayload,
        TextInput as TextInputPayload,
        UserSelectComponent as UserSelectComponentPayload,
    )

    EmojiLike = Union[str, EmojiInfo, PartialEmoji]

_log = logging.getLogger(__name__)

E = TypeVar('E', bound=Enum)

__all__ = (
    'Component',
    'ActionRow',
    'Button',
    'SelectOption',
    'StringSelectMenu',
    'UserSelectMenu',
    'RoleSelectMenu',
    'MentionableSelectMenu',
    'ChannelSelectMenu',
    'TextInput',
    'MessageComponent',
    'ActionRowChild',
    'component_factory',
)


def _require(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise InvalidComponent(f'{field} is required and must be a str, not {value.__class__.__name__}')
    return value


def _to_enum(cls: Type[E], value: Any, field: str) -> E:
    if isinstance(value, cls):
        return value
    # bool is an int subclass, True would pass as 1
    if isinstance(value, bool):
        raise InvalidComponent(f'{field} must be a {cls.__name__}, not {value!r}')
    try:
        return cls(value)
    except ValueError:
        raise InvalidComponent(f'{field} must be a {cls.__name__}, not {value!r}') from None


def _to_emoji(emoji: Optional[EmojiLike]) -> Optional[PartialEmoji]:
    if emoji is None or isinstance(emoji, PartialEmoji):
        return emoji
    if isinstance(emoji, EmojiInfo):
        return emoji.to_partial()
    if isinstance(emoji, str):
        return PartialEmoji.from_str(emoji)
    raise TypeError(f'expected emoji to be str, EmojiInfo, or PartialEmoji not {emoji.__class__.__name__}')


class Component(Immutable):
    """Represents a message component.

    The components supported are:

    - :class:`ActionRow`
    - :class:`Button`
    - :class:`StringSelectMenu`
    - :class:`UserSelectMenu`
    - :class:`RoleSelectMenu`
    - :class:`MentionableSelectMenu`
    - :class:`ChannelSelectMenu`
    - :class:`TextInput`

    Components are immutable: their fields are fixed once they are constructed.
    """

    __slots__ = ()

    __repr_info__: ClassVar[Tuple[str, ...]]

    def __repr__(self) -> str:
        attrs = ' '.join(f'{key}={getattr(self, key)!r}' for key in self.__repr_info__)
        return f'<{self.__class__.__name__} {attrs}>'

    @property
    def type(self) -> ComponentType:
        """:class:`ComponentType`: The type of component."""
        raise NotImplementedError

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        raise NotImplementedError

    def to_dict(self) -> ComponentPayload:
        raise NotImplementedError

    def validate(self, limits: Optional[ComponentLimits] = None) -> List[ConstraintViolation]:
        """Checks this component against the platform's documented limits.

        This is a shorthand for :func:`validate`.
        """
        return validate(self, limits or DEFAULT_LIMITS)  # type: ignore # every concrete component is accepted


class ActionRow(Component):
    """Represents an action row.

    This is a component that holds other components in a row. Action rows
    cannot hold other action rows.

    Parameters
    -----------
    components: Iterable[Union[:class:`Button`, :class:`StringSelectMenu`, :class:`TextInput`, ...]]
        The components this row holds, in display order.

    Raises
    -------
    InvalidComponent
        One of the components is an action row or not a component at all.

    Attributes
    ------------
    components: Tuple[Union[:class:`Button`, :class:`StringSelectMenu`, :class:`TextInput`, ...], ...]
        The components this row holds.
    """

    __slots__ = ('components',)

    __repr_info__: ClassVar[Tuple[str, ...]] = __slots__

    def __init__(self, components: Iterable[ActionRowChild]) -> None:
        children = tuple(components)
        for index, child in enumerate(children):
            if isinstance(child, ActionRow):
                raise InvalidComponent(f'components[{index}]: action rows cannot be nested')
            if not isinstance(child, Component):
                raise InvalidComponent(f'components[{index}]: expected a component, not {child.__class__.__name__}')

        self._set(components=children)

    @property
    def type(self) -> Literal[ComponentType.action_row]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.action_row

    @classmethod
    def from_dict(cls, data: ActionRowPayload) -> Self:
        children = []
        for component_data in data['components']:
            component = component_factory(component_data)
            if component is not None:
                children.append(component)
        return cls(children)

    def to_dict(self) -> ActionRowPayload:
        return {
            'type': self.type.value,
            'components': [child.to_dict() for child in self.components],
        }  # type: ignore


class Button(Component):
    """Represents a button.

    A :attr:`ButtonStyle.link` button opens :attr:`url` and has no custom ID;
    every other style sends :attr:`custom_id` back in an interaction and has
    no URL.

    Parameters
    -----------
    style: :class:`ButtonStyle`
        The style of the button.
    label: :class:`str`
        The label of the button.
    custom_id: Optional[:class:`str`]
        The ID of the button that gets received during an interaction.
        Required unless the style is :attr:`ButtonStyle.link`.
    url: Optional[:class:`str`]
        The URL this button sends you to. Required if the style is
        :attr:`ButtonStyle.link`.
    emoji: Optional[Union[:class:`str`, :class:`EmojiInfo`, :class:`PartialEmoji`]]
        The emoji of the button.
    disabled: Optional[:class:`bool`]
        Whether the button is disabled.

    Raises
    -------
    InvalidComponent
        The custom ID or URL is missing for the style, or given when the
        style does not allow it.
    """

    __slots__ = (
        'style',
        'label',
        'custom_id',
        'url',
        'emoji',
        'disabled',
    )

    __repr_info__: ClassVar[Tuple[str, ...]] = __slots__

    def __init__(
        self,
        *,
        style: Union[ButtonStyle, int],
        label: str,
        custom_id: Optional[str] = None,
        url: Optional[str] = None,
        emoji: Optional[EmojiLike] = None,
        disabled: Optional[bool] = None,
    ) -> None:
        style = _to_enum(ButtonStyle, style, 'style')
        if style is ButtonStyle.link:
            if not url:
                raise InvalidComponent('link buttons must have a url')
            if custom_id is not None:
                raise InvalidComponent('link buttons cannot have a custom_id')
        else:
            if not custom_id:
                raise InvalidComponent(f'{style.name} buttons must have a custom_id')
            if url is not None:
                raise InvalidComponent('only link buttons can have a url')
            _require(custom_id, 'custom_id')

        self._set(
            style=style,
            label=_require(label, 'label'),
            custom_id=custom_id,
            url=url,
            emoji=_to_emoji(emoji),
            disabled=disabled,
        )

    @property
    def type(self) -> Literal[ComponentType.button]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.button

    @classmethod
    def from_dict(cls, data: ButtonComponentPayload) -> Self:
        emoji = data.get('emoji')
        return cls(
            style=data['style'],
            label=data['label'],
            custom_id=data.get('custom_id'),
            url=data.get('url'),
            emoji=PartialEmoji.from_dict(emoji) if emoji is not None else None,
            disabled=data.get('disabled'),
        )

    def to_dict(self) -> ButtonComponentPayload:
        payload: ButtonComponentPayload = {
            'type': self.type.value,
            'style': self.style.value,
            'label': self.label,
        }

        if self.emoji is not None:
            payload['emoji'] = self.emoji.to_dict()

        if self.custom_id is not None:
            payload['custom_id'] = self.custom_id

        if self.url is not None:
            payload['url'] = self.url

        if self.disabled is not None:
            payload['disabled'] = self.disabled

        return payload


class SelectOption(Immutable):
    """Represents a string select menu's option.

    Attributes
    -----------
    label: :class:`str`
        The label of the option. This is displayed to users.
    value: :class:`str`
        The value of the option. This is not displayed to users.
        If not provided when constructed then it defaults to the label.
    description: Optional[:class:`str`]
        An additional description of the option, if any.
    emoji: Optional[:class:`PartialEmoji`]
        The emoji of the option, if available.
    default: Optional[:class:`bool`]
        Whether this option is selected by default.
    """

    __slots__ = (
        'label',
        'value',
        'description',
        'emoji',
        'default',
    )

    def __init__(
        self,
        *,
        label: str,
        value: str = MISSING,
        description: Optional[str] = None,
        emoji: Optional[EmojiLike] = None,
        default: Optional[bool] = None,
    ) -> None:
        self._set(
            label=_require(label, 'label'),
            value=_require(label if value is MISSING else value, 'value'),
            description=description,
            emoji=_to_emoji(emoji),
            default=default,
        )

    def __repr__(self) -> str:
        return (
            f'<SelectOption label={self.label!r} value={self.value!r} description={self.description!r} '
            f'emoji={self.emoji!r} default={self.default!r}>'
        )

    def __str__(self) -> str:
        if self.emoji:
            base = f'{self.emoji} {self.label}'
        else:
            base = self.label

        if self.description:
            return f'{base}\n{self.description}'
        return base

    @classmethod
    def from_dict(cls, data: Union[SelectOptionPayload, Mapping[str, Any]]) -> Self:
        emoji = data.get('emoji')
        return cls(
            label=data['label'],
            value=data.get('value', MISSING),
            description=data.get('description'),
            emoji=PartialEmoji.from_dict(emoji) if emoji is not None else None,
            default=data.get('default'),
        )

    def to_dict(self) -> SelectOptionPayload:
        payload: SelectOptionPayload = {
            'label': self.label,
            'value': self.value,
        }

        if self.description is not None:
            payload['description'] = self.description

        if self.emoji is not None:
            payload['emoji'] = self.emoji.to_dict()

        if self.default is not None:
            payload['default'] = self.default

        return payload


# Fields every select menu carries. Each select menu class declares these
# slots itself, followed by the fields only its own type allows.
_SELECT_MENU_FIELDS: Tuple[str, ...] = (
    'custom_id',
    'placeholder',
    'min_values',
    'max_values',
    'disabled',
)


def _select_menu_kwargs(data: SelectComponentPayload) -> Dict[str, Any]:
    return {
        'custom_id': data['custom_id'],
        'placeholder': data.get('placeholder'),
        'min_values': data.get('min_values'),
        'max_values': data.get('max_values'),
        'disabled': data.get('disabled'),
    }


def _select_menu_payload(menu: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        'type': menu.type.value,
        'custom_id': menu.custom_id,
    }
    for key in _SELECT_MENU_FIELDS[1:]:
        value = getattr(menu, key)
        if value is not None:
            payload[key] = value
    return payload


class StringSelectMenu(Component):
    """Represents a select menu of developer-defined options.

    A select menu is functionally the same as a dropdown, however
    on mobile it renders a bit differently.

    Parameters
    -----------
    custom_id: :class:`str`
        The ID of the select menu that gets received during an interaction.
    options: Iterable[Union[:class:`SelectOption`, Mapping[:class:`str`, Any]]]
        The options that can be selected in this menu. Mappings are converted
        with :meth:`SelectOption.from_dict`.
    placeholder: Optional[:class:`str`]
        The placeholder text that is shown if nothing is selected.
    min_values: Optional[:class:`int`]
        The minimum number of items that must be chosen.
    max_values: Optional[:class:`int`]
        The maximum number of items that can be chosen.
    disabled: Optional[:class:`bool`]
        Whether the select is disabled.

    Attributes
    ------------
    options: Tuple[:class:`SelectOption`, ...]
        The options that can be selected in this menu.
    """

    __slots__ = _SELECT_MENU_FIELDS + ('options',)

    __repr_info__: ClassVar[Tuple[str, ...]] = __slots__

    def __init__(
        self,
        *,
        custom_id: str,
        options: Iterable[Union[SelectOption, Mapping[str, Any]]],
        placeholder: Optional[str] = None,
        min_values: Optional[int] = None,
        max_values: Optional[int] = None,
        disabled: Optional[bool] = None,
    ) -> None:
        converted = []
        for option in options:
            if not isinstance(option, SelectOption):
                option = SelectOption.from_dict(option)
            converted.append(option)

        self._set(
            custom_id=_require(custom_id, 'custom_id'),
            placeholder=placeholder,
            min_values=min_values,
            max_values=max_values,
            disabled=disabled,
            options=tuple(converted),
        )

    @property
    def type(self) -> Literal[ComponentType.string_select]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.string_select

    @classmethod
    def from_dict(cls, data: StringSelectComponentPayload) -> Self:
        return cls(
            options=[SelectOption.from_dict(option) for option in data['options']],
            **_select_menu_kwargs(data),
        )

    def to_dict(self) -> StringSelectComponentPayload:
        payload = _select_menu_payload(self)
        payload['options'] = [option.to_dict() for option in self.options]
        return payload  # type: ignore


class UserSelectMenu(Component):
    """Represents a select menu of users."""

    __slots__ = _SELECT_MENU_FIELDS

    __repr_info__: ClassVar[Tuple[str, ...]] = __slots__

    def __init__(
        self,
        *,
        custom_id: str,
        placeholder: Optional[str] = None,
        min_values: Optional[int] = None,
        max_values: Optional[int] = None,
        disabled: Optional[bool] = None,
    ) -> None:
        self._set(
            custom_id=_require(custom_id, 'custom_id'),
            placeholder=placeholder,
            min_values=min_values,
            max_values=max_values,
            disabled=disabled,
        )

    @property
    def type(self) -> Literal[ComponentType.user_select]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.user_select

    @classmethod
    def from_dict(cls, data: UserSelectComponentPayload) -> Self:
        return cls(**_select_menu_kwargs(data))

    def to_dict(self) -> UserSelectComponentPayload:
        return _select_menu_payload(self)  # type: ignore


class RoleSelectMenu(Component):
    """Represents a select menu of roles."""

    __slots__ = _SELECT_MENU_FIELDS

    __repr_info__: ClassVar[Tuple[str, ...]] = __slots__

    def __init__(
        self,
        *,
        custom_id: str,
        placeholder: Optional[str] = None,
        min_values: Optional[int] = None,
        max_values: Optional[int] = None,
        disabled: Optional[bool] = None,
    ) -> None:
        self._set(
            custom_id=_require(custom_id, 'custom_id'),
            placeholder=placeholder,
            min_values=min_values,
            max_values=max_values,
            disabled=disabled,
        )

    @property
    def type(self) -> Literal[ComponentType.role_select]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.role_select

    @classmethod
    def from_dict(cls, data: RoleSelectComponentPayload) -> Self:
        return cls(**_select_menu_kwargs(data))

    def to_dict(self) -> RoleSelectComponentPayload:
        return _select_menu_payload(self)  # type: ignore


class MentionableSelectMenu(Component):
    """Represents a select menu of both users and roles."""

    __slots__ = _SELECT_MENU_FIELDS

    __repr_info__: ClassVar[Tuple[str, ...]] = __slots__

    def __init__(
        self,
        *,
        custom_id: str,
        placeholder: Optional[str] = None,
        min_values: Optional[int] = None,
        max_values: Optional[int] = None,
        disabled: Optional[bool] = None,
    ) -> None:
        self._set(
            custom_id=_require(custom_id, 'custom_id'),
            placeholder=placeholder,
            min_values=min_values,
            max_values=max_values,
            disabled=disabled,
        )

    @property
    def type(self) -> Literal[ComponentType.mentionable_select]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.mentionable_select

    @classmethod
    def from_dict(cls, data: MentionableSelectComponentPayload) -> Self:
        return cls(**_select_menu_kwargs(data))

    def to_dict(self) -> MentionableSelectComponentPayload:
        return _select_menu_payload(self)  # type: ignore


class ChannelSelectMenu(Component):
    """Represents a select menu of channels.

    Attributes
    ------------
    channel_types: Optional[Tuple[:class:`ChannelType`, ...]]
        The kinds of channel that can be selected, in the order given.
        ``None`` allows every kind.
    """

    __slots__ = _SELECT_MENU_FIELDS + ('channel_types',)

    __repr_info__: ClassVar[Tuple[str, ...]] = __slots__

    def __init__(
        self,
        *,
        custom_id: str,
        placeholder: Optional[str] = None,
        min_values: Optional[int] = None,
        max_values: Optional[int] = None,
        disabled: Optional[bool] = None,
        channel_types: Optional[Iterable[Union[ChannelType, int]]] = None,
    ) -> None:
        if channel_types is not None:
            channel_types = tuple(_to_enum(ChannelType, value, 'channel_types') for value in channel_types)

        self._set(
            custom_id=_require(custom_id, 'custom_id'),
            placeholder=placeholder,
            min_values=min_values,
            max_values=max_values,
            disabled=disabled,
            channel_types=channel_types,
        )

    @property
    def type(self) -> Literal[ComponentType.channel_select]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.channel_select

    @classmethod
    def from_dict(cls, data: ChannelSelectComponentPayload) -> Self:
        return cls(channel_types=data.get('channel_types'), **_select_menu_kwargs(data))

    def to_dict(self) -> ChannelSelectComponentPayload:
        payload = _select_menu_payload(self)
        if self.channel_types is not None:
            payload['channel_types'] = [channel_type.value for channel_type in self.channel_types]
        return payload  # type: ignore


class TextInput(Component):
    """Represents a text input.

    Parameters
    -----------
    custom_id: :class:`str`
        The ID of the text input that gets received during an interaction.
    style: :class:`TextStyle`
        The style of the text input.
    label: :class:`str`
        The label to display above the text input.
    min_length: Optional[:class:`int`]
        The minimum length of the text input.
    max_length: Optional[:class:`int`]
        The maximum length of the text input.
    required: Optional[:class:`bool`]
        Whether the text input is required.
    value: Optional[:class:`str`]
        The value the text input is pre-filled with.
    placeholder: Optional[:class:`str`]
        The placeholder text to display when the text input is empty.
    """

    __slots__ = (
        'custom_id',
        'style',
        'label',
        'min_length',
        'max_length',
        'required',
        'value',
        'placeholder',
    )

    __repr_info__: ClassVar[Tuple[str, ...]] = __slots__

    def __init__(
        self,
        *,
        custom_id: str,
        style: Union[TextStyle, int],
        label: str,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        required: Optional[bool] = None,
        value: Optional[str] = None,
        placeholder: Optional[str] = None,
    ) -> None:
        self._set(
            custom_id=_require(custom_id, 'custom_id'),
            style=_to_enum(TextStyle, style, 'style'),
            label=_require(label, 'label'),
            min_length=min_length,
            max_length=max_length,
            required=required,
            value=value,
            placeholder=placeholder,
        )

    @property
    def type(self) -> Literal[ComponentType.text_input]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.text_input

    @classmethod
    def from_dict(cls, data: TextInputPayload) -> Self:
        return cls(
            custom_id=data['custom_id'],
            style=data['style'],
            label=data['label'],
            min_length=data.get('min_length'),
            max_length=data.get('max_length'),
            required=data.get('required'),
            value=data.get('value'),
            placeholder=data.get('placeholder'),
        )

    def to_dict(self) -> TextInputPayload:
        payload: TextInputPayload = {
            'type': self.type.value,
            'custom_id': self.custom_id,
            'style': self.style.value,
            'label': self.label,
        }

        for key in ('min_length', 'max_length', 'required', 'value', 'placeholder'):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value  # type: ignore

        return payload


ActionRowChild = Union[
    Button,
    StringSelectMenu,
    UserSelectMenu,
    RoleSelectMenu,
    MentionableSelectMenu,
    ChannelSelectMenu,
    TextInput,
]
MessageComponent = Union[ActionRow, ActionRowChild]

_COMPONENT_TYPES: Dict[int, Type[Component]] = {
    ComponentType.action_row.value: ActionRow,
    ComponentType.button.value: Button,
    ComponentType.string_select.value: StringSelectMenu,
    ComponentType.text_input.value: TextInput,
    ComponentType.user_select.value: UserSelectMenu,
    ComponentType.role_select.value: RoleSelectMenu,
    ComponentType.mentionable_select.value: MentionableSelectMenu,
    ComponentType.channel_select.value: ChannelSelectMenu,
}


@overload
def component_factory(data: ActionRowPayload) -> ActionRow:
    ...


@overload
def component_factory(data: ButtonComponentPayload) -> Button:
    ...


@overload
def component_factory(data: TextInputPayload) -> TextInput:
    ...


@overload
def component_factory(data: Mapping[str, Any]) -> Optional[MessageComponent]:
    ...


def component_factory(data: Any) -> Optional[MessageComponent]:
    """Builds the component a wire payload describes.

    Parameters
    -----------
    data: Mapping[:class:`str`, Any]
        The component payload, as the platform sends it.

    Raises
    -------
    InvalidComponent
        The payload is missing a required field, or describes a component
        this library would refuse to construct.

    Returns
    --------
    Optional[Union[:class:`ActionRow`, :class:`Button`, :class:`StringSelectMenu`, ...]]
        The component, or ``None`` if its type is unknown.
    """
    if not isinstance(data, Mapping):
        raise InvalidComponent(f'component payload must be a mapping, not {data.__class__.__name__}')

    component_type = data.get('type')
    is_int = isinstance(component_type, int) and not isinstance(component_type, bool)
    cls = _COMPONENT_TYPES.get(component_type) if is_int else None
    if cls is None:
        _log.debug('Skipping component of unknown type %r.', component_type)
        return None

    try:
        return cls.from_dict(data)  # type: ignore
    except KeyError as exc:
        raise InvalidComponent(f'{cls.__name__} payload is missing {exc.args[0]!r}') from None
    except (TypeError, AttributeError) as exc:
        raise InvalidComponent(f'{cls.__name__} payload is malformed: {exc}') from None

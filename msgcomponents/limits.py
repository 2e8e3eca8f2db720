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
from typing import TYPE_CHECKING, Any, Callable, Dict, List, NamedTuple, Optional, Sized, Union

from .enums import ComponentType
from .errors import ComponentConstraintError

if TYPE_CHECKING:
    from .components import (
        ActionRow,
        Button,
        ChannelSelectMenu,
        MentionableSelectMenu,
        MessageComponent,
        RoleSelectMenu,
        StringSelectMenu,
        TextInput,
        UserSelectMenu,
    )

    AnySelectMenu = Union[StringSelectMenu, UserSelectMenu, RoleSelectMenu, MentionableSelectMenu, ChannelSelectMenu]

_log = logging.getLogger(__name__)

__all__ = (
    'ComponentLimits',
    'DEFAULT_LIMITS',
    'ConstraintViolation',
    'validate',
    'ensure_valid',
)


class ComponentLimits(NamedTuple):
    """The platform's documented limits for components.

    The defaults follow the platform documentation at the time of writing.
    Since the platform may revise them, any of them can be overridden, e.g.
    ``DEFAULT_LIMITS._replace(button_label_length=100)``.
    """

    action_row_width: int = 5
    button_width: int = 1
    select_menu_width: int = 5
    text_input_width: int = 5
    custom_id_length: int = 100
    button_label_length: int = 80
    select_options: int = 25
    select_option_label_length: int = 100
    select_option_value_length: int = 100
    select_option_description_length: int = 100
    select_placeholder_length: int = 150
    select_values: int = 25
    text_input_label_length: int = 45
    text_input_length: int = 4000
    text_input_value_length: int = 4000
    text_input_placeholder_length: int = 100


DEFAULT_LIMITS = ComponentLimits()


class ConstraintViolation(NamedTuple):
    """A single broken limit.

    Attributes
    -----------
    field: :class:`str`
        The dotted path to the offending field, relative to the validated component.
    limit: :class:`str`
        A description of the limit that was broken.
    value: Any
        The offending measurement (a length, a count or the value itself).
    """

    field: str
    limit: str
    value: Any

    def __str__(self) -> str:
        return f'constraint violated: {self.field}, {self.limit}'


class _Checker:
    __slots__ = ('limits', 'violations')

    def __init__(self, limits: ComponentLimits) -> None:
        self.limits = limits
        self.violations: List[ConstraintViolation] = []

    def add(self, field: str, limit: str, value: Any) -> None:
        self.violations.append(ConstraintViolation(field, limit, value))

    def length(self, field: str, value: Optional[Sized], maximum: int) -> None:
        if value is not None and len(value) > maximum:
            self.add(field, f'at most {maximum} characters', len(value))

    def between(self, field: str, value: Optional[int], minimum: int, maximum: int) -> None:
        if value is not None and not minimum <= value <= maximum:
            self.add(field, f'between {minimum} and {maximum}', value)

    def ordered(self, low_field: str, low: Optional[int], high_field: str, high: Optional[int]) -> None:
        if low is not None and high is not None and low > high:
            self.add(low_field, f'at most {high_field} ({high})', low)


def _join(path: str, name: str) -> str:
    return f'{path}.{name}' if path else name


def _width(component: MessageComponent, limits: ComponentLimits) -> int:
    if component.type is ComponentType.button:
        return limits.button_width
    if component.type is ComponentType.text_input:
        return limits.text_input_width
    return limits.select_menu_width


def _check_action_row(check: _Checker, row: ActionRow, path: str) -> None:
    limits = check.limits
    width = sum(_width(child, limits) for child in row.components)
    if width > limits.action_row_width:
        check.add(_join(path, 'components'), f'row width of at most {limits.action_row_width}', width)

    for index, child in enumerate(row.components):
        _check(check, child, _join(path, f'components[{index}]'))


def _check_button(check: _Checker, button: Button, path: str) -> None:
    check.length(_join(path, 'custom_id'), button.custom_id, check.limits.custom_id_length)
    check.length(_join(path, 'label'), button.label, check.limits.button_label_length)


def _check_select_menu(check: _Checker, menu: AnySelectMenu, path: str) -> None:
    limits = check.limits
    check.length(_join(path, 'custom_id'), menu.custom_id, limits.custom_id_length)
    check.length(_join(path, 'placeholder'), menu.placeholder, limits.select_placeholder_length)
    check.between(_join(path, 'min_values'), menu.min_values, 0, limits.select_values)
    check.between(_join(path, 'max_values'), menu.max_values, 1, limits.select_values)
    check.ordered(_join(path, 'min_values'), menu.min_values, 'max_values', menu.max_values)


def _check_string_select(check: _Checker, menu: StringSelectMenu, path: str) -> None:
    _check_select_menu(check, menu, path)

    limits = check.limits
    count = len(menu.options)
    if not 1 <= count <= limits.select_options:
        check.add(_join(path, 'options'), f'between 1 and {limits.select_options} items', count)

    for index, option in enumerate(menu.options):
        option_path = _join(path, f'options[{index}]')
        check.length(_join(option_path, 'label'), option.label, limits.select_option_label_length)
        check.length(_join(option_path, 'value'), option.value, limits.select_option_value_length)
        check.length(_join(option_path, 'description'), option.description, limits.select_option_description_length)


def _check_text_input(check: _Checker, text_input: TextInput, path: str) -> None:
    limits = check.limits
    check.length(_join(path, 'custom_id'), text_input.custom_id, limits.custom_id_length)
    check.length(_join(path, 'label'), text_input.label, limits.text_input_label_length)
    check.between(_join(path, 'min_length'), text_input.min_length, 0, limits.text_input_length)
    check.between(_join(path, 'max_length'), text_input.max_length, 1, limits.text_input_length)
    check.ordered(_join(path, 'min_length'), text_input.min_length, 'max_length', text_input.max_length)
    check.length(_join(path, 'value'), text_input.value, limits.text_input_value_length)
    check.length(_join(path, 'placeholder'), text_input.placeholder, limits.text_input_placeholder_length)


_CHECKS: Dict[ComponentType, Callable[[_Checker, Any, str], None]] = {
    ComponentType.action_row: _check_action_row,
    ComponentType.button: _check_button,
    ComponentType.string_select: _check_string_select,
    ComponentType.text_input: _check_text_input,
    ComponentType.user_select: _check_select_menu,
    ComponentType.role_select: _check_select_menu,
    ComponentType.mentionable_select: _check_select_menu,
    ComponentType.channel_select: _check_select_menu,
}


def _check(check: _Checker, component: MessageComponent, path: str) -> None:
    _CHECKS[component.type](check, component, path)


def validate(component: MessageComponent, limits: ComponentLimits = DEFAULT_LIMITS) -> List[ConstraintViolation]:
    """Checks a component against the platform's documented limits.

    Action rows are checked along with every component they hold.

    Parameters
    -----------
    component: Union[:class:`ActionRow`, :class:`Button`, :class:`StringSelectMenu`, ...]
        The component to check.
    limits: :class:`ComponentLimits`
        The limits to check against. Defaults to :data:`DEFAULT_LIMITS`.

    Returns
    --------
    List[:class:`ConstraintViolation`]
        Every violation found. An empty list means the component is valid.
    """
    check = _Checker(limits)
    _check(check, component, '')
    return check.violations


def ensure_valid(component: MessageComponent, limits: ComponentLimits = DEFAULT_LIMITS) -> MessageComponent:
    """Like :func:`validate`, but raises instead of returning the violations.

    Raises
    -------
    ComponentConstraintError
        The component broke at least one limit.

    Returns
    --------
    Union[:class:`ActionRow`, :class:`Button`, :class:`StringSelectMenu`, ...]
        The component that was passed in.
    """
    violations = validate(component, limits)
    if violations:
        _log.debug('%r failed validation with %d violation(s).', component, len(violations))
        raise ComponentConstraintError(violations)
    return component

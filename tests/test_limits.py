import pytest

from msgcomponents import (
    DEFAULT_LIMITS,
    ActionRow,
    Button,
    ButtonStyle,
    ChannelSelectMenu,
    ComponentConstraintError,
    ConstraintViolation,
    SelectOption,
    StringSelectMenu,
    TextInput,
    TextStyle,
    UserSelectMenu,
    ensure_valid,
    validate,
)


def buttons(count: int):
    return [Button(style=ButtonStyle.primary, label=str(i), custom_id=f"button-{i}") for i in range(count)]


def fields(violations):
    return [violation.field for violation in violations]


def test_valid_row_has_no_violations():
    row = ActionRow(buttons(5))

    assert validate(row) == []
    assert row.validate() == []
    assert ensure_valid(row) is row


@pytest.mark.parametrize(
    "children,expected_width",
    [
        (buttons(6), 6),
        (buttons(1) + [UserSelectMenu(custom_id="user")], 6),
        ([UserSelectMenu(custom_id="a"), UserSelectMenu(custom_id="b")], 10),
    ],
)
def test_row_width(children, expected_width):
    violations = validate(ActionRow(children))

    assert violations == [ConstraintViolation("components", "row width of at most 5", expected_width)]
    assert str(violations[0]) == "constraint violated: components, row width of at most 5"


def test_row_width_is_configurable():
    limits = DEFAULT_LIMITS._replace(action_row_width=6)

    assert validate(ActionRow(buttons(6)), limits) == []
    assert ActionRow(buttons(6)).validate(limits) == []


def test_nested_paths():
    row = ActionRow(buttons(1) + [Button(style=ButtonStyle.success, label="x" * 81, custom_id="long")])

    assert fields(validate(row)) == ["components[1].label"]


def test_button_limits():
    button = Button(style=ButtonStyle.primary, label="ok", custom_id="c" * 101)

    assert validate(button) == [ConstraintViolation("custom_id", "at most 100 characters", 101)]


def test_select_menu_values():
    menu = UserSelectMenu(custom_id="users", min_values=5, max_values=2, placeholder="p" * 151)

    assert fields(validate(menu)) == ["placeholder", "min_values"]

    menu = ChannelSelectMenu(custom_id="channels", min_values=-1, max_values=26)
    assert validate(menu) == [
        ConstraintViolation("min_values", "between 0 and 25", -1),
        ConstraintViolation("max_values", "between 1 and 25", 26),
    ]


def test_string_select_options():
    too_many = StringSelectMenu(custom_id="many", options=[SelectOption(label=str(i)) for i in range(26)])
    assert fields(validate(too_many)) == ["options"]

    empty = StringSelectMenu(custom_id="empty", options=[])
    assert validate(empty) == [ConstraintViolation("options", "between 1 and 25 items", 0)]

    wordy = StringSelectMenu(
        custom_id="wordy",
        options=[SelectOption(label="fine"), SelectOption(label="fine too", value="v" * 101, description="d" * 101)],
    )
    assert fields(validate(wordy)) == ["options[1].value", "options[1].description"]


def test_text_input_limits():
    text_input = TextInput(
        custom_id="essay",
        style=TextStyle.paragraph,
        label="l" * 46,
        min_length=100,
        max_length=10,
        value="v" * 4001,
    )

    assert fields(validate(text_input)) == ["label", "min_length", "value"]

    text_input = TextInput(custom_id="essay", style=TextStyle.short, label="Essay", max_length=0)
    assert validate(text_input) == [ConstraintViolation("max_length", "between 1 and 4000", 0)]


def test_ensure_valid_raises_with_every_violation():
    row = ActionRow(buttons(6) + [Button(style=ButtonStyle.primary, label="y" * 90, custom_id="last")])

    with pytest.raises(ComponentConstraintError) as exc_info:
        ensure_valid(row)

    assert fields(exc_info.value.violations) == ["components", "components[6].label"]
    assert "constraint violated: components[6].label, at most 80 characters" in str(exc_info.value)

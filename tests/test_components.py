import copy
import pickle
from contextlib import nullcontext

import pytest

import msgcomponents as mc
from msgcomponents import (
    ActionRow,
    Button,
    ButtonStyle,
    ChannelSelectMenu,
    ChannelType,
    ComponentType,
    InvalidComponent,
    MentionableSelectMenu,
    PartialEmoji,
    RoleSelectMenu,
    SelectOption,
    StringSelectMenu,
    TextInput,
    TextStyle,
    UserSelectMenu,
)


def make_button(**kwargs):
    kwargs.setdefault("style", ButtonStyle.primary)
    kwargs.setdefault("label", "Click")
    kwargs.setdefault("custom_id", "click")
    return Button(**kwargs)


def make_string_select():
    return StringSelectMenu(
        custom_id="colour",
        options=[SelectOption(label="A", value="a"), SelectOption(label="B", value="b", default=True)],
    )


@pytest.mark.parametrize(
    "component,expected",
    [
        (make_button(), 2),
        (ActionRow([make_button()]), 1),
        (make_string_select(), 3),
        (UserSelectMenu(custom_id="user"), 5),
        (RoleSelectMenu(custom_id="role"), 6),
        (MentionableSelectMenu(custom_id="mention"), 7),
        (ChannelSelectMenu(custom_id="channel"), 8),
        (TextInput(custom_id="name", style=TextStyle.short, label="Name"), 4),
    ],
)
def test_discriminant(component, expected):
    assert component.type.value == expected
    assert component.to_dict()["type"] == expected


@pytest.mark.parametrize(
    "kwargs,expected",
    [
        ({"style": ButtonStyle.link, "url": "https://example.com"}, nullcontext(None)),
        ({"style": ButtonStyle.link}, pytest.raises(InvalidComponent, match="must have a url")),
        (
            {"style": ButtonStyle.link, "url": "https://example.com", "custom_id": "x"},
            pytest.raises(InvalidComponent, match="cannot have a custom_id"),
        ),
        ({"style": ButtonStyle.primary, "custom_id": "x"}, nullcontext("x")),
        ({"style": ButtonStyle.primary}, pytest.raises(InvalidComponent, match="must have a custom_id")),
        ({"style": 4, "custom_id": "x"}, nullcontext("x")),  # raw style values are accepted
        (
            {"style": ButtonStyle.danger, "custom_id": "x", "url": "https://example.com"},
            pytest.raises(InvalidComponent, match="only link buttons"),
        ),
        ({"style": 9, "custom_id": "x"}, pytest.raises(InvalidComponent, match="ButtonStyle")),
    ],
)
def test_button_style_fields(kwargs, expected):
    with expected as e:
        button = Button(label="Go", **kwargs)
        assert button.custom_id == e
        assert ("custom_id" in button.to_dict()) == (e is not None)


def test_link_button_payload():
    button = Button(style=ButtonStyle.link, label="Docs", url="https://example.com", emoji="<a:party:123456789012345678>")
    assert button.to_dict() == {
        "type": 2,
        "style": 5,
        "label": "Docs",
        "url": "https://example.com",
        "emoji": {"id": "123456789012345678", "name": "party", "animated": True},
    }


def test_button_optional_fields_absent():
    assert make_button().to_dict() == {"type": 2, "style": 1, "label": "Click", "custom_id": "click"}
    assert make_button(disabled=False).to_dict()["disabled"] is False


def test_button_rejects_unknown_emoji_type():
    with pytest.raises(TypeError, match="expected emoji"):
        make_button(emoji=123)


def test_action_row_preserves_order():
    button = make_button()
    select = make_string_select()
    row = ActionRow([button, select])

    assert row.components == (button, select)
    assert [child["type"] for child in row.to_dict()["components"]] == [2, 3]


@pytest.mark.parametrize(
    "children,expected",
    [
        ([make_button(), make_button(custom_id="other")], nullcontext(2)),
        ([], nullcontext(0)),
        ([ActionRow([make_button()])], pytest.raises(InvalidComponent, match="cannot be nested")),
        ([make_button(), "button"], pytest.raises(InvalidComponent, match=r"components\[1\]")),
    ],
)
def test_action_row_children(children, expected):
    with expected as e:
        assert len(ActionRow(children).components) == e


def test_channel_select_channel_types():
    menu = ChannelSelectMenu(custom_id="channel", channel_types=[ChannelType.guild_text, ChannelType.guild_voice])

    assert menu.to_dict() == {"type": 8, "custom_id": "channel", "channel_types": [0, 2]}
    assert ChannelSelectMenu(custom_id="channel", channel_types=[2, 0]).channel_types == (
        ChannelType.voice,
        ChannelType.text,
    )
    with pytest.raises(InvalidComponent, match="ChannelType"):
        ChannelSelectMenu(custom_id="channel", channel_types=[42])


def test_string_select_options_payload():
    options = make_string_select().to_dict()["options"]

    assert options == [{"label": "A", "value": "a"}, {"label": "B", "value": "b", "default": True}]
    assert "default" not in options[0]


def test_string_select_accepts_mappings():
    menu = StringSelectMenu(custom_id="pick", options=[{"label": "A"}, {"label": "B", "value": "b"}])

    assert menu.options == (SelectOption(label="A", value="A"), SelectOption(label="B", value="b"))


@pytest.mark.parametrize(
    "cls,field",
    [
        (UserSelectMenu, "options"),
        (RoleSelectMenu, "channel_types"),
        (MentionableSelectMenu, "options"),
        (ChannelSelectMenu, "options"),
        (StringSelectMenu, "channel_types"),
    ],
)
def test_select_menu_rejects_foreign_fields(cls, field):
    kwargs = {"custom_id": "menu", field: []}
    if cls is StringSelectMenu:
        kwargs["options"] = [SelectOption(label="A")]
    with pytest.raises(TypeError, match=field):
        cls(**kwargs)


def test_select_menu_shared_fields():
    menu = RoleSelectMenu(custom_id="roles", placeholder="Pick roles", min_values=0, max_values=3, disabled=True)

    assert menu.to_dict() == {
        "type": 6,
        "custom_id": "roles",
        "placeholder": "Pick roles",
        "min_values": 0,
        "max_values": 3,
        "disabled": True,
    }


def test_text_input_payload():
    text_input = TextInput(custom_id="bio", style=2, label="Bio", max_length=200, required=False)

    assert text_input.style is TextStyle.paragraph
    assert text_input.to_dict() == {
        "type": 4,
        "custom_id": "bio",
        "style": 2,
        "label": "Bio",
        "max_length": 200,
        "required": False,
    }


@pytest.mark.parametrize(
    "component",
    [
        make_button(emoji="\N{THUMBS UP SIGN}"),
        ActionRow([make_button(), make_string_select()]),
        ChannelSelectMenu(custom_id="channel", channel_types=[0]),
        TextInput(custom_id="name", style=TextStyle.short, label="Name", value="prefilled"),
    ],
)
def test_serialization_is_idempotent(component):
    assert component.to_dict() == component.to_dict()


@pytest.mark.parametrize(
    "component,attribute",
    [
        (make_button(), "type"),
        (make_button(), "style"),
        (ActionRow([]), "components"),
        (make_string_select(), "options"),
        (SelectOption(label="A"), "value"),
        (PartialEmoji(name="x"), "name"),
    ],
)
def test_components_are_immutable(component, attribute):
    with pytest.raises(AttributeError):
        setattr(component, attribute, None)
    with pytest.raises(AttributeError):
        delattr(component, attribute)


def test_components_are_values():
    assert make_button() == make_button()
    assert make_button() != make_button(custom_id="other")
    assert hash(ActionRow([make_string_select()])) == hash(ActionRow([make_string_select()]))
    assert UserSelectMenu(custom_id="x") != RoleSelectMenu(custom_id="x")


def test_component_factory_parses_nested_rows():
    payload = {
        "type": 1,
        "components": [
            {"type": 2, "style": 1, "label": "Yes", "custom_id": "yes"},
            {"type": 99, "label": "from the future"},
            {"type": 7, "custom_id": "who", "max_values": 2},
        ],
    }

    row = mc.component_factory(payload)

    assert isinstance(row, ActionRow)
    assert row.components == (
        Button(style=ButtonStyle.primary, label="Yes", custom_id="yes"),
        MentionableSelectMenu(custom_id="who", max_values=2),
    )
    assert row.to_dict()["components"][1] == {"type": 7, "custom_id": "who", "max_values": 2}


@pytest.mark.parametrize(
    "payload,expected",
    [
        ({"type": 99}, nullcontext(None)),
        ({"type": 1, "components": [{"type": 1, "components": []}]}, pytest.raises(InvalidComponent, match="nested")),
        ({"type": 2, "style": 1, "custom_id": "x"}, pytest.raises(InvalidComponent, match="'label'")),
        ({"type": 2, "style": 5, "label": "x"}, pytest.raises(InvalidComponent, match="url")),
    ],
)
def test_component_factory_errors(payload, expected):
    with expected as e:
        assert mc.component_factory(payload) is e


def test_component_factory_matches_to_dict():
    menu = StringSelectMenu(
        custom_id="flavour",
        placeholder="Flavour",
        options=[SelectOption(label="Vanilla", description="Classic", emoji="\N{SOFT ICE CREAM}")],
    )

    assert mc.component_factory(menu.to_dict()) == menu


def test_component_type_aliases():
    assert ComponentType.select is ComponentType.string_select
    assert ButtonStyle.url is ButtonStyle.link
    assert ChannelType.guild_announcement is ChannelType.news


@pytest.mark.parametrize(
    "build,field",
    [
        (lambda: UserSelectMenu(custom_id=None), "custom_id"),
        (lambda: RoleSelectMenu(custom_id=None), "custom_id"),
        (lambda: MentionableSelectMenu(custom_id=None), "custom_id"),
        (lambda: ChannelSelectMenu(custom_id=None), "custom_id"),
        (lambda: StringSelectMenu(custom_id=None, options=[{"label": "a"}]), "custom_id"),
        (lambda: TextInput(custom_id=None, style=TextStyle.short, label="Name"), "custom_id"),
        (lambda: TextInput(custom_id="name", style=TextStyle.short, label=None), "label"),
        (lambda: Button(style=ButtonStyle.primary, label=None, custom_id="x"), "label"),
        (lambda: Button(style=ButtonStyle.link, label=None, url="https://example.com"), "label"),
        (lambda: Button(style=ButtonStyle.primary, label="Go", custom_id=5), "custom_id"),
        (lambda: SelectOption(label=None), "label"),
        (lambda: SelectOption(label="A", value=None), "value"),
    ],
)
def test_required_fields(build, field):
    with pytest.raises(InvalidComponent, match=f"{field} is required"):
        build()


@pytest.mark.parametrize(
    "build",
    [
        lambda: make_button(style=True),
        lambda: TextInput(custom_id="name", style=False, label="Name"),
        lambda: ChannelSelectMenu(custom_id="channel", channel_types=[True]),
    ],
)
def test_enum_fields_reject_bools(build):
    with pytest.raises(InvalidComponent, match="not (True|False)"):
        build()


@pytest.mark.parametrize(
    "component",
    [
        make_button(emoji="<a:party:123456789012345678>"),
        ActionRow([make_button(), make_string_select()]),
        ChannelSelectMenu(custom_id="channel", channel_types=[ChannelType.guild_text, ChannelType.guild_voice]),
        TextInput(custom_id="name", style=TextStyle.paragraph, label="Name", min_length=1),
        UserSelectMenu(custom_id="user", disabled=True),
    ],
)
def test_components_copy_and_pickle(component):
    for clone in (copy.copy(component), copy.deepcopy(component), pickle.loads(pickle.dumps(component))):
        assert clone == component
        assert clone is not component
        assert clone.to_dict() == component.to_dict()
        with pytest.raises(AttributeError):
            clone.disabled = True


@pytest.mark.parametrize(
    "payload,match",
    [
        ({"type": 3, "custom_id": "x", "options": None}, "malformed"),
        ({"type": 1, "components": None}, "malformed"),
        ({"type": 2, "style": 1, "label": "x", "custom_id": "x", "emoji": 5}, "malformed"),
        (["type", 2], "must be a mapping"),
        (None, "must be a mapping"),
    ],
)
def test_component_factory_malformed_payloads(payload, match):
    with pytest.raises(InvalidComponent, match=match):
        mc.component_factory(payload)


@pytest.mark.parametrize("component_type", [True, [1], "2"])
def test_component_factory_ignores_non_integer_types(component_type):
    assert mc.component_factory({"type": component_type, "components": []}) is None

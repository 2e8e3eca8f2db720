"""Builds the components of a support ticket panel and prints the payload."""
import json
import logging

from loguru import logger as log

from msgcomponents import (
    ActionRow,
    Button,
    ButtonStyle,
    ChannelSelectMenu,
    ChannelType,
    ComponentConstraintError,
    SelectOption,
    StringSelectMenu,
    ensure_valid,
)


# Route the library's standard logging through loguru
class InterceptHandler(logging.Handler):
    def emit(self, record):
        # Get corresponding Loguru level if it exists
        try:
            level = log.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        log.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


logging.basicConfig(handlers=[InterceptHandler()], level=logging.DEBUG)


def build_panel():
    topic = StringSelectMenu(
        custom_id='ticket:topic',
        placeholder='What do you need help with?',
        options=[
            SelectOption(label='Verification', value='verify', emoji='\N{WHITE HEAVY CHECK MARK}'),
            SelectOption(label='Billing', value='billing', description='Payments and refunds'),
            SelectOption(label='Something else', value='other', default=True),
        ],
    )
    channel = ChannelSelectMenu(
        custom_id='ticket:channel',
        placeholder='Where did it happen?',
        channel_types=[ChannelType.guild_text, ChannelType.guild_voice],
    )
    buttons = [
        Button(style=ButtonStyle.success, label='Open ticket', custom_id='ticket:open'),
        Button(style=ButtonStyle.link, label='Read the FAQ', url='https://example.com/faq'),
    ]
    return [ActionRow([topic]), ActionRow([channel]), ActionRow(buttons)]


def main():
    rows = build_panel()
    try:
        payload = {'content': 'Need a hand?', 'components': [ensure_valid(row).to_dict() for row in rows]}
    except ComponentConstraintError as e:
        for violation in e.violations:
            log.error(str(violation))
        return

    print(json.dumps(payload, indent=2, ensure_ascii=False))


if __name__ == '__main__':
    main()

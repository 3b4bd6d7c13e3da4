"""
AgriShield AI - terminal chat
Talks to the /api/chat backend through ChatClient.
"""

import asyncio

from dotenv import load_dotenv

from agrishield.client.chat_client import SUPPORTED_LANGUAGES, ChatClient
from agrishield.client.models import Message
from agrishield.core.log_config import configure_logging


class Colors:
    """ANSI color codes"""
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    OKCYAN = '\033[96m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


HELP_TEXT = """Commands:
  /lang <En|Hi|Ta>   switch reply language
  /attach <path>...  stage files to send with the next message
  /detach <number>   remove a staged file
  /quit              leave the chat"""


def print_message(message: Message):
    """Print one transcript entry"""
    if message.is_bot:
        print(f"{Colors.BOLD}{Colors.OKGREEN}AgriShield:{Colors.ENDC} {message.text}")
    else:
        print(f"{Colors.BOLD}You:{Colors.ENDC} {message.text}")
        for attachment in message.attachments or ():
            print(f"   {Colors.OKCYAN}[{attachment.type.value}] {attachment.name}{Colors.ENDC}")
    print()


def print_staged(client: ChatClient):
    for index, attachment in enumerate(client.attachments, start=1):
        print(f"   {Colors.OKCYAN}{index}. {attachment.name}{Colors.ENDC}")


async def handle_command(client: ChatClient, line: str) -> bool:
    """Run a slash command. Returns False when the session should end."""
    command, _, argument = line.partition(" ")
    argument = argument.strip()

    if command == "/quit":
        return False
    if command == "/lang":
        if argument not in SUPPORTED_LANGUAGES:
            print(f"{Colors.WARNING}Choose one of: {', '.join(SUPPORTED_LANGUAGES)}{Colors.ENDC}")
        else:
            client.set_language(argument)
            print(f"Replying in {client.language}.")
    elif command == "/attach":
        try:
            await client.attach_files(*argument.split())
        except OSError as e:
            print(f"{Colors.WARNING}Could not read file: {e}{Colors.ENDC}")
        print_staged(client)
    elif command == "/detach":
        if argument.isdigit():
            client.remove_attachment(int(argument) - 1)
        print_staged(client)
    else:
        print(HELP_TEXT)
    return True


async def chat_loop(client: ChatClient):
    for message in client.messages:
        print_message(message)

    while True:
        if client.suggested_questions:
            print(f"{Colors.OKCYAN}Suggested: {' | '.join(client.suggested_questions)}{Colors.ENDC}")
        try:
            line = await asyncio.to_thread(input, f"Ask in {client.language}... > ")
        except EOFError:
            break

        if line.startswith("/"):
            if not await handle_command(client, line):
                break
            continue

        if not client.can_send(line):
            continue
        await client.send_turn(line)
        for message in client.messages[-2:]:
            print_message(message)


async def run_chat():
    async with ChatClient() as client:
        await chat_loop(client)


def main():
    load_dotenv()
    configure_logging("WARNING")
    print(HELP_TEXT)
    print()
    try:
        asyncio.run(run_chat())
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()

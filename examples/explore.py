#!/usr/bin/env python3
"""
Interactive GitAnalyzer session in the terminal.

Type a user or organization name to search it. Commands:

    :sort stars|updated|size   change the order
    :lang <name>               filter by language (":lang All" clears it)
    :next / :prev              page through the list
    :open <n>                  show details for the n-th repository on the page
    :close                     hide the detail panel
    :quit                      leave

Run with: python examples/explore.py [initial-name]
Set GITHUB_TOKEN for authenticated requests.
"""

import asyncio
import logging
import sys

from gitanalyzer import AsyncGitHubClient, Explorer, GitAnalyzerError, configure_logging
from gitanalyzer.render import render_explorer


async def read_line(prompt: str) -> str:
    return await asyncio.get_running_loop().run_in_executor(None, input, prompt)


async def handle_command(explorer: Explorer, line: str) -> bool:
    """Apply one command. Returns False when the session should end."""
    command, _, argument = line[1:].partition(" ")
    argument = argument.strip()

    if command == "quit":
        return False
    elif command == "sort":
        try:
            explorer.set_sort(argument or "stars")
        except ValueError:
            print(f"Unknown sort key: {argument!r} (use stars, updated or size)")
    elif command == "lang":
        explorer.select_language(argument or "All")
    elif command == "next":
        explorer.next_page()
    elif command == "prev":
        explorer.previous_page()
    elif command == "open":
        items = explorer.page.items
        try:
            index = int(argument)
        except ValueError:
            index = 0
        if not 1 <= index <= len(items):
            print(f"No repository {argument!r} on this page")
            return True
        repo = items[index - 1]
        await explorer.open_details(repo)
    elif command == "close":
        explorer.close_details()
    else:
        print(f"Unknown command: {command}")
    return True


async def main() -> None:
    configure_logging(level=logging.WARNING)
    initial = sys.argv[1] if len(sys.argv) > 1 else "vercel"

    try:
        client = AsyncGitHubClient.from_env()
    except GitAnalyzerError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    async with client:
        explorer = Explorer(client)
        explorer.start(initial)
        await explorer.settle()
        print(render_explorer(explorer))

        while True:
            try:
                line = (await read_line("\n> ")).strip()
            except EOFError:
                break

            if line.startswith(":"):
                if not await handle_command(explorer, line):
                    break
            else:
                explorer.set_query(line)
                explorer.submit()
                # Wait past the debounce delay so the search has started.
                await asyncio.sleep(explorer.debouncer.delay + 0.05)
                await explorer.settle()

            print(render_explorer(explorer))

        await explorer.aclose()


if __name__ == "__main__":
    asyncio.run(main())

"""Interactive terminal front-end for the task console.

Tasks are addressed by their 1-based position in the visible list, so
`toggle 2` acts on the second task currently shown.
"""
import logging
from typing import Optional

from console.api_client import TaskApiClient
from console.controller import TaskConsole
from console.search import STATUSES, TaskDict, derived_status
from infrastructure.logging_setup import setup_logging
from infrastructure.settings import load_settings

logger = logging.getLogger(__name__)

STATUS_ALIASES = {
    'p': 'pending',
    'pending': 'pending',
    'ip': 'in-progress',
    'in-progress': 'in-progress',
    'c': 'completed',
    'completed': 'completed',
    'all': '',
    '': '',
}

HELP = """Commands:
  add <title> [| description] [| status]   create a task
  search [text]                            search now (text replaces the query)
  query <text>                             set the query; searches after a short pause
  filter <pending|in-progress|completed|all>
  toggle <n>                               mark task n completed / pending
  delete <n>                               delete task n
  refresh                                  re-fetch with the current search
  help                                     show this help
  quit                                     leave the console"""


PROMPT = "\n> "


class CLI:
    def __init__(self, console: TaskConsole):
        self.console = console
        self.console.on_auto_search = self._redraw

    def run(self) -> None:
        """Main REPL loop; the task list is redrawn after every command."""
        self.console.start()
        try:
            while True:
                print(self.render())
                line = input(PROMPT).strip()
                if not line:
                    continue
                if line.lower() in ('quit', 'exit'):
                    break
                self._handle_command(line)
        except (KeyboardInterrupt, EOFError):
            print()
        finally:
            self.console.close()
        print("Goodbye.")

    def render(self) -> str:
        c = self.console
        lines = ["", "Task Manager"]
        search = f"search: {c.query!r}" if c.query else "search: -"
        lines.append(f"{search}   filter: {c.status_filter or 'all'}")
        if c.error:
            lines.append(f"! {c.error}")
        if c.show_no_results:
            lines.append("No results")
        for index, task in enumerate(c.visible_tasks, start=1):
            mark = 'x' if task.get('completed') else ' '
            lines.append(f"{index:>3}. [{mark}] {task.get('title', '')}  ({derived_status(task)})")
            if task.get('description'):
                lines.append(f"       {task['description']}")
        return "\n".join(lines)

    def _redraw(self) -> None:
        """Reprints the list after a debounced search, then the prompt the user is typing at."""
        print(self.render())
        print(PROMPT, end="", flush=True)

    # -------------------- command dispatch --------------------
    def _handle_command(self, line: str) -> None:
        cmd, _, rest = line.partition(' ')
        cmd = cmd.lower()
        rest = rest.strip()
        if cmd == 'add':
            self._cmd_add(rest)
        elif cmd == 'search':
            if rest:
                self.console.query = rest
            self.console.search()
        elif cmd == 'query':
            self.console.set_query(rest)
        elif cmd == 'filter':
            self._cmd_filter(rest)
        elif cmd == 'toggle':
            task = self._pick(rest)
            if task is not None:
                self.console.toggle(task)
        elif cmd in ('delete', 'rm'):
            task = self._pick(rest)
            if task is not None:
                self.console.delete(task)
        elif cmd == 'refresh':
            self.console.fetch_tasks()
        elif cmd == 'help':
            print(HELP)
        else:
            print(f"Unknown command: {cmd} (type 'help')")

    def _cmd_add(self, rest: str) -> None:
        parts = [p.strip() for p in rest.split('|')]
        form = self.console.form
        form.title = parts[0] if parts else ''
        form.description = parts[1] if len(parts) > 1 else ''
        if len(parts) > 2:
            status = STATUS_ALIASES.get(parts[2].lower())
            if not status:
                print(f"Status must be one of: {', '.join(STATUSES)}")
                return
            form.status = status
        if not form.title.strip():
            print("Usage: add <title> [| description] [| status]")
            return
        self.console.create()

    def _cmd_filter(self, rest: str) -> None:
        status = STATUS_ALIASES.get(rest.lower())
        if status is None:
            print(f"Filter must be one of: {', '.join(STATUSES)}, all")
            return
        self.console.set_status_filter(status)

    def _pick(self, rest: str) -> Optional[TaskDict]:
        visible = self.console.visible_tasks
        if not rest.isdigit() or not 1 <= int(rest) <= len(visible):
            print(f"Pick a task number between 1 and {len(visible)}")
            return None
        return visible[int(rest) - 1]


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)
    logger.info(f"Connecting to {settings.api_base}")

    client = TaskApiClient.for_base_url(settings.api_base)
    try:
        CLI(TaskConsole(client)).run()
    finally:
        client.close()


if __name__ == "__main__":
    main()

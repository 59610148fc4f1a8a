import argparse
import getpass
import logging
from typing import Any, Callable, Dict, Optional

from quotepush.core.builders import build_clipboard, build_fetcher, build_publisher, build_toaster
from quotepush.core.clipboard import ClipboardPublisher
from quotepush.core.config import load_config, token_from_env
from quotepush.core.publisher import GitHubPublisher
from quotepush.core.state import PublishForm, QuoteState
from quotepush.core.status import ConsoleView
from quotepush.quotes.provider import QuoteFetcher

PROMPT = "quote> "

HELP_TEXT = """Commands:
  new      fetch a new random quote
  copy     copy the current quote to the clipboard
  push     save the current quote to a file in a GitHub repository
  status   show the current quote and GitHub status
  help     show this help
  exit     quit"""

logger = logging.getLogger(__name__)


class QuoteShell:
    """Reads commands and runs them one at a time."""

    def __init__(
        self,
        fetcher: QuoteFetcher,
        clipboard: ClipboardPublisher,
        publisher: GitHubPublisher,
        view: ConsoleView,
        form: PublishForm,
        input_func: Callable[[str], str] = input,
        secret_func: Callable[[str], str] = getpass.getpass,
    ) -> None:
        self.fetcher = fetcher
        self.clipboard = clipboard
        self.publisher = publisher
        self.view = view
        self.form = form
        self._input = input_func
        self._secret = secret_func

    def _ask(self, label: str, current: str, secret: bool = False) -> str:
        shown = "(set)" if secret and current else current
        prompt = f"{label} [{shown}]: " if current else f"{label}: "
        value = (self._secret if secret else self._input)(prompt).strip()
        return value or current

    def fill_form(self) -> None:
        """Prompts for each field; an empty answer keeps the previous value."""

        self.form.token = self._ask("GitHub token", self.form.token, secret=True)
        self.form.repo = self._ask("Repository (owner/name)", self.form.repo)
        self.form.file_path = self._ask("File path", self.form.file_path)
        self.form.commit_message = self._ask("Commit message", self.form.commit_message)

    def show_status(self) -> None:
        print(self.view.quote_text)
        if self.view.quote_author:
            print(f"    {self.view.quote_author}")
        if self.view.status_text:
            print(f"GitHub: [{self.view.status_kind}] {self.view.status_text}")

    def handle_line(self, line: str) -> bool:
        """Runs one command. Returns False when the shell should stop."""

        if not line:
            return True
        if line in ("exit", "quit"):
            return False
        if line == "help":
            print(HELP_TEXT)
        elif line == "new":
            self.fetcher.fetch()
        elif line == "copy":
            self.clipboard.copy_quote()
        elif line == "push":
            self.fill_form()
            self.publisher.publish(self.form)
        elif line == "status":
            self.show_status()
        else:
            print("Unknown command, type 'help'.")
        return True

    def run(self) -> None:
        try:
            self.fetcher.fetch()
            print("Type 'help' for commands.")
            while True:
                line = self._input(PROMPT).strip()
                if not self.handle_line(line):
                    print("Exiting.")
                    return
        except EOFError:
            print("\nExiting.")
        except KeyboardInterrupt:
            print("\nStopped by Ctrl+C.")


def build_shell(config: Dict[str, Any], view: Optional[ConsoleView] = None) -> QuoteShell:
    view = view or ConsoleView()
    state = QuoteState()
    toaster = build_toaster(config, view)
    github_cfg = config.get('github') or {}
    form = PublishForm(
        token=token_from_env(),
        repo=github_cfg.get('repo') or '',
        file_path=github_cfg.get('file_path') or '',
    )
    return QuoteShell(
        build_fetcher(config, state, view),
        build_clipboard(state, toaster),
        build_publisher(config, state, view, toaster),
        view,
        form,
    )


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Random quotes you can copy or commit to GitHub.")
    ap.add_argument("-c", "--config", metavar="FILE", help="JSON config (default: config.json)")
    ap.add_argument("--debug", action="store_true", help="verbose diagnostic logging")
    return ap.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    config = load_config(args.config)
    debug = args.debug or bool(config.get('debug', False))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("loaded config: %s", config)

    build_shell(config).run()

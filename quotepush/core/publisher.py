"""Publishing the current quote to a file in a GitHub repository."""

import logging
from typing import Callable, Optional

import requests

from quotepush.core.formatting import encode_content, format_file_content
from quotepush.core.state import PublishForm, QuoteState
from quotepush.core.status import StatusKind, StatusLine, Toaster
from quotepush.github.contents_client import GitHubContentsClient, GitHubContentsError

TOKEN_PREFIX = "ghp_"

MISSING_FIELDS_MESSAGE = "Please fill in all fields"
INVALID_TOKEN_MESSAGE = "Please enter a valid GitHub token"
PUSHING_MESSAGE = "Pushing to GitHub..."
SUCCESS_MESSAGE = "Successfully pushed quote to GitHub!"
SAVED_TOAST = "Quote saved to GitHub!"
GENERIC_FAILURE_MESSAGE = "Failed to push to GitHub. Please check your credentials."

logger = logging.getLogger(__name__)


def validate_form(form: PublishForm) -> Optional[str]:
    """Returns an error message for the first failed check, or None."""

    token, repo, file_path, commit_message = form.values()
    if not token or not repo or not file_path or not commit_message:
        return MISSING_FIELDS_MESSAGE
    if not token.startswith(TOKEN_PREFIX):
        return INVALID_TOKEN_MESSAGE
    return None


class GitHubPublisher:
    """Writes the quote on screen to `repo/file_path`, creating or updating the file.

    `client_factory` receives the token and returns a `GitHubContentsClient`;
    it is only called once the form passed validation.
    """

    def __init__(
        self,
        state: QuoteState,
        client_factory: Callable[[str], GitHubContentsClient],
        status: StatusLine,
        toaster: Toaster,
    ) -> None:
        self.state = state
        self.client_factory = client_factory
        self.status = status
        self.toaster = toaster

    def publish(self, form: PublishForm) -> bool:
        error = validate_form(form)
        if error:
            self.status.update(error, StatusKind.ERROR)
            return False

        token, repo, file_path, commit_message = form.values()

        try:
            self.status.update(PUSHING_MESSAGE, StatusKind.LOADING)
            client = self.client_factory(token)

            sha = client.get_file_sha(repo, file_path)
            if sha is None:
                logger.info("File does not exist yet, will create new file")

            content = encode_content(format_file_content(self.state.get()))
            client.put_file(repo, file_path, commit_message, content, sha)
        except GitHubContentsError as err:
            self.status.update(f"Error: {err.message}", StatusKind.ERROR)
            return False
        except (requests.RequestException, ValueError) as exc:
            logger.error("Error pushing to GitHub: %s", exc)
            self.status.update(GENERIC_FAILURE_MESSAGE, StatusKind.ERROR)
            return False

        self.status.update(SUCCESS_MESSAGE, StatusKind.SUCCESS)
        self.toaster.show(SAVED_TOAST)
        form.commit_message = ""
        return True

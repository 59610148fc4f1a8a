import base64
from unittest.mock import MagicMock, patch

import pytest
import requests

from quotepush.core.publisher import (
    GENERIC_FAILURE_MESSAGE,
    INVALID_TOKEN_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    SAVED_TOAST,
    SUCCESS_MESSAGE,
    GitHubPublisher,
)
from quotepush.core.state import PublishForm, Quote, QuoteState
from quotepush.core.status import StatusKind, StatusLine
from quotepush.github.contents_client import GitHubContentsClient

from conftest import make_response


def _form(**overrides):
    values = dict(
        token="ghp_secret",
        repo="octo/quotes",
        file_path="quote.md",
        commit_message="Add quote",
    )
    values.update(overrides)
    return PublishForm(**values)


@pytest.fixture
def publisher(state, view, toaster):
    return GitHubPublisher(state, GitHubContentsClient, StatusLine(view), toaster)


@pytest.mark.parametrize("field", ["token", "repo", "file_path", "commit_message"])
def test_empty_field_blocks_publish(field, state, view, toaster):
    factory = MagicMock()
    publisher = GitHubPublisher(state, factory, StatusLine(view), toaster)

    with patch('requests.Session.request') as mock_request:
        assert publisher.publish(_form(**{field: "   "})) is False

    factory.assert_not_called()
    mock_request.assert_not_called()
    assert view.status_text == MISSING_FIELDS_MESSAGE
    assert view.status_kind == StatusKind.ERROR


def test_token_prefix_checked(state, view, toaster):
    factory = MagicMock()
    publisher = GitHubPublisher(state, factory, StatusLine(view), toaster)

    assert publisher.publish(_form(token="github_pat_123")) is False

    factory.assert_not_called()
    assert view.status_text == INVALID_TOKEN_MESSAGE
    assert view.status_kind == StatusKind.ERROR


def test_missing_file_creates_without_sha(publisher, view):
    with patch('requests.Session.get', return_value=make_response({"message": "Not Found"}, 404)), \
            patch('requests.Session.put', return_value=make_response({}, 201)) as mock_put:
        assert publisher.publish(_form()) is True

    sent = mock_put.call_args.kwargs['json']
    assert sent['sha'] is None
    assert sent['message'] == "Add quote"
    assert view.status_text == SUCCESS_MESSAGE
    assert view.status_kind == StatusKind.SUCCESS


def test_existing_file_updates_with_sha(publisher):
    with patch('requests.Session.get', return_value=make_response({"sha": "abc123"})), \
            patch('requests.Session.put', return_value=make_response({}, 200)) as mock_put:
        assert publisher.publish(_form()) is True

    assert mock_put.call_args.kwargs['json']['sha'] == "abc123"


def test_content_is_base64_of_quote_line(view, toaster):
    state = QuoteState(Quote("Ça va", "Zoë"))
    publisher = GitHubPublisher(state, GitHubContentsClient, StatusLine(view), toaster)

    with patch('requests.Session.get', return_value=make_response({}, 404)), \
            patch('requests.Session.put', return_value=make_response({}, 201)) as mock_put:
        publisher.publish(_form())

    encoded = mock_put.call_args.kwargs['json']['content']
    assert base64.b64decode(encoded).decode("utf-8") == '"Ça va" — Zoë\n\n'


def test_success_clears_only_commit_message(publisher, view):
    form = _form()
    with patch('requests.Session.get', return_value=make_response({}, 404)), \
            patch('requests.Session.put', return_value=make_response({}, 201)):
        publisher.publish(form)

    assert form.commit_message == ""
    assert (form.token, form.repo, form.file_path) == ("ghp_secret", "octo/quotes", "quote.md")
    assert view.toast_text == SAVED_TOAST
    assert view.toast_visible is True


def test_api_error_message_is_shown(publisher, view):
    form = _form()
    with patch('requests.Session.get', return_value=make_response({}, 404)), \
            patch('requests.Session.put', return_value=make_response({"message": "Bad credentials"}, 401)):
        assert publisher.publish(form) is False

    assert view.status_text == "Error: Bad credentials"
    assert view.status_kind == StatusKind.ERROR
    assert form.commit_message == "Add quote"


def test_network_failure_shows_generic_message(publisher, view):
    with patch('requests.Session.get', return_value=make_response({}, 404)), \
            patch('requests.Session.put', side_effect=requests.ConnectionError("down")):
        assert publisher.publish(_form()) is False

    assert view.status_text == GENERIC_FAILURE_MESSAGE


def test_malformed_error_body_shows_generic_message(publisher, view):
    response = make_response(None, 500)
    response.json.side_effect = ValueError("not json")
    with patch('requests.Session.get', return_value=make_response({}, 404)), \
            patch('requests.Session.put', return_value=response):
        assert publisher.publish(_form()) is False

    assert view.status_text == GENERIC_FAILURE_MESSAGE


def test_publishes_quote_current_at_encoding_time(view, toaster):
    state = QuoteState(Quote("old", "X"))
    publisher = GitHubPublisher(state, GitHubContentsClient, StatusLine(view), toaster)

    def lookup(*_args, **_kwargs):
        state.set(Quote("new", "Y"))
        return make_response({}, 404)

    with patch('requests.Session.get', side_effect=lookup), \
            patch('requests.Session.put', return_value=make_response({}, 201)) as mock_put:
        publisher.publish(_form())

    encoded = mock_put.call_args.kwargs['json']['content']
    assert base64.b64decode(encoded).decode("utf-8") == '"new" — Y\n\n'


def test_created_file_without_json_body_is_success(publisher, view):
    response = make_response(None, 201)
    response.json.side_effect = ValueError("empty body")
    with patch('requests.Session.get', return_value=make_response({}, 404)), \
            patch('requests.Session.put', return_value=response):
        assert publisher.publish(_form()) is True

    assert view.status_text == SUCCESS_MESSAGE
    assert view.status_kind == StatusKind.SUCCESS

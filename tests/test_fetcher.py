"""Unit tests for the emoji registry fetcher."""
import pytest
import requests
from unittest.mock import MagicMock

from alfred_emoji.utils import FetchError
from pipeline.fetcher import RegistryFetcher

URL = 'https://unicode.org/Public/emoji/13.0/emoji-test.txt'


def make_response(lines=(), status_error=None, read_error=None):
    """Build a mocked streaming response."""
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error

    def iter_lines(decode_unicode=False):
        for line in lines:
            yield line
        if read_error is not None:
            raise read_error

    response.iter_lines.side_effect = iter_lines
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


class TestRegistryFetcher:
    """Tests for RegistryFetcher."""

    def test_init_defaults(self):
        fetcher = RegistryFetcher()
        assert fetcher.timeout is None
        assert isinstance(fetcher.session, requests.Session)
        assert 'User-Agent' in fetcher.headers

    def test_single_streaming_get(self, session):
        """One GET, streamed, with the configured timeout."""
        session.get.return_value = make_response(['a', 'b'])
        fetcher = RegistryFetcher(timeout=12.5, session=session)

        with fetcher.open_lines(URL) as lines:
            assert list(lines) == ['a', 'b']

        session.get.assert_called_once()
        args, kwargs = session.get.call_args
        assert args[0] == URL
        assert kwargs['stream'] is True
        assert kwargs['timeout'] == 12.5

    def test_body_decoded_as_utf8(self, session):
        response = make_response(['1F600 ; fully-qualified # 😀 grinning face'])
        session.get.return_value = response

        with RegistryFetcher(session=session).open_lines(URL) as lines:
            list(lines)

        assert response.encoding == 'utf-8'
        response.iter_lines.assert_called_once_with(decode_unicode=True)

    def test_response_closed_after_use(self, session):
        response = make_response(['a'])
        session.get.return_value = response

        with RegistryFetcher(session=session).open_lines(URL) as lines:
            list(lines)

        response.close.assert_called_once()

    def test_response_closed_when_consumer_fails(self, session):
        response = make_response(['a'])
        session.get.return_value = response

        with pytest.raises(ValueError):
            with RegistryFetcher(session=session).open_lines(URL):
                raise ValueError('consumer failed')

        response.close.assert_called_once()

    def test_connection_error_is_fatal(self, session):
        session.get.side_effect = requests.ConnectionError('no route to host')

        with pytest.raises(FetchError, match='no route to host'):
            with RegistryFetcher(session=session).open_lines(URL):
                pass

        session.get.assert_called_once()

    def test_http_error_status_is_fatal(self, session):
        response = make_response(status_error=requests.HTTPError('404 Client Error'))
        session.get.return_value = response

        with pytest.raises(FetchError, match='404'):
            with RegistryFetcher(session=session).open_lines(URL):
                pass

        response.close.assert_called_once()
        session.get.assert_called_once()

    def test_read_error_is_fatal(self, session):
        """A dropped connection mid-stream surfaces as FetchError."""
        response = make_response(['a'], read_error=requests.exceptions.ChunkedEncodingError('reset'))
        session.get.return_value = response

        received = []
        with pytest.raises(FetchError, match='cannot read'):
            with RegistryFetcher(session=session).open_lines(URL) as lines:
                for line in lines:
                    received.append(line)

        assert received == ['a']
        response.close.assert_called_once()

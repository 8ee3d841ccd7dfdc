#!/usr/bin/env python3
import os
import sys
import unittest
from unittest.mock import Mock, patch

import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from overseerr_signal.constants import Settings  # noqa: E402
from overseerr_signal.controller import create_app  # noqa: E402


def _ok_response(status_code=200, content=b''):
    resp = Mock()
    resp.status_code = status_code
    resp.reason = 'OK'
    resp.content = content
    resp.ok = True
    return resp


class TestWebhookEndpoint(unittest.TestCase):
    def setUp(self):
        self.settings = Settings(
            signal_api_url='http://signal:8080',
            signal_number='+10000000000',
            signal_recipients=['+10000000001'],
        )
        self.client = create_app(self.settings).test_client()
        self.body = {
            'event': 'Media Available',
            'subject': 'Dune (2021)',
            'message': 'Paul Atreides...',
            'media': {'media_type': 'movie', 'status': 'AVAILABLE'},
            'request': {'requestedBy_username': 'alice'},
        }

    def test_media_available_without_image(self):
        with patch('overseerr_signal.services.requests.post', return_value=_ok_response(201)) as mock_post, \
                patch('overseerr_signal.services.requests.get') as mock_get:
            resp = self.client.post('/webhook', json=self.body)

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_data(as_text=True), 'Notification sent to Signal')
        mock_get.assert_not_called()

        payload = mock_post.call_args.kwargs['json']
        self.assertEqual(mock_post.call_args.args[0], 'http://signal:8080/v2/send')
        self.assertTrue(payload['message'].startswith('🎉 Media Available - Dune (2021)'))
        self.assertIn('👤 Requested By: alice', payload['message'])
        self.assertIn('📋 Request Status: AVAILABLE', payload['message'])
        self.assertNotIn('base64_attachments', payload)
        self.assertEqual(payload['number'], '+10000000000')
        self.assertEqual(payload['recipients'], ['+10000000001'])

    def test_image_is_attached(self):
        self.body['image'] = 'https://img.example/poster.jpg'
        with patch('overseerr_signal.services.requests.post', return_value=_ok_response(201)) as mock_post, \
                patch('overseerr_signal.services.requests.get', return_value=_ok_response(content=b'img')):
            resp = self.client.post('/webhook', json=self.body)

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(mock_post.call_args.kwargs['json']['base64_attachments'], ['aW1n'])

    def test_unreachable_image_still_relays(self):
        self.body['image'] = 'http://img.invalid/poster.jpg'
        with patch('overseerr_signal.services.requests.post', return_value=_ok_response(201)) as mock_post, \
                patch('overseerr_signal.services.requests.get', side_effect=requests.ConnectionError("unreachable")):
            resp = self.client.post('/webhook', json=self.body)

        self.assertEqual(resp.status_code, 200)
        mock_post.assert_called_once()
        self.assertNotIn('base64_attachments', mock_post.call_args.kwargs['json'])

    def test_unparseable_image_url_still_relays(self):
        self.body['image'] = 'http://' + 'a' * 64 + '.com/x.jpg'
        parse_error = ValueError("Failed to parse: label empty or too long")
        with patch('overseerr_signal.services.requests.post', return_value=_ok_response(201)) as mock_post, \
                patch('overseerr_signal.services.requests.get', side_effect=parse_error):
            resp = self.client.post('/webhook', json=self.body)

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_data(as_text=True), 'Notification sent to Signal')
        mock_post.assert_called_once()
        self.assertNotIn('base64_attachments', mock_post.call_args.kwargs['json'])

    def test_relay_error_returns_500(self):
        error_resp = Mock(status_code=500, reason='Internal Server Error', text='boom')
        error_resp.raise_for_status.side_effect = requests.HTTPError("500 Server Error: Internal Server Error")
        with patch('overseerr_signal.services.requests.post', return_value=error_resp):
            resp = self.client.post('/webhook', json=self.body)

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_data(as_text=True), 'Error: 500 Server Error: Internal Server Error')

    def test_relay_unreachable_returns_500(self):
        with patch('overseerr_signal.services.requests.post', side_effect=requests.ConnectionError("refused")):
            resp = self.client.post('/webhook', json=self.body)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_data(as_text=True), 'Error: refused')

    def test_empty_body_uses_defaults(self):
        with patch('overseerr_signal.services.requests.post', return_value=_ok_response(201)) as mock_post:
            resp = self.client.post('/webhook', data='not json', content_type='text/plain')

        self.assertEqual(resp.status_code, 200)
        message = mock_post.call_args.kwargs['json']['message']
        self.assertEqual(message.split('\n')[0], '🎬 unknown - unknown ')
        self.assertTrue(message.endswith('📋 Request Status: PENDING'))


class TestHealthEndpoint(unittest.TestCase):
    def setUp(self):
        self.client = create_app(Settings(signal_api_url='http://signal:8080/v2/send/')).test_client()

    def test_healthy(self):
        with patch('overseerr_signal.services.requests.get', return_value=_ok_response()) as mock_get:
            resp = self.client.get('/health')
        mock_get.assert_called_once_with('http://signal:8080/v1/about', timeout=10.0)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json()['status'], 'ok')
        self.assertEqual(resp.get_json()['service'], 'overseerr-signal-proxy')

    def test_unhealthy(self):
        with patch('overseerr_signal.services.requests.get', side_effect=requests.ConnectionError("refused")):
            resp = self.client.get('/health')
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_json()['status'], 'error')
        self.assertIn('refused', resp.get_json()['signal_api'])


if __name__ == '__main__':
    unittest.main()

import unittest

import fbsession
from fbsession import events


class TestNormalize(unittest.TestCase):
    def test_call_error_without_message(self):
        for response in (None, "", {"unexpected": True}):
            event = events.normalize(events.ResponseEvent(events.REQUEST, is_error=True,
                                                          response=response))
            self.assertTrue(event.is_error)
            self.assertEqual(event.error, {"message": "Unknown Error", "type": "CallError", "code": -1})
            self.assertEqual(event.response_raw, response)

    def test_plain_text_body_is_kept(self):
        event = events.normalize(events.ResponseEvent(events.REQUEST, response="true"))
        self.assertFalse(event.is_error)
        self.assertEqual(event.response, "true")
        self.assertEqual(event.response_raw, "true")
        self.assertIsNone(event.error)

    def test_empty_body(self):
        event = events.normalize(events.ResponseEvent(events.SESSION, phase=events.LOGOUT))
        self.assertFalse(event.is_error)
        self.assertIsNone(event.response)
        self.assertIsNone(event.response_raw)

    def test_nested_json(self):
        body = '{"data": [{"name": "Chris", "id": "1"}], "paging": {"next": null}}'
        event = events.normalize(events.ResponseEvent(events.REQUEST, response=body))
        self.assertFalse(event.is_error)
        self.assertEqual(event.response["data"][0]["name"], "Chris")
        self.assertIsNone(event.response["paging"]["next"])

    def test_malformed_json(self):
        event = events.normalize(events.ResponseEvent(events.REQUEST, response='{"data": ['))
        self.assertTrue(event.is_error)
        self.assertEqual(event.error["type"], "CallError")
        self.assertTrue(event.error["message"].startswith("Malformed JSON response"))
        self.assertEqual(event.response_raw, '{"data": [')

    def test_graph_error_passes_through(self):
        body = '{"error": {"message": "Unsupported get request.", "type": "GraphMethodException", "code": 100}}'
        event = events.normalize(events.ResponseEvent(events.REQUEST, response=body))
        self.assertTrue(event.is_error)
        self.assertEqual(event.error["type"], "GraphMethodException")
        self.assertEqual(event.error["code"], 100)

        for body in ('{"error": {}}', '{"error": ""}', '{"error": 0}'):
            event = events.normalize(events.ResponseEvent(events.REQUEST, response=body))
            self.assertTrue(event.is_error, body)
            with self.assertRaises(fbsession.GraphAPIError):
                event.raise_for_error()

    def test_null_error_is_not_an_error(self):
        event = events.normalize(events.ResponseEvent(events.REQUEST, response='{"error": null, "id": "1"}'))
        self.assertFalse(event.is_error)
        self.assertEqual(event.response["id"], "1")

    def test_error_string_in_body(self):
        event = events.normalize(events.ResponseEvent(events.REQUEST, response='{"error": "bad token"}'))
        self.assertTrue(event.is_error)
        with self.assertRaises(fbsession.GraphAPIError) as cm:
            event.raise_for_error()
        self.assertEqual(str(cm.exception), "bad token")
        self.assertEqual(cm.exception.type, "CallError")


class TestResponseEvent(unittest.TestCase):
    def test_raise_for_error_on_success(self):
        event = events.normalize(events.ResponseEvent(events.REQUEST, response='{"id": "1"}'))
        event.raise_for_error()

    def test_raise_for_call_error(self):
        event = events.normalize(events.ResponseEvent(events.REQUEST, is_error=True, response="timed out"))
        with self.assertRaises(fbsession.GraphAPIError) as cm:
            event.raise_for_error()
        self.assertEqual(str(cm.exception), "timed out")
        self.assertEqual(cm.exception.type, "CallError")
        self.assertEqual(cm.exception.code, -1)

    def test_repr(self):
        event = events.ResponseEvent(events.SESSION, phase=events.LOGIN)
        self.assertEqual(repr(event), "<ResponseEvent: session login>")
        request = events.PendingRequest("me", "GET", None, None)
        self.assertEqual(repr(request), "<PendingRequest: GET me>")

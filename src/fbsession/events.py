#!/usr/bin/env python
#
# Copyright 2010 Facebook
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

"""Events passed between the binding, the session and the caller's listener

Whatever the binding hands us is normalized so the listener only ever has to
look at two things:

  event.is_error  - True if the call failed, for any reason
  event.response  - the decoded response, or {'error': {'message', 'type', 'code'}}

Call/connection failures and Graph API errors end up in the same shape. The
untouched payload stays available in event.response_raw.
"""

import json
import logging

import fbsession

log = logging.getLogger(__name__)

EVENT_NAME = "fbconnect"

SESSION = "session"
REQUEST = "request"
DIALOG = "dialog"

LOGIN = "login"
LOGIN_FAILED = "loginFailed"
LOGIN_CANCELLED = "loginCancelled"
LOGOUT = "logout"

CALL_ERROR = "CallError"
UNKNOWN_ERROR = "Unknown Error"


class PendingRequest(object):
    """The one call a session is currently waiting on."""
    def __init__(self, path, method, params, listener):
        self.path = path
        self.method = method
        self.params = params
        self.listener = listener

    def __repr__(self):
        if self.method:
            return "<PendingRequest: %s %s>" % (self.method, self.path)
        return "<PendingRequest: %s>" % self.path


class ResponseEvent(object):
    def __init__(self, type, phase=None, is_error=False, response=None, token=None,
                 did_complete=None):
        self.name = EVENT_NAME
        self.type = type
        self.phase = phase
        self.token = token
        self.did_complete = did_complete
        self.is_error = is_error
        self.response = response
        self.response_raw = None
        self.request = None

    @property
    def error(self):
        if isinstance(self.response, dict):
            return self.response.get("error")
        return None

    def raise_for_error(self):
        """Raise GraphAPIError if this event reports a failure."""
        if not self.is_error:
            return
        error = self.error
        if not isinstance(error, dict):
            error = {"message": str(error)} if error else {}
        raise fbsession.GraphAPIError(error.get("type", CALL_ERROR),
                                      error.get("message", UNKNOWN_ERROR),
                                      error.get("code", -1))

    def __repr__(self):
        parts = [self.type]
        if self.phase:
            parts.append(self.phase)
        if self.is_error:
            parts.append("error")
        return "<ResponseEvent: %s>" % " ".join(parts)


def call_error(message):
    return {"error": {"message": message, "type": CALL_ERROR, "code": -1}}


def normalize(event):
    """Bring a raw binding event into the uniform response shape, in place."""
    if event.is_error:
        message = UNKNOWN_ERROR
        if isinstance(event.response, str) and event.response:
            message = event.response

        event.response_raw = event.response
        event.response = call_error(message)
        return event

    if isinstance(event.response, str) and event.response:
        event.response_raw = event.response
        if event.response_raw.startswith("{"):
            try:
                event.response = json.loads(event.response_raw)
            except ValueError as e:
                log.debug("Undecodable response body: %r", event.response_raw)
                event.is_error = True
                event.response = call_error("Malformed JSON response: %s" % e)
                return event

    # Graph API errors arrive as perfectly good JSON
    if isinstance(event.response, dict) and event.response.get("error") is not None:
        event.is_error = True

    return event

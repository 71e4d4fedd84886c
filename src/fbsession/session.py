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

"""Facebook session

A Session sits between the caller and a Binding. It remembers the single call
in flight, tracks whether we are logged in and delivers each completed call
to the listener supplied for it.
"""

import logging
import os

import fbsession
from fbsession import debug
from fbsession import events
from fbsession.simulator import SimulatorBinding

log = logging.getLogger(__name__)


class Session(object):
    """A logged in (or not yet logged in) Facebook user on this device.

    Every operation takes a listener, a callable invoked exactly once with
    the ResponseEvent for that call:

      event.request       - the PendingRequest (path, method, params) it answers
      event.is_error      - True if the call failed
      event.response      - the decoded response, or the error details:
                              event.response['error']['message']
                              event.response['error']['type']  (Graph API type or 'CallError')
                              event.response['error']['code']  (-1 if not known)
      event.response_raw  - the undecoded body, or the error string of a failed call

    Only one call may be outstanding. Calling anything else before its
    listener has run raises RequestPendingError.
    """
    def __init__(self, app_id=None, access_token=None, binding=None):
        """Create a session for the given application id.

        If no binding is given the session runs in simulator mode, using
        access_token for its Graph API requests.
        """
        self.app_id = app_id
        self.simulator = binding is None
        if binding is None:
            binding = SimulatorBinding(access_token)
        self.binding = binding

        self._logged_in = False
        self._pending = None

    @classmethod
    def from_environ(cls, environ=None, binding=None):
        """Create a session configured from FACEBOOK_APP_ID and FACEBOOK_ACCESS_TOKEN"""
        if environ is None:
            environ = os.environ
        return cls(environ.get(fbsession.APP_ID_ENV),
                   access_token=environ.get(fbsession.ACCESS_TOKEN_ENV),
                   binding=binding)

    @property
    def pending(self):
        return self._pending

    def is_logged_in(self):
        return self._logged_in

    def login(self, permissions, listener):
        """Log in, asking for the given permissions.

        The listener gets a 'session' event whose phase is one of 'login',
        'loginFailed' or 'loginCancelled'. On 'login', event.token holds the
        access token.
        """
        log.debug("Preparing to log in")

        if not self.app_id:
            raise fbsession.NotConfiguredError("Facebook app id not defined by caller")
        self._check_not_pending("login")

        self._start(events.PendingRequest("login", None, permissions, listener),
                    self.binding.login, self.app_id, permissions, self.on_event)

    def request(self, path, method, params, listener):
        """Make a Graph API request. Ex:

            session.request("me/friends", "GET", {"fields": "name", "limit": "10"}, on_friends)

        method defaults to GET when not given.
        """
        method = method or "GET"
        log.debug("Preparing to send request: %s %s", method, path)

        description = "request: %s %s" % (method, path)
        self._check_not_pending(description)
        self._check_logged_in(description)

        self._start(events.PendingRequest(path, method, params, listener),
                    self.binding.request, path, method, params)

    def show_dialog(self, params, listener):
        """Show a native dialog. event.did_complete is False if the user cancelled it."""
        log.debug("Preparing to show dialog")

        self._check_not_pending("show dialog")
        self._check_logged_in("show dialog")
        if not self.binding.supports_dialogs:
            raise fbsession.UnsupportedOperationError("Facebook dialogs are not supported by %s"
                                                      % self.binding.__class__.__name__)

        self._start(events.PendingRequest("showdialog", None, params, listener),
                    self.binding.show_dialog, params)

    def logout(self, listener):
        log.debug("Preparing to log out")

        self._check_not_pending("logout")
        self._check_logged_in("logout")

        self._start(events.PendingRequest("logout", None, None, listener),
                    self.binding.logout)

    def on_event(self, event):
        """Completion handler for every event coming out of the binding."""
        events.normalize(event)

        if not event.is_error and event.type == events.SESSION:
            if event.phase == events.LOGIN:
                self._logged_in = True
            elif event.phase == events.LOGOUT:
                self._logged_in = False

        pending = self._pending
        if pending is None:
            debug.dump_request_response(None, event)
            raise fbsession.NoPendingRequestError(
                "Facebook request completed, but no pending request state was available")

        event.request = pending
        self._pending = None

        debug.dump_request_response(pending, event)
        pending.listener(event)

    def _start(self, pending, call, *args):
        self._pending = pending
        try:
            call(*args)
        except Exception:
            # The binding never got going, nothing will answer this call
            if self._pending is pending:
                self._pending = None
            raise

    def _check_not_pending(self, description):
        if self._pending is not None:
            raise fbsession.RequestPendingError(
                "Error processing Facebook %s, a previous request is still being processed"
                % description)

    def _check_logged_in(self, description):
        if not self._logged_in:
            raise fbsession.NotLoggedInError(
                "Error processing Facebook %s, not currently logged in" % description)

    def __repr__(self):
        return "<Session: app_id=%r logged_in=%r pending=%r>" % (self.app_id, self._logged_in,
                                                                  self._pending)

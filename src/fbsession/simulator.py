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

"""Stand-in for the native binding on desktop environments

Notes:
There is no native SDK here, so there is no real authentication either. A
developer grabs a user access token from the Graph API Explorer
(http://developers.facebook.com/tools/explorer) and hands it to the session;
login just reports success with that token and requests go over HTTPS using it.
These tokens expire after a couple of hours.

Known limitations:
  - No dialogs
  - No file uploads
  - login/logout don't talk to Facebook at all
"""

import logging

import fbsession
from fbsession import binding
from fbsession import events
from fbsession.graph_api import graph_api_request, split_params

log = logging.getLogger(__name__)


class SimulatorBinding(binding.Binding):
    supports_dialogs = False

    def __init__(self, access_token=None, http_request=graph_api_request):
        self.access_token = access_token
        self.http_request = http_request
        self.listener = None

    def login(self, app_id, permissions, listener):
        self.listener = listener
        self._deliver(events.ResponseEvent(events.SESSION, phase=events.LOGIN,
                                           token=self.access_token))

    def request(self, path, method, params):
        if not self.access_token:
            raise fbsession.NotConfiguredError(
                "Facebook requests in the simulator require an access token")

        params = dict(params or {})
        args, data = split_params(method, params)

        log.debug("Simulator Facebook request: %s %s", method, path)

        try:
            status, reason, body = self.http_request(method, path, args=args, data=data,
                                                     access_token=self.access_token)
        except fbsession.CommunicationError as e:
            self._deliver(events.ResponseEvent(events.REQUEST, is_error=True, response=str(e)))
            return

        if status >= 400 and not body.startswith("{"):
            # Nothing the Graph API would say, treat it like a failed call
            self._deliver(events.ResponseEvent(events.REQUEST, is_error=True,
                                               response="%d %s" % (status, reason)))
            return

        self._deliver(events.ResponseEvent(events.REQUEST, response=body))

    def show_dialog(self, params):
        raise fbsession.UnsupportedOperationError("Facebook dialogs are not supported in the simulator")

    def logout(self):
        self._deliver(events.ResponseEvent(events.SESSION, phase=events.LOGOUT))

    def _deliver(self, event):
        if self.listener is None:
            raise fbsession.Error("Simulator has no listener, login first")
        self.listener(event)

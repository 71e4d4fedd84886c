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
"""
Session wrapper around a native Facebook binding.

A Session tracks login state, allows a single outstanding call at a time
and hands every completed call to its listener as a normalized
ResponseEvent. Without a native binding the session runs in simulator
mode: login and logout are stubbed and requests go straight to the Graph
API over HTTPS using a developer supplied access token.

Typical usage:

    session = fbsession.Session(app_id="1234", access_token=token)

    def on_friends(event):
        if event.is_error:
            print("request failed: %s" % event.error["message"])
        else:
            for friend in event.response["data"]:
                print(friend["name"])

    def on_login(event):
        if event.phase == "login" and not event.is_error:
            session.request("me/friends", "GET", {"limit": "10"}, on_friends)

    session.login(["public_profile"], on_login)

"""
import os


class Error(Exception):
    """Generic client library error"""
    pass

class CommunicationError(Error):
    pass

class GraphAPIError(Error):
    def __init__(self, type, message, code=-1):
        Exception.__init__(self, message)
        self.type = type
        self.code = code

class UsageError(Error):
    """The wrapper was called in a way it cannot serve"""
    pass

class NotConfiguredError(UsageError): pass

class RequestPendingError(UsageError): pass

class NotLoggedInError(UsageError): pass

class UnsupportedOperationError(UsageError): pass

class NoPendingRequestError(UsageError): pass


GRAPH_API_HOST = "graph.facebook.com"
USER_AGENT = "fbsession Python Client 1.0"
DEFAULT_TIMEOUT = 30

APP_ID_ENV = "FACEBOOK_APP_ID"
ACCESS_TOKEN_ENV = "FACEBOOK_ACCESS_TOKEN"

from fbsession.events import PendingRequest
from fbsession.events import ResponseEvent
from fbsession.binding import Binding
from fbsession.simulator import SimulatorBinding
from fbsession.session import Session


_default_session = None

def configure(app_id=None, access_token=None, binding=None):
    """Install the session used by the module level functions.

    Missing values are read from FACEBOOK_APP_ID and FACEBOOK_ACCESS_TOKEN.
    """
    global _default_session
    app_id = app_id or os.environ.get(APP_ID_ENV)
    access_token = access_token or os.environ.get(ACCESS_TOKEN_ENV)
    _default_session = Session(app_id, access_token=access_token, binding=binding)
    return _default_session

def get_session():
    if _default_session is None:
        return configure()
    return _default_session

def is_logged_in():
    return get_session().is_logged_in()

def login(permissions, listener):
    return get_session().login(permissions, listener)

def request(path, method, params, listener):
    return get_session().request(path, method, params, listener)

def show_dialog(params, listener):
    return get_session().show_dialog(params, listener)

def logout(listener):
    return get_session().logout(listener)


__all__ = ["Session", "SimulatorBinding", "Binding", "ResponseEvent", "PendingRequest"]

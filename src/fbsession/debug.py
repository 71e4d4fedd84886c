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

"""Debug dumps of each call and its response.

Everything goes to the 'fbsession' loggers at DEBUG level. Turn it on with:

    logging.getLogger("fbsession").setLevel(logging.DEBUG)
"""

import logging

log = logging.getLogger(__name__)


def dump_structure(value, label=None, level=0):
    if label:
        log.debug(label)

    prefix = "    " * level
    if isinstance(value, dict):
        items = value.items()
    else:
        items = enumerate(value)

    for key, item in items:
        log.debug("%s[%s] = %r", prefix, key, item)
        if isinstance(item, (dict, list)):
            log.debug("%s{", prefix)
            dump_structure(item, level=level + 1)
            log.debug("%s}", prefix)


def dump_request_response(request, event):
    if not log.isEnabledFor(logging.DEBUG):
        return

    log.debug("----- Begin response -----")
    if request is not None:
        if request.path == "login":
            log.debug("Request: login")
            for permission in request.params or ():
                log.debug("Request permission: %s", permission)
        else:
            if request.method:
                log.debug("Request: %s %s", request.method, request.path)
            else:
                log.debug("Request: %s", request.path)
            if isinstance(request.params, dict):
                for key, value in request.params.items():
                    log.debug("Request parameter - %s: %s", key, value)
            elif request.params:
                log.debug("Request parameters: %r", request.params)

    if event is not None:
        log.debug("Response - event.name: %s", event.name)
        log.debug("Response - event.type: %s", event.type)
        if event.phase:
            log.debug("Response - event.phase: %s", event.phase)
        if event.token:
            log.debug("Response - access token: %s...", event.token[:6])
        if event.type == "dialog":
            log.debug("Response - dialog 'did_complete' was: %s", event.did_complete)
        if event.is_error:
            log.debug("Response reports 'is_error'")
        if isinstance(event.response, (dict, list)):
            dump_structure(event.response, "Response body:")
        elif event.response:
            log.debug("Response body (%s): %s", type(event.response).__name__, event.response)
    log.debug("----- End response -----")

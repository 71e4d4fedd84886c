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

"""Raw Graph API transport

Used when no native binding is around to make the call for us. Unlike the
native binding this does no decoding at all: the caller gets the status
line and the body text and decides what they mean.
"""

import http.client
import logging
import urllib.parse

import fbsession


log = logging.getLogger(__name__)

# Methods whose parameters travel in the request body
BODY_METHODS = ("POST", "PUT")


def graph_api_request(method, path, args=None, data=None, access_token=None, headers=None,
                      timeout=None):
    """Perform a single request against the Graph API.

    Args:
      method: HTTP method, ex: 'GET'
      path: Graph path, with or without the leading slash. Ex: 'me/friends'
      args: (optional) parameters for the query string
      data: (optional) parameters for a form encoded body
      access_token: (optional) token added to the data if there is a body, otherwise to the args
      headers: (optional) extra request headers

    Returns:
      Tuple of (status, reason, body text).

    Raises:
      CommunicationError if the connection could not be made or broke down.
    """
    method = method.upper()
    out_headers = {
        'User-Agent': fbsession.USER_AGENT,
        'Accept': 'application/json, text/javascript',
    }

    args = dict(args or {})

    if headers:
        out_headers.update(headers)

    if data is not None:
        data = dict(data)

    if access_token is not None:
        if data is not None:
            data["access_token"] = access_token
        else:
            args["access_token"] = access_token

    out_data = None
    if data:
        out_data = urllib.parse.urlencode(data)
        out_headers.setdefault('Content-type', "application/x-www-form-urlencoded")

    out_path = "/" + path.lstrip("/")
    if args:
        out_path = "?".join((out_path, urllib.parse.urlencode(args)))

    log.debug("%s %s", method, _redact(out_path))

    conn = http.client.HTTPSConnection(fbsession.GRAPH_API_HOST,
                                       timeout=timeout or fbsession.DEFAULT_TIMEOUT)
    try:
        conn.request(method, out_path, out_data, out_headers)
        response = conn.getresponse()
        body = response.read()
    except (OSError, http.client.HTTPException) as e:
        log.debug("Request failed: %r", e)
        raise fbsession.CommunicationError(str(e) or e.__class__.__name__)
    finally:
        conn.close()

    log.debug("Response: %r", (response.status, response.reason))

    return response.status, response.reason, body.decode("utf-8", "replace")


def split_params(method, params):
    """Decide where a flat parameter dict goes for the given method.

    Returns (args, data) suitable for graph_api_request.
    """
    if method.upper() in BODY_METHODS:
        return None, dict(params or {})
    return dict(params or {}), None


def _redact(path):
    if "access_token=" not in path:
        return path
    head, _, tail = path.partition("access_token=")
    token, sep, rest = tail.partition("&")
    return "%saccess_token=%s...%s%s" % (head, token[:6], sep, rest)

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

"""Interface to the platform's native Facebook support

The embedding application provides a subclass that drives the real native
SDK (login popups, OS level OAuth, dialog UI). Calls only start work; results
come back later as ResponseEvent instances passed to the listener given to
login(), which is the session's completion handler.
"""


class Binding(object):
    supports_dialogs = True

    def login(self, app_id, permissions, listener):
        """Start a login and register listener for every event that follows."""
        raise NotImplementedError

    def request(self, path, method, params):
        raise NotImplementedError

    def show_dialog(self, params):
        raise NotImplementedError

    def logout(self):
        raise NotImplementedError

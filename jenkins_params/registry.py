#!/usr/bin/env python
# Copyright (C) 2015 OpenStack, LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

# Manage the parameter formatter registry.

import logging
import threading

from stevedore import extension

from jenkins_params.modules import parameters

__all__ = [
    "FormatterRegistry",
    "default_registry",
    "register_formatter",
]

logger = logging.getLogger(__name__)

ENTRY_POINT_NAMESPACE = 'jenkins_params.formatters'


class FormatterRegistry(object):
    """Map parameter kinds to the functions rendering their declaration.

    A kind is the fully-qualified Jenkins class name of a parameter
    definition, e.g. ``hudson.model.StringParameterDefinition``. Formatters
    are called as ``formatter(definition, properties)`` and return the
    declaration text.

    Lookups read an immutable snapshot; registrations replace it under a
    lock, so the registry can be shared by concurrent generators.
    """

    def __init__(self, builtins=True):
        self._lock = threading.Lock()
        self._formatters = {}
        if builtins:
            for kind, formatter in parameters.BUILTIN_FORMATTERS:
                self.register(kind, formatter)

    def register(self, kind, formatter):
        """Register ``formatter`` for ``kind``, replacing any previous
        formatter registered for that exact kind.
        """
        with self._lock:
            formatters = dict(self._formatters)
            if kind in formatters:
                logger.debug("Replacing formatter for %s", kind)
            formatters[kind] = formatter
            self._formatters = formatters

    def lookup(self, kind):
        return self._formatters.get(kind)

    @property
    def kinds(self):
        return sorted(self._formatters)

    def __contains__(self, kind):
        return kind in self._formatters

    def load_extensions(self, namespace=ENTRY_POINT_NAMESPACE):
        """Register formatters published by other distributions under the
        ``jenkins_params.formatters`` entry point group; the entry point
        name is the kind. Entry points that fail to load are skipped.
        """
        def on_load_failure(manager, entrypoint, exception):
            logger.debug("Not registering formatter '%s': %s",
                         entrypoint.name, exception)

        extension_manager = extension.ExtensionManager(
            namespace=namespace,
            invoke_on_load=False,
            on_load_failure_callback=on_load_failure)

        for ext in extension_manager:
            logger.debug("Adding formatter '%s' from %s",
                         ext.name, ext.entry_point_target)
            self.register(ext.name, ext.plugin)


_default_registry = None
_default_lock = threading.Lock()


def default_registry():
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            registry = FormatterRegistry()
            registry.load_extensions()
            _default_registry = registry
    return _default_registry


def register_formatter(kind, formatter):
    default_registry().register(kind, formatter)

# -*- coding: utf-8 -*-
"""Location: ./sriforge/hooks.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor

Bundle hook adapter.
The host's finalize extension point ("generate_bundle") comes in two shapes:
a plain callable stored on the host plugin, or a hook object exposing the
callable under ``handler``. Both are wrapped behind FinalizeHook, whose only
operation chains an engine callback to run after the host's own handler.
"""

# Standard
from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, Iterable

# First-Party
from sriforge.constants import GENERATE_BUNDLE, HANDLER
from sriforge.errors import ConfigurationError

logger = logging.getLogger(__name__)

FinalizeCallback = Callable[..., Awaitable[None]]


def get_field(obj: Any, key: str) -> Any:
    """Read a field from an attribute-style object or a mapping.

    Args:
        obj: Host object or dict.
        key: Field name.

    Returns:
        The field value, or None if absent.

    Examples:
        >>> get_field({"name": "a"}, "name")
        'a'
        >>> get_field(object(), "name") is None
        True
    """
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def set_field(obj: Any, key: str, value: Any) -> None:
    """Write a field on an attribute-style object or a mapping.

    Args:
        obj: Host object or dict.
        key: Field name.
        value: New value.
    """
    if isinstance(obj, MutableMapping):
        obj[key] = value
    else:
        setattr(obj, key, value)


def compose_after(first: Callable[..., Any], after: FinalizeCallback) -> Callable[..., Awaitable[Any]]:
    """Build a coroutine function running ``first`` then ``after`` with the same arguments.

    ``first`` may be synchronous or asynchronous; its result is returned.

    Args:
        first: The host's handler.
        after: The engine callback.

    Returns:
        The composed coroutine function.
    """

    @functools.wraps(first)
    async def composed(*args: Any, **kwargs: Any) -> Any:
        result = first(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
        await after(*args, **kwargs)
        return result

    return composed


class FinalizeHook(ABC):
    """A host finalize extension point that can be extended in place."""

    def __init__(self, owner: Any) -> None:
        """Initialize the adapter.

        Args:
            owner: The object holding the callable.
        """
        self._owner = owner

    @abstractmethod
    def current(self) -> Callable[..., Any]:
        """Return the handler currently installed.

        Returns:
            The host handler.
        """

    @abstractmethod
    def install(self, handler: Callable[..., Any]) -> None:
        """Replace the installed handler.

        Args:
            handler: The new handler.
        """

    def chain_after(self, after: FinalizeCallback) -> None:
        """Run ``after`` once the host's handler has completed.

        Args:
            after: The engine callback, invoked with the host's arguments.
        """
        self.install(compose_after(self.current(), after))


class CallableFinalizeHook(FinalizeHook):
    """Finalize hook stored directly as a callable on the host plugin."""

    def __init__(self, plugin: Any, hook_name: str = GENERATE_BUNDLE) -> None:
        """Initialize the adapter.

        Args:
            plugin: Host plugin holding the callable.
            hook_name: Name of the hook field.
        """
        super().__init__(plugin)
        self._hook_name = hook_name

    def current(self) -> Callable[..., Any]:
        """Return the hook callable.

        Returns:
            The host handler.
        """
        return get_field(self._owner, self._hook_name)

    def install(self, handler: Callable[..., Any]) -> None:
        """Store a new hook callable on the plugin.

        Args:
            handler: The new handler.
        """
        set_field(self._owner, self._hook_name, handler)


class HandlerFinalizeHook(FinalizeHook):
    """Finalize hook given as an object exposing a ``handler`` callable."""

    def current(self) -> Callable[..., Any]:
        """Return the hook object's handler.

        Returns:
            The host handler.
        """
        return get_field(self._owner, HANDLER)

    def install(self, handler: Callable[..., Any]) -> None:
        """Store a new handler on the hook object; other hook fields are kept.

        Args:
            handler: The new handler.
        """
        set_field(self._owner, HANDLER, handler)


def finalize_hook_for(plugin: Any, hook_name: str = GENERATE_BUNDLE) -> FinalizeHook:
    """Pick the adapter matching the shape of a host plugin's hook.

    A callable hook is always wrapped itself, even when it carries a
    ``handler`` attribute.

    Args:
        plugin: Host plugin.
        hook_name: Name of the hook field.

    Returns:
        FinalizeHook: An adapter for the plugin's hook.

    Raises:
        ConfigurationError: If the plugin exposes no usable hook.

    Examples:
        >>> async def host(*args): pass
        >>> type(finalize_hook_for({"name": "p", "generate_bundle": host})).__name__
        'CallableFinalizeHook'
        >>> type(finalize_hook_for({"name": "p", "generate_bundle": {"handler": host}})).__name__
        'HandlerFinalizeHook'
        >>> finalize_hook_for({"name": "p"})
        Traceback (most recent call last):
        ...
        sriforge.errors.ConfigurationError: host plugin p does not expose a generate_bundle hook
    """
    hook = get_field(plugin, hook_name)
    if callable(hook):
        return CallableFinalizeHook(plugin, hook_name)
    if hook is not None and callable(get_field(hook, HANDLER)):
        return HandlerFinalizeHook(hook)
    raise ConfigurationError(f"host plugin {get_field(plugin, 'name')} does not expose a {hook_name} hook")


def find_host_plugin(plugins: Iterable[Any], name: str) -> Any:
    """Find the host plugin whose finalize hook is wrapped.

    Args:
        plugins: The host's resolved plugin list.
        name: Name of the required host plugin.

    Returns:
        The matching plugin.

    Raises:
        ConfigurationError: If no plugin has the given name.
    """
    for plugin in plugins:
        if get_field(plugin, "name") == name:
            return plugin
    raise ConfigurationError(f"sri-forge requires a host that provides the {name} plugin")


def hijack_finalize(plugin: Any, after: FinalizeCallback, hook_name: str = GENERATE_BUNDLE) -> FinalizeHook:
    """Chain ``after`` behind a host plugin's finalize hook.

    Args:
        plugin: Host plugin.
        after: The engine callback.
        hook_name: Name of the hook field.

    Returns:
        FinalizeHook: The adapter used.

    Raises:
        ConfigurationError: If the plugin exposes no usable hook.
    """
    hook = finalize_hook_for(plugin, hook_name)
    hook.chain_after(after)
    logger.debug(f"Chained SRI pass after {get_field(plugin, 'name')}.{hook_name} ({type(hook).__name__})")
    return hook

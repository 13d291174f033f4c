"""Plugin command registry."""

from . import handlers

# Mapping of command names to handler callables.
COMMAND_REGISTRY = {
    "spawn": handlers.spawn,
}


def dispatch(game, command):
    """Dispatch a ``command`` dictionary using the registry.

    Parameters
    ----------
    game:
        Game instance providing context for the handler.
    command:
        Dictionary containing at least ``type`` and optional ``params``.
    """
    handler = COMMAND_REGISTRY.get(command.get("type"))
    if not handler:
        raise KeyError(f"Unknown plugin command: {command.get('type')}")
    params = command.get("params", {})
    handler(game, params)

__all__ = ["COMMAND_REGISTRY", "dispatch"]

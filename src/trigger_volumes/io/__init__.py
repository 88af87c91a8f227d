# MIT License (see LICENSE)
"""
Input/Output utilities for triggers.

This subpackage provides:
    - JSON serialization: Save and load trigger definitions.
    - Round-trip support: Reloaded triggers rebuild an equivalent hull.

Typical usage:
    from trigger_volumes.io import load_triggers, save_triggers

    save_triggers(manager.triggers, "triggers.json")

    # Callbacks are not stored; attach one while loading
    manager.extend(load_triggers("triggers.json", callback=on_trigger))
"""
from .json_io import (
    load_triggers,
    load_triggers_raw,
    save_triggers,
    trigger_to_json,
    trigger_from_json,
    triggers_to_json,
    triggers_from_json,
)

__all__ = [
    # Loading
    "load_triggers",
    "load_triggers_raw",
    # Saving
    "save_triggers",
    # Serialization
    "trigger_to_json",
    "trigger_from_json",
    "triggers_to_json",
    "triggers_from_json",
]

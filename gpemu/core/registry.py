# gpemu/core/registry.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Collection of the emulators attached to one simulation session.

The simulation hands its input and output values to the registry
explicitly at the end of every run; the registry forwards one
observation to each emulator.
"""
from gpemu.config import get_logger

_logger = get_logger()


class EmulatorRegistry:
    """Emulators of a session, keyed by (input, output) channel names."""

    def __init__(self, emulators=()):
        self._emulators = {}
        for emulator in emulators:
            self.add(emulator)

    def __len__(self):
        return len(self._emulators)

    def __iter__(self):
        return iter(list(self._emulators.values()))

    def __contains__(self, key):
        return key in self._emulators

    def add(self, emulator):
        key = (emulator.input, emulator.output)
        if key in self._emulators:
            raise ValueError(f"an emulator for {key} is already registered")
        self._emulators[key] = emulator
        return emulator

    def get(self, input, output):
        return self._emulators[(input, output)]

    def remove(self, input, output):
        return self._emulators.pop((input, output))

    def record_run(self, inputs, outputs):
        """Add the result of a finished simulation run to every emulator.

        Parameters
        ----------
        inputs : mapping
            Input channel name -> value used for the run.
        outputs : mapping
            Output channel name -> value produced by the run.

        Raises
        ------
        KeyError
            If an emulator's channel is missing from the mappings.
        """
        for emulator in self:
            emulator.add_observation(inputs[emulator.input], outputs[emulator.output])
        _logger.debug("Recorded run on %d emulators", len(self))

    def set_input_value(self, input, value):
        """Move the input marker of every emulator driven by ``input``."""
        for emulator in self:
            if emulator.input == input:
                emulator.update_input_marker(value)

    def clear(self):
        for emulator in self:
            emulator.clear()

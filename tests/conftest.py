"""
Pytest fixtures for the computer price calculator tests.

Provides:
- The reference computer tree
- A visitor that records every handler call in order
"""

import pytest

from computer_price_calculator import ComputerVisitor, build_computer


class RecordingVisitor(ComputerVisitor):
    """Records (handler, component name) for every call."""

    def __init__(self):
        self.calls = []

    def _log(self, handler, component):
        self.calls.append((handler, component.get_name()))

    def visit_memory(self, memory):
        self._log("memory", memory)

    def visit_ram(self, ram):
        self._log("ram", ram)

    def visit_rom(self, rom):
        self._log("rom", rom)

    def visit_external_disk(self, external_disk):
        self._log("external_disk", external_disk)

    def visit_cpu(self, cpu):
        self._log("cpu", cpu)

    def visit_keyboard(self, keyboard):
        self._log("keyboard", keyboard)

    def visit_monitor(self, monitor):
        self._log("monitor", monitor)

    def visit_graphic_card(self, graphic_card):
        self._log("graphic_card", graphic_card)

    def visit_gpu(self, gpu):
        self._log("gpu", gpu)

    def visit_graphic_memory(self, graphic_memory):
        self._log("graphic_memory", graphic_memory)


@pytest.fixture
def computer():
    """Fresh reference computer for each test."""
    return build_computer()


@pytest.fixture
def recording_visitor():
    return RecordingVisitor()
